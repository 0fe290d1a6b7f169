# app/models/student.py
"""
Portfolio sub-resources owned by student accounts.

One canonical field set per resource (description, technologies, ...).
"""

import datetime

from sqlmodel import Field

from app.models.base import OwnedModel


class StudentSkill(OwnedModel, table=True):
    __tablename__ = "student_skills"

    name: str = Field(max_length=100)
    level: int = Field(ge=0, le=100, description="Proficiency 0-100")


class StudentEducation(OwnedModel, table=True):
    __tablename__ = "student_educations"

    degree: str = Field(max_length=200)
    major: str | None = Field(default=None, max_length=200)
    institution: str = Field(max_length=200)
    start_date: datetime.date
    end_date: datetime.date | None = None
    gpa: float | None = Field(default=None, ge=0, le=4.0)
    description: str | None = None


class StudentExperience(OwnedModel, table=True):
    __tablename__ = "student_experiences"

    role: str = Field(max_length=200)
    company: str = Field(max_length=200)
    start_date: datetime.date
    end_date: datetime.date | None = None
    description: str | None = None
    is_current: bool = False


class StudentProject(OwnedModel, table=True):
    __tablename__ = "student_projects"

    title: str = Field(max_length=200)
    description: str | None = None
    technologies: str | None = Field(default=None, max_length=500)
    link: str | None = None
    category: str | None = Field(default=None, max_length=100)
    image_url: str | None = None


class StudentAchievement(OwnedModel, table=True):
    __tablename__ = "student_achievements"

    title: str = Field(max_length=200)
    description: str | None = None
    date: datetime.date | None = None
    certificate_url: str | None = None


class StudentAward(OwnedModel, table=True):
    __tablename__ = "student_awards"

    title: str = Field(max_length=200)
    issuer: str = Field(max_length=200)
    date: datetime.date
    description: str | None = None
    image_url: str | None = None
