# app/schemas/student.py
"""
Request / response models for the student portfolio sub-resources.

Dates are plain calendar dates (YYYY-MM-DD).
"""

import datetime

from pydantic import ConfigDict, field_validator, model_validator
from sqlmodel import SQLModel, Field

from app.schemas.common import OwnedRead, strip_optional, strip_required


def _check_date_range(start: datetime.date | None, end: datetime.date | None) -> None:
    if start and end and end < start:
        raise ValueError("end_date cannot be before start_date")


# ----- Skills -----


class SkillCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=100)
    level: int = Field(ge=0, le=100)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return strip_required(v)


class SkillUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=100)
    level: int | None = Field(default=None, ge=0, le=100)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        return strip_optional(v)


class SkillRead(OwnedRead):
    name: str
    level: int


# ----- Education -----


class EducationCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    degree: str = Field(max_length=200)
    major: str | None = Field(default=None, max_length=200)
    institution: str = Field(max_length=200)
    start_date: datetime.date
    end_date: datetime.date | None = None
    gpa: float | None = Field(default=None, ge=0, le=4.0)
    description: str | None = None

    @field_validator("degree", "institution")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return strip_required(v)

    @model_validator(mode="after")
    def validate_dates(self):
        _check_date_range(self.start_date, self.end_date)
        return self


class EducationUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    degree: str | None = Field(default=None, max_length=200)
    major: str | None = Field(default=None, max_length=200)
    institution: str | None = Field(default=None, max_length=200)
    start_date: datetime.date | None = None
    end_date: datetime.date | None = None
    gpa: float | None = Field(default=None, ge=0, le=4.0)
    description: str | None = None

    @field_validator("degree", "institution")
    @classmethod
    def validate_text(cls, v: str | None) -> str | None:
        return strip_optional(v)

    @model_validator(mode="after")
    def validate_dates(self):
        _check_date_range(self.start_date, self.end_date)
        return self


class EducationRead(OwnedRead):
    degree: str
    major: str | None = None
    institution: str
    start_date: datetime.date
    end_date: datetime.date | None = None
    gpa: float | None = None
    description: str | None = None


# ----- Experience -----


class ExperienceCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    role: str = Field(max_length=200)
    company: str = Field(max_length=200)
    start_date: datetime.date
    end_date: datetime.date | None = None
    description: str | None = None
    is_current: bool = False

    @field_validator("role", "company")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return strip_required(v)

    @model_validator(mode="after")
    def validate_dates(self):
        _check_date_range(self.start_date, self.end_date)
        return self


class ExperienceUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    role: str | None = Field(default=None, max_length=200)
    company: str | None = Field(default=None, max_length=200)
    start_date: datetime.date | None = None
    end_date: datetime.date | None = None
    description: str | None = None
    is_current: bool | None = None

    @field_validator("role", "company")
    @classmethod
    def validate_text(cls, v: str | None) -> str | None:
        return strip_optional(v)


class ExperienceRead(OwnedRead):
    role: str
    company: str
    start_date: datetime.date
    end_date: datetime.date | None = None
    description: str | None = None
    is_current: bool


# ----- Projects -----


class ProjectCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(max_length=200)
    description: str | None = None
    technologies: str | None = Field(default=None, max_length=500)
    link: str | None = None
    category: str | None = Field(default=None, max_length=100)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return strip_required(v)


class ProjectUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, max_length=200)
    description: str | None = None
    technologies: str | None = Field(default=None, max_length=500)
    link: str | None = None
    category: str | None = Field(default=None, max_length=100)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        return strip_optional(v)


class ProjectRead(OwnedRead):
    title: str
    description: str | None = None
    technologies: str | None = None
    link: str | None = None
    category: str | None = None
    image_url: str | None = None


# ----- Achievements -----


class AchievementCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(max_length=200)
    description: str | None = None
    date: datetime.date | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return strip_required(v)


class AchievementUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, max_length=200)
    description: str | None = None
    date: datetime.date | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        return strip_optional(v)


class AchievementRead(OwnedRead):
    title: str
    description: str | None = None
    date: datetime.date | None = None
    certificate_url: str | None = None


# ----- Awards -----


class AwardCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(max_length=200)
    issuer: str = Field(max_length=200)
    date: datetime.date
    description: str | None = None

    @field_validator("title", "issuer")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return strip_required(v)


class AwardUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, max_length=200)
    issuer: str | None = Field(default=None, max_length=200)
    date: datetime.date | None = None
    description: str | None = None

    @field_validator("title", "issuer")
    @classmethod
    def validate_text(cls, v: str | None) -> str | None:
        return strip_optional(v)


class AwardRead(OwnedRead):
    title: str
    issuer: str
    date: datetime.date
    description: str | None = None
    image_url: str | None = None
