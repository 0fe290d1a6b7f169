# app/models/profile.py
from datetime import date

from sqlalchemy import JSON
from sqlmodel import Field

from app.models.base import OwnedModel


class Profile(OwnedModel, table=True):
    """
    Public business card of a "client" account (one per user).

    Images are public Storage URLs:
      - profile_img, banner_img
    """

    __tablename__ = "profiles"

    name: str = Field(max_length=100)
    profession: str | None = Field(default=None, max_length=100)
    about: str | None = None
    phone1: str | None = Field(default=None, max_length=30)
    phone2: str | None = Field(default=None, max_length=30)
    location: str | None = Field(default=None, max_length=200)
    dob: date | None = None

    # facebook, instagram, twitter, linkedin, youtube, whatsapp
    social_media: dict | None = Field(default=None, sa_type=JSON)

    website_link: str | None = None
    app_link: str | None = None
    template_id: str = Field(default="template1", max_length=50)

    profile_img: str | None = None
    banner_img: str | None = None


class StudentProfile(OwnedModel, table=True):
    """
    Portfolio card of a "student" account (one per user).

    Images are public Storage URLs:
      - profile_pic, banner_pic
    """

    __tablename__ = "student_profiles"

    full_name: str = Field(max_length=100)
    email: str = Field(max_length=255, description="Contact email (lowercased)")
    about: str | None = None
    phone1: str | None = Field(default=None, max_length=30)
    phone2: str | None = Field(default=None, max_length=30)
    location: str | None = Field(default=None, max_length=200)
    dob: date | None = None

    # facebook, instagram, twitter, youtube, linkedin, github
    social_media: dict | None = Field(default=None, sa_type=JSON)

    template_id: str = Field(default="template1", max_length=50)

    profile_pic: str | None = None
    banner_pic: str | None = None
