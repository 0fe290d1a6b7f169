# app/schemas/profile.py
import uuid
from datetime import date, datetime

from pydantic import ConfigDict, EmailStr, field_validator
from sqlmodel import SQLModel, Field

from app.schemas.common import OwnedRead, strip_optional, strip_required


class ClientSocialLinks(SQLModel):
    model_config = ConfigDict(extra="forbid")

    facebook: str | None = None
    instagram: str | None = None
    twitter: str | None = None
    linkedin: str | None = None
    youtube: str | None = None
    whatsapp: str | None = None


class StudentSocialLinks(SQLModel):
    model_config = ConfigDict(extra="forbid")

    facebook: str | None = None
    instagram: str | None = None
    twitter: str | None = None
    youtube: str | None = None
    linkedin: str | None = None
    github: str | None = None


# ---------------------------------------------------------------------------
# Client business card
# ---------------------------------------------------------------------------


class ProfileCreate(SQLModel):
    """
    Payload for creating the caller's business card.

    Images are uploaded separately (multipart endpoints).
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=100)
    profession: str | None = Field(default=None, max_length=100)
    about: str | None = None
    phone1: str | None = Field(default=None, max_length=30)
    phone2: str | None = Field(default=None, max_length=30)
    location: str | None = Field(default=None, max_length=200)
    dob: date | None = None
    social_media: ClientSocialLinks | None = None
    website_link: str | None = None
    app_link: str | None = None
    template_id: str = Field(default="template1", max_length=50)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return strip_required(v)


class ProfileUpdate(SQLModel):
    """Partial update; omitted fields are left unchanged."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=100)
    profession: str | None = Field(default=None, max_length=100)
    about: str | None = None
    phone1: str | None = Field(default=None, max_length=30)
    phone2: str | None = Field(default=None, max_length=30)
    location: str | None = Field(default=None, max_length=200)
    dob: date | None = None
    social_media: ClientSocialLinks | None = None
    website_link: str | None = None
    app_link: str | None = None
    template_id: str | None = Field(default=None, max_length=50)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        return strip_optional(v)


class ProfileRead(OwnedRead):
    name: str
    profession: str | None = None
    about: str | None = None
    phone1: str | None = None
    phone2: str | None = None
    location: str | None = None
    dob: date | None = None
    social_media: ClientSocialLinks | None = None
    website_link: str | None = None
    app_link: str | None = None
    template_id: str
    profile_img: str | None = None
    banner_img: str | None = None


class ProfilePublic(SQLModel):
    """
    Anonymous view of a business card.

    Strips contact details that belong to the account (email, phones, dob).
    """

    user_id: uuid.UUID
    name: str
    profession: str | None = None
    about: str | None = None
    location: str | None = None
    social_media: ClientSocialLinks | None = None
    website_link: str | None = None
    app_link: str | None = None
    template_id: str
    profile_img: str | None = None
    banner_img: str | None = None
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------------------
# Student portfolio card
# ---------------------------------------------------------------------------


class StudentProfileCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    full_name: str = Field(max_length=100)
    email: EmailStr
    about: str | None = None
    phone1: str | None = Field(default=None, max_length=30)
    phone2: str | None = Field(default=None, max_length=30)
    location: str | None = Field(default=None, max_length=200)
    dob: date | None = None
    social_media: StudentSocialLinks | None = None
    template_id: str = Field(default="template1", max_length=50)

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        return strip_required(v)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()


class StudentProfileUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    full_name: str | None = Field(default=None, max_length=100)
    email: EmailStr | None = None
    about: str | None = None
    phone1: str | None = Field(default=None, max_length=30)
    phone2: str | None = Field(default=None, max_length=30)
    location: str | None = Field(default=None, max_length=200)
    dob: date | None = None
    social_media: StudentSocialLinks | None = None
    template_id: str | None = Field(default=None, max_length=50)

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str | None) -> str | None:
        return strip_optional(v)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str | None) -> str | None:
        return v.lower() if v else v


class StudentProfileRead(OwnedRead):
    full_name: str
    email: str
    about: str | None = None
    phone1: str | None = None
    phone2: str | None = None
    location: str | None = None
    dob: date | None = None
    social_media: StudentSocialLinks | None = None
    template_id: str
    profile_pic: str | None = None
    banner_pic: str | None = None


class StudentProfilePublic(SQLModel):
    """Anonymous view of a student card (no email, phones or dob)."""

    user_id: uuid.UUID
    full_name: str
    about: str | None = None
    location: str | None = None
    social_media: StudentSocialLinks | None = None
    template_id: str
    profile_pic: str | None = None
    banner_pic: str | None = None
    created_at: datetime
    updated_at: datetime
