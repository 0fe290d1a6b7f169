# app/schemas/showcase.py
import uuid
from datetime import datetime, timezone

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

from app.schemas.common import OwnedRead, strip_optional, strip_required


# ----- Gallery -----
# Created through multipart (image + caption), so there is no JSON create schema.


class GalleryFields(SQLModel):
    """Form fields accompanying a gallery upload."""

    caption: str | None = Field(default=None, max_length=500)
    user_id: uuid.UUID | None = None


class GalleryUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    caption: str | None = Field(default=None, max_length=500)


class GalleryRead(OwnedRead):
    image_url: str
    caption: str | None = None


# ----- Products -----


class ProductFields(SQLModel):
    """Form fields accompanying a product photo upload."""

    product_name: str = Field(max_length=200)
    price: float = Field(ge=0)
    details: str
    user_id: uuid.UUID | None = None

    @field_validator("product_name", "details")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return strip_required(v)


class ProductUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    product_name: str | None = Field(default=None, max_length=200)
    price: float | None = Field(default=None, ge=0)
    details: str | None = None

    @field_validator("product_name", "details")
    @classmethod
    def validate_text(cls, v: str | None) -> str | None:
        return strip_optional(v)


class ProductRead(OwnedRead):
    product_name: str
    product_photo: str
    price: float
    details: str


# ----- Services -----


class ServiceCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(max_length=200)
    description: str | None = None
    user_id: uuid.UUID | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return strip_required(v)


class ServiceUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, max_length=200)
    description: str | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        return strip_optional(v)


class ServiceRead(OwnedRead):
    title: str
    description: str | None = None


# ----- Testimonials -----


class TestimonialCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    testimonial_name: str = Field(max_length=200)
    feedback: str
    user_id: uuid.UUID | None = None

    @field_validator("testimonial_name", "feedback")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return strip_required(v)


class TestimonialUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    testimonial_name: str | None = Field(default=None, max_length=200)
    feedback: str | None = None

    @field_validator("testimonial_name", "feedback")
    @classmethod
    def validate_text(cls, v: str | None) -> str | None:
        return strip_optional(v)


class TestimonialRead(OwnedRead):
    testimonial_name: str
    feedback: str


# ----- Appointments -----


def as_utc(v: datetime) -> datetime:
    """Naive datetimes are taken as UTC; the column stores aware values."""
    if v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v


class AppointmentCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    client_name: str = Field(max_length=200)
    phone: str = Field(max_length=30)
    appointment_date: datetime
    notes: str | None = None

    @field_validator("client_name", "phone")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return strip_required(v)

    @field_validator("appointment_date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class AppointmentUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    client_name: str | None = Field(default=None, max_length=200)
    phone: str | None = Field(default=None, max_length=30)
    appointment_date: datetime | None = None
    notes: str | None = None

    @field_validator("client_name", "phone")
    @classmethod
    def validate_text(cls, v: str | None) -> str | None:
        return strip_optional(v)

    @field_validator("appointment_date")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v) if v is not None else v


class AppointmentRead(OwnedRead):
    client_name: str
    phone: str
    appointment_date: datetime
    notes: str | None = None
