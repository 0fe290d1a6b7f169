# app/schemas/inquiry.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

from app.schemas.common import SubmittedEmail, strip_required


class InquiryCreate(SQLModel):
    """
    Public contact-form submission.
    """

    model_config = ConfigDict(extra="forbid")

    full_name: str = Field(max_length=200)
    email: SubmittedEmail
    phone: str | None = Field(default=None, max_length=30)
    message: str

    @field_validator("full_name", "message")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return strip_required(v)


class InquiryRead(SQLModel):
    id: uuid.UUID
    full_name: str
    email: str
    phone: str | None = None
    message: str
    created_at: datetime
