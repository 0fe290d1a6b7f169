# app/models/inquiry.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Inquiry(SQLModel, table=True):
    """
    Contact-form submission from the public site. Not owned by any account.
    """

    __tablename__ = "inquiries"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    full_name: str = Field(max_length=200)
    email: str = Field(max_length=255)
    phone: str | None = Field(default=None, max_length=30)
    message: str

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
        description="Submission timestamp (UTC)",
    )
