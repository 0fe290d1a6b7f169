# app/models/mail.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON
from sqlmodel import SQLModel, Field


class MailTracking(SQLModel, table=True):
    """
    Record of an admin-sent email, keyed by the dispatcher's Message-ID.

    recipient_type:
      - "single" | "group"
    """

    __tablename__ = "mail_tracking"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    message_id: str = Field(unique=True, index=True)
    sender_email: str = Field(index=True)
    sender_role: str
    recipients: list = Field(default_factory=list, sa_type=JSON)
    recipient_type: str = Field(index=True)
    subject: str

    # [{"filename": str, "size": int}, ...]
    attachments: list = Field(default_factory=list, sa_type=JSON)

    # Stringified user ids of the targeted clients
    client_ids: list = Field(default_factory=list, sa_type=JSON)

    sent_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
    )
