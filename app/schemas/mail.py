# app/schemas/mail.py
import uuid
from datetime import datetime
from typing import Literal

from sqlmodel import SQLModel

RecipientType = Literal["single", "group"]


class AttachmentInfo(SQLModel):
    filename: str
    size: int


class MailTrackingRead(SQLModel):
    id: uuid.UUID
    message_id: str
    sender_email: str
    sender_role: str
    recipients: list[str]
    recipient_type: RecipientType
    subject: str
    attachments: list[AttachmentInfo]
    client_ids: list[str]
    sent_at: datetime


class MailPage(SQLModel):
    """
    One page of sent-mail records, newest first.
    """

    mails: list[MailTrackingRead]
    total_pages: int
    current_page: int
    total_mails: int


class MailSendResult(SQLModel):
    message_id: str
    sender: str
    recipients: list[str]
