# app/services/mail_service.py
import logging
import math
import uuid

from sqlmodel import Session

from app.core.config import get_settings
from app.core.email_client import send_email
from app.core.email_templates import admin_message_email
from app.core.errors import BadRequest, EmailDeliveryFailed, NotFound, PayloadTooLarge
from app.core.storage_utils import DOCUMENT_CONTENT_TYPES, validate_upload
from app.models.mail import MailTracking
from app.models.user import ROLE_CLIENT, User
from app.repositories.mail_repo import MailTrackingRepository
from app.repositories.owned_repo import OwnedRepository
from app.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

MAX_ATTACHMENTS = 5
MAX_ATTACHMENT_BYTES = 5 * 1024 * 1024  # 5MB per file

# (filename, content_type, content)
Attachment = tuple[str, str | None, bytes]


class MailService:
    """
    Admin-composed email to client accounts, with sent-mail tracking.

    Responsibilities:
      - resolve client recipients (non-client accounts are never mailed)
      - validate attachments (images and PDFs, max 5 files of 5MB)
      - send through the mail dispatcher (group mail uses BCC)
      - record a MailTracking row keyed by the Message-ID; a tracking
        failure is logged and does not fail the send
    """

    def __init__(
        self,
        repo: MailTrackingRepository,
        user_repo: UserRepository,
        profile_repo: OwnedRepository,
    ):
        self.repo = repo
        self.user_repo = user_repo
        self.profile_repo = profile_repo

    # ----- Helpers -----

    @staticmethod
    def _check_attachments(attachments: list[Attachment]) -> list[dict]:
        if len(attachments) > MAX_ATTACHMENTS:
            raise BadRequest(f"At most {MAX_ATTACHMENTS} attachments are allowed")

        info = []
        for filename, content_type, content in attachments:
            validate_upload(content_type, content, DOCUMENT_CONTENT_TYPES)
            if len(content) > MAX_ATTACHMENT_BYTES:
                raise PayloadTooLarge(f"Attachment {filename} is too large (max 5MB).")
            info.append({"filename": filename, "size": len(content)})
        return info

    def _dispatch(self, **kwargs) -> str:
        try:
            return send_email(**kwargs)
        except Exception as exc:
            logger.error("Failed to send admin mail: %s", exc)
            raise EmailDeliveryFailed("Failed to send mail") from exc

    def _track(self, session: Session, record: MailTracking) -> None:
        try:
            self.repo.create(session, record)
        except Exception as exc:
            session.rollback()
            logger.error("Failed to save mail tracking for %s: %s", record.message_id, exc)

    @staticmethod
    def _sender_label(sender: User) -> str:
        return f"{sender.email} ({sender.role})"

    # ----- Sending -----

    def send_single(
        self,
        session: Session,
        sender: User,
        client_id: uuid.UUID,
        subject: str,
        message: str,
        attachments: list[Attachment],
    ) -> dict:
        client = self.user_repo.get_by_id(session, client_id)
        if client is None or client.role != ROLE_CLIENT:
            raise NotFound("Client not found")

        attachment_info = self._check_attachments(attachments)

        profile = self.profile_repo.first_for_owner(session, client.id)
        html = admin_message_email(
            message,
            recipient_name=profile.name if profile else "Valued Client",
            recipient_email=client.email,
        )

        message_id = self._dispatch(
            to_email=client.email,
            subject=subject,
            html_body=html,
            attachments=[(name, content) for name, _, content in attachments],
        )

        self._track(
            session,
            MailTracking(
                message_id=message_id,
                sender_email=sender.email,
                sender_role=sender.role,
                recipients=[client.email],
                recipient_type="single",
                subject=subject,
                attachments=attachment_info,
                client_ids=[str(client.id)],
            ),
        )

        logger.info("Admin mail %s sent to 1 client", message_id)
        return {
            "message_id": message_id,
            "sender": self._sender_label(sender),
            "recipients": [client.email],
        }

    def send_group(
        self,
        session: Session,
        sender: User,
        client_ids: list[uuid.UUID],
        subject: str,
        message: str,
        attachments: list[Attachment],
    ) -> dict:
        """
        Send one message to many clients.

        Recipients are BCC'd so they cannot see each other's addresses;
        ids that are unknown or not clients are skipped.
        """
        clients = self.user_repo.list_by_ids(session, client_ids, role=ROLE_CLIENT)
        emails = [c.email for c in clients]
        if not emails:
            raise NotFound("No valid clients found")

        attachment_info = self._check_attachments(attachments)

        html = admin_message_email(message, recipient_name="Valued Client")
        message_id = self._dispatch(
            to_email=get_settings().SMTP_FROM_EMAIL,
            bcc=emails,
            subject=subject,
            html_body=html,
            attachments=[(name, content) for name, _, content in attachments],
        )

        self._track(
            session,
            MailTracking(
                message_id=message_id,
                sender_email=sender.email,
                sender_role=sender.role,
                recipients=emails,
                recipient_type="group",
                subject=subject,
                attachments=attachment_info,
                client_ids=[str(c.id) for c in clients],
            ),
        )

        logger.info("Admin mail %s sent to %d clients", message_id, len(emails))
        return {
            "message_id": message_id,
            "sender": self._sender_label(sender),
            "recipients": emails,
        }

    # ----- Tracking -----

    def list_sent(
        self,
        session: Session,
        page: int = 1,
        limit: int = 10,
        sender_email: str | None = None,
        recipient_type: str | None = None,
    ) -> dict:
        total = self.repo.count(session, sender_email, recipient_type)
        mails = self.repo.list_page(
            session,
            skip=(page - 1) * limit,
            limit=limit,
            sender_email=sender_email,
            recipient_type=recipient_type,
        )
        return {
            "mails": mails,
            "total_pages": math.ceil(total / limit),
            "current_page": page,
            "total_mails": total,
        }

    def get_sent(self, session: Session, mail_id: uuid.UUID) -> MailTracking:
        record = self.repo.get_by_id(session, mail_id)
        if record is None:
            raise NotFound("Mail tracking record not found")
        return record
