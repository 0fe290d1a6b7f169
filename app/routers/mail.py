# app/routers/mail.py
import json
import uuid

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlmodel import Session

from app.core.auth import require_admin
from app.core.errors import BadRequest
from app.database import get_session
from app.models.profile import Profile
from app.models.user import User
from app.repositories.mail_repo import MailTrackingRepository
from app.repositories.owned_repo import OwnedRepository
from app.repositories.user_repo import UserRepository
from app.schemas.common import ApiResponse, ok
from app.schemas.mail import MailPage, MailSendResult, MailTrackingRead, RecipientType
from app.services.mail_service import MailService

router = APIRouter(prefix="/mail", tags=["Mail"])

service = MailService(
    MailTrackingRepository(),
    UserRepository(),
    OwnedRepository(Profile),
)


def _parse_client_ids(values: list[str]) -> list[uuid.UUID]:
    """
    Accept repeated form fields as well as a single JSON array string.
    """
    raw: list = []
    for value in values:
        value = value.strip()
        if value.startswith("[") and value.endswith("]"):
            try:
                parsed = json.loads(value)
            except ValueError:
                raise BadRequest("client_ids is not a valid JSON array")
            raw.extend(parsed if isinstance(parsed, list) else [parsed])
        elif value:
            raw.append(value)

    try:
        return [uuid.UUID(str(v)) for v in raw]
    except ValueError:
        raise BadRequest("client_ids must contain user ids")


def _read_attachments(files: list[UploadFile] | None) -> list[tuple[str, str | None, bytes]]:
    return [
        (f.filename or "attachment", f.content_type, f.file.read())
        for f in files or []
    ]


@router.post("/send-single", response_model=ApiResponse[MailSendResult])
def send_single_mail(
    client_id: uuid.UUID = Form(...),
    subject: str = Form(..., min_length=1, max_length=300),
    message: str = Form(..., min_length=1),
    attachments: list[UploadFile] | None = File(default=None),
    session: Session = Depends(get_session),
    admin: User = Depends(require_admin),
):
    """
    Email one client account (multipart, up to 5 image/PDF attachments).
    """
    result = service.send_single(
        session,
        admin,
        client_id=client_id,
        subject=subject,
        message=message,
        attachments=_read_attachments(attachments),
    )
    return ok(result, f"Mail sent to {result['recipients'][0]}")


@router.post("/send-group", response_model=ApiResponse[MailSendResult])
def send_group_mail(
    client_ids: list[str] = Form(...),
    subject: str = Form(..., min_length=1, max_length=300),
    message: str = Form(..., min_length=1),
    attachments: list[UploadFile] | None = File(default=None),
    session: Session = Depends(get_session),
    admin: User = Depends(require_admin),
):
    """
    Email many client accounts at once (BCC).

    `client_ids` may be repeated form fields or one JSON array string.
    """
    result = service.send_group(
        session,
        admin,
        client_ids=_parse_client_ids(client_ids),
        subject=subject,
        message=message,
        attachments=_read_attachments(attachments),
    )
    return ok(result, f"Group mail sent to {len(result['recipients'])} clients")


@router.get(
    "",
    response_model=ApiResponse[MailPage],
    dependencies=[Depends(require_admin)],
)
def list_sent_mails(
    session: Session = Depends(get_session),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    sender_email: str | None = None,
    recipient_type: RecipientType | None = None,
):
    """
    Sent-mail history, newest first, optionally filtered.
    """
    return ok(
        service.list_sent(
            session,
            page=page,
            limit=limit,
            sender_email=sender_email,
            recipient_type=recipient_type,
        )
    )


@router.get(
    "/{mail_id}",
    response_model=ApiResponse[MailTrackingRead],
    dependencies=[Depends(require_admin)],
)
def get_sent_mail(
    mail_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return ok(service.get_sent(session, mail_id))
