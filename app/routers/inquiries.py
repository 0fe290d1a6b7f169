# app/routers/inquiries.py
import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.core.auth import require_admin
from app.database import get_session
from app.repositories.inquiry_repo import InquiryRepository
from app.schemas.common import ApiResponse, MessageResponse, ok
from app.schemas.inquiry import InquiryCreate, InquiryRead
from app.services.inquiry_service import InquiryService

router = APIRouter(prefix="/inquiries", tags=["Inquiries"])

repo = InquiryRepository()
service = InquiryService(repo)


# -------- Public endpoints --------


@router.post(
    "",
    response_model=ApiResponse[InquiryRead],
    status_code=status.HTTP_201_CREATED,
)
def create_inquiry(
    payload: InquiryCreate,
    session: Session = Depends(get_session),
):
    """
    Submit the public contact form. No authentication required.
    """
    return ok(service.submit(session, payload), "Inquiry submitted successfully")


# -------- Admin endpoints --------


@router.get(
    "",
    response_model=ApiResponse[list[InquiryRead]],
    dependencies=[Depends(require_admin)],
)
def list_inquiries(
    session: Session = Depends(get_session),
    skip: int = 0,
    limit: int = 50,
):
    """
    List inquiries, newest first (admin only).
    """
    return ok(service.list_inquiries(session, skip, limit))


@router.get(
    "/{inquiry_id}",
    response_model=ApiResponse[InquiryRead],
    dependencies=[Depends(require_admin)],
)
def get_inquiry(
    inquiry_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return ok(service.get_inquiry(session, inquiry_id))


@router.delete(
    "/{inquiry_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
)
def delete_inquiry(
    inquiry_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    service.delete_inquiry(session, inquiry_id)
    return {"message": "Inquiry deleted successfully"}
