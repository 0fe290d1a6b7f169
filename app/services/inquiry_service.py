# app/services/inquiry_service.py
import uuid

from sqlmodel import Session

from app.core.errors import NotFound
from app.models.inquiry import Inquiry
from app.repositories.inquiry_repo import InquiryRepository
from app.schemas.inquiry import InquiryCreate


class InquiryService:
    def __init__(self, repo: InquiryRepository):
        self.repo = repo

    def submit(self, session: Session, payload: InquiryCreate) -> Inquiry:
        inquiry = Inquiry(**payload.model_dump())
        return self.repo.create(session, inquiry)

    def list_inquiries(self, session: Session, skip: int, limit: int) -> list[Inquiry]:
        return self.repo.list_all(session, skip=skip, limit=limit)

    def get_inquiry(self, session: Session, inquiry_id: uuid.UUID) -> Inquiry:
        inquiry = self.repo.get_by_id(session, inquiry_id)
        if not inquiry:
            raise NotFound("Inquiry not found")
        return inquiry

    def delete_inquiry(self, session: Session, inquiry_id: uuid.UUID) -> None:
        inquiry = self.get_inquiry(session, inquiry_id)
        self.repo.delete(session, inquiry)
