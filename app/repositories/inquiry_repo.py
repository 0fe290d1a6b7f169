# app/repositories/inquiry_repo.py
import uuid

from sqlmodel import Session, select

from app.models.inquiry import Inquiry


class InquiryRepository:
    """
    Data access layer for Inquiry (no owner, no updates).
    """

    def get_by_id(self, session: Session, inquiry_id: uuid.UUID) -> Inquiry | None:
        return session.get(Inquiry, inquiry_id)

    def list_all(self, session: Session, skip: int = 0, limit: int = 50) -> list[Inquiry]:
        stmt = (
            select(Inquiry)
            .order_by(Inquiry.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    def create(self, session: Session, inquiry: Inquiry) -> Inquiry:
        session.add(inquiry)
        session.commit()
        session.refresh(inquiry)
        return inquiry

    def delete(self, session: Session, inquiry: Inquiry) -> None:
        session.delete(inquiry)
        session.commit()
