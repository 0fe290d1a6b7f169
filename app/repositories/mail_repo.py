# app/repositories/mail_repo.py
import uuid

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.mail import MailTracking


class MailTrackingRepository:
    """
    Data access layer for sent-mail tracking records.
    """

    def get_by_id(self, session: Session, mail_id: uuid.UUID) -> MailTracking | None:
        return session.get(MailTracking, mail_id)

    def _filters(self, sender_email: str | None, recipient_type: str | None) -> list:
        filters = []
        if sender_email:
            filters.append(MailTracking.sender_email == sender_email)
        if recipient_type:
            filters.append(MailTracking.recipient_type == recipient_type)
        return filters

    def list_page(
        self,
        session: Session,
        skip: int = 0,
        limit: int = 10,
        sender_email: str | None = None,
        recipient_type: str | None = None,
    ) -> list[MailTracking]:
        stmt = (
            select(MailTracking)
            .where(*self._filters(sender_email, recipient_type))
            .order_by(MailTracking.sent_at.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    def count(
        self,
        session: Session,
        sender_email: str | None = None,
        recipient_type: str | None = None,
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(MailTracking)
            .where(*self._filters(sender_email, recipient_type))
        )
        return int(session.exec(stmt).one() or 0)

    def create(self, session: Session, record: MailTracking) -> MailTracking:
        session.add(record)
        session.commit()
        session.refresh(record)
        return record
