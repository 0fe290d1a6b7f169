# app/repositories/stats_repo.py
from sqlalchemy import func
from sqlmodel import Session, select

from app.models.profile import Profile
from app.models.showcase import Product, Service, Testimonial
from app.models.user import ROLE_CLIENT, User


class StatsRepository:
    """
    Read-only aggregated queries for the admin dashboard.
    """

    def _count(self, session: Session, model, *where) -> int:
        stmt = select(func.count()).select_from(model)
        if where:
            stmt = stmt.where(*where)
        # SQLModel's Session.exec() -> ScalarResult -> use .one()
        value = session.exec(stmt).one()
        return int(value or 0)

    def count_clients(self, session: Session) -> int:
        return self._count(session, User, User.role == ROLE_CLIENT)

    def count_profiles(self, session: Session) -> int:
        return self._count(session, Profile)

    def count_services(self, session: Session) -> int:
        return self._count(session, Service)

    def count_products(self, session: Session) -> int:
        return self._count(session, Product)

    def count_testimonials(self, session: Session) -> int:
        return self._count(session, Testimonial)

    def recent_clients(self, session: Session, limit: int = 5) -> list[User]:
        """
        Latest N client accounts by created_at.
        """
        stmt = (
            select(User)
            .where(User.role == ROLE_CLIENT)
            .order_by(User.created_at.desc())
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    def recent_profiles(self, session: Session, limit: int = 5) -> list[tuple]:
        """
        Latest N profiles joined with their owner's email.
        """
        stmt = (
            select(Profile, User.email)
            .join(User, User.id == Profile.user_id, isouter=True)
            .order_by(Profile.created_at.desc())
            .limit(limit)
        )
        return list(session.exec(stmt).all())
