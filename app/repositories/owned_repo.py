# app/repositories/owned_repo.py
import uuid
from datetime import datetime, timezone
from typing import Generic, TypeVar

from sqlmodel import Session, select

from app.models.base import OwnedModel

ModelT = TypeVar("ModelT", bound=OwnedModel)


class OwnedRepository(Generic[ModelT]):
    """
    Data access layer for any owner-scoped resource.

    - Pure DB operations (CRUD + queries), parameterised by model class.
    - Scoped lookups filter on both id and user_id, so another owner's
      row is indistinguishable from a missing one.
    - No FastAPI, no business logic.
    """

    def __init__(self, model: type[ModelT], order_by=None):
        self.model = model
        # Default listing order: newest first
        self.order_by = order_by if order_by is not None else model.created_at.desc()

    # ----- Unscoped (admin / internal) -----

    def get_by_id(self, session: Session, item_id: uuid.UUID) -> ModelT | None:
        return session.get(self.model, item_id)

    def list_all(self, session: Session, skip: int = 0, limit: int = 50) -> list[ModelT]:
        stmt = select(self.model).order_by(self.order_by).offset(skip).limit(limit)
        return list(session.exec(stmt).all())

    # ----- Owner-scoped -----

    def get_for_owner(
        self,
        session: Session,
        item_id: uuid.UUID,
        owner_id: uuid.UUID,
    ) -> ModelT | None:
        stmt = select(self.model).where(
            self.model.id == item_id,
            self.model.user_id == owner_id,
        )
        return session.exec(stmt).first()

    def first_for_owner(self, session: Session, owner_id: uuid.UUID) -> ModelT | None:
        """For one-per-owner resources (profiles)."""
        stmt = select(self.model).where(self.model.user_id == owner_id)
        return session.exec(stmt).first()

    def list_for_owner(self, session: Session, owner_id: uuid.UUID) -> list[ModelT]:
        stmt = (
            select(self.model)
            .where(self.model.user_id == owner_id)
            .order_by(self.order_by)
        )
        return list(session.exec(stmt).all())

    # ----- Writes -----

    def create(self, session: Session, item: ModelT) -> ModelT:
        session.add(item)
        session.commit()
        session.refresh(item)
        return item

    def update(self, session: Session, item: ModelT) -> ModelT:
        item.updated_at = datetime.now(timezone.utc)
        session.add(item)
        session.commit()
        session.refresh(item)
        return item

    def delete(self, session: Session, item: ModelT) -> None:
        session.delete(item)
        session.commit()

    def delete_many(self, session: Session, items: list[ModelT]) -> None:
        for item in items:
            session.delete(item)
        session.commit()
