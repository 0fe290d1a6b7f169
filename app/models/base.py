# app/models/base.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class OwnedModel(SQLModel):
    """
    Columns shared by every owner-scoped resource.

    Not a table itself: each table model inheriting from it gets its own
    copy of these columns.
    """

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    user_id: uuid.UUID = Field(
        foreign_key="users.id",
        index=True,
        description="Owning account (FK to users.id)",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)",
    )
