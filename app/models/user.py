# app/models/user.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field

ROLE_CLIENT = "client"
ROLE_STUDENT = "student"
ROLE_ADMIN = "admin"


class User(SQLModel, table=True):
    """
    Account record: identity, credentials, role and password-reset state.

    Role:
      - "client" | "student" | "admin"
      - defaults to "client" at signup

    Password reset:
      - reset_otp / reset_otp_expires_at are set together when a code is
        issued and cleared together when the password is reset.
    """

    __tablename__ = "users"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    email: str = Field(
        unique=True,
        index=True,
        description="Login email (compared exactly)",
    )

    password_hash: str = Field(
        description="bcrypt hash, never returned to clients",
    )

    role: str = Field(
        default=ROLE_CLIENT,
        index=True,
        description="Application role: client | student | admin",
    )

    # Stored in clear; see DESIGN.md
    reset_otp: str | None = Field(default=None, max_length=6)

    reset_otp_expires_at: datetime | None = Field(default=None)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)",
    )
