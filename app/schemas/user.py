# app/schemas/user.py
import uuid
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel

from app.schemas.common import SubmittedEmail

# App-level roles. Only "client" and "student" can be self-assigned.
Role = Literal["client", "student", "admin"]


class SignupRequest(SQLModel):
    """
    Payload for account creation.

    `role` is a plain string so that an unknown role surfaces as the
    InvalidRole error (400) rather than a schema validation error.
    """

    model_config = ConfigDict(extra="forbid")

    email: SubmittedEmail
    password: str
    role: str | None = None

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("password cannot be empty")
        return v


class LoginRequest(SQLModel):
    model_config = ConfigDict(extra="forbid")

    email: SubmittedEmail
    password: str


class UserRead(SQLModel):
    """Public view of an account. Never carries the password hash."""

    id: uuid.UUID
    email: str
    role: Role


class UserDetail(UserRead):
    """Account view for GET /auth/me."""

    created_at: datetime
    updated_at: datetime


class AuthResult(SQLModel):
    """Returned by signup and login."""

    user: UserRead
    token: str


class MeResult(SQLModel):
    user: UserDetail
