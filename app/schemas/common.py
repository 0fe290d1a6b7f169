# app/schemas/common.py
import uuid
from datetime import datetime
from typing import Annotated, Generic, TypeVar

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel
from sqlmodel import SQLModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """
    Success envelope shared by every endpoint.

    Failures use the same `success` / `message` keys plus `error`
    (see app/core/errors.py).
    """

    success: bool = True
    message: str = "OK"
    data: T | None = None


class MessageResponse(BaseModel):
    """Envelope for endpoints that return no payload."""

    success: bool = True
    message: str


def ok(data=None, message: str = "OK") -> dict:
    """Build a success envelope for a router return value."""
    return {"success": True, "message": message, "data": data}


class OwnedRead(SQLModel):
    """Columns every owner-scoped read model exposes."""

    id: uuid.UUID
    user_id: uuid.UUID
    created_at: datetime
    updated_at: datetime


def strip_required(v: str) -> str:
    """Shared validator body: trim and reject blank strings."""
    v = v.strip()
    if not v:
        raise ValueError("field cannot be empty")
    return v


def strip_optional(v: str | None) -> str | None:
    if v is None:
        return v
    return strip_required(v)


class DeletedCount(BaseModel):
    deleted: int


def check_email(v: str) -> str:
    """
    Validate address syntax but return the string exactly as submitted.

    Account emails are stored and compared without case-folding.
    """
    try:
        validate_email(v, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(str(exc)) from exc
    return v


SubmittedEmail = Annotated[str, AfterValidator(check_email)]
