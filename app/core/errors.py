# app/core/errors.py
"""
Application error taxonomy and global exception handlers.

Services raise AppError subclasses (they are HTTPExceptions, so FastAPI
maps them to responses without extra wiring). Every failure response has
the same envelope:

    {"success": false, "message": "<human readable>", "error": "<code>"}

The error code is informational; clients must not parse it.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(HTTPException):
    """Base class for all expected failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "InternalError"
    message: str = "Something went wrong"

    def __init__(self, message: str | None = None, headers: dict[str, str] | None = None):
        super().__init__(
            status_code=self.status_code,
            detail=message or self.message,
            headers=headers,
        )


# ----- 400 -----


class BadRequest(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    error = "BadRequest"
    message = "Bad request"


class EmailTaken(BadRequest):
    error = "EmailTaken"
    message = "User already exists with this email"


class InvalidRole(BadRequest):
    error = "InvalidRole"
    message = "Invalid role. Must be either client or student"


class InvalidCredentials(BadRequest):
    error = "InvalidCredentials"
    message = "Invalid credentials"


class InvalidOtp(BadRequest):
    error = "InvalidOtp"
    message = "Invalid OTP"


class OtpExpired(BadRequest):
    error = "OtpExpired"
    message = "OTP has expired"


class PasswordMismatch(BadRequest):
    error = "PasswordMismatch"
    message = "New password and confirm password do not match"


class WeakPassword(BadRequest):
    error = "WeakPassword"
    message = "Password must be at least 6 characters long"


class ProfileExists(BadRequest):
    error = "ProfileExists"
    message = "Profile already exists for this user"


class UnsupportedMedia(BadRequest):
    error = "UnsupportedMedia"
    message = "Unsupported file type"


# ----- 401 / 403 -----


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    error = "Unauthenticated"
    message = "Authentication required"

    def __init__(self, message: str | None = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class InvalidToken(Unauthenticated):
    error = "InvalidToken"
    message = "Invalid token"


class ExpiredToken(Unauthenticated):
    error = "ExpiredToken"
    message = "Token has expired"


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    error = "Forbidden"
    message = "You do not have permission to perform this action"


# ----- 404 / 413 -----


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    error = "NotFound"
    message = "Resource not found"


class UserNotFound(NotFound):
    error = "UserNotFound"
    message = "User not found with this email"


class PayloadTooLarge(AppError):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    error = "PayloadTooLarge"
    message = "File too large"


# ----- 500 -----


class EmailDeliveryFailed(AppError):
    error = "EmailDeliveryFailed"
    message = "Failed to send email. Please try again later."


class StorageFailure(AppError):
    error = "StorageFailure"
    message = "Internal storage error"


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _envelope(status_code: int, message: str, error: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "error": error},
        headers=headers,
    )


async def _http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    error = getattr(exc, "error", None) or f"HTTP{exc.status_code}"
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return _envelope(exc.status_code, message, error, headers=exc.headers)


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError | ValidationError
) -> JSONResponse:
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = first.get("msg", "Invalid request")
    if location:
        message = f"{location}: {message}"
    return _envelope(status.HTTP_422_UNPROCESSABLE_ENTITY, message, "ValidationError")


async def _sqlalchemy_error_handler(_request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error: %s", exc, exc_info=True)
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        StorageFailure.message,
        StorageFailure.error,
    )


async def _generic_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception: %s", exc)
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Something went wrong!",
        "InternalError",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the FastAPI app."""
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    # Form payloads validated inside handlers (multipart create endpoints)
    app.add_exception_handler(ValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, _sqlalchemy_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _generic_exception_handler)
