# app/schemas/password.py
from pydantic import ConfigDict
from sqlmodel import SQLModel

from app.schemas.common import SubmittedEmail


class ForgotPasswordRequest(SQLModel):
    """Body for /password/forgot and /password/resend-otp."""

    model_config = ConfigDict(extra="forbid")

    email: SubmittedEmail


class VerifyOtpRequest(SQLModel):
    model_config = ConfigDict(extra="forbid")

    email: SubmittedEmail
    otp: str


class ResetPasswordRequest(SQLModel):
    """
    Body for /password/reset.

    Length and match checks live in the service so they surface as
    WeakPassword / PasswordMismatch instead of schema errors.
    """

    model_config = ConfigDict(extra="forbid")

    email: SubmittedEmail
    otp: str
    newPassword: str
    confirmPassword: str
