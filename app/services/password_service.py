# app/services/password_service.py
import logging
import secrets
from datetime import datetime, timedelta, timezone

from sqlmodel import Session

from app.core.config import get_settings
from app.core.email_client import send_email
from app.core.email_templates import otp_email
from app.core.errors import (
    EmailDeliveryFailed,
    InvalidOtp,
    OtpExpired,
    PasswordMismatch,
    UserNotFound,
    WeakPassword,
)
from app.core.security import get_password_hash
from app.models.user import User
from app.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

OTP_MIN = 100000
OTP_SPACE = 900000  # 100000..999999 inclusive
MIN_PASSWORD_LENGTH = 6


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo; stored values are always UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def generate_otp() -> str:
    """Uniform 6-digit code, never with a leading zero."""
    return str(OTP_MIN + secrets.randbelow(OTP_SPACE))


class PasswordService:
    """
    OTP-based password reset.

    Per-user state is the (reset_otp, reset_otp_expires_at) pair:

      NoActiveReset --forgot/resend--> OtpIssued --reset--> NoActiveReset

    - verify_otp never consumes the code.
    - resend_otp overwrites any outstanding code.
    - An expired code stays stored until overwritten or consumed.

    The OTP write and the email send are independent steps: a failed send
    keeps the stored code and surfaces EmailDeliveryFailed.
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    # ----- Helpers -----

    def _get_user(self, session: Session, email: str) -> User:
        user = self.repo.get_by_email(session, email)
        if user is None:
            raise UserNotFound()
        return user

    @staticmethod
    def _check_otp(user: User, otp: str) -> None:
        if user.reset_otp is None or user.reset_otp != otp:
            raise InvalidOtp()
        if user.reset_otp_expires_at is None or _now() > _as_utc(user.reset_otp_expires_at):
            raise OtpExpired()

    def _issue_otp(self, session: Session, email: str, resend: bool) -> None:
        user = self._get_user(session, email)

        otp = generate_otp()
        minutes = get_settings().OTP_EXPIRE_MINUTES
        user.reset_otp = otp
        user.reset_otp_expires_at = _now() + timedelta(minutes=minutes)
        self.repo.update(session, user)

        subject, html = otp_email(user.email, otp, minutes, resend=resend)
        try:
            send_email(to_email=user.email, subject=subject, html_body=html)
        except Exception as exc:
            logger.error("OTP email to user %s failed: %s", user.id, exc)
            raise EmailDeliveryFailed(
                "Failed to send OTP email. Please try again later."
            ) from exc

    # ----- Public operations -----

    def forgot_password(self, session: Session, email: str) -> None:
        self._issue_otp(session, email, resend=False)

    def resend_otp(self, session: Session, email: str) -> None:
        self._issue_otp(session, email, resend=True)

    def verify_otp(self, session: Session, email: str, otp: str) -> None:
        """Check a code without consuming it."""
        user = self._get_user(session, email)
        self._check_otp(user, otp)

    def reset_password(
        self,
        session: Session,
        email: str,
        otp: str,
        new_password: str,
        confirm_password: str,
    ) -> None:
        """
        Replace the password if the code is valid, then clear the code.

        Input checks run first and have no side effects.
        """
        if new_password != confirm_password:
            raise PasswordMismatch()
        if len(new_password) < MIN_PASSWORD_LENGTH:
            raise WeakPassword()

        user = self._get_user(session, email)
        self._check_otp(user, otp)

        user.password_hash = get_password_hash(new_password)
        user.reset_otp = None
        user.reset_otp_expires_at = None
        self.repo.update(session, user)
        logger.info("Password reset for user %s", user.id)
