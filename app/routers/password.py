# app/routers/password.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.database import get_session
from app.repositories.user_repo import UserRepository
from app.schemas.common import MessageResponse
from app.schemas.password import (
    ForgotPasswordRequest,
    ResetPasswordRequest,
    VerifyOtpRequest,
)
from app.services.password_service import PasswordService

router = APIRouter(prefix="/password", tags=["Password"])

repo = UserRepository()
service = PasswordService(repo)


@router.post("/forgot", response_model=MessageResponse)
def forgot_password(
    payload: ForgotPasswordRequest,
    session: Session = Depends(get_session),
):
    """
    Issue a 6-digit reset code valid for 5 minutes and email it.

    - 404 if no account has this email.
    - 500 EmailDeliveryFailed if the email could not be sent (the code is
      still stored; the user may call /resend-otp).
    """
    service.forgot_password(session, payload.email)
    return {"message": "OTP sent to your email address"}


@router.post("/verify-otp", response_model=MessageResponse)
def verify_otp(
    payload: VerifyOtpRequest,
    session: Session = Depends(get_session),
):
    """
    Check a reset code without consuming it.
    """
    service.verify_otp(session, payload.email, payload.otp)
    return {"message": "OTP verified successfully"}


@router.post("/reset", response_model=MessageResponse)
def reset_password(
    payload: ResetPasswordRequest,
    session: Session = Depends(get_session),
):
    """
    Set a new password using a valid reset code.
    """
    service.reset_password(
        session,
        email=payload.email,
        otp=payload.otp,
        new_password=payload.newPassword,
        confirm_password=payload.confirmPassword,
    )
    return {"message": "Password reset successfully"}


@router.post("/resend-otp", response_model=MessageResponse)
def resend_otp(
    payload: ForgotPasswordRequest,
    session: Session = Depends(get_session),
):
    """
    Issue a fresh code, invalidating any outstanding one.
    """
    service.resend_otp(session, payload.email)
    return {"message": "OTP resent to your email address"}
