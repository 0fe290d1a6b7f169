# app/routers/auth.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.core.auth import get_current_user
from app.database import get_session
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.common import ApiResponse, ok
from app.schemas.user import AuthResult, LoginRequest, MeResult, SignupRequest
from app.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])

repo = UserRepository()
service = AuthService(repo)


@router.post(
    "/signup",
    response_model=ApiResponse[AuthResult],
    status_code=status.HTTP_201_CREATED,
)
def signup(
    payload: SignupRequest,
    session: Session = Depends(get_session),
):
    """
    Register a client or student account.

    - `role` defaults to "client"; anything other than client/student is 400.
    - Duplicate email is 400 EmailTaken.
    """
    return ok(service.signup(session, payload), "User registered successfully")


@router.post("/login", response_model=ApiResponse[AuthResult])
def login(
    payload: LoginRequest,
    session: Session = Depends(get_session),
):
    """
    Log in with email + password.

    The operator-configured admin pair is accepted here as well and
    materialises the admin account on first use.
    """
    return ok(service.login(session, payload), "Login successful")


@router.get("/me", response_model=ApiResponse[MeResult])
def read_me(current_user: User = Depends(get_current_user)):
    """
    Return the authenticated account (password hash excluded).
    """
    return ok({"user": current_user})
