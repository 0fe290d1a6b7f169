# app/core/auth.py
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from app.core.errors import Forbidden, Unauthenticated
from app.core.security import verify_access_token
from app.database import get_session
from app.models.user import ROLE_ADMIN, User

# HTTP Bearer scheme:
# - auto_error=False => a missing Authorization header does not raise inside
#   FastAPI, so we can answer with our own 401 envelope.
bearer_scheme = HTTPBearer(auto_error=False)


def get_optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: Session = Depends(get_session),
) -> User | None:
    """
    Resolve the caller from a bearer token, or None for anonymous requests.

    A token that is present but invalid / expired is still rejected.
    """
    if credentials is None:
        return None

    user_id = verify_access_token(credentials.credentials)
    user = session.get(User, user_id)
    if user is None:
        raise Unauthenticated("User for this token no longer exists")
    return user


def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    """
    Auth gate.

    Flow:
      1. Missing Authorization header => 401 Unauthenticated.
      2. Invalid signature / malformed => 401 InvalidToken.
      3. Past expiry => 401 ExpiredToken.
      4. Unknown user id => 401 Unauthenticated.

    Returns:
        The authenticated User (id + role available to handlers).
    """
    if user is None:
        raise Unauthenticated("No token, authorization denied")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    """
    Admin gate. Runs after the auth gate.

    Raises:
        Forbidden(403): if role is not admin.
    """
    if user.role != ROLE_ADMIN:
        raise Forbidden("Access denied. Admin only.")
    return user


def ensure_role(user: User, role: str, action: str) -> None:
    """
    In-handler role check, for endpoints where only one persona may act
    on its own sub-resources (e.g. "Only students can create awards").
    """
    if user.role != role:
        raise Forbidden(f"Only {role}s can {action}")
