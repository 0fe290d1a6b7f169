# app/core/security.py
"""
Password hashing (bcrypt) and session token issuing / verification.
"""

import uuid
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from app.core.config import get_settings
from app.core.errors import ExpiredToken, InvalidToken

settings = get_settings()

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# ----- Passwords -----


def verify_password(plain: str, hashed: str | None) -> bool:
    if not hashed:
        return False
    return pwd_context.verify(plain, hashed)


def get_password_hash(plain: str) -> str:
    return pwd_context.hash(plain)


# ----- Session tokens -----


def create_access_token(
    user_id: uuid.UUID,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Mint a signed session token for a user.

    The token embeds the user id as `sub` and an absolute expiry (`exp`).
    There is no server-side session table: validity depends only on the
    signature and the expiry.
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    )
    return jwt.encode(
        {"sub": str(user_id), "exp": expire},
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
    )


def verify_access_token(token: str) -> uuid.UUID:
    """
    Verify a session token and return the user id it carries.

    Raises:
        ExpiredToken: signature valid but `exp` is in the past.
        InvalidToken: bad signature, malformed token or bad `sub` claim.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except ExpiredSignatureError:
        raise ExpiredToken()
    except JWTError:
        raise InvalidToken()

    sub = payload.get("sub")
    if not sub:
        raise InvalidToken("Token missing sub")

    try:
        return uuid.UUID(sub)
    except ValueError:
        raise InvalidToken("Invalid sub in token")
