# app/services/auth_service.py
import hmac
import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.config import get_settings
from app.core.errors import EmailTaken, InvalidCredentials, InvalidRole
from app.core.security import create_access_token, get_password_hash, verify_password
from app.models.user import ROLE_ADMIN, ROLE_CLIENT, ROLE_STUDENT, User
from app.repositories.user_repo import UserRepository
from app.schemas.user import LoginRequest, SignupRequest

logger = logging.getLogger(__name__)

SELF_SERVICE_ROLES = (ROLE_CLIENT, ROLE_STUDENT)


class AuthService:
    """
    Signup, login and admin bootstrap.

    Responsibilities:
      - validate requested roles
      - hash passwords before they reach the credential store
      - authenticate the operator-configured admin pair
      - mint session tokens
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    @staticmethod
    def _result(user: User) -> dict:
        return {"user": user, "token": create_access_token(user.id)}

    # ----- Credential store helpers -----

    def create_user(
        self,
        session: Session,
        email: str,
        password: str,
        role: str = ROLE_CLIENT,
    ) -> User:
        """
        Insert a new user with a hashed password.

        Check-then-create: two concurrent signups for the same email can
        both pass the check; the unique index on users.email rejects the
        second insert, which is reported as EmailTaken too.
        """
        if self.repo.get_by_email(session, email) is not None:
            raise EmailTaken()

        user = User(
            email=email,
            password_hash=get_password_hash(password),
            role=role,
        )
        try:
            return self.repo.create(session, user)
        except IntegrityError:
            session.rollback()
            raise EmailTaken()

    def ensure_admin_user(self, session: Session, email: str, password: str) -> User:
        """
        Find-or-create the admin account for the configured email.

        Idempotent:
          - missing row  => create with role="admin"
          - existing row => promote to "admin" if needed
        The stored hash is set from the configured password on creation
        only, so a later normal-path login uses the same password.
        """
        user = self.repo.get_by_email(session, email)

        if user is None:
            logger.info("Creating admin user %s", email)
            return self.create_user(session, email, password, role=ROLE_ADMIN)

        if user.role != ROLE_ADMIN:
            logger.warning("Promoting existing user %s to admin", email)
            user.role = ROLE_ADMIN
            user = self.repo.update(session, user)

        return user

    # ----- Public operations -----

    def signup(self, session: Session, payload: SignupRequest) -> dict:
        role = payload.role or ROLE_CLIENT
        if role not in SELF_SERVICE_ROLES:
            raise InvalidRole()

        user = self.create_user(session, payload.email, payload.password, role=role)
        logger.info("User registered: %s (%s)", user.id, user.role)
        return self._result(user)

    def login(self, session: Session, payload: LoginRequest) -> dict:
        """
        Two disjoint paths:
          1. Admin bootstrap: the pair matches ADMIN_EMAIL / ADMIN_PASSWORD.
          2. Normal: email lookup + bcrypt check.
        """
        if self._is_admin_pair(payload.email, payload.password):
            admin = self.ensure_admin_user(session, payload.email, payload.password)
            return self._result(admin)

        user = self.repo.get_by_email(session, payload.email)
        if user is None or not verify_password(payload.password, user.password_hash):
            raise InvalidCredentials()

        return self._result(user)

    @staticmethod
    def _is_admin_pair(email: str, password: str) -> bool:
        settings = get_settings()
        if not (settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD):
            return False
        return email == settings.ADMIN_EMAIL and hmac.compare_digest(
            password.encode(), settings.ADMIN_PASSWORD.encode()
        )
