"""
Shared test fixtures for the Elite Digital Cards API test suite.

An in-memory SQLite engine replaces the application database, and the
mail dispatcher and Supabase Storage helpers are replaced by recorders.
"""

import os
import sys

import pytest

# Ensure project root is importable
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

# Override environment BEFORE importing application modules
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ADMIN_EMAIL"] = "admin@elitecards.io"
os.environ["ADMIN_PASSWORD"] = "admin-secret"
os.environ["SMTP_FROM_EMAIL"] = "noreply@elitecards.io"

from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.database import get_session
from app.main import app
from app.services import appointment_service, mail_service, password_service, resource_service

ADMIN_EMAIL = os.environ["ADMIN_EMAIL"]
ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]

STORAGE_PREFIX = "https://proj.supabase.co/storage/v1/object/public/elite-cards/"

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


def _override_get_session():
    with Session(test_engine) as session:
        yield session


app.dependency_overrides[get_session] = _override_get_session


@pytest.fixture(autouse=True)
def setup_db():
    """Create all tables before each test and drop them after."""
    SQLModel.metadata.create_all(test_engine)
    yield
    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture
def db_session():
    """Raw database session for direct queries in tests."""
    with Session(test_engine) as session:
        yield session


@pytest.fixture
def client() -> TestClient:
    # No context manager: the lifespan (create_all on the app engine,
    # admin bootstrap) is not needed with the overridden session.
    return TestClient(app)


class Outbox:
    """Records every email handed to the dispatcher."""

    def __init__(self):
        self.sent: list[dict] = []
        self.fail = False

    def send(self, **kwargs) -> str:
        if self.fail:
            raise ConnectionError("SMTP unavailable")
        self.sent.append(kwargs)
        return f"<msg-{len(self.sent)}@elitecards.io>"


@pytest.fixture(autouse=True)
def outbox(monkeypatch) -> Outbox:
    box = Outbox()
    for module in (password_service, appointment_service, mail_service):
        monkeypatch.setattr(module, "send_email", box.send)
    return box


class FakeStorage:
    """Records uploads and deletes instead of talking to Supabase."""

    def __init__(self):
        self.uploaded: list[str] = []
        self.deleted: list[str] = []
        self.events: list[tuple[str, str]] = []
        self.fail_upload = False

    def upload(self, path: str, file_bytes: bytes, content_type: str) -> str:
        if self.fail_upload:
            raise RuntimeError("bucket unavailable")
        url = STORAGE_PREFIX + path
        self.uploaded.append(url)
        self.events.append(("upload", url))
        return url

    def delete(self, url: str | None) -> None:
        if url:
            self.deleted.append(url)
            self.events.append(("delete", url))


@pytest.fixture(autouse=True)
def storage(monkeypatch) -> FakeStorage:
    fake = FakeStorage()
    monkeypatch.setattr(resource_service, "upload_to_storage", fake.upload)
    monkeypatch.setattr(resource_service, "delete_public_url", fake.delete)
    return fake


# ── Auth helpers ─────────────────────────────────────────────────────


def auth(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def signup(client: TestClient, email: str, role: str = "client", password: str = "secret123") -> dict:
    """Register an account and return {"token", "user_id", "headers"}."""
    resp = client.post(
        "/api/auth/signup",
        json={"email": email, "password": password, "role": role},
    )
    assert resp.status_code == 201, resp.text
    data = resp.json()["data"]
    return {
        "token": data["token"],
        "user_id": data["user"]["id"],
        "headers": auth(data["token"]),
    }


@pytest.fixture
def client_account(client):
    return signup(client, "alice@cards.dev", role="client")


@pytest.fixture
def other_client(client):
    return signup(client, "bob@cards.dev", role="client")


@pytest.fixture
def student_account(client):
    return signup(client, "sam@campus.dev", role="student")


@pytest.fixture
def admin_headers(client) -> dict[str, str]:
    resp = client.post(
        "/api/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert resp.status_code == 200, resp.text
    return auth(resp.json()["data"]["token"])


PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
