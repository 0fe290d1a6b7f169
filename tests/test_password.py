"""Tests for the OTP password-reset flow."""

from datetime import datetime, timedelta, timezone

from sqlmodel import select

from app.models.user import User
from app.services import password_service
from app.services.password_service import generate_otp
from conftest import signup

EMAIL = "reset@cards.dev"


def _user(db_session) -> User:
    db_session.expire_all()
    return db_session.exec(select(User).where(User.email == EMAIL)).one()


def _request_otp(client) -> None:
    resp = client.post("/api/password/forgot", json={"email": EMAIL})
    assert resp.status_code == 200, resp.text


def test_generate_otp_range():
    for _ in range(200):
        code = generate_otp()
        assert len(code) == 6
        assert 100000 <= int(code) <= 999999


def test_forgot_unknown_email(client, outbox):
    resp = client.post("/api/password/forgot", json={"email": "nobody@cards.dev"})
    assert resp.status_code == 404
    assert resp.json()["error"] == "UserNotFound"
    assert outbox.sent == []


def test_forgot_stores_code_and_sends_email(client, db_session, outbox):
    signup(client, EMAIL)
    _request_otp(client)

    user = _user(db_session)
    assert user.reset_otp is not None
    assert user.reset_otp_expires_at is not None

    assert len(outbox.sent) == 1
    mail = outbox.sent[0]
    assert mail["to_email"] == EMAIL
    assert user.reset_otp in mail["html_body"]
    assert "(Resend)" not in mail["subject"]


def test_full_reset_round_trip(client, db_session, outbox):
    signup(client, EMAIL, password="old-password")
    _request_otp(client)
    otp = _user(db_session).reset_otp

    verify = client.post("/api/password/verify-otp", json={"email": EMAIL, "otp": otp})
    assert verify.status_code == 200
    assert verify.json()["success"] is True

    reset = client.post(
        "/api/password/reset",
        json={"email": EMAIL, "otp": otp, "newPassword": "new-password", "confirmPassword": "new-password"},
    )
    assert reset.status_code == 200

    user = _user(db_session)
    assert user.reset_otp is None
    assert user.reset_otp_expires_at is None

    old = client.post("/api/auth/login", json={"email": EMAIL, "password": "old-password"})
    assert old.status_code == 400
    new = client.post("/api/auth/login", json={"email": EMAIL, "password": "new-password"})
    assert new.status_code == 200


def test_verify_does_not_consume_code(client, db_session):
    signup(client, EMAIL)
    _request_otp(client)
    otp = _user(db_session).reset_otp

    for _ in range(2):
        resp = client.post("/api/password/verify-otp", json={"email": EMAIL, "otp": otp})
        assert resp.status_code == 200
    assert _user(db_session).reset_otp == otp


def test_wrong_code_rejected(client, db_session):
    signup(client, EMAIL)
    _request_otp(client)
    otp = _user(db_session).reset_otp
    wrong = "100000" if otp != "100000" else "100001"

    resp = client.post("/api/password/verify-otp", json={"email": EMAIL, "otp": wrong})
    assert resp.status_code == 400
    assert resp.json()["error"] == "InvalidOtp"


def test_verify_without_outstanding_code(client):
    signup(client, EMAIL)
    resp = client.post("/api/password/verify-otp", json={"email": EMAIL, "otp": "123456"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "InvalidOtp"


def test_code_expires_after_five_minutes(client, db_session, monkeypatch):
    signup(client, EMAIL)
    _request_otp(client)
    otp = _user(db_session).reset_otp

    issued = datetime.now(timezone.utc)
    monkeypatch.setattr(password_service, "_now", lambda: issued + timedelta(minutes=5, seconds=5))

    resp = client.post("/api/password/verify-otp", json={"email": EMAIL, "otp": otp})
    assert resp.status_code == 400
    assert resp.json()["error"] == "OtpExpired"

    # Expired code is still stored
    assert _user(db_session).reset_otp == otp


def test_code_valid_just_before_expiry(client, db_session, monkeypatch):
    signup(client, EMAIL)
    _request_otp(client)
    user = _user(db_session)

    expires = user.reset_otp_expires_at.replace(tzinfo=timezone.utc)
    monkeypatch.setattr(password_service, "_now", lambda: expires)

    resp = client.post("/api/password/verify-otp", json={"email": EMAIL, "otp": user.reset_otp})
    assert resp.status_code == 200


def test_password_mismatch_checked_first(client, db_session):
    signup(client, EMAIL)
    _request_otp(client)
    otp = _user(db_session).reset_otp
    old_hash = _user(db_session).password_hash

    for code in ("000000", otp):
        resp = client.post(
            "/api/password/reset",
            json={"email": EMAIL, "otp": code, "newPassword": "abcdef", "confirmPassword": "abcdeg"},
        )
        assert resp.status_code == 400
        assert resp.json()["error"] == "PasswordMismatch"

    # No mutation
    user = _user(db_session)
    assert user.reset_otp == otp
    assert user.password_hash == old_hash
    login = client.post("/api/auth/login", json={"email": EMAIL, "password": "secret123"})
    assert login.status_code == 200


def test_weak_password_rejected(client, db_session):
    signup(client, EMAIL)
    _request_otp(client)
    otp = _user(db_session).reset_otp

    resp = client.post(
        "/api/password/reset",
        json={"email": EMAIL, "otp": otp, "newPassword": "abc", "confirmPassword": "abc"},
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "WeakPassword"
    assert _user(db_session).reset_otp == otp


def test_code_cannot_be_reused_after_reset(client, db_session):
    signup(client, EMAIL)
    _request_otp(client)
    otp = _user(db_session).reset_otp
    body = {"email": EMAIL, "otp": otp, "newPassword": "brand-new", "confirmPassword": "brand-new"}

    assert client.post("/api/password/reset", json=body).status_code == 200
    again = client.post("/api/password/reset", json=body)
    assert again.status_code == 400
    assert again.json()["error"] == "InvalidOtp"


def test_resend_replaces_outstanding_code(client, db_session, outbox, monkeypatch):
    signup(client, EMAIL)
    codes = iter(["111111", "222222"])
    monkeypatch.setattr(password_service, "generate_otp", lambda: next(codes))

    _request_otp(client)
    resp = client.post("/api/password/resend-otp", json={"email": EMAIL})
    assert resp.status_code == 200
    assert _user(db_session).reset_otp == "222222"
    assert "(Resend)" in outbox.sent[-1]["subject"]

    old = client.post("/api/password/verify-otp", json={"email": EMAIL, "otp": "111111"})
    assert old.status_code == 400
    assert old.json()["error"] == "InvalidOtp"


def test_email_failure_keeps_stored_code(client, db_session, outbox):
    signup(client, EMAIL)
    outbox.fail = True

    resp = client.post("/api/password/forgot", json={"email": EMAIL})
    assert resp.status_code == 500
    assert resp.json()["error"] == "EmailDeliveryFailed"
    assert _user(db_session).reset_otp is not None
