"""Tests for admin mail sending and tracking."""

import json
import uuid

from conftest import PNG_BYTES


def _send_single(client, headers, client_id, **extra):
    return client.post(
        "/api/mail/send-single",
        data={"client_id": client_id, "subject": "Renewal", "message": "Hi\nYour card renews soon."},
        headers=headers,
        **extra,
    )


def test_send_single_and_track(client, admin_headers, client_account, outbox):
    resp = _send_single(client, admin_headers, client_account["user_id"])
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["recipients"] == ["alice@cards.dev"]
    assert data["sender"] == "admin@elitecards.io (admin)"

    assert outbox.sent[0]["to_email"] == "alice@cards.dev"
    assert "Your card renews soon." in outbox.sent[0]["html_body"]

    history = client.get("/api/mail", headers=admin_headers).json()["data"]
    assert history["total_mails"] == 1
    assert history["total_pages"] == 1
    record = history["mails"][0]
    assert record["message_id"] == data["message_id"]
    assert record["recipient_type"] == "single"
    assert record["client_ids"] == [client_account["user_id"]]

    one = client.get(f"/api/mail/{record['id']}", headers=admin_headers)
    assert one.json()["data"]["subject"] == "Renewal"


def test_send_single_uses_card_name(client, admin_headers, client_account, outbox):
    client.post("/api/profile", json={"name": "Alice Rao"}, headers=client_account["headers"])
    _send_single(client, admin_headers, client_account["user_id"])
    assert "Dear Alice Rao," in outbox.sent[0]["html_body"]


def test_send_single_to_student_is_not_found(client, admin_headers, student_account, outbox):
    resp = _send_single(client, admin_headers, student_account["user_id"])
    assert resp.status_code == 404
    assert resp.json()["message"] == "Client not found"
    assert outbox.sent == []


def test_send_single_with_attachment(client, admin_headers, client_account, outbox):
    resp = _send_single(
        client,
        admin_headers,
        client_account["user_id"],
        files=[("attachments", ("invoice.pdf", b"%PDF-1.4", "application/pdf"))],
    )
    assert resp.status_code == 200
    assert outbox.sent[0]["attachments"] == [("invoice.pdf", b"%PDF-1.4")]

    record = client.get("/api/mail", headers=admin_headers).json()["data"]["mails"][0]
    assert record["attachments"] == [{"filename": "invoice.pdf", "size": 8}]


def test_too_many_attachments(client, admin_headers, client_account, outbox):
    files = [("attachments", (f"p{i}.png", PNG_BYTES, "image/png")) for i in range(6)]
    resp = _send_single(client, admin_headers, client_account["user_id"], files=files)
    assert resp.status_code == 400
    assert outbox.sent == []


def test_send_failure(client, admin_headers, client_account, outbox):
    outbox.fail = True
    resp = _send_single(client, admin_headers, client_account["user_id"])
    assert resp.status_code == 500
    assert resp.json()["error"] == "EmailDeliveryFailed"
    assert client.get("/api/mail", headers=admin_headers).json()["data"]["total_mails"] == 0


def test_send_group_uses_bcc(client, admin_headers, client_account, other_client, student_account, outbox):
    ids = [client_account["user_id"], other_client["user_id"], student_account["user_id"]]
    resp = client.post(
        "/api/mail/send-group",
        data={"client_ids": json.dumps(ids), "subject": "News", "message": "New templates!"},
        headers=admin_headers,
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["message"] == "Group mail sent to 2 clients"

    sent = outbox.sent[0]
    assert sent["to_email"] == "noreply@elitecards.io"
    assert sorted(sent["bcc"]) == ["alice@cards.dev", "bob@cards.dev"]

    history = client.get("/api/mail?recipient_type=group", headers=admin_headers).json()["data"]
    assert history["total_mails"] == 1
    assert len(history["mails"][0]["client_ids"]) == 2


def test_send_group_repeated_fields(client, admin_headers, client_account, other_client, outbox):
    resp = client.post(
        "/api/mail/send-group",
        data={
            "client_ids": [client_account["user_id"], other_client["user_id"]],
            "subject": "News",
            "message": "Hello",
        },
        headers=admin_headers,
    )
    assert resp.status_code == 200
    assert len(outbox.sent[0]["bcc"]) == 2


def test_send_group_no_valid_clients(client, admin_headers, outbox):
    resp = client.post(
        "/api/mail/send-group",
        data={"client_ids": str(uuid.uuid4()), "subject": "News", "message": "Hello"},
        headers=admin_headers,
    )
    assert resp.status_code == 404
    assert resp.json()["message"] == "No valid clients found"


def test_mail_routes_admin_only(client, client_account):
    resp = _send_single(client, client_account["headers"], client_account["user_id"])
    assert resp.status_code == 403
    assert client.get("/api/mail", headers=client_account["headers"]).status_code == 403
