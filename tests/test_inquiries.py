"""Tests for the public contact form."""

INQUIRY = {
    "full_name": "Priya Shah",
    "email": "priya@shop.dev",
    "phone": "+91 99999 00000",
    "message": "Do you print metal cards?",
}


def test_public_submit(client):
    resp = client.post("/api/inquiries", json=INQUIRY)
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Inquiry submitted successfully"
    assert body["data"]["full_name"] == "Priya Shah"


def test_submit_requires_valid_email(client):
    resp = client.post("/api/inquiries", json={**INQUIRY, "email": "nope"})
    assert resp.status_code == 422


def test_admin_list_get_delete(client, admin_headers):
    created = client.post("/api/inquiries", json=INQUIRY).json()["data"]

    listed = client.get("/api/inquiries", headers=admin_headers)
    assert [i["id"] for i in listed.json()["data"]] == [created["id"]]

    got = client.get(f"/api/inquiries/{created['id']}", headers=admin_headers)
    assert got.json()["data"]["message"] == INQUIRY["message"]

    deleted = client.delete(f"/api/inquiries/{created['id']}", headers=admin_headers)
    assert deleted.status_code == 200

    missing = client.get(f"/api/inquiries/{created['id']}", headers=admin_headers)
    assert missing.status_code == 404
    assert missing.json()["message"] == "Inquiry not found"


def test_listing_requires_admin(client):
    assert client.get("/api/inquiries").status_code == 401
