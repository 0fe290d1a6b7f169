"""Tests for owner-scoped resources: scoping, admin mirror, personas and blobs."""

import uuid

from conftest import PNG_BYTES, STORAGE_PREFIX


def _create_service(client, headers, title="Logo design", **extra):
    resp = client.post("/api/services", json={"title": title, **extra}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


# ── Owner scoping ───────────────────────────────────────────────────


def test_create_and_list_my_services(client, client_account):
    created = _create_service(client, client_account["headers"], description="Brand kits")
    assert created["user_id"] == client_account["user_id"]

    resp = client.get("/api/services/my", headers=client_account["headers"])
    assert resp.status_code == 200
    items = resp.json()["data"]
    assert [i["id"] for i in items] == [created["id"]]


def test_other_owner_gets_not_found(client, client_account, other_client):
    item = _create_service(client, client_account["headers"])

    for method in ("get", "put", "delete"):
        kwargs = {"json": {"title": "Hijacked"}} if method == "put" else {}
        resp = getattr(client, method)(
            f"/api/services/{item['id']}", headers=other_client["headers"], **kwargs
        )
        assert resp.status_code == 404, method
        assert resp.json()["error"] == "NotFound"

    still_there = client.get(f"/api/services/{item['id']}", headers=client_account["headers"])
    assert still_there.json()["data"]["title"] == "Logo design"


def test_update_is_partial(client, client_account):
    item = _create_service(client, client_account["headers"], description="Original")
    resp = client.put(
        f"/api/services/{item['id']}",
        json={"title": "Renamed"},
        headers=client_account["headers"],
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["title"] == "Renamed"
    assert data["description"] == "Original"


def test_unknown_field_rejected(client, client_account):
    resp = client.post(
        "/api/services",
        json={"title": "x", "price": 3},
        headers=client_account["headers"],
    )
    assert resp.status_code == 422


def test_blank_title_rejected(client, client_account):
    resp = client.post("/api/services", json={"title": "   "}, headers=client_account["headers"])
    assert resp.status_code == 422
    assert resp.json()["error"] == "ValidationError"


def test_delete_own_item(client, client_account):
    item = _create_service(client, client_account["headers"])
    resp = client.delete(f"/api/services/{item['id']}", headers=client_account["headers"])
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Service deleted successfully"}
    assert client.get("/api/services/my", headers=client_account["headers"]).json()["data"] == []


def test_requires_authentication(client):
    resp = client.get("/api/services/my")
    assert resp.status_code == 401


def test_public_listing_needs_no_token(client, client_account):
    _create_service(client, client_account["headers"])
    resp = client.get(f"/api/services/public/{client_account['user_id']}")
    assert resp.status_code == 200
    assert len(resp.json()["data"]) == 1


def test_appointments_have_no_public_listing(client, client_account):
    resp = client.get(f"/api/appointments/public/{client_account['user_id']}")
    assert resp.status_code in (404, 405, 422)


# ── Admin mirror ────────────────────────────────────────────────────


def test_admin_sees_every_item(client, client_account, other_client, admin_headers):
    _create_service(client, client_account["headers"], title="A")
    _create_service(client, other_client["headers"], title="B")

    resp = client.get("/api/services", headers=admin_headers)
    assert resp.status_code == 200
    assert {i["title"] for i in resp.json()["data"]} == {"A", "B"}


def test_admin_mirror_get_update_delete(client, client_account, admin_headers):
    item = _create_service(client, client_account["headers"])

    got = client.get(f"/api/services/{item['id']}/admin", headers=admin_headers)
    assert got.status_code == 200

    upd = client.put(
        f"/api/services/{item['id']}/admin",
        json={"description": "Edited by admin"},
        headers=admin_headers,
    )
    assert upd.json()["data"]["description"] == "Edited by admin"

    deleted = client.delete(f"/api/services/{item['id']}/admin", headers=admin_headers)
    assert deleted.status_code == 200
    missing = client.get(f"/api/services/{item['id']}/admin", headers=admin_headers)
    assert missing.status_code == 404


def test_admin_mirror_forbidden_for_owner(client, client_account):
    item = _create_service(client, client_account["headers"])
    resp = client.get(f"/api/services/{item['id']}/admin", headers=client_account["headers"])
    assert resp.status_code == 403


def test_admin_creates_on_behalf_of_user(client, client_account, admin_headers):
    resp = client.post(
        "/api/testimonials",
        json={
            "testimonial_name": "Happy customer",
            "feedback": "Great card!",
            "user_id": client_account["user_id"],
        },
        headers=admin_headers,
    )
    assert resp.status_code == 201
    assert resp.json()["data"]["user_id"] == client_account["user_id"]

    mine = client.get("/api/testimonials/my", headers=client_account["headers"])
    assert len(mine.json()["data"]) == 1


def test_admin_create_for_unknown_user(client, admin_headers):
    resp = client.post(
        "/api/services",
        json={"title": "Orphan", "user_id": str(uuid.uuid4())},
        headers=admin_headers,
    )
    assert resp.status_code == 404


def test_non_admin_cannot_create_for_someone_else(client, client_account, other_client):
    resp = client.post(
        "/api/services",
        json={"title": "Spoof", "user_id": other_client["user_id"]},
        headers=client_account["headers"],
    )
    assert resp.status_code == 403


# ── Student persona ─────────────────────────────────────────────────


def test_student_skill_crud(client, student_account):
    headers = student_account["headers"]
    created = client.post("/api/student-skills", json={"name": "Python", "level": 80}, headers=headers)
    assert created.status_code == 201
    skill_id = created.json()["data"]["id"]

    upd = client.put(f"/api/student-skills/{skill_id}", json={"level": 90}, headers=headers)
    assert upd.json()["data"]["level"] == 90

    public = client.get(f"/api/student-skills/public/{student_account['user_id']}")
    assert [s["name"] for s in public.json()["data"]] == ["Python"]


def test_skill_level_bounds(client, student_account):
    resp = client.post(
        "/api/student-skills",
        json={"name": "Go", "level": 101},
        headers=student_account["headers"],
    )
    assert resp.status_code == 422


def test_education_end_before_start_rejected(client, student_account):
    resp = client.post(
        "/api/student-educations",
        json={
            "degree": "BSc",
            "institution": "State University",
            "start_date": "2022-09-01",
            "end_date": "2021-06-30",
        },
        headers=student_account["headers"],
    )
    assert resp.status_code == 422


def test_client_rejected_from_student_routes(client, client_account):
    resp = client.post(
        "/api/student-skills",
        json={"name": "Python", "level": 80},
        headers=client_account["headers"],
    )
    assert resp.status_code == 403
    assert resp.json()["error"] == "Forbidden"
    assert resp.json()["message"] == "Only students can create skills"

    mine = client.get("/api/student-awards/my", headers=client_account["headers"])
    assert mine.status_code == 403


def test_admin_lists_and_purges_student_items(client, student_account, admin_headers):
    headers = student_account["headers"]
    for title in ("Robot", "Compiler"):
        client.post("/api/student-projects", json={"title": title}, headers=headers)

    user_id = student_account["user_id"]
    listed = client.get(f"/api/student-projects/user/{user_id}", headers=admin_headers)
    assert len(listed.json()["data"]) == 2

    purged = client.delete(f"/api/student-projects/user/{user_id}/all", headers=admin_headers)
    assert purged.status_code == 200
    assert purged.json()["data"] == {"deleted": 2}
    assert client.get("/api/student-projects/my", headers=headers).json()["data"] == []


def test_client_resources_have_no_bulk_purge(client, client_account, admin_headers):
    client.post("/api/services", json={"title": "Audit"}, headers=client_account["headers"])

    user_id = client_account["user_id"]
    resp = client.delete(f"/api/services/user/{user_id}/all", headers=admin_headers)
    assert resp.status_code == 404
    listed = client.get(f"/api/services/user/{user_id}", headers=admin_headers)
    assert len(listed.json()["data"]) == 1


# ── Blobs ───────────────────────────────────────────────────────────


def test_gallery_upload(client, client_account, storage):
    resp = client.post(
        "/api/gallery",
        data={"caption": "Storefront"},
        files={"image": ("front.png", PNG_BYTES, "image/png")},
        headers=client_account["headers"],
    )
    assert resp.status_code == 201, resp.text
    data = resp.json()["data"]
    assert data["caption"] == "Storefront"
    assert data["image_url"].startswith(STORAGE_PREFIX + "gallery/" + client_account["user_id"])
    assert storage.uploaded == [data["image_url"]]


def test_gallery_rejects_unsupported_type(client, client_account, storage):
    resp = client.post(
        "/api/gallery",
        files={"image": ("notes.txt", b"hello", "text/plain")},
        headers=client_account["headers"],
    )
    assert resp.status_code == 400
    assert resp.json()["error"] == "UnsupportedMedia"
    assert storage.uploaded == []


def test_upload_failure_is_storage_failure(client, client_account, storage):
    storage.fail_upload = True
    resp = client.post(
        "/api/gallery",
        files={"image": ("front.png", PNG_BYTES, "image/png")},
        headers=client_account["headers"],
    )
    assert resp.status_code == 500
    assert resp.json()["error"] == "StorageFailure"


def test_product_create_and_photo_replacement_order(client, client_account, storage):
    headers = client_account["headers"]
    created = client.post(
        "/api/products",
        data={"product_name": "Gold card", "price": "49.5", "details": "Metal NFC card"},
        files={"product_photo": ("card.png", PNG_BYTES, "image/png")},
        headers=headers,
    )
    assert created.status_code == 201, created.text
    product = created.json()["data"]
    old_url = product["product_photo"]

    replaced = client.post(
        f"/api/products/{product['id']}/image",
        files={"file": ("card2.png", PNG_BYTES, "image/png")},
        headers=headers,
    )
    assert replaced.status_code == 200
    new_url = replaced.json()["data"]["product_photo"]

    assert new_url != old_url
    # New blob uploaded before the old one is deleted
    assert storage.events[-2:] == [("upload", new_url), ("delete", old_url)]


def test_product_negative_price_rejected(client, client_account, storage):
    resp = client.post(
        "/api/products",
        data={"product_name": "Card", "price": "-1", "details": "x"},
        files={"product_photo": ("card.png", PNG_BYTES, "image/png")},
        headers=client_account["headers"],
    )
    assert resp.status_code == 422
    assert storage.uploaded == []


def test_deleting_item_deletes_its_blob(client, client_account, storage):
    headers = client_account["headers"]
    created = client.post(
        "/api/gallery",
        files={"image": ("front.png", PNG_BYTES, "image/png")},
        headers=headers,
    ).json()["data"]

    resp = client.delete(f"/api/gallery/{created['id']}", headers=headers)
    assert resp.status_code == 200
    assert storage.deleted == [created["image_url"]]


def test_award_image_upload(client, student_account, storage):
    headers = student_account["headers"]
    award = client.post(
        "/api/student-awards",
        json={"title": "Dean's list", "issuer": "State University", "date": "2024-05-01"},
        headers=headers,
    ).json()["data"]
    assert award["image_url"] is None

    resp = client.post(
        f"/api/student-awards/{award['id']}/image",
        files={"file": ("award.png", PNG_BYTES, "image/png")},
        headers=headers,
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["image_url"].startswith(STORAGE_PREFIX + "student-awards/")
    # Nothing to delete on first upload
    assert storage.deleted == []


def test_achievement_accepts_pdf_certificate(client, student_account):
    headers = student_account["headers"]
    item = client.post(
        "/api/student-achievements",
        json={"title": "Hackathon winner"},
        headers=headers,
    ).json()["data"]

    resp = client.post(
        f"/api/student-achievements/{item['id']}/image",
        files={"file": ("cert.pdf", b"%PDF-1.4 test", "application/pdf")},
        headers=headers,
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["certificate_url"].endswith(".pdf")


# ── Appointments ────────────────────────────────────────────────────


APPOINTMENT = {
    "client_name": "Dana",
    "phone": "+91 98765 43210",
    "appointment_date": "2026-11-02T10:30:00",
    "notes": "Card redesign",
}


def test_appointment_notifies_owner(client, client_account, outbox):
    resp = client.post("/api/appointments", json=APPOINTMENT, headers=client_account["headers"])
    assert resp.status_code == 201
    assert len(outbox.sent) == 1
    assert outbox.sent[0]["to_email"] == "alice@cards.dev"
    assert "Dana" in outbox.sent[0]["html_body"]


def test_appointment_survives_mail_failure(client, client_account, outbox):
    outbox.fail = True
    resp = client.post("/api/appointments", json=APPOINTMENT, headers=client_account["headers"])
    assert resp.status_code == 201

    mine = client.get("/api/appointments/my", headers=client_account["headers"])
    assert len(mine.json()["data"]) == 1


def test_appointment_notification_escapes_html(client, client_account, outbox):
    body = {**APPOINTMENT, "client_name": "<script>alert(1)</script>"}
    client.post("/api/appointments", json=body, headers=client_account["headers"])
    html = outbox.sent[0]["html_body"]
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_appointment_date_without_timezone_is_utc(client, client_account):
    headers = client_account["headers"]
    created = client.post("/api/appointments", json=APPOINTMENT, headers=headers)
    assert created.status_code == 201, created.text
    assert created.json()["data"]["appointment_date"].startswith("2026-11-02T10:30:00")

    item_id = created.json()["data"]["id"]
    moved = client.put(
        f"/api/appointments/{item_id}",
        json={"appointment_date": "2026-11-03T09:00:00"},
        headers=headers,
    )
    assert moved.status_code == 200, moved.text
    assert moved.json()["data"]["appointment_date"].startswith("2026-11-03T09:00:00")
