"""Tests for app-level endpoints and the error envelope."""


def test_health_check(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_debug_routes_lists_prefixes(client):
    resp = client.get("/api/debug/routes")
    routes = resp.json()["routes"]
    for prefix in ("/api/auth", "/api/password", "/api/profile", "/api/student-awards", "/api/mail"):
        assert prefix in routes


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/api/does-not-exist")
    assert resp.status_code == 404
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == "HTTP404"


def test_malformed_id_is_validation_error(client, client_account):
    resp = client.get("/api/services/not-a-uuid", headers=client_account["headers"])
    assert resp.status_code == 422
    assert resp.json()["error"] == "ValidationError"
