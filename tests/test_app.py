from fastapi.testclient import TestClient

from expense_api.core.config import Settings
from expense_api.main import create_app


def test_root_greeting(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Expense Tracker API", "version": "0.1.0"}


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/api/v1/nope")
    assert resp.status_code == 404
    body = resp.json()
    assert body["success"] is False
    assert body["error"]["code"] == "NOT_FOUND"
    assert body["error"]["message"] == "No route for GET /api/v1/nope"


def test_wrong_method_uses_error_envelope(client):
    resp = client.get("/api/v1/expenses")
    assert resp.status_code == 405
    assert resp.json()["error"]["code"] == "METHOD_NOT_ALLOWED"


def test_request_id_echoed(client):
    resp = client.get("/", headers={"X-Request-ID": "abc-123"})
    assert resp.headers["X-Request-ID"] == "abc-123"


def test_request_id_generated_when_absent(client):
    assert client.get("/").headers["X-Request-ID"]


def test_apps_do_not_share_stores(settings):
    payload = {"title": "Test", "amount": 10, "category": "Test", "date": "2024-01-15"}
    first = create_app(settings_override=settings)
    second = create_app(settings_override=settings)
    TestClient(first).post("/api/v1/expenses", json=payload)
    assert len(first.state.store) == 1
    assert len(second.state.store) == 0


def test_custom_api_prefix():
    app = create_app(settings_override=Settings(api_prefix="v2/"))
    payload = {"title": "Test", "amount": 10, "category": "Test", "date": "2024-01-15"}
    assert TestClient(app).post("/v2/expenses", json=payload).status_code == 201
