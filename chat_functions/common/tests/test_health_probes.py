from fastapi.testclient import TestClient

from chat_functions import __version__
from chat_functions.server import create_app


def test_health_is_always_ok(monkeypatch):
    monkeypatch.setenv("MESSAGES_BACKEND", "redis")
    client = TestClient(create_app())
    body = client.get("/health").json()
    assert body["status"] == "ok"
    assert body["version"] == __version__


def test_ready_with_memory_backend(monkeypatch):
    monkeypatch.setenv("MESSAGES_BACKEND", "memory")
    client = TestClient(create_app())
    resp = client.get("/ready")
    assert resp.status_code == 200
    assert resp.json()["backend"] == "memory"


def test_ready_returns_503_when_store_cannot_be_built(monkeypatch):
    monkeypatch.setenv("MESSAGES_BACKEND", "redis")
    client = TestClient(create_app())
    resp = client.get("/ready")
    assert resp.status_code == 503
    error = resp.json()["error"]
    assert error["code"] == "unavailable"
    assert error["details"]["backend"] == "redis"
