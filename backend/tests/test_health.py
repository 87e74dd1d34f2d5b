from __future__ import annotations

from family_budget.api.deps import get_database
from family_budget.db.session import Database


class _StubDatabase:
    def __init__(self, state: str, settings) -> None:
        self.state = state
        self.settings = settings

    def ping(self) -> str:
        return self.state


def test_health_connected(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200

    body = resp.json()
    assert body["status"] == "ok"
    assert body["database"] == "connected"
    assert body["version"] == "1.0.0"
    assert body["timestamp"]


def test_health_disconnected(client, app, settings):
    app.dependency_overrides[get_database] = lambda: _StubDatabase("disconnected", settings)
    try:
        resp = client.get("/api/health")
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    body = resp.json()
    assert body["database"] == "disconnected"
    assert body["status"] == "ok"
    assert set(body) == {"status", "timestamp", "database", "version"}


def test_ping_reports_error_without_engine(settings):
    assert Database(settings).ping() == "error"


def test_ping_after_dispose(client, app):
    database = app.state.database
    assert database.ping() == "connected"
    database.dispose()
    assert database.ping() == "error"
