from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from family_budget.core.config import Settings
from family_budget.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(_env_file=None, database_url=f"sqlite:///{tmp_path / 'budget.db'}")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    # Entering the client runs the real start-up: connect, migrate, seed.
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(client: TestClient, app: FastAPI) -> Iterator[Session]:
    session = app.state.database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_category(client: TestClient):
    def _make(**overrides) -> dict:
        payload = {"name": "Test", "type": "expense"}
        payload.update(overrides)
        resp = client.post("/api/categories", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _make
