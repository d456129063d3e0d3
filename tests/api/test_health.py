from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from concierge.api.main import create_app
from concierge.boundary.db import get_async_db


@pytest.fixture
def db_session():
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def client(db_session):
    app = create_app()
    app.dependency_overrides[get_async_db] = lambda: db_session
    return TestClient(app)


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_db(client, db_session):
    response = client.get("/api/v1/health/db")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}
    db_session.execute.assert_awaited_once()


def test_health_check_db_unreachable(client, db_session):
    db_session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
    response = client.get("/api/v1/health/db")
    assert response.status_code == 503
    assert response.json() == {"status": "unhealthy", "message": "Database unreachable"}


def test_chat_routes_are_versioned(client):
    paths = set(client.app.openapi()["paths"])
    assert {"/api/v1/chat", "/api/v1/chat/session"} <= paths
