"""API tests for health endpoints."""

from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from cotacao import __version__
from cotacao.api.main import app


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestHealthEndpoints:
    async def test_health(self, client: AsyncClient):
        response = await client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__
        assert data["uptime_seconds"] >= 0

    async def test_root_health(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_request_headers(self, client: AsyncClient):
        response = await client.get("/health")
        assert len(response.headers["X-Request-ID"]) == 8
        assert "X-Response-Time" in response.headers

    async def test_db_health_unhealthy(self, client: AsyncClient):
        with patch(
            "cotacao.infrastructure.storage.sqlite.get_connection",
            side_effect=RuntimeError("no database"),
        ):
            response = await client.get("/api/health/db")
        assert response.status_code == 200
        assert response.json()["status"] == "unhealthy"

    async def test_unknown_route(self, client: AsyncClient):
        response = await client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"
