"""Tests for health check and status endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine

from core.config import Settings


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_200(self, client: AsyncClient) -> None:
        """Test that health endpoint returns 200 OK."""
        response = await client.get("/health")

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_health_returns_correct_structure(self, client: AsyncClient) -> None:
        """Test that health endpoint returns expected structure."""
        data = (await client.get("/health")).json()

        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert "timestamp" in data
        assert "environment" in data

    @pytest.mark.asyncio
    async def test_environment_comes_from_app_settings(self, engine: AsyncEngine) -> None:
        from main import create_app

        app = create_app(app_settings=Settings(app_env="staging"), engine=engine)

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            basic = (await c.get("/health")).json()
            detailed = (await c.get("/health/detailed")).json()

        assert basic["environment"] == "staging"
        assert detailed["environment"] == "staging"

    @pytest.mark.asyncio
    async def test_responses_carry_request_id(self, client: AsyncClient) -> None:
        response = await client.get("/health", headers={"X-Request-ID": "probe-1"})

        assert response.headers["x-request-id"] == "probe-1"
        assert response.headers["x-content-type-options"] == "nosniff"


class TestDetailedHealthEndpoint:
    @pytest.mark.asyncio
    async def test_reports_database_healthy(self, client: AsyncClient) -> None:
        data = (await client.get("/health/detailed")).json()

        assert data["status"] == "healthy"
        assert data["database"] == "healthy"


class TestStatusEndpoint:
    @pytest.mark.asyncio
    async def test_empty_directory(self, client: AsyncClient) -> None:
        response = await client.get("/status")

        assert response.status_code == 200
        data = response.json()
        assert data["server"] == "running"
        assert data["database"] == {"connected": True, "dialect": "sqlite"}
        assert data["stats"]["totalProfiles"] == 0
        assert data["stats"]["averageRate"] == 0.0

    @pytest.mark.asyncio
    async def test_stats_reflect_profiles(self, client: AsyncClient) -> None:
        for i, (years, rate, available) in enumerate([(2, 40, True), (6, 80, False)]):
            response = await client.post(
                "/api/v1/profiles",
                json={
                    "name": f"Developer {i}",
                    "email": f"dev{i}@example.com",
                    "location": "Remote",
                    "skills": ["Python"],
                    "experienceYears": years,
                    "hourlyRate": rate,
                    "availableForWork": available,
                },
            )
            assert response.status_code == 201

        stats = (await client.get("/status")).json()["stats"]

        assert stats["totalProfiles"] == 2
        assert stats["availableProfiles"] == 1
        assert stats["unavailableProfiles"] == 1
        assert stats["averageExperience"] == 4.0
        assert stats["minRate"] == 40.0
        assert stats["maxRate"] == 80.0
