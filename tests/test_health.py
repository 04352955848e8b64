"""Tests for health check and static files."""

import pytest
from httpx import AsyncClient

from src.models.config import JellyfinConfig


class TestHealthCheck:
    """Tests for /health endpoint."""

    @pytest.mark.asyncio
    async def test_health_unconfigured(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["configured"] is False
        assert data["libraries"] == 0
        assert "version" in data

    @pytest.mark.asyncio
    async def test_health_after_index(self, client: AsyncClient, complete_config: JellyfinConfig):
        await client.get("/")

        data = (await client.get("/health")).json()

        assert data["configured"] is True
        assert data["libraries"] == 2


class TestStaticFiles:
    """Tests for static asset serving."""

    @pytest.mark.asyncio
    async def test_static_not_cached(self, client: AsyncClient):
        response = await client.get("/static/js/app.js")

        assert response.status_code == 200
        assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"
        assert response.headers["pragma"] == "no-cache"
        assert response.headers["expires"] == "0"

    @pytest.mark.asyncio
    async def test_pages_not_affected(self, client: AsyncClient):
        response = await client.get("/health")
        assert "pragma" not in response.headers
