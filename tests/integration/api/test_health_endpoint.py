"""Integration tests for the liveness and readiness probes."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock, patch

import pytest


if TYPE_CHECKING:
    from httpx import AsyncClient


pytestmark = pytest.mark.integration

PING = "recipes_api.clients.ingredients_catalog.client.async_ping"


class TestHealth:
    """Tests for GET /health."""

    async def test_reports_healthy(self, client: AsyncClient) -> None:
        """Should answer healthy with version and environment."""
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "test"
        assert body["version"]
        assert body["timestamp"]


class TestReadiness:
    """Tests for GET /ready."""

    async def test_ready_with_catalog_reachable(self, client: AsyncClient) -> None:
        """Should report each dependency when everything answers."""
        with patch(PING, new=AsyncMock(return_value=MagicMock(is_alive=True))):
            response = await client.get("/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["dependencies"] == {
            "database": "healthy",
            "redis": "not_configured",
            "ingredients_catalog": "healthy",
        }

    async def test_catalog_down_is_informational(self, client: AsyncClient) -> None:
        """Should stay ready when only the catalog ping fails."""
        with patch(PING, new=AsyncMock(side_effect=OSError("no route"))):
            response = await client.get("/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["dependencies"]["ingredients_catalog"] == "unhealthy"
