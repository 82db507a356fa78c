"""Unit tests for health endpoints.

Tests cover:
- Health check endpoint
- Readiness check endpoint
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from recipe_ai.api.v1.endpoints.health import health_check, readiness_check
from recipe_ai.core.config import Settings
from recipe_ai.schemas.enums import ProviderStatus


pytestmark = pytest.mark.unit


@pytest.fixture
def settings() -> Settings:
    return Settings(APP_ENV="test", app={"version": "1.2.3"})


class TestHealthCheck:
    """Tests for health check endpoint."""

    async def test_returns_healthy_status(self, settings: Settings) -> None:
        """Should return healthy status."""
        result = await health_check(settings)

        assert result.status == "healthy"
        assert result.version == "1.2.3"
        assert result.environment == "test"
        assert result.timestamp is not None


class TestReadinessCheck:
    """Tests for readiness check endpoint."""

    async def test_ready_when_store_healthy(self, settings: Settings) -> None:
        """Should report ready with the provider mode."""
        service = MagicMock()
        service.provider_status = ProviderStatus.ACTIVE
        store = MagicMock()
        store.ping = AsyncMock(return_value=True)

        result = await readiness_check(settings, service, store)

        assert result.status == "ready"
        assert result.provider_status == ProviderStatus.ACTIVE
        assert result.dependencies == {"store": "healthy"}

    async def test_fallback_mode_is_still_ready(self, settings: Settings) -> None:
        """Should stay ready when serving fallback recipes only."""
        service = MagicMock()
        service.provider_status = ProviderStatus.FALLBACK
        store = MagicMock()
        store.ping = AsyncMock(return_value=True)

        result = await readiness_check(settings, service, store)

        assert result.status == "ready"
        assert result.provider_status == ProviderStatus.FALLBACK

    async def test_degraded_when_store_down(self, settings: Settings) -> None:
        """Should report degraded when the store does not answer."""
        service = MagicMock()
        service.provider_status = ProviderStatus.ACTIVE
        store = MagicMock()
        store.ping = AsyncMock(return_value=False)

        result = await readiness_check(settings, service, store)

        assert result.status == "degraded"
        assert result.dependencies == {"store": "unhealthy"}

    async def test_degraded_without_store(self, settings: Settings) -> None:
        """Should report degraded before the store is initialized."""
        service = MagicMock()
        service.provider_status = ProviderStatus.FALLBACK

        result = await readiness_check(settings, service, None)

        assert result.status == "degraded"
