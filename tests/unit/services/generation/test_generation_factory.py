"""Unit tests for building the generation service from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from recipe_ai.core.config import Settings
from recipe_ai.llm.client.anthropic import AnthropicProvider
from recipe_ai.schemas.enums import ProviderStatus
from recipe_ai.services.generation import (
    ProviderUnavailableError,
    create_generation_service,
)


if TYPE_CHECKING:
    from recipe_ai.storage.memory import MemoryStore


pytestmark = pytest.mark.unit


class TestCreateGenerationService:
    """Tests for create_generation_service function."""

    def test_wires_configured_provider(self, memory_store: MemoryStore) -> None:
        """Should attach the provider and apply the toggles."""
        settings = Settings(
            ANTHROPIC_API_KEY="sk-ant-test",
            llm={
                "enabled": True,
                "provider": "anthropic",
                "cache": {"enabled": False, "ttl": 60},
            },
        )

        service = create_generation_service(settings, memory_store)

        assert isinstance(service.provider, AnthropicProvider)
        assert service.provider_status == ProviderStatus.ACTIVE
        assert service.cache_enabled is False
        assert service.fallback_enabled is True

    def test_missing_key_degrades_to_fallback(self, memory_store: MemoryStore) -> None:
        """Should run fallback-only when the provider cannot be built."""
        settings = Settings(
            ANTHROPIC_API_KEY="",
            llm={"enabled": True, "provider": "anthropic"},
        )

        service = create_generation_service(settings, memory_store)

        assert service.provider is None
        assert service.provider_status == ProviderStatus.FALLBACK

    def test_missing_key_without_fallback_raises(
        self, memory_store: MemoryStore
    ) -> None:
        """Should refuse to build a service that can never answer."""
        settings = Settings(
            GROQ_API_KEY="",
            llm={"enabled": True, "provider": "groq", "fallback": {"enabled": False}},
        )

        with pytest.raises(ProviderUnavailableError) as exc_info:
            create_generation_service(settings, memory_store)

        assert exc_info.value.provider == "groq"

    def test_ai_disabled_skips_provider(self, memory_store: MemoryStore) -> None:
        """Should not build a provider when AI generation is off."""
        settings = Settings(
            ANTHROPIC_API_KEY="sk-ant-test",
            llm={"enabled": False},
        )

        service = create_generation_service(settings, memory_store)

        assert service.provider is None
        assert service.ai_enabled is False

    async def test_applies_rate_limits(self, memory_store: MemoryStore) -> None:
        """Should size caller budgets from the rate limiting settings."""
        settings = Settings(
            llm={"enabled": False},
            rate_limiting={"requests_per_minute": 3, "requests_per_hour": 50},
        )

        service = create_generation_service(settings, memory_store)
        stats = await service.get_usage_stats("alice")

        assert stats.remaining_requests == 3
