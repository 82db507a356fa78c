"""Unit tests for provider construction from settings."""

from __future__ import annotations

import pytest

from recipe_ai.core.config import Settings
from recipe_ai.llm.client.anthropic import AnthropicProvider
from recipe_ai.llm.client.factory import create_provider
from recipe_ai.llm.client.groq import GroqProvider
from recipe_ai.llm.exceptions import LLMConfigurationError


pytestmark = pytest.mark.unit


class TestCreateProvider:
    """Tests for create_provider function."""

    def test_builds_anthropic(self) -> None:
        """Should build the Anthropic provider from its settings block."""
        settings = Settings(
            ANTHROPIC_API_KEY="sk-ant-test",
            llm={
                "provider": "anthropic",
                "anthropic": {"model": "claude-3-5-haiku-20241022", "timeout": 12.0},
            },
        )

        provider = create_provider(settings)

        assert isinstance(provider, AnthropicProvider)
        assert provider.model == "claude-3-5-haiku-20241022"
        assert provider.timeout == 12.0
        assert provider.api_key == "sk-ant-test"

    def test_builds_groq(self) -> None:
        """Should build the Groq provider with its own key."""
        settings = Settings(
            GROQ_API_KEY="gsk-test",
            llm={"provider": "groq"},
        )

        provider = create_provider(settings)

        assert isinstance(provider, GroqProvider)
        assert provider.api_key == "gsk-test"
        assert provider.name == "groq"

    def test_missing_key(self) -> None:
        """Should raise when the selected provider has no key."""
        settings = Settings(ANTHROPIC_API_KEY="", llm={"provider": "anthropic"})

        with pytest.raises(LLMConfigurationError):
            create_provider(settings)
