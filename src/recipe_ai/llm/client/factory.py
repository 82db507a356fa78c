"""Provider registry and construction from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipe_ai.core.config import LLMProvider
from recipe_ai.llm.client.anthropic import AnthropicProvider
from recipe_ai.llm.client.groq import GroqProvider
from recipe_ai.llm.exceptions import LLMConfigurationError


if TYPE_CHECKING:
    from collections.abc import Callable

    from recipe_ai.core.config import Settings
    from recipe_ai.llm.client.protocol import GenerationProvider


def _build_anthropic(settings: Settings) -> GenerationProvider:
    config = settings.llm.anthropic
    return AnthropicProvider(
        api_key=settings.provider_api_key or "",
        model=config.model,
        base_url=config.url,
        api_version=config.api_version,
        timeout=config.timeout,
        max_retries=config.max_retries,
    )


def _build_groq(settings: Settings) -> GenerationProvider:
    config = settings.llm.groq
    return GroqProvider(
        api_key=settings.provider_api_key or "",
        model=config.model,
        base_url=config.url,
        timeout=config.timeout,
        max_retries=config.max_retries,
        requests_per_minute=config.requests_per_minute,
    )


PROVIDER_BUILDERS: dict[str, Callable[[Settings], GenerationProvider]] = {
    LLMProvider.ANTHROPIC: _build_anthropic,
    LLMProvider.GROQ: _build_groq,
}


def create_provider(settings: Settings) -> GenerationProvider:
    """Build the configured provider.

    Raises:
        LLMConfigurationError: If the provider is unknown or its key is missing.
    """
    name = str(settings.llm.provider)
    builder = PROVIDER_BUILDERS.get(name)
    if builder is None:
        msg = f"Unknown LLM provider: {name}"
        raise LLMConfigurationError(msg)
    return builder(settings)
