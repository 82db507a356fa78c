"""LLM integration module.

Provider clients for hosted recipe generation, their prompts, the recipe
response parser and token pricing.
"""

from recipe_ai.llm.client import (
    AnthropicProvider,
    GenerationProvider,
    GroqProvider,
    create_provider,
)
from recipe_ai.llm.exceptions import (
    LLMConfigurationError,
    LLMError,
    LLMParseError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTimeoutError,
    LLMUnavailableError,
    LLMValidationError,
)
from recipe_ai.llm.models import CompletionResult, GenerationOptions, ProviderResult
from recipe_ai.llm.prompts.base import BasePrompt


__all__ = [
    "AnthropicProvider",
    "BasePrompt",
    "CompletionResult",
    "GenerationOptions",
    "GenerationProvider",
    "GroqProvider",
    "LLMConfigurationError",
    "LLMError",
    "LLMParseError",
    "LLMRateLimitError",
    "LLMResponseError",
    "LLMTimeoutError",
    "LLMUnavailableError",
    "LLMValidationError",
    "ProviderResult",
    "create_provider",
]
