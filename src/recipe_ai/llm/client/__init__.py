"""Generation provider implementations."""

from recipe_ai.llm.client.anthropic import AnthropicProvider
from recipe_ai.llm.client.base import BaseProvider
from recipe_ai.llm.client.factory import create_provider
from recipe_ai.llm.client.groq import GroqProvider
from recipe_ai.llm.client.protocol import GenerationProvider


__all__ = [
    "AnthropicProvider",
    "BaseProvider",
    "GenerationProvider",
    "GroqProvider",
    "create_provider",
]
