"""Base class for LLM prompts.

Provides a standardized interface for defining prompts with:
- Typed input variables
- Per-prompt generation options
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from recipe_ai.llm.models import GenerationOptions


class BasePrompt(ABC):
    """Base class for all LLM prompts.

    Centralizes prompt definitions to:
    - Prevent scattered hardcoded strings
    - Enable prompt testing without a provider
    - Pin the sampling options each task needs

    Example:
        ```python
        class TitlePrompt(BasePrompt):
            temperature = 0.9
            max_tokens = 200

            def format(self, cuisine: str) -> str:
                return f"Suggest a {cuisine} dish title."
        ```
    """

    system_prompt: ClassVar[str | None] = None
    """Optional system prompt; the provider default applies when None."""

    temperature: ClassVar[float] = 0.7
    """Sampling temperature."""

    max_tokens: ClassVar[int] = 2000
    """Maximum tokens to generate."""

    timeout_ms: ClassVar[int | None] = None
    """Per-call deadline (None = client default)."""

    @abstractmethod
    def format(self, **kwargs: Any) -> str:
        """Format the prompt template with input variables.

        Args:
            **kwargs: Variables to substitute into template.

        Returns:
            Formatted prompt string ready for the provider.
        """
        ...

    @property
    def name(self) -> str:
        """Prompt identifier for logging."""
        return self.__class__.__name__

    def get_options(self) -> GenerationOptions:
        """Get generation options for this prompt."""
        return GenerationOptions(
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            timeout_ms=self.timeout_ms,
            system_prompt=self.system_prompt,
        )
