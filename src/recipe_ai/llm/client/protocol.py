"""Generation provider protocol.

Defines the interface every hosted model backend implements so the
orchestrator can swap providers without knowing their wire formats.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from recipe_ai.llm.models import (
        CompletionResult,
        GenerationOptions,
        ProviderResult,
    )


@runtime_checkable
class GenerationProvider(Protocol):
    """Protocol for recipe generation providers.

    Key methods:
    - generate: Recipe generation; failures come back as values
    - complete: Raw text completion; raises LLMError subclasses
    - is_healthy: Low-cost liveness probe
    - initialize/shutdown: Lifecycle management for connection pools
    """

    @property
    def name(self) -> str:
        """Provider identifier used in metadata and pricing."""
        ...

    async def initialize(self) -> None:
        """Initialize client resources (HTTP connections, etc.)."""
        ...

    async def shutdown(self) -> None:
        """Release client resources."""
        ...

    async def complete(
        self,
        prompt: str,
        options: GenerationOptions | None = None,
    ) -> CompletionResult:
        """Return raw completion text.

        Raises:
            LLMUnavailableError: Service unreachable.
            LLMTimeoutError: Deadline exceeded.
            LLMResponseError: HTTP error from service.
            LLMRateLimitError: Provider throttled the call.
        """
        ...

    async def generate(
        self,
        prompt: str,
        options: GenerationOptions | None = None,
    ) -> ProviderResult:
        """Generate and parse a recipe. Never raises for provider failures."""
        ...

    async def is_healthy(self) -> bool:
        """Return True if a minimal completion succeeds."""
        ...

    def estimate_cost(self, prompt: str) -> float:
        """Estimated cost in US cents of generating a recipe for a prompt."""
        ...
