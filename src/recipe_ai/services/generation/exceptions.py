"""Exceptions for the recipe generation service.

Per-request failures are returned as GenerationResults; these exceptions
cover lifecycle problems only.
"""

from __future__ import annotations


class GenerationServiceError(Exception):
    """Base exception for generation service errors."""


class ProviderUnavailableError(GenerationServiceError):
    """Raised at startup when no usable provider exists and fallback is disabled.

    This can occur when:
    - The provider cannot be constructed (unknown name, missing API key)
    - The provider fails its startup health probe
    """

    def __init__(self, message: str, provider: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            provider: Name of the provider that was unavailable.
        """
        self.provider = provider
        super().__init__(message)
