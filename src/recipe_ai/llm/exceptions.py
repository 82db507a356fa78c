"""LLM provider exceptions.

These are raised inside the provider clients and converted to failed
ProviderResults at the gateway boundary, so the orchestrator only ever sees
a failure kind, never one of these exceptions.
"""

from __future__ import annotations


class LLMError(Exception):
    """Base exception for LLM provider errors."""


class LLMUnavailableError(LLMError):
    """Raised when the provider cannot be reached.

    This includes connection errors and exhausted retries.
    """


class LLMTimeoutError(LLMUnavailableError):
    """Raised when a provider call exceeds its deadline."""


class LLMResponseError(LLMError):
    """Raised when the provider returns an HTTP error response."""


class LLMValidationError(LLMError):
    """Raised when the provider envelope does not match its wire model."""


class LLMParseError(LLMError):
    """Raised when completion text does not contain a usable recipe object."""


class LLMRateLimitError(LLMError):
    """Raised when the provider rate limits the request."""


class LLMConfigurationError(LLMError):
    """Raised when a provider is misconfigured (missing key, unknown name)."""
