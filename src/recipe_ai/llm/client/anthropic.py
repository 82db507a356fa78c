"""HTTP client for the Anthropic Messages API."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from recipe_ai.llm.client.base import BaseProvider
from recipe_ai.llm.exceptions import LLMConfigurationError, LLMValidationError
from recipe_ai.llm.models import (
    AnthropicMessageRequest,
    AnthropicMessageResponse,
    CompletionResult,
    GenerationOptions,
)


class AnthropicProvider(BaseProvider):
    """Async provider for Claude models over the Messages API.

    Attributes:
        base_url: Anthropic API base URL.
        api_version: Value of the ``anthropic-version`` header.
    """

    provider_name = "anthropic"

    DEFAULT_BASE_URL = "https://api.anthropic.com"
    DEFAULT_MODEL = "claude-sonnet-4-20250514"
    DEFAULT_API_VERSION = "2023-06-01"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = 30.0,
        max_retries: int = 2,
    ) -> None:
        """Initialize the Anthropic provider.

        Args:
            api_key: Anthropic API key.
            model: Default model name.
            base_url: API base URL.
            api_version: Messages API version header.
            timeout: Per-call deadline in seconds (default: 30).
            max_retries: Retries for transient failures (default: 2).

        Raises:
            LLMConfigurationError: If no API key is given.
        """
        if not api_key:
            msg = "Anthropic API key is required"
            raise LLMConfigurationError(msg)
        super().__init__(model=model, timeout=timeout, max_retries=max_retries)
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version

    @property
    def endpoint_url(self) -> str:
        return f"{self.base_url}/v1/messages"

    def _headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.api_key,
            "anthropic-version": self.api_version,
            "Content-Type": "application/json",
        }

    def _build_payload(
        self, prompt: str, options: GenerationOptions, model: str
    ) -> dict[str, Any]:
        request = AnthropicMessageRequest(
            model=model,
            max_tokens=options.max_tokens,
            temperature=options.temperature,
            system=options.system_prompt,
            messages=[{"role": "user", "content": prompt}],
        )
        return request.model_dump(exclude_none=True)

    def _parse_completion(self, body: Any) -> CompletionResult:
        try:
            response = AnthropicMessageResponse.model_validate(body)
        except ValidationError as e:
            msg = f"Unexpected Anthropic response: {e.error_count()} error(s)"
            raise LLMValidationError(msg) from e

        return CompletionResult(
            text=response.text,
            model=response.model,
            prompt_tokens=response.usage.input_tokens,
            completion_tokens=response.usage.output_tokens,
        )
