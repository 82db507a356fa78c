"""HTTP client for Groq LLM service.

Groq provides fast cloud inference with an OpenAI-compatible API.
"""

from __future__ import annotations

from typing import Any

from aiolimiter import AsyncLimiter
from pydantic import ValidationError

from recipe_ai.llm.client.base import BaseProvider
from recipe_ai.llm.exceptions import LLMConfigurationError, LLMValidationError
from recipe_ai.llm.models import (
    CompletionResult,
    GenerationOptions,
    GroqChatRequest,
    GroqChatResponse,
)


class GroqProvider(BaseProvider):
    """Async provider for Groq-hosted models.

    Attributes:
        base_url: Groq API base URL.
    """

    provider_name = "groq"

    DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
    DEFAULT_MODEL = "llama-3.1-8b-instant"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        max_retries: int = 2,
        requests_per_minute: float = 30.0,
    ) -> None:
        """Initialize the Groq provider.

        Args:
            api_key: Groq API key for authentication.
            model: Default model name.
            base_url: Groq API base URL.
            timeout: Per-call deadline in seconds (default: 30).
            max_retries: Maximum retries for transient failures (default: 2).
            requests_per_minute: Client-side throttle (default: 30, Groq free tier).

        Raises:
            LLMConfigurationError: If no API key is given.
        """
        if not api_key:
            msg = "Groq API key is required"
            raise LLMConfigurationError(msg)
        super().__init__(model=model, timeout=timeout, max_retries=max_retries)
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        # 1 request per (60/rpm) seconds, so there is no initial burst
        self._rate_limiter = AsyncLimiter(1, 60.0 / requests_per_minute)

    @property
    def endpoint_url(self) -> str:
        return f"{self.base_url}/chat/completions"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def _before_attempt(self) -> None:
        await self._rate_limiter.acquire()

    def _build_payload(
        self, prompt: str, options: GenerationOptions, model: str
    ) -> dict[str, Any]:
        messages: list[dict[str, str]] = []
        if options.system_prompt:
            messages.append({"role": "system", "content": options.system_prompt})
        messages.append({"role": "user", "content": prompt})

        request = GroqChatRequest(
            model=model,
            messages=messages,
            temperature=options.temperature,
            max_tokens=options.max_tokens,
        )
        return request.model_dump(exclude_none=True)

    def _parse_completion(self, body: Any) -> CompletionResult:
        try:
            response = GroqChatResponse.model_validate(body)
        except ValidationError as e:
            msg = f"Unexpected Groq response: {e.error_count()} error(s)"
            raise LLMValidationError(msg) from e

        return CompletionResult(
            text=response.first_text(),
            model=response.model,
            prompt_tokens=response.usage.prompt_tokens,
            completion_tokens=response.usage.completion_tokens,
        )
