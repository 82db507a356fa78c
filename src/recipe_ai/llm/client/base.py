"""Shared behaviour of HTTP generation providers.

Subclasses describe their endpoint, headers and wire format; this base class
owns the connection pool, the retry loop, the overall deadline and the
conversion of completions into ProviderResults.
"""

from __future__ import annotations

import asyncio
import time
from abc import ABC, abstractmethod
from typing import Any, ClassVar

import httpx

from recipe_ai.llm.exceptions import (
    LLMError,
    LLMParseError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTimeoutError,
    LLMUnavailableError,
    LLMValidationError,
)
from recipe_ai.llm.models import (
    CompletionResult,
    GenerationOptions,
    ProviderResult,
    coerce_options,
)
from recipe_ai.llm.parsing import parse_recipe
from recipe_ai.llm.pricing import calculate_cost, estimate_cost
from recipe_ai.llm.prompts.recipe_generation import DEFAULT_SYSTEM_PROMPT
from recipe_ai.observability.logging import get_logger
from recipe_ai.observability.metrics import record_tokens
from recipe_ai.schemas.enums import FailureKind
from recipe_ai.schemas.generation import TokenUsage, UsageMetadata


logger = get_logger(__name__)

HEALTH_CHECK_PROMPT = "Test"
HEALTH_CHECK_MAX_TOKENS = 10


class BaseProvider(ABC):
    """Base class for httpx-backed providers.

    Attributes:
        model: Default model name.
        timeout: Per-call deadline in seconds when options carry none.
        max_retries: Retries for transient transport failures.
    """

    provider_name: ClassVar[str]

    def __init__(
        self,
        model: str,
        timeout: float = 30.0,
        max_retries: int = 2,
    ) -> None:
        self.model = model
        self.timeout = timeout
        self.max_retries = max_retries
        self._http_client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        return self.provider_name

    @property
    @abstractmethod
    def endpoint_url(self) -> str:
        """URL that completions are POSTed to."""

    @abstractmethod
    def _headers(self) -> dict[str, str]:
        """Auth and content headers for every request."""

    @abstractmethod
    def _build_payload(
        self, prompt: str, options: GenerationOptions, model: str
    ) -> dict[str, Any]:
        """Provider request body for one completion."""

    @abstractmethod
    def _parse_completion(self, body: Any) -> CompletionResult:
        """Convert a provider response body into a CompletionResult.

        Raises:
            LLMValidationError: If the body does not match the wire model.
        """

    async def _before_attempt(self) -> None:
        """Hook run before each HTTP attempt (e.g. client-side throttling)."""

    async def initialize(self) -> None:
        """Initialize the HTTP client with auth headers."""
        if self._http_client is not None:
            return

        self._http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            headers=self._headers(),
            limits=httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
            ),
        )
        logger.info(
            f"{type(self).__name__} initialized",
            model=self.model,
            timeout=self.timeout,
        )

    async def shutdown(self) -> None:
        """Close the HTTP client and release connections."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            logger.debug(f"{type(self).__name__} shutdown")

    async def _execute_with_retry(self, payload: dict[str, Any]) -> Any:
        """POST with retry logic for transient failures; returns decoded JSON."""
        if self._http_client is None:
            await self.initialize()

        assert self._http_client is not None

        last_exception: Exception | None = None

        for attempt in range(self.max_retries + 1):
            await self._before_attempt()

            try:
                response = await self._http_client.post(self.endpoint_url, json=payload)

                if response.status_code == 429:
                    retry_after = response.headers.get("retry-after", "60")
                    msg = f"{self.name} rate limit exceeded, retry after {retry_after}s"
                    raise LLMRateLimitError(msg)

                response.raise_for_status()
                try:
                    return response.json()
                except ValueError as e:
                    logger.warning(
                        "Provider returned a non-JSON body",
                        provider=self.name,
                        content_type=response.headers.get("content-type"),
                    )
                    msg = f"{self.name} returned a non-JSON response body"
                    raise LLMValidationError(msg) from e

            except httpx.TimeoutException as e:
                last_exception = e
                logger.warning(
                    "Provider request timeout",
                    provider=self.name,
                    attempt=attempt + 1,
                    max_retries=self.max_retries,
                )
                if attempt < self.max_retries:
                    continue
                msg = f"{self.name} timeout after {self.timeout}s"
                raise LLMTimeoutError(msg) from e

            except httpx.HTTPStatusError as e:
                logger.warning(
                    "Provider request failed",
                    provider=self.name,
                    status_code=e.response.status_code,
                )
                msg = f"{self.name} returned {e.response.status_code}"
                raise LLMResponseError(msg) from e

            except httpx.RequestError as e:
                last_exception = e
                logger.warning(
                    "Provider connection error",
                    provider=self.name,
                    attempt=attempt + 1,
                    max_retries=self.max_retries,
                    error=str(e),
                )
                if attempt < self.max_retries:
                    continue
                msg = f"Cannot connect to {self.name}: {e}"
                raise LLMUnavailableError(msg) from e

        msg = "Max retries exceeded"
        raise LLMUnavailableError(msg) from last_exception

    async def complete(
        self,
        prompt: str,
        options: GenerationOptions | dict[str, Any] | None = None,
    ) -> CompletionResult:
        """Run one completion under an overall deadline.

        Raises:
            LLMTimeoutError: If the deadline passes, retries included.
            LLMError: Any other provider failure.
        """
        opts = coerce_options(options)
        model = opts.model or self.model
        deadline = opts.timeout_ms / 1000 if opts.timeout_ms else self.timeout
        payload = self._build_payload(prompt, opts, model)

        try:
            async with asyncio.timeout(deadline):
                body = await self._execute_with_retry(payload)
        except TimeoutError as e:
            msg = f"{self.name} call exceeded {deadline}s deadline"
            raise LLMTimeoutError(msg) from e

        return self._parse_completion(body)

    async def generate(
        self,
        prompt: str,
        options: GenerationOptions | dict[str, Any] | None = None,
    ) -> ProviderResult:
        """Generate a recipe; provider and parse failures are returned, not raised."""
        opts = coerce_options(options)
        if opts.system_prompt is None:
            opts = opts.model_copy(update={"system_prompt": DEFAULT_SYSTEM_PROMPT})
        model = opts.model or self.model
        start = time.perf_counter()

        try:
            completion = await self.complete(prompt, opts)
        except LLMError as e:
            logger.warning(
                "Provider generation failed",
                provider=self.name,
                model=model,
                error_type=type(e).__name__,
                error=str(e),
            )
            return ProviderResult(
                success=False,
                error=str(e),
                failure=FailureKind.GENERATION_FAILED,
                metadata=self._metadata(model, start),
            )

        usage = TokenUsage(
            prompt_tokens=completion.prompt_tokens,
            completion_tokens=completion.completion_tokens,
        )
        cost = calculate_cost(
            self.name,
            completion.model,
            completion.prompt_tokens,
            completion.completion_tokens,
        )
        record_tokens(self.name, completion.prompt_tokens, completion.completion_tokens)
        metadata = self._metadata(completion.model, start, usage=usage, cost=cost)

        try:
            recipe = parse_recipe(completion.text)
        except LLMParseError as e:
            logger.warning(
                "Failed to parse recipe from provider response",
                provider=self.name,
                error=str(e),
                raw_response=completion.text[:500],
            )
            return ProviderResult(
                success=False,
                error=str(e),
                failure=FailureKind.PARSE_ERROR,
                usage=usage,
                cost=cost,
                metadata=metadata,
            )

        return ProviderResult(
            success=True,
            recipe=recipe,
            usage=usage,
            cost=cost,
            metadata=metadata,
        )

    async def is_healthy(self) -> bool:
        try:
            await self.complete(
                HEALTH_CHECK_PROMPT,
                GenerationOptions(max_tokens=HEALTH_CHECK_MAX_TOKENS),
            )
        except LLMError as e:
            logger.warning("Provider health check failed", provider=self.name, error=str(e))
            return False
        return True

    def estimate_cost(self, prompt: str) -> float:
        return estimate_cost(self.name, self.model, prompt)

    def _metadata(
        self,
        model: str,
        start: float,
        *,
        usage: TokenUsage | None = None,
        cost: float | None = None,
    ) -> UsageMetadata:
        return UsageMetadata(
            model=model,
            provider=self.name,
            response_time_ms=int((time.perf_counter() - start) * 1000),
            cache_hit=False,
            tokens=usage,
            cost_estimate=cost,
        )
