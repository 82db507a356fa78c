"""Recipe generation orchestrator.

Provides methods for:
- Rate-limited, cached, quality-gated recipe generation with local fallback
- Single-call recipe enhancement
- Recipe title suggestions
- Usage statistics and cache management

Each generation moves strictly through RateCheck, CacheLookup,
ProviderAttempt, QualityGate and then Accept or FallbackAttempt. Only a
denied admission or a disabled fallback surface as failures; every other
problem is absorbed by the fallback path and recorded as its reason.
"""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING

from recipe_ai.llm.exceptions import LLMError
from recipe_ai.llm.models import ProviderResult
from recipe_ai.llm.parsing import parse_string_list
from recipe_ai.llm.prompts.enhancement import RecipeEnhancementPrompt
from recipe_ai.llm.prompts.recipe_generation import RecipeGenerationPrompt
from recipe_ai.llm.prompts.suggestions import RecipeSuggestionPrompt
from recipe_ai.observability.logging import get_logger
from recipe_ai.observability.metrics import record_outcome
from recipe_ai.schemas.enums import EnhancementKind, FailureKind, ProviderStatus
from recipe_ai.schemas.generation import GenerationResult, UsageMetadata, UsageStats
from recipe_ai.services.generation import constants as c
from recipe_ai.services.generation.exceptions import ProviderUnavailableError


if TYPE_CHECKING:
    from recipe_ai.cache.rate_limit import RateLimiter
    from recipe_ai.cache.recipe_cache import RecipeCache
    from recipe_ai.llm.client.protocol import GenerationProvider
    from recipe_ai.schemas.generation import (
        EnhancementFeedback,
        GenerationRequest,
        TokenUsage,
    )
    from recipe_ai.schemas.recipe import Recipe
    from recipe_ai.services.fallback.generator import FallbackGenerator
    from recipe_ai.services.quality.assessor import QualityAssessor
    from recipe_ai.services.usage.tracker import UsageTracker

logger = get_logger(__name__)


class RecipeGenerationService:
    """Orchestrates recipe generation for many concurrent callers.

    Args:
        provider: Hosted generation provider, or None for fallback-only mode.
        cache: Fingerprint cache of accepted provider recipes.
        rate_limiter: Per-caller admission control.
        quality_assessor: Gate applied to provider recipes.
        fallback: Local generator used when the provider path fails.
        usage_tracker: Optional sink notified of accepted generations.
        ai_enabled: When False every request goes straight to fallback.
        cache_enabled: Toggle for cache reads and write-through.
        fallback_enabled: When False provider failures surface to callers.
        cache_ttl: Lifetime of cached recipes in seconds.
    """

    def __init__(
        self,
        provider: GenerationProvider | None,
        cache: RecipeCache,
        rate_limiter: RateLimiter,
        quality_assessor: QualityAssessor,
        fallback: FallbackGenerator,
        usage_tracker: UsageTracker | None = None,
        *,
        ai_enabled: bool = True,
        cache_enabled: bool = True,
        fallback_enabled: bool = True,
        cache_ttl: int | None = None,
    ) -> None:
        self._provider = provider
        self._cache = cache
        self._rate_limiter = rate_limiter
        self._assessor = quality_assessor
        self._fallback = fallback
        self._usage_tracker = usage_tracker
        self.ai_enabled = ai_enabled
        self.cache_enabled = cache_enabled
        self.fallback_enabled = fallback_enabled
        self._cache_ttl = cache_ttl
        self._generation_prompt = RecipeGenerationPrompt()
        self._enhancement_prompt = RecipeEnhancementPrompt()
        self._suggestion_prompt = RecipeSuggestionPrompt()
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def provider(self) -> GenerationProvider | None:
        return self._provider

    @property
    def provider_status(self) -> ProviderStatus:
        if self.ai_enabled and self._provider is not None:
            return ProviderStatus.ACTIVE
        return ProviderStatus.FALLBACK

    async def initialize(self) -> None:
        """Start the provider and verify it with a health probe.

        A provider that fails the probe is dropped and the service runs in
        fallback-only mode, unless fallback is disabled.

        Raises:
            ProviderUnavailableError: If AI is enabled, no healthy provider is
                available and fallback is disabled.
        """
        if not self.ai_enabled:
            logger.info("AI generation disabled, serving fallback recipes only")
            return

        if self._provider is None:
            self._degrade("No generation provider configured", provider=None)
            return

        await self._provider.initialize()
        if await self._provider.is_healthy():
            logger.info("RecipeGenerationService initialized", provider=self._provider.name)
            return

        name = self._provider.name
        await self._provider.shutdown()
        self._provider = None
        self._degrade("Generation provider failed health check", provider=name)

    def _degrade(self, reason: str, provider: str | None) -> None:
        if not self.fallback_enabled:
            raise ProviderUnavailableError(reason, provider=provider)
        logger.warning(f"{reason}, running in fallback-only mode", provider=provider)

    async def shutdown(self) -> None:
        """Wait for pending usage notifications and release the provider."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
        if self._provider is not None:
            await self._provider.shutdown()
        logger.info("RecipeGenerationService shutdown")

    # =========================================================================
    # Generation
    # =========================================================================

    async def generate_recipe(
        self,
        request: GenerationRequest,
        caller_id: str,
    ) -> GenerationResult:
        """Produce a recipe for a caller.

        Args:
            request: What to cook.
            caller_id: Identity the rate limit applies to.

        Returns:
            A successful result with a recipe, or a failed result whose
            failure is ADMISSION_DENIED or FALLBACK_UNAVAILABLE.
        """
        if not self.ai_enabled:
            return await self._fallback_result(request, FailureKind.PROVIDER_UNAVAILABLE)

        if not await self._rate_limiter.check_limit(caller_id):
            record_outcome(FailureKind.ADMISSION_DENIED, "none")
            return GenerationResult.failed(
                FailureKind.ADMISSION_DENIED, c.RATE_LIMIT_MESSAGE
            )

        request_fingerprint = self._cache.key_for(request)
        if self.cache_enabled:
            cached = await self._cache.get(request_fingerprint)
            if cached is not None:
                logger.debug("Recipe cache hit", caller_id=caller_id)
                record_outcome("success", "cache")
                return GenerationResult(
                    success=True,
                    recipe=cached,
                    metadata=UsageMetadata(
                        model=c.CACHE_MODEL,
                        provider=c.CACHE_PROVIDER,
                        response_time_ms=0,
                        cache_hit=True,
                        cost_estimate=0,
                    ),
                )

        if self._provider is None:
            return await self._fallback_result(request, FailureKind.PROVIDER_UNAVAILABLE)

        provider_result = await self._attempt_provider(request)
        if not provider_result.success or provider_result.recipe is None:
            reason = provider_result.failure or FailureKind.GENERATION_FAILED
            return await self._fallback_result(request, reason)

        quality = self._assessor.assess(provider_result.recipe, request)
        if not quality.accepted:
            logger.info(
                "Provider recipe rejected by quality gate",
                caller_id=caller_id,
                score=round(quality.score, 3),
                issues=quality.issues,
            )
            return await self._fallback_result(request, FailureKind.QUALITY_REJECTED)

        await self._rate_limiter.increment_usage(caller_id)
        if self.cache_enabled:
            await self._cache.set(
                request_fingerprint, provider_result.recipe, ttl=self._cache_ttl
            )
        self._track_usage(caller_id, provider_result.usage, provider_result.cost)

        record_outcome("success", "provider")
        logger.info(
            "Recipe generated",
            caller_id=caller_id,
            provider=provider_result.metadata.provider,
            score=round(quality.score, 3),
            response_time_ms=provider_result.metadata.response_time_ms,
        )
        return GenerationResult(
            success=True,
            recipe=provider_result.recipe,
            metadata=provider_result.metadata,
        )

    async def _attempt_provider(self, request: GenerationRequest) -> ProviderResult:
        assert self._provider is not None
        prompt = self._generation_prompt.format(request=request)
        try:
            return await self._provider.generate(
                prompt, self._generation_prompt.get_options()
            )
        except Exception as e:
            logger.exception("Provider raised during generation", error=str(e))
            return self._failed_provider_result(str(e))

    def _failed_provider_result(self, error: str) -> ProviderResult:
        assert self._provider is not None
        return ProviderResult(
            success=False,
            error=error,
            failure=FailureKind.GENERATION_FAILED,
            metadata=UsageMetadata(model="unknown", provider=self._provider.name),
        )

    async def _fallback_result(
        self,
        request: GenerationRequest,
        reason: FailureKind,
    ) -> GenerationResult:
        if not self.fallback_enabled:
            logger.warning("Generation failed with fallback disabled", reason=reason)
            record_outcome(FailureKind.FALLBACK_UNAVAILABLE, "none")
            return GenerationResult.failed(
                FailureKind.FALLBACK_UNAVAILABLE, c.FALLBACK_DISABLED_MESSAGE
            )

        recipe = await self._fallback.generate(
            request.ingredients,
            request.cuisine,
            request.servings,
            request.preferences,
        )
        record_outcome(reason, "fallback")
        logger.info("Serving fallback recipe", reason=reason, recipe_id=recipe.id)
        return GenerationResult(
            success=True,
            recipe=recipe,
            fallback_reason=reason,
            metadata=UsageMetadata(
                model=c.FALLBACK_MODEL,
                provider=c.FALLBACK_PROVIDER,
                response_time_ms=c.FALLBACK_RESPONSE_TIME_MS,
                cache_hit=False,
            ),
        )

    def _track_usage(
        self,
        caller_id: str,
        tokens: TokenUsage | None,
        cost: float,
    ) -> None:
        if self._usage_tracker is None:
            return
        task = asyncio.create_task(self._record_usage(caller_id, tokens, cost))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _record_usage(
        self,
        caller_id: str,
        tokens: TokenUsage | None,
        cost: float,
    ) -> None:
        assert self._usage_tracker is not None
        try:
            await self._usage_tracker.record_generation(caller_id, tokens, cost)
        except Exception as e:
            logger.warning("Usage tracking failed", caller_id=caller_id, error=str(e))

    # =========================================================================
    # Enhancement & Suggestions
    # =========================================================================

    async def enhance_recipe(
        self,
        recipe: Recipe,
        enhancement: EnhancementKind,
        feedback: EnhancementFeedback | None = None,
    ) -> GenerationResult:
        """Ask the provider for an improved version of a recipe.

        A single provider call; no cache, rate limit or fallback is involved.
        """
        if not self.ai_enabled or self._provider is None:
            return GenerationResult.failed(
                FailureKind.PROVIDER_UNAVAILABLE, c.ENHANCEMENT_UNAVAILABLE_MESSAGE
            )

        prompt = self._enhancement_prompt.format(
            recipe=recipe, enhancement=enhancement, feedback=feedback
        )
        try:
            result = await self._provider.generate(
                prompt, self._enhancement_prompt.get_options()
            )
        except Exception as e:
            logger.exception("Provider raised during enhancement", error=str(e))
            return GenerationResult.failed(FailureKind.GENERATION_FAILED, str(e))

        if not result.success or result.recipe is None:
            return GenerationResult.failed(
                result.failure or FailureKind.GENERATION_FAILED,
                result.error or "Enhancement failed",
                metadata=result.metadata,
            )

        logger.info("Recipe enhanced", enhancement=str(enhancement), recipe_id=recipe.id)
        return GenerationResult(success=True, recipe=result.recipe, metadata=result.metadata)

    async def suggest_recipes(
        self,
        cuisine: str | None = None,
        mood: str | None = None,
    ) -> list[str]:
        """Return a few recipe titles, falling back to fixed lists."""
        if not self.ai_enabled or self._provider is None:
            return list(c.OFFLINE_SUGGESTIONS)

        prompt = self._suggestion_prompt.format(cuisine=cuisine, mood=mood)
        try:
            completion = await self._provider.complete(
                prompt, self._suggestion_prompt.get_options()
            )
            suggestions = parse_string_list(completion.text)
        except LLMError as e:
            logger.warning("Failed to get recipe suggestions", error=str(e))
            return list(c.FAILED_SUGGESTIONS)
        except Exception as e:
            logger.exception("Provider raised during suggestions", error=str(e))
            return list(c.FAILED_SUGGESTIONS)

        cleaned = [title.strip() for title in suggestions if title.strip()]
        return cleaned or list(c.FAILED_SUGGESTIONS)

    # =========================================================================
    # Administration
    # =========================================================================

    async def get_usage_stats(self, caller_id: str) -> UsageStats:
        return UsageStats(
            remaining_requests=await self._rate_limiter.remaining(caller_id),
            provider_status=self.provider_status,
            cache_enabled=self.cache_enabled,
            ai_enabled=self.ai_enabled,
        )

    async def clear_cache(self) -> int:
        """Drop every cached recipe; returns the number removed."""
        return await self._cache.clear()
