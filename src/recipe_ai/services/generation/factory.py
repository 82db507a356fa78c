"""Construction of the generation service from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipe_ai.cache.rate_limit import RateLimiter
from recipe_ai.cache.recipe_cache import RecipeCache
from recipe_ai.llm.client.factory import create_provider
from recipe_ai.llm.exceptions import LLMConfigurationError
from recipe_ai.observability.logging import get_logger
from recipe_ai.services.fallback.generator import TemplateRecipeGenerator
from recipe_ai.services.generation.exceptions import ProviderUnavailableError
from recipe_ai.services.generation.service import RecipeGenerationService
from recipe_ai.services.quality.assessor import QualityAssessor
from recipe_ai.services.usage.tracker import InMemoryUsageTracker


if TYPE_CHECKING:
    from recipe_ai.core.config import Settings
    from recipe_ai.llm.client.protocol import GenerationProvider
    from recipe_ai.storage.protocol import KeyValueStore


logger = get_logger(__name__)


def create_generation_service(
    settings: Settings,
    store: KeyValueStore,
) -> RecipeGenerationService:
    """Wire the orchestrator and its collaborators.

    A provider that cannot be constructed leaves the service in
    fallback-only mode.

    Raises:
        ProviderUnavailableError: If the provider cannot be constructed and
            fallback is disabled.
    """
    llm = settings.llm

    provider: GenerationProvider | None = None
    if llm.enabled:
        try:
            provider = create_provider(settings)
        except LLMConfigurationError as e:
            if not llm.fallback.enabled:
                raise ProviderUnavailableError(str(e), provider=str(llm.provider)) from e
            logger.warning(
                "Generation provider unavailable, using fallback only",
                provider=str(llm.provider),
                error=str(e),
            )

    return RecipeGenerationService(
        provider=provider,
        cache=RecipeCache(store, default_ttl=llm.cache.ttl),
        rate_limiter=RateLimiter(
            store,
            requests_per_minute=settings.rate_limiting.requests_per_minute,
            requests_per_hour=settings.rate_limiting.requests_per_hour,
        ),
        quality_assessor=QualityAssessor(threshold=llm.quality.threshold),
        fallback=TemplateRecipeGenerator(),
        usage_tracker=InMemoryUsageTracker(),
        ai_enabled=llm.enabled,
        cache_enabled=llm.cache.enabled,
        fallback_enabled=llm.fallback.enabled,
        cache_ttl=llm.cache.ttl,
    )
