"""Recipe generation orchestration.

Ties together the cache, the rate limiter, the provider, the quality gate
and the fallback generator.
"""

from recipe_ai.services.generation.exceptions import (
    GenerationServiceError,
    ProviderUnavailableError,
)
from recipe_ai.services.generation.factory import create_generation_service
from recipe_ai.services.generation.service import RecipeGenerationService


__all__ = [
    "GenerationServiceError",
    "ProviderUnavailableError",
    "RecipeGenerationService",
    "create_generation_service",
]
