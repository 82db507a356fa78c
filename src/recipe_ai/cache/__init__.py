"""Recipe cache and rate limiting."""

from recipe_ai.cache.fingerprint import canonical_payload, fingerprint
from recipe_ai.cache.rate_limit import RateLimiter
from recipe_ai.cache.recipe_cache import RecipeCache


__all__ = [
    "RateLimiter",
    "RecipeCache",
    "canonical_payload",
    "fingerprint",
]
