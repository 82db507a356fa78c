"""Fingerprint-keyed cache of accepted provider recipes.

The cache fails open: a storage or decoding problem is logged and treated as
a miss (on read) or a dropped write (on write), never as a request failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from pydantic import ValidationError
from redis.exceptions import RedisError

from recipe_ai.cache.fingerprint import fingerprint
from recipe_ai.observability.logging import get_logger
from recipe_ai.schemas.recipe import Recipe


if TYPE_CHECKING:
    from recipe_ai.schemas.generation import GenerationRequest
    from recipe_ai.storage.protocol import KeyValueStore


logger = get_logger(__name__)

CACHE_KEY_PREFIX: Final[str] = "recipe:"
DEFAULT_CACHE_TTL: Final[int] = 3600

_STORE_ERRORS = (RedisError, OSError, RuntimeError)


class RecipeCache:
    """Recipe cache over a shared KeyValueStore.

    Args:
        store: Backing store; expiry is delegated to it.
        default_ttl: Lifetime of entries in seconds.
    """

    def __init__(self, store: KeyValueStore, default_ttl: int = DEFAULT_CACHE_TTL) -> None:
        self._store = store
        self.default_ttl = default_ttl

    @staticmethod
    def key_for(request: GenerationRequest) -> str:
        """Fingerprint a request for use with get/set."""
        return fingerprint(request)

    async def get(self, request_fingerprint: str) -> Recipe | None:
        """Return the cached recipe, or None on miss, expiry or error."""
        key = f"{CACHE_KEY_PREFIX}{request_fingerprint}"
        try:
            raw = await self._store.get(key)
        except _STORE_ERRORS as e:
            logger.warning("Recipe cache read failed", key=key, error=str(e))
            return None

        if raw is None:
            return None

        try:
            return Recipe.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Discarding undecodable cache entry", key=key, error=str(e))
            await self._discard(key)
            return None

    async def set(
        self,
        request_fingerprint: str,
        recipe: Recipe,
        ttl: int | None = None,
    ) -> None:
        """Store a recipe; concurrent writes to one fingerprint are last-write-wins."""
        key = f"{CACHE_KEY_PREFIX}{request_fingerprint}"
        ttl_seconds = ttl if ttl is not None else self.default_ttl
        try:
            await self._store.set(
                key,
                recipe.model_dump_json(by_alias=True),
                ttl_seconds=ttl_seconds,
            )
        except _STORE_ERRORS as e:
            logger.warning("Recipe cache write dropped", key=key, error=str(e))
            return
        logger.debug("Cached recipe", key=key, ttl=ttl_seconds)

    async def clear(self) -> int:
        """Remove every cached recipe and return how many were removed."""
        try:
            removed = await self._store.clear(CACHE_KEY_PREFIX)
        except _STORE_ERRORS as e:
            logger.warning("Recipe cache clear failed", error=str(e))
            return 0
        logger.info("Recipe cache cleared", removed=removed)
        return removed

    async def _discard(self, key: str) -> None:
        try:
            await self._store.delete(key)
        except _STORE_ERRORS as e:
            logger.warning("Failed to discard cache entry", key=key, error=str(e))
