"""Shared-state storage backends for the recipe cache and rate limiter."""

from recipe_ai.storage.memory import MemoryStore
from recipe_ai.storage.protocol import KeyValueStore, WindowCounter
from recipe_ai.storage.redis import (
    RedisStore,
    close_redis_pool,
    init_redis_pool,
)


__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "RedisStore",
    "WindowCounter",
    "close_redis_pool",
    "init_redis_pool",
]
