"""Redis-backed key-value store and connection pool management.

This module provides:
- Async Redis connection pool management via lifespan events
- RedisStore, a KeyValueStore shared by every service replica
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

import redis.asyncio as redis
from redis.asyncio.connection import ConnectionPool

from recipe_ai.observability.logging import get_logger
from recipe_ai.storage.protocol import WindowCounter


if TYPE_CHECKING:
    from redis.asyncio import Redis

logger = get_logger(__name__)

_pool: ConnectionPool | None = None
_client: Redis | None = None

_SCAN_BATCH = 500


async def init_redis_pool(url: str, max_connections: int = 20) -> Redis:
    """Initialize the shared Redis connection pool.

    Should be called during application startup (lifespan).

    Raises:
        redis.ConnectionError: If Redis cannot be reached.
    """
    global _pool, _client  # noqa: PLW0603

    logger.info("Initializing Redis connection", max_connections=max_connections)

    _pool = ConnectionPool.from_url(
        url,
        max_connections=max_connections,
        decode_responses=True,
    )
    _client = redis.Redis(connection_pool=_pool)

    try:
        await _client.ping()
        logger.info("Redis connection established")
    except redis.ConnectionError:
        logger.exception("Failed to connect to Redis")
        raise

    return _client


async def close_redis_pool() -> None:
    """Close the Redis connection pool (lifespan shutdown)."""
    global _pool, _client  # noqa: PLW0603

    if _client is not None:
        await _client.aclose()
        _client = None

    if _pool is not None:
        await _pool.disconnect()
        _pool = None

    logger.info("Redis connection closed")


def _decode(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode()
    return str(value)


class RedisStore:
    """KeyValueStore on Redis.

    Values use native key expiry. Window counters are INCR'd keys whose PTTL
    is set only when the window opens, so the first hit after expiry restarts
    the count at 1.

    Args:
        client: Async Redis client.
        clock: Wall-clock source used to express reset times.
    """

    def __init__(self, client: Redis, clock: Any = time.time) -> None:
        self._client = client
        self._clock = clock

    async def get(self, key: str) -> str | None:
        return _decode(await self._client.get(key))

    async def set(self, key: str, value: str, ttl_seconds: float | None = None) -> None:
        if ttl_seconds is None:
            await self._client.set(key, value)
        else:
            await self._client.set(key, value, px=max(int(ttl_seconds * 1000), 1))

    async def delete(self, key: str) -> None:
        await self._client.delete(key)

    async def increment(self, key: str, window_seconds: float) -> WindowCounter:
        window_ms = max(int(window_seconds * 1000), 1)
        async with self._client.pipeline(transaction=True) as pipe:
            pipe.incr(key)
            pipe.pexpire(key, window_ms, nx=True)
            pipe.pttl(key)
            count, _, pttl = await pipe.execute()
        return WindowCounter(count=int(count), reset_at=self._reset_at(pttl, window_ms))

    async def get_counter(self, key: str) -> WindowCounter | None:
        async with self._client.pipeline(transaction=True) as pipe:
            pipe.get(key)
            pipe.pttl(key)
            raw, pttl = await pipe.execute()
        if raw is None:
            return None
        return WindowCounter(count=int(raw), reset_at=self._reset_at(pttl, 0))

    async def clear(self, prefix: str) -> int:
        deleted = 0
        batch: list[str] = []
        async for key in self._client.scan_iter(match=f"{prefix}*", count=_SCAN_BATCH):
            batch.append(_decode(key) or "")
            if len(batch) >= _SCAN_BATCH:
                deleted += await self._client.delete(*batch)
                batch = []
        if batch:
            deleted += await self._client.delete(*batch)
        return deleted

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except redis.RedisError:
            logger.warning("Redis ping failed")
            return False

    def _reset_at(self, pttl: int, fallback_ms: int) -> float:
        # PTTL is -1 (no expiry) or -2 (missing) when the key is not timed.
        remaining_ms = pttl if pttl is not None and pttl >= 0 else fallback_ms
        return self._clock() + remaining_ms / 1000
