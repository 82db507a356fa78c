"""Per-caller fixed-window rate limiting.

Each caller has a minute window and an hour window. A request is admitted only
while both windows have budget left; windows roll over lazily on first use
after they elapse.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from redis.exceptions import RedisError

from recipe_ai.observability.logging import get_logger


if TYPE_CHECKING:
    from recipe_ai.storage.protocol import KeyValueStore


logger = get_logger(__name__)

RATE_LIMIT_KEY_PREFIX: Final[str] = "ratelimit:"
MINUTE_WINDOW_SECONDS: Final[int] = 60
HOUR_WINDOW_SECONDS: Final[int] = 3600
DEFAULT_REQUESTS_PER_MINUTE: Final[int] = 10
DEFAULT_REQUESTS_PER_HOUR: Final[int] = 100

_STORE_ERRORS = (RedisError, OSError, RuntimeError)


class RateLimiter:
    """Admission control for provider generations.

    Args:
        store: Shared counter store.
        requests_per_minute: Budget of the minute window.
        requests_per_hour: Budget of the hour window.
    """

    def __init__(
        self,
        store: KeyValueStore,
        requests_per_minute: int = DEFAULT_REQUESTS_PER_MINUTE,
        requests_per_hour: int = DEFAULT_REQUESTS_PER_HOUR,
    ) -> None:
        self._store = store
        self.requests_per_minute = requests_per_minute
        self.requests_per_hour = requests_per_hour

    @staticmethod
    def _minute_key(caller_id: str) -> str:
        return f"{RATE_LIMIT_KEY_PREFIX}{caller_id}:minute"

    @staticmethod
    def _hour_key(caller_id: str) -> str:
        return f"{RATE_LIMIT_KEY_PREFIX}{caller_id}:hour"

    async def _used(self, caller_id: str) -> tuple[int, int]:
        minute = await self._store.get_counter(self._minute_key(caller_id))
        hour = await self._store.get_counter(self._hour_key(caller_id))
        return (minute.count if minute else 0, hour.count if hour else 0)

    async def check_limit(self, caller_id: str) -> bool:
        """Return True if the caller may start another generation.

        Does not consume budget. Storage failures admit the request.
        """
        try:
            minute_used, hour_used = await self._used(caller_id)
        except _STORE_ERRORS as e:
            logger.warning(
                "Rate limit check failed, admitting request",
                caller_id=caller_id,
                error=str(e),
            )
            return True

        allowed = (
            minute_used < self.requests_per_minute
            and hour_used < self.requests_per_hour
        )
        if not allowed:
            logger.info(
                "Rate limit exhausted",
                caller_id=caller_id,
                minute_used=minute_used,
                hour_used=hour_used,
            )
        return allowed

    async def increment_usage(self, caller_id: str) -> None:
        """Consume one unit of budget in both windows."""
        try:
            await self._store.increment(self._minute_key(caller_id), MINUTE_WINDOW_SECONDS)
            await self._store.increment(self._hour_key(caller_id), HOUR_WINDOW_SECONDS)
        except _STORE_ERRORS as e:
            logger.warning("Failed to record usage", caller_id=caller_id, error=str(e))

    async def remaining(self, caller_id: str) -> int:
        """Return the smaller of the two remaining budgets, floored at 0."""
        try:
            minute_used, hour_used = await self._used(caller_id)
        except _STORE_ERRORS as e:
            logger.warning("Failed to read usage", caller_id=caller_id, error=str(e))
            return min(self.requests_per_minute, self.requests_per_hour)

        return max(
            0,
            min(
                self.requests_per_minute - minute_used,
                self.requests_per_hour - hour_used,
            ),
        )

    async def reset(self, caller_id: str | None = None) -> None:
        """Forget the windows of one caller, or of every caller."""
        if caller_id is None:
            await self._store.clear(RATE_LIMIT_KEY_PREFIX)
            logger.info("Rate limits reset for all callers")
            return
        await self._store.delete(self._minute_key(caller_id))
        await self._store.delete(self._hour_key(caller_id))
        logger.info("Rate limits reset", caller_id=caller_id)
