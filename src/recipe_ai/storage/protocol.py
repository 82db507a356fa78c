"""Key-value storage protocol shared by the recipe cache and rate limiter.

Implementations must make every single-key operation atomic; no ordering is
required across different keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class WindowCounter:
    """Counter state of one fixed time window.

    Attributes:
        count: Hits recorded in the current window.
        reset_at: Store-clock timestamp (seconds) at which the window ends.
    """

    count: int
    reset_at: float


@runtime_checkable
class KeyValueStore(Protocol):
    """Async key-value store with TTLs and windowed counters."""

    async def get(self, key: str) -> str | None:
        """Return the value, or None when absent or expired."""
        ...

    async def set(self, key: str, value: str, ttl_seconds: float | None = None) -> None:
        """Store a value, replacing any previous one."""
        ...

    async def delete(self, key: str) -> None:
        """Remove a key if present."""
        ...

    async def increment(self, key: str, window_seconds: float) -> WindowCounter:
        """Count a hit in the key's current window.

        Starts a fresh window at count 1 when none exists or the previous
        one has elapsed; otherwise increments in place.
        """
        ...

    async def get_counter(self, key: str) -> WindowCounter | None:
        """Read a counter without modifying it; elapsed windows read as None."""
        ...

    async def clear(self, prefix: str) -> int:
        """Delete every key starting with prefix, returning how many."""
        ...

    async def ping(self) -> bool:
        """Check the store is reachable."""
        ...
