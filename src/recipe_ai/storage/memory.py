"""In-process key-value store.

Entries are evicted lazily: an expired value is removed the next time it is
read, never by a background sweep.
"""

from __future__ import annotations

import threading
import time
from typing import TYPE_CHECKING

from recipe_ai.storage.protocol import WindowCounter


if TYPE_CHECKING:
    from collections.abc import Callable


class MemoryStore:
    """Dictionary-backed store guarded by a lock.

    Args:
        clock: Monotonic time source in seconds. Tests inject a fake clock to
            simulate expiry and window rollover.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._values: dict[str, tuple[str, float | None]] = {}
        self._counters: dict[str, WindowCounter] = {}

    async def get(self, key: str) -> str | None:
        with self._lock:
            entry = self._values.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at is not None and self._clock() > expires_at:
                del self._values[key]
                return None
            return value

    async def set(self, key: str, value: str, ttl_seconds: float | None = None) -> None:
        expires_at = None if ttl_seconds is None else self._clock() + ttl_seconds
        with self._lock:
            self._values[key] = (value, expires_at)

    async def delete(self, key: str) -> None:
        with self._lock:
            self._values.pop(key, None)
            self._counters.pop(key, None)

    async def increment(self, key: str, window_seconds: float) -> WindowCounter:
        with self._lock:
            now = self._clock()
            current = self._counters.get(key)
            if current is None or now >= current.reset_at:
                updated = WindowCounter(count=1, reset_at=now + window_seconds)
            else:
                updated = WindowCounter(count=current.count + 1, reset_at=current.reset_at)
            self._counters[key] = updated
            return updated

    async def get_counter(self, key: str) -> WindowCounter | None:
        with self._lock:
            current = self._counters.get(key)
            if current is None or self._clock() >= current.reset_at:
                return None
            return current

    async def clear(self, prefix: str) -> int:
        with self._lock:
            keys = [k for k in self._values if k.startswith(prefix)]
            keys += [k for k in self._counters if k.startswith(prefix)]
            for key in keys:
                self._values.pop(key, None)
                self._counters.pop(key, None)
            return len(keys)

    async def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._values) + len(self._counters)
