"""In-process implementation of CacheClient with per-entry expiry."""

from __future__ import annotations

import time
from collections.abc import Callable


class MemoryCacheClient:
    """Dict-backed cache local to one process; the default credential store."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize an empty store reading time from ``clock``."""
        self._clock = clock
        self._entries: dict[str, tuple[str, float]] = {}

    def _live(self, key: str) -> str | None:
        """Return the value for key, dropping it first if it has expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at <= self._clock():
            del self._entries[key]
            return None
        return value

    async def get(self, key: str) -> str | None:
        """Retrieve a value by key, or None if missing/expired."""
        return self._live(key)

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a value with TTL."""
        self._entries[key] = (value, self._clock() + ttl_seconds)

    async def delete(self, key: str) -> None:
        """Delete a key from the cache."""
        self._entries.pop(key, None)

    async def exists(self, key: str) -> bool:
        """Check if a key exists and is not expired."""
        return self._live(key) is not None

    def __len__(self) -> int:
        return len(self._entries)
