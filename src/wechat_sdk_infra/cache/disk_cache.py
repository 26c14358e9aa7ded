"""diskcache-backed credential store shared by processes on one host."""

from __future__ import annotations

import asyncio
from pathlib import Path

import diskcache

# Seconds a worker waits on the SQLite lock before diskcache gives up.
DISK_LOCK_TIMEOUT_SECONDS = 5.0


class DiskCacheClient:
    """Keeps credentials in a diskcache directory.

    Several worker processes pointed at the same ``cache_dir`` share one
    token per app instead of each fetching its own. Every call retries on
    SQLite lock contention between those workers. diskcache drops expired
    rows lazily, so :meth:`close` purges them to keep dead tokens off disk.
    """

    def __init__(self, cache_dir: Path, *, timeout: float = DISK_LOCK_TIMEOUT_SECONDS) -> None:
        cache_dir.mkdir(parents=True, exist_ok=True)
        self._cache = diskcache.Cache(str(cache_dir), timeout=timeout)

    async def get(self, key: str) -> str | None:
        """Return the live credential under ``key``, if any."""
        result = await asyncio.to_thread(self._cache.get, key, default=None, retry=True)
        return None if result is None else str(result)

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a credential that expires after ``ttl_seconds``."""
        await asyncio.to_thread(self._cache.set, key, value, expire=ttl_seconds, retry=True)

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._cache.delete, key, retry=True)

    async def exists(self, key: str) -> bool:
        return await self.get(key) is not None

    def close(self) -> None:
        """Purge expired credentials and release the SQLite connection."""
        self._cache.expire(retry=True)
        self._cache.close()
