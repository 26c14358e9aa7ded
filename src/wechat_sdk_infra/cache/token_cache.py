"""Credential cache adapter over a CacheClient store."""

from __future__ import annotations

import structlog

from wechat_sdk_core.exceptions import StoreError
from wechat_sdk_core.interfaces.cache import CacheClient

logger = structlog.get_logger()


class TokenCache:
    """Credential store with write-then-read confirmation.

    Every store failure surfaces as :class:`StoreError` with the backend
    exception chained. Expiry is left entirely to the backing store.
    """

    def __init__(self, store: CacheClient) -> None:
        """Initialize with a CacheClient implementation."""
        self._store = store

    @property
    def store(self) -> CacheClient:
        """The wrapped backing store."""
        return self._store

    async def get(self, key: str) -> str | None:
        """Return the cached value, or None when absent or expired."""
        try:
            return await self._store.get(key)
        except Exception as exc:
            logger.error("cache_get_failed", key=key, error=str(exc))
            raise StoreError(f"cache get failed for {key}: {exc}") from exc

    async def set(self, key: str, value: str, ttl_seconds: int) -> str | None:
        """Write a value, then read it back and return what the store holds."""
        try:
            await self._store.set(key, value, ttl_seconds=ttl_seconds)
            stored = await self._store.get(key)
        except Exception as exc:
            logger.error("cache_set_failed", key=key, error=str(exc))
            raise StoreError(f"cache set failed for {key}: {exc}") from exc
        logger.debug("cache_set", key=key, ttl_seconds=ttl_seconds)
        return stored

    async def delete(self, key: str) -> None:
        """Remove a cached value; missing keys are a no-op."""
        try:
            await self._store.delete(key)
        except Exception as exc:
            logger.error("cache_delete_failed", key=key, error=str(exc))
            raise StoreError(f"cache delete failed for {key}: {exc}") from exc
