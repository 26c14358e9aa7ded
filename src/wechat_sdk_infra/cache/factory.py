"""Factory for building the configured cache store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wechat_sdk_core.interfaces.cache import CacheClient

if TYPE_CHECKING:
    from wechat_sdk_core.config.settings import WechatSettings


def create_cache_client(settings: WechatSettings) -> CacheClient:
    """Create a cache store based on settings.

    Returns ``MemoryCacheClient`` for ``cache_backend == "memory"``,
    ``DiskCacheClient`` rooted at ``cache_dir`` for ``"disk"`` and
    ``RedisCacheClient`` connected to ``redis_url`` for ``"redis"``.
    """
    if settings.cache_backend == "disk":
        from wechat_sdk_infra.cache.disk_cache import DiskCacheClient

        return DiskCacheClient(settings.cache_dir)

    if settings.cache_backend == "redis":
        from wechat_sdk_infra.cache.redis_cache import RedisCacheClient

        assert settings.redis_url is not None
        return RedisCacheClient.from_url(settings.redis_url)

    from wechat_sdk_infra.cache.memory_cache import MemoryCacheClient

    return MemoryCacheClient()
