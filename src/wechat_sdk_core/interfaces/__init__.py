"""Public interface re-exports for wechat_sdk_core."""

from wechat_sdk_core.interfaces.cache import CacheClient

__all__ = [
    "CacheClient",
]
