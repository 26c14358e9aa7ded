"""WeChat API client with cached access tokens and JS-API tickets."""

from wechat_sdk.callback import EventCodec, PlaintextEventCodec
from wechat_sdk.client import WechatSdk
from wechat_sdk.token_provider import TokenProvider
from wechat_sdk_core.config.settings import WechatSettings

__all__ = [
    "EventCodec",
    "PlaintextEventCodec",
    "TokenProvider",
    "WechatSdk",
    "WechatSettings",
]

__version__ = "0.1.0"
