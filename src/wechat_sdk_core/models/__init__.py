"""Domain models for wechat-sdk."""

from wechat_sdk_core.models.credentials import AppMode, CredentialType
from wechat_sdk_core.models.session import OAuthAccessToken, SessionInfo

__all__ = [
    "AppMode",
    "CredentialType",
    "OAuthAccessToken",
    "SessionInfo",
]
