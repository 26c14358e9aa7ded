"""Custom exception hierarchy for wechat-sdk."""

from __future__ import annotations


class WechatSdkError(Exception):
    """Base exception for all wechat-sdk errors."""


class MissingCredentialsError(WechatSdkError):
    """Raised when an app id or app secret is needed but not configured."""


class UnsupportedAppModeError(WechatSdkError):
    """Raised when an application mode does not offer the requested credential."""


class UpstreamError(WechatSdkError):
    """Raised when a WeChat endpoint does not return a usable result.

    ``detail`` holds the serialized response body, or a description when
    there was no body to serialize.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class UpstreamEmptyResponseError(UpstreamError):
    """Raised when an endpoint returns no parsable body."""


class UpstreamErrorCodeError(UpstreamError):
    """Raised when an endpoint answers with a non-zero ``errcode``.

    The serialized response body is the exception message and is also kept
    on ``detail``.
    """

    def __init__(self, detail: str, errcode: int | None = None, errmsg: str | None = None) -> None:
        super().__init__(detail)
        self.errcode = errcode
        self.errmsg = errmsg


class StoreError(WechatSdkError):
    """Raised when the cache backing store fails a read or write."""


class EncryptedEventNotSupportedError(WechatSdkError):
    """Raised when an encrypted callback event reaches the plaintext codec."""
