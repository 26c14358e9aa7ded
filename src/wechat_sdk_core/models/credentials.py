"""Credential and application mode enums."""

from __future__ import annotations

from enum import StrEnum


class CredentialType(StrEnum):
    """Cached credential kinds; the value is the cache key type tag."""

    ACCESS_TOKEN = "accessToken"
    JSAPI_TICKET = "jsapiTicket"


class AppMode(StrEnum):
    """WeChat application account types."""

    H5 = "h5"  # Official account (公众号) web apps
    MP = "mp"  # Mini program (小程序)
