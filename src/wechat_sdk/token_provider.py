"""Access token and JS-API ticket acquisition with caching.

Cache naming::

    {prefix}.{credential_type}.{app_id}     e.g. wechat.accessToken.wx123

A cached value is returned as long as the store still holds it; expiry is
entirely the store's job (TTL = upstream ``expires_in``). Concurrent misses
each fetch independently.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import httpx
import structlog

from wechat_sdk.modes import CREDENTIAL_ENDPOINTS, CredentialEndpoint, ModeProfile, get_profile
from wechat_sdk.observability.logging import app_context
from wechat_sdk.upstream import get_json, serialize_body
from wechat_sdk_core.config.settings import WechatSettings
from wechat_sdk_core.constants import DEFAULT_EXPIRES_IN_SECONDS, JSAPI_TICKET_TYPE
from wechat_sdk_core.exceptions import (
    MissingCredentialsError,
    UnsupportedAppModeError,
    UpstreamError,
)
from wechat_sdk_core.keys import build_cache_key
from wechat_sdk_core.models.credentials import AppMode, CredentialType
from wechat_sdk_infra.cache.token_cache import TokenCache

logger = structlog.get_logger()

ParamsFactory = Callable[[], Awaitable[dict[str, Any]]]


class TokenProvider:
    """Fetches short-lived credentials and keeps them in a TokenCache."""

    def __init__(
        self,
        settings: WechatSettings,
        cache: TokenCache,
        http: httpx.AsyncClient,
    ) -> None:
        """Initialize with settings, a credential cache and an HTTP client."""
        self._settings = settings
        self._cache = cache
        self._http = http

    def cache_key(self, credential_type: CredentialType, app_id: str) -> str:
        """Return the cache key for a credential of ``app_id``."""
        return build_cache_key(self._settings.cache_prefix, credential_type, app_id)

    def resolve_credentials(
        self, app_id: str | None = None, app_secret: str | None = None
    ) -> tuple[str, str]:
        """Fill missing app id/secret from settings and require both."""
        app_id = app_id or self._settings.app_id
        app_secret = app_secret or self._settings.secret_value()
        if not app_id or not app_secret:
            msg = "app_id and app_secret are required"
            raise MissingCredentialsError(msg)
        return app_id, app_secret

    def _profile(
        self, app_mode: AppMode | str | None, credential_type: CredentialType
    ) -> ModeProfile:
        profile = get_profile(app_mode or self._settings.app_mode)
        if not profile.supports(credential_type):
            msg = f"app mode {profile.mode} does not issue {credential_type}"
            raise UnsupportedAppModeError(msg)
        return profile

    async def get_token(
        self,
        app_id: str | None = None,
        app_secret: str | None = None,
        app_mode: AppMode | str | None = None,
    ) -> str:
        """Return an access token, from cache when present.

        Raises:
            MissingCredentialsError: If no app id/secret is given or configured.
            UpstreamEmptyResponseError: If the token endpoint returns no body.
            UpstreamErrorCodeError: If the token endpoint returns an ``errcode``.
            StoreError: If the cache store fails.
        """
        profile = self._profile(app_mode, CredentialType.ACCESS_TOKEN)
        app_id, app_secret = self.resolve_credentials(app_id, app_secret)

        async def params() -> dict[str, Any]:
            return {
                "appid": app_id,
                "secret": app_secret,
                "grant_type": profile.token_grant_type,
            }

        return await self._cached_credential(CredentialType.ACCESS_TOKEN, app_id, params)

    async def get_jsapi_ticket(
        self,
        app_id: str | None = None,
        app_secret: str | None = None,
        app_mode: AppMode | str | None = None,
    ) -> str:
        """Return a JS-API ticket, fetching an access token first on a miss."""
        self._profile(app_mode, CredentialType.JSAPI_TICKET)
        app_id, app_secret = self.resolve_credentials(app_id, app_secret)

        async def params() -> dict[str, Any]:
            access_token = await self.get_token(app_id, app_secret, app_mode)
            return {"access_token": access_token, "type": JSAPI_TICKET_TYPE}

        return await self._cached_credential(CredentialType.JSAPI_TICKET, app_id, params)

    async def clear(self, credential_type: CredentialType, app_id: str | None = None) -> None:
        """Drop a cached credential so the next request refetches it."""
        app_id = app_id or self._settings.app_id
        if not app_id:
            msg = "app_id is required"
            raise MissingCredentialsError(msg)
        with app_context(app_id):
            await self._cache.delete(self.cache_key(credential_type, app_id))
            logger.info("credential_cleared", credential=str(credential_type))

    async def _cached_credential(
        self,
        credential_type: CredentialType,
        app_id: str,
        params: ParamsFactory,
    ) -> str:
        """Cache-or-fetch flow shared by every credential type."""
        endpoint = CREDENTIAL_ENDPOINTS[credential_type]
        key = self.cache_key(credential_type, app_id)

        with app_context(app_id):
            cached = await self._cache.get(key)
            if cached:
                logger.debug("credential_cache_hit", credential=str(credential_type))
                return cached

            url = getattr(self._settings, endpoint.url_setting)
            body = await get_json(self._http, url, await params())
            value, expires_in = _read_credential(endpoint, body)

            logger.info(
                "credential_fetched",
                credential=str(credential_type),
                expires_in=expires_in,
            )
            if expires_in <= 0:
                logger.warning("credential_not_cached", credential=str(credential_type))
                return value

            await self._cache.set(key, value, ttl_seconds=expires_in)
            return value


def _read_credential(endpoint: CredentialEndpoint, body: dict[str, Any]) -> tuple[str, int]:
    """Pull the credential and its lifetime out of an upstream body.

    A missing or null lifetime falls back to the WeChat default of two hours.
    """
    value = body.get(endpoint.value_field)
    if not value:
        raise UpstreamError(serialize_body(body))
    raw_expires = body.get(endpoint.expires_field)
    if raw_expires is None:
        return str(value), DEFAULT_EXPIRES_IN_SECONDS
    try:
        return str(value), int(raw_expires)
    except (TypeError, ValueError) as exc:
        raise UpstreamError(serialize_body(body)) from exc
