"""WeChat API client facade."""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx
import structlog

from wechat_sdk.callback import EventCodec, PlaintextEventCodec
from wechat_sdk.observability.logging import app_context
from wechat_sdk.token_provider import TokenProvider
from wechat_sdk.upstream import get_json
from wechat_sdk_core.config.settings import WechatSettings
from wechat_sdk_core.constants import AUTHORIZATION_CODE_GRANT
from wechat_sdk_core.interfaces.cache import CacheClient
from wechat_sdk_core.models.credentials import AppMode, CredentialType
from wechat_sdk_core.models.session import OAuthAccessToken, SessionInfo
from wechat_sdk_infra.cache.factory import create_cache_client
from wechat_sdk_infra.cache.token_cache import TokenCache

logger = structlog.get_logger()


class WechatSdk:
    """Signs WeChat API calls with cached access tokens.

    Example::

        async with WechatSdk(app_id="wx123", app_secret="...") as wechat:
            users = await wechat.execute("/user/get")

    Keyword overrides are laid over ``settings`` (or over settings read from
    the environment when none is given). A ``cache`` or ``http_client``
    passed in is left open by :meth:`aclose`; ones built here are closed.
    """

    def __init__(
        self,
        settings: WechatSettings | None = None,
        *,
        cache: CacheClient | None = None,
        http_client: httpx.AsyncClient | None = None,
        codec: EventCodec | None = None,
        **overrides: Any,
    ) -> None:
        base = settings if settings is not None else WechatSettings()
        self.settings = base.merged(**overrides)
        self._owns_store = cache is None
        self._owns_http = http_client is None
        self.cache = TokenCache(cache if cache is not None else create_cache_client(self.settings))
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=self.settings.http_timeout_seconds)
        self.http = http_client
        self.codec: EventCodec = codec or PlaintextEventCodec()
        self.tokens = TokenProvider(self.settings, self.cache, self.http)

    async def __aenter__(self) -> WechatSdk:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client and cache store if this instance created them."""
        if self._owns_http:
            await self.http.aclose()
        close = getattr(self.cache.store, "close", None) if self._owns_store else None
        if close is not None:
            result = close()
            if inspect.isawaitable(result):
                await result

    # --- Credentials ---

    async def get_token(
        self,
        app_id: str | None = None,
        app_secret: str | None = None,
        app_mode: AppMode | str | None = None,
    ) -> str:
        """Return an access token for the app, from cache when present."""
        return await self.tokens.get_token(app_id, app_secret, app_mode)

    async def get_jsapi_ticket(
        self,
        app_id: str | None = None,
        app_secret: str | None = None,
        app_mode: AppMode | str | None = None,
    ) -> str:
        """Return a JS-API ticket for the app, from cache when present."""
        return await self.tokens.get_jsapi_ticket(app_id, app_secret, app_mode)

    async def clear_credential(
        self, credential_type: CredentialType | str, app_id: str | None = None
    ) -> None:
        """Forget a cached credential."""
        await self.tokens.clear(CredentialType(credential_type), app_id)

    # --- User code exchanges ---

    async def code2session(
        self,
        js_code: str,
        app_id: str | None = None,
        app_secret: str | None = None,
    ) -> SessionInfo:
        """Exchange a mini program login code for the user's session."""
        app_id, app_secret = self.tokens.resolve_credentials(app_id, app_secret)
        params = {
            "appid": app_id,
            "secret": app_secret,
            "js_code": js_code,
            "grant_type": AUTHORIZATION_CODE_GRANT,
        }
        with app_context(app_id):
            body = await get_json(self.http, self.settings.code2session_url, params)
            logger.info("code2session_ok")
        return SessionInfo.model_validate(body)

    async def code2token(
        self,
        code: str,
        app_id: str | None = None,
        app_secret: str | None = None,
    ) -> OAuthAccessToken:
        """Exchange a web OAuth code for a user access token."""
        app_id, app_secret = self.tokens.resolve_credentials(app_id, app_secret)
        params = {
            "appid": app_id,
            "secret": app_secret,
            "code": code,
            "grant_type": AUTHORIZATION_CODE_GRANT,
        }
        with app_context(app_id):
            body = await get_json(self.http, self.settings.code2token_url, params)
            logger.info("code2token_ok")
        return OAuthAccessToken.model_validate(body)

    # --- API calls ---

    async def execute(
        self,
        api: str,
        request: Mapping[str, Any] | None = None,
        scope: Mapping[str, Any] | None = None,
    ) -> Any:
        """Call ``base_url + api`` with a current access token.

        Args:
            api: API path, e.g. ``"/user/get"``.
            request: httpx request options (``method``, ``params``, ``headers``,
                ``json``, ``data``, ``content``); method defaults to GET.
                ``params`` takes any form httpx accepts, and an
                ``access_token`` in it is replaced by the current token.
            scope: Settings overrides for this call, e.g. another ``app_id``.

        Returns:
            The parsed JSON body as returned, or None for an empty body.
            Upstream ``errcode`` values are not interpreted here.
        """
        settings = self.settings.merged(**dict(scope or {}))
        access_token = await self.tokens.get_token(
            settings.app_id, settings.secret_value(), settings.app_mode
        )
        options = dict(request or {})
        method = options.pop("method", "GET")
        options["params"] = httpx.QueryParams(options.get("params") or {}).merge(
            {"access_token": access_token}
        )
        url = settings.base_url + api

        response = await self.http.request(method, url, **options)
        response.raise_for_status()
        logger.debug("execute_ok", api=api, status=response.status_code)
        if not response.content:
            return None
        return response.json()

    # --- Server callbacks ---

    async def callback(self, event: dict[str, Any]) -> dict[str, Any]:
        """Run an inbound callback payload through the event codec.

        With the default :class:`PlaintextEventCodec` a plaintext event comes
        back unchanged (so ``echostr`` verification handshakes can be
        answered) and an encrypted one raises
        :class:`~wechat_sdk_core.exceptions.EncryptedEventNotSupportedError`.
        """
        decoded = self.codec.decode(event)
        return self.codec.encode(decoded)
