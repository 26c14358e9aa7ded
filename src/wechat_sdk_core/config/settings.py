"""Application settings using pydantic-settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wechat_sdk_core.constants import (
    DEFAULT_AUTH_TOKEN_URL,
    DEFAULT_BASE_URL,
    DEFAULT_CACHE_PREFIX,
    DEFAULT_CODE2SESSION_URL,
    DEFAULT_CODE2TOKEN_URL,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_TICKET_URL,
)
from wechat_sdk_core.models.credentials import AppMode


class WechatSettings(BaseSettings):
    """Central configuration for wechat-sdk.

    Values come from constructor keyword arguments first, then ``WECHAT_*``
    environment variables, then the defaults below. Instances are frozen;
    use :meth:`merged` to derive a variant with overrides applied.
    """

    model_config = SettingsConfigDict(env_prefix="WECHAT_", env_file=".env", frozen=True)

    # --- Application ---
    app_id: str | None = Field(
        default=None,
        description="WeChat application id (appid)",
    )
    app_secret: SecretStr | None = Field(
        default=None,
        description="WeChat application secret",
    )
    app_mode: AppMode = Field(
        default=AppMode.H5,
        description="Application account type: 'h5' (official account) or 'mp' (mini program)",
    )

    # --- Endpoints ---
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Prefix for execute() API paths",
    )
    auth_token_url: str = Field(
        default=DEFAULT_AUTH_TOKEN_URL,
        description="Access token endpoint",
    )
    ticket_url: str = Field(
        default=DEFAULT_TICKET_URL,
        description="JS-API ticket endpoint",
    )
    code2session_url: str = Field(
        default=DEFAULT_CODE2SESSION_URL,
        description="Mini program login code exchange endpoint",
    )
    code2token_url: str = Field(
        default=DEFAULT_CODE2TOKEN_URL,
        description="Web OAuth code exchange endpoint",
    )
    http_timeout_seconds: float = Field(
        default=DEFAULT_HTTP_TIMEOUT_SECONDS,
        description="Timeout per upstream request in seconds",
    )

    # --- Cache ---
    cache_backend: Literal["memory", "disk", "redis"] = Field(
        default="memory",
        description="Credential store: in-process 'memory', 'disk' (diskcache) or 'redis'",
    )
    cache_prefix: str = Field(
        default=DEFAULT_CACHE_PREFIX,
        description="First segment of every cache key",
    )
    cache_dir: Path = Field(
        default=Path("./.cache/wechat_sdk"),
        description="Directory for the diskcache store",
    )
    redis_url: str | None = Field(
        default=None,
        description="Redis connection URL (required if cache_backend=redis)",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level name",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer",
    )

    @model_validator(mode="after")
    def validate_cache_config(self) -> WechatSettings:
        """Validate cache backend configuration."""
        if self.cache_backend == "redis" and not self.redis_url:
            msg = "redis_url required when cache_backend=redis"
            raise ValueError(msg)
        return self

    def merged(self, **overrides: Any) -> WechatSettings:
        """Return a new settings value with ``overrides`` laid over this one.

        ``None`` overrides are ignored so callers can pass optional arguments
        straight through. Unknown keys fail validation.
        """
        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return type(self)(**{**self.model_dump(), **updates})

    def secret_value(self) -> str | None:
        """Return the plain app secret, if configured."""
        if self.app_secret is None:
            return None
        return self.app_secret.get_secret_value()
