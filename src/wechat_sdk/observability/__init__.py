"""Observability: structured logging."""

from wechat_sdk.observability.logging import (
    app_context,
    configure_logging,
    redact_secrets,
)

__all__ = [
    "app_context",
    "configure_logging",
    "redact_secrets",
]
