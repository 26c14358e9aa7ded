"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog
from structlog.contextvars import bound_contextvars, merge_contextvars

if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger

    from wechat_sdk_core.config.settings import WechatSettings

REDACTED = "***"

SECRET_KEYS = frozenset(
    {"secret", "app_secret", "access_token", "ticket", "session_key", "refresh_token"}
)


def redact_secrets(_logger: WrappedLogger, _method_name: str, event_dict: EventDict) -> EventDict:
    """Mask credential values in an event, including inside nested mappings."""
    return _redact(event_dict)


def _redact(values: Mapping[str, Any]) -> dict[str, Any]:
    redacted: dict[str, Any] = {}
    for key, value in values.items():
        if key in SECRET_KEYS and value is not None:
            redacted[key] = REDACTED
        elif isinstance(value, Mapping):
            redacted[key] = _redact(value)
        else:
            redacted[key] = value
    return redacted


def configure_logging(settings: WechatSettings) -> None:
    """Configure structlog with JSON or console rendering.

    Every record, structlog or stdlib, passes through :func:`redact_secrets`
    before it is rendered. httpx request logs are held at WARNING because
    token request URLs carry the app secret in the query string.
    """
    shared_processors: list[structlog.types.Processor] = [
        merge_contextvars,
        redact_secrets,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    level = _resolve_level(settings.log_level)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=shared_processors,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


@contextmanager
def app_context(app_id: str) -> Iterator[None]:
    """Tag every log entry emitted inside the block with ``app_id``.

    Nested blocks for another app restore the outer ``app_id`` on exit.
    """
    with bound_contextvars(app_id=app_id):
        yield


def _resolve_level(level_name: str) -> int:
    """Convert a level name string to a logging level int."""
    mapping: dict[str, int] = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(level_name.upper(), logging.INFO)
