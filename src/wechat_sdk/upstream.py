"""Helpers for calling WeChat endpoints and vetting their JSON bodies."""

from __future__ import annotations

import json
from typing import Any

import httpx
import structlog

from wechat_sdk_core.exceptions import UpstreamEmptyResponseError, UpstreamErrorCodeError

logger = structlog.get_logger()


def serialize_body(body: Any) -> str:
    """Serialize a response body for error details."""
    return json.dumps(body, ensure_ascii=False)


def check_errcode(body: dict[str, Any]) -> dict[str, Any]:
    """Raise if the body carries a non-zero ``errcode``; otherwise return it."""
    errcode = body.get("errcode")
    if errcode:
        detail = serialize_body(body)
        logger.warning("upstream_error_code", errcode=errcode, errmsg=body.get("errmsg"))
        raise UpstreamErrorCodeError(detail, errcode=errcode, errmsg=body.get("errmsg"))
    return body


async def get_json(
    http: httpx.AsyncClient, url: str, params: dict[str, Any]
) -> dict[str, Any]:
    """GET ``url`` with query ``params`` and return the vetted JSON object.

    Raises:
        httpx.HTTPStatusError: On a non-2xx status.
        UpstreamEmptyResponseError: If the body is empty or not a JSON object.
        UpstreamErrorCodeError: If the body carries a non-zero ``errcode``.
    """
    response = await http.get(url, params=params)
    response.raise_for_status()
    if not response.content:
        raise UpstreamEmptyResponseError(f"empty response from {url}")
    try:
        body = response.json()
    except ValueError as exc:
        raise UpstreamEmptyResponseError(f"unparsable response from {url}") from exc
    if not body or not isinstance(body, dict):
        raise UpstreamEmptyResponseError(f"no result in response from {url}")
    return check_errcode(body)
