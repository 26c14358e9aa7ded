"""Cache key construction for cached credentials."""

from __future__ import annotations

from wechat_sdk_core.models.credentials import CredentialType


def build_cache_key(prefix: str, credential_type: CredentialType | str, app_id: str) -> str:
    """Return ``{prefix}.{credential_type}.{app_id}``.

    >>> build_cache_key("wechat", CredentialType.ACCESS_TOKEN, "wx123")
    'wechat.accessToken.wx123'
    """
    return ".".join([prefix, str(credential_type), app_id])
