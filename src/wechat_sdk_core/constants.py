"""Shared constants for wechat-sdk."""

from __future__ import annotations

# Upstream endpoints
DEFAULT_BASE_URL = "https://api.weixin.qq.com/cgi-bin"
DEFAULT_AUTH_TOKEN_URL = "https://api.weixin.qq.com/cgi-bin/token"
DEFAULT_TICKET_URL = "https://api.weixin.qq.com/cgi-bin/ticket/getticket"
DEFAULT_CODE2SESSION_URL = "https://api.weixin.qq.com/sns/jscode2session"
DEFAULT_CODE2TOKEN_URL = "https://api.weixin.qq.com/sns/oauth2/access_token"

# grant_type literals expected by the upstream authority
CLIENT_CREDENTIAL_GRANT = "client_credential"
AUTHORIZATION_CODE_GRANT = "authorization_code"

# Ticket flavour requested from ticket/getticket
JSAPI_TICKET_TYPE = "jsapi"

DEFAULT_CACHE_PREFIX = "wechat"
DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0

# Used when an upstream body carries a credential but no expires_in
DEFAULT_EXPIRES_IN_SECONDS = 7200
