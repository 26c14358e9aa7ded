"""Response models for user-scoped code exchanges."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SessionInfo(BaseModel):
    """Mini program login session returned by ``jscode2session``."""

    model_config = ConfigDict(extra="allow")

    openid: str = Field(description="User id scoped to the mini program")
    session_key: str | None = Field(default=None, description="Session key for data decryption")
    unionid: str | None = Field(
        default=None, description="Cross-app user id, present when the app is bound"
    )


class OAuthAccessToken(BaseModel):
    """Web OAuth access token returned by ``sns/oauth2/access_token``."""

    model_config = ConfigDict(extra="allow")

    access_token: str = Field(description="User-scoped OAuth access token")
    expires_in: int = Field(description="Token lifetime in seconds")
    refresh_token: str | None = Field(default=None, description="Token used to refresh")
    openid: str = Field(description="User id scoped to the official account")
    scope: str | None = Field(default=None, description="Granted OAuth scope")
    unionid: str | None = Field(default=None, description="Cross-app user id")
