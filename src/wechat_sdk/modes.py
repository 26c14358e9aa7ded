"""Per-mode and per-credential lookup tables.

Application modes differ only in which credentials they offer and which
grant type fetches their access token, so both concerns are data here
rather than separate code paths in the token provider.
"""

from __future__ import annotations

from dataclasses import dataclass

from wechat_sdk_core.constants import CLIENT_CREDENTIAL_GRANT
from wechat_sdk_core.exceptions import UnsupportedAppModeError
from wechat_sdk_core.models.credentials import AppMode, CredentialType


@dataclass(frozen=True)
class CredentialEndpoint:
    """Where a cached credential is fetched from and how it is read."""

    credential_type: CredentialType
    url_setting: str
    value_field: str
    expires_field: str = "expires_in"


@dataclass(frozen=True)
class ModeProfile:
    """Behaviour of one application mode."""

    mode: AppMode
    token_grant_type: str
    credentials: frozenset[CredentialType]

    def supports(self, credential_type: CredentialType) -> bool:
        """Return True if this mode can issue the given credential."""
        return credential_type in self.credentials


CREDENTIAL_ENDPOINTS: dict[CredentialType, CredentialEndpoint] = {
    CredentialType.ACCESS_TOKEN: CredentialEndpoint(
        credential_type=CredentialType.ACCESS_TOKEN,
        url_setting="auth_token_url",
        value_field="access_token",
    ),
    CredentialType.JSAPI_TICKET: CredentialEndpoint(
        credential_type=CredentialType.JSAPI_TICKET,
        url_setting="ticket_url",
        value_field="ticket",
    ),
}

MODE_PROFILES: dict[AppMode, ModeProfile] = {
    AppMode.H5: ModeProfile(
        mode=AppMode.H5,
        token_grant_type=CLIENT_CREDENTIAL_GRANT,
        credentials=frozenset({CredentialType.ACCESS_TOKEN, CredentialType.JSAPI_TICKET}),
    ),
    # Mini programs have no browser JS-SDK, hence no jsapi ticket
    AppMode.MP: ModeProfile(
        mode=AppMode.MP,
        token_grant_type=CLIENT_CREDENTIAL_GRANT,
        credentials=frozenset({CredentialType.ACCESS_TOKEN}),
    ),
}


def get_profile(mode: AppMode | str) -> ModeProfile:
    """Look up the profile for ``mode``.

    Raises:
        UnsupportedAppModeError: If the mode is unknown (e.g. ``corp``, ``isv``).
    """
    try:
        return MODE_PROFILES[AppMode(mode)]
    except (KeyError, ValueError) as exc:
        msg = f"unsupported app mode: {mode!r}"
        raise UnsupportedAppModeError(msg) from exc
