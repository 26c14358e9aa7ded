"""Tests for the mode and credential lookup tables."""

from __future__ import annotations

import pytest

from wechat_sdk.modes import CREDENTIAL_ENDPOINTS, MODE_PROFILES, get_profile
from wechat_sdk_core.exceptions import UnsupportedAppModeError
from wechat_sdk_core.models.credentials import AppMode, CredentialType


@pytest.mark.unit
class TestModeProfiles:
    """Test application mode lookups."""

    def test_every_mode_has_a_profile(self) -> None:
        """Each AppMode maps to a profile."""
        assert set(MODE_PROFILES) == set(AppMode)

    def test_h5_offers_token_and_ticket(self) -> None:
        """Official accounts issue both credentials."""
        profile = get_profile("h5")
        assert profile.supports(CredentialType.ACCESS_TOKEN)
        assert profile.supports(CredentialType.JSAPI_TICKET)
        assert profile.token_grant_type == "client_credential"

    def test_mp_offers_token_only(self) -> None:
        """Mini programs issue access tokens only."""
        profile = get_profile(AppMode.MP)
        assert profile.supports(CredentialType.ACCESS_TOKEN)
        assert not profile.supports(CredentialType.JSAPI_TICKET)

    @pytest.mark.parametrize("mode", ["corp", "isv", ""])
    def test_unknown_modes(self, mode: str) -> None:
        """Reserved or unknown modes raise UnsupportedAppModeError."""
        with pytest.raises(UnsupportedAppModeError):
            get_profile(mode)


@pytest.mark.unit
class TestCredentialEndpoints:
    """Test the credential endpoint table."""

    def test_every_credential_has_an_endpoint(self) -> None:
        """Each CredentialType has a fetch description."""
        assert set(CREDENTIAL_ENDPOINTS) == set(CredentialType)

    def test_fields(self) -> None:
        """Endpoints point at settings URLs and response fields."""
        token = CREDENTIAL_ENDPOINTS[CredentialType.ACCESS_TOKEN]
        ticket = CREDENTIAL_ENDPOINTS[CredentialType.JSAPI_TICKET]
        assert (token.url_setting, token.value_field) == ("auth_token_url", "access_token")
        assert (ticket.url_setting, ticket.value_field) == ("ticket_url", "ticket")
        assert token.expires_field == ticket.expires_field == "expires_in"
