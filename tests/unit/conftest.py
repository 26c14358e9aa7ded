"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import pytest

from tests.mocks.mock_settings import FakeClock, make_settings
from tests.mocks.mock_upstream import TICKET_BODY, TICKET_PATH, TOKEN_BODY, TOKEN_PATH, UpstreamStub
from wechat_sdk_core.config.settings import WechatSettings
from wechat_sdk_infra.cache.memory_cache import MemoryCacheClient


@pytest.fixture
def settings() -> WechatSettings:
    """Return WechatSettings with test credentials and the memory cache."""
    return make_settings()


@pytest.fixture
def clock() -> FakeClock:
    """Return a manually advanced clock."""
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> MemoryCacheClient:
    """Return an empty memory store driven by the fake clock."""
    return MemoryCacheClient(clock=clock)


@pytest.fixture
def upstream() -> UpstreamStub:
    """Return a stub serving a valid token and ticket."""
    return UpstreamStub({TOKEN_PATH: dict(TOKEN_BODY), TICKET_PATH: dict(TICKET_BODY)})
