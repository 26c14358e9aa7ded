"""Integration test fixtures: real Redis, stubbed WeChat endpoints."""

from __future__ import annotations

import socket
import time

import pytest

REDIS_URL = "redis://localhost:6379/1"


def _tcp_reachable(
    host: str,
    port: int,
    timeout: float = 1.0,
    retries: int = 3,
    delay: float = 1.0,
) -> bool:
    """Check if a TCP service is reachable, retrying on failure."""
    for attempt in range(retries):
        try:
            with socket.create_connection((host, port), timeout=timeout):
                return True
        except OSError:
            if attempt < retries - 1:
                time.sleep(delay)
    return False


_redis_up = _tcp_reachable("localhost", 6379)

skip_no_redis = pytest.mark.skipif(not _redis_up, reason="Redis not reachable on localhost:6379")
