"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from hooksign.common.settings import Settings

TEST_SECRET = "whsec_1234567890"
NOW_MS = 1742780691 * 1000


@pytest.fixture
def secret() -> str:
    """Shared webhook secret."""
    return TEST_SECRET


@pytest.fixture
def now_ms() -> int:
    """Fixed verification time in epoch milliseconds."""
    return NOW_MS


@pytest.fixture
def clock(now_ms: int):
    """Clock pinned to now_ms."""
    return lambda: now_ms


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    """Minimal webhook payload."""
    return {"event": "test"}


@pytest.fixture
def hashnode_payload() -> dict[str, Any]:
    """Webhook payload in the shape a blog platform sends for post events."""
    return {
        "metadata": {"uuid": "6f1d8c62-1e0a-4a2b-9a8f-1f3f2d7c9e01"},
        "data": {
            "publication": {"id": "pub-123"},
            "post": {"id": "post-456"},
            "eventType": "post_published",
        },
    }


@pytest.fixture
def settings(secret: str) -> Settings:
    """Create test settings."""
    return Settings(
        webhook_secret=secret,
        signature_header="X-Webhook-Signature",
        valid_for_seconds=30,
        protected_paths=("/webhooks",),
    )
