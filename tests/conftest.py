"""Shared fixtures for notifier tests."""

from __future__ import annotations

from types import SimpleNamespace

import httpx
import pytest

from moderation_notify.config import DiscordConfig

SITE_URL = "https://community.preciousplastic.com"
WEBHOOK_URL = "https://discord.example.com/api/webhooks/1/abc"


@pytest.fixture
def site_url() -> str:
    return SITE_URL


@pytest.fixture
def discord_config() -> DiscordConfig:
    return DiscordConfig(webhook_url=WEBHOOK_URL, timeout_seconds=5.0)


@pytest.fixture
def webhook_requests() -> list[httpx.Request]:
    """Requests captured by the mock webhook transport."""
    return []


@pytest.fixture
def webhook_status() -> int:
    """Status code the mock webhook answers with; override per test."""
    return 204


@pytest.fixture
def webhook_transport(
    webhook_requests: list[httpx.Request], webhook_status: int
) -> httpx.MockTransport:
    def _handler(request: httpx.Request) -> httpx.Response:
        webhook_requests.append(request)
        body = "upstream error" if webhook_status >= 400 else ""
        return httpx.Response(webhook_status, text=body)

    return httpx.MockTransport(_handler)


@pytest.fixture
def make_settings(discord_config: DiscordConfig):
    """Return a factory for minimal settings used by app wiring and route tests."""

    def _make(*, shared_secret: str = "") -> SimpleNamespace:
        return SimpleNamespace(
            site=SimpleNamespace(url=SITE_URL),
            discord=discord_config,
            trigger=SimpleNamespace(
                shared_secret=shared_secret,
                auth_enabled=bool(shared_secret),
            ),
            app=SimpleNamespace(env="test", log_level="INFO"),
        )

    return _make
