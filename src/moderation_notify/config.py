"""Environment-backed configuration, loaded once at process startup."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from moderation_notify.errors import ConfigurationError

_DEFAULT_TIMEOUT_SECONDS = 10.0


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def _env_float(key: str, default: float) -> float:
    raw = _env(key)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}") from exc


@dataclass(frozen=True)
class SiteConfig:
    """Public site used to build deep links in notifications."""

    url: str = field(default_factory=lambda: _env("SITE_URL").rstrip("/"))


@dataclass(frozen=True)
class DiscordConfig:
    webhook_url: str = field(default_factory=lambda: _env("DISCORD_WEBHOOK_URL"))
    timeout_seconds: float = field(
        default_factory=lambda: _env_float("DISCORD_TIMEOUT_SECONDS", _DEFAULT_TIMEOUT_SECONDS)
    )


@dataclass(frozen=True)
class TriggerConfig:
    """Shared secret expected from the change-trigger runtime; empty disables the check."""

    shared_secret: str = field(default_factory=lambda: _env("TRIGGER_SHARED_SECRET"))

    @property
    def auth_enabled(self) -> bool:
        return bool(self.shared_secret)


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))


@dataclass(frozen=True)
class Settings:
    site: SiteConfig = field(default_factory=SiteConfig)
    discord: DiscordConfig = field(default_factory=DiscordConfig)
    trigger: TriggerConfig = field(default_factory=TriggerConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Build settings from the environment, failing fast on missing required values."""
    settings = Settings()

    missing = []
    if not settings.site.url:
        missing.append("SITE_URL")
    if not settings.discord.webhook_url:
        missing.append("DISCORD_WEBHOOK_URL")
    if missing:
        raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")

    return settings
