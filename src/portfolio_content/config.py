"""Environment-driven configuration for the content store."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import timedelta


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


@dataclass(frozen=True)
class CacheConfig:
    ttl_seconds: int = field(
        default_factory=lambda: int(_env("CONTENT_CACHE_TTL_SECONDS", "300"))
    )

    @property
    def default_ttl(self) -> timedelta:
        return timedelta(seconds=self.ttl_seconds)


@dataclass(frozen=True)
class LedgerConfig:
    default_author: str = field(
        default_factory=lambda: _env("CONTENT_DEFAULT_AUTHOR", "system")
    )


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class Settings:
    cache: CacheConfig = field(default_factory=CacheConfig)
    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    app: AppConfig = field(default_factory=AppConfig)


def load_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
