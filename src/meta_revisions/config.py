"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import StrEnum


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


class StoreBackend(StrEnum):
    MEMORY = "memory"
    COSMOS = "cosmos"


class ComparisonMode(StrEnum):
    """How metadata value sequences are compared for change detection."""

    STRICT = "strict"
    LOOSE = "loose"


@dataclass(frozen=True)
class CosmosConfig:
    endpoint: str = field(default_factory=lambda: _env("COSMOS_ENDPOINT"))
    key: str = field(default_factory=lambda: _env("COSMOS_KEY"))
    database: str = field(default_factory=lambda: _env("COSMOS_DATABASE", "meta-revisions"))


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class RevisionConfig:
    """Which keys are versioned and how they are stored and compared."""

    backend: StoreBackend = field(
        default_factory=lambda: StoreBackend(_env("META_REVISIONS_BACKEND", StoreBackend.MEMORY))
    )
    keys_json: str = field(default_factory=lambda: _env("META_REVISIONS_KEYS"))
    keys_file: str = field(default_factory=lambda: _env("META_REVISIONS_KEYS_FILE"))
    comparison: ComparisonMode = field(
        default_factory=lambda: ComparisonMode(_env("META_REVISIONS_COMPARISON", ComparisonMode.STRICT))
    )


@dataclass(frozen=True)
class Settings:
    cosmos: CosmosConfig = field(default_factory=CosmosConfig)
    app: AppConfig = field(default_factory=AppConfig)
    revisions: RevisionConfig = field(default_factory=RevisionConfig)


def load_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
