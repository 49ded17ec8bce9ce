# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Process settings using Pydantic Settings.

Settings cover how the engine is hosted (environment, logging, where the
YAML configuration lives, batch parallelism). Scoring weights and
thresholds are not settings; they live in config/engine.yaml and are
parsed by edupersona.core.config.engine.

Example:
    >>> from edupersona.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> settings.config_dir
    PosixPath('.../config')
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parents[3] / "config"


class Settings(BaseSettings):
    """Engine host settings loaded from EDUPERSONA_* environment variables.

    Attributes:
        environment: Current environment (development, staging, production).
        debug: Enable debug mode (console log rendering).
        log_level: Logging level.
        config_dir: Directory holding engine.yaml, catalogs/ and content/.
        risk_max_workers: Thread pool size for batch risk prediction;
            1 evaluates the batch sequentially.
    """

    model_config = SettingsConfigDict(
        env_prefix="EDUPERSONA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    config_dir: Path = DEFAULT_CONFIG_DIR
    risk_max_workers: int = Field(default=1, ge=1, le=64)

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def catalogs_dir(self) -> Path:
        """Directory holding the language and tutor catalogs."""
        return self.config_dir / "catalogs"

    @property
    def content_dir(self) -> Path:
        """Directory holding curated cultural content."""
        return self.config_dir / "content"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Call clear_settings_cache() if you need to reload settings.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Useful for testing with patched environment variables.
    """
    get_settings.cache_clear()
