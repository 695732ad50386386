"""Configuration service for managing Aura Session configuration.

This module provides the ConfigService class, the single source of truth
for stored preferences. It handles:

- Loading and saving config.json
- Creating the file with defaults on first run
- Dotted-key reads and validated writes
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from platformdirs import user_config_dir

from aura_session.models.config_models import AppConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir("aura_session"))
        self.config_path = self.config_dir / "config.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # Expected on first run
            logger.info("No config at %s, writing defaults", self.config_path)
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self):
        """Save the current configuration to storage."""
        if self._config is None:
            raise RuntimeError("No configuration to save")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self._config.model_dump_json(indent=4))
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str):
        """Get a configuration value by dotted key."""
        return self.config.get(key)

    def set(self, key: str, value) -> None:
        """Set a configuration value by dotted key and persist it."""
        self._config = self.config.set(key, value)
        logger.debug("Config %s set to %r", key, value)
        self.save_config()

    def reset_config(self):
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self.save_config()


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
