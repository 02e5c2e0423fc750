"""Configuration service for todoapp.

This module provides the ConfigService class, which loads and saves the
application configuration:

- ``config.json`` under the platform config directory (or an explicit path)
- Built-in defaults when no file exists (MongoDB on localhost:27017/todoapp)
- ``TODOAPP_*`` environment variables overriding file values

There is no global instance: the caller builds one ConfigService at startup
and passes its ``config`` to the repository factory.
"""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import ValidationError as PydanticValidationError

from todoapp.models.config_models import AppConfig

# Environment variable -> (section, field)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "TODOAPP_DATABASE_TYPE": ("database", "type"),
    "TODOAPP_MONGODB_HOST": ("mongodb", "host"),
    "TODOAPP_MONGODB_PORT": ("mongodb", "port"),
    "TODOAPP_MONGODB_DATABASE": ("mongodb", "database"),
    "TODOAPP_MYSQL_URL": ("mysql", "url"),
    "TODOAPP_MYSQL_USERNAME": ("mysql", "username"),
    "TODOAPP_MYSQL_PASSWORD": ("mysql", "password"),
}


class ConfigService:
    """Service for managing application configuration."""

    def __init__(self, config_path: str | Path | None = None, environ: dict[str, str] | None = None):
        """Initialize the config service.

        Args:
            config_path: Optional explicit path to config.json
            environ: Optional environment mapping (defaults to os.environ)
        """
        if config_path is None:
            self.config_dir = Path(user_config_dir("todoapp"))
            self.config_path = self.config_dir / "config.json"
        else:
            self.config_path = Path(config_path)
            self.config_dir = self.config_path.parent

        self._environ = os.environ if environ is None else environ
        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from file, defaults and environment.

        Raises:
            RuntimeError: If the config file exists but cannot be parsed
        """
        try:
            with open(self.config_path, encoding="utf-8") as f:
                config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run: no file yet
            config = AppConfig()
        except (OSError, PydanticValidationError) as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        try:
            self._config = self._apply_env_overrides(config)
        except PydanticValidationError as e:
            raise RuntimeError(f"Invalid configuration in environment: {e}") from e
        return self._config

    def _apply_env_overrides(self, config: AppConfig) -> AppConfig:
        data = config.model_dump()
        changed = False
        for env_name, (section, field) in ENV_OVERRIDES.items():
            value = self._environ.get(env_name)
            if value is None or value == "":
                continue
            data[section][field] = value
            changed = True
        return AppConfig.model_validate(data) if changed else config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))

            # Holds database credentials
            self.config_path.chmod(0o600)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def reset_config(self) -> AppConfig:
        """Delete the config file and return to defaults."""
        if self.config_path.exists():
            self.config_path.unlink()
        self._config = None
        return self.config
