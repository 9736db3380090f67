"""Settings persistence - loads and saves AppSettings as YAML."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from fleetscope.constants.defaults import CONFIG_PATH_DEFAULT
from fleetscope.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)

# Environment variables applied on top of the settings file.
ENV_OVERRIDES: dict[str, str] = {
    "FLEETSCOPE_API_URL": "api_base_url",
    "FLEETSCOPE_LOG_LEVEL": "log_level",
}


class ConfigManager:
    """Reads and writes the settings file."""

    @staticmethod
    def default_path() -> Path:
        return Path(CONFIG_PATH_DEFAULT).expanduser()

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> AppSettings:
        """Load settings from ``path`` (defaults when the file is absent).

        Raises:
            ConfigLoadError: If the file cannot be read, parsed or validated.
        """
        config_path = path or cls.default_path()
        data: dict = {}
        if config_path.exists():
            try:
                with config_path.open(encoding="utf-8") as handle:
                    loaded = yaml.safe_load(handle)
            except (OSError, yaml.YAMLError) as exc:
                raise ConfigLoadError(f"Cannot read settings from {config_path}: {exc}") from exc
            if loaded is not None and not isinstance(loaded, dict):
                raise ConfigLoadError(f"Settings file {config_path} must contain a mapping")
            data = loaded or {}
        else:
            logger.debug(f"No settings file at {config_path}; using defaults")

        env = os.environ if environ is None else environ
        for variable, field_name in ENV_OVERRIDES.items():
            value = env.get(variable)
            if value:
                data[field_name] = value

        try:
            return AppSettings(**data)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {config_path}: {exc}") from exc

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Write ``settings`` as YAML and return the path written.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        config_path = path or cls.default_path()
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with config_path.open("w", encoding="utf-8") as handle:
                yaml.safe_dump(settings.model_dump(), handle, sort_keys=True)
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write settings to {config_path}: {exc}") from exc
        logger.info(f"Saved settings to {config_path}")
        return config_path


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
