"""Settings persistence for fitview.

Settings are stored as JSON under the user's config directory. The
location can be overridden with the ``FITVIEW_CONFIG_PATH`` environment
variable, which tests use to stay away from the real home directory.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from fitview.models.state.app_settings import (
    AppSettings,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "FITVIEW_CONFIG_PATH"


class ConfigManager:
    """Load, save and reset persisted ``AppSettings``."""

    @staticmethod
    def config_dir() -> Path:
        """Directory holding settings and the default log file."""
        return Path.home() / ".config" / "fitview"

    @classmethod
    def config_path(cls) -> Path:
        """Return the settings file path, honouring the env override."""
        override = os.environ.get(CONFIG_PATH_ENV, "").strip()
        if override:
            return Path(override).expanduser()
        return cls.config_dir() / "settings.json"

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings, returning defaults when no file exists yet.

        Raises:
            ConfigLoadError: The file exists but cannot be read or validated.
        """
        settings_path = path or cls.config_path()
        if not settings_path.exists():
            return AppSettings()
        try:
            raw = settings_path.read_text(encoding="utf-8")
            return AppSettings.model_validate_json(raw)
        except (OSError, ValidationError) as exc:
            logger.warning("Failed to load settings from %s: %s", settings_path, exc)
            raise ConfigLoadError(str(exc)) from exc

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> None:
        """Persist settings as pretty-printed JSON.

        Raises:
            ConfigSaveError: The file cannot be written.
        """
        settings_path = path or cls.config_path()
        try:
            settings_path.parent.mkdir(parents=True, exist_ok=True)
            settings_path.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("Failed to save settings to %s: %s", settings_path, exc)
            raise ConfigSaveError(str(exc)) from exc

    @classmethod
    def reset(cls, path: Path | None = None) -> AppSettings:
        """Overwrite persisted settings with defaults and return them."""
        settings = AppSettings()
        cls.save(settings, path)
        return settings
