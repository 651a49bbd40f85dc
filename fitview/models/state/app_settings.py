"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fitview.constants.defaults import (
    BACKEND_COMMAND_DEFAULT,
    FITS_ARGS_DEFAULT,
    LOG_LEVEL_DEFAULT,
    SORT_ASCENDING_DEFAULT,
    SORT_KEY_DEFAULT,
    SYSTEM_ARGS_DEFAULT,
    THEME_DEFAULT,
)
from fitview.constants.enums import SortKey
from fitview.constants.limits import COMMAND_TIMEOUT_MAX, COMMAND_TIMEOUT_MIN
from fitview.constants.timeouts import BACKEND_COMMAND_TIMEOUT

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Backend
    backend_command: str = BACKEND_COMMAND_DEFAULT
    system_args: list[str] = Field(default_factory=lambda: list(SYSTEM_ARGS_DEFAULT))
    fits_args: list[str] = Field(default_factory=lambda: list(FITS_ARGS_DEFAULT))
    snapshot_path: str = ""  # when set, read records from this JSON file instead
    command_timeout_seconds: int = Field(
        default=BACKEND_COMMAND_TIMEOUT,
        ge=COMMAND_TIMEOUT_MIN,
        le=COMMAND_TIMEOUT_MAX,
    )

    # Table defaults
    default_sort_key: str = SORT_KEY_DEFAULT
    default_sort_ascending: bool = SORT_ASCENDING_DEFAULT

    # UI preferences
    theme: str = THEME_DEFAULT
    log_level: str = LOG_LEVEL_DEFAULT

    @field_validator("default_sort_key")
    @classmethod
    def _known_sort_key(cls, value: str) -> str:
        valid = {key.value for key in SortKey}
        if value not in valid:
            raise ValueError(f"unknown sort key {value!r}; expected one of {sorted(valid)}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}; expected one of {list(_LOG_LEVELS)}")
        return level


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
