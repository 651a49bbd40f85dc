"""Constants module for fitview.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, glyphs with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (scales, bar widths, validation ranges)
- defaults.py: Default values for settings
- screens/: Screen-specific constants

Note: Keyboard bindings are defined in fitview.keyboard module.
"""

from fitview.constants.defaults import (
    BACKEND_COMMAND_DEFAULT,
    FITS_ARGS_DEFAULT,
    SORT_ASCENDING_DEFAULT,
    SORT_KEY_DEFAULT,
    SYSTEM_ARGS_DEFAULT,
    THEME_DEFAULT,
)
from fitview.constants.enums import (
    FetchState,
    FitLevel,
    SortKey,
    TableStatus,
)
from fitview.constants.limits import (
    BAR_PERCENT_MAX,
    SUBSCORE_MAX,
)
from fitview.constants.timeouts import (
    BACKEND_COMMAND_TIMEOUT,
    SYSTEM_INFO_TIMEOUT,
)
from fitview.constants.values import (
    APP_TITLE,
    FILTER_ALL,
    FILTER_RUNNABLE,
    NOT_AVAILABLE,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Defaults
    "BACKEND_COMMAND_DEFAULT",
    # Timeouts
    "BACKEND_COMMAND_TIMEOUT",
    # Limits
    "BAR_PERCENT_MAX",
    # Filter sentinels
    "FILTER_ALL",
    "FILTER_RUNNABLE",
    "FITS_ARGS_DEFAULT",
    "NOT_AVAILABLE",
    "SORT_ASCENDING_DEFAULT",
    "SORT_KEY_DEFAULT",
    "SUBSCORE_MAX",
    "SYSTEM_ARGS_DEFAULT",
    "SYSTEM_INFO_TIMEOUT",
    "THEME_DEFAULT",
    # Enums
    "FetchState",
    "FitLevel",
    "SortKey",
    "TableStatus",
]
