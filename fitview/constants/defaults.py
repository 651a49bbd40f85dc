"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "textual-dark"
SORT_KEY_DEFAULT: Final = "score"
SORT_ASCENDING_DEFAULT: Final = False

# ============================================================================
# Backend defaults
# ============================================================================

BACKEND_COMMAND_DEFAULT: Final = "llmfit"
SYSTEM_ARGS_DEFAULT: Final = ("system", "--json")
FITS_ARGS_DEFAULT: Final = ("fit", "--json")

# ============================================================================
# Logging defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "INFO"
LOG_FILE_NAME: Final = "fitview.log"

__all__ = [
    "BACKEND_COMMAND_DEFAULT",
    "FITS_ARGS_DEFAULT",
    "LOG_FILE_NAME",
    "LOG_LEVEL_DEFAULT",
    "SORT_ASCENDING_DEFAULT",
    "SORT_KEY_DEFAULT",
    "SYSTEM_ARGS_DEFAULT",
    "THEME_DEFAULT",
]
