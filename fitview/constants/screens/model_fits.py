"""Model fits screen constants."""

from typing import Final

# ============================================================================
# Screen title
# ============================================================================

MODEL_FITS_TITLE: Final = "Model Fits"

# ============================================================================
# Search and filter
# ============================================================================

SEARCH_PLACEHOLDER: Final = "Search models or providers..."
LABEL_INSTALLED_ONLY: Final = "Installed only"
LABEL_PROVIDERS: Final = "Providers"
LABEL_INSTALLED_FIRST: Final = "installed first"

# ============================================================================
# Table status messages
# ============================================================================

STATUS_LOADING: Final = "Loading models..."
STATUS_ERROR: Final = "Error loading models"
STATUS_EMPTY: Final = "No models reported by the backend"
STATUS_NO_MATCHES: Final = "No models match the current filters"
STATUS_REFRESH_FAILED: Final = "Refresh failed, showing previous results"
COUNT_LABEL_TEMPLATE: Final = "{visible} of {total} records"

# ============================================================================
# System panel
# ============================================================================

SYSTEM_LOADING: Final = "Detecting system..."
SYSTEM_ERROR: Final = "System info unavailable"

# ============================================================================
# Detail panel
# ============================================================================

BUTTON_CLOSE_DETAIL: Final = "Close"

__all__ = [
    "BUTTON_CLOSE_DETAIL",
    "COUNT_LABEL_TEMPLATE",
    "LABEL_INSTALLED_FIRST",
    "LABEL_INSTALLED_ONLY",
    "LABEL_PROVIDERS",
    "MODEL_FITS_TITLE",
    "SEARCH_PLACEHOLDER",
    "STATUS_EMPTY",
    "STATUS_ERROR",
    "STATUS_LOADING",
    "STATUS_NO_MATCHES",
    "STATUS_REFRESH_FAILED",
    "SYSTEM_ERROR",
    "SYSTEM_LOADING",
]
