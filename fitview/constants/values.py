"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "fitview"

# ============================================================================
# Filter sentinels
# ============================================================================

FILTER_ALL: Final = "all"
FILTER_RUNNABLE: Final = "runnable"

# ============================================================================
# Display glyphs and placeholders
# ============================================================================

NOT_AVAILABLE: Final = "N/A"
INSTALLED_MARK: Final = "✓"
NOT_INSTALLED_MARK: Final = "—"
INSTALLED_LABEL: Final = "✓ Installed"
NOT_INSTALLED_LABEL: Final = "✗ Not installed"
OLLAMA_UNAVAILABLE_LABEL: Final = "✗ Not running"
NAME_PATH_SEPARATOR: Final = "/"
SELECTED_ROW_MARKER: Final = "▸ "

__all__ = [
    "APP_TITLE",
    "FILTER_ALL",
    "FILTER_RUNNABLE",
    "INSTALLED_LABEL",
    "INSTALLED_MARK",
    "NAME_PATH_SEPARATOR",
    "NOT_AVAILABLE",
    "NOT_INSTALLED_LABEL",
    "NOT_INSTALLED_MARK",
    "OLLAMA_UNAVAILABLE_LABEL",
    "SELECTED_ROW_MARKER",
]
