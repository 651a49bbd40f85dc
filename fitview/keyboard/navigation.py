"""Screen-specific keyboard bindings."""

from typing import Annotated

# ============================================================================
# Model Fits Screen Bindings
# ============================================================================

MODEL_FITS_SCREEN_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("escape", "close_detail", "Close"),
    ("r", "refresh", "Refresh"),
    ("slash", "focus_search", "Search"),
    ("f", "cycle_fit_filter", "Fit Filter"),
    ("i", "toggle_installed", "Installed"),
    ("x", "reset_filters", "Reset Filters"),
    ("p", "toggle_provider_panel", "Providers"),
    ("a", "toggle_all_providers", "All Providers"),
    ("o", "toggle_installed_first", "Installed First"),
]

__all__ = [
    "MODEL_FITS_SCREEN_BINDINGS",
]
