"""Bindings active on every screen."""

from textual.binding import Binding

# ============================================================================
# Global
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("?", "show_help", "Help"),
    Binding("q", "app.quit", "Quit"),
]

__all__ = [
    "APP_BINDINGS",
]
