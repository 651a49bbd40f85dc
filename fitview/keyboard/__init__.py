"""Keyboard bindings module.

This module provides all keyboard bindings for the fitview TUI.
Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
"""

from fitview.keyboard.app import APP_BINDINGS
from fitview.keyboard.navigation import MODEL_FITS_SCREEN_BINDINGS

__all__ = [
    "APP_BINDINGS",
    # Screen-specific bindings
    "MODEL_FITS_SCREEN_BINDINGS",
]
