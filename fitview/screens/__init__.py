"""Screens for the fitview TUI."""

from fitview.screens.base_screen import BaseScreen
from fitview.screens.model_fits import ModelFitsScreen

__all__ = ["BaseScreen", "ModelFitsScreen"]
