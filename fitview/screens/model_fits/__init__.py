"""Model fits screen package."""

from fitview.screens.model_fits.model_fits_screen import ModelFitsScreen
from fitview.screens.model_fits.presenter import ModelFitsPresenter

__all__ = ["ModelFitsPresenter", "ModelFitsScreen"]
