"""Model fit models."""

from fitview.models.fits.model_fit import ModelFitRecord

__all__ = ["ModelFitRecord"]
