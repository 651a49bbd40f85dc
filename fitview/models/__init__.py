"""Data models for fitview."""

from fitview.models.fits import ModelFitRecord
from fitview.models.system import SystemInfoRecord

__all__ = [
    "ModelFitRecord",
    "SystemInfoRecord",
]
