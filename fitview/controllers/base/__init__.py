"""Base controller classes."""

from fitview.controllers.base.base_controller import (
    AsyncControllerMixin,
    BackendResult,
    BaseController,
)

__all__ = [
    "AsyncControllerMixin",
    "BackendResult",
    "BaseController",
]
