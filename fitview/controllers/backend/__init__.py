"""Backend domain controllers."""

from fitview.controllers.backend.controller import (
    BackendController,
    CommandBackendController,
    SnapshotBackendController,
)
from fitview.controllers.backend.errors import BackendError

__all__ = [
    "BackendController",
    "BackendError",
    "CommandBackendController",
    "SnapshotBackendController",
]
