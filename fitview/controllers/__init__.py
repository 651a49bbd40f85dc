"""Controllers module for fitview.

This module provides the controllers that reach the external scoring
backend and return tagged results.
"""

from __future__ import annotations

# Base classes
from fitview.controllers.base import (
    AsyncControllerMixin,
    BackendResult,
    BaseController,
)

# Backend domain
from fitview.controllers.backend import (
    BackendController,
    BackendError,
    CommandBackendController,
    SnapshotBackendController,
)

__all__ = [
    # Base
    "AsyncControllerMixin",
    # Backend
    "BackendController",
    "BackendError",
    "BackendResult",
    "BaseController",
    "CommandBackendController",
    "SnapshotBackendController",
]
