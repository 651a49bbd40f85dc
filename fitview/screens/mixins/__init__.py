"""Screen mixins."""

from fitview.screens.mixins.worker_mixin import DataLoaded, DataLoadFailed, WorkerMixin

__all__ = ["DataLoadFailed", "DataLoaded", "WorkerMixin"]
