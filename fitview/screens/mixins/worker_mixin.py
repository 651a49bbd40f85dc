"""WorkerMixin - background loads for screens, with stale results dropped.

Screens fetch backend data in Textual workers so the event loop stays free.

Workers post ``DataLoaded`` / ``DataLoadFailed`` subclasses tagged with the
generation they were started for. Handlers call ``is_current_generation``
and ignore anything older than the latest request.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Any

from textual._context import NoActiveAppError
from textual.message import Message
from textual.worker import Worker, WorkerState

logger = logging.getLogger(__name__)


# ============================================================================
# Worker result messages
# ============================================================================


class DataLoaded(Message):
    """A worker finished and produced ``data``.

    Attributes:
        data: Payload returned by the backend
        generation: Generation the worker was started for
        duration_ms: Backend round-trip time
    """

    def __init__(self, data: Any, generation: int, duration_ms: float = 0.0) -> None:
        super().__init__()
        self.data = data
        self.generation = generation
        self.duration_ms = duration_ms


class DataLoadFailed(Message):
    """A worker finished without data.

    Attributes:
        error: Human-readable failure reason
        generation: Generation the worker was started for
    """

    def __init__(self, error: str, generation: int) -> None:
        super().__init__()
        self.error = error
        self.generation = generation


# ============================================================================
# WorkerMixin Base Class
# ============================================================================


class WorkerMixin:
    """Worker bookkeeping for screens that load backend data.

    Mix in ahead of the Screen base class. Provides:

    - `next_generation()`: Start a new load generation for a worker group
    - `is_current_generation()`: Check whether a result is still wanted
    - `start_worker()`: Worker creation, exclusive within its group
    - `cancel_workers()`: Stop everything still running on this screen
    - `on_worker_state_changed()`: Logs durations and reports worker errors
      through `on_worker_failed()`

    Usage:
        ```python
        class MyScreen(WorkerMixin, Screen):
            def load(self) -> None:
                generation = self.next_generation("items")
                self.start_worker(
                    lambda: self._load_items(generation), name="items", group="items"
                )
        ```
    """

    def __init__(self) -> None:
        # Call super().__init__() so Screen initialization still runs
        super().__init__()
        self._load_start_times: dict[str, float] = {}
        self._generations: dict[str, int] = {}

    def next_generation(self, group: str) -> int:
        """Advance and return the load generation for ``group``."""
        generation = self._generations.get(group, 0) + 1
        self._generations[group] = generation
        return generation

    def is_current_generation(self, group: str, generation: int) -> bool:
        """Whether ``generation`` is the latest one requested for ``group``."""
        return self._generations.get(group, 0) == generation

    def start_worker(
        self,
        work: Awaitable[Any] | Callable[..., Awaitable[Any]],
        *,
        name: str,
        group: str = "default",
        exclusive: bool = True,
        exit_on_error: bool = False,
    ) -> Worker[Any]:
        """Run ``work`` in a Textual worker and remember when it started.

        Args:
            work: Coroutine or async function to run in the worker
            name: Worker name, used in logs and duration tracking
            group: Worker group; exclusive workers only cancel their own group
            exclusive: If True, cancel previous workers in ``group`` first
            exit_on_error: If False, errors don't crash the app (default False)

        Returns:
            The Worker instance
        """
        self._load_start_times[name] = time.monotonic()
        return self.run_worker(  # type: ignore[attr-defined]
            work,
            name=name,
            group=group,
            exclusive=exclusive,
            exit_on_error=exit_on_error,
        )

    def cancel_workers(self) -> None:
        """Cancel all running workers using Textual's built-in WorkerManager."""
        with suppress(NoActiveAppError):
            self.workers.cancel_all()  # type: ignore[attr-defined]

    def on_unmount(self) -> None:
        """Cancel all workers when the screen is unmounted."""
        self.cancel_workers()

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Track finished workers.

        Logs completion with duration and forwards unexpected worker errors to
        ``on_worker_failed``.

        Args:
            event: Textual worker state event
        """
        if event.state not in (
            WorkerState.SUCCESS,
            WorkerState.CANCELLED,
            WorkerState.ERROR,
        ):
            return
        name = event.worker.name
        started = self._load_start_times.pop(name, None)
        duration_ms = (time.monotonic() - started) * 1000 if started is not None else 0.0

        if event.state == WorkerState.CANCELLED:
            logger.debug("Worker '%s' was cancelled (%.2fms)", name, duration_ms)
        elif event.state == WorkerState.ERROR:
            logger.error(
                "Worker '%s' error: %s (%.2fms)", name, event.worker.error, duration_ms
            )
            self.on_worker_failed(event.worker, str(event.worker.error))
        else:
            logger.debug("Worker '%s' completed successfully (%.2fms)", name, duration_ms)

    def on_worker_failed(self, worker: Worker[Any], error: str) -> None:
        """Hook called when a worker raised. Override to surface the error."""


__all__ = [
    "DataLoadFailed",
    "DataLoaded",
    "WorkerMixin",
]
