"""Base controller with async worker-friendly patterns for fitview.

This module provides the foundation for background data loading using Textual
Workers, ensuring the UI remains responsive while the backend scores models.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class BackendResult(Generic[T]):
    """Tagged result of one backend round trip.

    Either ``success`` is true and ``data`` holds the payload, or it is false
    and ``error`` carries the reason. Callers branch on ``success`` instead of
    catching exceptions.
    """

    success: bool
    data: T | None = None
    error: str | None = None
    duration_ms: float = 0.0

    @classmethod
    def ok(cls, data: T, duration_ms: float = 0.0) -> BackendResult[T]:
        """Build a successful result."""
        return cls(success=True, data=data, duration_ms=duration_ms)

    @classmethod
    def failed(cls, error: str, duration_ms: float = 0.0) -> BackendResult[T]:
        """Build a failed result."""
        return cls(success=False, error=error, duration_ms=duration_ms)


class AsyncControllerMixin:
    """Timing helpers shared by backend controllers.

    Controllers are awaited from Textual workers; durations end up in
    ``BackendResult.duration_ms`` and the logs.
    """

    @staticmethod
    def _start_timer() -> float:
        """Start time of a backend call, for ``_elapsed_ms``."""
        return time.monotonic()

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        """Milliseconds elapsed since ``started``."""
        return (time.monotonic() - started) * 1000


class BaseController(AsyncControllerMixin, ABC):
    """Abstract data source awaited from screen workers."""

    @abstractmethod
    async def check_connection(self) -> bool:
        """Whether the data source looks reachable (no fetch is made)."""
        ...

    @abstractmethod
    async def fetch_all(self) -> dict[str, Any]:
        """Fetch every section the source offers, keyed by section name."""
        ...
