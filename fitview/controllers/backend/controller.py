"""Backend controller - the single request/response boundary to the scorer.

The scoring backend (hardware probe plus model-fit ranking) is an external
collaborator. This module wraps it behind a typed interface whose operations
return ``BackendResult`` values instead of raising, so screens and tests can
handle failures without a rendering surface.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
import subprocess
from abc import abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from fitview.constants.defaults import FITS_ARGS_DEFAULT, SYSTEM_ARGS_DEFAULT
from fitview.constants.timeouts import BACKEND_COMMAND_TIMEOUT, SYSTEM_INFO_TIMEOUT
from fitview.controllers.backend.errors import BackendError
from fitview.controllers.backend.fetchers import CommandFetcher, SnapshotFetcher
from fitview.controllers.backend.parsers import FitParser
from fitview.controllers.base import BackendResult, BaseController
from fitview.models.fits.model_fit import ModelFitRecord
from fitview.models.system.system_info import SystemInfoRecord

logger = logging.getLogger(__name__)


class BackendController(BaseController):
    """Typed backend boundary.

    Subclasses provide the raw decoded payloads; this class turns them into
    records and folds every failure into a ``BackendResult``.
    """

    SOURCE_SYSTEM = "system"
    SOURCE_MODELS = "models"

    _EXPECTED_ERRORS = (BackendError, OSError, ValueError)

    def __init__(self) -> None:
        super().__init__()
        self._parser = FitParser()

    @abstractmethod
    async def _fetch_system_payload(self) -> Any:
        """Return the decoded system-info payload."""
        ...

    @abstractmethod
    async def _fetch_fits_payload(self) -> Any:
        """Return the decoded model-fit payload."""
        ...

    async def get_system_info(self) -> BackendResult[SystemInfoRecord]:
        """Fetch the system capability summary."""
        started = self._start_timer()
        try:
            payload = await self._fetch_system_payload()
            info = self._parser.parse_system_info(payload)
        except self._EXPECTED_ERRORS as exc:
            duration_ms = self._elapsed_ms(started)
            logger.warning("get_system_info failed after %.0fms: %s", duration_ms, exc)
            return BackendResult.failed(str(exc) or type(exc).__name__, duration_ms)
        duration_ms = self._elapsed_ms(started)
        logger.debug("get_system_info completed (%.2fms)", duration_ms)
        return BackendResult.ok(info, duration_ms)

    async def get_system_specs(self) -> BackendResult[SystemInfoRecord]:
        """Alias of ``get_system_info`` with the same contract."""
        return await self.get_system_info()

    async def get_model_fits(self) -> BackendResult[list[ModelFitRecord]]:
        """Fetch the full model-fit record set."""
        started = self._start_timer()
        try:
            payload = await self._fetch_fits_payload()
            records = self._parser.parse_model_fits(payload)
        except self._EXPECTED_ERRORS as exc:
            duration_ms = self._elapsed_ms(started)
            logger.warning("get_model_fits failed after %.0fms: %s", duration_ms, exc)
            return BackendResult.failed(str(exc) or type(exc).__name__, duration_ms)
        duration_ms = self._elapsed_ms(started)
        logger.debug(
            "get_model_fits returned %d records (%.2fms)", len(records), duration_ms
        )
        return BackendResult.ok(records, duration_ms)

    async def get_model_detail(self, name: str) -> BackendResult[ModelFitRecord | None]:
        """Fetch a single record by name; ``data`` is None when it is unknown."""
        result = await self.get_model_fits()
        if not result.success:
            return BackendResult.failed(result.error or "unknown error", result.duration_ms)
        match = next((r for r in result.data or [] if r.name == name), None)
        return BackendResult.ok(match, result.duration_ms)

    async def fetch_all(self) -> dict[str, Any]:
        """Fetch system info and model fits concurrently.

        Returns:
            Mapping of ``system`` and ``models`` to their ``BackendResult``.
        """
        system, models = await asyncio.gather(
            self.get_system_info(), self.get_model_fits()
        )
        return {self.SOURCE_SYSTEM: system, self.SOURCE_MODELS: models}


class CommandBackendController(BackendController):
    """Backend reached by running an executable that prints JSON to stdout."""

    def __init__(
        self,
        command: str,
        *,
        system_args: Sequence[str] = SYSTEM_ARGS_DEFAULT,
        fits_args: Sequence[str] = FITS_ARGS_DEFAULT,
        timeout: int = BACKEND_COMMAND_TIMEOUT,
    ) -> None:
        """Initialize the command backend.

        Args:
            command: Backend executable name or path
            system_args: Arguments producing the system-info JSON
            fits_args: Arguments producing the model-fit JSON
            timeout: Per-call timeout in seconds
        """
        super().__init__()
        self.command = command
        self.timeout = timeout
        self._fetcher = CommandFetcher(self._run_backend, system_args, fits_args)

    async def check_connection(self) -> bool:
        """Check whether the backend executable can be found."""
        return shutil.which(self.command) is not None

    def _run_backend_sync(self, args: tuple[str, ...], timeout: int) -> str:
        """Run the backend command synchronously (thread-safe wrapper target)."""
        cmd = [self.command, *args]
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=timeout
            )
        except subprocess.TimeoutExpired as exc:
            raise BackendError(f"{' '.join(cmd)} timed out after {timeout}s") from exc
        except FileNotFoundError as exc:
            raise BackendError(f"backend command not found: {self.command}") from exc
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise BackendError(
                stderr or f"{' '.join(cmd)} exited with status {result.returncode}"
            )
        return result.stdout

    async def _run_backend(self, args: tuple[str, ...], timeout: int) -> str:
        return await asyncio.to_thread(self._run_backend_sync, args, timeout)

    async def _fetch_system_payload(self) -> Any:
        return await self._fetcher.fetch_system(min(self.timeout, SYSTEM_INFO_TIMEOUT))

    async def _fetch_fits_payload(self) -> Any:
        return await self._fetcher.fetch_fits(self.timeout)


class SnapshotBackendController(BackendController):
    """Backend replayed from a JSON snapshot file (offline use and tests)."""

    def __init__(self, path: Path | str) -> None:
        super().__init__()
        self.path = Path(path).expanduser()
        self._fetcher = SnapshotFetcher(self.path)

    async def check_connection(self) -> bool:
        """Check whether the snapshot file exists."""
        return self.path.is_file()

    async def _fetch_system_payload(self) -> Any:
        return await self._fetcher.fetch_section(self.SOURCE_SYSTEM)

    async def _fetch_fits_payload(self) -> Any:
        return await self._fetcher.fetch_section(self.SOURCE_MODELS)
