"""Command fetcher for backend controller - decodes JSON printed by the backend CLI."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from fitview.controllers.backend.errors import BackendError

logger = logging.getLogger(__name__)


class CommandFetcher:
    """Fetches system and fit payloads by running the backend executable."""

    def __init__(
        self,
        run_backend_func: Any,
        system_args: Sequence[str],
        fits_args: Sequence[str],
    ) -> None:
        """Initialize command fetcher.

        Args:
            run_backend_func: Async function running the backend with args
            system_args: Arguments producing the system-info JSON
            fits_args: Arguments producing the model-fit JSON
        """
        self._run_backend = run_backend_func
        self.system_args = tuple(system_args)
        self.fits_args = tuple(fits_args)

    async def fetch_system(self, timeout: int) -> Any:
        """Run the system-info command and decode its output."""
        output = await self._run_backend(self.system_args, timeout)
        return self._decode(output, self.system_args)

    async def fetch_fits(self, timeout: int) -> Any:
        """Run the model-fit command and decode its output."""
        output = await self._run_backend(self.fits_args, timeout)
        return self._decode(output, self.fits_args)

    @staticmethod
    def _decode(output: str, args: tuple[str, ...]) -> Any:
        if not output.strip():
            raise BackendError(f"backend printed nothing for {' '.join(args)}")
        try:
            return json.loads(output)
        except json.JSONDecodeError as exc:
            logger.debug("Undecodable backend output for %s: %.200s", args, output)
            raise BackendError(f"backend output is not valid JSON: {exc}") from exc
