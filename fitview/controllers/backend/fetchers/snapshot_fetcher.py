"""Snapshot fetcher for backend controller - replays a saved JSON payload."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from fitview.controllers.backend.errors import BackendError

logger = logging.getLogger(__name__)


class SnapshotFetcher:
    """Reads sections of a ``{"system": {...}, "models": [...]}`` snapshot file.

    The file is re-read on every call so edits show up on refresh.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    async def fetch_section(self, key: str) -> Any:
        """Return one top-level section of the snapshot.

        Raises:
            BackendError: The file is not valid JSON or lacks ``key``.
            OSError: The file cannot be read.
        """
        raw = await asyncio.to_thread(self.path.read_text, encoding="utf-8")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise BackendError(f"snapshot {self.path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise BackendError(f"snapshot {self.path} is not a JSON object")
        if key not in data:
            raise BackendError(f"snapshot {self.path} has no '{key}' entry")
        return data[key]
