"""Backend payload fetchers."""

from fitview.controllers.backend.fetchers.command_fetcher import CommandFetcher
from fitview.controllers.backend.fetchers.snapshot_fetcher import SnapshotFetcher

__all__ = ["CommandFetcher", "SnapshotFetcher"]
