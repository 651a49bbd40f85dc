"""Shared fixtures for smoke tests: an app wired to a snapshot backend."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from fitview.app import FitViewApp

SNAPSHOT: dict[str, Any] = {
    "system": {
        "cpu": "Apple M2 Pro",
        "cores": 12,
        "ram_gb": 32.0,
        "gpu": "Apple M2 Pro",
        "gpu_backend": "Metal",
        "vram_gb": 32.0,
        "unified_memory": True,
        "ollama_available": True,
        "ollama_installed_count": 1,
    },
    "models": [
        {
            "name": "a/x",
            "provider": "Alpha",
            "score": 80,
            "fit_level": "Good",
            "fit_emoji": "🟢",
            "category": "chat",
            "installed": True,
            "utilization_pct": 143.7,
        },
        {
            "name": "b/y",
            "provider": "Beta",
            "score": 95,
            "fit_level": "Perfect",
            "fit_emoji": "🟢",
            "category": "code",
            "installed": False,
        },
    ],
}


@pytest.fixture
def snapshot_path(tmp_path: Path) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(SNAPSHOT), encoding="utf-8")
    return path


@pytest.fixture
def app(snapshot_path: Path, tmp_path: Path) -> FitViewApp:
    """App reading the sample snapshot, with settings kept under tmp_path."""
    return FitViewApp(snapshot_path=snapshot_path, config_path=tmp_path / "settings.json")

