"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Fetch State Enums
# =============================================================================


class FetchState(Enum):
    """Data fetch state values."""

    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class TableStatus(Enum):
    """What the model table is currently able to show."""

    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    NO_MATCHES = "no_matches"
    READY = "ready"


# =============================================================================
# Domain Enums
# =============================================================================


class FitLevel(Enum):
    """Fit verdicts as reported by the backend."""

    PERFECT = "Perfect"
    GOOD = "Good"
    MARGINAL = "Marginal"
    TOO_TIGHT = "TooTight"


class SortKey(Enum):
    """Record fields the model table can be ordered by."""

    NAME = "name"
    PARAMS = "params"
    SCORE = "score"
    FIT_LEVEL = "fit_level"
    ESTIMATED_TPS = "estimated_tps"
    BEST_QUANT = "best_quant"
    RUN_MODE = "run_mode"
    UTILIZATION_PCT = "utilization_pct"
    CONTEXT_LENGTH = "context_length"
    INSTALLED = "installed"


__all__ = [
    "FetchState",
    "FitLevel",
    "SortKey",
    "TableStatus",
]
