"""Model fits screen configuration - column definitions, tooltips and options."""

from __future__ import annotations

from fitview.constants.enums import FitLevel, SortKey
from fitview.constants.values import FILTER_ALL, FILTER_RUNNABLE

# =============================================================================
# Table Column Definitions (label, sort key)
# =============================================================================

MODEL_TABLE_COLUMNS: list[tuple[str, SortKey]] = [
    ("Model", SortKey.NAME),
    ("Params", SortKey.PARAMS),
    ("Score", SortKey.SCORE),
    ("Fit", SortKey.FIT_LEVEL),
    ("Tok/s", SortKey.ESTIMATED_TPS),
    ("Quant", SortKey.BEST_QUANT),
    ("Run Mode", SortKey.RUN_MODE),
    ("Mem %", SortKey.UTILIZATION_PCT),
    ("Context", SortKey.CONTEXT_LENGTH),
    ("Inst.", SortKey.INSTALLED),
]

MODEL_HEADER_TOOLTIPS: dict[str, str] = {
    SortKey.NAME.value: "Model name (provider on the second line).",
    SortKey.PARAMS.value: "Parameter count.",
    SortKey.SCORE.value: "Overall fit score, 0-100.",
    SortKey.FIT_LEVEL.value: "How well the model fits the available memory.",
    SortKey.ESTIMATED_TPS.value: "Estimated generation speed in tokens per second.",
    SortKey.BEST_QUANT.value: "Best quantization that fits.",
    SortKey.RUN_MODE.value: "Execution strategy implied by the fit.",
    SortKey.UTILIZATION_PCT.value: "Share of available memory the model needs.",
    SortKey.CONTEXT_LENGTH.value: "Context window in thousands of tokens.",
    SortKey.INSTALLED.value: "Whether the model is installed locally.",
}

SORT_INDICATOR_ASC = " ▲"
SORT_INDICATOR_DESC = " ▼"

# Rows show the short name and the provider on two lines.
MODEL_ROW_HEIGHT = 2

# =============================================================================
# Select Widget Options (label, value)
# =============================================================================

FIT_LEVEL_ORDER: tuple[str, ...] = tuple(level.value for level in FitLevel)

FIT_FILTER_BASE_OPTIONS: list[tuple[str, str]] = [
    ("All fits", FILTER_ALL),
    ("Runnable", FILTER_RUNNABLE),
]

CATEGORY_FILTER_BASE_OPTIONS: list[tuple[str, str]] = [
    ("All categories", FILTER_ALL),
]

RUN_MODE_FILTER_BASE_OPTIONS: list[tuple[str, str]] = [
    ("All modes", FILTER_ALL),
]

QUANT_FILTER_BASE_OPTIONS: list[tuple[str, str]] = [
    ("All quants", FILTER_ALL),
]

# =============================================================================
# Worker groups
# =============================================================================

WORKER_GROUP_FITS = "model-fits"
WORKER_GROUP_SYSTEM = "system-info"
