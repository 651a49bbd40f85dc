"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Score scales
# ============================================================================

SUBSCORE_MAX: Final = 30.0

# ============================================================================
# Bar rendering
# ============================================================================

BAR_PERCENT_MAX: Final = 100.0
BAR_WIDTH: Final = 24

# ============================================================================
# Validation limits
# ============================================================================

COMMAND_TIMEOUT_MIN: Final = 1
COMMAND_TIMEOUT_MAX: Final = 600

__all__ = [
    "BAR_PERCENT_MAX",
    "BAR_WIDTH",
    "COMMAND_TIMEOUT_MAX",
    "COMMAND_TIMEOUT_MIN",
    "SUBSCORE_MAX",
]
