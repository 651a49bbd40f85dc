"""Timeout constants for the TUI.

All timeout values for backend command invocations.
"""

from typing import Final

# ============================================================================
# Process-level command timeouts (seconds)
# ============================================================================

BACKEND_COMMAND_TIMEOUT: Final = 60

# Hardware probing is quicker than scoring the full model catalogue.
SYSTEM_INFO_TIMEOUT: Final = 20

__all__ = [
    "BACKEND_COMMAND_TIMEOUT",
    "SYSTEM_INFO_TIMEOUT",
]
