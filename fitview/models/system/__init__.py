"""System info models."""

from fitview.models.system.system_info import SystemInfoRecord

__all__ = ["SystemInfoRecord"]
