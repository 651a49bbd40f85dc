"""Data display widgets."""

from fitview.widgets.data.tables import CustomDataTable

__all__ = ["CustomDataTable"]
