"""Model fits screen components."""

from fitview.screens.model_fits.components.detail_panel import DetailPanel
from fitview.screens.model_fits.components.system_panel import SystemPanel

__all__ = ["DetailPanel", "SystemPanel"]
