"""Display widgets."""

from fitview.widgets.display.custom_bar import CustomBar, render_bar
from fitview.widgets.display.custom_static import CustomStatic

__all__ = [
    "CustomBar",
    "CustomStatic",
    "render_bar",
]
