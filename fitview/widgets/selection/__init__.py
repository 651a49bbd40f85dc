"""Selection widgets."""

from fitview.widgets.selection.custom_select import CustomSelect
from fitview.widgets.selection.custom_selection_list import CustomSelectionList
from fitview.widgets.selection.custom_switch import CustomSwitch

__all__ = ["CustomSelect", "CustomSelectionList", "CustomSwitch"]
