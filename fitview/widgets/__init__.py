"""Widgets module for the fitview TUI.

This module provides the reusable widgets organized into submodules:
- data: Data display widgets (CustomDataTable)
- display: Display widgets (CustomBar, CustomStatic)
- feedback: Button
- input: Input widgets (CustomInput)
- selection: Selection widgets (CustomSelect, CustomSelectionList, CustomSwitch)
"""

# Data display widgets
from fitview.widgets.data import CustomDataTable

# Display widgets
from fitview.widgets.display import CustomBar, CustomStatic, render_bar

# Feedback widgets
from fitview.widgets.feedback import CustomButton

# Input widgets
from fitview.widgets.input import CustomInput

# Selection widgets
from fitview.widgets.selection import CustomSelect, CustomSelectionList, CustomSwitch

__all__ = [
    "CustomBar",
    "CustomButton",
    "CustomDataTable",
    "CustomInput",
    "CustomSelect",
    "CustomSelectionList",
    "CustomStatic",
    "CustomSwitch",
    "render_bar",
]
