"""Input widgets."""

from fitview.widgets.input.custom_input import CustomInput

__all__ = ["CustomInput"]
