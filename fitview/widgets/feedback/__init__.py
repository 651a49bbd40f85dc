"""Feedback widgets."""

from fitview.widgets.feedback.custom_button import CustomButton

__all__ = ["CustomButton"]
