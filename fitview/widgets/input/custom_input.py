"""CustomInput widget - standardized wrapper around Textual's Input."""

from __future__ import annotations

from textual.widgets import Input


class CustomInput(Input):
    """Single-line text input with the TUI's standard CSS class.

    CSS Classes: widget-custom-input
    """

    def __init__(
        self,
        value: str = "",
        *,
        placeholder: str = "",
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(
            value=value,
            placeholder=placeholder,
            id=id,
            classes=f"widget-custom-input {classes}".strip(),
        )
