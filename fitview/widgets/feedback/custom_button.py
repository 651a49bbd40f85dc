"""CustomButton widget - standardized wrapper around Textual's Button."""

from __future__ import annotations

from textual.widgets import Button


class CustomButton(Button):
    """Button with the TUI's standard CSS class.

    CSS Classes: widget-custom-button
    """

    def __init__(
        self,
        label: str,
        *,
        variant: str = "default",
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(
            label,
            variant=variant,  # type: ignore[arg-type]
            id=id,
            classes=f"widget-custom-button {classes}".strip(),
        )
