"""CustomStatic widget - standardized wrapper around Textual's Static."""

from __future__ import annotations

from textual.widgets import Static


class CustomStatic(Static):
    """Static text with the TUI's standard CSS class.

    CSS Classes: widget-custom-static
    """

    def __init__(
        self,
        content: str = "",
        *,
        markup: bool = True,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(
            content,
            markup=markup,
            id=id,
            classes=f"widget-custom-static {classes}".strip(),
        )
