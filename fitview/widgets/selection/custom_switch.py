"""CustomSwitch widget - standardized wrapper around Textual's Switch."""

from __future__ import annotations

from textual.widgets import Switch


class CustomSwitch(Switch):
    """Boolean toggle with the TUI's standard CSS class.

    CSS Classes: widget-custom-switch
    """

    def __init__(
        self,
        value: bool = False,
        *,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(
            value=value,
            id=id,
            classes=f"widget-custom-switch {classes}".strip(),
        )

    def sync_value(self, value: bool) -> None:
        """Set the value without posting ``Switch.Changed``."""
        if self.value != value:
            with self.prevent(Switch.Changed):
                self.value = value
