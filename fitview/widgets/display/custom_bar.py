"""CustomBar widget - a labelled horizontal fill bar drawn with block glyphs."""

from __future__ import annotations

from textual.widgets import Static

from fitview.constants.limits import BAR_PERCENT_MAX, BAR_WIDTH

_FILLED = "█"
_EMPTY = "░"


def render_bar(fill_pct: float, width: int = BAR_WIDTH) -> str:
    """Render ``fill_pct`` (0-100) as a fixed-width block bar.

    Values outside 0-100 are clamped so the bar never overflows its width.
    """
    pct = max(0.0, min(fill_pct, BAR_PERCENT_MAX))
    filled = round(width * pct / BAR_PERCENT_MAX)
    return _FILLED * filled + _EMPTY * (width - filled)


class CustomBar(Static):
    """One labelled bar line: ``label  ████░░░░  value``.

    CSS Classes: widget-custom-bar
    """

    def __init__(
        self,
        label: str,
        fill_pct: float,
        value_text: str,
        *,
        width: int = BAR_WIDTH,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        self.label = label
        self.fill_pct = fill_pct
        self.value_text = value_text
        self.bar_width = width
        super().__init__(
            self._compose_line(),
            id=id,
            classes=f"widget-custom-bar {classes}".strip(),
        )

    def _compose_line(self) -> str:
        return f"{self.label:<10} {render_bar(self.fill_pct, self.bar_width)} {self.value_text}"

    def set_values(self, fill_pct: float, value_text: str) -> None:
        """Update the bar fill and its value text."""
        self.fill_pct = fill_pct
        self.value_text = value_text
        self.update(self._compose_line())
