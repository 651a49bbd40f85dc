"""Detail panel - drill-down view of the selected model fit."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import VerticalScroll
from textual.message import Message
from textual.widgets import Button

from fitview.constants.screens.model_fits import BUTTON_CLOSE_DETAIL
from fitview.widgets import CustomBar, CustomButton, CustomStatic

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from fitview.screens.model_fits.view_model import DetailVM

_SCORE_BAR_IDS = ("bar-memory", "bar-speed", "bar-quality", "bar-context")


class DetailPanel(VerticalScroll):
    """Side panel showing one record's fit assessment, memory and scores.

    Hidden until ``show_detail`` is called. The close button posts
    ``DetailPanel.CloseRequested``.
    """

    DEFAULT_CSS = """
    DetailPanel {
        display: none;
    }
    DetailPanel.visible {
        display: block;
    }
    """

    class CloseRequested(Message):
        """The user asked to close the panel."""

    def __init__(self, *, id: str | None = None, classes: str = "") -> None:
        super().__init__(id=id, classes=classes)
        self.detail: DetailVM | None = None

    def compose(self) -> ComposeResult:
        yield CustomStatic(id="detail-title", classes="detail-title")
        yield CustomStatic(id="detail-subtitle", classes="detail-subtitle")
        yield CustomStatic(id="detail-filtered", classes="detail-note")
        yield CustomStatic("Fit Assessment", classes="detail-section-title")
        yield CustomStatic(id="detail-fit")
        yield CustomStatic("Memory", classes="detail-section-title")
        yield CustomStatic(id="detail-memory")
        yield CustomBar("Usage", 0.0, "", id="bar-utilization")
        yield CustomStatic("Score Breakdown", classes="detail-section-title")
        for bar_id in _SCORE_BAR_IDS:
            yield CustomBar("", 0.0, "", id=bar_id)
        yield CustomStatic("Category", classes="detail-section-title")
        yield CustomStatic(id="detail-category")
        yield CustomStatic("Notes", id="detail-notes-title", classes="detail-section-title")
        yield CustomStatic(id="detail-notes")
        yield CustomStatic("Status", classes="detail-section-title")
        yield CustomStatic(id="detail-installed")
        yield CustomButton(BUTTON_CLOSE_DETAIL, id="detail-close")

    def show_detail(self, detail: DetailVM) -> None:
        """Fill the panel from ``detail`` and make it visible."""
        self.detail = detail
        self.query_one("#detail-title", CustomStatic).update(f"[b]{detail.title}[/b]")
        self.query_one("#detail-subtitle", CustomStatic).update(detail.subtitle)
        filtered = self.query_one("#detail-filtered", CustomStatic)
        filtered.update("Hidden by the current filters" if detail.is_filtered_out else "")
        filtered.display = detail.is_filtered_out

        self.query_one("#detail-fit", CustomStatic).update(
            f"Fit Level     {detail.fit}\n"
            f"Overall Score {detail.score}\n"
            f"Est. Speed    {detail.speed}\n"
            f"Run Mode      {detail.run_mode}\n"
            f"Quantization  {detail.quant}\n"
            f"Context       {detail.context}"
        )
        self.query_one("#detail-memory", CustomStatic).update(
            f"Required      {detail.memory_required}\n"
            f"Available     {detail.memory_available}"
        )
        usage = detail.utilization_bar
        self.query_one("#bar-utilization", CustomBar).set_values(
            usage.fill_pct, usage.value_text
        )
        for bar_id, score_bar in zip(_SCORE_BAR_IDS, detail.score_bars):
            bar = self.query_one(f"#{bar_id}", CustomBar)
            bar.label = score_bar.label
            bar.set_values(score_bar.fill_pct, score_bar.value_text)

        self.query_one("#detail-category", CustomStatic).update(detail.category)
        self.query_one("#detail-notes-title", CustomStatic).display = bool(detail.notes)
        notes = self.query_one("#detail-notes", CustomStatic)
        notes.update("\n".join(f"• {note}" for note in detail.notes))
        notes.display = bool(detail.notes)

        installed = self.query_one("#detail-installed", CustomStatic)
        installed.update(detail.installed)
        installed.set_class(detail.is_installed, "installed-yes")
        installed.set_class(not detail.is_installed, "installed-no")
        self.add_class("visible")

    def hide_detail(self) -> None:
        """Hide the panel."""
        self.detail = None
        self.remove_class("visible")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "detail-close":
            event.stop()
            self.post_message(self.CloseRequested())
