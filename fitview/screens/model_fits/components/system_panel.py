"""System panel - one-line hardware summary above the model table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from textual.containers import Horizontal

from fitview.widgets import CustomStatic

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from fitview.screens.model_fits.view_model import SystemInfoVM

_FIELDS = (
    ("CPU", "sys-cpu"),
    ("RAM", "sys-ram"),
    ("GPU", "sys-gpu"),
    ("VRAM", "sys-vram"),
    ("Ollama", "sys-ollama"),
)


class SystemPanel(Horizontal):
    """Shows CPU, RAM, GPU, VRAM and Ollama status, or a loading/error line."""

    def compose(self) -> ComposeResult:
        yield CustomStatic(id="sys-message", classes="sys-message")
        for label, widget_id in _FIELDS:
            yield CustomStatic(f"[dim]{label}[/dim]", classes="sys-label")
            yield CustomStatic(id=widget_id, classes="sys-value")

    def show_system(self, system: SystemInfoVM) -> None:
        """Draw ``system``; a message replaces the fields when there is no data."""
        message = self.query_one("#sys-message", CustomStatic)
        has_data = not system.message
        message.update(escape(system.message))
        message.display = not has_data
        message.set_class(system.is_error, "error")
        for widget in self.query(".sys-label, .sys-value"):
            widget.display = has_data
        if not has_data:
            return
        values = (system.cpu, system.ram, system.gpu, system.vram, system.ollama)
        for (_, widget_id), value in zip(_FIELDS, values):
            self.query_one(f"#{widget_id}", CustomStatic).update(value)
        ollama = self.query_one("#sys-ollama", CustomStatic)
        ollama.set_class(system.ollama_available, "available")
        ollama.set_class(not system.ollama_available, "unavailable")
