"""Immutable view models for the model fits screen.

These frozen dataclasses are snapshots ready for drawing. They are produced
by ``ModelFitsPresenter.build_view_model`` and consumed by the screen and
its panels. String fields arrive with external text already escaped for
Rich markup, except the plain-text ``message`` fields of ``StatusVM`` and
``SystemInfoVM``, which are escaped where they are drawn.
"""

from __future__ import annotations

from dataclasses import dataclass

from fitview.constants.enums import TableStatus
from fitview.constants.values import SELECTED_ROW_MARKER

# =============================================================================
# Table
# =============================================================================


@dataclass(frozen=True, slots=True)
class RowVM:
    """One table row."""

    key: str  # Record name, unaltered
    title: str  # Text after the last "/" of the name
    provider: str
    params: str
    score: str  # 0 decimals
    fit: str  # "{emoji} {level}"
    tps: str  # 1 decimal
    quant: str
    run_mode: str
    utilization: str  # 0 decimals with "%"
    context: str  # "8k"
    installed: str  # check mark or dash
    is_selected: bool = False

    @property
    def cells(self) -> tuple[str, ...]:
        """Cell values in column order (name column spans two lines)."""
        marker = SELECTED_ROW_MARKER if self.is_selected else ""
        return (
            f"{marker}[b]{self.title}[/b]\n[dim]{self.provider}[/dim]",
            self.params,
            self.score,
            self.fit,
            self.tps,
            self.quant,
            self.run_mode,
            self.utilization,
            self.context,
            self.installed,
        )


@dataclass(frozen=True, slots=True)
class StatusVM:
    """Table status line."""

    status: TableStatus
    message: str  # Empty when the rows speak for themselves
    is_error: bool = False


# =============================================================================
# Detail panel
# =============================================================================


@dataclass(frozen=True, slots=True)
class ScoreBarVM:
    """A labelled proportional bar."""

    label: str
    fill_pct: float  # Always within 0-100
    value_text: str  # Uncapped display value


@dataclass(frozen=True, slots=True)
class DetailVM:
    """Drill-down panel for the selected record."""

    key: str
    title: str
    subtitle: str  # "{provider} · {full name}"
    fit: str
    score: str  # 1 decimal
    speed: str  # "12.3 tok/s"
    run_mode: str
    quant: str
    context: str
    memory_required: str  # "4.2 GB"
    memory_available: str
    utilization_bar: ScoreBarVM
    score_bars: tuple[ScoreBarVM, ...]  # memory, speed, quality, context
    category: str  # "{category} — {use case}"
    notes: tuple[str, ...]
    installed: str  # "✓ Installed" / "✗ Not installed"
    is_installed: bool
    is_filtered_out: bool = False


# =============================================================================
# System panel
# =============================================================================


@dataclass(frozen=True, slots=True)
class SystemInfoVM:
    """System capability summary."""

    cpu: str  # "{cpu} ({cores} cores)"
    ram: str
    gpu: str
    vram: str  # "N/A" when absent
    ollama: str
    ollama_available: bool
    message: str = ""  # Loading/error text when there is no data
    is_error: bool = False


# =============================================================================
# Screen
# =============================================================================


@dataclass(frozen=True, slots=True)
class ModelFitsViewModel:
    """Everything the screen draws, in one snapshot."""

    rows: tuple[RowVM, ...]
    count_label: str  # "{visible} of {total} records"
    status: StatusVM
    sort_key: str
    sort_ascending: bool
    detail: DetailVM | None
    system: SystemInfoVM
    fit_options: tuple[tuple[str, str], ...]
    category_options: tuple[tuple[str, str], ...]
    run_mode_options: tuple[tuple[str, str], ...]
    quant_options: tuple[tuple[str, str], ...]
    provider_options: tuple[tuple[str, str], ...]
    fit_filter: str
    category_filter: str
    run_mode_filter: str
    quant_filter: str
    hidden_providers: frozenset[str]
    installed_only: bool
    installed_first: bool
    search_text: str

    @property
    def visible_keys(self) -> tuple[str, ...]:
        return tuple(row.key for row in self.rows)
