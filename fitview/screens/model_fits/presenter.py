"""Model fits presenter - filtering, ordering and formatting logic.

Everything here is a pure function of its arguments: the same records and
view state always project to the same view model.
"""

from __future__ import annotations

import functools
import locale
import logging
import math
from collections.abc import Iterable, Sequence
from typing import Any

from rich.markup import escape

from fitview.constants.enums import FetchState, FitLevel, SortKey, TableStatus
from fitview.constants.limits import BAR_PERCENT_MAX, SUBSCORE_MAX
from fitview.constants.screens.model_fits import (
    COUNT_LABEL_TEMPLATE,
    STATUS_EMPTY,
    STATUS_ERROR,
    STATUS_LOADING,
    STATUS_NO_MATCHES,
    STATUS_REFRESH_FAILED,
    SYSTEM_ERROR,
    SYSTEM_LOADING,
)
from fitview.constants.values import (
    FILTER_ALL,
    FILTER_RUNNABLE,
    INSTALLED_LABEL,
    INSTALLED_MARK,
    NAME_PATH_SEPARATOR,
    NOT_AVAILABLE,
    NOT_INSTALLED_LABEL,
    NOT_INSTALLED_MARK,
    OLLAMA_UNAVAILABLE_LABEL,
)
from fitview.models.fits.model_fit import ModelFitRecord
from fitview.models.system.system_info import SystemInfoRecord
from fitview.screens.model_fits.config import (
    CATEGORY_FILTER_BASE_OPTIONS,
    FIT_FILTER_BASE_OPTIONS,
    FIT_LEVEL_ORDER,
    MODEL_TABLE_COLUMNS,
    QUANT_FILTER_BASE_OPTIONS,
    RUN_MODE_FILTER_BASE_OPTIONS,
    SORT_INDICATOR_ASC,
    SORT_INDICATOR_DESC,
)
from fitview.screens.model_fits.state import FilterState, ViewState
from fitview.screens.model_fits.view_model import (
    DetailVM,
    ModelFitsViewModel,
    RowVM,
    ScoreBarVM,
    StatusVM,
    SystemInfoVM,
)

logger = logging.getLogger(__name__)

_SORTABLE_KEYS = frozenset(key.value for key in SortKey)


def _nan_as_lowest(value: Any) -> Any:
    if isinstance(value, float) and math.isnan(value):
        return -math.inf
    return value


class ModelFitsPresenter:
    """Presenter for the model fits screen.

    Handles filtering, sorting and projection of model-fit records into
    view models.
    """

    # =========================================================================
    # Filtering
    # =========================================================================

    @staticmethod
    def matches_filters(record: ModelFitRecord, filters: FilterState) -> bool:
        """Whether ``record`` passes every active filter.

        Cheap equality checks run before the substring search.
        """
        if filters.installed_only and not record.installed:
            return False
        if filters.fit_level == FILTER_RUNNABLE:
            if record.fit_level == FitLevel.TOO_TIGHT.value:
                return False
        elif filters.fit_level != FILTER_ALL and record.fit_level != filters.fit_level:
            return False
        if filters.category != FILTER_ALL and record.category != filters.category:
            return False
        if filters.run_mode != FILTER_ALL and record.run_mode != filters.run_mode:
            return False
        if filters.quant != FILTER_ALL and record.best_quant != filters.quant:
            return False
        if record.provider in filters.hidden_providers:
            return False
        if filters.search_text:
            needle = filters.search_text.lower()
            if needle not in record.name.lower() and needle not in record.provider.lower():
                return False
        return True

    def apply_filters(
        self, records: Iterable[ModelFitRecord], filters: FilterState
    ) -> list[ModelFitRecord]:
        """Return the records passing ``filters``, in their original order."""
        return [record for record in records if self.matches_filters(record, filters)]

    # =========================================================================
    # Sorting
    # =========================================================================

    @staticmethod
    def compare_values(left: Any, right: Any) -> float:
        """Three-way comparison of two field values, ascending.

        Text compares case-insensitively with the active collation locale,
        booleans as 1/0, everything else by subtraction. NaN sorts lowest.
        """
        if isinstance(left, str):
            return locale.strcoll(left.lower(), str(right).lower())
        if isinstance(left, bool):
            return int(left) - int(bool(right))
        left, right = _nan_as_lowest(left), _nan_as_lowest(right)
        if left == right:
            return 0
        return left - right

    def compare_records(
        self,
        a: ModelFitRecord,
        b: ModelFitRecord,
        sort_key: str,
        ascending: bool,
        installed_first: bool = False,
    ) -> float:
        """Compare two records by ``sort_key``.

        Descending order swaps the operands instead of negating the result.
        With ``installed_first`` an installed record always comes first.
        """
        if installed_first and a.installed != b.installed:
            return -1 if a.installed else 1
        if not ascending:
            a, b = b, a
        return self.compare_values(getattr(a, sort_key), getattr(b, sort_key))

    def sort_records(
        self,
        records: Sequence[ModelFitRecord],
        sort_key: str,
        ascending: bool,
        installed_first: bool = False,
    ) -> list[ModelFitRecord]:
        """Return a new list ordered by ``sort_key``; ties keep their order."""
        if sort_key not in _SORTABLE_KEYS:
            logger.warning("Ignoring unknown sort key %r", sort_key)
            if installed_first:
                return sorted(records, key=lambda record: not record.installed)
            return list(records)
        comparator = functools.partial(
            self.compare_records,
            sort_key=sort_key,
            ascending=ascending,
            installed_first=installed_first,
        )
        return sorted(records, key=functools.cmp_to_key(comparator))

    # =========================================================================
    # Row Building
    # =========================================================================

    def format_row(self, record: ModelFitRecord, *, selected: bool = False) -> RowVM:
        """Project one record into a table row."""
        return RowVM(
            key=record.name,
            title=escape(self.short_name(record.name)),
            provider=self._text(record.provider),
            params=self._text(record.params),
            score=f"{record.score:.0f}",
            fit=self.format_fit(record),
            tps=f"{record.estimated_tps:.1f}",
            quant=self._text(record.best_quant),
            run_mode=self._text(record.run_mode),
            utilization=f"{record.utilization_pct:.0f}%",
            context=self.format_context(record.context_length),
            installed=INSTALLED_MARK if record.installed else NOT_INSTALLED_MARK,
            is_selected=selected,
        )

    def column_labels(self, sort_key: str, ascending: bool) -> dict[str, str]:
        """Header labels keyed by column, with an arrow on the sorted one."""
        labels: dict[str, str] = {}
        for label, key in MODEL_TABLE_COLUMNS:
            if key.value == sort_key:
                label += SORT_INDICATOR_ASC if ascending else SORT_INDICATOR_DESC
            labels[key.value] = label
        return labels

    # =========================================================================
    # Detail
    # =========================================================================

    def build_detail(self, record: ModelFitRecord, *, filtered_out: bool = False) -> DetailVM:
        """Project a record into the drill-down panel."""
        utilization = record.utilization_pct
        return DetailVM(
            key=record.name,
            title=escape(self.short_name(record.name)),
            subtitle=f"{self._text(record.provider)} · {escape(record.name)}",
            fit=self.format_fit(record),
            score=f"{record.score:.1f}",
            speed=f"{record.estimated_tps:.1f} tok/s",
            run_mode=self._text(record.run_mode),
            quant=self._text(record.best_quant),
            context=self.format_context(record.context_length),
            memory_required=f"{record.memory_required_gb:.1f} GB",
            memory_available=f"{record.memory_available_gb:.1f} GB",
            utilization_bar=ScoreBarVM(
                label="Memory utilization",
                fill_pct=self.utilization_bar_pct(utilization),
                value_text=f"{utilization:.1f}%",
            ),
            score_bars=tuple(
                ScoreBarVM(
                    label=label,
                    fill_pct=self.subscore_fill_pct(value),
                    value_text=f"{value:.1f}",
                )
                for label, value in (
                    ("Memory", record.score_memory),
                    ("Speed", record.score_speed),
                    ("Quality", record.score_quality),
                    ("Context", record.score_context),
                )
            ),
            category=self.format_category(record),
            notes=tuple(escape(note) for note in record.notes),
            installed=INSTALLED_LABEL if record.installed else NOT_INSTALLED_LABEL,
            is_installed=record.installed,
            is_filtered_out=filtered_out,
        )

    # =========================================================================
    # System
    # =========================================================================

    def build_system_info(
        self,
        info: SystemInfoRecord | None,
        fetch_state: FetchState = FetchState.SUCCESS,
        error: str | None = None,
    ) -> SystemInfoVM:
        """Project the system summary.

        A failed refresh keeps showing previously loaded info.
        """
        if info is None:
            if fetch_state == FetchState.ERROR:
                message = f"{SYSTEM_ERROR}: {error}" if error else SYSTEM_ERROR
                return SystemInfoVM("", "", "", "", "", False, message=message, is_error=True)
            return SystemInfoVM("", "", "", "", "", False, message=SYSTEM_LOADING)

        gpu = self._text(info.gpu)
        if info.gpu_backend:
            gpu = f"{gpu} ({escape(info.gpu_backend)})"
        if info.has_vram:
            vram = f"{info.vram_gb:.1f} GB"
            if info.unified_memory:
                vram += " (unified)"
        else:
            vram = NOT_AVAILABLE
        if info.ollama_available:
            ollama = f"✓ ({info.ollama_installed_count} installed)"
        else:
            ollama = OLLAMA_UNAVAILABLE_LABEL
        return SystemInfoVM(
            cpu=f"{self._text(info.cpu)} ({info.cores} cores)",
            ram=f"{info.ram_gb:.1f} GB",
            gpu=gpu,
            vram=vram,
            ollama=ollama,
            ollama_available=info.ollama_available,
        )

    # =========================================================================
    # Filter options
    # =========================================================================

    def fit_options(
        self, records: Iterable[ModelFitRecord], current: str = FILTER_ALL
    ) -> tuple[tuple[str, str], ...]:
        """Fit-level select options: known levels first, then unknown ones."""
        present = {record.fit_level for record in records if record.fit_level}
        if current not in (FILTER_ALL, FILTER_RUNNABLE):
            present.add(current)
        known = [level for level in FIT_LEVEL_ORDER if level in present]
        extra = sorted(present.difference(FIT_LEVEL_ORDER))
        return tuple(FIT_FILTER_BASE_OPTIONS) + tuple(
            (escape(level), level) for level in known + extra
        )

    def category_options(
        self, records: Iterable[ModelFitRecord], current: str = FILTER_ALL
    ) -> tuple[tuple[str, str], ...]:
        """Category select options derived from the loaded records."""
        return self._distinct_options(
            (record.category for record in records), current, CATEGORY_FILTER_BASE_OPTIONS
        )

    def run_mode_options(
        self, records: Iterable[ModelFitRecord], current: str = FILTER_ALL
    ) -> tuple[tuple[str, str], ...]:
        """Run-mode select options derived from the loaded records."""
        return self._distinct_options(
            (record.run_mode for record in records), current, RUN_MODE_FILTER_BASE_OPTIONS
        )

    def quant_options(
        self, records: Iterable[ModelFitRecord], current: str = FILTER_ALL
    ) -> tuple[tuple[str, str], ...]:
        """Quantization select options derived from the loaded records."""
        return self._distinct_options(
            (record.best_quant for record in records), current, QUANT_FILTER_BASE_OPTIONS
        )

    def provider_options(
        self, records: Iterable[ModelFitRecord], hidden: Iterable[str] = ()
    ) -> tuple[tuple[str, str], ...]:
        """Provider list entries; hidden providers stay listed so they can be shown again.

        Records without a provider are grouped under an N/A entry.
        """
        present = {record.provider for record in records}
        present.update(hidden)
        return tuple(
            (self._text(provider), provider) for provider in sorted(present, key=str.lower)
        )

    @staticmethod
    def _distinct_options(
        values: Iterable[str], current: str, base: Sequence[tuple[str, str]]
    ) -> tuple[tuple[str, str], ...]:
        present = {value for value in values if value}
        if current != FILTER_ALL:
            present.add(current)
        return tuple(base) + tuple(
            (escape(value), value) for value in sorted(present, key=str.lower)
        )

    # =========================================================================
    # Render pipeline
    # =========================================================================

    def build_status(self, state: ViewState, visible: int) -> StatusVM:
        """Table status: loading, error, empty, no matches or ready."""
        if not state.records:
            if state.fits_state == FetchState.ERROR:
                message = f"{STATUS_ERROR}: {state.fits_error}" if state.fits_error else STATUS_ERROR
                return StatusVM(TableStatus.ERROR, message, is_error=True)
            if state.fits_state == FetchState.LOADING:
                return StatusVM(TableStatus.LOADING, STATUS_LOADING)
            return StatusVM(TableStatus.EMPTY, STATUS_EMPTY)
        if visible == 0:
            return StatusVM(TableStatus.NO_MATCHES, STATUS_NO_MATCHES)
        if state.fits_state == FetchState.ERROR:
            message = STATUS_REFRESH_FAILED
            if state.fits_error:
                message = f"{message} ({state.fits_error})"
            return StatusVM(TableStatus.READY, message, is_error=True)
        if state.fits_state == FetchState.LOADING:
            return StatusVM(TableStatus.READY, STATUS_LOADING)
        return StatusVM(TableStatus.READY, "")

    def build_view_model(self, state: ViewState) -> ModelFitsViewModel:
        """Filter, sort and project ``state`` into one drawable snapshot."""
        visible = self.sort_records(
            self.apply_filters(state.records, state.filters),
            state.sort_key,
            state.sort_ascending,
            installed_first=state.installed_first,
        )
        rows = tuple(
            self.format_row(record, selected=record.name == state.selected_name)
            for record in visible
        )
        visible_keys = {row.key for row in rows}

        detail = None
        selected = state.find_record(state.selected_name)
        if selected is not None:
            detail = self.build_detail(
                selected, filtered_out=selected.name not in visible_keys
            )

        filters = state.filters
        return ModelFitsViewModel(
            rows=rows,
            count_label=self.format_count(len(rows), len(state.records)),
            status=self.build_status(state, len(rows)),
            sort_key=state.sort_key,
            sort_ascending=state.sort_ascending,
            detail=detail,
            system=self.build_system_info(
                state.system_info, state.system_state, state.system_error
            ),
            fit_options=self.fit_options(state.records, filters.fit_level),
            category_options=self.category_options(state.records, filters.category),
            run_mode_options=self.run_mode_options(state.records, filters.run_mode),
            quant_options=self.quant_options(state.records, filters.quant),
            provider_options=self.provider_options(state.records, filters.hidden_providers),
            fit_filter=filters.fit_level,
            category_filter=filters.category,
            run_mode_filter=filters.run_mode,
            quant_filter=filters.quant,
            hidden_providers=filters.hidden_providers,
            installed_only=filters.installed_only,
            installed_first=state.installed_first,
            search_text=filters.search_text,
        )

    # =========================================================================
    # Formatting helpers
    # =========================================================================

    @staticmethod
    def short_name(name: str) -> str:
        """Text after the last path separator ("org/model" -> "model")."""
        return name.rsplit(NAME_PATH_SEPARATOR, 1)[-1]

    @staticmethod
    def format_context(context_length: int) -> str:
        """Context window in thousands, rounded half up (8192 -> "8k")."""
        return f"{math.floor(context_length / 1000 + 0.5)}k"

    @staticmethod
    def utilization_bar_pct(utilization_pct: float) -> float:
        """Bar fill for a utilization value; the label stays uncapped."""
        return max(0.0, min(float(utilization_pct), BAR_PERCENT_MAX))

    @staticmethod
    def subscore_fill_pct(value: float) -> float:
        """Bar fill for a 0-30 sub-score."""
        return max(0.0, min(value / SUBSCORE_MAX, 1.0)) * BAR_PERCENT_MAX

    @staticmethod
    def format_count(visible: int, total: int) -> str:
        return COUNT_LABEL_TEMPLATE.format(visible=visible, total=total)

    @classmethod
    def format_fit(cls, record: ModelFitRecord) -> str:
        level = cls._text(record.fit_level)
        if record.fit_emoji:
            return f"{escape(record.fit_emoji)} {level}"
        return level

    @classmethod
    def format_category(cls, record: ModelFitRecord) -> str:
        parts = [escape(part) for part in (record.category, record.use_case) if part]
        return " — ".join(parts) if parts else NOT_AVAILABLE

    @staticmethod
    def _text(value: str) -> str:
        """Escape external text, rendering blanks as N/A."""
        return escape(value) if value else NOT_AVAILABLE
