"""Model fits view state and its pure transitions.

The screen owns a single ``ViewState``. Every user action and every backend
response is an event, and ``reduce(state, event)`` returns the next state
without touching the previous one. Nothing here knows about widgets.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Union

from fitview.constants.defaults import SORT_ASCENDING_DEFAULT, SORT_KEY_DEFAULT
from fitview.constants.enums import FetchState
from fitview.constants.values import FILTER_ALL
from fitview.models.fits.model_fit import ModelFitRecord
from fitview.models.system.system_info import SystemInfoRecord

logger = logging.getLogger(__name__)


# ============================================================================
# State
# ============================================================================


@dataclass(frozen=True, slots=True)
class FilterState:
    """Active filters; each default value means "no filter"."""

    search_text: str = ""
    fit_level: str = FILTER_ALL
    category: str = FILTER_ALL
    installed_only: bool = False
    run_mode: str = FILTER_ALL
    quant: str = FILTER_ALL
    hidden_providers: frozenset[str] = frozenset()  # deselected providers

    @property
    def is_default(self) -> bool:
        return self == FilterState()


@dataclass(frozen=True, slots=True)
class ViewState:
    """Everything the model fits screen renders from."""

    records: tuple[ModelFitRecord, ...] = ()
    fits_state: FetchState = FetchState.LOADING
    fits_error: str | None = None
    system_info: SystemInfoRecord | None = None
    system_state: FetchState = FetchState.LOADING
    system_error: str | None = None
    sort_key: str = SORT_KEY_DEFAULT
    sort_ascending: bool = SORT_ASCENDING_DEFAULT
    installed_first: bool = False
    filters: FilterState = field(default_factory=FilterState)
    selected_name: str | None = None

    def find_record(self, name: str | None) -> ModelFitRecord | None:
        """Look a record up by name in the full (unfiltered) set."""
        if name is None:
            return None
        return next((record for record in self.records if record.name == name), None)


# ============================================================================
# Events
# ============================================================================


@dataclass(frozen=True, slots=True)
class RefreshStarted:
    """A new backend round trip was requested."""


@dataclass(frozen=True, slots=True)
class RecordsLoaded:
    records: tuple[ModelFitRecord, ...]


@dataclass(frozen=True, slots=True)
class RecordsLoadFailed:
    error: str


@dataclass(frozen=True, slots=True)
class SystemInfoLoaded:
    system_info: SystemInfoRecord


@dataclass(frozen=True, slots=True)
class SystemInfoLoadFailed:
    error: str


@dataclass(frozen=True, slots=True)
class SearchChanged:
    text: str


@dataclass(frozen=True, slots=True)
class FitLevelChanged:
    fit_level: str


@dataclass(frozen=True, slots=True)
class CategoryChanged:
    category: str


@dataclass(frozen=True, slots=True)
class InstalledOnlyChanged:
    installed_only: bool


@dataclass(frozen=True, slots=True)
class RunModeChanged:
    run_mode: str


@dataclass(frozen=True, slots=True)
class QuantChanged:
    quant: str


@dataclass(frozen=True, slots=True)
class ProviderToggled:
    """One provider was ticked or unticked in the provider list."""

    provider: str


@dataclass(frozen=True, slots=True)
class AllProvidersToggled:
    """Hide every provider when all are shown, otherwise show them all."""

    providers: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class FiltersReset:
    """Every filter goes back to its default."""


@dataclass(frozen=True, slots=True)
class SortRequested:
    """A column header was activated."""

    sort_key: str


@dataclass(frozen=True, slots=True)
class InstalledFirstToggled:
    """Installed records are pinned above the rest, whatever the sort."""


@dataclass(frozen=True, slots=True)
class RowSelected:
    name: str


@dataclass(frozen=True, slots=True)
class DetailClosed:
    """Close control or Escape."""


ViewEvent = Union[
    RefreshStarted,
    RecordsLoaded,
    RecordsLoadFailed,
    SystemInfoLoaded,
    SystemInfoLoadFailed,
    SearchChanged,
    FitLevelChanged,
    CategoryChanged,
    InstalledOnlyChanged,
    RunModeChanged,
    QuantChanged,
    ProviderToggled,
    AllProvidersToggled,
    FiltersReset,
    SortRequested,
    InstalledFirstToggled,
    RowSelected,
    DetailClosed,
]


# ============================================================================
# Transitions
# ============================================================================


def next_sort(state: ViewState, sort_key: str) -> tuple[str, bool]:
    """Sort key and direction after activating ``sort_key``.

    The current key flips direction; a new key starts descending.
    """
    if sort_key == state.sort_key:
        return sort_key, not state.sort_ascending
    return sort_key, False


def reduce(state: ViewState, event: ViewEvent) -> ViewState:
    """Return the state that follows ``event``.

    Filters, sort and selection survive refreshes. A records swap clears a
    selection whose key is no longer present.
    """
    if isinstance(event, RefreshStarted):
        # Keep the loaded rows visible while the new request is in flight.
        if state.fits_state == FetchState.ERROR:
            return replace(state, fits_state=FetchState.LOADING)
        return state

    if isinstance(event, RecordsLoaded):
        selected = state.selected_name
        if selected is not None and all(r.name != selected for r in event.records):
            logger.debug("Selection %r no longer present after refresh", selected)
            selected = None
        return replace(
            state,
            records=tuple(event.records),
            fits_state=FetchState.SUCCESS,
            fits_error=None,
            selected_name=selected,
        )

    if isinstance(event, RecordsLoadFailed):
        return replace(state, fits_state=FetchState.ERROR, fits_error=event.error)

    if isinstance(event, SystemInfoLoaded):
        return replace(
            state,
            system_info=event.system_info,
            system_state=FetchState.SUCCESS,
            system_error=None,
        )

    if isinstance(event, SystemInfoLoadFailed):
        return replace(state, system_state=FetchState.ERROR, system_error=event.error)

    if isinstance(event, SearchChanged):
        return replace(state, filters=replace(state.filters, search_text=event.text))

    if isinstance(event, FitLevelChanged):
        return replace(state, filters=replace(state.filters, fit_level=event.fit_level))

    if isinstance(event, CategoryChanged):
        return replace(state, filters=replace(state.filters, category=event.category))

    if isinstance(event, InstalledOnlyChanged):
        return replace(
            state, filters=replace(state.filters, installed_only=event.installed_only)
        )

    if isinstance(event, RunModeChanged):
        return replace(state, filters=replace(state.filters, run_mode=event.run_mode))

    if isinstance(event, QuantChanged):
        return replace(state, filters=replace(state.filters, quant=event.quant))

    if isinstance(event, ProviderToggled):
        hidden = state.filters.hidden_providers ^ {event.provider}
        return replace(state, filters=replace(state.filters, hidden_providers=hidden))

    if isinstance(event, AllProvidersToggled):
        if state.filters.hidden_providers.isdisjoint(event.providers):
            hidden = state.filters.hidden_providers | frozenset(event.providers)
        else:
            hidden = state.filters.hidden_providers - frozenset(event.providers)
        return replace(state, filters=replace(state.filters, hidden_providers=hidden))

    if isinstance(event, FiltersReset):
        return replace(state, filters=FilterState())

    if isinstance(event, SortRequested):
        sort_key, ascending = next_sort(state, event.sort_key)
        return replace(state, sort_key=sort_key, sort_ascending=ascending)

    if isinstance(event, InstalledFirstToggled):
        return replace(state, installed_first=not state.installed_first)

    if isinstance(event, RowSelected):
        return replace(state, selected_name=event.name)

    if isinstance(event, DetailClosed):
        if state.selected_name is None:
            return state
        return replace(state, selected_name=None)

    raise TypeError(f"Unhandled view event: {event!r}")
