"""Model fits screen - ranked, filterable table of model compatibility."""

from __future__ import annotations

import logging
from functools import partial
from typing import Any

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches, WrongType
from textual.widgets import Footer, Header, Input, Select, SelectionList, Switch
from textual.worker import Worker

from fitview.constants.screens.model_fits import (
    LABEL_INSTALLED_FIRST,
    LABEL_INSTALLED_ONLY,
    LABEL_PROVIDERS,
    MODEL_FITS_TITLE,
    SEARCH_PLACEHOLDER,
)
from fitview.constants.defaults import SORT_ASCENDING_DEFAULT, SORT_KEY_DEFAULT
from fitview.controllers.backend import BackendController
from fitview.keyboard import MODEL_FITS_SCREEN_BINDINGS
from fitview.models.fits.model_fit import ModelFitRecord
from fitview.models.system.system_info import SystemInfoRecord
from fitview.screens.base_screen import BaseScreen
from fitview.screens.mixins import DataLoaded, DataLoadFailed, WorkerMixin
from fitview.screens.model_fits.components import DetailPanel, SystemPanel
from fitview.screens.model_fits.config import (
    CATEGORY_FILTER_BASE_OPTIONS,
    FIT_FILTER_BASE_OPTIONS,
    MODEL_HEADER_TOOLTIPS,
    MODEL_ROW_HEIGHT,
    MODEL_TABLE_COLUMNS,
    QUANT_FILTER_BASE_OPTIONS,
    RUN_MODE_FILTER_BASE_OPTIONS,
    WORKER_GROUP_FITS,
    WORKER_GROUP_SYSTEM,
)
from fitview.screens.model_fits.presenter import ModelFitsPresenter
from fitview.screens.model_fits.state import (
    AllProvidersToggled,
    CategoryChanged,
    DetailClosed,
    FiltersReset,
    FitLevelChanged,
    InstalledFirstToggled,
    InstalledOnlyChanged,
    ProviderToggled,
    QuantChanged,
    RecordsLoaded,
    RecordsLoadFailed,
    RefreshStarted,
    RowSelected,
    RunModeChanged,
    SearchChanged,
    SortRequested,
    SystemInfoLoaded,
    SystemInfoLoadFailed,
    ViewEvent,
    ViewState,
    reduce,
)
from fitview.screens.model_fits.view_model import ModelFitsViewModel
from fitview.widgets import (
    CustomDataTable,
    CustomInput,
    CustomSelect,
    CustomSelectionList,
    CustomStatic,
    CustomSwitch,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Worker messages
# ============================================================================


class ModelFitsLoaded(DataLoaded):
    """Message: model-fit records fetched."""


class ModelFitsLoadFailed(DataLoadFailed):
    """Message: model-fit fetch failed."""


class SystemInfoFetched(DataLoaded):
    """Message: system info fetched."""


class SystemInfoFetchFailed(DataLoadFailed):
    """Message: system info fetch failed."""


# ============================================================================
# Screen
# ============================================================================


class ModelFitsScreen(WorkerMixin, BaseScreen):
    """Thin adapter between Textual widgets and the model fits view state.

    Widget events become view events, ``reduce`` produces the next state and
    the presenter projects it into a view model that is drawn in full.
    """

    BINDINGS = MODEL_FITS_SCREEN_BINDINGS

    def __init__(
        self,
        controller: BackendController,
        *,
        sort_key: str = SORT_KEY_DEFAULT,
        sort_ascending: bool = SORT_ASCENDING_DEFAULT,
    ) -> None:
        super().__init__()
        self._controller = controller
        self._presenter = ModelFitsPresenter()
        self.view_state = ViewState(sort_key=sort_key, sort_ascending=sort_ascending)
        self.view_model: ModelFitsViewModel | None = None

    @property
    def screen_title(self) -> str:
        return MODEL_FITS_TITLE

    def compose(self) -> ComposeResult:
        filters = self.view_state.filters
        table = CustomDataTable(
            [(label, key.value) for label, key in MODEL_TABLE_COLUMNS],
            id="fits-table",
        )
        table.set_header_tooltips(MODEL_HEADER_TOOLTIPS)

        yield Header()
        yield SystemPanel(id="system-panel")
        yield Horizontal(
            CustomInput(placeholder=SEARCH_PLACEHOLDER, id="search-input"),
            CustomSelect(
                FIT_FILTER_BASE_OPTIONS, value=filters.fit_level, id="fit-filter"
            ),
            CustomSelect(
                CATEGORY_FILTER_BASE_OPTIONS, value=filters.category, id="category-filter"
            ),
            CustomSelect(
                RUN_MODE_FILTER_BASE_OPTIONS, value=filters.run_mode, id="mode-filter"
            ),
            CustomSelect(QUANT_FILTER_BASE_OPTIONS, value=filters.quant, id="quant-filter"),
            CustomStatic(LABEL_INSTALLED_ONLY, classes="filter-label"),
            CustomSwitch(filters.installed_only, id="installed-switch"),
            CustomStatic(id="model-count", classes="filter-count"),
            CustomStatic(id="order-hint", classes="filter-count"),
            id="filter-bar",
        )
        yield Horizontal(
            Vertical(
                CustomStatic(LABEL_PROVIDERS, classes="panel-title"),
                CustomSelectionList(id="provider-list"),
                id="provider-panel",
            ),
            Vertical(
                table,
                CustomStatic(id="table-status"),
                id="table-column",
            ),
            DetailPanel(id="detail-panel"),
            id="fits-body",
        )
        yield Footer()

    # =========================================================================
    # Loading
    # =========================================================================

    def load_data(self) -> None:
        """Request system info and model fits; older in-flight loads are dropped."""
        self.dispatch(RefreshStarted())
        fits_generation = self.next_generation(WORKER_GROUP_FITS)
        system_generation = self.next_generation(WORKER_GROUP_SYSTEM)
        self.start_worker(
            partial(self._load_model_fits, fits_generation),
            name=f"model-fits-{fits_generation}",
            group=WORKER_GROUP_FITS,
        )
        self.start_worker(
            partial(self._load_system_info, system_generation),
            name=f"system-info-{system_generation}",
            group=WORKER_GROUP_SYSTEM,
        )

    async def _load_model_fits(self, generation: int) -> None:
        result = await self._controller.get_model_fits()
        if result.success:
            self.post_message(ModelFitsLoaded(result.data or [], generation, result.duration_ms))
        else:
            self.post_message(ModelFitsLoadFailed(result.error or "unknown error", generation))

    async def _load_system_info(self, generation: int) -> None:
        result = await self._controller.get_system_info()
        if result.success:
            self.post_message(SystemInfoFetched(result.data, generation, result.duration_ms))
        else:
            self.post_message(SystemInfoFetchFailed(result.error or "unknown error", generation))

    def on_model_fits_loaded(self, message: ModelFitsLoaded) -> None:
        if not self.is_current_generation(WORKER_GROUP_FITS, message.generation):
            logger.debug("Dropping superseded model fits (generation %d)", message.generation)
            return
        records: list[ModelFitRecord] = message.data
        logger.info("Loaded %d model fits in %.0fms", len(records), message.duration_ms)
        self.dispatch(RecordsLoaded(tuple(records)))

    def on_model_fits_load_failed(self, message: ModelFitsLoadFailed) -> None:
        if not self.is_current_generation(WORKER_GROUP_FITS, message.generation):
            return
        self.dispatch(RecordsLoadFailed(message.error))

    def on_system_info_fetched(self, message: SystemInfoFetched) -> None:
        if not self.is_current_generation(WORKER_GROUP_SYSTEM, message.generation):
            return
        info: SystemInfoRecord = message.data
        self.dispatch(SystemInfoLoaded(info))

    def on_system_info_fetch_failed(self, message: SystemInfoFetchFailed) -> None:
        if not self.is_current_generation(WORKER_GROUP_SYSTEM, message.generation):
            return
        self.dispatch(SystemInfoLoadFailed(message.error))

    def on_worker_failed(self, worker: Worker[Any], error: str) -> None:
        if worker.group == WORKER_GROUP_FITS:
            self.dispatch(RecordsLoadFailed(error))
        elif worker.group == WORKER_GROUP_SYSTEM:
            self.dispatch(SystemInfoLoadFailed(error))

    # =========================================================================
    # State and drawing
    # =========================================================================

    def dispatch(self, event: ViewEvent) -> None:
        """Apply ``event`` to the view state and redraw."""
        new_state = reduce(self.view_state, event)
        if new_state is self.view_state and self.view_model is not None:
            return
        self.view_state = new_state
        self._render_view()

    def _render_view(self) -> None:
        vm = self._presenter.build_view_model(self.view_state)
        self.view_model = vm
        try:
            table = self.query_one("#fits-table", CustomDataTable)
        except (NoMatches, WrongType):
            return

        cursor_key = self.view_state.selected_name or table.highlighted_key()
        table.replace_rows(
            ((row.key, row.cells) for row in vm.rows),
            labels=self._presenter.column_labels(vm.sort_key, vm.sort_ascending),
            cursor_key=cursor_key,
            row_height=MODEL_ROW_HEIGHT,
        )
        self.query_one("#model-count", CustomStatic).update(vm.count_label)
        self.query_one("#order-hint", CustomStatic).update(
            LABEL_INSTALLED_FIRST if vm.installed_first else ""
        )
        self.set_status("table-status", vm.status.message, is_error=vm.status.is_error)
        self.query_one("#table-status", CustomStatic).display = bool(vm.status.message)
        self.query_one("#system-panel", SystemPanel).show_system(vm.system)

        self.query_one("#fit-filter", CustomSelect).sync_options(vm.fit_options, vm.fit_filter)
        self.query_one("#category-filter", CustomSelect).sync_options(
            vm.category_options, vm.category_filter
        )
        self.query_one("#mode-filter", CustomSelect).sync_options(
            vm.run_mode_options, vm.run_mode_filter
        )
        self.query_one("#quant-filter", CustomSelect).sync_options(
            vm.quant_options, vm.quant_filter
        )
        self.query_one("#provider-list", CustomSelectionList).sync_selections(
            vm.provider_options, vm.hidden_providers
        )
        self.query_one("#installed-switch", CustomSwitch).sync_value(vm.installed_only)
        search = self.query_one("#search-input", CustomInput)
        if search.value != vm.search_text:
            with search.prevent(Input.Changed):
                search.value = vm.search_text

        panel = self.query_one("#detail-panel", DetailPanel)
        if vm.detail is None:
            panel.hide_detail()
        else:
            panel.show_detail(vm.detail)

    # =========================================================================
    # Widget events
    # =========================================================================

    @on(Input.Changed, "#search-input")
    def _on_search_changed(self, event: Input.Changed) -> None:
        self.dispatch(SearchChanged(event.value))

    @on(Select.Changed, "#fit-filter")
    def _on_fit_filter_changed(self, event: Select.Changed) -> None:
        if event.value is not Select.BLANK:
            self.dispatch(FitLevelChanged(str(event.value)))

    @on(Select.Changed, "#category-filter")
    def _on_category_filter_changed(self, event: Select.Changed) -> None:
        if event.value is not Select.BLANK:
            self.dispatch(CategoryChanged(str(event.value)))

    @on(Select.Changed, "#mode-filter")
    def _on_mode_filter_changed(self, event: Select.Changed) -> None:
        if event.value is not Select.BLANK:
            self.dispatch(RunModeChanged(str(event.value)))

    @on(Select.Changed, "#quant-filter")
    def _on_quant_filter_changed(self, event: Select.Changed) -> None:
        if event.value is not Select.BLANK:
            self.dispatch(QuantChanged(str(event.value)))

    @on(SelectionList.SelectionToggled, "#provider-list")
    def _on_provider_toggled(self, event: SelectionList.SelectionToggled) -> None:
        self.dispatch(ProviderToggled(str(event.selection.value)))

    @on(Switch.Changed, "#installed-switch")
    def _on_installed_changed(self, event: Switch.Changed) -> None:
        self.dispatch(InstalledOnlyChanged(event.value))

    @on(CustomDataTable.HeaderClicked, "#fits-table")
    def _on_header_clicked(self, event: CustomDataTable.HeaderClicked) -> None:
        self.dispatch(SortRequested(event.column_key))

    @on(CustomDataTable.RowChosen, "#fits-table")
    def _on_row_chosen(self, event: CustomDataTable.RowChosen) -> None:
        self.dispatch(RowSelected(event.row_key))

    @on(DetailPanel.CloseRequested)
    def _on_detail_close_requested(self, _: DetailPanel.CloseRequested) -> None:
        self.dispatch(DetailClosed())

    # =========================================================================
    # Actions
    # =========================================================================

    def action_close_detail(self) -> None:
        """Close the detail panel (no-op when it is already closed)."""
        self.dispatch(DetailClosed())

    def action_focus_search(self) -> None:
        self.query_one("#search-input", CustomInput).focus()

    def action_cycle_fit_filter(self) -> None:
        """Move the fit-level filter to the next available option."""
        options = [value for _, value in self._fit_options()]
        current = self.view_state.filters.fit_level
        index = options.index(current) if current in options else -1
        self.dispatch(FitLevelChanged(options[(index + 1) % len(options)]))

    def action_toggle_installed(self) -> None:
        self.dispatch(InstalledOnlyChanged(not self.view_state.filters.installed_only))

    def action_reset_filters(self) -> None:
        self.dispatch(FiltersReset())

    def action_toggle_installed_first(self) -> None:
        self.dispatch(InstalledFirstToggled())

    def action_toggle_provider_panel(self) -> None:
        """Show or hide the provider list, focusing it when shown."""
        panel = self.query_one("#provider-panel", Vertical)
        panel.display = not panel.display
        if panel.display:
            self.query_one("#provider-list", CustomSelectionList).focus()

    def action_toggle_all_providers(self) -> None:
        if self.view_model is None:
            return
        providers = tuple(value for _, value in self.view_model.provider_options)
        self.dispatch(AllProvidersToggled(providers))

    def _fit_options(self) -> tuple[tuple[str, str], ...]:
        if self.view_model is not None:
            return self.view_model.fit_options
        return tuple(FIT_FILTER_BASE_OPTIONS)
