"""Unit tests for ModelFitsPresenter - filtering, ordering and projection.

This module tests:
- Filter conjunction across every filter combination
- Sort direction, case-insensitive text ordering and stability
- Field formatting (context, utilization bar, sub-score bars, escaping)
- View model assembly, status states and the end-to-end scenario
"""

from __future__ import annotations

import itertools
from typing import Any

import pytest

from fitview.constants.enums import FetchState, TableStatus
from fitview.constants.values import (
    FILTER_ALL,
    FILTER_RUNNABLE,
    NOT_AVAILABLE,
    SELECTED_ROW_MARKER,
)
from fitview.models.fits.model_fit import ModelFitRecord
from fitview.models.system.system_info import SystemInfoRecord
from fitview.screens.model_fits.presenter import ModelFitsPresenter
from fitview.screens.model_fits.state import FilterState, ViewState

# =============================================================================
# Helpers
# =============================================================================


def _make_record(name: str = "org/model", **overrides: Any) -> ModelFitRecord:
    data: dict[str, Any] = {
        "name": name,
        "provider": "Org",
        "params": "7B",
        "score": 50.0,
        "fit_level": "Good",
        "fit_emoji": "🟢",
        "estimated_tps": 20.0,
        "best_quant": "Q4_K_M",
        "run_mode": "GPU",
        "utilization_pct": 60.0,
        "context_length": 8192,
        "installed": False,
        "memory_required_gb": 4.5,
        "memory_available_gb": 8.0,
        "score_memory": 15.0,
        "score_speed": 12.0,
        "score_quality": 20.0,
        "score_context": 10.0,
        "category": "chat",
        "use_case": "General chat",
        "notes": [],
    }
    data.update(overrides)
    return ModelFitRecord.model_validate(data)


RECORDS = (
    _make_record("meta-llama/Llama-3-8B", provider="Meta", fit_level="Perfect",
                 category="chat", installed=True, score=91.0, run_mode="GPU",
                 best_quant="Q4_K_M"),
    _make_record("qwen/Qwen2.5-Coder-7B", provider="Alibaba", fit_level="Good",
                 category="code", installed=False, score=84.0, run_mode="CPU",
                 best_quant="Q8_0"),
    _make_record("mistralai/Mixtral-8x22B", provider="Mistral", fit_level="TooTight",
                 category="chat", installed=False, score=12.0, run_mode="MoE",
                 best_quant="Q2_K"),
    _make_record("google/gemma-2-9b", provider="Google", fit_level="Marginal",
                 category="chat", installed=True, score=55.0, run_mode="CPU",
                 best_quant="Q4_K_M"),
    _make_record("local-model", provider="", fit_level="Good",
                 category="code", installed=True, score=70.0, run_mode="GPU",
                 best_quant="Q8_0"),
)


@pytest.fixture
def presenter() -> ModelFitsPresenter:
    return ModelFitsPresenter()


# =============================================================================
# Filtering
# =============================================================================


def _expected_match(record: ModelFitRecord, filters: FilterState) -> bool:
    """Independent oracle: each predicate checked on its own."""
    search_ok = (
        not filters.search_text
        or filters.search_text.lower() in record.name.lower()
        or filters.search_text.lower() in record.provider.lower()
    )
    if filters.fit_level == FILTER_ALL:
        fit_ok = True
    elif filters.fit_level == FILTER_RUNNABLE:
        fit_ok = record.fit_level != "TooTight"
    else:
        fit_ok = record.fit_level == filters.fit_level
    category_ok = filters.category == FILTER_ALL or record.category == filters.category
    installed_ok = not filters.installed_only or record.installed
    run_mode_ok = filters.run_mode == FILTER_ALL or record.run_mode == filters.run_mode
    quant_ok = filters.quant == FILTER_ALL or record.best_quant == filters.quant
    provider_ok = record.provider not in filters.hidden_providers
    return (
        search_ok
        and fit_ok
        and category_ok
        and installed_ok
        and run_mode_ok
        and quant_ok
        and provider_ok
    )


_FILTER_COMBINATIONS = [
    FilterState(search, fit, category, installed)
    for search, fit, category, installed in itertools.product(
        ["", "llama", "QWEN", "google", "zz-none", "-"],
        [FILTER_ALL, FILTER_RUNNABLE, "Perfect", "Good", "Marginal", "TooTight", "good"],
        [FILTER_ALL, "chat", "code", "vision"],
        [False, True],
    )
]

_ALL_PROVIDERS = frozenset(record.provider for record in RECORDS)

_EXTENDED_FILTER_COMBINATIONS = [
    FilterState(search, fit, category, installed, run_mode, quant, hidden)
    for search, fit, category, installed, run_mode, quant, hidden in itertools.product(
        ["", "llama", "o"],
        [FILTER_ALL, FILTER_RUNNABLE, "Good"],
        [FILTER_ALL, "chat"],
        [False, True],
        [FILTER_ALL, "GPU", "MoE", "gpu"],
        [FILTER_ALL, "Q4_K_M", "Q8_0"],
        [frozenset(), frozenset({"Meta"}), frozenset({"", "Google"}), _ALL_PROVIDERS],
    )
]


class TestFilterConjunction:
    """A record is visible iff it satisfies every active predicate."""

    @pytest.mark.parametrize("filters", _FILTER_COMBINATIONS)
    def test_apply_filters_matches_oracle(
        self, presenter: ModelFitsPresenter, filters: FilterState
    ) -> None:
        """apply_filters agrees with the per-predicate oracle."""
        result = presenter.apply_filters(RECORDS, filters)
        expected = [r for r in RECORDS if _expected_match(r, filters)]
        assert result == expected

    def test_run_mode_quant_and_providers_join_the_conjunction(
        self, presenter: ModelFitsPresenter
    ) -> None:
        """Run mode, quantization and provider filters AND with the rest."""
        for filters in _EXTENDED_FILTER_COMBINATIONS:
            result = presenter.apply_filters(RECORDS, filters)
            expected = [r for r in RECORDS if _expected_match(r, filters)]
            assert result == expected, filters

    def test_hidden_provider_is_excluded(self, presenter: ModelFitsPresenter) -> None:
        result = presenter.apply_filters(RECORDS, FilterState(hidden_providers=frozenset({"Meta"})))
        assert "meta-llama/Llama-3-8B" not in [r.name for r in result]
        assert len(result) == len(RECORDS) - 1

    def test_hiding_every_provider_leaves_nothing(self, presenter: ModelFitsPresenter) -> None:
        assert presenter.apply_filters(RECORDS, FilterState(hidden_providers=_ALL_PROVIDERS)) == []

    def test_run_mode_and_quant_combine(self, presenter: ModelFitsPresenter) -> None:
        result = presenter.apply_filters(RECORDS, FilterState(run_mode="GPU", quant="Q8_0"))
        assert [r.name for r in result] == ["local-model"]

    def test_default_filters_pass_everything(self, presenter: ModelFitsPresenter) -> None:
        """Default filter state excludes nothing."""
        assert presenter.apply_filters(RECORDS, FilterState()) == list(RECORDS)

    def test_search_matches_provider(self, presenter: ModelFitsPresenter) -> None:
        """Search text is matched against the provider too."""
        result = presenter.apply_filters(RECORDS, FilterState(search_text="alibaba"))
        assert [r.name for r in result] == ["qwen/Qwen2.5-Coder-7B"]

    def test_fit_level_is_case_sensitive(self, presenter: ModelFitsPresenter) -> None:
        """Fit-level filtering uses exact equality."""
        assert presenter.apply_filters(RECORDS, FilterState(fit_level="good")) == []

    def test_runnable_excludes_too_tight(self, presenter: ModelFitsPresenter) -> None:
        """The runnable option hides only TooTight records."""
        result = presenter.apply_filters(RECORDS, FilterState(fit_level=FILTER_RUNNABLE))
        assert all(r.fit_level != "TooTight" for r in result)
        assert len(result) == len(RECORDS) - 1

    def test_filtering_does_not_mutate_input(self, presenter: ModelFitsPresenter) -> None:
        """The source sequence is left untouched."""
        records = list(RECORDS)
        presenter.apply_filters(records, FilterState(installed_only=True))
        assert records == list(RECORDS)


# =============================================================================
# Sorting
# =============================================================================


class TestSortRecords:
    """Tests for the comparator engine."""

    def test_score_descending_then_ascending_reverses(
        self, presenter: ModelFitsPresenter
    ) -> None:
        """Untied records come out in exactly reversed order."""
        desc = presenter.sort_records(RECORDS, "score", ascending=False)
        asc = presenter.sort_records(RECORDS, "score", ascending=True)
        assert [r.score for r in desc] == [91.0, 84.0, 70.0, 55.0, 12.0]
        assert desc == list(reversed(asc))

    def test_text_sort_is_case_insensitive(self, presenter: ModelFitsPresenter) -> None:
        """"alpha" sorts before "Zeta" regardless of case."""
        records = [_make_record("Zeta"), _make_record("alpha"), _make_record("Mid")]
        result = presenter.sort_records(records, "name", ascending=True)
        assert [r.name for r in result] == ["alpha", "Mid", "Zeta"]

    def test_text_sort_descending_swaps_operands(
        self, presenter: ModelFitsPresenter
    ) -> None:
        """Descending text order is the exact reverse for distinct values."""
        records = [_make_record("Zeta"), _make_record("alpha"), _make_record("Mid")]
        result = presenter.sort_records(records, "name", ascending=False)
        assert [r.name for r in result] == ["Zeta", "Mid", "alpha"]

    def test_bool_sort_uses_one_and_zero(self, presenter: ModelFitsPresenter) -> None:
        """Installed records come first when sorting descending."""
        result = presenter.sort_records(RECORDS, "installed", ascending=False)
        assert [r.installed for r in result] == [True, True, True, False, False]

    def test_ties_keep_prior_order(self, presenter: ModelFitsPresenter) -> None:
        """Equal keys keep their relative input order in both directions."""
        records = [_make_record(f"m{i}", score=50.0) for i in range(5)]
        for ascending in (True, False):
            result = presenter.sort_records(records, "score", ascending=ascending)
            assert [r.name for r in result] == [f"m{i}" for i in range(5)]

    def test_sort_returns_new_list(self, presenter: ModelFitsPresenter) -> None:
        """Sorting never reorders the source sequence."""
        records = list(RECORDS)
        result = presenter.sort_records(records, "score", ascending=True)
        assert result is not records
        assert records == list(RECORDS)

    def test_unknown_sort_key_keeps_order(self, presenter: ModelFitsPresenter) -> None:
        """An unknown key leaves the order as loaded."""
        result = presenter.sort_records(RECORDS, "no_such_field", ascending=False)
        assert result == list(RECORDS)

    def test_nan_sorts_lowest(self, presenter: ModelFitsPresenter) -> None:
        """A NaN score sorts below every number in both directions."""
        records = [
            _make_record("five", score=5.0),
            _make_record("nan", score=float("nan")),
            _make_record("nine", score=9.0),
            _make_record("one", score=1.0),
        ]
        desc = presenter.sort_records(records, "score", ascending=False)
        asc = presenter.sort_records(records, "score", ascending=True)
        assert [r.name for r in desc] == ["nine", "five", "one", "nan"]
        assert [r.name for r in asc] == ["nan", "one", "five", "nine"]

    def test_nan_values_tie(self, presenter: ModelFitsPresenter) -> None:
        records = [_make_record(f"n{i}", score=float("nan")) for i in range(3)]
        result = presenter.sort_records(records, "score", ascending=False)
        assert [r.name for r in result] == ["n0", "n1", "n2"]

    @pytest.mark.parametrize("ascending", [True, False])
    def test_installed_first_pins_installed(
        self, presenter: ModelFitsPresenter, ascending: bool
    ) -> None:
        """Installed records lead in either direction, each group sorted by the column."""
        result = presenter.sort_records(
            RECORDS, "score", ascending=ascending, installed_first=True
        )
        installed = [r.score for r in result if r.installed]
        assert [r.installed for r in result] == [True, True, True, False, False]
        assert installed == sorted(installed, reverse=not ascending)

    def test_installed_first_with_unknown_key(self, presenter: ModelFitsPresenter) -> None:
        result = presenter.sort_records(RECORDS, "no_such_field", False, installed_first=True)
        assert [r.name for r in result] == [
            "meta-llama/Llama-3-8B",
            "google/gemma-2-9b",
            "local-model",
            "qwen/Qwen2.5-Coder-7B",
            "mistralai/Mixtral-8x22B",
        ]


# =============================================================================
# Formatting
# =============================================================================


class TestFormatting:
    """Tests for the view projector helpers."""

    @pytest.mark.parametrize(
        ("context_length", "expected"),
        [(8192, "8k"), (4096, "4k"), (32768, "33k"), (131072, "131k"), (0, "0k"), (2500, "3k")],
    )
    def test_format_context(self, context_length: int, expected: str) -> None:
        """Context length is shown in rounded thousands."""
        assert ModelFitsPresenter.format_context(context_length) == expected

    @pytest.mark.parametrize(
        ("utilization", "expected"),
        [(143.7, 100.0), (100.0, 100.0), (42.5, 42.5), (-3.0, 0.0)],
    )
    def test_utilization_bar_is_clamped(self, utilization: float, expected: float) -> None:
        """Bar fill stays within 0-100."""
        assert ModelFitsPresenter.utilization_bar_pct(utilization) == expected

    def test_utilization_label_is_not_capped(self, presenter: ModelFitsPresenter) -> None:
        """Detail label keeps the raw value while the bar is clamped."""
        detail = presenter.build_detail(_make_record(utilization_pct=143.7))
        assert detail.utilization_bar.value_text == "143.7%"
        assert detail.utilization_bar.fill_pct == 100.0

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.0, 0.0), (15.0, 50.0), (30.0, 100.0), (45.0, 100.0), (-5.0, 0.0)],
    )
    def test_subscore_fill_pct(self, value: float, expected: float) -> None:
        """Sub-scores map 0-30 onto a 0-100 bar."""
        assert ModelFitsPresenter.subscore_fill_pct(value) == pytest.approx(expected)

    def test_short_name_takes_last_segment(self) -> None:
        """Only the text after the last separator is the title."""
        assert ModelFitsPresenter.short_name("org/sub/model") == "model"
        assert ModelFitsPresenter.short_name("plain") == "plain"

    def test_format_row(self, presenter: ModelFitsPresenter) -> None:
        """Row cells use the fixed per-field precision."""
        row = presenter.format_row(
            _make_record("org/model", score=84.6, estimated_tps=12.345, utilization_pct=61.5,
                         installed=True)
        )
        assert row.key == "org/model"
        assert row.title == "model"
        assert row.score == "85"
        assert row.tps == "12.3"
        assert row.utilization == "62%"
        assert row.context == "8k"
        assert row.fit == "🟢 Good"
        assert row.installed == "✓"

    def test_format_row_escapes_markup(self, presenter: ModelFitsPresenter) -> None:
        """External text cannot inject Rich markup; the key stays raw."""
        row = presenter.format_row(
            _make_record("evil/[bold]x", provider="[red]p[/red]")
        )
        assert row.key == "evil/[bold]x"
        assert row.title == "\\[bold]x"
        assert row.provider == "\\[red]p\\[/red]"

    def test_selected_row_is_marked(self, presenter: ModelFitsPresenter) -> None:
        """Only the selected row carries the marker in its name cell."""
        record = _make_record("org/model")
        selected = presenter.format_row(record, selected=True)
        plain = presenter.format_row(record)
        assert selected.cells[0].startswith(SELECTED_ROW_MARKER)
        assert not plain.cells[0].startswith(SELECTED_ROW_MARKER)
        assert selected.cells[1:] == plain.cells[1:]

    def test_missing_text_renders_not_available(self, presenter: ModelFitsPresenter) -> None:
        """Blank optional fields render as N/A."""
        row = presenter.format_row(ModelFitRecord(name="bare"))
        assert row.provider == NOT_AVAILABLE
        assert row.quant == NOT_AVAILABLE
        assert row.installed == "—"

    def test_build_detail(self, presenter: ModelFitsPresenter) -> None:
        """Detail panel fields and score bars."""
        detail = presenter.build_detail(
            _make_record("org/model", notes=["needs <8GB>", "[x]"], score=84.56)
        )
        assert detail.subtitle == "Org · org/model"
        assert detail.score == "84.6"
        assert detail.memory_required == "4.5 GB"
        assert detail.category == "chat — General chat"
        assert [bar.label for bar in detail.score_bars] == ["Memory", "Speed", "Quality", "Context"]
        assert [bar.fill_pct for bar in detail.score_bars] == pytest.approx(
            [50.0, 40.0, 66.6666, 33.3333], rel=1e-3
        )
        assert detail.notes == ("needs <8GB>", "\\[x]")
        assert detail.installed == "✗ Not installed"


class TestSystemInfo:
    """Tests for system panel projection."""

    def test_full_info(self, presenter: ModelFitsPresenter) -> None:
        info = SystemInfoRecord(
            cpu="Ryzen 9", cores=16, ram_gb=64.0, gpu="RTX 4090", gpu_backend="CUDA",
            vram_gb=24.0, ollama_available=True, ollama_installed_count=3,
        )
        vm = presenter.build_system_info(info)
        assert vm.cpu == "Ryzen 9 (16 cores)"
        assert vm.ram == "64.0 GB"
        assert vm.gpu == "RTX 4090 (CUDA)"
        assert vm.vram == "24.0 GB"
        assert vm.ollama == "✓ (3 installed)"
        assert vm.message == ""

    def test_missing_vram_and_ollama(self, presenter: ModelFitsPresenter) -> None:
        vm = presenter.build_system_info(SystemInfoRecord(vram_gb=0))
        assert vm.vram == NOT_AVAILABLE
        assert vm.ollama == "✗ Not running"

    def test_unified_memory_suffix(self, presenter: ModelFitsPresenter) -> None:
        vm = presenter.build_system_info(SystemInfoRecord(vram_gb=16.0, unified_memory=True))
        assert vm.vram == "16.0 GB (unified)"

    def test_loading_and_error_messages(self, presenter: ModelFitsPresenter) -> None:
        loading = presenter.build_system_info(None, FetchState.LOADING)
        failed = presenter.build_system_info(None, FetchState.ERROR, "boom")
        assert loading.message and not loading.is_error
        assert failed.is_error and "boom" in failed.message

    def test_failed_refresh_keeps_previous_info(self, presenter: ModelFitsPresenter) -> None:
        vm = presenter.build_system_info(SystemInfoRecord(cpu="M2"), FetchState.ERROR, "x")
        assert vm.message == ""
        assert vm.cpu.startswith("M2")


# =============================================================================
# Filter options
# =============================================================================


class TestFilterOptions:
    """Tests for select option derivation."""

    def test_fit_options_canonical_order(self, presenter: ModelFitsPresenter) -> None:
        records = [_make_record("a", fit_level="Weird"), *RECORDS]
        values = [v for _, v in presenter.fit_options(records)]
        assert values == [FILTER_ALL, FILTER_RUNNABLE, "Perfect", "Good", "Marginal",
                          "TooTight", "Weird"]

    def test_current_value_is_kept(self, presenter: ModelFitsPresenter) -> None:
        values = [v for _, v in presenter.category_options([], "vision")]
        assert values == [FILTER_ALL, "vision"]

    def test_category_options_sorted(self, presenter: ModelFitsPresenter) -> None:
        values = [v for _, v in presenter.category_options(RECORDS)]
        assert values == [FILTER_ALL, "chat", "code"]

    def test_run_mode_and_quant_options(self, presenter: ModelFitsPresenter) -> None:
        assert [v for _, v in presenter.run_mode_options(RECORDS)] == [
            FILTER_ALL, "CPU", "GPU", "MoE"
        ]
        assert [v for _, v in presenter.quant_options(RECORDS, "Q6_K")] == [
            FILTER_ALL, "Q2_K", "Q4_K_M", "Q6_K", "Q8_0"
        ]

    def test_provider_options_keep_hidden_entries(self, presenter: ModelFitsPresenter) -> None:
        """Hidden providers stay listed; a blank provider shows as N/A."""
        options = presenter.provider_options(RECORDS, frozenset({"Gone"}))
        assert [v for _, v in options] == ["", "Alibaba", "Gone", "Google", "Meta", "Mistral"]
        assert options[0] == (NOT_AVAILABLE, "")


# =============================================================================
# Render pipeline
# =============================================================================


class TestBuildViewModel:
    """Tests for the full projection."""

    def test_status_loading_before_first_response(self, presenter: ModelFitsPresenter) -> None:
        vm = presenter.build_view_model(ViewState())
        assert vm.status.status == TableStatus.LOADING
        assert vm.count_label == "0 of 0 records"

    def test_status_error_without_records(self, presenter: ModelFitsPresenter) -> None:
        vm = presenter.build_view_model(
            ViewState(fits_state=FetchState.ERROR, fits_error="backend down")
        )
        assert vm.status.status == TableStatus.ERROR
        assert vm.status.is_error
        assert "backend down" in vm.status.message

    def test_status_empty_result(self, presenter: ModelFitsPresenter) -> None:
        vm = presenter.build_view_model(ViewState(fits_state=FetchState.SUCCESS))
        assert vm.status.status == TableStatus.EMPTY

    def test_three_states_are_distinguishable(self, presenter: ModelFitsPresenter) -> None:
        messages = {
            presenter.build_view_model(ViewState(fits_state=state)).status.message
            for state in FetchState
        }
        assert len(messages) == 3

    def test_status_no_matches(self, presenter: ModelFitsPresenter) -> None:
        state = ViewState(
            records=RECORDS,
            fits_state=FetchState.SUCCESS,
            filters=FilterState(search_text="zz-none"),
        )
        vm = presenter.build_view_model(state)
        assert vm.status.status == TableStatus.NO_MATCHES
        assert vm.rows == ()

    def test_failed_refresh_keeps_rows(self, presenter: ModelFitsPresenter) -> None:
        state = ViewState(records=RECORDS, fits_state=FetchState.ERROR, fits_error="timeout")
        vm = presenter.build_view_model(state)
        assert len(vm.rows) == len(RECORDS)
        assert vm.status.status == TableStatus.READY
        assert vm.status.is_error

    def test_selection_survives_filtering(self, presenter: ModelFitsPresenter) -> None:
        """A filtered-out selection stays inspectable in the detail panel."""
        state = ViewState(
            records=RECORDS,
            fits_state=FetchState.SUCCESS,
            filters=FilterState(installed_only=True),
            selected_name="qwen/Qwen2.5-Coder-7B",
        )
        vm = presenter.build_view_model(state)
        assert "qwen/Qwen2.5-Coder-7B" not in vm.visible_keys
        assert vm.detail is not None
        assert vm.detail.key == "qwen/Qwen2.5-Coder-7B"
        assert vm.detail.is_filtered_out

    def test_selected_row_flag(self, presenter: ModelFitsPresenter) -> None:
        state = ViewState(records=RECORDS, selected_name="local-model")
        vm = presenter.build_view_model(state)
        assert [row.key for row in vm.rows if row.is_selected] == ["local-model"]

    def test_deterministic(self, presenter: ModelFitsPresenter) -> None:
        """Identical inputs project to identical output."""
        state = ViewState(records=RECORDS, fits_state=FetchState.SUCCESS, selected_name="local-model")
        assert presenter.build_view_model(state) == presenter.build_view_model(state)

    def test_column_labels_mark_sorted_column(self, presenter: ModelFitsPresenter) -> None:
        labels = presenter.column_labels("score", ascending=False)
        assert labels["score"] == "Score ▼"
        assert labels["name"] == "Model"
        assert presenter.column_labels("name", ascending=True)["name"] == "Model ▲"


class TestEndToEndScenario:
    """Default sort, then installed-only."""

    def test_scenario(self, presenter: ModelFitsPresenter) -> None:
        records = (
            _make_record("a/x", score=80, fit_level="good", installed=True),
            _make_record("b/y", score=95, fit_level="perfect", installed=False),
        )
        state = ViewState(records=records, fits_state=FetchState.SUCCESS)
        vm = presenter.build_view_model(state)
        assert vm.visible_keys == ("b/y", "a/x")
        assert vm.count_label == "2 of 2 records"

        filtered = ViewState(
            records=records,
            fits_state=FetchState.SUCCESS,
            filters=FilterState(installed_only=True),
        )
        vm = presenter.build_view_model(filtered)
        assert vm.visible_keys == ("a/x",)
        assert vm.count_label == "1 of 2 records"
