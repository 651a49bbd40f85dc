"""Unit tests for the CustomBar widget and its render helper."""

from __future__ import annotations

import pytest

from fitview.widgets import CustomBar, render_bar


class TestRenderBar:
    """Tests for render_bar."""

    @pytest.mark.parametrize(
        ("fill_pct", "filled"),
        [(0, 0), (50, 5), (100, 10), (143.7, 10), (-20, 0), (4, 0), (6, 1)],
    )
    def test_fill(self, fill_pct: float, filled: int) -> None:
        bar = render_bar(fill_pct, width=10)
        assert len(bar) == 10
        assert bar.count("█") == filled
        assert bar.count("░") == 10 - filled

    def test_default_width(self) -> None:
        assert len(render_bar(50)) == 24


class TestCustomBar:
    """Tests for CustomBar construction."""

    def test_css_class(self) -> None:
        bar = CustomBar("Memory", 50.0, "15.0", classes="score-bar")
        assert bar.has_class("widget-custom-bar")
        assert bar.has_class("score-bar")

    def test_line_contains_label_and_value(self) -> None:
        bar = CustomBar("Speed", 100.0, "30.0", width=4)
        assert bar._compose_line() == "Speed      ████ 30.0"
