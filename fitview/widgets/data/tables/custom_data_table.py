"""CustomDataTable widget - keyed, externally sorted rows on top of Textual's DataTable."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from contextlib import suppress
from typing import TYPE_CHECKING, Any

from textual.containers import Container
from textual.coordinate import Coordinate
from textual.events import Leave, MouseMove
from textual.message import Message
from textual.widgets import DataTable as TextualDataTable
from textual.widgets.data_table import CellDoesNotExist, RowDoesNotExist

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from textual.app import ComposeResult


class CustomDataTable(Container):
    """DataTable wrapper whose rows are redrawn wholesale from the caller.

    Rows are keyed by a caller-supplied string so selections survive a full
    redraw. Header clicks are re-posted as ``HeaderClicked`` carrying the
    column key; the table never sorts itself.

    CSS Classes: widget-custom-data-table

    Example:
        ```python
        table = CustomDataTable(
            columns=[("Model", "name"), ("Score", "score")],
            id="fits-table",
        )
        ```
    """

    DEFAULT_CSS = """
    CustomDataTable {
        height: 1fr;
        width: 1fr;
        min-width: 0;
        min-height: 3;
        background: $surface;
    }
    CustomDataTable > DataTable {
        height: 1fr;
        width: 1fr;
        min-width: 0;
        border: none;
        background: transparent;
        overflow-x: auto;
        overflow-y: auto;
    }
    """

    class HeaderClicked(Message):
        """Posted when a column header is clicked."""

        def __init__(self, data_table: CustomDataTable, column_key: str) -> None:
            super().__init__()
            self.data_table = data_table
            self.column_key = column_key

        @property
        def control(self) -> CustomDataTable:
            return self.data_table

    class RowChosen(Message):
        """Posted when a row is selected (click or Enter)."""

        def __init__(self, data_table: CustomDataTable, row_key: str) -> None:
            super().__init__()
            self.data_table = data_table
            self.row_key = row_key

        @property
        def control(self) -> CustomDataTable:
            return self.data_table

    def __init__(
        self,
        columns: Sequence[tuple[str, str]] | None = None,
        *,
        id: str | None = None,
        classes: str = "",
        zebra_stripes: bool = True,
    ) -> None:
        """Create the wrapper.

        Args:
            columns: (label, key) pairs in display order.
            id: Widget ID.
            classes: Extra CSS classes.
            zebra_stripes: Alternate row backgrounds.
        """
        super().__init__(id=id, classes=f"widget-custom-data-table {classes}".strip())
        self._columns: list[tuple[str, str]] = list(columns or [])
        self._zebra_stripes = zebra_stripes
        self._inner_widget: TextualDataTable | None = None
        self._header_tooltips: dict[str, str] = {}
        self._last_tooltip: str | None = None

    def compose(self) -> ComposeResult:
        """Yield the inner DataTable with the initial columns."""
        table = TextualDataTable(cursor_type="row", zebra_stripes=self._zebra_stripes)
        self._inner_widget = table
        yield table
        for label, key in self._columns:
            table.add_column(label, key=key)

    @property
    def data_table(self) -> TextualDataTable | None:
        """The underlying Textual DataTable, or None before compose."""
        return self._inner_widget

    @property
    def column_keys(self) -> list[str]:
        """Column keys in display order."""
        return [key for _, key in self._columns]

    @property
    def row_count(self) -> int:
        if self._inner_widget is not None:
            return self._inner_widget.row_count
        return 0

    def replace_rows(
        self,
        rows: Iterable[tuple[str, Sequence[Any]]],
        *,
        labels: Mapping[str, str] | None = None,
        cursor_key: str | None = None,
        row_height: int = 1,
    ) -> None:
        """Replace every row, keeping the cursor on ``cursor_key`` when present.

        Columns are rebuilt too so relabelled headers (sort indicators) get
        their widths recomputed.

        Args:
            rows: Pairs of (row key, cell values).
            labels: Optional mapping of column key -> header label.
            cursor_key: Row key to place the cursor on after the redraw.
            row_height: Height of every row in lines.
        """
        table = self._inner_widget
        if table is None:
            return
        if labels:
            self._columns = [(labels.get(key, label), key) for label, key in self._columns]
        with self.app.batch_update():
            table.clear(columns=True)
            for label, key in self._columns:
                table.add_column(label, key=key)
            for key, cells in rows:
                table.add_row(*cells, key=key, height=row_height)
        if cursor_key is None:
            return
        with suppress(RowDoesNotExist):
            index = table.get_row_index(cursor_key)
            table.cursor_coordinate = Coordinate(index, 0)

    def highlighted_key(self) -> str | None:
        """Key of the row under the cursor, or None when the table is empty."""
        table = self._inner_widget
        if table is None or table.row_count == 0:
            return None
        with suppress(CellDoesNotExist):
            return table.coordinate_to_cell_key(table.cursor_coordinate).row_key.value
        return None

    def row_keys(self) -> list[str]:
        """Row keys in display order."""
        if self._inner_widget is None:
            return []
        return [str(row.key.value) for row in self._inner_widget.ordered_rows]

    def set_header_tooltips(self, tooltips: Mapping[str, str] | None = None) -> None:
        """Register hover text for column headers.

        Args:
            tooltips: Mapping of column key -> tooltip text.
        """
        self._header_tooltips = {
            str(key): str(text) for key, text in (tooltips or {}).items() if str(text).strip()
        }

    def _resolve_header_tooltip(self, meta: Mapping[str, Any] | None) -> str | None:
        """Tooltip for the header cell described by ``meta``, if any."""
        if not self._header_tooltips or not meta:
            return None
        column_index = meta.get("column")
        if meta.get("row") != -1 or not isinstance(column_index, int):
            return None
        if 0 <= column_index < len(self._columns):
            return self._header_tooltips.get(self._columns[column_index][1])
        return None

    def on_data_table_header_selected(self, event: TextualDataTable.HeaderSelected) -> None:
        """Translate header clicks into ``HeaderClicked`` messages."""
        event.stop()
        column_key = event.column_key.value
        if column_key is not None:
            self.post_message(self.HeaderClicked(self, column_key))

    def on_data_table_row_selected(self, event: TextualDataTable.RowSelected) -> None:
        """Translate row selection into ``RowChosen`` messages."""
        event.stop()
        row_key = event.row_key.value
        if row_key is not None:
            self.post_message(self.RowChosen(self, row_key))

    def on_mouse_move(self, event: MouseMove) -> None:
        """Show the header tooltip under the pointer."""
        table = self._inner_widget
        if table is None:
            return
        meta = getattr(event.style, "meta", None)
        new_tooltip = self._resolve_header_tooltip(meta)
        if new_tooltip != self._last_tooltip:
            self._last_tooltip = new_tooltip
            table.tooltip = new_tooltip

    def on_leave(self, _: Leave) -> None:
        """Drop the header tooltip once the pointer leaves."""
        self._last_tooltip = None
        if self._inner_widget is not None:
            self._inner_widget.tooltip = None
