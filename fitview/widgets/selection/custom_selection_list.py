"""CustomSelectionList widget - standardized wrapper around Textual's SelectionList."""

from __future__ import annotations

from collections.abc import Collection, Iterable

from textual.widgets import SelectionList


class CustomSelectionList(SelectionList[str]):
    """Multi-select list of string values, ticked unless hidden.

    CSS Classes: widget-custom-selection-list
    """

    def __init__(
        self,
        *,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(
            id=id,
            classes=f"widget-custom-selection-list {classes}".strip(),
        )
        self._option_values: tuple[str, ...] = ()

    def sync_selections(
        self, options: Iterable[tuple[str, str]], hidden: Collection[str]
    ) -> None:
        """Tick every option whose value is not in ``hidden``.

        The options are rebuilt only when their values changed, and no
        ``SelectedChanged`` is posted for the update.
        """
        options = list(options)
        values = tuple(v for _, v in options)
        with self.prevent(SelectionList.SelectedChanged):
            if values != self._option_values:
                self._option_values = values
                self.clear_options()
                self.add_options(
                    [(label, value, value not in hidden) for label, value in options]
                )
                return
            for value in values:
                if value in hidden:
                    self.deselect(value)
                else:
                    self.select(value)
