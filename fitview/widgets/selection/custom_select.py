"""CustomSelect widget - standardized wrapper around Textual's Select."""

from __future__ import annotations

from collections.abc import Iterable

from textual.widgets import Select


class CustomSelect(Select[str]):
    """Drop-down of string values that never shows a blank choice.

    CSS Classes: widget-custom-select
    """

    def __init__(
        self,
        options: Iterable[tuple[str, str]],
        *,
        value: str,
        prompt: str = "Select",
        id: str | None = None,
        classes: str = "",
    ) -> None:
        options = list(options)
        super().__init__(
            options,
            value=value,
            prompt=prompt,
            allow_blank=False,
            id=id,
            classes=f"widget-custom-select {classes}".strip(),
        )
        self._option_values: tuple[str, ...] = tuple(v for _, v in options)

    def sync_options(self, options: Iterable[tuple[str, str]], value: str) -> None:
        """Replace the options only when they changed, then select ``value``.

        ``value`` must be one of the option values.
        """
        options = list(options)
        values = tuple(v for _, v in options)
        if values != self._option_values:
            self._option_values = values
            with self.prevent(Select.Changed):
                self.set_options(options)
        if self.value != value:
            with self.prevent(Select.Changed):
                self.value = value
