"""Base screen class for the fitview TUI.

Every fitview screen derives from BaseScreen. It sets the window title,
kicks off the first load once mounted and draws status lines.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from contextlib import suppress
from typing import TYPE_CHECKING, cast

from rich.markup import escape
from textual.css.query import NoMatches, WrongType
from textual.screen import Screen

from fitview.constants.values import APP_TITLE
from fitview.widgets import CustomStatic

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from fitview.app import FitViewApp


class BaseScreen(Screen):
    """Screen with a title, a first load after mount and refresh.

    Subclasses provide:
    - screen_title: Text shown after the app name in the title bar
    - load_data: Starts fetching whatever the screen shows

    Example:
        class MyScreen(BaseScreen):
            @property
            def screen_title(self) -> str:
                return "Models"

            def load_data(self) -> None:
                ...
    """

    @property
    def screen_title(self) -> str:
        """Title displayed in the application window."""
        return APP_TITLE

    @property
    def app(self) -> FitViewApp:
        """The running FitViewApp."""
        return cast("FitViewApp", super().app)

    def set_title(self, title: str) -> None:
        """Show ``title`` after the app name in the title bar.

        Args:
            title: Screen-specific part of the title.
        """
        self.app.title = f"{APP_TITLE} - {title}"

    def on_mount(self) -> None:
        """Set the window title and schedule data loading."""
        self.set_title(self.screen_title)
        self.call_later(self.load_data)

    @abstractmethod
    def load_data(self) -> None:
        """Start fetching the screen data.

        Scheduled once after mount and again on every refresh.
        """
        ...

    def action_refresh(self) -> None:
        """Reload the screen data."""
        logger.debug("Refresh requested on %s", type(self).__name__)
        self.load_data()

    # =========================================================================
    # STATUS HELPERS
    # =========================================================================

    def set_status(self, widget_id: str, message: str, *, is_error: bool = False) -> None:
        """Show plain ``message`` in a status line, escaping any markup.

        Args:
            widget_id: ID of the CustomStatic to update.
            message: Plain text; markup characters are shown literally.
            is_error: Adds the "error" class when true.
        """
        with suppress(NoMatches, WrongType):
            widget = self.query_one(f"#{widget_id}", CustomStatic)
            widget.update(escape(message))
            widget.set_class(is_error, "error")
