"""Main application class for the fitview TUI."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from fitview.constants import APP_TITLE, THEME_DEFAULT
from fitview.controllers.backend import (
    BackendController,
    CommandBackendController,
    SnapshotBackendController,
)
from fitview.keyboard.app import APP_BINDINGS
from fitview.models.state import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class FitViewApp(App[None]):
    """Main TUI application for fitview."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    # Populated by _load_settings
    settings: AppSettings

    def __init__(
        self,
        snapshot_path: Path | None = None,
        backend_command: str | None = None,
        sort_key: str | None = None,
        config_path: Path | None = None,
        controller: BackendController | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.snapshot_path = snapshot_path
        self.backend_command = backend_command
        self.sort_key = sort_key
        self.config_path = config_path

        self._load_settings()
        self.controller = controller or self._build_controller()

    def _load_settings(self) -> None:
        """Read persisted settings into ``self.settings``.

        An unreadable file is left alone: defaults are used for this run and
        nothing is written back on exit.
        """
        self._settings_load_failed = False
        try:
            self.settings = ConfigManager.load(self.config_path)
        except ConfigLoadError:
            logger.warning("Falling back to default settings")
            self.settings = AppSettings()
            self._settings_load_failed = True

    def _build_controller(self) -> BackendController:
        """Pick the backend from CLI overrides first, then settings."""
        snapshot = self.snapshot_path or (
            Path(self.settings.snapshot_path) if self.settings.snapshot_path else None
        )
        if snapshot is not None:
            logger.info("Using snapshot backend %s", snapshot)
            return SnapshotBackendController(snapshot)
        command = self.backend_command or self.settings.backend_command
        logger.info("Using command backend %r", command)
        return CommandBackendController(
            command,
            system_args=self.settings.system_args,
            fits_args=self.settings.fits_args,
            timeout=self.settings.command_timeout_seconds,
        )

    def _apply_theme(self) -> None:
        """Apply the stored theme, falling back to the default for unknown names."""
        theme_name = str(self.settings.theme or "").strip()
        if theme_name not in self.available_themes:
            logger.warning("Unknown theme %r, using %s", theme_name, THEME_DEFAULT)
            theme_name = THEME_DEFAULT
        self.theme = theme_name

    def on_mount(self) -> None:
        """Apply the theme and open the model fits screen."""
        from fitview.screens import ModelFitsScreen

        self._apply_theme()
        self.push_screen(
            ModelFitsScreen(
                self.controller,
                sort_key=self.sort_key or self.settings.default_sort_key,
                sort_ascending=self.settings.default_sort_ascending,
            )
        )

    def action_show_help(self) -> None:
        """Show the key reference as a notification."""
        self.notify(
            "Keybindings:\n"
            "Table:\n"
            "  Click header: Sort (again to reverse)\n"
            "  Enter / click row: Show details\n"
            "  Esc: Close details\n"
            "Filters:\n"
            "  /: Search\n"
            "  f: Cycle fit filter\n"
            "  i: Toggle installed only\n"
            "  x: Reset filters\n"
            "  p: Provider list (space toggles, a: all)\n"
            "  o: Installed first\n"
            "Actions:\n"
            "  r: Refresh\n"
            "  ?: Help\n"
            "  q: Quit",
            severity="information",
            title="Help",
        )

    def on_unmount(self) -> None:
        """Persist settings on exit, unless they could not be loaded."""
        if self._settings_load_failed:
            logger.info("Not saving settings over an unreadable file")
            return
        try:
            ConfigManager.save(self.settings, self.config_path)
        except ConfigSaveError as e:
            logger.error("Failed to save settings: %s", e)


__all__ = [
    "FitViewApp",
]
