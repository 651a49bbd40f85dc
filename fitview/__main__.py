"""Command-line entry point: ``python -m fitview`` / ``fitview``."""

from __future__ import annotations

import argparse
import locale
import logging
import sys
from pathlib import Path

from fitview import __version__
from fitview.constants.defaults import LOG_FILE_NAME
from fitview.constants.enums import SortKey
from fitview.models.state import ConfigManager

logger = logging.getLogger("fitview")

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fitview",
        description="Rank, filter and inspect which LLMs fit this machine.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--snapshot",
        type=Path,
        help='read records from a JSON file ({"system": {...}, "models": [...]})',
    )
    source.add_argument(
        "--backend-command",
        help="executable printing system and fit JSON (default from settings)",
    )
    parser.add_argument(
        "--sort-key",
        choices=[key.value for key in SortKey],
        help="initial sort column (default from settings)",
    )
    parser.add_argument("--config", type=Path, help="settings file to use")
    parser.add_argument(
        "--log-file",
        type=Path,
        help=f"log destination (default {ConfigManager.config_dir() / LOG_FILE_NAME})",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="log level (default from settings)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(log_file: Path, level: str) -> None:
    """Send logs to a file; the terminal belongs to the TUI."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_file),
        level=getattr(logging, level, logging.INFO),
        format=_LOG_FORMAT,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(
        args.log_file or ConfigManager.config_dir() / LOG_FILE_NAME,
        args.log_level or "INFO",
    )

    from fitview.app import FitViewApp

    app = FitViewApp(
        snapshot_path=args.snapshot,
        backend_command=args.backend_command,
        sort_key=args.sort_key,
        config_path=args.config,
    )
    if args.log_level is None:
        logging.getLogger().setLevel(app.settings.log_level)
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.warning("Could not apply the user's collation locale; using C ordering")

    logger.info("Starting fitview %s", __version__)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
