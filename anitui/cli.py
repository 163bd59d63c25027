"""Command-line front door for anitui.

Loads the config file, applies command-line overrides, and dispatches into
the interactive runtime. Every option is optional; with none given the app
runs with the config-file (or built-in) defaults.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path

from .errors import TerminalSetupError
from .logs import configure_logging
from .runtime import run_app
from .runtime.config import AppConfig, load_app_config, parse_capture_arrows
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)


def _capture_arrows(value: str):
    """argparse type for the capture-mode arrow policy."""
    policy = parse_capture_arrows(value)
    if policy is None:
        raise argparse.ArgumentTypeError("expected 'abandon' or 'ignore'")
    return policy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="anitui",
        description="Browse an anime catalog in the terminal.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-images", action="store_true", help="Disable the poster pane.")
    parser.add_argument(
        "--capture-arrows",
        type=_capture_arrows,
        default=None,
        metavar="{abandon,ignore}",
        help="Whether Up/Down abandon text entry and move the selection, or are ignored.",
    )
    parser.add_argument("--poster-dir", type=Path, default=None, help="Directory holding seed poster images.")
    parser.add_argument("--debug-log", action="store_true", help="Write debug logs to the user log directory.")
    return parser


def resolve_config(args: argparse.Namespace, base: AppConfig) -> AppConfig:
    """Overlay explicitly passed command-line options onto ``base``."""
    overrides: dict[str, object] = {}
    if args.theme is not None:
        overrides["theme"] = args.theme
    if args.no_images:
        overrides["images"] = False
    if args.capture_arrows is not None:
        overrides["capture_arrows"] = args.capture_arrows
    if args.poster_dir is not None:
        overrides["poster_dir"] = args.poster_dir.expanduser()
    if args.debug_log:
        overrides["debug_log"] = True
    return dataclasses.replace(base, **overrides)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the browser until the user quits.

    Terminal setup failures exit non-zero with a one-line message.
    """
    args = build_parser().parse_args(argv)
    config = resolve_config(args, load_app_config())
    log_path = configure_logging(config.debug_log)
    if log_path is not None:
        logger.debug("Debug logging to %s", log_path)

    try:
        run_app(config)
    except TerminalSetupError as exc:
        raise SystemExit(f"anitui: {exc}") from exc


if __name__ == "__main__":
    main()
