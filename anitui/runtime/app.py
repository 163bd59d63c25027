"""Runtime composition layer for anitui.

Builds the initial state from config, picks the image adapter, and starts
the loop. This is the only module where catalog, input, images, and
rendering meet.
"""

from __future__ import annotations

import logging
import sys

from ..catalog import seed_catalog
from ..image import ImageBinding, select_image_protocol
from ..input.reader import EventReader
from ..render.composer import ViewComposer
from ..ui_theme import resolve_theme
from .config import AppConfig
from .loop import run_main_loop
from .state import AppState
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_app_state(config: AppConfig, kitty_graphics_supported: bool) -> AppState:
    """Seed the catalog and wire the optional image binding."""
    catalog = seed_catalog(config.poster_dir)
    binding: ImageBinding | None = None
    if config.images:
        protocol = select_image_protocol(kitty_graphics_supported, config.cell_pixels)
        binding = ImageBinding(protocol)
        logger.debug("Using %s image protocol", protocol.name)
    return AppState.for_catalog(
        catalog,
        capture_arrows=config.capture_arrows,
        image_binding=binding,
    )


def run_app(config: AppConfig, stdin_fd: int | None = None, stdout_fd: int | None = None) -> None:
    """Start the interactive browser on the controlling terminal."""
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    if stdout_fd is None:
        stdout_fd = sys.stdout.fileno()

    terminal = TerminalController(stdin_fd, stdout_fd, enhanced_keyboard=config.enhanced_keyboard)
    state = build_app_state(config, terminal.supports_kitty_graphics())
    composer = ViewComposer(resolve_theme(config.theme))
    run_main_loop(state, terminal, EventReader(stdin_fd), composer)
    logger.debug("Exited with %d catalog items", len(state.catalog))
