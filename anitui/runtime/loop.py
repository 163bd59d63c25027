"""Main interactive event loop for the terminal UI.

One iteration: render when something changed, wait for a key event, run it
through the mode state machine, then refresh the selection-derived image
binding. Feature logic lives in the state machine and the composer.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from typing import Protocol

from ..input.events import KeyEvent
from ..input.modes import apply_key
from ..render.composer import Frame, ViewComposer
from ..render.layout import Rect
from .state import AppState

logger = logging.getLogger(__name__)

# Input wait granularity; lets the loop notice terminal resizes while idle.
INPUT_POLL_MS = 120

ImagePlacement = tuple[int, Rect]


class LoopTerminal(Protocol):
    def raw_mode(self): ...

    def write(self, text: str) -> None: ...


class EventSource(Protocol):
    closed: bool

    def read_event(self, timeout_ms: int | None = None) -> KeyEvent | None: ...


def _sync_image_placement(
    state: AppState,
    terminal: LoopTerminal,
    frame: Frame,
    current: ImagePlacement | None,
) -> ImagePlacement | None:
    """Emit out-of-band image output only when the drawable or its region changed."""
    binding = state.image_binding
    if binding is None:
        return None
    desired: ImagePlacement | None = None
    if binding.drawable is not None and frame.image_region is not None:
        desired = (binding.generation, frame.image_region)
    if desired == current:
        return current
    if current is not None:
        terminal.write(binding.protocol.clear())
    if desired is not None and binding.drawable is not None:
        terminal.write(binding.protocol.place(binding.drawable, desired[1]))
    return desired


def run_main_loop(
    state: AppState,
    terminal: LoopTerminal,
    events: EventSource,
    composer: ViewComposer,
    *,
    get_terminal_size: Callable[[tuple[int, int]], os.terminal_size] = shutil.get_terminal_size,
) -> None:
    """Run the TUI until an exit is requested or the input stream closes.

    Terminal teardown happens on every exit path via ``terminal.raw_mode``.
    """
    image_placement: ImagePlacement | None = None
    last_size: tuple[int, int] | None = None
    state.sync_image()

    with terminal.raw_mode():
        try:
            while not state.should_exit:
                term = get_terminal_size((80, 24))
                size = (term.columns, term.lines)
                if size != last_size:
                    last_size = size
                    state.dirty = True

                if state.dirty:
                    frame = composer.compose(state, size[0], size[1])
                    terminal.write(frame.text)
                    image_placement = _sync_image_placement(state, terminal, frame, image_placement)
                    state.dirty = False

                try:
                    event = events.read_event(timeout_ms=INPUT_POLL_MS)
                except KeyboardInterrupt:
                    continue
                if event is None:
                    if events.closed:
                        logger.debug("Input stream closed; leaving main loop")
                        break
                    continue

                outcome = apply_key(state, event)
                if outcome.selection_changed or outcome.catalog_changed:
                    state.sync_image()
                if outcome.dirty:
                    state.dirty = True
        finally:
            if image_placement is not None and state.image_binding is not None:
                terminal.write(state.image_binding.protocol.clear())
