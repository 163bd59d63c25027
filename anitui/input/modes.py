"""Two-mode keyboard state machine.

Command mode interprets keys as navigation/application commands; capture
mode feeds them into the capture buffer. The transition table is plain data
so it can be inspected and enumerated; ``apply_key`` executes one transition
against the application state.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ..catalog import DEFAULT_STATUS, Item
from .events import BACKSPACE, DOWN, ENTER, ESC, UP, KeyEvent

if TYPE_CHECKING:
    from ..runtime.state import AppState


class InputMode(Enum):
    COMMAND = "NORMAL"
    CAPTURE = "INSERT"

    @property
    def indicator(self) -> str:
        return self.value


class CaptureArrowPolicy(Enum):
    """What Up/Down do while capturing text."""

    ABANDON = "abandon"
    IGNORE = "ignore"


class Action(Enum):
    IGNORE = "ignore"
    QUIT = "quit"
    BEGIN_CAPTURE = "begin_capture"
    SELECT_NEXT = "select_next"
    SELECT_PREVIOUS = "select_previous"
    CAPTURE_PUSH = "capture_push"
    CAPTURE_POP = "capture_pop"
    ABANDON_CAPTURE = "abandon_capture"
    COMMIT_CAPTURE = "commit_capture"
    ABANDON_AND_SELECT_NEXT = "abandon_and_select_next"
    ABANDON_AND_SELECT_PREVIOUS = "abandon_and_select_previous"


@dataclass(frozen=True)
class Transition:
    action: Action
    next_mode: InputMode


COMMAND_TRANSITIONS: dict[str, Transition] = {
    "q": Transition(Action.QUIT, InputMode.COMMAND),
    ESC: Transition(Action.QUIT, InputMode.COMMAND),
    "i": Transition(Action.BEGIN_CAPTURE, InputMode.CAPTURE),
    DOWN: Transition(Action.SELECT_NEXT, InputMode.COMMAND),
    UP: Transition(Action.SELECT_PREVIOUS, InputMode.COMMAND),
}

CAPTURE_TRANSITIONS: dict[str, Transition] = {
    BACKSPACE: Transition(Action.CAPTURE_POP, InputMode.CAPTURE),
    ESC: Transition(Action.ABANDON_CAPTURE, InputMode.COMMAND),
    ENTER: Transition(Action.COMMIT_CAPTURE, InputMode.COMMAND),
}

CAPTURE_ARROW_TRANSITIONS: dict[CaptureArrowPolicy, dict[str, Transition]] = {
    CaptureArrowPolicy.ABANDON: {
        DOWN: Transition(Action.ABANDON_AND_SELECT_NEXT, InputMode.COMMAND),
        UP: Transition(Action.ABANDON_AND_SELECT_PREVIOUS, InputMode.COMMAND),
    },
    CaptureArrowPolicy.IGNORE: {},
}

CAPTURE_CHAR_TRANSITION = Transition(Action.CAPTURE_PUSH, InputMode.CAPTURE)


def transition_for(
    mode: InputMode,
    event: KeyEvent,
    policy: CaptureArrowPolicy = CaptureArrowPolicy.ABANDON,
) -> Transition:
    """Look up the transition for ``event`` in ``mode``.

    Non-press events and unmapped keys map to ``IGNORE`` without leaving the
    current mode.
    """
    ignored = Transition(Action.IGNORE, mode)
    if not event.is_press:
        return ignored
    if mode is InputMode.COMMAND:
        return COMMAND_TRANSITIONS.get(event.code, ignored)

    transition = CAPTURE_TRANSITIONS.get(event.code)
    if transition is not None:
        return transition
    transition = CAPTURE_ARROW_TRANSITIONS[policy].get(event.code)
    if transition is not None:
        return transition
    if event.is_char:
        return CAPTURE_CHAR_TRANSITION
    return ignored


@dataclass(frozen=True)
class KeyOutcome:
    """Facets of application state touched by one key event."""

    action: Action
    selection_changed: bool = False
    catalog_changed: bool = False
    quit: bool = False

    @property
    def dirty(self) -> bool:
        return self.action is not Action.IGNORE


def _quit(state: AppState, _event: KeyEvent) -> None:
    state.should_exit = True


def _select_next(state: AppState, _event: KeyEvent) -> None:
    state.cursor.select_next()


def _select_previous(state: AppState, _event: KeyEvent) -> None:
    state.cursor.select_previous()


def _capture_push(state: AppState, event: KeyEvent) -> None:
    state.capture.push(event.code)


def _capture_pop(state: AppState, _event: KeyEvent) -> None:
    state.capture.pop()


def _abandon_capture(state: AppState, _event: KeyEvent) -> None:
    state.capture.clear()


def _commit_capture(state: AppState, _event: KeyEvent) -> None:
    state.catalog.append(Item(name=state.capture.text, description="", status=DEFAULT_STATUS))
    state.capture.clear()


def _abandon_and_select_next(state: AppState, event: KeyEvent) -> None:
    _abandon_capture(state, event)
    _select_next(state, event)


def _abandon_and_select_previous(state: AppState, event: KeyEvent) -> None:
    _abandon_capture(state, event)
    _select_previous(state, event)


_ACTION_HANDLERS: dict[Action, Callable[[AppState, KeyEvent], None]] = {
    Action.QUIT: _quit,
    Action.SELECT_NEXT: _select_next,
    Action.SELECT_PREVIOUS: _select_previous,
    Action.CAPTURE_PUSH: _capture_push,
    Action.CAPTURE_POP: _capture_pop,
    Action.ABANDON_CAPTURE: _abandon_capture,
    Action.COMMIT_CAPTURE: _commit_capture,
    Action.ABANDON_AND_SELECT_NEXT: _abandon_and_select_next,
    Action.ABANDON_AND_SELECT_PREVIOUS: _abandon_and_select_previous,
}


def apply_key(state: AppState, event: KeyEvent) -> KeyOutcome:
    """Run one key event through the state machine, mutating ``state``."""
    transition = transition_for(state.mode, event, state.capture_arrows)
    if transition.action is Action.IGNORE:
        return KeyOutcome(Action.IGNORE)

    selected_before = state.cursor.selected
    catalog_len_before = len(state.catalog)
    handler = _ACTION_HANDLERS.get(transition.action)
    if handler is not None:
        handler(state, event)
    state.mode = transition.next_mode
    return KeyOutcome(
        action=transition.action,
        selection_changed=state.cursor.selected != selected_before,
        catalog_changed=len(state.catalog) != catalog_len_before,
        quit=state.should_exit,
    )
