"""Input-layer public API for key decoding and the mode state machine.

Exports are split between low-level terminal decoding (``EventReader``) and
the higher-level transition logic used by the runtime loop.
"""

from .events import KeyEvent, KeyEventKind, press
from .modes import (
    Action,
    CaptureArrowPolicy,
    InputMode,
    KeyOutcome,
    Transition,
    apply_key,
    transition_for,
)
from .reader import ESC_SEQUENCE_TIMEOUT_MS, EventReader, iter_events

__all__ = [
    "Action",
    "CaptureArrowPolicy",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "EventReader",
    "InputMode",
    "KeyEvent",
    "KeyEventKind",
    "KeyOutcome",
    "Transition",
    "apply_key",
    "iter_events",
    "press",
    "transition_for",
]
