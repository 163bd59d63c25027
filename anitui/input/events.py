"""Key event value types shared by the reader and the mode state machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ESC = "ESC"
ENTER = "ENTER"
BACKSPACE = "BACKSPACE"
TAB = "TAB"
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
UNKNOWN = "UNKNOWN"

NAMED_KEYS: frozenset[str] = frozenset({ESC, ENTER, BACKSPACE, TAB, UP, DOWN, LEFT, RIGHT, UNKNOWN})


class KeyEventKind(Enum):
    """Event type; values match the kitty keyboard protocol event codes."""

    PRESS = 1
    REPEAT = 2
    RELEASE = 3


@dataclass(frozen=True)
class KeyEvent:
    """One decoded key event.

    ``code`` is either a single printable character or one of the named key
    tokens defined in this module.
    """

    code: str
    kind: KeyEventKind = KeyEventKind.PRESS

    @property
    def is_press(self) -> bool:
        return self.kind is KeyEventKind.PRESS

    @property
    def is_char(self) -> bool:
        return self.code not in NAMED_KEYS and len(self.code) == 1 and self.code.isprintable()


def press(code: str) -> KeyEvent:
    return KeyEvent(code, KeyEventKind.PRESS)
