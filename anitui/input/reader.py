"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into ``KeyEvent`` values.
Handles ESC-sequence timing, UTF-8 text, and the kitty progressive keyboard
protocol, which is the only source of repeat/release event kinds.
"""

from __future__ import annotations

import os
import select
from collections.abc import Iterator

from .events import (
    BACKSPACE,
    DOWN,
    ENTER,
    ESC,
    LEFT,
    RIGHT,
    TAB,
    UNKNOWN,
    UP,
    KeyEvent,
    KeyEventKind,
)

ESC_SEQUENCE_TIMEOUT_MS = 25
MAX_CSI_PARAM_BYTES = 32

_ARROW_FINALS: dict[bytes, str] = {b"A": UP, b"B": DOWN, b"C": RIGHT, b"D": LEFT}
_KITTY_FUNCTIONAL_CODES: dict[int, str] = {
    9: TAB,
    13: ENTER,
    27: ESC,
    127: BACKSPACE,
}

# kitty modifier bits: shift=1, alt=2, ctrl=4, super=8.
MOD_ALT = 2
MOD_CTRL = 4
MOD_SUPER = 8
TEXT_BLOCKING_MODIFIERS = MOD_ALT | MOD_CTRL | MOD_SUPER


def _utf8_sequence_length(lead: int) -> int:
    if lead & 0b1000_0000 == 0:
        return 1
    if lead & 0b1110_0000 == 0b1100_0000:
        return 2
    if lead & 0b1111_0000 == 0b1110_0000:
        return 3
    if lead & 0b1111_1000 == 0b1111_0000:
        return 4
    return 1


def _event_kind(raw: str) -> KeyEventKind:
    try:
        return KeyEventKind(int(raw))
    except ValueError:
        return KeyEventKind.PRESS


def _modifier_event_kind(field: str) -> KeyEventKind:
    """Parse the event part of the ``mods[:event]`` field of a kitty keyboard sequence."""
    parts = field.split(":")
    if len(parts) < 2 or not parts[1]:
        return KeyEventKind.PRESS
    return _event_kind(parts[1])


def _modifier_bits(field: str) -> int:
    """Return the modifier bitmask encoded as ``1 + bits`` in ``mods[:event]``."""
    try:
        return max(0, int(field.split(":")[0]) - 1)
    except ValueError:
        return 0


def decode_csi(params: str, final: bytes) -> KeyEvent:
    """Translate one CSI sequence (without the ``ESC [`` prefix) into an event."""
    fields = params.split(";") if params else []
    kind = _modifier_event_kind(fields[1]) if len(fields) >= 2 else KeyEventKind.PRESS
    modifiers = _modifier_bits(fields[1]) if len(fields) >= 2 else 0

    if final in _ARROW_FINALS:
        return KeyEvent(_ARROW_FINALS[final], kind)

    if final == b"u" and fields:
        code_field = fields[0].split(":")[0]
        try:
            codepoint = int(code_field)
        except ValueError:
            return KeyEvent(UNKNOWN, kind)
        named = _KITTY_FUNCTIONAL_CODES.get(codepoint)
        if named is not None:
            return KeyEvent(named, kind)
        try:
            ch = chr(codepoint)
        except (ValueError, OverflowError):
            return KeyEvent(UNKNOWN, kind)
        # Ctrl, alt or super chords never produce text; shift alone does.
        if modifiers & TEXT_BLOCKING_MODIFIERS:
            return KeyEvent(UNKNOWN, kind)
        if ch.isprintable():
            return KeyEvent(ch, kind)
        return KeyEvent(UNKNOWN, kind)

    return KeyEvent(UNKNOWN, kind)


class EventReader:
    """Blocking key-event source bound to one input file descriptor."""

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._pending: list[bytes] = []
        self._skip_next_lf = False
        self.closed = False

    def _read_ready_byte(self, timeout_ms: int) -> bytes | None:
        if self._pending:
            return self._pending.pop(0)
        ready, _, _ = select.select([self.fd], [], [], max(0.0, timeout_ms / 1000.0))
        if not ready:
            return None
        ch = os.read(self.fd, 1)
        if not ch:
            return None
        return ch

    def _read_first_byte(self, timeout_ms: int | None) -> bytes | None:
        if self._pending:
            return self._pending.pop(0)
        if timeout_ms is not None:
            ready, _, _ = select.select([self.fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return None
        ch = os.read(self.fd, 1)
        if not ch:
            self.closed = True
            return None
        return ch

    def read_event(self, timeout_ms: int | None = None) -> KeyEvent | None:
        """Return the next event, or ``None`` on timeout/EOF.

        A CR immediately followed by LF is reported as a single ``ENTER``.
        """
        while True:
            ch = self._read_first_byte(timeout_ms)
            if ch is None:
                return None
            if ch == b"\n" and self._skip_next_lf:
                self._skip_next_lf = False
                continue
            self._skip_next_lf = ch == b"\r"
            return self._decode(ch)

    def _decode(self, ch: bytes) -> KeyEvent:
        if ch in {b"\r", b"\n"}:
            return KeyEvent(ENTER)
        if ch in {b"\x08", b"\x7f"}:
            return KeyEvent(BACKSPACE)
        if ch == b"\t":
            return KeyEvent(TAB)
        if ch == b"\x1b":
            return self._decode_escape()

        lead = ch[0]
        if lead < 0x20:
            return KeyEvent(UNKNOWN)
        needed = _utf8_sequence_length(lead) - 1
        raw = ch
        for _ in range(needed):
            cont = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT_MS)
            if cont is None:
                break
            raw += cont
        text = raw.decode("utf-8", errors="replace")
        if len(text) != 1 or not text.isprintable():
            return KeyEvent(UNKNOWN)
        return KeyEvent(text)

    def _decode_escape(self) -> KeyEvent:
        seq = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT_MS)
        if seq is None:
            return KeyEvent(ESC)
        if seq == b"O":
            final = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT_MS)
            if final is None:
                return KeyEvent(ESC)
            return KeyEvent(_ARROW_FINALS.get(final, UNKNOWN))
        if seq != b"[":
            # Lone ESC followed by an ordinary key: keep that key for the next read.
            self._pending.append(seq)
            return KeyEvent(ESC)

        params: list[bytes] = []
        while True:
            part = self._read_ready_byte(ESC_SEQUENCE_TIMEOUT_MS)
            if part is None:
                return KeyEvent(ESC)
            if 0x40 <= part[0] <= 0x7E:
                final = part
                break
            params.append(part)
            if len(params) > MAX_CSI_PARAM_BYTES:
                return KeyEvent(UNKNOWN)
        return decode_csi(b"".join(params).decode("ascii", errors="replace"), final)

    def __iter__(self) -> Iterator[KeyEvent]:
        return iter_events(self)


def iter_events(reader: EventReader) -> Iterator[KeyEvent]:
    """Lazily yield events until the input stream closes."""
    while True:
        event = reader.read_event()
        if event is None:
            return
        yield event
