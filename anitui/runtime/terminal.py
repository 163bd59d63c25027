"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, and the kitty keyboard
enhancement that makes the terminal report press/repeat/release kinds.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty

from ..errors import TerminalSetupError

logger = logging.getLogger(__name__)

# Progressive enhancement flags: disambiguate escape codes (1) + report event types (2).
KITTY_KEYBOARD_FLAGS = 3


class TerminalController:
    """Manage terminal mode transitions and raw frame output."""

    def __init__(self, stdin_fd: int, stdout_fd: int, *, enhanced_keyboard: bool = True) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.enhanced_keyboard = enhanced_keyboard
        self._alt_screen_active = False
        self._keyboard_pushed = False
        if not os.isatty(stdin_fd):
            raise TerminalSetupError("stdin is not a terminal")
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalSetupError(f"cannot read terminal attributes: {exc}") from exc

    def write(self, text: str) -> None:
        if text:
            os.write(self.stdout_fd, text.encode("utf-8", errors="replace"))

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise TerminalSetupError(f"cannot enter raw mode: {exc}") from exc
        # Enter alternate screen and hide cursor.
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")
        self._alt_screen_active = True
        if self.enhanced_keyboard:
            os.write(self.stdout_fd, f"\x1b[>{KITTY_KEYBOARD_FLAGS}u".encode("ascii"))
            self._keyboard_pushed = True
        logger.debug("Entered TUI mode (enhanced_keyboard=%s)", self.enhanced_keyboard)

    def disable_tui_mode(self) -> None:
        """Restore normal terminal state, undoing only what was enabled."""
        if self._keyboard_pushed:
            os.write(self.stdout_fd, b"\x1b[<u")
            self._keyboard_pushed = False
        if self._alt_screen_active:
            # Show cursor and restore the main screen buffer.
            os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
            self._alt_screen_active = False
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        logger.debug("Left TUI mode")

    def supports_kitty_graphics(self) -> bool:
        """Return whether environment appears to support kitty graphics protocol."""
        term = os.environ.get("TERM", "")
        if term == "xterm-kitty":
            return True
        return bool(os.environ.get("KITTY_WINDOW_ID"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
