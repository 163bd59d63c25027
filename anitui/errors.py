"""Exception types raised at the process boundary.

Core state operations never raise; only terminal setup can fail.
"""

from __future__ import annotations


class AnituiError(Exception):
    """Base class for anitui failures surfaced to the CLI."""


class TerminalSetupError(AnituiError):
    """Raised when the controlling terminal cannot be put into TUI mode."""
