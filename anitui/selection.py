"""Circular selection cursor over a sized sequence.

The cursor starts unset. The first navigation in either direction lands on
index 0; after that movement wraps at both ends.
"""

from __future__ import annotations

from collections.abc import Sized
from typing import TypeVar

T = TypeVar("T")


class SelectionCursor:
    """Optional index into ``items`` with wrap-around next/previous moves."""

    def __init__(self, items: Sized) -> None:
        self._items = items
        self._selected: int | None = None

    @property
    def selected(self) -> int | None:
        return self._selected

    def select_next(self) -> None:
        count = len(self._items)
        if count == 0:
            return
        if self._selected is None or self._selected >= count - 1:
            self._selected = 0
        else:
            self._selected += 1

    def select_previous(self) -> None:
        count = len(self._items)
        if count == 0:
            return
        if self._selected is None:
            self._selected = 0
        elif self._selected == 0:
            self._selected = count - 1
        else:
            self._selected -= 1

    def selected_item(self, items: list[T] | None = None) -> T | None:
        """Return the selected element of ``items`` (default: the bound sequence)."""
        source = self._items if items is None else items
        if self._selected is None or self._selected >= len(source):
            return None
        return source[self._selected]  # type: ignore[index]
