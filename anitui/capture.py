"""Text accumulator used while the user types a new catalog entry."""

from __future__ import annotations


class CaptureBuffer:
    """Append/erase character buffer; inert outside capture mode."""

    def __init__(self) -> None:
        self._chars: list[str] = []

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def push(self, ch: str) -> None:
        self._chars.append(ch)

    def pop(self) -> None:
        if self._chars:
            self._chars.pop()

    def clear(self) -> None:
        self._chars.clear()

    def __len__(self) -> int:
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)
