"""Derived image state for the currently selected catalog item.

The binding holds at most one drawable. It is replaced, never mutated, and
only when the selection it was derived from actually changes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .protocol import Drawable, ImageProtocol

if TYPE_CHECKING:
    from ..catalog import Item

logger = logging.getLogger(__name__)

_UNSYNCED = object()


class ImageBinding:
    """Selection-derived drawable with bind-call bookkeeping."""

    def __init__(self, protocol: ImageProtocol) -> None:
        self.protocol = protocol
        self.drawable: Drawable | None = None
        self.generation = 0
        self.bind_count = 0
        self._synced_selection: object = _UNSYNCED

    @property
    def synced(self) -> bool:
        return self._synced_selection is not _UNSYNCED

    def sync(self, selected: int | None, item: Item | None) -> bool:
        """Re-derive the drawable if ``selected`` differs from the last sync.

        The first call always derives. Returns whether a re-derivation happened.
        """
        if self.synced and selected == self._synced_selection:
            return False
        self._synced_selection = selected
        self._replace(item)
        return True

    def _replace(self, item: Item | None) -> None:
        self.drawable = None
        self.generation += 1
        if item is None or item.image is None:
            return
        self.drawable = self.protocol.bind(item.image)
        self.bind_count += 1
        logger.debug("Bound %s image for %r (bind #%d)", self.protocol.name, item.name, self.bind_count)
