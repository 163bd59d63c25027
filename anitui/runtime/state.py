"""Mutable application state owned by the runtime loop."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..capture import CaptureBuffer
from ..catalog import Catalog
from ..image.binding import ImageBinding
from ..input.modes import CaptureArrowPolicy, InputMode
from ..selection import SelectionCursor


@dataclass
class AppState:
    catalog: Catalog
    cursor: SelectionCursor
    capture: CaptureBuffer = field(default_factory=CaptureBuffer)
    mode: InputMode = InputMode.COMMAND
    capture_arrows: CaptureArrowPolicy = CaptureArrowPolicy.ABANDON
    image_binding: ImageBinding | None = None
    list_offset: int = 0
    dirty: bool = True
    should_exit: bool = False

    @classmethod
    def for_catalog(
        cls,
        catalog: Catalog,
        *,
        capture_arrows: CaptureArrowPolicy = CaptureArrowPolicy.ABANDON,
        image_binding: ImageBinding | None = None,
    ) -> AppState:
        """Build a fresh state with the cursor bound to ``catalog``."""
        return cls(
            catalog=catalog,
            cursor=SelectionCursor(catalog),
            capture_arrows=capture_arrows,
            image_binding=image_binding,
        )

    def sync_image(self) -> bool:
        """Re-derive the image binding from the current selection if it changed."""
        if self.image_binding is None:
            return False
        return self.image_binding.sync(self.cursor.selected, self.cursor.selected_item())
