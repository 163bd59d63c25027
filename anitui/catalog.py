"""Catalog model: items, their status, and the built-in seed set.

The catalog is an in-memory, append-only sequence. Insertion order is display
order, so an index handed out once keeps pointing at the same item.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .image.posters import make_poster

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Status:
    """Watch status label.

    Statuses form an open set: the seed may introduce values beyond the
    built-in ones simply by constructing a new ``Status``.
    """

    label: str

    def __str__(self) -> str:
        return self.label


ONGOING = Status("Ongoing")
COMPLETED = Status("Completed")
ON_HOLD = Status("OnHold")
DEFAULT_STATUS = ONGOING


@dataclass(frozen=True, eq=False)
class Item:
    name: str
    description: str = ""
    status: Status = DEFAULT_STATUS
    image: Image.Image | None = None

    def label(self) -> str:
        """Return the list-row text for this item."""
        return f"{self.name} - {self.status}"

    def details(self) -> str:
        """Return the multi-line details-pane text for this item."""
        return f"Title: {self.name}\nDescription: {self.description}\nStatus: {self.status}"


class Catalog:
    """Ordered, index-addressable item sequence that only ever grows."""

    def __init__(self, items: list[Item] | None = None) -> None:
        self._items: list[Item] = list(items or [])

    def append(self, item: Item) -> int:
        """Append ``item`` and return its index."""
        self._items.append(item)
        return len(self._items) - 1

    def is_empty(self) -> bool:
        return not self._items

    def labels(self) -> list[str]:
        return [item.label() for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)


@dataclass(frozen=True)
class SeedEntry:
    name: str
    description: str
    status: Status
    poster_file: str
    poster_color: tuple[int, int, int]


SEED_ENTRIES: tuple[SeedEntry, ...] = (
    SeedEntry(
        name="Attack on Titan",
        description="Humans fighting titans to survive",
        status=COMPLETED,
        poster_file="47347.jpg",
        poster_color=(120, 38, 32),
    ),
    SeedEntry(
        name="One Piece",
        description="Pirate adventures to find the ultimate treasure",
        status=ONGOING,
        poster_file="111305.jpg",
        poster_color=(24, 84, 150),
    ),
    SeedEntry(
        name="Naruto",
        description="Ninja striving to become Hokage",
        status=COMPLETED,
        poster_file="138851.jpg",
        poster_color=(214, 112, 20),
    ),
)


def load_poster(path: Path) -> Image.Image | None:
    """Decode a poster file, returning ``None`` when it is missing or unreadable."""
    if not path.is_file():
        return None
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except (OSError, UnidentifiedImageError):
        logger.warning("Could not decode poster %s", path, exc_info=True)
        return None


def seed_catalog(poster_dir: Path | None = None) -> Catalog:
    """Build the fixed built-in catalog.

    Posters come from ``poster_dir`` when a matching file decodes, otherwise a
    placeholder is generated so every seed item carries an image.
    """
    catalog = Catalog()
    for entry in SEED_ENTRIES:
        image = load_poster(poster_dir / entry.poster_file) if poster_dir is not None else None
        if image is None:
            image = make_poster(entry.name, entry.poster_color)
        catalog.append(
            Item(
                name=entry.name,
                description=entry.description,
                status=entry.status,
                image=image,
            )
        )
    logger.debug("Seeded catalog with %d items", len(catalog))
    return catalog
