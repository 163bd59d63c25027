"""Rectangle splitting for the screen regions.

Constraints mirror what the view needs and nothing more: fixed lengths,
percentages of the split axis, and a minimum that absorbs leftover space.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Cell rectangle with a 0-based top-left origin."""

    x: int
    y: int
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    def inner(self, margin: int = 1) -> Rect:
        """Return the rectangle shrunk by ``margin`` cells on every side."""
        return Rect(
            self.x + margin,
            self.y + margin,
            max(0, self.width - 2 * margin),
            max(0, self.height - 2 * margin),
        )


@dataclass(frozen=True)
class Length:
    value: int


@dataclass(frozen=True)
class Min:
    value: int


@dataclass(frozen=True)
class Percentage:
    value: int


Constraint = Length | Min | Percentage


def solve_sizes(total: int, constraints: list[Constraint]) -> list[int]:
    """Resolve ``constraints`` into sizes that sum to at most ``total``.

    Leftover space goes to the first ``Min`` constraint, or to the last slot
    when there is none. Overflow is trimmed from the end.
    """
    total = max(0, total)
    sizes: list[int] = []
    for constraint in constraints:
        if isinstance(constraint, Percentage):
            sizes.append(total * max(0, constraint.value) // 100)
        else:
            sizes.append(max(0, constraint.value))
    if not sizes:
        return sizes

    remaining = total - sum(sizes)
    if remaining > 0:
        min_slots = [idx for idx, constraint in enumerate(constraints) if isinstance(constraint, Min)]
        target = min_slots[0] if min_slots else len(sizes) - 1
        sizes[target] += remaining

    out: list[int] = []
    used = 0
    for size in sizes:
        size = max(0, min(size, total - used))
        out.append(size)
        used += size
    return out


def split_vertical(area: Rect, constraints: list[Constraint]) -> list[Rect]:
    rects: list[Rect] = []
    y = area.y
    for height in solve_sizes(area.height, constraints):
        rects.append(Rect(area.x, y, area.width, height))
        y += height
    return rects


def split_horizontal(area: Rect, constraints: list[Constraint]) -> list[Rect]:
    rects: list[Rect] = []
    x = area.x
    for width in solve_sizes(area.width, constraints):
        rects.append(Rect(x, area.y, width, area.height))
        x += width
    return rects
