"""Axis-aligned rectangle used for rooms and corridors."""
from __future__ import annotations

from dataclasses import dataclass

Coord = tuple[int, int]
Size = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle anchored at its minimum corner."""

    x: int
    y: int
    width: int
    height: int

    @property
    def x2(self) -> int:
        return self.x + self.width - 1

    @property
    def y2(self) -> int:
        return self.y + self.height - 1

    @property
    def min(self) -> Coord:
        return self.x, self.y

    @property
    def max(self) -> Coord:
        return self.x2, self.y2

    @property
    def size(self) -> Size:
        return self.width, self.height

    @property
    def center(self) -> Coord:
        return self.x + self.width // 2, self.y + self.height // 2

    @property
    def bottom_mid(self) -> Coord:
        return self.x + self.width // 2, self.y

    @property
    def top_mid(self) -> Coord:
        return self.x + self.width // 2, self.y2

    def contains(self, pos: Coord) -> bool:
        x, y = pos
        return self.x <= x <= self.x2 and self.y <= y <= self.y2

    def inset(self, pos: Coord) -> int:
        """Return the distance of ``pos`` to the nearest border cell (0 on the ring)."""

        x, y = pos
        return min(x - self.x, self.x2 - x, y - self.y, self.y2 - y)

    def is_border(self, pos: Coord) -> bool:
        return self.contains(pos) and self.inset(pos) == 0


__all__ = ["Coord", "Rect", "Size"]
