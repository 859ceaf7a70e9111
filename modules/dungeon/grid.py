"""Sparse tile canvas written to by the dungeon generator."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

import numpy as np

from modules.dungeon.geometry import Coord, Rect
from modules.dungeon.tiles import TileKind


@dataclass(slots=True)
class TileGrid:
    """Unbounded mapping from integer coordinates to :class:`TileKind`.

    Cells that were never written read as :attr:`TileKind.EMPTY`. Coordinates
    may be negative; storage grows with the number of written cells only.
    """

    _cells: Dict[Coord, TileKind] = field(default_factory=dict)

    def set(self, pos: Coord, kind: TileKind) -> None:
        x, y = pos
        if kind is TileKind.EMPTY:
            self._cells.pop((x, y), None)
            return
        self._cells[(x, y)] = kind

    def get(self, pos: Coord) -> TileKind:
        return self._cells.get((pos[0], pos[1]), TileKind.EMPTY)

    def clear(self) -> None:
        """Reset every previously written cell to :attr:`TileKind.EMPTY`."""

        self._cells.clear()

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, pos: object) -> bool:
        return pos in self._cells

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._cells)

    def items(self) -> Iterator[tuple[Coord, TileKind]]:
        return iter(self._cells.items())

    def snapshot(self) -> Dict[Coord, TileKind]:
        """Return a detached copy of the written cells."""

        return dict(self._cells)

    def positions(self, kind: TileKind, within: Optional[Rect] = None) -> list[Coord]:
        """Return the coordinates holding ``kind``, sorted, optionally limited to ``within``."""

        found = [
            pos
            for pos, value in self._cells.items()
            if value is kind and (within is None or within.contains(pos))
        ]
        return sorted(found)

    def count(self, kind: TileKind, within: Optional[Rect] = None) -> int:
        return len(self.positions(kind, within))

    def bounds(self) -> Optional[tuple[Coord, Coord]]:
        """Return ``(min_corner, max_corner)`` of written cells, ``None`` when empty."""

        if not self._cells:
            return None
        xs = [x for x, _ in self._cells]
        ys = [y for _, y in self._cells]
        return (min(xs), min(ys)), (max(xs), max(ys))

    def to_array(self) -> tuple[np.ndarray, Coord]:
        """Return a dense array of :attr:`TileKind.code` values and its origin.

        ``array[y - origin_y, x - origin_x]`` holds the code of cell ``(x, y)``.
        """

        extent = self.bounds()
        if extent is None:
            return np.zeros((0, 0), dtype=np.uint8), (0, 0)
        (min_x, min_y), (max_x, max_y) = extent
        array = np.full(
            (max_y - min_y + 1, max_x - min_x + 1), TileKind.EMPTY.code, dtype=np.uint8
        )
        for (x, y), kind in self._cells.items():
            array[y - min_y, x - min_x] = kind.code
        return array, (min_x, min_y)

    def render_ascii(self) -> str:
        """Render the grid with the highest Y row first."""

        extent = self.bounds()
        if extent is None:
            return ""
        (min_x, min_y), (max_x, max_y) = extent
        lines = []
        for y in range(max_y, min_y - 1, -1):
            row = "".join(self.get((x, y)).glyph for x in range(min_x, max_x + 1))
            lines.append(row.rstrip())
        return "\n".join(lines)


__all__ = ["Coord", "TileGrid"]
