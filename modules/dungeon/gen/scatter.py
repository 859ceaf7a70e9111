"""Probabilistic placement of decoration tiles inside a rect."""
from __future__ import annotations

import logging
from typing import Callable, Collection, Iterable

from modules.dungeon.gen.random import SeededRandom
from modules.dungeon.geometry import Coord, Rect
from modules.dungeon.grid import TileGrid
from modules.dungeon.tiles import TileKind

logger = logging.getLogger(__name__)

#: Distance from the border ring kept free by interior scatter and shapes.
INTERIOR_MARGIN = 2
#: Distance from the border ring of wall-hugging placements.
WALL_MARGIN = 1
#: Relative chance used on the top/bottom rows by :func:`scatter_along_walls`.
HORIZONTAL_WALL_FACTOR = 0.7


def place_inside(grid: TileGrid, rect: Rect, pos: Coord, kind: TileKind, margin: int) -> bool:
    """Write ``kind`` at ``pos`` unless it lies closer than ``margin`` to the border."""

    if not rect.contains(pos) or rect.inset(pos) < margin:
        return False
    grid.set(pos, kind)
    return True


def random_point_inside(rng: SeededRandom, rect: Rect, margin: int = INTERIOR_MARGIN) -> Coord:
    x = rng.next_int(rect.x + margin, rect.x2 - margin)
    y = rng.next_int(rect.y + margin, rect.y2 - margin)
    return x, y


def _log_advisory_max(kind: TileKind, placed: int, max_clamp: int, rect: Rect) -> None:
    # The upper clamp is advisory; dense rolls are kept as-is.
    if placed > max_clamp:
        logger.debug(
            "%s count %d exceeds advisory maximum %d in rect %s", kind.value, placed, max_clamp, rect
        )


def _free_cells(
    grid: TileGrid, cells: Iterable[Coord], kind: TileKind, keep: Collection[TileKind]
) -> int:
    return sum(1 for pos in cells if grid.get(pos) is not kind and grid.get(pos) not in keep)


def _fill_to_minimum(
    grid: TileGrid,
    rect: Rect,
    kind: TileKind,
    placed: int,
    min_clamp: int,
    free: int,
    keep: Collection[TileKind],
    pick: Callable[[], Coord],
) -> int:
    """Place ``kind`` at ``pick()`` until ``min_clamp`` distinct cells were written.

    A pick that already holds ``kind`` (or a ``keep`` kind) is retried without
    counting. The minimum is capped at the number of free candidate cells.
    """

    if placed < min_clamp and min_clamp - placed > free:
        logger.debug(
            "%s minimum %d capped to %d free cells in rect %s",
            kind.value,
            min_clamp,
            placed + free,
            rect,
        )
    while placed < min_clamp and free > 0:
        pos = pick()
        current = grid.get(pos)
        if current is kind or current in keep:
            continue
        grid.set(pos, kind)
        placed += 1
        free -= 1
    return placed


def scatter_inside(
    grid: TileGrid,
    rng: SeededRandom,
    rect: Rect,
    kind: TileKind,
    chance: float,
    min_clamp: int,
    max_clamp: int,
    keep: Collection[TileKind] = (),
) -> int:
    """Scatter ``kind`` over the 2-cell inset of ``rect`` and return the placed count.

    Every inset cell is rolled independently (columns left to right, each
    column bottom to top) and overwritten on success, except cells holding one
    of the ``keep`` kinds. Random inset points are then added until
    ``min_clamp`` distinct cells hold ``kind``; ``max_clamp`` is never enforced.
    """

    cells = [
        (x, y)
        for x in range(rect.x + INTERIOR_MARGIN, rect.x2 - INTERIOR_MARGIN + 1)
        for y in range(rect.y + INTERIOR_MARGIN, rect.y2 - INTERIOR_MARGIN + 1)
    ]

    placed = 0
    for pos in cells:
        if rng.chance(chance) and grid.get(pos) not in keep:
            grid.set(pos, kind)
            placed += 1

    placed = _fill_to_minimum(
        grid,
        rect,
        kind,
        placed,
        min_clamp,
        _free_cells(grid, cells, kind, keep),
        keep,
        lambda: random_point_inside(rng, rect),
    )
    _log_advisory_max(kind, placed, max_clamp, rect)
    return placed


def scatter_along_walls(
    grid: TileGrid,
    rng: SeededRandom,
    rect: Rect,
    kind: TileKind,
    chance: float,
    min_clamp: int,
    max_clamp: int,
) -> int:
    """Scatter ``kind`` on the ring of cells adjacent to the walls of ``rect``.

    Side columns are rolled with ``chance`` per interior row; the bottom and
    top rows with ``chance * 0.7`` per interior column. Missing placements up
    to ``min_clamp`` go to random left/right wall-adjacent cells.
    """

    placed = 0
    left, right = rect.x + WALL_MARGIN, rect.x2 - WALL_MARGIN
    bottom, top = rect.y + WALL_MARGIN, rect.y2 - WALL_MARGIN
    rows = range(rect.y + INTERIOR_MARGIN, rect.y2 - INTERIOR_MARGIN + 1)

    for y in rows:
        if rng.chance(chance):
            grid.set((left, y), kind)
            placed += 1
        if rng.chance(chance):
            grid.set((right, y), kind)
            placed += 1

    row_chance = chance * HORIZONTAL_WALL_FACTOR
    for x in range(rect.x + INTERIOR_MARGIN, rect.x2 - INTERIOR_MARGIN + 1):
        if rng.chance(row_chance):
            grid.set((x, bottom), kind)
            placed += 1
        if rng.chance(row_chance):
            grid.set((x, top), kind)
            placed += 1

    def _pick_side_cell() -> Coord:
        x = left if rng.chance(0.5) else right
        return x, rng.next_int(rows.start, rows.stop - 1)

    side_cells = [(x, y) for x in (left, right) for y in rows]
    placed = _fill_to_minimum(
        grid,
        rect,
        kind,
        placed,
        min_clamp,
        _free_cells(grid, side_cells, kind, ()),
        (),
        _pick_side_cell,
    )
    _log_advisory_max(kind, placed, max_clamp, rect)
    return placed


__all__ = [
    "INTERIOR_MARGIN",
    "WALL_MARGIN",
    "place_inside",
    "random_point_inside",
    "scatter_along_walls",
    "scatter_inside",
]
