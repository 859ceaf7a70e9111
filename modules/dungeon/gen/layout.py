"""Rectangle geometry for the linear room/corridor chain."""
from __future__ import annotations

from modules.dungeon.gen.params import SizeRange
from modules.dungeon.gen.random import SeededRandom
from modules.dungeon.geometry import Coord, Rect, Size
from modules.dungeon.grid import TileGrid
from modules.dungeon.tiles import TileKind


def room_at(anchor_bottom_mid: Coord, size: Size) -> Rect:
    """Return a rect whose bottom-middle cell is ``anchor_bottom_mid``, growing towards +Y."""

    width, height = size
    ax, ay = anchor_bottom_mid
    return Rect(ax - width // 2, ay, width, height)


def corridor_at(anchor_bottom_mid: Coord, size: Size) -> Rect:
    """Same mechanics as :func:`room_at`; corridors are simply narrow and long."""

    return room_at(anchor_bottom_mid, size)


def chain_next(
    previous: Rect,
    next_size: Size,
    vertical_step: int,
    jitter_x: int,
) -> tuple[Coord, Rect]:
    """Place the stage following ``previous`` and return ``(anchor, rect)``.

    The anchor sits ``vertical_step`` cells below the previous bottom-middle
    cell, shifted left by ``jitter_x``. Provided ``vertical_step`` is at least
    the new rect's height, the two rects never share a row.
    """

    bx, by = previous.bottom_mid
    anchor = (bx - jitter_x, by - vertical_step)
    return anchor, room_at(anchor, next_size)


def sample_size(rng: SeededRandom, size_range: SizeRange) -> Size:
    (min_w, min_h), (max_w, max_h) = size_range.minimum, size_range.maximum
    return rng.next_int(min_w, max_w), rng.next_int(min_h, max_h)


def draw_hollow(
    grid: TileGrid,
    rect: Rect,
    wall_kind: TileKind = TileKind.WALL,
    floor_kind: TileKind = TileKind.FLOOR,
) -> None:
    """Write ``wall_kind`` on the border ring of ``rect`` and ``floor_kind`` inside."""

    for y in range(rect.y, rect.y2 + 1):
        for x in range(rect.x, rect.x2 + 1):
            border = x in (rect.x, rect.x2) or y in (rect.y, rect.y2)
            grid.set((x, y), wall_kind if border else floor_kind)


__all__ = [
    "Rect",
    "chain_next",
    "corridor_at",
    "draw_hollow",
    "room_at",
    "sample_size",
]
