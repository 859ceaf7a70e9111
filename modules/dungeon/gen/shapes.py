"""Parametric rasterizers for rune crosses, arcs and the boss sigil."""
from __future__ import annotations

import math
from typing import Optional

from modules.dungeon.gen.scatter import INTERIOR_MARGIN, place_inside
from modules.dungeon.geometry import Coord, Rect
from modules.dungeon.grid import TileGrid
from modules.dungeon.tiles import TileKind

#: Angular step of the sigil ring, in degrees.
SIGIL_STEP_DEGREES = 6
#: Arm length of the crosshair drawn at the sigil centre.
SIGIL_CROSSHAIR_ARM = 2
#: Rows climbed by the bottom arc from its left end to its right end.
ARC_RISE = 3


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _inverse_lerp(a: float, b: float, value: float) -> float:
    if a == b:
        return 0.0
    return min(1.0, max(0.0, (value - a) / (b - a)))


def draw_cross(grid: TileGrid, rect: Rect, kind: TileKind, step: int) -> None:
    """Place ``kind`` every ``step`` cells along the centre row and the centre column."""

    if step <= 0:
        raise ValueError("cross step must be positive")
    cx, cy = rect.center
    for x in range(rect.x + INTERIOR_MARGIN, rect.x2 - INTERIOR_MARGIN + 1, step):
        place_inside(grid, rect, (x, cy), kind, INTERIOR_MARGIN)
    for y in range(rect.y + INTERIOR_MARGIN, rect.y2 - INTERIOR_MARGIN + 1, step):
        place_inside(grid, rect, (cx, y), kind, INTERIOR_MARGIN)


def arc_bottom_points(rect: Rect, spacing: int) -> list[Coord]:
    """Return the cells of a shallow arc rising from the bottom-left of ``rect``."""

    if spacing <= 0:
        raise ValueError("arc spacing must be positive")
    cx, _ = rect.center
    half = rect.width // 2
    reach = half - 3
    base_y = rect.y + INTERIOR_MARGIN
    points: list[Coord] = []
    for dx in range(-reach, reach + 1, spacing):
        # round() is round-half-even (1.5 -> 2, 2.5 -> 2).
        rise = round(_lerp(0, ARC_RISE, _inverse_lerp(-half, half, dx)))
        points.append((cx + dx, base_y + rise))
    return points


def draw_arc_bottom(grid: TileGrid, rect: Rect, kind: TileKind, spacing: int) -> list[Coord]:
    points = arc_bottom_points(rect, spacing)
    for pos in points:
        place_inside(grid, rect, pos, kind, INTERIOR_MARGIN)
    return points


def ellipse_points(
    center: Coord, radius_x: int, radius_y: int, step_degrees: int = SIGIL_STEP_DEGREES
) -> list[Coord]:
    """Return one ring point per ``step_degrees`` from 0° up to (excluding) 360°."""

    if step_degrees <= 0:
        raise ValueError("step_degrees must be positive")
    cx, cy = center
    points: list[Coord] = []
    for degrees in range(0, 360, step_degrees):
        angle = math.radians(degrees)
        points.append(
            (cx + round(math.cos(angle) * radius_x), cy + round(math.sin(angle) * radius_y))
        )
    return points


def crosshair_points(center: Coord, arm: int = SIGIL_CROSSHAIR_ARM) -> list[Coord]:
    """Return the distinct cells of a "+" with ``arm`` cells on each side of ``center``."""

    cx, cy = center
    horizontal = [(cx + dx, cy) for dx in range(-arm, arm + 1)]
    vertical = [(cx, cy + dy) for dy in range(-arm, arm + 1) if dy != 0]
    return horizontal + vertical


def draw_ellipse_sigil(
    grid: TileGrid,
    rect: Rect,
    radius_x: int,
    radius_y: int,
    sigil_kind: Optional[TileKind] = None,
) -> list[Coord]:
    """Rasterize the boss sigil ring plus its centre crosshair; returns the ring points."""

    kind = sigil_kind or TileKind.RUNE
    ring = ellipse_points(rect.center, radius_x, radius_y)
    for pos in ring + crosshair_points(rect.center):
        place_inside(grid, rect, pos, kind, INTERIOR_MARGIN)
    return ring


__all__ = [
    "arc_bottom_points",
    "crosshair_points",
    "draw_arc_bottom",
    "draw_cross",
    "draw_ellipse_sigil",
    "ellipse_points",
]
