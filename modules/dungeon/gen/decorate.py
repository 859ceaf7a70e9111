"""Role-specific decoration recipes applied to outlined rects."""
from __future__ import annotations

from typing import Callable, Mapping, Optional

from modules.dungeon.gen.params import GenerationConfig
from modules.dungeon.gen.random import SeededRandom
from modules.dungeon.gen.scatter import (
    INTERIOR_MARGIN,
    WALL_MARGIN,
    place_inside,
    scatter_along_walls,
    scatter_inside,
)
from modules.dungeon.gen.shapes import draw_arc_bottom, draw_cross, draw_ellipse_sigil
from modules.dungeon.geometry import Coord, Rect
from modules.dungeon.grid import TileGrid
from modules.dungeon.tiles import RoomRole, TileKind

Decorator = Callable[..., None]

_MIN_CORRIDOR_TORCHES = 2


def _require_viable(rect: Rect) -> None:
    minimum = GenerationConfig.MIN_RECT_SIZE
    if rect.width < minimum or rect.height < minimum:
        raise ValueError(f"rect {rect} is smaller than {minimum}x{minimum}")


def _put(grid: TileGrid, rect: Rect, pos: Coord, kind: TileKind) -> None:
    place_inside(grid, rect, pos, kind, INTERIOR_MARGIN)


def _put_on_wall(grid: TileGrid, rect: Rect, pos: Coord, kind: TileKind) -> None:
    place_inside(grid, rect, pos, kind, WALL_MARGIN)


def decorate_entrance(grid: TileGrid, rect: Rect, config: GenerationConfig, rng: SeededRandom) -> None:
    _require_viable(rect)
    scatter_inside(grid, rng, rect, TileKind.DECAL, config.decal_chance * 0.5, 0, 4)

    grid.set(rect.bottom_mid, TileKind.GATE)

    torch_y = rect.y + rect.height // 3
    _put(grid, rect, (rect.x + 2, torch_y), TileKind.TORCH)
    _put(grid, rect, (rect.x2 - 2, torch_y), TileKind.TORCH)

    _put(grid, rect, rect.center, TileKind.RUNE)


def decorate_corridor(
    grid: TileGrid,
    rect: Rect,
    config: GenerationConfig,
    rng: SeededRandom,
    *,
    torch_chance: Optional[float] = None,
) -> None:
    """Line the corridor with sparse torches, falling back to a fixed pair."""

    _require_viable(rect)
    if torch_chance is None:
        torch_chance = config.torch_corridor_chance

    placed = 0
    for y in range(rect.y + INTERIOR_MARGIN, rect.y2 - INTERIOR_MARGIN + 1):
        if rng.chance(torch_chance):
            x = rect.x + WALL_MARGIN if rng.chance(0.5) else rect.x2 - WALL_MARGIN
            grid.set((x, y), TileKind.TORCH)
            placed += 1

    if placed < _MIN_CORRIDOR_TORCHES:
        cx, cy = rect.center
        _put_on_wall(grid, rect, (rect.x + WALL_MARGIN, cy), TileKind.TORCH)
        _put_on_wall(grid, rect, (rect.x2 - WALL_MARGIN, cy + 2), TileKind.TORCH)


def decorate_combat(grid: TileGrid, rect: Rect, config: GenerationConfig, rng: SeededRandom) -> None:
    _require_viable(rect)
    scatter_inside(
        grid, rng, rect, TileKind.DECAL, config.decal_chance, config.decals.minimum, config.decals.maximum
    )
    draw_cross(grid, rect, TileKind.RUNE, step=4)
    _put(grid, rect, (rect.x + 2, rect.y2 - 2), TileKind.STATUE)
    _put(grid, rect, (rect.x2 - 2, rect.y2 - 2), TileKind.STATUE)

    # Last interior pass: statues are kept and nothing later writes over a rune.
    scatter_inside(
        grid,
        rng,
        rect,
        TileKind.RUNE,
        config.rune_chance,
        config.runes.minimum,
        config.runes.maximum,
        keep=(TileKind.STATUE,),
    )

    scatter_along_walls(
        grid,
        rng,
        rect,
        TileKind.TORCH,
        config.torch_wall_chance,
        config.torches.minimum,
        config.torches.maximum,
    )


def decorate_chest(grid: TileGrid, rect: Rect, config: GenerationConfig, rng: SeededRandom) -> None:
    _require_viable(rect)
    scatter_inside(grid, rng, rect, TileKind.RUNE, config.rune_chance * 0.5, 1, 6)
    scatter_inside(grid, rng, rect, TileKind.DECAL, config.decal_chance * 0.8, 1, 6)

    cx, cy = rect.center
    _put(grid, rect, (cx, cy), TileKind.CHEST)
    _put(grid, rect, (cx + 1, cy), TileKind.RUNE)
    _put(grid, rect, (cx - 1, cy), TileKind.RUNE)

    _put(grid, rect, (cx - 3, cy), TileKind.STATUE)
    _put(grid, rect, (cx + 3, cy), TileKind.STATUE)

    _put_on_wall(grid, rect, (rect.x + WALL_MARGIN, cy), TileKind.TORCH)
    _put_on_wall(grid, rect, (rect.x2 - WALL_MARGIN, cy), TileKind.TORCH)

    if rng.chance(config.extra_statue_chance):
        _put(grid, rect, (cx, rect.y2 - 2), TileKind.STATUE)


def decorate_boss(grid: TileGrid, rect: Rect, config: GenerationConfig, rng: SeededRandom) -> None:
    _require_viable(rect)
    scatter_inside(grid, rng, rect, TileKind.RUNE, config.rune_chance * 0.6, 2, 10)
    scatter_inside(grid, rng, rect, TileKind.DECAL, config.decal_chance * 1.2, 2, 12)

    draw_ellipse_sigil(
        grid,
        rect,
        radius_x=max(6, rect.width // 4),
        radius_y=max(4, rect.height // 4),
        sigil_kind=TileKind.BOSS_SIGIL,
    )

    for corner in (
        (rect.x + 2, rect.y + 2),
        (rect.x2 - 2, rect.y + 2),
        (rect.x + 2, rect.y2 - 2),
        (rect.x2 - 2, rect.y2 - 2),
    ):
        _put(grid, rect, corner, TileKind.TORCH)

    cx, _ = rect.center
    _put(grid, rect, (cx - 5, rect.y2 - 2), TileKind.STATUE)
    _put(grid, rect, (cx + 5, rect.y2 - 2), TileKind.STATUE)


def decorate_exit(grid: TileGrid, rect: Rect, config: GenerationConfig, rng: SeededRandom) -> None:
    _require_viable(rect)
    scatter_inside(grid, rng, rect, TileKind.DECAL, config.decal_chance * 0.7, 1, 6)

    grid.set(rect.top_mid, TileKind.GATE)
    draw_arc_bottom(grid, rect, TileKind.RUNE, spacing=3)

    cx, _ = rect.center
    _put_on_wall(grid, rect, (cx - 4, rect.y + 1), TileKind.TORCH)
    _put_on_wall(grid, rect, (cx + 4, rect.y + 1), TileKind.TORCH)


DECORATORS: Mapping[RoomRole, Decorator] = {
    RoomRole.ENTRANCE: decorate_entrance,
    RoomRole.CORRIDOR: decorate_corridor,
    RoomRole.COMBAT: decorate_combat,
    RoomRole.CHEST: decorate_chest,
    RoomRole.BOSS: decorate_boss,
    RoomRole.EXIT: decorate_exit,
}


def decorate(
    role: RoomRole,
    grid: TileGrid,
    rect: Rect,
    config: GenerationConfig,
    rng: SeededRandom,
    **options: object,
) -> None:
    """Apply the recipe registered for ``role`` to ``rect``."""

    try:
        recipe = DECORATORS[role]
    except KeyError as exc:  # pragma: no cover - every role is registered
        raise ValueError(f"no decorator registered for role '{role}'") from exc
    recipe(grid, rect, config, rng, **options)


__all__ = [
    "DECORATORS",
    "decorate",
    "decorate_boss",
    "decorate_chest",
    "decorate_combat",
    "decorate_corridor",
    "decorate_entrance",
    "decorate_exit",
]
