from __future__ import annotations

import pytest

from modules.dungeon.gen.decorate import (
    DECORATORS,
    decorate,
    decorate_boss,
    decorate_chest,
    decorate_combat,
    decorate_corridor,
    decorate_entrance,
    decorate_exit,
)
from modules.dungeon.gen.layout import Rect, draw_hollow
from modules.dungeon.gen.params import GenerationConfig
from modules.dungeon.gen.random import SeededRandom
from modules.dungeon.grid import TileGrid
from modules.dungeon.tiles import RoomRole, TileKind

# No probabilistic decoration: only the fixed placements and clamp minimums remain.
QUIET = GenerationConfig(
    torch_wall_chance=0.0,
    torch_corridor_chance=0.0,
    rune_chance=0.0,
    decal_chance=0.0,
    extra_statue_chance=0.0,
    torches=(0, 8),
    runes=(0, 12),
    decals=(0, 10),
)


def _outlined(rect: Rect) -> TileGrid:
    grid = TileGrid()
    draw_hollow(grid, rect)
    return grid


def test_every_role_has_a_recipe() -> None:
    assert set(DECORATORS) == set(RoomRole)


def test_entrance_places_gate_torches_and_rune() -> None:
    rect = Rect(-9, 0, 18, 12)
    grid = _outlined(rect)

    decorate_entrance(grid, rect, QUIET, SeededRandom(1))

    assert grid.positions(TileKind.GATE) == [(0, 0)]
    assert grid.positions(TileKind.TORCH) == [(-7, 4), (6, 4)]
    assert grid.positions(TileKind.RUNE) == [(0, 6)]
    assert grid.count(TileKind.DECAL) == 0


def test_corridor_falls_back_to_two_fixed_torches() -> None:
    rect = Rect(0, 0, 8, 10)
    grid = _outlined(rect)

    decorate_corridor(grid, rect, QUIET, SeededRandom(1), torch_chance=0.0)

    assert grid.positions(TileKind.TORCH) == [(1, 5), (6, 7)]


def test_corridor_with_certain_chance_lights_every_interior_row() -> None:
    rect = Rect(0, 0, 8, 10)
    grid = _outlined(rect)

    decorate_corridor(grid, rect, QUIET, SeededRandom(5), torch_chance=1.0)

    torches = grid.positions(TileKind.TORCH)
    assert len(torches) == 6
    assert sorted(y for _, y in torches) == list(range(2, 8))
    assert all(x in (1, 6) for x, _ in torches)


def test_corridor_uses_config_chance_by_default() -> None:
    rect = Rect(0, 0, 8, 14)
    busy = GenerationConfig(torch_corridor_chance=1.0)
    grid = _outlined(rect)

    decorate_corridor(grid, rect, busy, SeededRandom(5))

    assert grid.count(TileKind.TORCH) == 10


def test_combat_places_statues_cross_and_minimums() -> None:
    rect = Rect(0, 0, 18, 12)
    config = GenerationConfig(
        torch_wall_chance=0.0,
        rune_chance=0.0,
        decal_chance=0.0,
        torches=(3, 8),
        runes=(0, 12),
        decals=(0, 10),
    )
    grid = _outlined(rect)

    decorate_combat(grid, rect, config, SeededRandom(3))

    assert grid.positions(TileKind.STATUE) == [(2, 9), (15, 9)]
    assert set(grid.positions(TileKind.RUNE)) == {(2, 6), (6, 6), (10, 6), (14, 6), (9, 2), (9, 6)}
    torches = grid.positions(TileKind.TORCH)
    assert len(torches) == 3
    assert all(x in (1, 16) for x, _ in torches)


def test_chest_room_layout() -> None:
    rect = Rect(0, 0, 18, 12)
    config = GenerationConfig(
        rune_chance=0.0, decal_chance=0.0, extra_statue_chance=1.0
    )
    grid = _outlined(rect)

    decorate_chest(grid, rect, config, SeededRandom(2))

    assert grid.positions(TileKind.CHEST) == [(9, 6)]
    assert grid.get((8, 6)) is TileKind.RUNE
    assert grid.get((10, 6)) is TileKind.RUNE
    assert grid.positions(TileKind.STATUE) == [(6, 6), (9, 9), (12, 6)]
    assert grid.positions(TileKind.TORCH) == [(1, 6), (16, 6)]


def test_chest_extra_statue_is_optional() -> None:
    rect = Rect(0, 0, 18, 12)
    grid = _outlined(rect)

    decorate_chest(grid, rect, QUIET, SeededRandom(2))

    assert grid.positions(TileKind.STATUE) == [(6, 6), (12, 6)]


def test_boss_room_has_sigil_corner_torches_and_statues() -> None:
    rect = Rect(-14, 0, 28, 20)
    grid = _outlined(rect)

    decorate_boss(grid, rect, QUIET, SeededRandom(4))

    cx, cy = rect.center
    assert grid.get((cx, cy)) is TileKind.BOSS_SIGIL
    assert grid.count(TileKind.BOSS_SIGIL) > 9
    assert set(grid.positions(TileKind.TORCH)) == {(-12, 2), (11, 2), (-12, 17), (11, 17)}
    assert set(grid.positions(TileKind.STATUE)) == {(cx - 5, 17), (cx + 5, 17)}


def test_exit_places_gate_arc_and_torches() -> None:
    rect = Rect(0, 0, 18, 12)
    grid = _outlined(rect)

    decorate_exit(grid, rect, QUIET, SeededRandom(6))

    assert grid.positions(TileKind.GATE) == [rect.top_mid]
    assert grid.positions(TileKind.TORCH) == [(5, 1), (13, 1)]
    runes = grid.positions(TileKind.RUNE)
    assert [x for x, _ in runes] == [3, 6, 9, 12, 15]


@pytest.mark.parametrize("role", list(RoomRole))
def test_recipes_reject_rects_below_minimum_size(role: RoomRole) -> None:
    with pytest.raises(ValueError):
        decorate(role, TileGrid(), Rect(0, 0, 5, 10), GenerationConfig(), SeededRandom(1))


def test_dispatch_matches_direct_call(config: GenerationConfig) -> None:
    rect = Rect(0, 0, 20, 14)
    direct, dispatched = _outlined(rect), _outlined(rect)

    decorate_combat(direct, rect, config, SeededRandom(12))
    decorate(RoomRole.COMBAT, dispatched, rect, config, SeededRandom(12))

    assert direct.snapshot() == dispatched.snapshot()


def test_combat_rune_minimum_survives_statues_in_shortest_room() -> None:
    # In a 6-high room the statue row is the cross row.
    rect = Rect(0, 0, 10, 6)
    config = GenerationConfig(
        torch_wall_chance=0.0,
        rune_chance=0.0,
        decal_chance=0.0,
        torches=(4, 8),
        runes=(10, 12),
        decals=(0, 10),
    )
    grid = _outlined(rect)

    decorate_combat(grid, rect, config, SeededRandom(7))

    assert grid.positions(TileKind.STATUE) == [(2, 3), (7, 3)]
    assert grid.count(TileKind.RUNE) == 10
    assert grid.count(TileKind.TORCH) == 4
