"""Fixed stage sequence turning a seed and a config into a dungeon."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from modules.dungeon.errors import GenerationError
from modules.dungeon.gen.decorate import decorate
from modules.dungeon.gen.layout import chain_next, draw_hollow, room_at, sample_size
from modules.dungeon.gen.params import GenerationConfig
from modules.dungeon.gen.random import SeededRandom, get_rng
from modules.dungeon.geometry import Rect, Size
from modules.dungeon.grid import TileGrid
from modules.dungeon.spec import DungeonSpec, Stage
from modules.dungeon.tiles import RoomRole

logger = logging.getLogger(__name__)

OutlineHook = Callable[[RoomRole, Rect, TileGrid], None]


@dataclass(frozen=True, slots=True)
class _StagePlan:
    role: RoomRole
    boss_sized: bool = False
    jitter_height: bool = False
    corridor_index: Optional[int] = None


#: Entrance -> corridor -> combat -> corridor -> chest -> corridor -> boss -> corridor -> exit.
STAGE_PLAN: tuple[_StagePlan, ...] = (
    _StagePlan(RoomRole.ENTRANCE),
    _StagePlan(RoomRole.CORRIDOR, corridor_index=0),
    _StagePlan(RoomRole.COMBAT),
    _StagePlan(RoomRole.CORRIDOR, corridor_index=1),
    _StagePlan(RoomRole.CHEST),
    _StagePlan(RoomRole.CORRIDOR, jitter_height=True, corridor_index=2),
    _StagePlan(RoomRole.BOSS, boss_sized=True),
    _StagePlan(RoomRole.CORRIDOR, jitter_height=True, corridor_index=3),
    _StagePlan(RoomRole.EXIT),
)


def _stage_size(plan: _StagePlan, config: GenerationConfig, rng: SeededRandom) -> Size:
    if plan.role is RoomRole.CORRIDOR:
        width, height = sample_size(rng, config.corridor_size)
        if plan.jitter_height:
            jitter = config.CORRIDOR_HEIGHT_JITTER
            height += rng.next_int(-jitter, jitter)
        return width, height
    if plan.boss_sized:
        return sample_size(rng, config.boss_size)
    return sample_size(rng, config.room_size)


def _place(
    plan: _StagePlan,
    previous: Optional[Rect],
    size: Size,
    config: GenerationConfig,
    rng: SeededRandom,
) -> Rect:
    if previous is None:
        return room_at((0, 0), size)
    if plan.role is RoomRole.CORRIDOR:
        # Corridors after a room shift left by half their own width.
        jitter_x = size[0] // 2
    else:
        jitter_x = rng.next_int(0, 1)
    _, rect = chain_next(previous, size, config.vertical_step, jitter_x)
    return rect


def _decorate_options(plan: _StagePlan, config: GenerationConfig) -> dict[str, float]:
    if plan.corridor_index is None:
        return {}
    multiplier = config.corridor_torch_multipliers[plan.corridor_index]
    return {"torch_chance": config.torch_corridor_chance * multiplier}


def generate_dungeon(
    config: Optional[GenerationConfig] = None,
    seed: Optional[int] = None,
    *,
    rng: Optional[SeededRandom] = None,
    grid: Optional[TileGrid] = None,
    on_outline: Optional[OutlineHook] = None,
    nondeterministic: bool = False,
) -> DungeonSpec:
    """Generate the full stage chain and return a :class:`DungeonSpec`.

    ``seed`` defaults to :attr:`GenerationConfig.DEFAULT_SEED`. Passing
    ``nondeterministic=True`` draws the seed from OS entropy instead and gives
    up reproducibility; combining it with a ``seed`` raises ``ValueError``.
    A caller-supplied ``rng`` must already be seeded and takes precedence over
    both. ``grid`` is cleared before the first stage;
    ``on_outline`` observes each rect right after its outline is drawn.

    Any failure inside a stage aborts the whole run with :class:`GenerationError`.
    """

    config = config or GenerationConfig()
    if rng is None:
        if seed is None and not nondeterministic:
            seed = config.DEFAULT_SEED
        rng = get_rng(seed, nondeterministic=nondeterministic)
    rng.ensure_seeded()

    grid = grid if grid is not None else TileGrid()
    grid.clear()
    result = DungeonSpec(seed=rng.seed_value, grid=grid)

    previous: Optional[Rect] = None
    for index, plan in enumerate(STAGE_PLAN):
        try:
            size = _stage_size(plan, config, rng)
            rect = _place(plan, previous, size, config, rng)
            draw_hollow(grid, rect)
            if on_outline is not None:
                on_outline(plan.role, rect, grid)
            decorate(plan.role, grid, rect, config, rng, **_decorate_options(plan, config))
        except Exception as exc:
            raise GenerationError(index, plan.role, str(exc)) from exc

        logger.debug("Stage %d %s placed at %s", index, plan.role.value, rect)
        result.stages.append(Stage(index=index, role=plan.role, rect=rect))
        previous = rect

    logger.info(
        "Generated dungeon seed=%s stages=%d cells=%d", result.seed, len(result.stages), len(grid)
    )
    return result


__all__ = ["OutlineHook", "STAGE_PLAN", "generate_dungeon"]
