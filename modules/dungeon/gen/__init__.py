"""Dungeon generation parameters, geometry, placement and pipeline."""

from .decorate import DECORATORS, decorate
from .layout import Rect, chain_next, corridor_at, draw_hollow, room_at
from .params import CountClamp, GenerationConfig, SizeRange
from .pipeline import generate_dungeon
from .random import SeededRandom, get_rng

__all__ = [
    "CountClamp",
    "DECORATORS",
    "GenerationConfig",
    "Rect",
    "SeededRandom",
    "SizeRange",
    "chain_next",
    "corridor_at",
    "decorate",
    "draw_hollow",
    "generate_dungeon",
    "get_rng",
    "room_at",
]
