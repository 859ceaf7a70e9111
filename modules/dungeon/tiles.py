"""Tile kinds and room roles used by the dungeon generator."""
from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet


class TileKind(str, Enum):
    """Logical content of a single grid cell.

    Kinds carry no visual information; a theme layer maps them to assets.
    """

    EMPTY = "empty"
    WALL = "wall"
    FLOOR = "floor"
    GATE = "gate"
    TORCH = "torch"
    RUNE = "rune"
    CHEST = "chest"
    STATUE = "statue"
    DECAL = "decal"
    BOSS_SIGIL = "boss_sigil"

    @property
    def code(self) -> int:
        """Stable integer code used for dense array exports."""

        return _KIND_CODES[self]

    @property
    def glyph(self) -> str:
        return _KIND_GLYPHS[self]


class RoomRole(str, Enum):
    """Role of a pipeline stage; selects the size range and decorator."""

    ENTRANCE = "entrance"
    CORRIDOR = "corridor"
    COMBAT = "combat"
    CHEST = "chest"
    BOSS = "boss"
    EXIT = "exit"


_KIND_CODES: Dict[TileKind, int] = {kind: index for index, kind in enumerate(TileKind)}

_KIND_GLYPHS: Dict[TileKind, str] = {
    TileKind.EMPTY: " ",
    TileKind.WALL: "#",
    TileKind.FLOOR: ".",
    TileKind.GATE: "G",
    TileKind.TORCH: "t",
    TileKind.RUNE: "r",
    TileKind.CHEST: "C",
    TileKind.STATUE: "S",
    TileKind.DECAL: ",",
    TileKind.BOSS_SIGIL: "*",
}

#: Kinds written by decorators on top of an outlined rect.
DECORATION_KINDS: FrozenSet[TileKind] = frozenset(
    {
        TileKind.GATE,
        TileKind.TORCH,
        TileKind.RUNE,
        TileKind.CHEST,
        TileKind.STATUE,
        TileKind.DECAL,
        TileKind.BOSS_SIGIL,
    }
)


def kind_from_code(code: int) -> TileKind:
    """Return the :class:`TileKind` whose :attr:`TileKind.code` equals ``code``."""

    for kind, value in _KIND_CODES.items():
        if value == code:
            return kind
    raise KeyError(f"unknown tile code {code}")


__all__ = ["TileKind", "RoomRole", "DECORATION_KINDS", "kind_from_code"]
