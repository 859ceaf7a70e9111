"""Generation result and caller-side serialization helpers."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Optional

from modules.dungeon.geometry import Rect
from modules.dungeon.grid import TileGrid
from modules.dungeon.tiles import RoomRole, TileKind


@dataclass(frozen=True, slots=True)
class Stage:
    """One room or corridor of the chain."""

    index: int
    role: RoomRole
    rect: Rect


@dataclass(slots=True)
class DungeonSpec:
    """Ordered stages plus the tile grid produced by one generation call."""

    seed: int
    stages: list[Stage] = field(default_factory=list)
    grid: TileGrid = field(default_factory=TileGrid)

    def __iter__(self) -> Iterator[tuple[RoomRole, Rect]]:
        return ((stage.role, stage.rect) for stage in self.stages)

    @property
    def roles(self) -> list[RoomRole]:
        return [stage.role for stage in self.stages]

    def stage_for(self, role: RoomRole, occurrence: int = 0) -> Stage:
        """Return the ``occurrence``-th stage tagged with ``role``."""

        matches = [stage for stage in self.stages if stage.role is role]
        try:
            return matches[occurrence]
        except IndexError as exc:
            raise KeyError(f"no {role.value} stage #{occurrence}") from exc

    def stage_at(self, pos: tuple[int, int]) -> Optional[Stage]:
        for stage in self.stages:
            if stage.rect.contains(pos):
                return stage
        return None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible view; only non-empty cells are listed."""

        return {
            "seed": self.seed,
            "stages": [
                {
                    "index": stage.index,
                    "role": stage.role.value,
                    "x": stage.rect.x,
                    "y": stage.rect.y,
                    "width": stage.rect.width,
                    "height": stage.rect.height,
                }
                for stage in self.stages
            ],
            "cells": [
                [x, y, kind.value] for (x, y), kind in sorted(self.grid.items())
            ],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DungeonSpec":
        stages = [
            Stage(
                index=int(item["index"]),
                role=RoomRole(item["role"]),
                rect=Rect(int(item["x"]), int(item["y"]), int(item["width"]), int(item["height"])),
            )
            for item in data.get("stages", [])
        ]
        grid = TileGrid()
        for x, y, kind in data.get("cells", []):
            grid.set((int(x), int(y)), TileKind(kind))
        return cls(seed=int(data["seed"]), stages=stages, grid=grid)


def save_json(spec: DungeonSpec, path: str | Path) -> None:
    path = Path(path)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(spec.to_dict(), fh, indent=2)


def load_json(path: str | Path) -> DungeonSpec:
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    return DungeonSpec.from_dict(data)


__all__ = ["DungeonSpec", "Stage", "load_json", "save_json"]
