"""Exceptions raised by the dungeon layout generator."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover - typing only
    from modules.dungeon.tiles import RoomRole


class DungeonGenError(RuntimeError):
    """Base exception for every dungeon generation failure."""


class ConfigError(DungeonGenError, ValueError):
    """Raised when a :class:`GenerationConfig` cannot produce a viable layout."""


class LifecycleError(DungeonGenError):
    """Raised when the random source is drawn from before being seeded."""


class GenerationError(DungeonGenError):
    """Raised when a pipeline stage fails; the whole run is aborted."""

    def __init__(self, stage_index: int, role: "RoomRole", reason: Optional[str] = None) -> None:
        self.stage_index = stage_index
        self.role = role
        message = f"stage {stage_index} ({role.value}) failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


__all__ = ["DungeonGenError", "ConfigError", "LifecycleError", "GenerationError"]
