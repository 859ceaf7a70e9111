"""Event definitions for procedural dungeon generation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Protocol, runtime_checkable

from modules.dungeon.gen.params import GenerationConfig
from modules.dungeon.spec import DungeonSpec


GENERATE_DUNGEON = "dungeon.generate"
"""Event topic requesting a dungeon layout to be generated."""

DUNGEON_GENERATED = "dungeon.generated"
"""Event topic emitted once a :class:`DungeonSpec` is available."""


@runtime_checkable
class _PublishesEvents(Protocol):
    """Protocol capturing the subset of the event bus used here."""

    def publish(self, event_type: str, **payload: object) -> None:
        """Publish an event to all subscribers."""


@dataclass(frozen=True, slots=True)
class GenerateDungeon:
    """Request dungeon generation for ``config`` and ``seed``."""

    config: GenerationConfig
    seed: Optional[int] = None

    topic: ClassVar[str] = GENERATE_DUNGEON

    def publish(self, bus: _PublishesEvents) -> None:
        bus.publish(self.topic, config=self.config, seed=self.seed)


@dataclass(frozen=True, slots=True)
class DungeonGenerated:
    """Notification containing the freshly generated :class:`DungeonSpec`."""

    spec: DungeonSpec

    topic: ClassVar[str] = DUNGEON_GENERATED

    def publish(self, bus: _PublishesEvents) -> None:
        bus.publish(self.topic, spec=self.spec)


__all__ = [
    "DUNGEON_GENERATED",
    "DungeonGenerated",
    "GENERATE_DUNGEON",
    "GenerateDungeon",
]
