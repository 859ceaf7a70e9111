from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from modules.dungeon.events import DungeonGenerated, GenerateDungeon
from modules.dungeon.gen import GenerationConfig, generate_dungeon
from modules.dungeon.spec import DungeonSpec


logger = logging.getLogger(__name__)


class _EventBus(Protocol):
    def subscribe(self, event_type: str, callback: Callable[..., None]) -> None:
        ...

    def publish(self, event_type: str, **payload: object) -> None:
        ...


class DungeonGeneratorSystem:
    """Listen for :class:`GenerateDungeon` events and publish :class:`DungeonGenerated`."""

    def __init__(self, *, event_bus: _EventBus) -> None:
        self._bus = event_bus
        self._bus.subscribe(GenerateDungeon.topic, self._on_generate_requested)

    def _on_generate_requested(
        self, *, config: GenerationConfig, seed: Optional[int] = None, **_: object
    ) -> None:
        try:
            spec: DungeonSpec = generate_dungeon(config, seed)
        except Exception:
            logger.exception("Dungeon generation failed for seed=%s", seed)
            raise
        DungeonGenerated(spec=spec).publish(self._bus)


__all__ = ["DungeonGeneratorSystem"]
