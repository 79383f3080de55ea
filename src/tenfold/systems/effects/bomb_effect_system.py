from __future__ import annotations

from typing import List, Tuple

from esper import World

from tenfold.constants import BOMB_RADIUS
from tenfold.effects.factory import BOMB
from tenfold.events.bus import (
    EVENT_BOMB_EXPLODED,
    EVENT_EFFECT_APPLY,
    EVENT_TILES_REMOVED,
    EventBus,
)
from tenfold.systems.board_ops import neighborhood, remove_tiles

Position = Tuple[int, int]


class BombEffectSystem:
    """Clears the square around a matched bomb tile, bomb included."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_EFFECT_APPLY, self._on_effect_apply)

    def _on_effect_apply(self, sender, **payload) -> None:
        if payload.get("slug") != BOMB:
            return
        row = payload.get("row")
        col = payload.get("col")
        if row is None or col is None:
            return
        metadata = payload.get("metadata") or {}
        radius = self._radius(metadata)
        cleared: List[Position] = remove_tiles(self.world, neighborhood(self.world, row, col, radius))
        self.event_bus.emit(EVENT_BOMB_EXPLODED, row=row, col=col, positions=cleared)
        if cleared:
            self.event_bus.emit(EVENT_TILES_REMOVED, positions=cleared, reason="bomb")

    @staticmethod
    def _radius(metadata: dict) -> int:
        try:
            return max(0, int(metadata.get("radius", BOMB_RADIUS)))
        except (TypeError, ValueError):
            return BOMB_RADIUS
