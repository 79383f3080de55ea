from __future__ import annotations

from esper import World

from tenfold.constants import TIME_BONUS_SECONDS
from tenfold.effects.factory import TIME_BONUS
from tenfold.events.bus import (
    EVENT_CLOCK_CHANGED,
    EVENT_EFFECT_APPLY,
    EVENT_TIME_BONUS_GRANTED,
    EventBus,
)
from tenfold.utils.round_state import get_or_create_round_state


class TimeBonusEffectSystem:
    """Adds the configured seconds to the round clock."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_EFFECT_APPLY, self._on_effect_apply)

    def _on_effect_apply(self, sender, **payload) -> None:
        if payload.get("slug") != TIME_BONUS:
            return
        metadata = payload.get("metadata") or {}
        try:
            seconds = int(metadata.get("seconds", TIME_BONUS_SECONDS))
        except (TypeError, ValueError):
            seconds = TIME_BONUS_SECONDS
        if seconds <= 0:
            return
        state = get_or_create_round_state(self.world)
        state.time_remaining += seconds
        self.event_bus.emit(
            EVENT_TIME_BONUS_GRANTED,
            row=payload.get("row"),
            col=payload.get("col"),
            seconds=seconds,
            time_remaining=state.time_remaining,
        )
        self.event_bus.emit(
            EVENT_CLOCK_CHANGED,
            time_remaining=state.time_remaining,
            delta=seconds,
            reason="time_bonus",
        )
