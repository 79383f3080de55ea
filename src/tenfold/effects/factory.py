from __future__ import annotations

from tenfold.constants import BOMB_RADIUS, TIME_BONUS_SECONDS
from tenfold.effects.registry import EffectDefinition, EffectRegistry

BOMB = "bomb"
TIME_BONUS = "time_bonus"


def create_effect_registry() -> EffectRegistry:
    """Build a registry holding the special-tile effect definitions."""

    registry = EffectRegistry()
    registry.register(
        EffectDefinition(
            slug=BOMB,
            display_name="Bomb",
            description="Clears every tile in a square around the bomb.",
            tags=("board",),
            default_metadata={"radius": BOMB_RADIUS},
        )
    )
    registry.register(
        EffectDefinition(
            slug=TIME_BONUS,
            display_name="Time Bonus",
            description="Adds seconds to the round clock.",
            tags=("clock",),
            default_metadata={"seconds": TIME_BONUS_SECONDS},
        )
    )
    return registry
