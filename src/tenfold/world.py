import random

from esper import World
from .events.bus import EventBus
from tenfold.components.game_state import GameState, RoundPhase
from tenfold.components.round_state import RoundState
from tenfold.effects.factory import create_effect_registry


def create_world(
    event_bus: EventBus,
    initial_phase: RoundPhase = RoundPhase.IDLE,
    *,
    rng: random.Random | None = None,
) -> World:
    """Create a world holding the round resources shared by every system."""
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "effect_registry", create_effect_registry())

    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(phase=initial_phase))
    world.add_component(state_entity, RoundState(running=initial_phase is RoundPhase.RUNNING))
    return world


def world_random(world: World) -> random.Random:
    rng = getattr(world, "random", None)
    if isinstance(rng, random.Random):
        return rng
    rng = random.Random()
    setattr(world, "random", rng)
    return rng
