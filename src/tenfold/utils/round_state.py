from __future__ import annotations

from esper import World

from tenfold.components.game_state import GameState, RoundPhase
from tenfold.components.round_state import RoundState
from tenfold.events.bus import EVENT_PHASE_CHANGED, EventBus


def get_or_create_round_state(world: World) -> RoundState:
    """Return the shared RoundState component, creating it if absent."""
    existing = list(world.get_component(RoundState))
    if existing:
        return existing[0][1]
    world.create_entity(RoundState())
    return list(world.get_component(RoundState))[0][1]


def get_or_create_game_state(world: World) -> GameState:
    existing = list(world.get_component(GameState))
    if existing:
        return existing[0][1]
    world.create_entity(GameState())
    return list(world.get_component(GameState))[0][1]


def current_phase(world: World) -> RoundPhase:
    return get_or_create_game_state(world).phase


def is_running(world: World) -> bool:
    return current_phase(world) is RoundPhase.RUNNING


def current_epoch(world: World) -> int:
    return get_or_create_round_state(world).epoch


def set_round_phase(world: World, event_bus: EventBus, phase: RoundPhase) -> None:
    """Update the round phase, keep ``RoundState.running`` in step and emit a change event."""

    state = get_or_create_game_state(world)
    previous = state.phase
    round_state = get_or_create_round_state(world)
    round_state.running = phase is RoundPhase.RUNNING
    if previous is phase:
        return
    state.phase = phase
    event_bus.emit(EVENT_PHASE_CHANGED, previous_phase=previous, new_phase=phase)
