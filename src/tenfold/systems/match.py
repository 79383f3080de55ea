from typing import List

from esper import World

from tenfold.components.match_outcome import (
    FailureReason,
    MatchFailure,
    MatchOutcome,
    MatchSuccess,
    SpecialEffect,
)
from tenfold.components.selection import Selection
from tenfold.components.tile import TileKind
from tenfold.constants import MIN_SELECTION_TILES, TARGET_SUM
from tenfold.effects.factory import BOMB, TIME_BONUS
from tenfold.events.bus import (
    EVENT_MATCH_FAILED,
    EVENT_MATCH_FOUND,
    EVENT_SELECTION_SUBMITTED,
    EventBus,
)
from tenfold.systems.board_ops import alive_tiles_in
from tenfold.utils.match_math import effective_total
from tenfold.utils.round_state import get_or_create_round_state, is_running

# Kinds whose side effect is queued when they take part in a match.
EFFECT_SLUGS = {
    TileKind.BOMB: BOMB,
    TileKind.TIME_BONUS: TIME_BONUS,
}


def resolve_selection(world: World, selection: Selection) -> MatchOutcome:
    """Decide whether the alive tiles inside ``selection`` form a match.

    Raises OutOfBoundsError when the rectangle leaves the board and
    InvalidSelectionError when its corners are inverted; every gameplay failure
    is returned as a MatchFailure instead.
    """
    entries = alive_tiles_in(world, selection)
    positions = tuple(pos for pos, _ in entries)
    if len(entries) < MIN_SELECTION_TILES:
        return MatchFailure(reason=FailureReason.TOO_FEW, positions=positions)

    face_values: List[int] = []
    wild_faces: List[int] = []
    effects: List[SpecialEffect] = []
    golden = 0
    for (row, col), tile in entries:
        if tile.kind is TileKind.WILD:
            wild_faces.append(tile.value)
            continue
        face_values.append(tile.value)
        if tile.kind is TileKind.GOLDEN:
            golden += 1
        slug = EFFECT_SLUGS.get(tile.kind)
        if slug is not None:
            effects.append(SpecialEffect(slug=slug, row=row, col=col))

    total = effective_total(face_values, wild_faces)
    if total != TARGET_SUM:
        return MatchFailure(reason=FailureReason.WRONG_SUM, positions=positions, total=total)
    return MatchSuccess(
        positions=positions,
        special_effects=tuple(effects),
        golden_count=golden,
        total=total,
    )


class MatchSystem:
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def submit(self, selection: Selection) -> MatchOutcome:
        """Resolve a player selection and publish the outcome on the bus."""
        if not is_running(self.world):
            return MatchFailure(reason=FailureReason.ROUND_NOT_RUNNING)
        outcome = resolve_selection(self.world, selection)
        state = get_or_create_round_state(self.world)
        state.attempts += 1
        self.event_bus.emit(EVENT_SELECTION_SUBMITTED, selection=selection)
        if outcome.success:
            self.event_bus.emit(EVENT_MATCH_FOUND, outcome=outcome)
        else:
            self.event_bus.emit(EVENT_MATCH_FAILED, outcome=outcome)
        return outcome
