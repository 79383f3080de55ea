from esper import World

from tenfold.components.match_outcome import FailureReason, MatchFailure, MatchSuccess
from tenfold.events.bus import (
    EVENT_COMBO_CHANGED,
    EVENT_EFFECT_APPLY,
    EVENT_MATCH_FAILED,
    EVENT_MATCH_FOUND,
    EVENT_MATCH_RESOLVED,
    EVENT_SCORE_CHANGED,
    EVENT_TILES_REMOVED,
    EventBus,
)
from tenfold.systems.board_ops import remove_tiles
from tenfold.utils.round_state import get_or_create_round_state
from tenfold.utils.scoring import combo_multiplier, match_score


class MatchResolutionSystem:
    """Applies the consequences of a resolved selection.

    Successes raise the combo, score the matched tiles, queue special-tile
    effects and clear the tiles; failures break the combo. Either way the
    system finishes by publishing ``match_resolved`` for the round checks.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MATCH_FOUND, self.on_match_found)
        self.event_bus.subscribe(EVENT_MATCH_FAILED, self.on_match_failed)

    def on_match_found(self, sender, **kwargs):
        outcome = kwargs.get('outcome')
        if not isinstance(outcome, MatchSuccess):
            return
        state = get_or_create_round_state(self.world)
        state.combo += 1
        state.max_combo = max(state.max_combo, state.combo)
        multiplier = combo_multiplier(state.combo)
        self.event_bus.emit(
            EVENT_COMBO_CHANGED,
            combo=state.combo,
            max_combo=state.max_combo,
            multiplier=multiplier,
        )

        points = match_score(len(outcome.positions), outcome.golden_count, state.combo)
        state.score += points
        self.event_bus.emit(
            EVENT_SCORE_CHANGED,
            score=state.score,
            delta=points,
            multiplier=multiplier,
            golden=outcome.golden_count,
        )

        # Matched tiles go first so effect systems only report the extra cells they clear.
        removed = remove_tiles(self.world, outcome.positions)
        if removed:
            self.event_bus.emit(EVENT_TILES_REMOVED, positions=removed, reason='match')

        registry = getattr(self.world, 'effect_registry')
        for effect in outcome.special_effects:
            self.event_bus.emit(
                EVENT_EFFECT_APPLY,
                slug=effect.slug,
                row=effect.row,
                col=effect.col,
                metadata=registry.metadata_for(effect.slug),
            )

        self.event_bus.emit(EVENT_MATCH_RESOLVED, success=True, positions=list(outcome.positions))

    def on_match_failed(self, sender, **kwargs):
        outcome = kwargs.get('outcome')
        if not isinstance(outcome, MatchFailure):
            return
        if outcome.reason is FailureReason.ROUND_NOT_RUNNING:
            return
        state = get_or_create_round_state(self.world)
        if state.combo:
            state.combo = 0
            self.event_bus.emit(
                EVENT_COMBO_CHANGED,
                combo=0,
                max_combo=state.max_combo,
                multiplier=combo_multiplier(0),
            )
        self.event_bus.emit(EVENT_MATCH_RESOLVED, success=False, positions=list(outcome.positions))
