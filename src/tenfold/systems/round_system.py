"""Round lifecycle: start, clock, end-of-round checks and deadlock recovery."""
from __future__ import annotations

import logging

from esper import World

from tenfold.components.game_state import RoundPhase
from tenfold.components.round_state import RoundState, RoundSummary
from tenfold.config import RoundConfig
from tenfold.events.bus import (
    EVENT_CLOCK_CHANGED,
    EVENT_MATCH_RESOLVED,
    EVENT_ROUND_ENDED,
    EVENT_ROUND_STARTED,
    EVENT_TICK,
    EventBus,
)
from tenfold.systems.board import BoardSystem
from tenfold.systems.board_ops import all_dead, any_solvable_subrect
from tenfold.systems.timer_system import TimerSystem
from tenfold.utils.round_state import (
    current_phase,
    get_or_create_round_state,
    is_running,
    set_round_phase,
)
from tenfold.utils.scoring import efficiency_percent

logger = logging.getLogger(__name__)

REASON_TIME_UP = "time_up"
REASON_BOARD_CLEARED = "board_cleared"


class RoundSystem:
    """Owns the round clock and decides when a round ends or needs a reshuffle."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        board_system: BoardSystem,
        timer_system: TimerSystem,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.board_system = board_system
        self.timer_system = timer_system
        self.summary: RoundSummary | None = None
        # Fraction of a second carried between ticks.
        self._elapsed: float = 0.0
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_MATCH_RESOLVED, self.on_match_resolved)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start_round(self, config: RoundConfig | None = None) -> RoundState:
        config = (config or RoundConfig()).validate()
        state = get_or_create_round_state(self.world)
        self.timer_system.cancel_all()
        self.board_system.generate(config.rows, config.cols)

        state.epoch += 1
        state.score = 0
        state.time_remaining = config.duration_seconds
        state.duration = config.duration_seconds
        state.combo = 0
        state.max_combo = 0
        state.attempts = 0
        state.skill_charges = config.skill_charges.copy()
        state.frozen = False
        self._elapsed = 0.0
        self.summary = None

        set_round_phase(self.world, self.event_bus, RoundPhase.RUNNING)
        logger.debug(
            "Round %d started on %dx%d board for %ds",
            state.epoch,
            config.rows,
            config.cols,
            config.duration_seconds,
        )
        self.event_bus.emit(
            EVENT_ROUND_STARTED,
            epoch=state.epoch,
            rows=config.rows,
            cols=config.cols,
            duration=config.duration_seconds,
        )
        return state

    def end_round(self, reason: str) -> RoundSummary | None:
        if not is_running(self.world):
            return self.summary
        state = get_or_create_round_state(self.world)
        state.frozen = False
        self.timer_system.cancel_all()
        set_round_phase(self.world, self.event_bus, RoundPhase.ENDED)
        self.summary = RoundSummary(
            reason=reason,
            score=state.score,
            played_seconds=max(0, state.duration - state.time_remaining),
            attempts=state.attempts,
            max_combo=state.max_combo,
            efficiency=efficiency_percent(state.score, state.attempts),
        )
        logger.debug("Round %d ended (%s) with score %d", state.epoch, reason, state.score)
        self.event_bus.emit(EVENT_ROUND_ENDED, epoch=state.epoch, reason=reason, summary=self.summary)
        return self.summary

    @property
    def ended(self) -> bool:
        return current_phase(self.world) is RoundPhase.ENDED

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def on_tick(self, sender, **kwargs):
        if not is_running(self.world):
            return
        dt = float(kwargs.get('dt', 0.0) or 0.0)
        if dt <= 0:
            return
        # Deferred callbacks run on raw elapsed time, freeze or not.
        self.timer_system.advance(dt)
        if not is_running(self.world):
            return
        self._elapsed += dt
        state = get_or_create_round_state(self.world)
        while self._elapsed >= 1.0:
            self._elapsed -= 1.0
            if state.frozen:
                continue
            state.time_remaining -= 1
            self.event_bus.emit(
                EVENT_CLOCK_CHANGED,
                time_remaining=state.time_remaining,
                delta=-1,
                reason="tick",
            )
            if state.time_remaining <= 0:
                state.time_remaining = 0
                self.end_round(REASON_TIME_UP)
                return

    def on_match_resolved(self, sender, **kwargs):
        if not is_running(self.world):
            return
        if all_dead(self.world):
            self.end_round(REASON_BOARD_CLEARED)
            return
        if not any_solvable_subrect(self.world):
            self.board_system.reshuffle(reason="deadlock")
