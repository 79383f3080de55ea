from __future__ import annotations

import logging
from typing import Callable, Dict, List, Tuple

from esper import World

from tenfold.components.skill import SkillKind, SkillResult
from tenfold.constants import FREEZE_DURATION_SECONDS, HINT_DURATION_SECONDS
from tenfold.events.bus import (
    EVENT_FREEZE_ENDED,
    EVENT_FREEZE_STARTED,
    EVENT_HINT_CLEARED,
    EVENT_HINT_SHOWN,
    EVENT_SKILL_USED,
    EventBus,
)
from tenfold.systems.board import BoardSystem
from tenfold.systems.board_ops import find_solvable_subrect, iter_tiles, set_hinted
from tenfold.systems.timer_system import TimerSystem
from tenfold.utils.round_state import get_or_create_round_state, is_running

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class SkillSystem:
    """Resolves hint, freeze-time and reshuffle requests against the round's charges."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        board_system: BoardSystem,
        timer_system: TimerSystem,
        *,
        hint_duration: float = HINT_DURATION_SECONDS,
        freeze_duration: float = FREEZE_DURATION_SECONDS,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.board_system = board_system
        self.timer_system = timer_system
        self.hint_duration = hint_duration
        self.freeze_duration = freeze_duration
        self._hint_token = 0
        self._freeze_token = 0
        self._handlers: Dict[SkillKind, Callable[[], List[Position]]] = {
            SkillKind.HINT: self._apply_hint,
            SkillKind.FREEZE_TIME: self._apply_freeze,
            SkillKind.RESHUFFLE: self._apply_reshuffle,
        }

    def use(self, kind: SkillKind) -> SkillResult:
        if not is_running(self.world):
            return SkillResult(kind=kind, applied=False)
        state = get_or_create_round_state(self.world)
        if not state.skill_charges.consume(kind):
            return SkillResult(kind=kind, applied=False)
        positions = self._handlers[kind]()
        remaining = state.skill_charges.remaining(kind)
        logger.debug("Skill %s used, %d left", kind.value, remaining)
        self.event_bus.emit(EVENT_SKILL_USED, kind=kind, remaining=remaining, positions=positions)
        return SkillResult(kind=kind, applied=True, affected_positions=frozenset(positions))

    # ------------------------------------------------------------------
    # Skills
    # ------------------------------------------------------------------

    def _apply_hint(self) -> List[Position]:
        # A fresh hint replaces whatever is still highlighted.
        stale = [pos for pos, tile in iter_tiles(self.world) if tile.hinted]
        if stale:
            self._clear_hint(stale)
        self._hint_token += 1
        token = self._hint_token
        found = find_solvable_subrect(self.world)
        if found is None:
            return []
        _, positions = found
        set_hinted(self.world, positions, True)
        self.event_bus.emit(EVENT_HINT_SHOWN, positions=positions, duration=self.hint_duration)
        self.timer_system.schedule(
            self.hint_duration,
            lambda: self._expire_hint(token, positions),
            label="hint_expiry",
        )
        return positions

    def _expire_hint(self, token: int, positions: List[Position]) -> None:
        # A later hint owns the highlight now.
        if token != self._hint_token:
            return
        self._clear_hint(positions)

    def _clear_hint(self, positions: List[Position]) -> None:
        cleared = set_hinted(self.world, positions, False)
        if cleared:
            self.event_bus.emit(EVENT_HINT_CLEARED, positions=cleared)

    def _apply_freeze(self) -> List[Position]:
        state = get_or_create_round_state(self.world)
        state.frozen = True
        self._freeze_token += 1
        token = self._freeze_token
        self.event_bus.emit(EVENT_FREEZE_STARTED, duration=self.freeze_duration)
        self.timer_system.schedule(
            self.freeze_duration,
            lambda: self._end_freeze(token),
            label="freeze_expiry",
        )
        return []

    def _end_freeze(self, token: int) -> None:
        # Only the most recent freeze may thaw the clock.
        if token != self._freeze_token:
            return
        state = get_or_create_round_state(self.world)
        if not state.frozen:
            return
        state.frozen = False
        self.event_bus.emit(EVENT_FREEZE_ENDED)

    def _apply_reshuffle(self) -> List[Position]:
        return self.board_system.reshuffle(reason="skill")
