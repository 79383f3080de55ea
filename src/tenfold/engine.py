"""Entry point for the Tenfold puzzle engine.

Sets up the ECS world, event bus and systems, and exposes the calls a
frontend binds to: start a round, submit selections, advance time, use
skills and read snapshots.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Tuple

from tenfold.components.game_state import RoundPhase
from tenfold.components.match_outcome import MatchOutcome
from tenfold.components.round_state import RoundSnapshot, RoundState, RoundSummary
from tenfold.components.selection import Selection
from tenfold.components.skill import SkillKind, SkillResult
from tenfold.components.tile import TileView
from tenfold.config import RoundConfig
from tenfold.events.bus import EVENT_TICK, EventBus
from tenfold.systems.board import BoardSystem
from tenfold.systems.board_ops import iter_tiles
from tenfold.systems.effects.bomb_effect_system import BombEffectSystem
from tenfold.systems.effects.time_bonus_effect_system import TimeBonusEffectSystem
from tenfold.systems.match import MatchSystem
from tenfold.systems.match_resolution import MatchResolutionSystem
from tenfold.systems.round_system import RoundSystem
from tenfold.systems.skills import SkillSystem
from tenfold.systems.timer_system import TimerSystem
from tenfold.utils.round_state import current_phase, get_or_create_round_state
from tenfold.world import create_world


@dataclass(frozen=True)
class Snapshot:
    """Immutable view of the board and round for rendering."""

    board: Tuple[Tuple[TileView, ...], ...]
    round: RoundSnapshot


class PuzzleEngine:
    def __init__(self, event_bus: EventBus | None = None, rng: random.Random | None = None):
        self.event_bus = event_bus or EventBus()
        self.world = create_world(self.event_bus, rng=rng)
        defaults = RoundConfig()

        # Board and timing systems
        self.board_system = BoardSystem(self.world, self.event_bus, rows=defaults.rows, cols=defaults.cols)
        self.timer_system = TimerSystem(self.world, self.event_bus)

        # Matching and effect systems
        self.match_system = MatchSystem(self.world, self.event_bus)
        self.match_resolution_system = MatchResolutionSystem(self.world, self.event_bus)
        self.bomb_effect_system = BombEffectSystem(self.world, self.event_bus)
        self.time_bonus_effect_system = TimeBonusEffectSystem(self.world, self.event_bus)

        # Round flow and skills
        self.round_system = RoundSystem(self.world, self.event_bus, self.board_system, self.timer_system)
        self.skill_system = SkillSystem(self.world, self.event_bus, self.board_system, self.timer_system)

    def start_round(self, config: RoundConfig | None = None) -> RoundState:
        return self.round_system.start_round(config).copy()

    def attempt_match(self, selection: Selection) -> MatchOutcome:
        return self.match_system.submit(selection)

    def tick(self, delta_seconds: float) -> bool:
        self.event_bus.emit(EVENT_TICK, dt=delta_seconds)
        return self.round_system.ended

    def use_skill(self, kind: SkillKind) -> SkillResult:
        return self.skill_system.use(kind)

    def snapshot(self) -> Snapshot:
        rows: list[list[TileView]] = []
        for (row, col), tile in iter_tiles(self.world):
            if row == len(rows):
                rows.append([])
            rows[row].append(
                TileView(
                    row=row,
                    col=col,
                    value=tile.value,
                    kind=tile.kind,
                    alive=tile.alive,
                    hinted=tile.hinted,
                )
            )
        board = tuple(tuple(cells) for cells in rows)
        return Snapshot(board=board, round=get_or_create_round_state(self.world).snapshot())

    @property
    def phase(self) -> RoundPhase:
        return current_phase(self.world)

    @property
    def summary(self) -> RoundSummary | None:
        return self.round_system.summary
