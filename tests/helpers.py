from __future__ import annotations

import random
from typing import Mapping, Sequence, Tuple

from esper import World

from tenfold.components.skill import SkillCharges
from tenfold.components.tile import Tile, TileKind
from tenfold.config import RoundConfig
from tenfold.engine import PuzzleEngine
from tenfold.events.bus import EVENT_TICK, EventBus
from tenfold.systems.board_ops import get_board

Position = Tuple[int, int]


def drive_ticks(bus: EventBus, count: int = 1, dt: float = 1.0) -> None:
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def arrange_board(
    world: World,
    values: Sequence[Sequence[int]],
    kinds: Mapping[Position, TileKind] | None = None,
) -> None:
    """Overwrite the board tiles; a value of 0 makes the cell a tombstone."""

    board = get_board(world)
    assert len(values) == board.rows and all(len(row) == board.cols for row in values)
    kinds = kinds or {}
    for r, row in enumerate(values):
        for c, value in enumerate(row):
            tile = world.component_for_entity(board.cells[r][c], Tile)
            tile.value = value
            tile.alive = value > 0
            tile.kind = kinds.get((r, c), TileKind.NORMAL)
            tile.hinted = False


def build_engine(
    rows: int = 4,
    cols: int = 4,
    *,
    duration: int = 60,
    charges: SkillCharges | None = None,
    seed: int = 1234,
) -> PuzzleEngine:
    """Engine with a started round on a small board."""

    engine = PuzzleEngine(rng=random.Random(seed))
    engine.start_round(
        RoundConfig(
            rows=rows,
            cols=cols,
            duration_seconds=duration,
            skill_charges=charges or SkillCharges(hint=3, freeze_time=1, reshuffle=2),
        )
    )
    return engine
