"""Tenfold: a sum-to-ten grid puzzle engine.

Exports the engine facade and the value types callers exchange with it:
- PuzzleEngine: round lifecycle, matching, clock and skills
- RoundConfig: board size, duration and skill charges for a round
- Selection: rectangle of cells proposed for a match
- SkillKind: hint, freeze-time and reshuffle
"""

from tenfold.components.game_state import RoundPhase
from tenfold.components.match_outcome import FailureReason, MatchFailure, MatchSuccess
from tenfold.components.round_state import RoundSnapshot, RoundSummary
from tenfold.components.selection import Selection
from tenfold.components.skill import SkillCharges, SkillKind, SkillResult
from tenfold.components.tile import TileKind
from tenfold.config import RoundConfig
from tenfold.engine import PuzzleEngine, Snapshot
from tenfold.errors import (
    InvalidConfigError,
    InvalidSelectionError,
    OutOfBoundsError,
    TenfoldError,
)

__all__ = [
    "FailureReason",
    "InvalidConfigError",
    "InvalidSelectionError",
    "MatchFailure",
    "MatchSuccess",
    "OutOfBoundsError",
    "PuzzleEngine",
    "RoundConfig",
    "RoundPhase",
    "RoundSnapshot",
    "RoundSummary",
    "Selection",
    "SkillCharges",
    "SkillKind",
    "SkillResult",
    "Snapshot",
    "TenfoldError",
    "TileKind",
]
