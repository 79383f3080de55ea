from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

Position = Tuple[int, int]


class FailureReason(Enum):
    TOO_FEW = "too_few"
    WRONG_SUM = "wrong_sum"
    ROUND_NOT_RUNNING = "round_not_running"


@dataclass(frozen=True, slots=True)
class SpecialEffect:
    """Side effect triggered by a special tile inside a successful match."""

    slug: str
    row: int
    col: int


@dataclass(frozen=True, slots=True)
class MatchSuccess:
    positions: Tuple[Position, ...]
    special_effects: Tuple[SpecialEffect, ...] = ()
    golden_count: int = 0
    total: int = 10

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class MatchFailure:
    reason: FailureReason
    positions: Tuple[Position, ...] = field(default_factory=tuple)
    total: int | None = None

    @property
    def success(self) -> bool:
        return False


MatchOutcome = MatchSuccess | MatchFailure
