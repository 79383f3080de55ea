from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Tuple


class SkillKind(Enum):
    """Player skills the engine can resolve."""
    HINT = "hint"
    FREEZE_TIME = "freeze_time"
    RESHUFFLE = "reshuffle"


@dataclass(slots=True)
class SkillCharges:
    """Remaining uses per skill for the current round."""

    hint: int = 0
    freeze_time: int = 0
    reshuffle: int = 0

    def remaining(self, kind: SkillKind) -> int:
        return getattr(self, kind.value)

    def consume(self, kind: SkillKind) -> bool:
        current = self.remaining(kind)
        if current <= 0:
            return False
        setattr(self, kind.value, current - 1)
        return True

    def copy(self) -> "SkillCharges":
        return SkillCharges(hint=self.hint, freeze_time=self.freeze_time, reshuffle=self.reshuffle)


@dataclass(frozen=True, slots=True)
class SkillResult:
    """Outcome of a skill request; ``applied`` is False when nothing changed."""

    kind: SkillKind
    applied: bool
    affected_positions: FrozenSet[Tuple[int, int]] = field(default_factory=frozenset)
