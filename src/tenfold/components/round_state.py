from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping

from tenfold.components.skill import SkillCharges, SkillKind


@dataclass(slots=True)
class RoundState:
    """Score, clock and skill bookkeeping for the round in progress."""

    score: int = 0
    time_remaining: int = 0
    duration: int = 0
    combo: int = 0
    max_combo: int = 0
    attempts: int = 0
    skill_charges: SkillCharges = field(default_factory=SkillCharges)
    running: bool = False
    frozen: bool = False
    epoch: int = 0

    def copy(self) -> "RoundState":
        return replace(self, skill_charges=self.skill_charges.copy())

    def snapshot(self) -> "RoundSnapshot":
        charges = {kind: self.skill_charges.remaining(kind) for kind in SkillKind}
        return RoundSnapshot(
            score=self.score,
            time_remaining=self.time_remaining,
            duration=self.duration,
            combo=self.combo,
            max_combo=self.max_combo,
            attempts=self.attempts,
            skill_charges=MappingProxyType(charges),
            running=self.running,
            frozen=self.frozen,
            epoch=self.epoch,
        )


@dataclass(frozen=True, slots=True)
class RoundSnapshot:
    """Read-only copy of RoundState; ``skill_charges`` maps each SkillKind to its remaining uses."""

    score: int
    time_remaining: int
    duration: int
    combo: int
    max_combo: int
    attempts: int
    skill_charges: Mapping[SkillKind, int]
    running: bool
    frozen: bool
    epoch: int


@dataclass(frozen=True, slots=True)
class RoundSummary:
    """Final statistics reported when a round ends."""

    reason: str
    score: int
    played_seconds: int
    attempts: int
    max_combo: int
    efficiency: int
