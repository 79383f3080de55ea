from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Mapping

from tenfold.components.skill import SkillCharges
from tenfold.constants import (
    DEFAULT_FREEZE_CHARGES,
    DEFAULT_HINT_CHARGES,
    DEFAULT_RESHUFFLE_CHARGES,
    GRID_COLS,
    GRID_ROWS,
    LARGE_GRID_CELLS,
    ROUND_DURATION_SECONDS,
)
from tenfold.errors import InvalidConfigError

logger = logging.getLogger(__name__)


def _default_charges() -> SkillCharges:
    return SkillCharges(
        hint=DEFAULT_HINT_CHARGES,
        freeze_time=DEFAULT_FREEZE_CHARGES,
        reshuffle=DEFAULT_RESHUFFLE_CHARGES,
    )


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a sensible count.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class RoundConfig:
    rows: int = GRID_ROWS
    cols: int = GRID_COLS
    duration_seconds: int = ROUND_DURATION_SECONDS
    skill_charges: SkillCharges = field(default_factory=_default_charges)

    def validate(self) -> "RoundConfig":
        for name in ("rows", "cols", "duration_seconds"):
            _require_int(name, getattr(self, name))
        if not isinstance(self.skill_charges, SkillCharges):
            raise InvalidConfigError(f"skill_charges must be SkillCharges, got {self.skill_charges!r}")
        charges = self.skill_charges
        for name in ("hint", "freeze_time", "reshuffle"):
            _require_int(f"skill_charges.{name}", getattr(charges, name))

        if self.rows <= 0 or self.cols <= 0:
            raise InvalidConfigError(f"Board must have positive dimensions, got {self.rows}x{self.cols}")
        if self.duration_seconds <= 0:
            raise InvalidConfigError(f"Round duration must be positive, got {self.duration_seconds}")
        if min(charges.hint, charges.freeze_time, charges.reshuffle) < 0:
            raise InvalidConfigError(f"Skill charges cannot be negative: {charges}")
        if self.rows * self.cols > LARGE_GRID_CELLS:
            logger.warning(
                "Board of %dx%d exceeds %d cells; solvability scans will be slow",
                self.rows,
                self.cols,
                LARGE_GRID_CELLS,
            )
        return self

    def with_overrides(self, **overrides) -> "RoundConfig":
        return replace(self, **overrides)

    @classmethod
    def from_env(cls, prefix: str = "TENFOLD_", environ: Mapping[str, str] | None = None) -> "RoundConfig":
        """Build a config from ``<prefix>ROWS``-style environment variables."""

        env = os.environ if environ is None else environ

        def _int(name: str, default: int) -> int:
            raw = env.get(prefix + name)
            if raw is None or raw == "":
                return default
            try:
                return int(raw)
            except ValueError as exc:
                raise InvalidConfigError(f"{prefix}{name} must be an integer, got {raw!r}") from exc

        charges = SkillCharges(
            hint=_int("HINT_CHARGES", DEFAULT_HINT_CHARGES),
            freeze_time=_int("FREEZE_CHARGES", DEFAULT_FREEZE_CHARGES),
            reshuffle=_int("RESHUFFLE_CHARGES", DEFAULT_RESHUFFLE_CHARGES),
        )
        return cls(
            rows=_int("ROWS", GRID_ROWS),
            cols=_int("COLS", GRID_COLS),
            duration_seconds=_int("DURATION_SECONDS", ROUND_DURATION_SECONDS),
            skill_charges=charges,
        ).validate()
