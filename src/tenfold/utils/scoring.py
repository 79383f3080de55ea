from __future__ import annotations

import math

from tenfold.constants import COMBO_TIERS, POINTS_PER_TILE


def combo_multiplier(combo: int) -> float:
    for threshold, multiplier in COMBO_TIERS:
        if combo >= threshold:
            return multiplier
    return 1.0


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def match_score(tile_count: int, golden_count: int, combo: int) -> int:
    """Points for one match: 10 per tile, doubled per golden tile, scaled by combo."""

    base = tile_count * POINTS_PER_TILE
    for _ in range(golden_count):
        base *= 2
    return round_half_up(base * combo_multiplier(combo))


def efficiency_percent(score: int, attempts: int) -> int:
    if attempts <= 0:
        return 0
    return round_half_up(score / (attempts * POINTS_PER_TILE) * 100)
