from __future__ import annotations

from typing import Iterable, Sequence

from tenfold.constants import MAX_TILE_VALUE, MIN_TILE_VALUE, TARGET_SUM


def wild_can_complete(base_sum: int, wild_count: int, target: int = TARGET_SUM) -> bool:
    """Return True when ``wild_count`` wild tiles, each worth 1-9, can top ``base_sum`` up to ``target``."""

    if wild_count <= 0:
        return False
    needed = target - base_sum
    return wild_count * MIN_TILE_VALUE <= needed <= wild_count * MAX_TILE_VALUE


def effective_total(
    face_values: Iterable[int],
    wild_faces: Sequence[int],
    target: int = TARGET_SUM,
) -> int:
    """Effective selection total under the wild rule.

    Wild tiles contribute whatever completes the target when that is feasible;
    otherwise every wild tile falls back to its own face value.
    """

    base_sum = sum(face_values)
    if not wild_faces:
        return base_sum
    if wild_can_complete(base_sum, len(wild_faces), target):
        return target
    return base_sum + sum(wild_faces)
