import pytest

from tenfold.utils.match_math import effective_total, wild_can_complete
from tenfold.utils.scoring import (
    combo_multiplier,
    efficiency_percent,
    match_score,
    round_half_up,
)


@pytest.mark.parametrize(
    "combo, expected",
    [(0, 1.0), (1, 1.0), (2, 1.5), (3, 1.5), (4, 2.0), (5, 2.0), (6, 2.5), (7, 2.5), (8, 3.0), (20, 3.0)],
)
def test_combo_multiplier_tiers(combo, expected):
    assert combo_multiplier(combo) == expected


@pytest.mark.parametrize("value, expected", [(2.5, 3), (3.5, 4), (2.4, 2), (0.0, 0)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_match_score_examples():
    assert match_score(2, 0, 1) == 20
    assert match_score(3, 0, 2) == 45
    assert match_score(2, 1, 1) == 40
    assert match_score(2, 2, 8) == 240


def test_efficiency():
    assert efficiency_percent(0, 0) == 0
    assert efficiency_percent(20, 1) == 200
    assert efficiency_percent(20, 3) == 67


def test_wild_feasibility_bounds():
    assert wild_can_complete(9, 1)
    assert wild_can_complete(1, 1)
    assert not wild_can_complete(10, 1)
    assert not wild_can_complete(0, 1)
    assert wild_can_complete(0, 2)
    assert not wild_can_complete(5, 0)


def test_effective_total_without_wilds_is_plain_sum():
    assert effective_total([4, 5], []) == 9
    assert effective_total([9, 2], [5]) == 16
    assert effective_total([3], [1]) == 10
