import random
from collections import Counter

import pytest

from tenfold.components.tile import TileKind
from tenfold.engine import PuzzleEngine
from tenfold.config import RoundConfig
from tenfold.systems.board_ops import roll_tile


class _ScriptedRandom(random.Random):
    """Random that replays fixed draws so classification thresholds can be checked."""

    def __init__(self, rolls, values):
        super().__init__(0)
        self._rolls = list(rolls)
        self._values = list(values)
        self.calls = []

    def random(self):
        self.calls.append("random")
        return self._rolls.pop(0)

    def randint(self, a, b):
        self.calls.append("randint")
        return self._values.pop(0)


@pytest.mark.parametrize(
    "roll, expected",
    [
        (0.0, TileKind.BOMB),
        (0.0099, TileKind.BOMB),
        (0.01, TileKind.WILD),
        (0.0299, TileKind.WILD),
        (0.03, TileKind.TIME_BONUS),
        (0.0599, TileKind.TIME_BONUS),
        (0.06, TileKind.GOLDEN),
        (0.1099, TileKind.GOLDEN),
        (0.11, TileKind.NORMAL),
        (0.99, TileKind.NORMAL),
    ],
)
def test_kind_thresholds(roll, expected):
    rng = _ScriptedRandom([roll], [4])
    tile = roll_tile(rng)
    assert tile.kind is expected
    assert tile.value == 4
    assert tile.alive


def test_kind_roll_precedes_value_draw():
    rng = _ScriptedRandom([0.5, 0.005], [7, 2])
    first = roll_tile(rng)
    second = roll_tile(rng)
    assert rng.calls == ["random", "randint", "random", "randint"]
    assert (first.kind, first.value) == (TileKind.NORMAL, 7)
    assert (second.kind, second.value) == (TileKind.BOMB, 2)


def test_same_seed_generates_same_board():
    first = PuzzleEngine(rng=random.Random(99))
    second = PuzzleEngine(rng=random.Random(99))
    first.start_round(RoundConfig(rows=5, cols=5))
    second.start_round(RoundConfig(rows=5, cols=5))
    assert first.snapshot().board == second.snapshot().board


def test_started_board_values_and_kind_frequencies():
    engine = PuzzleEngine(rng=random.Random(2024))
    kinds = Counter()
    total = 0
    for _ in range(60):
        engine.start_round(RoundConfig(rows=20, cols=20))
        for row in engine.snapshot().board:
            for tile in row:
                assert tile.alive
                assert 1 <= tile.value <= 9
                kinds[tile.kind] += 1
                total += 1
    assert total == 24000
    expected = {
        TileKind.BOMB: 0.01,
        TileKind.WILD: 0.02,
        TileKind.TIME_BONUS: 0.03,
        TileKind.GOLDEN: 0.05,
        TileKind.NORMAL: 0.89,
    }
    for kind, share in expected.items():
        assert kinds[kind] / total == pytest.approx(share, abs=0.01)
