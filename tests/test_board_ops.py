import random

import pytest

from tenfold.components.tile import TileKind
from tenfold.errors import OutOfBoundsError
from tenfold.events.bus import EventBus
from tenfold.systems.board import BoardSystem
from tenfold.systems.board_ops import (
    all_dead,
    any_solvable_subrect,
    find_solvable_subrect,
    neighborhood,
    remove_tiles,
    reshuffle_alive,
    tile_at,
)
from tenfold.world import create_world
from tests.helpers import arrange_board


def _world(rows=3, cols=3):
    bus = EventBus()
    world = create_world(bus, rng=random.Random(5))
    BoardSystem(world, bus, rows, cols)
    return world


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3), (10, 10)])
def test_tile_at_rejects_out_of_bounds(row, col):
    world = _world()
    with pytest.raises(OutOfBoundsError):
        tile_at(world, row, col)


def test_out_of_bounds_is_an_index_error():
    world = _world()
    with pytest.raises(IndexError):
        tile_at(world, 3, 3)


def test_remove_tombstones_and_skips_dead_tiles():
    world = _world()
    arrange_board(world, [[1, 2, 3], [4, 0, 6], [7, 8, 9]])
    removed = remove_tiles(world, [(0, 0), (1, 1), (2, 2)])
    assert removed == [(0, 0), (2, 2)]
    for row, col in [(0, 0), (1, 1), (2, 2)]:
        tile = tile_at(world, row, col)
        assert not tile.alive
        assert tile.value == 0
    assert tile_at(world, 0, 1).alive


def test_reshuffle_keeps_kinds_and_tombstones():
    world = _world()
    arrange_board(
        world,
        [[1, 0, 3], [4, 5, 0], [7, 8, 9]],
        kinds={(0, 0): TileKind.BOMB, (2, 2): TileKind.WILD},
    )
    shuffled = reshuffle_alive(world, random.Random(7))
    assert (0, 1) not in shuffled and (1, 2) not in shuffled
    assert len(shuffled) == 7
    assert tile_at(world, 0, 1).value == 0 and not tile_at(world, 0, 1).alive
    assert tile_at(world, 0, 0).kind is TileKind.BOMB
    assert tile_at(world, 2, 2).kind is TileKind.WILD
    for row, col in shuffled:
        assert 1 <= tile_at(world, row, col).value <= 9


def test_all_dead():
    world = _world(2, 2)
    arrange_board(world, [[0, 0], [0, 4]])
    assert not all_dead(world)
    remove_tiles(world, [(1, 1)])
    assert all_dead(world)


def test_neighborhood_is_clipped_to_board():
    world = _world(3, 3)
    assert sorted(neighborhood(world, 0, 0)) == [(0, 0), (0, 1), (1, 0), (1, 1)]
    assert len(neighborhood(world, 1, 1)) == 9
    assert sorted(neighborhood(world, 2, 1)) == [(1, 0), (1, 1), (1, 2), (2, 0), (2, 1), (2, 2)]


def test_solvable_scan_finds_first_rectangle_in_scan_order():
    world = _world(3, 3)
    arrange_board(world, [[9, 9, 9], [9, 9, 4], [9, 9, 6]])
    found = find_solvable_subrect(world)
    assert found is not None
    selection, positions = found
    assert selection.corners == ((1, 2), (2, 2))
    assert positions == [(1, 2), (2, 2)]


def test_solvable_scan_skips_tombstones_inside_rectangles():
    world = _world(1, 3)
    arrange_board(world, [[3, 0, 7]])
    selection, positions = find_solvable_subrect(world)
    assert selection.corners == ((0, 0), (0, 2))
    assert positions == [(0, 0), (0, 2)]


def test_single_tile_never_counts_as_solvable():
    world = _world(2, 2)
    arrange_board(world, [[0, 0], [0, 9]])
    assert not any_solvable_subrect(world)


def test_deadlocked_board_has_no_solvable_rectangle():
    world = _world(3, 3)
    arrange_board(world, [[9, 9, 9], [9, 9, 9], [9, 9, 9]])
    assert not any_solvable_subrect(world)
    assert find_solvable_subrect(world) is None


def test_wild_tiles_count_with_face_value_in_scan():
    world = _world(1, 2)
    arrange_board(world, [[9, 9]], kinds={(0, 1): TileKind.WILD})
    assert not any_solvable_subrect(world)
