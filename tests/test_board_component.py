from tenfold.events.bus import EventBus
from tenfold.world import create_world
from tenfold.systems.board import BoardSystem
from tenfold.components.board import Board
from tenfold.components.board_position import BoardPosition
from tenfold.systems.board_ops import get_entity_at


def test_board_component_exists():
    bus = EventBus(); world = create_world(bus)
    BoardSystem(world, bus, 6, 7)
    boards = list(world.get_component(Board))
    assert boards, 'Board component missing'
    ent, comp = boards[0]
    assert comp.rows == 6 and comp.cols == 7
    assert len(comp.cells) == 6 and all(len(row) == 7 for row in comp.cells)


def test_every_cell_has_one_positioned_tile():
    bus = EventBus(); world = create_world(bus)
    BoardSystem(world, bus, 3, 5)
    positions = sorted((pos.row, pos.col) for _, pos in world.get_component(BoardPosition))
    assert positions == [(r, c) for r in range(3) for c in range(5)]
    ent = get_entity_at(world, 2, 4)
    pos = world.component_for_entity(ent, BoardPosition)
    assert (pos.row, pos.col) == (2, 4)


def test_regenerate_replaces_previous_board():
    bus = EventBus(); world = create_world(bus)
    board = BoardSystem(world, bus, 4, 4)
    board.generate(2, 3)
    boards = list(world.get_component(Board))
    assert len(boards) == 1
    assert (boards[0][1].rows, boards[0][1].cols) == (2, 3)
    assert len(list(world.get_component(BoardPosition))) == 6
