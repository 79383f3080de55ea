import logging
import random
from typing import List, Optional, Tuple

from esper import World

from tenfold.components.board import Board
from tenfold.components.board_position import BoardPosition
from tenfold.constants import GRID_COLS, GRID_ROWS
from tenfold.events.bus import EVENT_BOARD_RESHUFFLED, EventBus
from tenfold.systems.board_ops import reshuffle_alive, roll_tile
from tenfold.world import world_random

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity and the tile entities laid out on it."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        rows: int = GRID_ROWS,
        cols: int = GRID_COLS,
        *,
        rng: Optional[random.Random] = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self._rng = rng
        self.board_entity: Optional[int] = None
        self.generate(rows, cols)

    @property
    def rng(self) -> random.Random:
        return self._rng or world_random(self.world)

    def generate(self, rows: int, cols: int) -> Board:
        """Discard any previous board and fill a fresh rows x cols grid."""
        self._discard_board()
        board = Board(rows=rows, cols=cols)
        self.board_entity = self.world.create_entity(board)
        rng = self.rng
        for r in range(rows):
            row_cells: List[int] = []
            for c in range(cols):
                ent = self.world.create_entity(BoardPosition(row=r, col=c), roll_tile(rng))
                row_cells.append(ent)
            board.cells.append(row_cells)
        logger.debug("Generated %dx%d board", rows, cols)
        return board

    def reshuffle(self, reason: str) -> List[Tuple[int, int]]:
        positions = reshuffle_alive(self.world, self.rng)
        logger.debug("Reshuffled %d tiles (%s)", len(positions), reason)
        self.event_bus.emit(EVENT_BOARD_RESHUFFLED, positions=positions, reason=reason)
        return positions

    def _discard_board(self) -> None:
        for ent, _ in list(self.world.get_component(BoardPosition)):
            self.world.delete_entity(ent, immediate=True)
        for ent, _ in list(self.world.get_component(Board)):
            self.world.delete_entity(ent, immediate=True)
        self.board_entity = None

