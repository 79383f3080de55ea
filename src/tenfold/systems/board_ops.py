from __future__ import annotations

import random
from typing import Iterable, List, Sequence, Tuple

from esper import World

from tenfold.components.board import Board
from tenfold.components.selection import Selection
from tenfold.components.tile import Tile, TileKind
from tenfold.constants import (
    BOMB_THRESHOLD,
    GOLDEN_THRESHOLD,
    MAX_TILE_VALUE,
    MIN_SELECTION_TILES,
    MIN_TILE_VALUE,
    TARGET_SUM,
    TIME_BONUS_THRESHOLD,
    WILD_THRESHOLD,
)
from tenfold.errors import InvalidSelectionError, OutOfBoundsError

Position = Tuple[int, int]
TileEntry = Tuple[Position, Tile]


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def board_dimensions(world: World) -> Tuple[int, int] | None:
    for _, board in world.get_component(Board):
        return board.rows, board.cols
    return None


def ensure_in_bounds(world: World, row: int, col: int) -> None:
    board = get_board(world)
    if not (0 <= row < board.rows and 0 <= col < board.cols):
        raise OutOfBoundsError(row, col, board.rows, board.cols)


def get_entity_at(world: World, row: int, col: int) -> int | None:
    dims = board_dimensions(world)
    if dims is None:
        return None
    rows, cols = dims
    if not (0 <= row < rows and 0 <= col < cols):
        return None
    return get_board(world).cells[row][col]


def tile_at(world: World, row: int, col: int) -> Tile:
    ensure_in_bounds(world, row, col)
    entity = get_board(world).cells[row][col]
    return world.component_for_entity(entity, Tile)


def roll_tile(rng: random.Random) -> Tile:
    """Draw one tile: a kind roll first, then an independent face value."""

    roll = rng.random()
    if roll < BOMB_THRESHOLD:
        kind = TileKind.BOMB
    elif roll < WILD_THRESHOLD:
        kind = TileKind.WILD
    elif roll < TIME_BONUS_THRESHOLD:
        kind = TileKind.TIME_BONUS
    elif roll < GOLDEN_THRESHOLD:
        kind = TileKind.GOLDEN
    else:
        kind = TileKind.NORMAL
    value = rng.randint(MIN_TILE_VALUE, MAX_TILE_VALUE)
    return Tile(value=value, kind=kind)


def iter_tiles(world: World) -> Iterable[TileEntry]:
    """Yield every tile in row-major order."""
    board = get_board(world)
    for row in range(board.rows):
        for col in range(board.cols):
            yield (row, col), world.component_for_entity(board.cells[row][col], Tile)


def alive_tiles_in(world: World, selection: Selection) -> List[TileEntry]:
    """Alive tiles fully inside ``selection`` in row-major order; corners must be on the board."""

    if selection.top > selection.bottom or selection.left > selection.right:
        raise InvalidSelectionError(selection.top, selection.left, selection.bottom, selection.right)
    for row, col in selection.corners:
        ensure_in_bounds(world, row, col)
    board = get_board(world)
    entries: List[TileEntry] = []
    for row, col in selection.positions():
        tile: Tile = world.component_for_entity(board.cells[row][col], Tile)
        if tile.alive:
            entries.append(((row, col), tile))
    return entries


def remove_tiles(world: World, positions: Iterable[Position]) -> List[Position]:
    """Tombstone alive tiles at positions and return the ones actually removed."""

    removed: List[Position] = []
    for row, col in positions:
        tile = tile_at(world, row, col)
        if not tile.alive:
            continue
        tile.alive = False
        tile.value = 0
        tile.hinted = False
        removed.append((row, col))
    return removed


def reshuffle_alive(world: World, rng: random.Random) -> List[Position]:
    """Redraw the face value of every alive tile; kinds and tombstones stay put."""

    shuffled: List[Position] = []
    for position, tile in iter_tiles(world):
        if not tile.alive:
            continue
        tile.value = rng.randint(MIN_TILE_VALUE, MAX_TILE_VALUE)
        shuffled.append(position)
    return shuffled


def all_dead(world: World) -> bool:
    return not any(tile.alive for _, tile in iter_tiles(world))


def neighborhood(world: World, row: int, col: int, radius: int = 1) -> List[Position]:
    """Square of cells around (row, col), clipped to the board."""

    board = get_board(world)
    positions: List[Position] = []
    for r in range(row - radius, row + radius + 1):
        for c in range(col - radius, col + radius + 1):
            if 0 <= r < board.rows and 0 <= c < board.cols:
                positions.append((r, c))
    return positions


def alive_value_grid(world: World) -> List[List[int]]:
    board = get_board(world)
    grid = [[0] * board.cols for _ in range(board.rows)]
    for (row, col), tile in iter_tiles(world):
        if tile.alive:
            grid[row][col] = tile.value
    return grid


def _prefix_table(grid: Sequence[Sequence[int]], rows: int, cols: int, *, counts: bool) -> List[List[int]]:
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for r in range(rows):
        running = 0
        for c in range(cols):
            cell = grid[r][c]
            running += (1 if cell > 0 else 0) if counts else cell
            table[r + 1][c + 1] = table[r][c + 1] + running
    return table


def _rect_total(table: List[List[int]], top: int, left: int, bottom: int, right: int) -> int:
    return (
        table[bottom + 1][right + 1]
        - table[top][right + 1]
        - table[bottom + 1][left]
        + table[top][left]
    )


def find_solvable_subrect(world: World) -> Tuple[Selection, List[Position]] | None:
    """First sub-rectangle, in scan order, whose alive face values sum to the target.

    Visits every rectangle (start row, start col, end row, end col ascending), so
    the cost is O(rows^2 * cols^2); wild tiles count with their face value.
    """

    dims = board_dimensions(world)
    if dims is None:
        return None
    rows, cols = dims
    grid = alive_value_grid(world)
    sums = _prefix_table(grid, rows, cols, counts=False)
    alive = _prefix_table(grid, rows, cols, counts=True)
    for top in range(rows):
        for left in range(cols):
            for bottom in range(top, rows):
                for right in range(left, cols):
                    if _rect_total(alive, top, left, bottom, right) < MIN_SELECTION_TILES:
                        continue
                    if _rect_total(sums, top, left, bottom, right) != TARGET_SUM:
                        continue
                    selection = Selection(top=top, left=left, bottom=bottom, right=right)
                    positions = [
                        (r, c) for r, c in selection.positions() if grid[r][c] > 0
                    ]
                    return selection, positions
    return None


def any_solvable_subrect(world: World) -> bool:
    return find_solvable_subrect(world) is not None


def set_hinted(world: World, positions: Iterable[Position], hinted: bool) -> List[Position]:
    changed: List[Position] = []
    for row, col in positions:
        entity = get_entity_at(world, row, col)
        if entity is None:
            continue
        tile: Tile = world.component_for_entity(entity, Tile)
        if hinted and not tile.alive:
            continue
        if tile.hinted != hinted:
            tile.hinted = hinted
            changed.append((row, col))
    return changed

