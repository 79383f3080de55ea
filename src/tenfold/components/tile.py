from dataclasses import dataclass
from enum import Enum


class TileKind(Enum):
    NORMAL = "normal"
    GOLDEN = "golden"
    TIME_BONUS = "time_bonus"
    WILD = "wild"
    BOMB = "bomb"


@dataclass(slots=True)
class Tile:
    """Per-cell gameplay unit.

    value: face value 1-9 while alive, 0 once removed (tombstone).
    hinted: transient highlight set by the hint skill; cleared on expiry or removal.
    """
    value: int
    kind: TileKind = TileKind.NORMAL
    alive: bool = True
    hinted: bool = False


@dataclass(frozen=True, slots=True)
class TileView:
    """Read-only copy of a tile handed to renderers."""
    row: int
    col: int
    value: int
    kind: TileKind
    alive: bool
    hinted: bool
