from dataclasses import dataclass, field
from typing import List

@dataclass(slots=True)
class Board:
    rows: int
    cols: int
    # cells[row][col] -> tile entity id; filled once at generation.
    cells: List[List[int]] = field(default_factory=list)
