from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

Position = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Selection:
    """Inclusive axis-aligned rectangle of grid cells proposed for one match attempt."""

    top: int
    left: int
    bottom: int
    right: int

    @classmethod
    def spanning(cls, corner_a: Position, corner_b: Position) -> "Selection":
        """Build a selection from any two opposite corners of a drag."""
        (row_a, col_a), (row_b, col_b) = corner_a, corner_b
        return cls(
            top=min(row_a, row_b),
            left=min(col_a, col_b),
            bottom=max(row_a, row_b),
            right=max(col_a, col_b),
        )

    @property
    def corners(self) -> Tuple[Position, Position]:
        return (self.top, self.left), (self.bottom, self.right)

    def positions(self) -> Iterator[Position]:
        """Row-major scan of every cell inside the rectangle."""
        for row in range(self.top, self.bottom + 1):
            for col in range(self.left, self.right + 1):
                yield row, col
