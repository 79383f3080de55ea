"""Errors raised for malformed caller input.

Gameplay outcomes (failed matches, unavailable skills) are reported through
return values and never raise.
"""


class TenfoldError(Exception):
    """Base class for engine input errors."""


class OutOfBoundsError(TenfoldError, IndexError):
    """A coordinate or selection falls outside the board."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(f"Position ({row}, {col}) outside {rows}x{cols} board")
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols


class InvalidConfigError(TenfoldError, ValueError):
    """A round configuration cannot be played."""


class InvalidSelectionError(TenfoldError, ValueError):
    """A selection whose top-left corner lies below or right of its bottom-right corner."""

    def __init__(self, top: int, left: int, bottom: int, right: int) -> None:
        super().__init__(f"Selection ({top}, {left})-({bottom}, {right}) is inverted")
        self.corners = ((top, left), (bottom, right))
