"""Two-mode focus position: a grid cell, or a column header above the grid.

Cursors are immutable; ``shift`` returns the next cursor already clamped to
the current grid bounds, so a cursor never dangles after rows or columns are
removed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CursorDir(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def _max_index(bound: int) -> int:
    return max(0, bound - 1)


@dataclass(frozen=True)
class CellCursor:
    """Focus on the cell at column ``col``, row ``row``."""

    col: int
    row: int

    def to_xy(self) -> tuple[int, int | None]:
        return (self.col, self.row)

    def column_index(self) -> int | None:
        return None

    def is_column_mode(self) -> bool:
        return False

    def is_cell_mode(self) -> bool:
        return True

    def clamp(self, bound_x: int, bound_y: int) -> CellCursor:
        return CellCursor(min(self.col, _max_index(bound_x)), min(self.row, _max_index(bound_y)))

    def shift(self, direction: CursorDir, n: int, bound_x: int, bound_y: int) -> Cursor:
        return shift_cursor(self, direction, n, bound_x, bound_y)


@dataclass(frozen=True)
class ColumnCursor:
    """Focus on the header of column ``col``."""

    col: int

    def to_xy(self) -> tuple[int, int | None]:
        return (self.col, None)

    def column_index(self) -> int | None:
        return self.col

    def is_column_mode(self) -> bool:
        return True

    def is_cell_mode(self) -> bool:
        return False

    def clamp(self, bound_x: int, bound_y: int) -> ColumnCursor:
        return ColumnCursor(min(self.col, _max_index(bound_x)))

    def shift(self, direction: CursorDir, n: int, bound_x: int, bound_y: int) -> Cursor:
        return shift_cursor(self, direction, n, bound_x, bound_y)


Cursor = CellCursor | ColumnCursor

INITIAL_CURSOR = CellCursor(0, 0)


def _moved(cursor: Cursor, direction: CursorDir, n: int) -> Cursor:
    if isinstance(cursor, CellCursor):
        x, y = cursor.col, cursor.row
        if direction is CursorDir.UP:
            # Moving past the top row leaves the grid for the header row.
            return CellCursor(x, y - n) if n <= y else ColumnCursor(x)
        if direction is CursorDir.DOWN:
            return CellCursor(x, y + n)
        if direction is CursorDir.LEFT:
            return CellCursor(max(0, x - n), y)
        return CellCursor(x + n, y)

    x = cursor.col
    if direction is CursorDir.UP:
        return cursor
    if direction is CursorDir.DOWN:
        return CellCursor(x, max(0, n - 1))
    if direction is CursorDir.LEFT:
        return ColumnCursor(max(0, x - n))
    return ColumnCursor(x + n)


def shift_cursor(cursor: Cursor, direction: CursorDir, n: int, bound_x: int, bound_y: int) -> Cursor:
    """Move ``cursor`` ``n`` steps in ``direction`` and clamp to the bounds.

    A zero-step shift makes no transition but still clamps.
    """
    if n < 0:
        raise ValueError("shift count must be >= 0")
    moved = _moved(cursor, direction, n) if n > 0 else cursor
    clamped = moved.clamp(bound_x, bound_y)
    col, row = clamped.to_xy()
    assert col <= _max_index(bound_x), "cursor column out of bounds after clamp"
    assert row is None or row <= _max_index(bound_y), "cursor row out of bounds after clamp"
    return clamped


__all__ = [
    "CursorDir",
    "CellCursor",
    "ColumnCursor",
    "Cursor",
    "INITIAL_CURSOR",
    "shift_cursor",
]
