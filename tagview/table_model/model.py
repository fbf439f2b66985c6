"""Composition root for the table: record store, cursor and width cache.

All structural mutation goes through wrappers that keep the width cache and
cursor consistent. The renderer only reads through the query methods here.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import NamedTuple, TypeVar

from ..glyphs import FIELD_SEP
from ..text.width import str_width
from .cursor import INITIAL_CURSOR, CursorDir, Cursor, shift_cursor
from .store import RecordStore
from .types import Column, Record
from .width_cache import WidthCache

T = TypeVar("T")


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int


class Model:
    def __init__(self, store: RecordStore, field_separator: str = FIELD_SEP) -> None:
        self.store = store
        self.cursor: Cursor = INITIAL_CURSOR
        self.width_cache = WidthCache(field_separator_width=str_width(field_separator))

    @property
    def columns(self) -> list[Column]:
        return self.store.columns

    @property
    def records(self) -> list[Record]:
        return self.store.records

    def _move_cursor(self, direction: CursorDir, n: int) -> None:
        self.cursor = shift_cursor(
            self.cursor,
            direction,
            n,
            len(self.store.columns),
            len(self.store.records),
        )

    def move_cursor_up(self, n: int = 1) -> None:
        self._move_cursor(CursorDir.UP, n)

    def move_cursor_down(self, n: int = 1) -> None:
        self._move_cursor(CursorDir.DOWN, n)

    def move_cursor_left(self, n: int = 1) -> None:
        self._move_cursor(CursorDir.LEFT, n)

    def move_cursor_right(self, n: int = 1) -> None:
        self._move_cursor(CursorDir.RIGHT, n)

    def cursor_to_xy(self) -> tuple[int, int | None]:
        return self.cursor.to_xy()

    def is_cursor_at_column(self, x: int) -> bool:
        return self.cursor.column_index() == x

    def is_cursor_at_cell(self, x: int, y: int) -> bool:
        return self.cursor.is_cell_mode() and self.cursor.to_xy() == (x, y)

    def recache(self) -> bool:
        """Bring cached widths up to date; a no-op unless something changed."""
        return self.width_cache.recache(self.store)

    def required_total_width(self, sep_width: int) -> int:
        return self.width_cache.total_display_width(sep_width)

    def required_size(self, sep_width: int) -> tuple[int, int]:
        return (self.required_total_width(sep_width), len(self.store.records))

    def column_offset(self, index: int, sep_width: int) -> int | None:
        return self.width_cache.column_offset(index, sep_width)

    def cached_width(self, index: int) -> int | None:
        return self.width_cache.get(index)

    def iter_cached_widths(self) -> Iterator[int]:
        return iter(self.width_cache)

    def important_area(self, sep_width: int) -> Rect:
        """Return the focused cell's rectangle in content coordinates.

        Column focus reports row 0 so the top of the grid stays in view.
        """
        col, row = self.cursor.to_xy()
        return Rect(
            x=self.column_offset(col, sep_width) or 0,
            y=row if row is not None else 0,
            width=self.cached_width(col) or 0,
            height=1,
        )

    def sort_by_column_index(self, index: int, descending: bool) -> bool:
        # Reordering rows leaves every column's maximum width unchanged.
        return self.store.sort_by_column_index(index, descending)

    def mutate_columns(self, func: Callable[[list[Column]], T]) -> T:
        """Apply a batch edit to the columns, then mark widths stale once."""
        try:
            return func(self.store.columns)
        finally:
            self._after_structural_change()

    def mutate_records(self, func: Callable[[list[Record]], T]) -> T:
        """Apply a batch edit to the records, then mark widths stale once."""
        try:
            return func(self.store.records)
        finally:
            self._after_structural_change()

    def _after_structural_change(self) -> None:
        self.width_cache.mark_dirty()
        self._move_cursor(CursorDir.DOWN, 0)
