"""Per-column resolved widths, recomputed lazily after structural changes."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..text.width import joined_width, str_width
from .store import RecordStore
from .types import Column

logger = logging.getLogger(__name__)


def max_column_content_width(column: Column, store: RecordStore, field_separator_width: int) -> int:
    """Return the widest of the column title and every field in the column.

    Multi-valued fields measure as their values joined by the field separator.
    """
    max_seen = str_width(column.title)
    for field_value in store.iter_column(column.key):
        if field_value is None:
            continue
        max_seen = max(max_seen, joined_width(field_value, field_separator_width))
    return max_seen


class WidthCache:
    """Resolved content width per column index.

    Created dirty. ``recache`` recomputes only while dirty; callers mark it
    dirty after changing columns or records. ``recompute_count`` counts real
    recomputations.
    """

    def __init__(self, field_separator_width: int = 1) -> None:
        self.field_separator_width = field_separator_width
        self.widths: list[int] = []
        self.dirty = True
        self.recompute_count = 0

    def mark_dirty(self) -> None:
        self.dirty = True

    def recache(self, store: RecordStore) -> bool:
        """Recompute widths from ``store`` if dirty; return whether work was done."""
        if not self.dirty:
            return False

        widths: list[int] = []
        for column in store.columns:
            sizing = column.sizing
            if sizing.needs_content:
                content_width = max_column_content_width(column, store, self.field_separator_width)
            else:
                content_width = 0
            widths.append(sizing.resolve(content_width))

        self.widths = widths
        self.dirty = False
        self.recompute_count += 1
        assert len(self.widths) == len(store.columns), "width cache out of sync with columns"
        logger.debug("recomputed %d column widths", len(widths))
        return True

    def __len__(self) -> int:
        return len(self.widths)

    def __iter__(self) -> Iterator[int]:
        return iter(self.widths)

    def get(self, index: int) -> int | None:
        if 0 <= index < len(self.widths):
            return self.widths[index]
        return None

    def total_display_width(self, sep_width: int) -> int:
        """Sum of widths plus one separator between each adjacent pair."""
        separators = max(0, len(self.widths) - 1) * sep_width
        return sum(self.widths) + separators

    def column_offset(self, index: int, sep_width: int) -> int | None:
        """Left edge of column ``index``, or ``None`` when out of range."""
        if not (0 <= index < len(self.widths)):
            return None
        return sum(self.widths[:index]) + sep_width * index
