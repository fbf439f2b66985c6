"""Ordered column definitions plus ordered records, with a stable sort."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from .types import Column, ColumnKey, FieldValue, Record

logger = logging.getLogger(__name__)


def _column_sort_key(field_value: FieldValue | None) -> tuple[bool, FieldValue]:
    # Absent sorts before any present value.
    if field_value is None:
        return (False, ())
    return (True, field_value)


@dataclass
class RecordStore:
    """Columns in display order and records in row order.

    Row index is record position; it only changes across an explicit sort.
    """

    columns: list[Column] = field(default_factory=list)
    records: list[Record] = field(default_factory=list)

    def column(self, index: int) -> Column | None:
        if 0 <= index < len(self.columns):
            return self.columns[index]
        return None

    def field_for(self, column_index: int, row_index: int) -> FieldValue | None:
        """Return the field at one cell, ``None`` when absent or out of range."""
        column = self.column(column_index)
        if column is None or not (0 <= row_index < len(self.records)):
            return None
        return self.records[row_index].get(column.key)

    def iter_column(self, key: ColumnKey) -> Iterator[FieldValue | None]:
        for record in self.records:
            yield record.get(key)

    def sort_by_column_index(self, column_index: int, descending: bool) -> bool:
        """Stable-sort records in place by one column's values.

        Absent values order before present ones, and the whole ordering
        (absent/present included) flips when ``descending``. Returns ``False``
        without touching records when the index is out of range.
        """
        column = self.column(column_index)
        if column is None:
            return False
        key = column.key
        self.records.sort(key=lambda record: _column_sort_key(record.get(key)), reverse=descending)
        logger.debug(
            "sorted %d records by column %d (%s)",
            len(self.records),
            column_index,
            "descending" if descending else "ascending",
        )
        return True
