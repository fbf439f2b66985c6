"""Layout and navigation model for the record table.

This package contains non-UI table primitives:
- column, sizing and record datatypes
- the record store with its stable column sort
- the two-mode cursor state machine
- the lazily recomputed column-width cache
- the ``Model`` composition root consumed by the renderer
"""

from __future__ import annotations

from .cursor import INITIAL_CURSOR, CellCursor, ColumnCursor, Cursor, CursorDir, shift_cursor
from .model import Model, Rect
from .store import RecordStore
from .types import (
    Auto,
    Bound,
    Column,
    ColumnKey,
    FieldValue,
    Fixed,
    InfoKey,
    InfoKind,
    Lower,
    MetaKey,
    Record,
    Sizing,
    Upper,
    sizing_from_json,
)
from .width_cache import WidthCache, max_column_content_width

__all__ = [
    "Auto",
    "Fixed",
    "Lower",
    "Upper",
    "Bound",
    "Sizing",
    "sizing_from_json",
    "InfoKind",
    "MetaKey",
    "InfoKey",
    "ColumnKey",
    "Column",
    "FieldValue",
    "Record",
    "RecordStore",
    "CursorDir",
    "CellCursor",
    "ColumnCursor",
    "Cursor",
    "INITIAL_CURSOR",
    "shift_cursor",
    "WidthCache",
    "max_column_content_width",
    "Model",
    "Rect",
]
