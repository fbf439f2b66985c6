"""Glyphs used to draw the table grid and elided values."""

from __future__ import annotations

ELLIPSIS = "⋯"

MISSING_FILL = "╳"

COLUMN_SEP = " │ "
COLUMN_HEADER_SEP = "═╪═"
COLUMN_HEADER_BAR = "═"

FIELD_SEP = "|"
