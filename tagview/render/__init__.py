"""Presentation helpers turning model queries into styled terminal rows."""

from __future__ import annotations

from .table import (
    build_status_line,
    printable,
    render_cell,
    render_header_bar,
    render_header_row,
    render_record_row,
    render_table_lines,
)
from .viewport import Viewport

__all__ = [
    "Viewport",
    "build_status_line",
    "printable",
    "render_cell",
    "render_header_bar",
    "render_header_row",
    "render_record_row",
    "render_table_lines",
]
