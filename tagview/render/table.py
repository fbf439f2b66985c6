"""Compose styled table rows from ``Model`` queries.

Every cell is rendered to exactly its cached column width: single values are
fitted with an ellipsis, multi-valued fields are laid out as figments, and
missing values become a fill pattern. Functions here never mutate the model.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

from ..glyphs import (
    COLUMN_HEADER_BAR,
    COLUMN_HEADER_SEP,
    COLUMN_SEP,
    ELLIPSIS,
    FIELD_SEP,
    MISSING_FILL,
)
from ..table_model import FieldValue, Model
from ..text import FigmentKind, MultiFigments, fit_text, str_width
from ..ui_theme import UITheme


def printable(text: str) -> str:
    """Drop control characters, which occupy no cells but move the terminal cursor."""
    if text.isprintable():
        return text
    return "".join(ch for ch in text if unicodedata.category(ch) != "Cc")


def _place(pieces: Iterable[tuple[int, str, str]], width: int, base_style: str, reset: str) -> str:
    """Lay ``(offset, text, style)`` pieces onto a ``width``-cell line.

    Gaps and the tail are filled with blanks in ``base_style``.
    """
    out: list[str] = [base_style]
    col = 0
    for offset, text, style in pieces:
        if offset > col:
            out.append(" " * (offset - col))
            col = offset
        if style:
            out.append(f"{style}{text}{reset}{base_style}")
        else:
            out.append(text)
        col += str_width(text)
    if col < width:
        out.append(" " * (width - col))
    if base_style:
        out.append(reset)
    return "".join(out)


def _single_value_pieces(value: str, width: int) -> list[tuple[int, str, str]]:
    trim = fit_text(value, width, str_width(ELLIPSIS))
    pieces = [(0, trim.display, "")]
    if trim.emit_ellipsis:
        pieces.append((trim.ellipsis_offset(), ELLIPSIS, ""))
    return pieces


def _multi_value_pieces(values: FieldValue, width: int, theme: UITheme) -> list[tuple[int, str, str]]:
    pieces: list[tuple[int, str, str]] = []
    for figment in MultiFigments(values, width, FIELD_SEP, ELLIPSIS):
        style = theme.field_sep if figment.kind is FigmentKind.SEPARATOR else ""
        pieces.append((figment.offset, figment.text, style))
    return pieces


def render_cell(field_value: FieldValue | None, width: int, theme: UITheme, focused: bool = False) -> str:
    """Render one field into exactly ``width`` display cells."""
    if width <= 0:
        return ""
    if field_value is None:
        style = theme.missing_focus if focused else theme.missing
        return _place([(0, MISSING_FILL * width, "")], width, style, theme.reset)

    style = theme.cell_focus if focused else theme.cell
    values = tuple(printable(value) for value in field_value)
    if len(values) == 1:
        pieces = _single_value_pieces(values[0], width)
    else:
        pieces = _multi_value_pieces(values, width, theme)
    return _place(pieces, width, style, theme.reset)


def _join_cells(cells: Iterable[str], separator: str, theme: UITheme) -> str:
    styled_sep = f"{theme.column_sep}{separator}{theme.reset}" if theme.column_sep else separator
    return styled_sep.join(cells)


def render_header_row(model: Model, theme: UITheme) -> str:
    """Render column titles; the focused title is highlighted in column mode."""
    cells = []
    for x, (column, width) in enumerate(zip(model.columns, model.iter_cached_widths())):
        style = theme.header_focus if model.is_cursor_at_column(x) else theme.header
        title = printable(column.title)
        cells.append(_place(_single_value_pieces(title, width), width, style, theme.reset))
    return _join_cells(cells, COLUMN_SEP, theme)


def render_header_bar(model: Model, theme: UITheme) -> str:
    bars = [COLUMN_HEADER_BAR * width for width in model.iter_cached_widths()]
    line = COLUMN_HEADER_SEP.join(bars)
    if theme.header_bar and line:
        return f"{theme.header_bar}{line}{theme.reset}"
    return line


def render_record_row(model: Model, row: int, theme: UITheme) -> str:
    cells = []
    for x, width in enumerate(model.iter_cached_widths()):
        field_value = model.store.field_for(x, row)
        cells.append(render_cell(field_value, width, theme, focused=model.is_cursor_at_cell(x, row)))
    return _join_cells(cells, COLUMN_SEP, theme)


def render_table_lines(model: Model, theme: UITheme) -> list[str]:
    """Return header, header bar and every record row at full width."""
    model.recache()
    lines = [render_header_row(model, theme), render_header_bar(model, theme)]
    lines.extend(render_record_row(model, row, theme) for row in range(len(model.records)))
    return lines


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    """Pad/trim status text to fill one terminal row without wrapping."""
    usable = max(1, width - 1)
    if usable <= str_width(right_text):
        return fit_text(right_text, usable, 0).display
    left_limit = max(0, usable - str_width(right_text) - 1)
    left = fit_text(left_text, left_limit, str_width(ELLIPSIS))
    left_text = left.display + (ELLIPSIS if left.emit_ellipsis else "")
    gap = " " * (usable - str_width(left_text) - str_width(right_text))
    return f"{left_text}{gap}{right_text}"
