"""Application object for the interactive table.

``TableApp`` owns the ``Model`` directly and handles every key event, layout
pass and frame composition synchronously on the loop's thread.
"""

from __future__ import annotations

import logging
import sys

from ..ansi import slice_ansi_line
from ..glyphs import COLUMN_SEP
from ..input import KeyMap, TableAction
from ..render import (
    Viewport,
    build_status_line,
    render_header_bar,
    render_header_row,
    render_record_row,
)
from ..table_model import Model
from ..text import str_width
from ..ui_theme import UITheme
from .loop import run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)

PAGE_STEP = 10
HEADER_ROWS = 2
STATUS_ROWS = 1
COLUMN_SEP_WIDTH = str_width(COLUMN_SEP)


class TableApp:
    def __init__(
        self,
        model: Model,
        theme: UITheme,
        source_label: str = "",
        keymap: KeyMap | None = None,
    ) -> None:
        self.model = model
        self.theme = theme
        self.source_label = source_label
        self.viewport = Viewport()
        self.dirty = True
        self.quit_requested = False
        self.keymap = keymap if keymap is not None else KeyMap()

    def sort_focused_column(self, descending: bool) -> bool:
        """Sort by the focused column; only applies while a header is focused."""
        column_index = self.model.cursor.column_index()
        if column_index is None:
            return False
        return self.model.sort_by_column_index(column_index, descending)

    def perform(self, action: TableAction) -> None:
        model = self.model
        if action is TableAction.UP:
            model.move_cursor_up(1)
        elif action is TableAction.DOWN:
            model.move_cursor_down(1)
        elif action is TableAction.LEFT:
            model.move_cursor_left(1)
        elif action is TableAction.RIGHT:
            model.move_cursor_right(1)
        elif action is TableAction.PAGE_UP:
            model.move_cursor_up(PAGE_STEP)
        elif action is TableAction.PAGE_DOWN:
            model.move_cursor_down(PAGE_STEP)
        elif action is TableAction.SORT_ASCENDING:
            self.sort_focused_column(descending=False)
        elif action is TableAction.SORT_DESCENDING:
            self.sort_focused_column(descending=True)
        elif action is TableAction.QUIT:
            self.quit_requested = True

    def handle_key(self, key: str) -> bool:
        """Handle one key token and return ``True`` when the app should quit."""
        action = self.keymap.action_for(key)
        if action is None:
            return False
        logger.debug("key %s -> %s", key, action.value)
        self.perform(action)
        self.dirty = True
        return self.quit_requested

    @staticmethod
    def view_size(columns: int, lines: int) -> tuple[int, int]:
        """Return the record grid's visible width and height in cells."""
        return max(1, columns - 1), max(1, lines - HEADER_ROWS - STATUS_ROWS)

    def layout(self, columns: int, lines: int) -> None:
        """Refresh widths and scroll so the focused cell is visible."""
        self.model.recache()
        view_width, view_height = self.view_size(columns, lines)
        content_width, content_height = self.model.required_size(COLUMN_SEP_WIDTH)
        self.viewport.scroll_to_area(self.model.important_area(COLUMN_SEP_WIDTH), view_width, view_height)
        self.viewport.clamp(content_width, content_height, view_width, view_height)

    def status_text(self) -> str:
        col, row = self.model.cursor_to_xy()
        column = self.model.store.column(col)
        title = column.title if column is not None else "-"
        if row is None:
            position = f"header {title}"
        else:
            position = f"row {row + 1}/{len(self.model.records)} {title}"
        label = f"{self.source_label}  " if self.source_label else ""
        return f"{label}{position}"

    def compose_frame(self, columns: int, lines: int) -> str:
        self.layout(columns, lines)
        view_width, view_height = self.view_size(columns, lines)
        left = self.viewport.left
        reset = self.theme.reset

        rows = [
            render_header_row(self.model, self.theme),
            render_header_bar(self.model, self.theme),
        ]
        record_count = len(self.model.records)
        for offset in range(view_height):
            row = self.viewport.top + offset
            rows.append(render_record_row(self.model, row, self.theme) if row < record_count else "")

        out: list[str] = ["\033[H\033[J"]
        for line in rows:
            visible = slice_ansi_line(line, left, view_width)
            out.append(visible)
            if "\033" in visible:
                out.append("\033[0m")
            out.append("\r\n")
        status = build_status_line(self.status_text(), columns, "Alt+A/D sort  q quit")
        out.append(f"{self.theme.status}{status}{reset}")
        return "".join(out)


def run_table(model: Model, theme: UITheme, source_label: str = "") -> None:
    """Run the interactive table on the process's terminal until quit."""
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    app = TableApp(model, theme, source_label=source_label)
    logger.debug("starting table with %d columns, %d records", len(model.columns), len(model.records))
    run_main_loop(app, terminal, stdin_fd)
