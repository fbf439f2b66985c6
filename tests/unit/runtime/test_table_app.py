"""Tests for interactive table key handling, layout and the event loop.

Exercises ``TableApp`` without a real terminal: frames are composed with
the plain theme so rows can be compared as text.
"""

from __future__ import annotations

import contextlib
import unittest
from unittest import mock

from tagview.runtime.app import TableApp
from tagview.runtime.loop import run_main_loop
from tagview.table_model import CellCursor, Column, ColumnCursor, MetaKey, Model, Record, RecordStore
from tagview.ui_theme import PLAIN_THEME

CLEAR = "\033[H\033[J"


def _app() -> TableApp:
    columns = [Column(MetaKey("ARTIST"), "Artist"), Column(MetaKey("TITLE"), "Title")]
    records = [
        Record.from_mapping({"ARTIST": "Bjork", "TITLE": "Joga"}),
        Record.from_mapping({"ARTIST": "ABBA", "TITLE": "SOS"}),
        Record.from_mapping({"TITLE": "Untitled"}),
    ]
    return TableApp(Model(RecordStore(columns=columns, records=records)), PLAIN_THEME, source_label="lib")


def _frame_lines(frame: str) -> list[str]:
    assert frame.startswith(CLEAR)
    return frame[len(CLEAR):].split("\r\n")


def _artists(app: TableApp) -> list[tuple[str, ...] | None]:
    return [record.get_meta("ARTIST") for record in app.model.records]


class TableAppKeyTests(unittest.TestCase):
    def test_navigation_keys_move_cursor(self) -> None:
        app = _app()
        app.dirty = False
        self.assertFalse(app.handle_key("DOWN"))
        self.assertTrue(app.dirty)
        app.handle_key("l")
        self.assertEqual(app.model.cursor, CellCursor(1, 1))
        app.handle_key("h")
        app.handle_key("k")
        self.assertEqual(app.model.cursor, CellCursor(0, 0))

    def test_paging_keys_move_by_page(self) -> None:
        app = _app()
        app.handle_key("PAGE_DOWN")
        self.assertEqual(app.model.cursor, CellCursor(0, 2))
        app.handle_key("PAGE_UP")
        self.assertEqual(app.model.cursor, ColumnCursor(0))

    def test_unbound_key_is_ignored(self) -> None:
        app = _app()
        app.dirty = False
        self.assertFalse(app.handle_key("x"))
        self.assertFalse(app.dirty)

    def test_sort_keys_only_apply_to_focused_header(self) -> None:
        app = _app()
        app.handle_key("ALT_A")
        self.assertEqual(_artists(app), [("Bjork",), ("ABBA",), None])

        app.handle_key("UP")
        app.handle_key("ALT_A")
        self.assertEqual(_artists(app), [None, ("ABBA",), ("Bjork",)])
        app.handle_key("ALT_D")
        self.assertEqual(_artists(app), [("Bjork",), ("ABBA",), None])
        self.assertEqual(app.model.cursor, ColumnCursor(0))

    def test_quit_keys(self) -> None:
        self.assertTrue(_app().handle_key("q"))
        self.assertTrue(_app().handle_key("CTRL_C"))


class TableAppFrameTests(unittest.TestCase):
    def test_frame_shows_header_rows_and_status(self) -> None:
        lines = _frame_lines(_app().compose_frame(60, 6))
        self.assertEqual(
            lines[:5],
            [
                "Artist │ Title   ",
                "═══════╪═════════",
                "Bjork  │ Joga    ",
                "ABBA   │ SOS     ",
                "╳╳╳╳╳╳ │ Untitled",
            ],
        )
        self.assertTrue(lines[5].startswith("lib  row 1/3 Artist"))
        self.assertTrue(lines[5].endswith("q quit"))

    def test_header_focus_status(self) -> None:
        app = _app()
        app.handle_key("RIGHT")
        app.handle_key("UP")
        status = _frame_lines(app.compose_frame(60, 6))[-1]
        self.assertTrue(status.startswith("lib  header Title"))

    def test_viewport_follows_cursor_horizontally(self) -> None:
        app = _app()
        app.handle_key("RIGHT")
        lines = _frame_lines(app.compose_frame(10, 6))
        self.assertEqual(app.viewport.left, 8)
        self.assertEqual(lines[0], " Title   ")

    def test_viewport_follows_cursor_vertically(self) -> None:
        app = _app()
        app.handle_key("DOWN")
        app.handle_key("DOWN")
        lines = _frame_lines(app.compose_frame(30, 4))
        self.assertEqual(app.viewport.top, 2)
        self.assertEqual(lines[2], "╳╳╳╳╳╳ │ Untitled")


class _FakeTerminal:
    def __init__(self) -> None:
        self.frames: list[str] = []
        self.raw_entered = False
        self.raw_exited = False
        self.sizes = iter([(40, 10), (40, 10), (50, 10), (50, 10), (50, 10)])

    @contextlib.contextmanager
    def raw_mode(self):
        self.raw_entered = True
        try:
            yield
        finally:
            self.raw_exited = True

    def size(self) -> tuple[int, int]:
        return next(self.sizes)

    def write(self, frame: str) -> None:
        self.frames.append(frame)


class RunMainLoopTests(unittest.TestCase):
    def test_redraws_after_handled_keys_and_resizes(self) -> None:
        app = _app()
        terminal = _FakeTerminal()
        keys = iter(["DOWN", "", "x", "q"])
        with mock.patch("tagview.runtime.loop.read_key", side_effect=lambda fd, timeout_ms=None: next(keys)):
            run_main_loop(app, terminal, stdin_fd=0)

        self.assertTrue(terminal.raw_entered)
        self.assertTrue(terminal.raw_exited)
        self.assertEqual(len(terminal.frames), 3)
        self.assertEqual(app.model.cursor, CellCursor(0, 1))


if __name__ == "__main__":
    unittest.main()
