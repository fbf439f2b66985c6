"""Tests for the two-mode cursor state machine."""

from __future__ import annotations

import unittest

from tagview.table_model import INITIAL_CURSOR, CellCursor, ColumnCursor, CursorDir, shift_cursor


class CursorTransitionTests(unittest.TestCase):
    def test_initial_cursor_is_top_left_cell(self) -> None:
        self.assertEqual(INITIAL_CURSOR, CellCursor(0, 0))

    def test_up_from_top_row_focuses_header(self) -> None:
        self.assertEqual(CellCursor(0, 0).shift(CursorDir.UP, 1, 5, 5), ColumnCursor(0))

    def test_up_within_grid_moves_rows(self) -> None:
        self.assertEqual(CellCursor(1, 3).shift(CursorDir.UP, 2, 5, 5), CellCursor(1, 1))
        self.assertEqual(CellCursor(1, 3).shift(CursorDir.UP, 3, 5, 5), CellCursor(1, 0))
        self.assertEqual(CellCursor(1, 3).shift(CursorDir.UP, 4, 5, 5), ColumnCursor(1))

    def test_up_from_header_stays_put(self) -> None:
        self.assertEqual(ColumnCursor(2).shift(CursorDir.UP, 3, 5, 5), ColumnCursor(2))

    def test_down_from_header_enters_grid(self) -> None:
        self.assertEqual(ColumnCursor(2).shift(CursorDir.DOWN, 1, 5, 5), CellCursor(2, 0))
        self.assertEqual(ColumnCursor(2).shift(CursorDir.DOWN, 3, 5, 5), CellCursor(2, 2))

    def test_down_clamps_to_last_row(self) -> None:
        self.assertEqual(CellCursor(0, 3).shift(CursorDir.DOWN, 10, 5, 5), CellCursor(0, 4))
        self.assertEqual(ColumnCursor(0).shift(CursorDir.DOWN, 10, 5, 5), CellCursor(0, 4))

    def test_left_saturates_at_zero(self) -> None:
        self.assertEqual(CellCursor(1, 1).shift(CursorDir.LEFT, 5, 5, 5), CellCursor(0, 1))
        self.assertEqual(ColumnCursor(3).shift(CursorDir.LEFT, 5, 5, 5), ColumnCursor(0))

    def test_right_clamps_to_last_column(self) -> None:
        self.assertEqual(CellCursor(3, 0).shift(CursorDir.RIGHT, 10, 5, 5), CellCursor(4, 0))
        self.assertEqual(ColumnCursor(3).shift(CursorDir.RIGHT, 10, 5, 5), ColumnCursor(4))


class CursorClampTests(unittest.TestCase):
    def test_zero_shift_only_clamps(self) -> None:
        self.assertEqual(CellCursor(7, 9).shift(CursorDir.RIGHT, 0, 3, 2), CellCursor(2, 1))
        self.assertEqual(CellCursor(1, 1).shift(CursorDir.UP, 0, 5, 5), CellCursor(1, 1))
        self.assertEqual(ColumnCursor(1).shift(CursorDir.DOWN, 0, 5, 5), ColumnCursor(1))

    def test_empty_grid_clamps_to_origin(self) -> None:
        self.assertEqual(CellCursor(3, 3).shift(CursorDir.LEFT, 0, 0, 0), CellCursor(0, 0))
        self.assertEqual(ColumnCursor(4).shift(CursorDir.RIGHT, 2, 0, 0), ColumnCursor(0))

    def test_result_always_within_bounds(self) -> None:
        starts = [CellCursor(0, 0), CellCursor(6, 6), ColumnCursor(0), ColumnCursor(9)]
        for cursor in starts:
            for direction in CursorDir:
                for n in range(0, 4):
                    with self.subTest(cursor=cursor, direction=direction, n=n):
                        moved = shift_cursor(cursor, direction, n, 3, 4)
                        col, row = moved.to_xy()
                        self.assertLessEqual(col, 2)
                        if row is not None:
                            self.assertLessEqual(row, 3)

    def test_negative_shift_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            CellCursor(0, 0).shift(CursorDir.DOWN, -1, 5, 5)


class CursorQueryTests(unittest.TestCase):
    def test_cell_cursor_queries(self) -> None:
        cursor = CellCursor(2, 4)
        self.assertEqual(cursor.to_xy(), (2, 4))
        self.assertIsNone(cursor.column_index())
        self.assertTrue(cursor.is_cell_mode())
        self.assertFalse(cursor.is_column_mode())

    def test_column_cursor_queries(self) -> None:
        cursor = ColumnCursor(3)
        self.assertEqual(cursor.to_xy(), (3, None))
        self.assertEqual(cursor.column_index(), 3)
        self.assertTrue(cursor.is_column_mode())
        self.assertFalse(cursor.is_cell_mode())


if __name__ == "__main__":
    unittest.main()
