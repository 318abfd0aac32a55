import random
import unittest

import pytest

from app_state import AppState, Cursor, Settings
from matrix import Matrix


def _state(rows=5, cols=4, headers=1):
    matrix = Matrix.from_rows([[f"{r}.{c}" for c in range(cols)] for r in range(rows)])
    return AppState(matrix, Settings(header_row_count=headers))


class SettingsTests(unittest.TestCase):
    def test_defaults(self):
        s = Settings()
        self.assertEqual((s.column_width_min, s.column_width_max, s.header_row_count), (3, 20, 0))

    def test_rejects_inverted_widths(self):
        with self.assertRaises(ValueError):
            Settings(column_width_min=10, column_width_max=5)

    def test_rejects_non_positive_min(self):
        with self.assertRaises(ValueError):
            Settings(column_width_min=0)

    def test_rejects_negative_headers(self):
        with self.assertRaises(ValueError):
            Settings(header_row_count=-1)


class MovementTests(unittest.TestCase):
    def test_initial_view_and_cursor_sit_below_headers(self):
        state = _state(headers=2)
        self.assertEqual(state.view, [2, 0])
        self.assertEqual(state.cursors, [Cursor(2, 0)])

    def test_move_view_never_enters_header_block(self):
        state = _state(headers=1)
        state.move_view(-10, -10)
        self.assertEqual(state.view, [1, 0])
        state.move_view(100, 100)
        self.assertEqual(state.view, [4, 3])

    def test_move_cursors_skips_pinned(self):
        state = _state(headers=1)
        state.cursors = [Cursor(1, 0), Cursor(2, 2, pinned=True)]
        state.move_cursors(1, 1)
        self.assertEqual((state.cursors[0].row, state.cursors[0].column), (2, 1))
        self.assertEqual((state.cursors[1].row, state.cursors[1].column), (2, 2))

    def test_position_resets_only_when_cell_changes(self):
        state = _state(headers=1)
        state.cursors = [Cursor(1, 0, position=3), Cursor(1, 3, position=2)]
        state.move_cursors(0, 1)
        self.assertEqual([c.position for c in state.cursors], [0, 2])

    def test_goto_line_replaces_all_cursors(self):
        state = _state()
        state.cursors = [Cursor(1, 1), Cursor(3, 2, pinned=True)]
        state.goto_line(3)
        self.assertEqual(state.cursors, [Cursor(3, 0)])
        self.assertFalse(state.cursors[0].pinned)

    def test_clamp_positions_after_shrink(self):
        state = _state(rows=5, cols=4, headers=0)
        state.cursors = [Cursor(4, 3)]
        state.view = [4, 3]
        state.matrix = Matrix.from_rows([["a", "b"], ["c", "d"]])
        state.clamp_positions()
        self.assertEqual(state.view, [1, 1])
        self.assertEqual((state.cursors[0].row, state.cursors[0].column), (1, 1))


@pytest.mark.parametrize("headers", [0, 1, 3])
def test_random_moves_keep_cursor_and_view_in_bounds(headers):
    rng = random.Random(7)
    state = _state(rows=8, cols=5, headers=headers)
    state.cursors = [Cursor(headers, 0), Cursor(headers + 1, 2)]
    for _ in range(500):
        dy, dx = rng.randint(-3, 3), rng.randint(-3, 3)
        state.move_cursors(dy, dx)
        state.move_view(dy, dx)
        for cursor in state.cursors:
            assert headers <= cursor.row < state.data_rows
            assert 0 <= cursor.column < state.data_cols
        assert headers <= state.view[0] < state.data_rows
        assert 0 <= state.view[1] < state.data_cols
