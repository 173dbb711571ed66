"""
Tests for tictactoe_engine.games.board

Tests Board mutation, win/draw detection and the winning line.
"""

import itertools

import numpy as np
import pytest

from tictactoe_engine.core.types import Symbol, WinningLine
from tictactoe_engine.games.board import Board

ALL_LINES = [
    [(0, 0), (0, 1), (0, 2)],  # Top row
    [(1, 0), (1, 1), (1, 2)],  # Middle row
    [(2, 0), (2, 1), (2, 2)],  # Bottom row
    [(0, 0), (1, 0), (2, 0)],  # Left column
    [(0, 1), (1, 1), (2, 1)],  # Middle column
    [(0, 2), (1, 2), (2, 2)],  # Right column
    [(0, 0), (1, 1), (2, 2)],  # Main diagonal
    [(0, 2), (1, 1), (2, 0)],  # Anti-diagonal
]


class TestInitialization:
    """Initial board tests."""

    def test_starts_empty(self, empty_board: Board):
        """New board has nine empty cells."""
        assert np.all(empty_board.cells == 0)
        assert empty_board.cells.dtype == np.int8
        assert empty_board.is_empty()
        assert not empty_board.is_full()

    def test_rejects_wrong_shape(self):
        """Only 3x3 arrays are accepted."""
        with pytest.raises(ValueError):
            Board(np.zeros((4, 4), dtype=np.int8))

    @pytest.mark.parametrize("cells", [
        [[0, 0], [0, 0]],
        [[0, 0, 0], [0, 0, 0]],
        [0] * 9,
    ])
    def test_rejects_wrong_shape_lists(self, cells):
        """Nested lists are validated, not just arrays."""
        with pytest.raises(ValueError, match="Board must be 3x3"):
            Board(cells)

    def test_accepts_nested_list(self):
        board = Board([[1, 0, 0], [0, 2, 0], [0, 0, 0]])
        assert board[0, 0] is Symbol.X
        assert board[1, 1] is Symbol.O

    def test_does_not_alias_input(self):
        """Writes to the board never reach the caller's array, and vice versa."""
        arr = np.zeros((3, 3), dtype=np.int8)
        board = Board(arr)
        board.apply_move(0, 0, Symbol.X)
        arr[2, 2] = Symbol.O
        assert arr[0, 0] == 0
        assert board[2, 2] is Symbol.EMPTY

    def test_from_rows(self):
        """Row strings map to symbols; ' ', '_' and '.' are empty."""
        board = Board.from_rows(["XO_", ".x ", "  o"])
        assert board[0, 0] is Symbol.X
        assert board[0, 1] is Symbol.O
        assert board[0, 2] is Symbol.EMPTY
        assert board[1, 1] is Symbol.X
        assert board[2, 2] is Symbol.O

    def test_from_rows_rejects_bad_row(self):
        """Rows must have three cells."""
        with pytest.raises(ValueError):
            Board.from_rows(["XO", "   ", "   "])


class TestApplyMove:
    """apply_move / undo_move tests."""

    def test_places_symbol(self, empty_board: Board):
        """Move on an empty cell succeeds."""
        assert empty_board.apply_move(1, 2, Symbol.X) is True
        assert empty_board[1, 2] is Symbol.X

    def test_occupied_fails_twice_and_leaves_board(self, empty_board: Board):
        """Repeated moves on a taken cell fail without changing the board."""
        empty_board.apply_move(0, 0, Symbol.X)
        before = empty_board.cells.copy()

        assert empty_board.apply_move(0, 0, Symbol.O) is False
        assert empty_board.apply_move(0, 0, Symbol.O) is False
        assert np.array_equal(empty_board.cells, before)

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, 3), (3, 3), (1, -2)])
    def test_out_of_range_raises(self, empty_board: Board, row, col):
        """Off-board coordinates fail fast."""
        with pytest.raises(ValueError, match="off the board"):
            empty_board.apply_move(row, col, Symbol.X)

    def test_empty_symbol_raises(self, empty_board: Board):
        """Placing EMPTY is not a move."""
        with pytest.raises(ValueError):
            empty_board.apply_move(0, 0, Symbol.EMPTY)

    def test_undo(self, empty_board: Board):
        """undo_move clears the cell."""
        empty_board.apply_move(2, 1, Symbol.O)
        empty_board.undo_move(2, 1)
        assert empty_board.is_empty()

    def test_reset(self, drawn_board: Board):
        """reset clears every cell."""
        drawn_board.reset()
        assert drawn_board.is_empty()
        assert drawn_board.empty_cells() == [(r, c) for r in range(3) for c in range(3)]


class TestWinDetection:
    """check_win / winner tests."""

    @pytest.mark.parametrize("line", ALL_LINES)
    @pytest.mark.parametrize("symbol", [Symbol.X, Symbol.O])
    def test_every_line(self, empty_board: Board, line, symbol):
        """A single filled line wins for its symbol only."""
        for r, c in line:
            empty_board.apply_move(r, c, symbol)

        assert empty_board.check_win(symbol)
        assert not empty_board.check_win(symbol.opponent)
        assert empty_board.winner() is symbol

    def test_two_in_a_row_is_not_a_win(self):
        """Incomplete lines do not count."""
        board = Board.from_rows(["XX ", "OO ", "   "])
        assert not board.check_win(Symbol.X)
        assert not board.check_win(Symbol.O)
        assert board.winner() is Symbol.EMPTY

    def test_mixed_line_is_not_a_win(self):
        """A full line of mixed symbols does not count."""
        board = Board.from_rows(["XOX", "   ", "   "])
        assert not board.check_win(Symbol.X)
        assert not board.check_win(Symbol.O)

    def test_empty_never_wins(self, empty_board: Board):
        """An empty line is not a win for EMPTY."""
        assert not empty_board.check_win(Symbol.EMPTY)

    def test_check_win_is_pure(self, ai_win_board: Board):
        """Queries do not mutate the board."""
        before = ai_win_board.cells.copy()
        ai_win_board.check_win(Symbol.O)
        ai_win_board.winning_line()
        assert np.array_equal(ai_win_board.cells, before)


class TestFullBoard:
    """is_full tests."""

    def test_every_occupancy_pattern(self, empty_board: Board):
        """is_full is True only when all nine cells are taken, for all 512 patterns."""
        positions = [(r, c) for r in range(3) for c in range(3)]
        for pattern in itertools.product([False, True], repeat=9):
            empty_board.reset()
            for i, ((r, c), occupied) in enumerate(zip(positions, pattern)):
                if occupied:
                    empty_board.apply_move(r, c, Symbol.X if i % 2 else Symbol.O)
            assert empty_board.is_full() is all(pattern)

    def test_draw(self, drawn_board: Board):
        """Full board without a winner."""
        assert drawn_board.is_full()
        assert drawn_board.winner() is Symbol.EMPTY
        assert drawn_board.winning_line() is None
        assert drawn_board.empty_cells() == []


class TestWinningLine:
    """winning_line tests."""

    @pytest.mark.parametrize("rows,expected", [
        (["XXX", "OO ", "   "], WinningLine(0, 0, 0, 2)),
        (["OO ", "XXX", "   "], WinningLine(1, 0, 1, 2)),
        (["OO ", "   ", "XXX"], WinningLine(2, 0, 2, 2)),
        (["XO ", "XO ", "X  "], WinningLine(0, 0, 2, 0)),
        (["OX ", "OX ", " X "], WinningLine(0, 1, 2, 1)),
        (["O X", "O X", "  X"], WinningLine(0, 2, 2, 2)),
        (["XO ", "OX ", "  X"], WinningLine(0, 0, 2, 2)),
        (["OOX", " X ", "X  "], WinningLine(0, 2, 2, 0)),
    ])
    def test_each_line(self, rows, expected):
        """Each line reports its end points."""
        assert Board.from_rows(rows).winning_line() == expected

    def test_none_without_winner(self, empty_board: Board):
        assert empty_board.winning_line() is None

    def test_rows_before_columns(self):
        """With a row and a column complete, the row is reported."""
        board = Board.from_rows(["XXX", "XOO", "XOO"])
        assert board.winning_line() == WinningLine(0, 0, 0, 2)

    def test_columns_before_diagonals(self):
        """With a column and a diagonal complete, the column is reported."""
        board = Board.from_rows(["XOO", "XXO", "XOX"])
        assert board.winning_line() == WinningLine(0, 0, 2, 0)

    def test_main_diagonal_before_anti_diagonal(self):
        """With both diagonals complete, the main diagonal is reported."""
        board = Board.from_rows(["XOX", "OXO", "XOX"])
        assert board.winning_line() == WinningLine(0, 0, 2, 2)


class TestCopyAndRender:
    """copy / state_string tests."""

    def test_copy_independent(self, ai_win_board: Board):
        """Copies do not share cells."""
        clone = ai_win_board.copy()
        clone.apply_move(2, 2, Symbol.X)
        assert ai_win_board[2, 2] is Symbol.EMPTY
        assert clone[2, 2] is Symbol.X

    def test_count(self, ai_win_board: Board):
        assert ai_win_board.count(Symbol.O) == 2
        assert ai_win_board.count(Symbol.X) == 2
        assert ai_win_board.count(Symbol.EMPTY) == 5

    def test_state_string(self, ai_win_board: Board):
        """Renders a boxed 3x3 grid."""
        lines = ai_win_board.state_string().splitlines()
        assert len(lines) == 7
        assert lines[1] == "│ O │ O │   │"
        assert lines[3] == "│ X │ X │   │"

    def test_repr_round_trips(self, block_board: Board):
        assert repr(block_board) == "Board.from_rows(['XX ', 'O  ', '   '])"
