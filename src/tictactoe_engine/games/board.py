"""
Board - the 3x3 grid shared by every move-selection strategy.

Uses int8 board:
    0 = empty
    1 = X
    2 = O

The board is mutated in place: public moves go through apply_move(), and
search code places a symbol, recurses, then calls undo_move().
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np

from tictactoe_engine.core.types import BOARD_SIZE, Move, Symbol, WinningLine
from tictactoe_engine.games.board_rules import (
    WIN_LINES,
    board_full,
    complete_lines,
    empty_cells,
    first_complete_line,
    in_bounds,
)


class Board:
    """Fixed-size Tic-Tac-Toe board."""

    __slots__ = ('cells', '_flat')

    def __init__(self, cells: Optional[np.ndarray] = None):
        if cells is None:
            cells = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        # Always a private copy; the caller's array is never aliased
        cells = np.array(cells, dtype=np.int8)
        if cells.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got {cells.shape}")
        self.cells = cells
        # View, not a copy: writes through either name are shared
        self._flat = self.cells.reshape(-1)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from three 3-character strings.

        Example:
            Board.from_rows(["OO ", "XX ", "   "])

        ' ', '_' and '.' are read as empty.
        """
        grid = []
        for row in rows:
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Row must have {BOARD_SIZE} cells: {row!r}")
            grid.append([
                Symbol.EMPTY if ch in " _." else Symbol.parse(ch)
                for ch in row
            ])
        return cls(np.array(grid, dtype=np.int8))

    def copy(self) -> "Board":
        return Board(self.cells)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def apply_move(self, row: int, col: int, symbol: Symbol) -> bool:
        """
        Write symbol into (row, col) if the cell is empty.

        Returns:
            True if the cell was written, False if it was already occupied.

        Raises:
            ValueError: coordinates are off the board, or symbol is EMPTY.
        """
        if not in_bounds(self.cells, row, col):
            raise ValueError(f"Cell ({row},{col}) is off the board")
        if symbol == Symbol.EMPTY:
            raise ValueError("Cannot place an EMPTY symbol")

        if self.cells[row, col] != Symbol.EMPTY:
            return False
        self.cells[row, col] = int(symbol)
        return True

    def undo_move(self, row: int, col: int) -> None:
        """Clear a cell. Used by search to take back a speculative move."""
        self.cells[row, col] = 0

    def reset(self) -> None:
        self.cells.fill(0)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __getitem__(self, pos: Move) -> Symbol:
        return Symbol(int(self.cells[pos]))

    def check_win(self, symbol: Symbol) -> bool:
        """True if any row, column or diagonal is filled with symbol."""
        if symbol == Symbol.EMPTY:
            return False
        return bool(np.any(complete_lines(self._flat, int(symbol))))

    def winner(self) -> Symbol:
        """Symbol owning a complete line, or EMPTY."""
        idx = first_complete_line(self._flat)
        if idx < 0:
            return Symbol.EMPTY
        return Symbol(int(self._flat[WIN_LINES[idx][0]]))

    def winning_line(self) -> Optional[WinningLine]:
        """
        First complete line, scanning rows, then columns, then the main
        diagonal, then the anti-diagonal. None if there is no winner.
        """
        idx = first_complete_line(self._flat)
        if idx < 0:
            return None
        start, end = int(WIN_LINES[idx][0]), int(WIN_LINES[idx][-1])
        return WinningLine(*divmod(start, BOARD_SIZE), *divmod(end, BOARD_SIZE))

    def is_full(self) -> bool:
        return board_full(self.cells)

    def is_empty(self) -> bool:
        return not np.any(self.cells)

    def empty_cells(self) -> List[Move]:
        """Empty positions, row-major."""
        return empty_cells(self.cells)

    def count(self, symbol: Symbol) -> int:
        return int(np.count_nonzero(self.cells == int(symbol)))

    def state_string(self) -> str:
        lines = ["╭───┬───┬───╮"]
        for i in range(BOARD_SIZE):
            row = "│ " + " │ ".join(
                Symbol(int(self.cells[i, j])).char for j in range(BOARD_SIZE)
            ) + " │"
            lines.append(row)
            if i < BOARD_SIZE - 1:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)

    def __repr__(self) -> str:
        rows = ["".join(Symbol(int(v)).char for v in row) for row in self.cells]
        return f"Board.from_rows({rows!r})"
