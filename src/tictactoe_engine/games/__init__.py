"""
Games module - board representation and rules.
"""

from tictactoe_engine.games.board import Board
from tictactoe_engine.games.board_rules import (
    WIN_LINES,
    board_full,
    complete_lines,
    empty_cells,
    first_complete_line,
    in_bounds,
)

__all__ = [
    "Board",
    "WIN_LINES",
    "board_full",
    "complete_lines",
    "empty_cells",
    "first_complete_line",
    "in_bounds",
]
