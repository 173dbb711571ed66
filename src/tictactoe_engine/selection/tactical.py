"""
Medium tier: one-ply tactics.

Win now if possible, otherwise block the opponent's immediate win,
otherwise play randomly. Both scans are row-major, so the first qualifying
cell is always the one returned.
"""

from __future__ import annotations

import random
from typing import Optional

from tictactoe_engine.core.types import Move, Symbol
from tictactoe_engine.games.board import Board
from tictactoe_engine.selection.random_move import random_move


def _first_winning_cell(board: Board, symbol: Symbol) -> Optional[Move]:
    """First empty cell where placing symbol completes a line for symbol."""
    for row, col in board.empty_cells():
        board.apply_move(row, col, symbol)
        wins = board.check_win(symbol)
        board.undo_move(row, col)
        if wins:
            return (row, col)
    return None


def tactical_move(
    board: Board,
    ai_symbol: Symbol = Symbol.O,
    rng: Optional[random.Random] = None,
) -> Move:
    """
    Select a move for ai_symbol looking one ply ahead.

    Raises:
        ValueError: the board has no empty cell.
    """
    win = _first_winning_cell(board, ai_symbol)
    if win is not None:
        return win

    # Test the opponent's symbol: a cell that wins for them must be blocked
    block = _first_winning_cell(board, ai_symbol.opponent)
    if block is not None:
        return block

    return random_move(board, rng)
