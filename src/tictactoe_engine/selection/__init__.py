"""
Selection module - move selection strategies, one per difficulty tier.

Provides the main entry point:
- select_move(): dispatch a Difficulty to its strategy

Strategies:
- random_move():  EASY, uniform over empty cells
- tactical_move(): MEDIUM, win / block / random
- minimax_move(): UNBEATABLE, opening book + alpha-beta search
"""

from __future__ import annotations

import random
from typing import Callable, Dict, Optional

from tictactoe_engine.core.types import Difficulty, Move, Symbol
from tictactoe_engine.games.board import Board
from tictactoe_engine.selection.minimax import minimax, minimax_move, strong_opening
from tictactoe_engine.selection.random_move import random_move
from tictactoe_engine.selection.tactical import tactical_move

Strategy = Callable[[Board, Symbol, Optional[random.Random]], Move]


def _easy(board: Board, ai_symbol: Symbol, rng: Optional[random.Random]) -> Move:
    return random_move(board, rng)


STRATEGIES: Dict[Difficulty, Strategy] = {
    Difficulty.EASY: _easy,
    Difficulty.MEDIUM: tactical_move,
    Difficulty.UNBEATABLE: minimax_move,
}


def select_move(
    board: Board,
    difficulty: Difficulty,
    ai_symbol: Symbol = Symbol.O,
    rng: Optional[random.Random] = None,
) -> Move:
    """
    Select a move for ai_symbol using the strategy for difficulty.

    Args:
        board: Current position. Left unchanged on return.
        difficulty: Which strategy to run.
        ai_symbol: Side the move is chosen for.
        rng: Random source for the EASY/MEDIUM fallbacks and the opening
            book. Defaults to the module-level random generator.

    Returns:
        (row, col) of the selected cell.

    Raises:
        ValueError: EASY/MEDIUM on a full board.
    """
    return STRATEGIES[difficulty](board, ai_symbol, rng)


__all__ = [
    "STRATEGIES",
    "minimax",
    "minimax_move",
    "random_move",
    "select_move",
    "strong_opening",
    "tactical_move",
]
