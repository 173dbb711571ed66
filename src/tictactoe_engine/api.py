"""
Public API for the Tic-Tac-Toe decision engine.

Usage:
    from tictactoe_engine import TicTacToeEngine, Difficulty, Symbol

    engine = TicTacToeEngine(Difficulty.MEDIUM)
    engine.make_move(1, 1, Symbol.X)
    row, col = engine.best_move()
    engine.make_move(row, col, Symbol.O)

The engine owns its board. Calls are synchronous and unlocked: callers
must not use one engine from several threads at once.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Union

from tictactoe_engine.core.types import NO_MOVE, Difficulty, Move, Symbol, WinningLine
from tictactoe_engine.games.board import Board
from tictactoe_engine.selection import select_move

logger = logging.getLogger(__name__)


class TicTacToeEngine:
    """
    Board + difficulty setting + move selection.

    Args:
        difficulty: Initial tier (a Difficulty or its name).
        ai_symbol: Side best_move() plays for. The maximizing side of the
            minimax search.
        rng: Random source, for reproducible EASY/MEDIUM play and openings.
    """

    def __init__(
        self,
        difficulty: Union[Difficulty, str] = Difficulty.UNBEATABLE,
        ai_symbol: Symbol = Symbol.O,
        rng: Optional[random.Random] = None,
    ):
        if ai_symbol == Symbol.EMPTY:
            raise ValueError("ai_symbol must be X or O")
        self._board = Board()
        self.ai_symbol = ai_symbol
        self.rng = rng
        self._difficulty = _coerce_difficulty(difficulty)

    # ------------------------------------------------------------------
    # Difficulty
    # ------------------------------------------------------------------

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @difficulty.setter
    def difficulty(self, value: Union[Difficulty, str]) -> None:
        self._difficulty = _coerce_difficulty(value)

    def set_difficulty(self, tier: Union[Difficulty, str]) -> None:
        self.difficulty = tier

    def get_difficulty(self) -> Difficulty:
        return self._difficulty

    # ------------------------------------------------------------------
    # Board
    # ------------------------------------------------------------------

    @property
    def board(self) -> Board:
        """The engine's own board. Read-only; mutate it through its methods."""
        return self._board

    def reset_board(self) -> None:
        self._board.reset()

    def make_move(self, row: int, col: int, symbol: Symbol) -> bool:
        """
        Place symbol at (row, col).

        Returns False, leaving the board untouched, if the cell is taken.
        Coordinates must be in [0, 3); anything else raises ValueError.
        """
        return self._board.apply_move(row, col, symbol)

    def check_win(self, symbol: Symbol) -> bool:
        return self._board.check_win(symbol)

    def is_full(self) -> bool:
        return self._board.is_full()

    def get_winning_line(self) -> Optional[WinningLine]:
        return self._board.winning_line()

    # ------------------------------------------------------------------
    # Move selection
    # ------------------------------------------------------------------

    def best_move(self) -> Move:
        """
        Move for ai_symbol at the configured difficulty.

        Returns NO_MOVE (-1, -1) when the board has no empty cell; the
        caller must not apply it.
        """
        if self._board.is_full():
            logger.debug("best_move on a full board, returning NO_MOVE")
            return NO_MOVE

        move = select_move(self._board, self._difficulty, self.ai_symbol, self.rng)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s picked %s for %s\n%s",
                self._difficulty.value, move, self.ai_symbol.char, self._board.state_string(),
            )
        return move


def _coerce_difficulty(value: Union[Difficulty, str]) -> Difficulty:
    if isinstance(value, Difficulty):
        return value
    return Difficulty.parse(value)
