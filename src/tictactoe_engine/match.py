"""
Match - round and score bookkeeping for a human player against the engine.

X always moves first. After each round the player and the AI swap symbols,
so whoever went second goes first next time. Scores count decided rounds
only; draws are tracked in `record` but do not move the score.

This is headless: a front end asks whose turn it is, forwards clicks to
play_player(), and calls play_ai() (typically after a short delay) when
ai_to_move is True.
"""

from __future__ import annotations

import logging
from typing import Optional

from tictactoe_engine.api import TicTacToeEngine
from tictactoe_engine.core.types import Move, Outcome, Stats, Symbol

logger = logging.getLogger(__name__)


class Match:
    """A series of rounds between one player and one engine."""

    def __init__(self, engine: TicTacToeEngine, player_symbol: Symbol = Symbol.X):
        if player_symbol == Symbol.EMPTY:
            raise ValueError("player_symbol must be X or O")
        self.engine = engine
        self.player_score = 0
        self.ai_score = 0
        self.record = Stats()
        self._assign_symbols(player_symbol)
        self._start_round()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def player_symbol(self) -> Symbol:
        return self._player_symbol

    @property
    def ai_symbol(self) -> Symbol:
        return self._player_symbol.opponent

    @property
    def to_move(self) -> Symbol:
        return self._to_move

    @property
    def ai_to_move(self) -> bool:
        return not self.is_round_over() and self._to_move == self.ai_symbol

    @property
    def player_to_move(self) -> bool:
        return not self.is_round_over() and self._to_move == self._player_symbol

    def round_outcome(self) -> Outcome:
        """Outcome of the current round from the player's view."""
        board = self.engine.board
        if board.check_win(self._player_symbol):
            return Outcome.WIN
        if board.check_win(self.ai_symbol):
            return Outcome.LOSS
        if board.is_full():
            return Outcome.TIE
        return Outcome.NEUTRAL

    def is_round_over(self) -> bool:
        return self.round_outcome() is not Outcome.NEUTRAL

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def play_player(self, row: int, col: int) -> Optional[Outcome]:
        """
        Apply the player's move.

        Returns:
            The round outcome after the move (NEUTRAL while the round goes
            on), or None if the move was ignored: not the player's turn, or
            the cell is taken.
        """
        if not self.player_to_move:
            return None
        if not self.engine.make_move(row, col, self._player_symbol):
            return None
        return self._after_move()

    def play_ai(self) -> Move:
        """
        Let the engine choose and apply its move.

        Raises:
            RuntimeError: the round is over or it is the player's turn.
        """
        if not self.ai_to_move:
            raise RuntimeError("Cannot play AI move: not the AI's turn")

        move = self.engine.best_move()
        self.engine.make_move(move[0], move[1], self.ai_symbol)
        self._after_move()
        return move

    # ------------------------------------------------------------------
    # Rounds
    # ------------------------------------------------------------------

    def next_round(self) -> None:
        """Swap symbols and clear the board. Scores carry over."""
        self._assign_symbols(self.ai_symbol)
        self._start_round()

    def reset_scores(self) -> None:
        self.player_score = 0
        self.ai_score = 0
        self.record = Stats()

    def reset_game(self, player_symbol: Optional[Symbol] = None) -> None:
        """
        Start over: zero the scores and begin a fresh round with X to move.

        Keeps the current symbols unless player_symbol is given.
        """
        if player_symbol == Symbol.EMPTY:
            raise ValueError("player_symbol must be X or O")
        self.reset_scores()
        self._assign_symbols(player_symbol or self._player_symbol)
        self._start_round()

    def _assign_symbols(self, player_symbol: Symbol) -> None:
        self._player_symbol = player_symbol
        self.engine.ai_symbol = player_symbol.opponent

    def _start_round(self) -> None:
        self.engine.reset_board()
        self._to_move = Symbol.X

    def _after_move(self) -> Outcome:
        outcome = self.round_outcome()
        if outcome is Outcome.NEUTRAL:
            self._to_move = self._to_move.opponent
            return outcome

        if outcome is Outcome.WIN:
            self.player_score += 1
        elif outcome is Outcome.LOSS:
            self.ai_score += 1
        self.record = self.record.record(outcome)
        logger.info(
            "Round over: %s (player %d | AI %d)",
            outcome.name, self.player_score, self.ai_score,
        )
        return outcome
