"""
Worker logic for playout simulation.

run_playout() is a top-level function so multiprocessing can pickle it.
Each call builds its own engine: nothing is shared between games.
"""

from __future__ import annotations

import random
from typing import List, Tuple

from tictactoe_engine.api import TicTacToeEngine
from tictactoe_engine.core.types import NO_MOVE, Move, Outcome, Symbol
from tictactoe_engine.selection.random_move import random_move
from tictactoe_engine.simulation.jobs import PlayoutJob, PlayoutResult


def run_playout(job: PlayoutJob) -> PlayoutResult:
    """Play one game to the end and score it for the engine."""
    rng = random.Random(job.seed)
    engine = TicTacToeEngine(job.difficulty, ai_symbol=job.ai_symbol, rng=rng)
    board = engine.board
    opponent = job.ai_symbol.opponent

    moves: List[Tuple[Symbol, Move]] = []
    ai_turn = job.ai_first

    while board.winner() == Symbol.EMPTY and not board.is_full():
        if ai_turn:
            symbol, move = job.ai_symbol, engine.best_move()
            if move == NO_MOVE:
                raise RuntimeError("Engine returned NO_MOVE on a live board")
        else:
            symbol, move = opponent, random_move(board, rng)

        if not engine.make_move(move[0], move[1], symbol):
            raise RuntimeError(f"Illegal move {move} for {symbol.char}")
        moves.append((symbol, move))
        ai_turn = not ai_turn

    return PlayoutResult(
        job=job,
        outcome=_score(engine, job.ai_symbol),
        moves=moves,
        winning_line=engine.get_winning_line(),
    )


def _score(engine: TicTacToeEngine, ai_symbol: Symbol) -> Outcome:
    if engine.check_win(ai_symbol):
        return Outcome.WIN
    if engine.check_win(ai_symbol.opponent):
        return Outcome.LOSS
    if engine.is_full():
        return Outcome.TIE
    return Outcome.NEUTRAL
