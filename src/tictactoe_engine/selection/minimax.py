"""
Unbeatable tier: exhaustive minimax with alpha-beta pruning.

The board is small enough to search to the end, so there is no depth limit
and no heuristic evaluation. Terminal positions score:

    AI win        ->  WIN_SCORE - depth
    opponent win  ->  depth - WIN_SCORE
    draw          ->  0

Subtracting the ply depth makes the search prefer quicker wins and slower
losses. Moves are tried in row-major order and the board is mutated in
place (place, recurse, undo).

An empty board is never searched: the opening is drawn from
STRONG_OPENINGS so games against this tier do not all start the same way.
"""

from __future__ import annotations

import math
import random
from typing import Optional

from tictactoe_engine.core.types import NO_MOVE, STRONG_OPENINGS, WIN_SCORE, Move, Symbol
from tictactoe_engine.games.board import Board


def minimax(
    board: Board,
    maximizing: bool,
    depth: int,
    alpha: float,
    beta: float,
    ai_symbol: Symbol = Symbol.O,
) -> float:
    """
    Score the position for ai_symbol.

    Args:
        board: Position to score. Restored before returning.
        maximizing: True if ai_symbol is to move.
        depth: Plies played since the root position.
        alpha: Best score the maximizer can already guarantee.
        beta: Best score the minimizer can already guarantee.
        ai_symbol: The maximizing side.

    Returns:
        Exact minimax value, or a bound once the node is cut off.
    """
    opponent = ai_symbol.opponent
    if board.check_win(ai_symbol):
        return WIN_SCORE - depth
    if board.check_win(opponent):
        return depth - WIN_SCORE
    if board.is_full():
        return 0

    if maximizing:
        best = -math.inf
        for row, col in board.empty_cells():
            board.apply_move(row, col, ai_symbol)
            score = minimax(board, False, depth + 1, alpha, beta, ai_symbol)
            board.undo_move(row, col)
            best = max(best, score)
            alpha = max(alpha, score)
            if beta <= alpha:  # beta cutoff
                return best
        return best

    best = math.inf
    for row, col in board.empty_cells():
        board.apply_move(row, col, opponent)
        score = minimax(board, True, depth + 1, alpha, beta, ai_symbol)
        board.undo_move(row, col)
        best = min(best, score)
        beta = min(beta, score)
        if beta <= alpha:  # alpha cutoff
            return best
    return best


def strong_opening(rng: Optional[random.Random] = None) -> Move:
    """Center or one of the corners, uniformly."""
    return (rng or random).choice(STRONG_OPENINGS)


def minimax_move(
    board: Board,
    ai_symbol: Symbol = Symbol.O,
    rng: Optional[random.Random] = None,
) -> Move:
    """
    Best move for ai_symbol.

    Deterministic on any non-empty board: ties go to the first cell in
    row-major order that reaches the best score.

    Returns:
        (row, col), or NO_MOVE when the board is full.
    """
    if board.is_empty():
        return strong_opening(rng)

    best_score = -math.inf
    best_move = NO_MOVE
    for row, col in board.empty_cells():
        board.apply_move(row, col, ai_symbol)
        score = minimax(board, False, 1, -math.inf, math.inf, ai_symbol)
        board.undo_move(row, col)
        if score > best_score:
            best_score = score
            best_move = (row, col)
    return best_move
