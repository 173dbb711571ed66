"""
Easy tier: a uniformly random empty cell.
"""

from __future__ import annotations

import random
from typing import Optional

from tictactoe_engine.core.types import Move
from tictactoe_engine.games.board import Board


def random_move(board: Board, rng: Optional[random.Random] = None) -> Move:
    """
    Pick an empty cell uniformly at random.

    Samples from the list of empty cells rather than retrying random
    coordinates, so it is constant-time on a nearly full board.

    Raises:
        ValueError: the board has no empty cell.
    """
    cells = board.empty_cells()
    if not cells:
        raise ValueError("No empty cells to choose from")
    return (rng or random).choice(cells)
