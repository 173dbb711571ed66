"""
Tic-Tac-Toe decision engine.

Given a 3x3 board and a difficulty tier, pick the next move. Rendering,
input and timing belong to the caller.

Quick Start:
    from tictactoe_engine import TicTacToeEngine, Difficulty, Symbol

    engine = TicTacToeEngine(Difficulty.UNBEATABLE)
    engine.make_move(0, 0, Symbol.X)
    row, col = engine.best_move()

Modules:
    core       - Symbol / Difficulty / Outcome types and constants
    games      - Board representation and win detection
    selection  - Random, tactical and minimax move selection
    match      - Round and score bookkeeping for player vs engine
    simulation - Engine-vs-random playouts, optionally in parallel
"""

from tictactoe_engine.api import TicTacToeEngine
from tictactoe_engine.core import (
    NO_MOVE,
    Difficulty,
    Outcome,
    Stats,
    Symbol,
    WinningLine,
)
from tictactoe_engine.games import Board
from tictactoe_engine.match import Match
from tictactoe_engine.selection import select_move

__version__ = "1.0.0"

__all__ = [
    # Main API
    "TicTacToeEngine",
    "Match",
    "select_move",
    # Types
    "Board",
    "Difficulty",
    "Outcome",
    "Stats",
    "Symbol",
    "WinningLine",
    "NO_MOVE",
]
