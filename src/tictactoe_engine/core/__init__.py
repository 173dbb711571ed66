"""
Core module - fundamental types and constants.

This module provides the building blocks used throughout the engine.
"""

from tictactoe_engine.core.types import (
    BOARD_SIZE,
    NO_MOVE,
    STRONG_OPENINGS,
    WIN_SCORE,
    Difficulty,
    Move,
    Outcome,
    Stats,
    Symbol,
    WinningLine,
)

__all__ = [
    # Types
    "Difficulty",
    "Move",
    "Outcome",
    "Stats",
    "Symbol",
    "WinningLine",
    # Constants
    "BOARD_SIZE",
    "NO_MOVE",
    "STRONG_OPENINGS",
    "WIN_SCORE",
]
