"""
Shared test fixtures for tictactoe_engine tests.

Design principles:
- Boards are built from row strings so positions read like diagrams
- Seeded random sources so random tiers are reproducible
- Minimal, focused fixtures
"""

import random

import pytest

from tictactoe_engine.api import TicTacToeEngine
from tictactoe_engine.core.types import Difficulty, Symbol
from tictactoe_engine.games.board import Board


# =============================================================================
# Random Fixtures
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def ai_win_board() -> Board:
    """O to move can complete the top row at (0, 2)."""
    return Board.from_rows(["OO ", "XX ", "   "])


@pytest.fixture
def block_board() -> Board:
    """O has no win; X threatens the top row at (0, 2)."""
    return Board.from_rows(["XX ", "O  ", "   "])


@pytest.fixture
def drawn_board() -> Board:
    """Full board, no winner."""
    return Board.from_rows(["XOX", "XXO", "OXO"])


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def make_engine(rng: random.Random):
    """Factory: engine at a difficulty, optionally preloaded with a position."""
    def _make(difficulty: Difficulty = Difficulty.UNBEATABLE, rows=None) -> TicTacToeEngine:
        engine = TicTacToeEngine(difficulty, ai_symbol=Symbol.O, rng=rng)
        if rows is not None:
            engine.board.cells[:] = Board.from_rows(rows).cells
        return engine
    return _make
