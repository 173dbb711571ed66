"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the engine:
- Symbol: cell values, stored as int8 on the board
- Difficulty: the closed set of move-selection tiers
- Outcome: a finished (or running) round from one side's view
- WinningLine / Stats: small value types
"""

from __future__ import annotations

from enum import Enum, IntEnum, auto
from typing import NamedTuple, Tuple


Move = Tuple[int, int]

# Returned by best_move when there is nothing left to play
NO_MOVE: Move = (-1, -1)

BOARD_SIZE = 3

# Terminal score magnitude; the ply depth is subtracted from it
WIN_SCORE = 10

# Opening book: center first, then the four corners
STRONG_OPENINGS: Tuple[Move, ...] = (
    (1, 1),
    (0, 0),
    (0, 2),
    (2, 0),
    (2, 2),
)


class Symbol(IntEnum):
    """Cell value. Matches the int8 encoding used on the board."""

    EMPTY = 0
    X = 1
    O = 2

    @property
    def opponent(self) -> "Symbol":
        if self is Symbol.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Symbol(3 - self.value)  # Toggle 1↔2

    @property
    def char(self) -> str:
        return _SYMBOL_CHARS[self]

    @classmethod
    def parse(cls, text: str) -> "Symbol":
        """Parse 'X' / 'O' (case-insensitive)."""
        key = text.strip().upper()
        for symbol in (cls.X, cls.O):
            if symbol.name == key:
                return symbol
        raise ValueError(f"Unknown symbol: {text!r}. Expected 'X' or 'O'")


_SYMBOL_CHARS = {Symbol.EMPTY: " ", Symbol.X: "X", Symbol.O: "O"}


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    UNBEATABLE = "unbeatable"

    @classmethod
    def parse(cls, name: str) -> "Difficulty":
        """
        Look up a tier by name.

        "hard" is accepted as an alias for UNBEATABLE.
        """
        key = name.strip().lower()
        if key == "hard":
            return cls.UNBEATABLE
        for tier in cls:
            if tier.value == key:
                return tier
        available = ", ".join(t.value for t in cls)
        raise ValueError(f"Unknown difficulty: {name}. Available: {available}")


class Outcome(Enum):
    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


class WinningLine(NamedTuple):
    """End points of a completed line, as (row, col) pairs."""

    start_row: int
    start_col: int
    end_row: int
    end_col: int


class Stats(NamedTuple):
    """Outcome counts from one side's view."""

    wins: int = 0
    ties: int = 0
    losses: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.ties + self.losses

    @property
    def distribution(self) -> Tuple[float, float, float]:
        t = self.total
        if t == 0:
            return (0.0, 0.0, 0.0)
        return (self.wins / t, self.ties / t, self.losses / t)

    def record(self, outcome: Outcome) -> "Stats":
        """Return a copy with one more game counted. NEUTRAL is ignored."""
        if outcome is Outcome.WIN:
            return self._replace(wins=self.wins + 1)
        if outcome is Outcome.TIE:
            return self._replace(ties=self.ties + 1)
        if outcome is Outcome.LOSS:
            return self._replace(losses=self.losses + 1)
        return self

    def __add__(self, other: "Stats") -> "Stats":  # type: ignore[override]
        return Stats(
            self.wins + other.wins,
            self.ties + other.ties,
            self.losses + other.losses,
        )
