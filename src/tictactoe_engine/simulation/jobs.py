"""
Job data structures for playout simulation.

Defines the input (PlayoutJob) and output (PlayoutResult) types used by
worker processes. Both are plain picklable dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tictactoe_engine.core.types import Difficulty, Move, Outcome, Symbol, WinningLine


@dataclass(frozen=True)
class PlayoutJob:
    """
    One game: the engine at `difficulty` against a uniformly random opponent.

    The job carries its own seed so a worker can replay it exactly.
    """
    difficulty: Difficulty
    ai_first: bool = False
    ai_symbol: Symbol = Symbol.O
    seed: Optional[int] = None


@dataclass
class PlayoutResult:
    """Finished game, scored from the engine's side."""
    job: PlayoutJob
    outcome: Outcome
    moves: List[Tuple[Symbol, Move]] = field(default_factory=list)
    winning_line: Optional[WinningLine] = None
