"""
Configuration and difficulty registry.
"""

from typing import Optional

from tictactoe_engine.core.types import Difficulty
from tictactoe_engine.simulation import DEFAULT_WORKER_COUNT


# ---------------------------------------------------------------------------
# Difficulty Registry
# ---------------------------------------------------------------------------

DIFFICULTIES = {tier.value: tier for tier in Difficulty}

DEFAULT_DIFFICULTY = "unbeatable"


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Playout configuration with sensible defaults."""

    def __init__(
        self,
        difficulty: str = DEFAULT_DIFFICULTY,
        games: int = 100,
        num_workers: int = DEFAULT_WORKER_COUNT,
        ai_first: bool = False,
        seed: Optional[int] = None,
    ):
        if games < 0:
            raise ValueError(f"games must be >= 0, got {games}")
        if num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {num_workers}")

        self.difficulty: Difficulty = Difficulty.parse(difficulty)
        self.games = games
        self.num_workers = min(num_workers, max(1, games))
        self.ai_first = ai_first
        self.seed = seed


# Default configuration
DEFAULT_CONFIG = Config()
