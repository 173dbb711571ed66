"""
Factory functions for creating engines and matches.
"""

import random
from typing import Optional

from tictactoe_engine.api import TicTacToeEngine
from tictactoe_engine.core.types import Difficulty, Symbol
from tictactoe_engine.match import Match


def create_engine(
    difficulty_name: str,
    ai_symbol: Symbol = Symbol.O,
    seed: Optional[int] = None,
) -> TicTacToeEngine:
    """
    Create an engine from a difficulty name.

    Args:
        difficulty_name: Tier name, parsed by Difficulty.parse (e.g., "medium", "Hard")
        ai_symbol: Side the engine plays
        seed: Seed for the engine's own random source

    Returns:
        Engine with an empty board
    """
    difficulty = Difficulty.parse(difficulty_name)
    rng = random.Random(seed) if seed is not None else None
    return TicTacToeEngine(difficulty, ai_symbol=ai_symbol, rng=rng)


def create_match(
    difficulty_name: str,
    player_symbol: str = "X",
    seed: Optional[int] = None,
) -> Match:
    """
    Create a match against a fresh engine.

    Args:
        difficulty_name: Tier name, as for create_engine
        player_symbol: "X" (moves first) or "O"
        seed: Seed for the engine's random source

    Returns:
        Match ready for its first round
    """
    player = Symbol.parse(player_symbol)
    engine = create_engine(difficulty_name, ai_symbol=player.opponent, seed=seed)
    return Match(engine, player_symbol=player)
