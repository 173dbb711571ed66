"""
Command-line interface: run engine-vs-random playouts and report results.
"""

import argparse
import logging
from typing import List, Optional

from tictactoe_engine.core.types import Stats
from tictactoe_engine.simulation import PlayoutRunner
from tictactoe_engine.utils.config import DEFAULT_DIFFICULTY, DIFFICULTIES, Config

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play the Tic-Tac-Toe engine against a random opponent"
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=list(DIFFICULTIES.keys()),
        default=DEFAULT_DIFFICULTY,
        help=f"Engine difficulty (default: {DEFAULT_DIFFICULTY})",
    )
    parser.add_argument(
        "--games", "-n",
        type=int,
        default=100,
        help="Number of games to play (default: 100)",
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=None,
        help="Number of worker processes (default: CPU count - 1)",
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Engine makes the first move of every game",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Base random seed; game i uses seed + i",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every engine move",
    )
    return parser.parse_args(argv)


def format_summary(config: Config, stats: Stats) -> str:
    win, tie, loss = stats.distribution
    return (
        f"{config.difficulty.value}: {stats.total} games, AI "
        f"{'first' if config.ai_first else 'second'}\n"
        f"  wins   {stats.wins:>6}  ({win:.1%})\n"
        f"  ties   {stats.ties:>6}  ({tie:.1%})\n"
        f"  losses {stats.losses:>6}  ({loss:.1%})"
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_kwargs = {
        "difficulty": args.difficulty,
        "games": args.games,
        "ai_first": args.ai_first,
        "seed": args.seed,
    }
    if args.workers:
        config_kwargs["num_workers"] = args.workers

    try:
        config = Config(**config_kwargs)
    except ValueError as e:
        logger.error("%s", e)
        return 2

    try:
        with PlayoutRunner(config.num_workers) as runner:
            stats = runner.run(
                config.difficulty,
                config.games,
                ai_first=config.ai_first,
                seed=config.seed,
            )
    except Exception:
        logger.exception("Fatal error in playout run")
        raise

    print(format_summary(config, stats))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
