"""
Playout runner: many engine-vs-random games, optionally in parallel.

With one worker, games run in the calling process. With more, they are
mapped over a multiprocessing pool created on first use.
"""

from __future__ import annotations

import atexit
import logging
import multiprocessing as mp
from multiprocessing.pool import Pool
from typing import Iterable, List, Optional

from tictactoe_engine.core.types import Difficulty, Stats, Symbol
from tictactoe_engine.simulation.jobs import PlayoutJob, PlayoutResult
from tictactoe_engine.simulation.worker import run_playout

logger = logging.getLogger(__name__)

DEFAULT_WORKER_COUNT = max(1, mp.cpu_count() - 1)

# ---------------------------------------------------------------------------
# Process cleanup
# ---------------------------------------------------------------------------

_active_runners: List["PlayoutRunner"] = []


def _shutdown_all():
    for runner in _active_runners[:]:
        runner.shutdown(force=True)


atexit.register(_shutdown_all)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

class PlayoutRunner:
    """Runs playout jobs and tallies the engine's results."""

    def __init__(self, num_workers: int = DEFAULT_WORKER_COUNT):
        if num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {num_workers}")
        self.num_workers = num_workers
        self._pool: Optional[Pool] = None

        _active_runners.append(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, *_):
        self.shutdown(force=exc_type is not None)

    def _ensure_pool(self) -> Pool:
        if self._pool is None:
            self._pool = Pool(processes=self.num_workers)
        return self._pool

    def shutdown(self, force: bool = False) -> None:
        if self in _active_runners:
            _active_runners.remove(self)

        if self._pool is None:
            return

        pool, self._pool = self._pool, None
        pool.terminate() if force else pool.close()
        pool.join()

    def run_batch(self, jobs: Iterable[PlayoutJob]) -> List[PlayoutResult]:
        """Run jobs, returning results in job order."""
        jobs = list(jobs)
        if not jobs:
            return []

        if self.num_workers == 1:
            return [run_playout(job) for job in jobs]

        try:
            return self._ensure_pool().map(run_playout, jobs)
        except KeyboardInterrupt:
            logger.info("Interrupted, shutting down workers")
            self.shutdown(force=True)
            raise

    def run(
        self,
        difficulty: Difficulty,
        games: int,
        ai_first: bool = False,
        seed: Optional[int] = None,
        ai_symbol: Symbol = Symbol.O,
    ) -> Stats:
        """
        Play `games` playouts and return the engine's win/tie/loss counts.

        Game i is seeded with seed + i, so a seeded run is reproducible
        regardless of worker count.
        """
        if games <= 0:
            return Stats()

        jobs = make_jobs(difficulty, games, ai_first, seed, ai_symbol)
        logger.info(
            "Running %d %s playouts on %d worker(s), AI %s",
            games, difficulty.value, self.num_workers,
            "first" if ai_first else "second",
        )

        stats = Stats()
        for result in self.run_batch(jobs):
            stats = stats.record(result.outcome)

        logger.info("Finished: %d wins, %d ties, %d losses", *stats)
        return stats


def make_jobs(
    difficulty: Difficulty,
    games: int,
    ai_first: bool = False,
    seed: Optional[int] = None,
    ai_symbol: Symbol = Symbol.O,
) -> List[PlayoutJob]:
    return [
        PlayoutJob(
            difficulty=difficulty,
            ai_first=ai_first,
            ai_symbol=ai_symbol,
            seed=None if seed is None else seed + i,
        )
        for i in range(games)
    ]
