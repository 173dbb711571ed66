"""
Simulation module - engine-vs-random playouts.

Provides the infrastructure for running many games, in parallel if
requested, and tallying the engine's results.
"""

from tictactoe_engine.simulation.jobs import PlayoutJob, PlayoutResult
from tictactoe_engine.simulation.runner import DEFAULT_WORKER_COUNT, PlayoutRunner, make_jobs
from tictactoe_engine.simulation.worker import run_playout

__all__ = [
    "PlayoutJob",
    "PlayoutResult",
    "PlayoutRunner",
    "DEFAULT_WORKER_COUNT",
    "make_jobs",
    "run_playout",
]
