# src/aoc_kit/solvers/base.py

import logging
from collections.abc import Callable
from pathlib import Path
from time import monotonic
from typing import Protocol

from pydantic import BaseModel

from aoc_kit.observability import names
from aoc_kit.observability.base import MetricsHook

logger = logging.getLogger(__name__)


class Solution(BaseModel):
    """Both answers for one puzzle day."""

    day: int
    part1: int
    part2: int

    class Config:
        extra = "forbid"


class SolveFunction(Protocol):
    def __call__(self, path: Path, *, metrics_hook: MetricsHook = ...) -> Solution: ...


def timed_solve(
    day: int,
    solve: Callable[[], tuple[int, int]],
    metrics_hook: MetricsHook,
) -> Solution:
    """Run `solve`, record duration and run/error counters, wrap the answers."""
    labels = {"day": str(day)}
    start = monotonic()
    try:
        part1, part2 = solve()
    except Exception:
        metrics_hook.increment(names.SOLVER_ERRORS_TOTAL, labels=labels)
        raise

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.SOLVER_DURATION, elapsed_ms, labels=labels)
    metrics_hook.increment(names.SOLVER_RUNS_TOTAL, labels=labels)
    logger.info("Solved day %d in %.1f ms", day, elapsed_ms)
    return Solution(day=day, part1=part1, part2=part2)
