# src/aoc_kit/solvers/day04.py

"""Day 4: paper rolls that a forklift can reach.

A roll (`@`) is accessible when fewer than four of its eight neighbours are
rolls. Part 2 keeps removing accessible rolls until none are left.
"""

import logging
from pathlib import Path

from aoc_kit.observability.base import MetricsHook, NoOpMetricsHook
from aoc_kit.parsers import read_input, split_lines

from .base import Solution, timed_solve

logger = logging.getLogger(__name__)

DAY = 4

ROLL = "@"
MAX_NEIGHBOURS = 4

Position = tuple[int, int]

DIRECTIONS: tuple[Position, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)  # fmt: skip


def parse_grid(content: str) -> frozenset[Position]:
    return frozenset(
        (row, col)
        for row, line in enumerate(split_lines(content))
        for col, ch in enumerate(line)
        if ch == ROLL
    )


def find_accessible(rolls: frozenset[Position] | set[Position]) -> set[Position]:
    return {
        (row, col)
        for row, col in rolls
        if sum((row + dr, col + dc) in rolls for dr, dc in DIRECTIONS)
        < MAX_NEIGHBOURS
    }


def part1(rolls: frozenset[Position]) -> int:
    return len(find_accessible(rolls))


def part2(rolls: frozenset[Position]) -> int:
    remaining = set(rolls)
    removed = 0
    while accessible := find_accessible(remaining):
        removed += len(accessible)
        remaining -= accessible
    return removed


def solve(path: Path, *, metrics_hook: MetricsHook = NoOpMetricsHook()) -> Solution:
    rolls = parse_grid(read_input(path, metrics_hook=metrics_hook))
    logger.debug("Found %d rolls in %s", len(rolls), path)
    return timed_solve(DAY, lambda: (part1(rolls), part2(rolls)), metrics_hook)
