# src/aoc_kit/solvers/day02.py

"""Day 2: invalid product identifiers hidden in ID ranges.

An identifier is invalid when its digits are one block repeated. Part 1 only
counts blocks repeated exactly twice; part 2 counts any repetition count >= 2.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from aoc_kit.observability.base import MetricsHook, NoOpMetricsHook
from aoc_kit.parsers import parse_whole

from .base import Solution, timed_solve

logger = logging.getLogger(__name__)

DAY = 2


@dataclass(frozen=True)
class IdRange:
    """Inclusive range of identifiers."""

    start: int
    end: int

    @classmethod
    def from_str(cls, text: str) -> "IdRange":
        """Parse `start-end`, e.g. `"100-200"`."""
        parts = text.strip().split("-")
        if len(parts) != 2:
            raise ValueError(f"Invalid range format: '{text}'. Expected 'start-end'")

        start_text, end_text = parts
        try:
            start = int(start_text)
        except ValueError:
            raise ValueError(f"Invalid start value: '{start_text}'") from None
        try:
            end = int(end_text)
        except ValueError:
            raise ValueError(f"Invalid end value: '{end_text}'") from None

        return cls(start=start, end=end)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))


def parse_ranges(content: str) -> list[IdRange]:
    return [IdRange.from_str(chunk) for chunk in content.split(",")]


def has_mirror_halves(number: int) -> bool:
    """True for numbers like 1111 or 123123: even length, equal halves."""
    digits = str(number)
    if len(digits) % 2:
        return False
    half = len(digits) // 2
    return digits[:half] == digits[half:]


def has_repeating_pattern(number: int) -> bool:
    """True for numbers made of one block repeated at least twice (777, 121212)."""
    digits = str(number)
    length = len(digits)
    for size in range(1, length // 2 + 1):
        if length % size == 0 and digits[:size] * (length // size) == digits:
            return True
    return False


def part1(ranges: list[IdRange]) -> int:
    return sum(n for r in ranges for n in r if has_mirror_halves(n))


def part2(ranges: list[IdRange]) -> int:
    return sum(n for r in ranges for n in r if has_repeating_pattern(n))


def solve(path: Path, *, metrics_hook: MetricsHook = NoOpMetricsHook()) -> Solution:
    ranges = parse_whole(path, parse_ranges, metrics_hook=metrics_hook)
    logger.debug("Parsed %d ranges from %s", len(ranges), path)
    return timed_solve(DAY, lambda: (part1(ranges), part2(ranges)), metrics_hook)
