# src/aoc_kit/solvers/day01.py

"""Day 1: a dial with 100 positions, turned left and right.

The dial starts at 50. Part 1 counts rotations that leave the dial on 0;
part 2 counts every click that lands on 0, including those mid-rotation.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from aoc_kit.observability.base import MetricsHook, NoOpMetricsHook
from aoc_kit.parsers import parse_lines_with

from .base import Solution, timed_solve

logger = logging.getLogger(__name__)

DAY = 1

TRACK_SIZE = 100
START_POSITION = 50


@dataclass(frozen=True)
class Rotation:
    direction: Literal["R", "L"]
    amount: int

    @classmethod
    def from_str(cls, text: str) -> "Rotation":
        """Parse `R<n>` or `L<n>`."""
        if not text:
            raise ValueError("Empty string cannot be parsed as a rotation")

        direction, raw_amount = text[0], text[1:]
        if direction not in ("R", "L"):
            raise ValueError(
                f"Invalid turn direction '{direction}', expected 'R' or 'L'"
            )

        if not (raw_amount.isascii() and raw_amount.isdigit()):
            raise ValueError(f"Failed to parse rotation amount: '{raw_amount}'")

        return cls(direction=direction, amount=int(raw_amount))

    @property
    def signed(self) -> int:
        return self.amount if self.direction == "R" else -self.amount


def part1(rotations: list[Rotation]) -> int:
    position = START_POSITION
    count = 0
    for rotation in rotations:
        position = (position + rotation.signed) % TRACK_SIZE
        if position == 0:
            count += 1
    return count


def part2(rotations: list[Rotation]) -> int:
    position = START_POSITION
    count = 0
    for rotation in rotations:
        count += zero_crossings(position, rotation)
        position = (position + rotation.signed) % TRACK_SIZE
    return count


def zero_crossings(position: int, rotation: Rotation) -> int:
    """Number of clicks landing on 0 while applying `rotation` from `position`."""
    if rotation.direction == "R":
        return (position + rotation.amount) // TRACK_SIZE
    # Turning left from p mirrors turning right from (TRACK_SIZE - p).
    mirrored = (TRACK_SIZE - position) % TRACK_SIZE
    return (mirrored + rotation.amount) // TRACK_SIZE


def solve(path: Path, *, metrics_hook: MetricsHook = NoOpMetricsHook()) -> Solution:
    rotations = parse_lines_with(path, Rotation.from_str, metrics_hook=metrics_hook)
    logger.debug("Parsed %d rotations from %s", len(rotations), path)
    return timed_solve(
        DAY, lambda: (part1(rotations), part2(rotations)), metrics_hook
    )
