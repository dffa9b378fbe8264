# src/aoc_kit/solvers/day03.py

"""Day 3: maximum joltage from banks of single-digit batteries."""

import logging
from dataclasses import dataclass
from pathlib import Path

from aoc_kit.observability.base import MetricsHook, NoOpMetricsHook
from aoc_kit.parsers import parse_lines

from .base import Solution, timed_solve

logger = logging.getLogger(__name__)

DAY = 3

PART1_BATTERIES = 2
PART2_BATTERIES = 12


@dataclass(frozen=True)
class BatteryBank:
    digits: tuple[int, ...]

    @classmethod
    def from_str(cls, text: str) -> "BatteryBank":
        if text and not (text.isascii() and text.isdigit()):
            raise ValueError(f"Battery bank must contain only digits, got '{text}'")
        return cls(digits=tuple(int(ch) for ch in text))


def largest_joltage(digits: tuple[int, ...] | list[int], k: int) -> int:
    """
    Largest k-digit number formed by picking k digits in order.

    Greedy: each position takes the leftmost maximum of the window that still
    leaves enough digits for the remaining positions.
    Returns 0 if k is 0, digits is empty, or k exceeds the number of digits.
    """
    if k == 0 or not digits or k > len(digits):
        return 0

    result = 0
    start = 0
    for position in range(k):
        stop = len(digits) - (k - position - 1)
        window = digits[start:stop]
        best = max(window)
        start += window.index(best) + 1
        result = result * 10 + best
    return result


def part1(banks: list[BatteryBank]) -> int:
    return sum(largest_joltage(bank.digits, PART1_BATTERIES) for bank in banks)


def part2(banks: list[BatteryBank]) -> int:
    return sum(largest_joltage(bank.digits, PART2_BATTERIES) for bank in banks)


def solve(path: Path, *, metrics_hook: MetricsHook = NoOpMetricsHook()) -> Solution:
    banks = parse_lines(path, BatteryBank, metrics_hook=metrics_hook)
    logger.debug("Parsed %d battery banks from %s", len(banks), path)
    return timed_solve(DAY, lambda: (part1(banks), part2(banks)), metrics_hook)
