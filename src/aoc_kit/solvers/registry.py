import logging
from dataclasses import dataclass

from .base import SolveFunction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Puzzle:
    day: int
    title: str
    solve: SolveFunction


class SolverRegistry:
    def __init__(self) -> None:
        self._puzzles: dict[int, Puzzle] = {}

    def register(self, puzzle: Puzzle) -> None:
        if puzzle.day in self._puzzles:
            raise ValueError(f"Day {puzzle.day} already registered")

        self._puzzles[puzzle.day] = puzzle
        logger.debug("Registered day %d: %s", puzzle.day, puzzle.title)

    def get(self, day: int) -> Puzzle:
        try:
            return self._puzzles[day]
        except KeyError:
            logger.error("Solver not found for day %d", day)
            raise KeyError(f"Day {day} not found") from None

    def remove(self, day: int) -> None:
        try:
            del self._puzzles[day]
            logger.debug("Removed day %d", day)
        except KeyError:
            logger.error("Cannot remove solver, not found: day %d", day)
            raise KeyError(f"Day {day} not found") from None

    def __contains__(self, day: object) -> bool:
        return day in self._puzzles

    def days(self) -> list[int]:
        return sorted(self._puzzles)

    def list(self) -> dict[int, Puzzle]:
        # shallow copy, ordered by day
        return dict(sorted(self._puzzles.items()))


def default_registry() -> SolverRegistry:
    from . import day01, day02, day03, day04

    registry = SolverRegistry()
    registry.register(Puzzle(day=1, title="Secret Entrance", solve=day01.solve))
    registry.register(Puzzle(day=2, title="Gift Shop", solve=day02.solve))
    registry.register(Puzzle(day=3, title="Lobby", solve=day03.solve))
    registry.register(Puzzle(day=4, title="Printing Department", solve=day04.solve))
    return registry
