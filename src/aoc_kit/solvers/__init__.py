from .base import Solution
from .registry import Puzzle, SolverRegistry, default_registry

__all__ = [
    "Puzzle",
    "Solution",
    "SolverRegistry",
    "default_registry",
]
