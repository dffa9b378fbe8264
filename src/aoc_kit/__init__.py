# Config
from .config import RunConfig

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    ConversionError,
    InputError,
    InputReadError,
    parse_lines,
    parse_lines_with,
    parse_whole,
    read_input,
)

# Solvers
from .solvers import Puzzle, Solution, SolverRegistry, default_registry

__all__ = [
    # Config
    "RunConfig",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "ConversionError",
    "InputError",
    "InputReadError",
    "parse_lines",
    "parse_lines_with",
    "parse_whole",
    "read_input",
    # Solvers
    "Puzzle",
    "Solution",
    "SolverRegistry",
    "default_registry",
]
