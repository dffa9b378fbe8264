# src/aoc_kit/cli.py

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .config import DEFAULT_INPUT_PATH, RunConfig
from .logging_config import setup_logging
from .observability.base import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook
from .parsers import InputError
from .solvers import Solution, SolverRegistry, default_registry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_USAGE = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc-kit",
        description="Run daily puzzle solvers against an input file.",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    run_parser = subparsers.add_parser("run", help="Solve one day and print both answers")
    run_parser.add_argument("day", type=int, help="Puzzle day number")
    run_parser.add_argument(
        "--input",
        "-i",
        type=Path,
        default=DEFAULT_INPUT_PATH,
        help=f"Path to the puzzle input (default: {DEFAULT_INPUT_PATH}).",
    )
    run_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the answers as a JSON object.",
    )
    run_parser.add_argument(
        "--metrics",
        action="store_true",
        help="Print recorded metrics to stderr after the run.",
    )
    run_parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity (default: WARNING).",
    )

    subparsers.add_parser("list", help="List available puzzle days")
    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    return RunConfig(
        day=args.day,
        input_path=args.input,
        output="json" if args.json else "text",
        show_metrics=args.metrics,
        log_level=args.log_level,
    )


def format_solution(solution: Solution, output: str) -> str:
    if output == "json":
        return solution.model_dump_json()
    return f"Part 1: {solution.part1}\nPart 2: {solution.part2}"


def run(
    config: RunConfig,
    registry: SolverRegistry,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    if config.day not in registry:
        available = ", ".join(str(day) for day in registry.days())
        print(f"Unknown day {config.day}; available: {available}", file=stderr)
        return EXIT_USAGE
    puzzle = registry.get(config.day)

    recorder = InMemoryMetricsHook() if config.show_metrics else None
    metrics_hook: MetricsHook = recorder or NoOpMetricsHook()

    logger.info("Running day %d (%s) on %s", puzzle.day, puzzle.title, config.input_path)
    try:
        solution = puzzle.solve(config.input_path, metrics_hook=metrics_hook)
    except InputError as exc:
        logger.error(
            "Day %d failed: %s",
            puzzle.day,
            exc,
            exc_info=logger.isEnabledFor(logging.DEBUG),
        )
        return EXIT_INPUT_ERROR

    print(format_solution(solution, config.output), file=stdout)

    if recorder is not None:
        for record in recorder.records:
            labels = ",".join(f"{k}={v}" for k, v in sorted(record.labels.items()))
            print(
                f"{record.name}{{{labels}}} {record.kind} {record.value:g}", file=stderr
            )
    return EXIT_OK


def list_puzzles(registry: SolverRegistry, stdout: TextIO | None = None) -> int:
    stdout = stdout or sys.stdout
    for day, puzzle in registry.list().items():
        print(f"{day:>2}  {puzzle.title}", file=stdout)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    registry = default_registry()

    if args.command == "list":
        return list_puzzles(registry)

    config = config_from_args(args)
    setup_logging(config.log_level)
    return run(config, registry)


if __name__ == "__main__":
    sys.exit(main())
