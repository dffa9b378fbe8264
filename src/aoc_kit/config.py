# src/aoc_kit/config.py

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

DEFAULT_INPUT_PATH = Path("input.txt")


@dataclass(frozen=True)
class RunConfig:
    """Settings for a single solver run.

    Immutable. Explicit. Built from command line arguments only.
    """

    day: int
    input_path: Path = field(default=DEFAULT_INPUT_PATH)
    output: Literal["text", "json"] = "text"
    show_metrics: bool = False
    log_level: str = "WARNING"
