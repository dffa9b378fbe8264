# src/aoc_kit/parsers/__init__.py

"""Text input loading for puzzle solvers.

Four thin helpers that read a UTF-8 file and convert it, per line or as a
whole, with a caller-supplied function. Failures of any kind surface as
`InputError`.
"""

from .errors import ConversionError, InputError, InputReadError
from .loader import (
    parse_lines,
    parse_lines_with,
    parse_whole,
    read_input,
    split_lines,
)

__all__ = [
    # Loader
    "parse_lines",
    "parse_lines_with",
    "parse_whole",
    "read_input",
    "split_lines",
    # Errors
    "InputError",
    "InputReadError",
    "ConversionError",
]
