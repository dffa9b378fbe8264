# parsers/loader.py

"""Read a text file and turn it into caller-determined values.

Every function reads the file exactly once and is all-or-nothing: either the
full result is returned or an `InputError` is raised. Nothing is retried or
cached, and no partial result ever escapes.

Example:
    >>> from aoc_kit.parsers import parse_lines, parse_whole
    >>>
    >>> numbers = parse_lines("numbers.txt", int)
    >>> sections = parse_whole("input.txt", lambda text: text.split("\\n\\n"))
"""

import os
from collections.abc import Callable
from time import monotonic
from typing import Any, TypeVar

from aoc_kit.observability import names
from aoc_kit.observability.base import MetricsHook, NoOpMetricsHook

from .errors import ConversionError, InputReadError

T = TypeVar("T")

PathLike = str | os.PathLike[str]


def read_input(
    path: PathLike,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> str:
    """Return the file content unchanged.

    Raises:
        InputReadError: If the file is missing, unreadable or not valid UTF-8.
    """
    return _read(path, "read_input", metrics_hook)


def parse_lines(
    path: PathLike,
    converter: Callable[[str], T] = str,  # type: ignore[assignment]
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[T]:
    """Convert every line of the file to `T`.

    `converter` is a one-argument callable such as `int` or `float`. A class
    that defines a `from_str` classmethod is converted through it instead of
    its constructor.

    Args:
        path: Path to the input file.
        converter: Turns one line into a value.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        One value per line, in file order. An empty file yields `[]`.

    Raises:
        InputReadError: If the file cannot be read.
        ConversionError: On the first line the converter rejects.
    """
    content = _read(path, "parse_lines", metrics_hook)
    return _convert_lines(
        path, content, _resolve_converter(converter), "parse_lines", metrics_hook
    )


def parse_lines_with(
    path: PathLike,
    parser: Callable[[str], T],
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[T]:
    """Parse every line of the file with a custom `parser`.

    Same contract as `parse_lines`, but `parser` is free to split lines into
    fields and to raise whatever exception describes the problem best.
    """
    content = _read(path, "parse_lines_with", metrics_hook)
    return _convert_lines(path, content, parser, "parse_lines_with", metrics_hook)


def parse_whole(
    path: PathLike,
    parser: Callable[[str], T],
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> T:
    """Hand the entire file content to `parser` and return its result.

    Use this when records span several lines, e.g. blocks separated by blank
    lines or a grid.
    """
    content = _read(path, "parse_whole", metrics_hook)
    try:
        return parser(content)
    except Exception as exc:
        metrics_hook.increment(
            names.INPUT_ERRORS_TOTAL,
            labels={"operation": "parse_whole", "kind": "conversion"},
        )
        raise ConversionError(path, "cannot parse file content", exc) from exc


def split_lines(content: str) -> list[str]:
    r"""Split on "\n" only, dropping one "\r" before each break.

    A trailing break does not start an extra empty line, so `"a\nb\n"` and
    `"a\nb"` both give two lines. Other Unicode separators such as form feed
    or U+2028 stay inside the line.
    """
    pieces = content.split("\n")
    last = pieces.pop()
    lines = [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]
    if last:
        lines.append(last)
    return lines


def _read(path: PathLike, operation: str, metrics_hook: MetricsHook) -> str:
    start = monotonic()
    try:
        # newline="" keeps "\r\n" intact for read_input
        with open(path, encoding="utf-8", newline="") as f:
            content = f.read()
            size = os.fstat(f.fileno()).st_size
    except (OSError, UnicodeDecodeError) as exc:
        metrics_hook.increment(
            names.INPUT_ERRORS_TOTAL, labels={"operation": operation, "kind": "read"}
        )
        raise InputReadError(path, f"cannot read input ({exc})") from exc

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(
        names.INPUT_READ_DURATION, elapsed_ms, labels={"operation": operation}
    )
    metrics_hook.record_gauge(
        names.INPUT_BYTES_READ, size, labels={"operation": operation}
    )
    return content


def _convert_lines(
    path: PathLike,
    content: str,
    convert: Callable[[str], T],
    operation: str,
    metrics_hook: MetricsHook,
) -> list[T]:
    values: list[T] = []
    for line in split_lines(content):
        try:
            values.append(convert(line))
        except Exception as exc:
            metrics_hook.increment(
                names.INPUT_ERRORS_TOTAL,
                labels={"operation": operation, "kind": "conversion"},
            )
            raise ConversionError(path, f"cannot convert line {line!r}", exc) from exc

    metrics_hook.increment(
        names.INPUT_LINES_PARSED, len(values), labels={"operation": operation}
    )
    return values


def _resolve_converter(converter: Any) -> Callable[[str], Any]:
    from_str = getattr(converter, "from_str", None)
    if isinstance(converter, type) and callable(from_str):
        return from_str
    return converter
