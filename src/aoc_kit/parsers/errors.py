# parsers/errors.py

import os


class InputError(Exception):
    """Base class for every failure raised by the input loader."""

    def __init__(self, path: str | os.PathLike[str], message: str) -> None:
        self.path = os.fspath(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")


class InputReadError(InputError):
    """The file could not be opened, read or decoded as UTF-8."""


class ConversionError(InputError):
    """A caller-supplied converter rejected (part of) the file content.

    The converter's own exception is kept as `cause` and chained as `__cause__`.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        message: str,
        cause: BaseException,
    ) -> None:
        self.cause = cause
        super().__init__(path, f"{message} ({cause})")
