"""
Logging configuration for the aoc_kit package logger.
"""

import logging
import sys

PACKAGE_LOGGER = "aoc_kit"


def setup_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """
    Configure the `aoc_kit` logger with a single stderr handler.

    Stdout is left to the puzzle answers. Calling this again replaces the
    handler instead of stacking duplicates.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return logger
