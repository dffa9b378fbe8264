import logging
from collections.abc import Generator

import pytest

from aoc_kit.logging_config import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Drop handlers installed by the CLI so they never outlive a captured stream."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
