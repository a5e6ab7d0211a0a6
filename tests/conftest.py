"""Pytest configuration and shared fixtures."""
import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Send loguru output to whatever sys.stderr is at write time."""
    logger.remove()
    logger.add(lambda msg: sys.stderr.write(msg), level="DEBUG")
    yield
    logger.remove()
