"""Shared fixtures."""
import pytest
from utils.logging_config import LoggerFactory


@pytest.fixture(autouse=True)
def fresh_logging():
    """Drop handlers bound to a test's captured streams."""
    yield
    LoggerFactory.reset()
