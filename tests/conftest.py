"""
Shared fixtures for factory tests.
"""

import pytest

from factory_patterns import config
from factory_patterns.trace import RecordingTrace


@pytest.fixture
def trace() -> RecordingTrace:
    """Fresh in-memory trace sink."""
    return RecordingTrace()


@pytest.fixture(autouse=True)
def reset_config_cache():
    """Drop the cached AppConfig around every test."""
    config._config = None
    yield
    config._config = None
