"""Root conftest — shared test configuration."""

import os

import pytest

from wirestamp.config import get_settings

# Ensure a developer's shell settings don't leak into test expectations
os.environ.pop("WIRESTAMP_LOG_LEVEL", None)
os.environ.pop("WIRESTAMP_LOG_FORMAT", None)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
