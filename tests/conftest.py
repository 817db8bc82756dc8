"""
Pytest configuration and fixtures.
"""

import os
import pytest

from typedenv.config import get_settings


TEST_PREFIX = "TESTING_ENV_"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without TESTING_ENV_* or TYPEDENV_* variables."""
    for key in list(os.environ):
        if key.startswith(TEST_PREFIX) or key.startswith("TYPEDENV_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
