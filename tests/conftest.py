"""Shared fixtures for logstack tests"""

import pytest

from logstack import Registry
from logstack.core.logger_config import reset_global_config


@pytest.fixture(autouse=True)
def isolated_global_state():
    """Reset process-wide config and registry around every test."""
    reset_global_config()
    Registry.clear()
    yield
    reset_global_config()
    Registry.clear()
