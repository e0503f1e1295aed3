"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fundcalc.config import get_settings


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "parity: marks reference output parity tests")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings for every test so env overrides don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
