"""
Pytest fixtures for the Harmony Hub suite
"""
import importlib.util
from datetime import datetime

import pytest

from harmony_e2e.config import E2EConfig
from harmony_e2e.dates import DateFormatter

_playwright_spec = importlib.util.find_spec("playwright.sync_api")

# Browser-only modules cannot even be imported without playwright
collect_ignore = [] if _playwright_spec else ["e2e", "test_pages.py"]


def pytest_configure(config):
    """Register suite markers."""
    config.addinivalue_line("markers", "e2e: End-to-end browser tests (need a running app)")
    config.addinivalue_line("markers", "smoke: marks tests as smoke tests")
    config.addinivalue_line("markers", "students: student management scenarios")
    config.addinivalue_line("markers", "schedule: schedule and calendar scenarios")


@pytest.fixture
def unit_config():
    """Settings with short timeouts and a fixed base URL."""
    return E2EConfig(
        base_url="http://harmony.test",
        timezone="UTC",
        default_timeout=100,
        navigation_timeout=200,
    )


@pytest.fixture
def fixed_formatter():
    """Formatter frozen at Tuesday, December 30, 2025 09:05 UTC."""
    return DateFormatter("UTC", clock=lambda tz: datetime(2025, 12, 30, 9, 5, tzinfo=tz))
