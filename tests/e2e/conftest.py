"""
Playwright E2E Test Configuration and Fixtures

This module provides shared fixtures, configuration, and utilities
for end-to-end browser testing with Playwright. Browser, context and page
lifecycles come from pytest-playwright; each test gets its own context.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Generator

import pytest
import requests
from playwright.sync_api import Browser, BrowserContext, Page

from harmony_e2e.config import E2EConfig
from harmony_e2e.dates import DateFormatter
from harmony_e2e.pages import SchedulePage, StudentPage

logger = logging.getLogger(__name__)

# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture(scope="session")
def e2e_config() -> E2EConfig:
    config = E2EConfig.load()
    logger.info("E2E config: %s", config.to_dict())
    return config


@pytest.fixture(scope="session")
def app_available(e2e_config: E2EConfig) -> str:
    """
    Probe the application once per session.

    The app is an external system; when it is not reachable every browser
    test is skipped with the reason instead of timing out one by one.
    """
    try:
        resp = requests.get(e2e_config.base_url, timeout=5)
    except requests.exceptions.RequestException as e:
        pytest.skip(f"Harmony Hub not reachable at {e2e_config.base_url}: {e}")
    if resp.status_code >= 500:
        pytest.skip(f"Harmony Hub at {e2e_config.base_url} returned {resp.status_code}")
    logger.info("Harmony Hub reachable at %s", e2e_config.base_url)
    return e2e_config.base_url


# =============================================================================
# Browser Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def browser_type_launch_args(
    browser_type_launch_args: Dict[str, Any], e2e_config: E2EConfig
) -> Dict[str, Any]:
    """Browser launch arguments."""
    return {
        **browser_type_launch_args,
        "headless": e2e_config.headless,
        "slow_mo": e2e_config.slow_mo,
    }


@pytest.fixture(scope="session")
def browser_context_args(
    browser_context_args: Dict[str, Any], e2e_config: E2EConfig
) -> Dict[str, Any]:
    """Browser context arguments."""
    args = {
        **browser_context_args,
        "viewport": {"width": e2e_config.viewport_width, "height": e2e_config.viewport_height},
        "locale": "en-US",
        "timezone_id": e2e_config.timezone,
    }

    if e2e_config.record_video:
        e2e_config.artifacts_dir.mkdir(parents=True, exist_ok=True)
        args["record_video_dir"] = str(e2e_config.artifacts_dir / "videos")

    return args


@pytest.fixture
def context(
    app_available: str, browser: Browser, browser_context_args: Dict, e2e_config: E2EConfig
) -> Generator[BrowserContext, None, None]:
    """Create a new browser context for each test."""
    context = browser.new_context(**browser_context_args)
    context.set_default_timeout(e2e_config.default_timeout)
    context.set_default_navigation_timeout(e2e_config.navigation_timeout)

    yield context

    context.close()


@pytest.fixture
def page(
    context: BrowserContext, request, e2e_config: E2EConfig
) -> Generator[Page, None, None]:
    """Create a new page for each test; screenshot it if the test failed."""
    page = context.new_page()

    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed and e2e_config.screenshot_on_failure:
        save_failure_screenshot(page, request.node.name, e2e_config)
    page.close()


# =============================================================================
# Page Object Fixtures
# =============================================================================


@pytest.fixture
def today(e2e_config: E2EConfig) -> DateFormatter:
    """Formatter on the host clock in the configured timezone."""
    return DateFormatter(e2e_config.timezone)


@pytest.fixture
def student_page(page: Page, e2e_config: E2EConfig) -> StudentPage:
    """Student page, already loaded."""
    return StudentPage(page, e2e_config).navigate()


@pytest.fixture
def schedule_page(page: Page, e2e_config: E2EConfig, today: DateFormatter) -> SchedulePage:
    """Schedule page, already loaded."""
    return SchedulePage(page, e2e_config, today).navigate()


def save_failure_screenshot(page: Page, test_name: str, e2e_config: E2EConfig) -> None:
    """Capture screenshot on test failure."""
    e2e_config.artifacts_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    safe_name = test_name.replace("/", "_").replace(":", "_")
    screenshot_path = e2e_config.artifacts_dir / f"failure_{safe_name}_{timestamp}.png"
    page.screenshot(path=str(screenshot_path))
    logger.info("Screenshot saved: %s", screenshot_path)


# =============================================================================
# Hooks
# =============================================================================


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store test results for use in fixtures."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


def pytest_collection_modifyitems(config, items):
    """Mark everything under tests/e2e as e2e and tag by page."""
    for item in items:
        if "/e2e/" not in item.nodeid.replace("\\", "/") and not item.nodeid.startswith("e2e/"):
            continue
        item.add_marker(pytest.mark.e2e)
        if "test_students" in item.nodeid:
            item.add_marker(pytest.mark.students)
        elif "test_schedule" in item.nodeid:
            item.add_marker(pytest.mark.schedule)
