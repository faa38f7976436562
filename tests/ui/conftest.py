"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Provides a real Playwright-backed driver for component tests. Pages are
rendered from static HTML with ``page.set_content``, so no application server
is needed. Tests are skipped when no browser can be launched.

Key Features:
- Browser and driver lifecycle management
- Screenshot capture on failure, attached to Allure

================================================================================
"""

from typing import AsyncGenerator

import allure
import pytest
from loguru import logger
from playwright.async_api import Error as PlaywrightError

from pom_components.framework.browser_manager import BrowserManager
from pom_components.framework.driver import BrowserDriver
from pom_components.framework.waits import WaitSettings


UI_WAIT_SETTINGS = WaitSettings(condition_timeout=2000, poll_interval=50, abort_on_failure=True)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_driver(request) -> AsyncGenerator[BrowserDriver, None]:
    """
    Function-scoped driver on a fresh headless Chromium.

    Captures a screenshot into the Allure report when the test body fails.
    """
    manager = BrowserManager(headless=True, browser_type="chromium", settings=UI_WAIT_SETTINGS)
    try:
        await manager.start()
    except PlaywrightError as e:
        pytest.skip(f"Browser unavailable: {e}")

    driver = await manager.new_driver(viewport={"width": 1280, "height": 800})
    yield driver

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            allure.attach(
                await driver.screenshot(),
                name="failure_screenshot",
                attachment_type=allure.attachment_type.PNG,
            )
        except Exception as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")
    await manager.close()


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase report on the item for fixture teardown."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
