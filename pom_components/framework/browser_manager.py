"""
================================================================================
Browser Manager
================================================================================

Browser session lifecycle for the component library.

The library itself never opens or closes sessions; this manager is what a
test harness uses to create the one shared BrowserDriver per run.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Playwright,
)

from ..common.global_config import get_config
from .driver import BrowserDriver
from .waits import WaitSettings, as_bool


class BrowserManager:
    """
    Manages the browser instance and hands out drivers.

    Usage:
        async with BrowserManager() as manager:
            driver = await manager.new_driver()
            await driver.goto("https://example.com")
    """

    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
        "args": [
            "--ignore-certificate-errors",
        ],
    }

    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
        settings: Optional[WaitSettings] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode (defaults to ui.headless)
            browser_type: 'chromium', 'firefox' or 'webkit' (defaults to ui.browser)
            settings: Wait defaults handed to every driver
        """
        self.headless = as_bool(get_config("ui.headless", True) if headless is None else headless)
        self.browser_type = browser_type or get_config("ui.browser", "chromium")
        self.settings = settings or WaitSettings.from_config()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()

        if self.browser_type == "firefox":
            browser_launcher = self._playwright.firefox
        elif self.browser_type == "webkit":
            browser_launcher = self._playwright.webkit
        else:
            browser_launcher = self._playwright.chromium

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }

        try:
            self._browser = await browser_launcher.launch(**launch_options)
        except Exception:
            await self._playwright.stop()
            self._playwright = None
            raise
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            await context.close()
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_driver(self, **context_options: Any) -> BrowserDriver:
        """
        Open an isolated context with one page and wrap it in a driver.

        Args:
            **context_options: Overrides for DEFAULT_CONTEXT_OPTIONS

        Returns:
            BrowserDriver bound to the new page
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = await self._browser.new_context(
            **{**self.DEFAULT_CONTEXT_OPTIONS, **context_options}
        )
        self._contexts.append(context)
        page = await context.new_page()
        return BrowserDriver(page, settings=self.settings)

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser


__all__ = [
    "BrowserManager",
]
