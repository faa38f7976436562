"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation and URL handling
    - Window, tab and cookie management
    - Bulk element helpers
    - Screenshot utilities

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
import random
import string
from datetime import datetime
from pathlib import Path
from typing import Dict

import allure
from loguru import logger

from ..common.global_config import get_config
from ..components.basic import ElementHandle
from ..framework.capabilities import DriverClient
from ..framework.driver import Keys
from ..framework.locator import LocateStrategy, Locator
from .base_selectors import HeaderBar


# Default output directory for screenshots
SCREENSHOT_DIR = Path.cwd() / "screenshots"


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class PatientsPage(BasePage):
            URL_PATH = "/patients"

        page = PatientsPage(driver)
        await page.navigate()
    """

    # Override in subclasses
    URL_PATH: str = "/"

    def __init__(self, driver: DriverClient, base_url: str = ""):
        """
        Initialize page object.

        Args:
            driver: Driver the page and its components talk to
            base_url: Base URL for the application
        """
        self.driver = driver
        if not base_url:
            base_url = os.getenv("UI_BASE_URL") or get_config("ui.base_url", "http://localhost:3000")
        self.base_url = base_url.rstrip("/")
        self.header = HeaderBar(driver)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    # =========================================================================
    # Navigation
    # =========================================================================

    async def navigate(self) -> None:
        """Navigate to this page."""
        with allure.step(f"Navigate to {self.URL_PATH}"):
            await self.driver.goto(self.url)
            logger.debug(f"Navigated to: {self.url}")

    async def navigate_to(self, url: str) -> None:
        """
        Navigate to a URL. Relative paths are joined to the base URL.

        Args:
            url: Absolute URL or path
        """
        if not url.startswith(("http://", "https://", "about:", "data:", "file:")):
            url = f"{self.base_url}/{url.lstrip('/')}"
        with allure.step(f"Navigate to {url}"):
            await self.driver.goto(url)

    async def refresh(self) -> None:
        await self.driver.refresh()

    # =========================================================================
    # Window, tab and cookie management
    # =========================================================================

    async def maximize_window(self) -> None:
        await self.driver.maximize_window()

    async def get_window_size(self) -> Dict[str, int]:
        """
        Returns:
            {"width": ..., "height": ...} of the current window
        """
        return await self.driver.get_window_size()

    async def resize_window(self, width: int, height: int) -> None:
        await self.driver.resize_window(width, height)

    async def open_new_tab(self, switch: bool = True) -> None:
        """
        Open a new tab.

        Args:
            switch: Switch to the new tab once it is created
        """
        await self.driver.open_new_window()
        if switch:
            await self.switch_to_tab()

    async def switch_to_tab(self, tab_number: int = 1) -> None:
        """
        Switch to a tab by creation order, starting from 0.
        """
        await self.driver.switch_to_window(tab_number)

    async def delete_cookies(self) -> None:
        await self.driver.delete_cookies()

    async def set_cookie(self, name: str, value: str) -> None:
        await self.driver.set_cookie(name, value)

    async def press_escape(self) -> None:
        await self.driver.keys(Keys.ESCAPE)

    # =========================================================================
    # Bulk element helpers
    # =========================================================================

    async def count_elements(self, xpath: str) -> int:
        """Number of elements matching ``xpath``."""
        return await self.driver.count(Locator.xpath(xpath))

    async def click_each_element(self, xpath: str) -> None:
        """Click every element matching ``xpath``, in document order."""
        total = await self.count_elements(xpath)
        for position in range(1, total + 1):
            await ElementHandle(self.driver, LocateStrategy.XPATH, f"({xpath})[{position}]").click()

    # =========================================================================
    # Utilities
    # =========================================================================

    async def pause(self, milliseconds: int) -> None:
        await self.driver.pause(milliseconds)

    @staticmethod
    def generate_random_number(length: int = 10) -> str:
        """Random string of ``length`` decimal digits."""
        return "".join(random.choice(string.digits) for _ in range(length))

    async def screenshot(self, name: str, attach_to_allure: bool = True) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        image = await self.driver.screenshot()
        filepath.write_bytes(image)

        if attach_to_allure:
            allure.attach(image, name=name, attachment_type=allure.attachment_type.PNG)

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath


__all__ = [
    "BasePage",
]
