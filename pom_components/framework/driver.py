# ================================================================================
# Browser Driver Module
# ================================================================================
#
# This module adapts a Playwright page to the driver capability consumed by
# every component. It is the only place that talks to Playwright.
#
# Key Features:
#   - Locator strategy translation (css, xpath, link text, tag name)
#   - WebDriver-style attribute semantics for boolean attributes
#   - Sticky keyboard modifiers released with Keys.NULL
#   - Script execution against the located node
#   - Playwright errors surfaced as DriverCommunicationError
#
# ================================================================================

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Dict, List, Optional

from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator as PlaywrightLocator
from playwright.async_api import Page

from .exceptions import DriverCommunicationError
from .locator import Locator
from .waits import WaitSettings


class Keys:
    """Key names understood by ``BrowserDriver.keys``."""

    NULL = "\ue000"
    ENTER = "Enter"
    ESCAPE = "Escape"
    TAB = "Tab"
    SPACE = " "
    DELETE = "Delete"
    BACKSPACE = "Backspace"
    CONTROL = "Control"
    SHIFT = "Shift"
    ALT = "Alt"
    META = "Meta"

    MODIFIERS = frozenset({CONTROL, SHIFT, ALT, META})


ATTRIBUTE_SCRIPT = """(el, name) => {
    const booleans = ["checked", "selected", "disabled", "required", "multiple", "hidden"];
    const key = name.toLowerCase();
    if (booleans.includes(key) && typeof el[key] === "boolean") {
        return el[key] ? "true" : null;
    }
    return el.getAttribute(name);
}"""

PROPERTY_SCRIPT = """(el, name) => {
    const value = el[name];
    if (value instanceof DOMTokenList) {
        return Array.from(value);
    }
    return value === undefined ? null : value;
}"""

CSS_PROPERTY_SCRIPT = "(el, name) => window.getComputedStyle(el).getPropertyValue(name)"


def driver_call(func: Callable):
    """
    Decorator converting Playwright failures into DriverCommunicationError.
    """
    @wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            return await func(self, *args, **kwargs)
        except PlaywrightError as e:
            logger.error(f"Driver call {func.__name__} failed: {e}")
            raise DriverCommunicationError(f"{func.__name__} failed: {e}") from e

    return wrapper


class BrowserDriver:
    """
    Driver capability backed by a Playwright page.

    Every call re-locates its target from the Locator, so no element handle
    outlives a single operation.

    Example:
        driver = BrowserDriver(page)
        await driver.click(Locator.css("button#submit"))
        text = await driver.get_text(Locator.xpath("//h1"))
    """

    def __init__(self, page: Page, settings: Optional[WaitSettings] = None):
        """
        Initialize the driver with a Playwright page.

        Args:
            page: Playwright Page object
            settings: Wait defaults; loaded from configuration when omitted
        """
        self.page = page
        self.settings = settings or WaitSettings.from_config()
        self._held_modifiers: List[str] = []
        self.page.set_default_timeout(self.settings.condition_timeout)

    def _locate(self, locator: Locator) -> PlaywrightLocator:
        return self.page.locator(locator.to_playwright())

    def _first(self, locator: Locator) -> PlaywrightLocator:
        return self._locate(locator).first

    # =========================================================================
    # Element probes
    # =========================================================================

    @driver_call
    async def count(self, locator: Locator) -> int:
        return await self._locate(locator).count()

    async def is_present(self, locator: Locator) -> bool:
        return await self.count(locator) > 0

    @driver_call
    async def is_visible(self, locator: Locator) -> bool:
        return await self._first(locator).is_visible()

    @driver_call
    async def is_enabled(self, locator: Locator) -> bool:
        return await self._first(locator).is_enabled()

    # =========================================================================
    # Interaction
    # =========================================================================

    @driver_call
    async def click(self, locator: Locator) -> None:
        logger.debug(f"Clicking: {locator}")
        await self._first(locator).click()

    @driver_call
    async def move_to(self, locator: Locator, x_offset: float, y_offset: float) -> None:
        logger.debug(f"Moving mouse to {locator} at ({x_offset}, {y_offset})")
        await self._first(locator).hover(position={"x": x_offset, "y": y_offset})

    @driver_call
    async def set_value(self, locator: Locator, value: str) -> None:
        """
        Focus the element and type ``value`` key by key.

        An empty value only focuses the element.
        """
        element = self._first(locator)
        await element.focus()
        if value:
            logger.debug(f"Typing into {locator}: '{value[:50]}'")
            await element.press_sequentially(value)

    @driver_call
    async def clear_value(self, locator: Locator) -> None:
        await self._first(locator).fill("")

    @driver_call
    async def keys(self, *keys: str) -> None:
        """
        Send keystrokes to the active element.

        Modifier keys stay held until Keys.NULL is sent.
        """
        keyboard = self.page.keyboard
        for key in keys:
            if key == Keys.NULL:
                while self._held_modifiers:
                    await keyboard.up(self._held_modifiers.pop())
            elif key in Keys.MODIFIERS:
                if key not in self._held_modifiers:
                    await keyboard.down(key)
                    self._held_modifiers.append(key)
            else:
                await keyboard.press(key)

    @driver_call
    async def execute(self, locator: Locator, script: str, arg: Any = None) -> Any:
        """Run ``script`` in page context with the first located node as its argument."""
        return await self._first(locator).evaluate(script, arg)

    # =========================================================================
    # Getters
    # =========================================================================

    @driver_call
    async def get_value(self, locator: Locator) -> Optional[str]:
        return await self._first(locator).input_value()

    @driver_call
    async def get_attribute(self, locator: Locator, name: str) -> Optional[str]:
        return await self._first(locator).evaluate(ATTRIBUTE_SCRIPT, name)

    @driver_call
    async def get_css_property(self, locator: Locator, name: str) -> Optional[str]:
        return await self._first(locator).evaluate(CSS_PROPERTY_SCRIPT, name)

    @driver_call
    async def get_property(self, locator: Locator, name: str) -> Any:
        return await self._first(locator).evaluate(PROPERTY_SCRIPT, name)

    @driver_call
    async def get_text(self, locator: Locator) -> Optional[str]:
        return await self._first(locator).inner_text()

    @driver_call
    async def get_size(self, locator: Locator) -> Dict[str, float]:
        box = await self._first(locator).bounding_box()
        if box is None:
            return {"height": 0, "width": 0}
        return {"height": box["height"], "width": box["width"]}

    @driver_call
    async def elements_text(self, locator: Locator) -> List[str]:
        return await self._locate(locator).all_inner_texts()

    # =========================================================================
    # Browser
    # =========================================================================

    @driver_call
    async def goto(self, url: str) -> None:
        logger.info(f"Navigating to: {url}")
        await self.page.goto(url)

    @driver_call
    async def refresh(self) -> None:
        await self.page.reload()

    @driver_call
    async def maximize_window(self) -> None:
        size = await self.page.evaluate(
            "() => ({width: window.screen.availWidth, height: window.screen.availHeight})"
        )
        await self.page.set_viewport_size(size)

    @driver_call
    async def get_window_size(self) -> Dict[str, int]:
        if self.page.viewport_size:
            return dict(self.page.viewport_size)
        return await self.page.evaluate(
            "() => ({width: window.innerWidth, height: window.innerHeight})"
        )

    @driver_call
    async def resize_window(self, width: int, height: int) -> None:
        await self.page.set_viewport_size({"width": width, "height": height})

    @driver_call
    async def open_new_window(self) -> None:
        await self.page.context.new_page()

    @driver_call
    async def switch_to_window(self, index: int) -> None:
        pages = self.page.context.pages
        if not 0 <= index < len(pages):
            raise DriverCommunicationError(
                f"No window at index {index}; {len(pages)} window(s) open"
            )
        self.page = pages[index]
        self.page.set_default_timeout(self.settings.condition_timeout)
        await self.page.bring_to_front()
        logger.debug(f"Switched to window {index}: {self.page.url}")

    @driver_call
    async def delete_cookies(self) -> None:
        await self.page.context.clear_cookies()

    @driver_call
    async def set_cookie(self, name: str, value: str) -> None:
        await self.page.context.add_cookies([
            {"name": name, "value": value, "url": self.page.url},
        ])

    @driver_call
    async def pause(self, milliseconds: int) -> None:
        await self.page.wait_for_timeout(milliseconds)

    @driver_call
    async def screenshot(self) -> bytes:
        return await self.page.screenshot(full_page=True)


__all__ = [
    "BrowserDriver",
    "Keys",
    "driver_call",
]
