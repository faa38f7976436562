"""
================================================================================
Element Handle
================================================================================

Base component wrapping one locator.

Provides:
    - Presence / visibility poll-waits with tri-state outcome
    - Scroll-then-click, force click and mouse move
    - Attribute, property, CSS and text getters
    - Polling text / state / attribute assertions
    - Test-only show / hide escape hatches

Every operation re-locates the element from its Locator; nothing is cached
across calls, so DOM mutations between calls cannot leave stale handles.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Optional, Tuple, Type, TypeVar

import allure
from loguru import logger

from ..framework.capabilities import DriverClient
from ..framework.driver import Keys
from ..framework.exceptions import AssertionFailure
from ..framework.locator import Locator, StrategyLike
from ..framework.waits import WaitOutcome, poll_until, resolve_outcome
from .class_list import class_list_contains


SCROLL_INTO_VIEW_SCRIPT = "el => { el.scrollIntoView({block: 'center'}); return true; }"
FORCE_CLICK_SCRIPT = "el => { el.click(); return true; }"
HIDE_SCRIPT = "el => { el.style.display = 'none'; return true; }"
SHOW_SCRIPT = "el => { el.style.removeProperty('display'); return true; }"


C = TypeVar("C", bound="ElementHandle")


@dataclass(frozen=True)
class ElementSize:
    """Rendered size in CSS pixels."""
    height: float
    width: float


class ElementHandle:
    """
    Basic component: all user actions and assertions for one HTML element.

    Implements the Waitable and Clickable capabilities.

    Usage:
        >>> my_div = ElementHandle(driver, "css selector", "div#myDiv")
        >>> await my_div.wait_visible()
        >>> await my_div.click()

        >>> my_div = ElementHandle(driver, "xpath", '//div[@id="myDiv"]')
        >>> await my_div.verify_text("Hello World")
    """

    def __init__(
        self,
        driver: DriverClient,
        locate_strategy: StrategyLike,
        selector: str,
    ):
        """
        Create a component.

        Args:
            driver: Driver capability shared by the whole test run
            locate_strategy: "css selector", "xpath", "link text",
                "partial link text" or "tag name"
            selector: Selector query
        """
        self.driver = driver
        self.locator = Locator(locate_strategy, selector)

    @property
    def locate_strategy(self) -> str:
        return self.locator.strategy.value

    @property
    def selector(self) -> str:
        return self.locator.selector

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.locator})"

    def scoped(self, suffix: str, component_cls: Optional[Type[C]] = None) -> C:
        """
        Build a child component whose selector is scoped under this one.

        Args:
            suffix: Child-specific selector part
            component_cls: Component class to build (ElementHandle by default)
        """
        child = self.locator.child(suffix)
        cls = component_cls or ElementHandle
        return cls(self.driver, child.strategy, child.selector)

    # =========================================================================
    # Waits
    # =========================================================================

    async def _wait(
        self,
        probe: Callable[[], Awaitable[bool]],
        expectation: str,
        timeout: Optional[int],
        abort_on_failure: Optional[bool],
    ) -> bool:
        settings = self.driver.settings
        if timeout is None:
            timeout = settings.condition_timeout
        if abort_on_failure is None:
            abort_on_failure = settings.abort_on_failure

        satisfied = await poll_until(
            probe,
            timeout=timeout,
            poll_interval=settings.poll_interval,
            description=f"{self.locator} to be {expectation}",
        )
        outcome = resolve_outcome(satisfied, abort_on_failure)
        if outcome is WaitOutcome.TIMED_OUT_FAILED:
            message = f"Timed out after {timeout} ms waiting for {self.locator} to be {expectation}"
            logger.error(message)
            raise AssertionFailure(message, selector=self.selector)
        return outcome is WaitOutcome.SATISFIED

    async def wait_present(
        self,
        timeout: Optional[int] = None,
        abort_on_failure: Optional[bool] = None,
    ) -> bool:
        """
        Wait for the element to be present in the DOM.

        Args:
            timeout: Milliseconds to wait (defaults to settings.condition_timeout)
            abort_on_failure: Raise AssertionFailure on timeout
                (defaults to settings.abort_on_failure)

        Returns:
            True if the element became present

        Raises:
            AssertionFailure: On timeout when abort_on_failure is true
        """
        return await self._wait(
            lambda: self.driver.is_present(self.locator), "present", timeout, abort_on_failure
        )

    async def wait_absent(
        self,
        timeout: Optional[int] = None,
        abort_on_failure: Optional[bool] = None,
    ) -> bool:
        """Wait for the element to be removed from the DOM. See wait_present."""
        async def absent() -> bool:
            return not await self.driver.is_present(self.locator)

        return await self._wait(absent, "absent", timeout, abort_on_failure)

    async def wait_visible(
        self,
        timeout: Optional[int] = None,
        abort_on_failure: Optional[bool] = None,
    ) -> bool:
        """Wait for the element to be displayed. See wait_present."""
        return await self._wait(
            lambda: self.driver.is_visible(self.locator), "visible", timeout, abort_on_failure
        )

    async def wait_hidden(
        self,
        timeout: Optional[int] = None,
        abort_on_failure: Optional[bool] = None,
    ) -> bool:
        """
        Wait for the element to not be displayed.

        An element missing from the DOM counts as hidden.
        """
        async def hidden() -> bool:
            return not await self.driver.is_visible(self.locator)

        return await self._wait(hidden, "hidden", timeout, abort_on_failure)

    # =========================================================================
    # Interaction
    # =========================================================================

    async def click(self) -> None:
        """
        Click the element.

        Waits for presence and scrolls the element to the viewport center
        first; obscured or off-screen elements fail native clicks.
        """
        with allure.step(f"Click {self.locator}"):
            await self.scroll_into_view()
            await self.driver.click(self.locator)

    async def scroll_into_view(self) -> None:
        await self.wait_present()
        await self.driver.execute(self.locator, SCROLL_INTO_VIEW_SCRIPT)

    async def force_click(self) -> None:
        """Invoke the DOM click() directly, bypassing pointer simulation."""
        with allure.step(f"Force click {self.locator}"):
            await self.wait_present()
            await self.driver.execute(self.locator, FORCE_CLICK_SCRIPT)

    async def move_to_element(
        self,
        x_offset: Optional[float] = None,
        y_offset: Optional[float] = None,
    ) -> None:
        """
        Move the mouse over the element.

        Args:
            x_offset: X offset from the element's top-left corner
            y_offset: Y offset from the element's top-left corner

        With either offset missing the mouse goes to the element's center.
        """
        await self.wait_present()
        if x_offset is None or y_offset is None:
            size = await self.get_size()
            x_offset, y_offset = size.width / 2, size.height / 2
        await self.driver.move_to(self.locator, x_offset, y_offset)

    async def press_escape(self) -> None:
        await self.driver.keys(Keys.ESCAPE)

    async def hide(self) -> None:
        """Set display:none on the element. Test-only, not a user action."""
        await self.wait_present()
        await self.driver.execute(self.locator, HIDE_SCRIPT)
        logger.debug(f"Hid {self.locator}")

    async def show(self) -> None:
        """Remove the inline display rule set by hide()."""
        await self.wait_present()
        await self.driver.execute(self.locator, SHOW_SCRIPT)
        logger.debug(f"Showed {self.locator}")

    # =========================================================================
    # Getters
    # =========================================================================

    async def get_attribute(self, name: str) -> Optional[str]:
        """
        Get an HTML attribute value.

        Example:
            <div id="myDiv" aria-label="my value"/>
            >>> await ElementHandle(driver, "css selector", "div#myDiv").get_attribute("aria-label")
            'my value'
        """
        return await self.driver.get_attribute(self.locator, name)

    async def get_css_property(self, name: str) -> Optional[str]:
        return await self.driver.get_css_property(self.locator, name)

    async def get_property(self, name: str) -> Any:
        """Get a DOM property value (e.g. "classList", "checked")."""
        return await self.driver.get_property(self.locator, name)

    async def get_text(self) -> Optional[str]:
        return await self.driver.get_text(self.locator)

    async def get_size(self) -> ElementSize:
        size = await self.driver.get_size(self.locator)
        return ElementSize(height=size["height"], width=size["width"])

    async def get_elements_text(self, locate_strategy: StrategyLike, selector: str) -> List[str]:
        """Get the inner text of every element matching the given locator."""
        return await self.driver.elements_text(Locator(locate_strategy, selector))

    async def has_class(self, class_name: str) -> bool:
        classes = await self.get_property("classList")
        return class_list_contains(classes, class_name)

    # =========================================================================
    # Assertions
    # =========================================================================

    async def _verify(
        self,
        check: Callable[[], Awaitable[Tuple[bool, Any]]],
        expectation: str,
    ) -> None:
        await self.wait_present(abort_on_failure=True)
        settings = self.driver.settings
        last_actual: List[Any] = [None]

        async def condition() -> bool:
            ok, last_actual[0] = await check()
            return ok

        if not await poll_until(
            condition,
            timeout=settings.condition_timeout,
            poll_interval=settings.poll_interval,
            description=f"{self.locator} {expectation}",
        ):
            message = f"Expected {self.locator} {expectation}, but got {last_actual[0]!r}"
            logger.error(message)
            raise AssertionFailure(message, selector=self.selector)

    async def verify_text(self, text: str) -> None:
        """Assert the element's inner text equals ``text``."""
        async def check():
            actual = await self.get_text()
            return actual == text, actual

        with allure.step(f"Verify {self.locator} text is '{text}'"):
            await self._verify(check, f"to have text {text!r}")

    async def verify_text_contains(self, text: str) -> None:
        """Assert the element's inner text contains ``text``."""
        async def check():
            actual = await self.get_text()
            return actual is not None and text in actual, actual

        with allure.step(f"Verify {self.locator} text contains '{text}'"):
            await self._verify(check, f"to contain text {text!r}")

    async def verify_disabled(self) -> None:
        async def check():
            enabled = await self.driver.is_enabled(self.locator)
            return not enabled, "enabled" if enabled else "disabled"

        await self._verify(check, "to be disabled")

    async def verify_enabled(self) -> None:
        async def check():
            enabled = await self.driver.is_enabled(self.locator)
            return enabled, "enabled" if enabled else "disabled"

        await self._verify(check, "to be enabled")

    async def verify_attribute_contains(self, attribute: str, expected_value: str) -> None:
        """
        Assert an HTML attribute exists and contains ``expected_value``.

        Example:
            <div id="myDiv" aria-label="Some text"/>
            >>> await my_div.verify_attribute_contains("aria-label", "Some")
        """
        async def check():
            actual = await self.get_attribute(attribute)
            return actual is not None and expected_value in actual, actual

        with allure.step(f"Verify {self.locator} [{attribute}] contains '{expected_value}'"):
            await self._verify(check, f"attribute {attribute!r} to contain {expected_value!r}")


__all__ = [
    "ElementHandle",
    "ElementSize",
]
