"""
================================================================================
Dropdown Component
================================================================================

Filterable dropdown rendered by the target UI as a text input plus a floating
option list. Options carry the ``qa-option`` class, ``aria-disabled`` state
and a ``data-qa-id="option-{value}"`` marker.

================================================================================
"""

from __future__ import annotations

from typing import List, Sequence

import allure
from loguru import logger

from ..framework.driver import Keys
from ..framework.exceptions import AssertionFailure
from ..framework.locator import LocateStrategy
from .basic import ElementHandle
from .text_input import TextInput


OPTION_SELECTOR = '[data-qa-id="option-{value}"]'
ALL_OPTIONS_SELECTOR = ".qa-option"
AVAILABLE_OPTIONS_SELECTOR = '.qa-option[aria-disabled="false"]'
DISABLED_OPTIONS_SELECTOR = '.qa-option[aria-disabled="true"]'


def verify_options_from_dropdown(
    expected_options: Sequence[str],
    dropdown_options: Sequence[str],
) -> None:
    """
    Assert two option lists hold the same items, ignoring order.

    Each expected option consumes its first match in the actual list; an
    unmatched expected option fails naming it, and anything left over
    afterwards fails naming the extras.

    Args:
        expected_options: Options the dropdown should render
        dropdown_options: Options the dropdown rendered (not modified)

    Raises:
        AssertionFailure: On a missing or an extra option
    """
    remaining: List[str] = list(dropdown_options)
    for option in expected_options:
        try:
            remaining.remove(option)
        except ValueError:
            raise AssertionFailure(
                f"the dropdown does not contain the option: {option}"
            ) from None
    if remaining:
        raise AssertionFailure(
            f"the dropdown contains extra options: {','.join(remaining)}"
        )


class Dropdown(TextInput):
    """
    Dropdown interactions: option selection and option-list verification.

    Usage:
        >>> status = Dropdown(driver, "css selector", "#status-select input")
        >>> await status.select_option("Active")
        >>> await status.verify_all_options(["Active", "Inactive"])
    """

    @allure.step("Select option: {value}")
    async def select_option(self, value: str) -> None:
        """Open the list, filter it by ``value`` and click the matching option."""
        await self.force_click()
        await self.set_value(value)
        await self.click_option(value)

    async def click_option(self, value: str) -> None:
        """Click an option of the already-open list."""
        option = ElementHandle(self.driver, LocateStrategy.CSS, OPTION_SELECTOR.format(value=value))
        await option.click()

    async def select_random_option(self) -> None:
        # Two Space keystrokes open the custom list and pick its first entry
        await self.driver.set_value(self.locator, Keys.SPACE)
        await self.driver.set_value(self.locator, Keys.SPACE)

    async def _verify_rendered_options(self, expected_options: Sequence[str], selector: str) -> None:
        await self.click()
        try:
            rendered = await self.get_elements_text(LocateStrategy.CSS, selector)
            logger.debug(f"{self.locator} rendered options: {rendered}")
            verify_options_from_dropdown(expected_options, rendered)
        finally:
            await self.press_escape()

    @allure.step("Verify all dropdown options")
    async def verify_all_options(self, expected_options: Sequence[str]) -> None:
        await self._verify_rendered_options(expected_options, ALL_OPTIONS_SELECTOR)

    @allure.step("Verify available dropdown options")
    async def verify_available_options(self, expected_options: Sequence[str]) -> None:
        await self._verify_rendered_options(expected_options, AVAILABLE_OPTIONS_SELECTOR)

    @allure.step("Verify disabled dropdown options")
    async def verify_disabled_options(self, expected_options: Sequence[str]) -> None:
        await self._verify_rendered_options(expected_options, DISABLED_OPTIONS_SELECTOR)

    verify_options_from_dropdown = staticmethod(verify_options_from_dropdown)


__all__ = [
    "Dropdown",
    "verify_options_from_dropdown",
]
