"""
Radio button group component.
"""

from __future__ import annotations

import allure

from ..framework.locator import LocateStrategy, xpath_literal
from .basic import ElementHandle


class RadioButton(ElementHandle):
    """A group of radio options scoped under one container selector."""

    def option(self, value: str, value_attribute: str = "aria-label") -> ElementHandle:
        if self.locator.strategy is LocateStrategy.XPATH:
            return self.scoped(f"//*[@{value_attribute}={xpath_literal(value)}]")
        return self.scoped(f'[{value_attribute}="{value}"]')

    @allure.step("Select radio option: {value}")
    async def select_option(self, value: str, value_attribute: str = "aria-label") -> None:
        """
        Select an option.

        Args:
            value: Exact option value
            value_attribute: Attribute carrying the value ("aria-label" or "value")
        """
        option = self.option(value, value_attribute)
        await option.wait_present()
        await option.click()


__all__ = [
    "RadioButton",
]
