"""
Multi-select dropdown whose options are checkboxes.
"""

from __future__ import annotations

from typing import Sequence

import allure

from ..framework.locator import LocateStrategy, xpath_literal
from .basic import ElementHandle
from .checkbox import Checkbox


class MultiSelectDropdown(ElementHandle):

    @staticmethod
    def option_checkbox_xpath(value: str) -> str:
        # Option titles are rendered with a trailing space
        return f"(//span[@title={xpath_literal(value + ' ')}]//parent::li//span)[2]"

    async def multi_select(self, values: Sequence[str]) -> None:
        """
        Check every value in ``values``, filtering the list by each one first.
        """
        with allure.step(f"Multi-select {list(values)}"):
            for value in values:
                checkbox = Checkbox(self.driver, LocateStrategy.XPATH, self.option_checkbox_xpath(value))
                await self.driver.set_value(self.locator, value)
                await checkbox.check()
            await self.press_escape()


__all__ = [
    "MultiSelectDropdown",
]
