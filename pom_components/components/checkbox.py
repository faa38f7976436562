"""
Checkbox component.
"""

from __future__ import annotations

import allure
from loguru import logger

from .basic import ElementHandle


class Checkbox(ElementHandle):
    """
    Checkbox with idempotent check / uncheck.

    The current state is read before acting; a click is only issued when it
    differs from the desired one.
    """

    async def is_checked(self) -> bool:
        status = await self.get_attribute("checked")
        return status is not None and str(status).lower() != "false"

    async def check(self) -> None:
        with allure.step(f"Check {self.locator}"):
            if not await self.is_checked():
                await self.click()
            else:
                logger.debug(f"{self.locator} already checked")

    async def uncheck(self) -> None:
        with allure.step(f"Uncheck {self.locator}"):
            if await self.is_checked():
                await self.click()
            else:
                logger.debug(f"{self.locator} already unchecked")

    async def set_check_status(self, status: bool) -> None:
        if status:
            await self.check()
        else:
            await self.uncheck()


__all__ = [
    "Checkbox",
]
