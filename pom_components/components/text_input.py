"""
Text input component: text inputs and text areas.
"""

from __future__ import annotations

import random
import string
from typing import Optional

import allure
from loguru import logger

from ..framework.driver import Keys
from .basic import ElementHandle


def random_lowercase(length: int = 10) -> str:
    """Uniformly sampled lowercase a-z string of ``length`` characters."""
    return "".join(random.choice(string.ascii_lowercase) for _ in range(length))


class TextInput(ElementHandle):
    """
    User interactions with a text input or text area.

    Implements the ValueHolder capability on top of ElementHandle.
    """

    async def set_value(self, value: str, submit: bool = False) -> None:
        """
        Clear the input, then type ``value``.

        Args:
            value: Text to type
            submit: Press Enter after typing
        """
        with allure.step(f"Set {self.locator} to '{value}'"):
            await self.clear_value()
            await self.append_value(value, submit)

    async def append_value(self, value: str, submit: bool = False) -> None:
        """Type ``value`` after whatever the input already holds."""
        await self.driver.set_value(self.locator, value)
        if submit:
            await self.driver.keys(Keys.ENTER)

    async def get_value(self) -> Optional[str]:
        return await self.driver.get_value(self.locator)

    async def clear_value(self) -> None:
        """
        Clear the input with Control + a + Delete.

        A native clear leaves the UI framework's internal value state behind,
        so the field is focused and cleared through the keyboard instead.
        """
        await self.driver.set_value(self.locator, "")
        await self.driver.keys(Keys.CONTROL, "a", Keys.DELETE, Keys.NULL)

    async def verify_value(self, expected_value: str) -> None:
        async def check():
            actual = await self.get_value()
            return actual == expected_value, actual

        with allure.step(f"Verify {self.locator} value is '{expected_value}'"):
            await self._verify(check, f"to have value {expected_value!r}")

    async def insert_random_string(self, length: int = 10) -> str:
        """
        Type a random lowercase string into the input.

        Returns:
            The generated string, for later verification
        """
        text = random_lowercase(length)
        await self.driver.clear_value(self.locator)
        await self.driver.set_value(self.locator, text)
        logger.debug(f"Inserted random string into {self.locator}: {text}")
        return text

    async def press_enter_key(self) -> None:
        await self.driver.keys(Keys.ENTER)


__all__ = [
    "TextInput",
    "random_lowercase",
]
