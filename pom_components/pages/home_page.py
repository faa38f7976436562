"""
================================================================================
Home Page Object
================================================================================
"""

from __future__ import annotations

import allure

from .base_page import BasePage


class HomePage(BasePage):
    """Landing page of the application."""

    URL_PATH = "/"

    @allure.step("Search: {text}")
    async def search(self, text: str) -> None:
        """Type ``text`` into the header search and submit it."""
        await self.header.search.set_value(text, submit=True)


__all__ = [
    "HomePage",
]
