"""
Calendar component: date inputs backed by a picker.

Dates use the US ``mm/dd/yyyy`` format of the target application.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

import allure

from .text_input import TextInput


DATE_FORMAT = "%m/%d/%Y"


def tomorrows_date(today: Optional[date] = None) -> str:
    """
    Tomorrow's date as mm/dd/yyyy.

    Args:
        today: Reference date (defaults to the current local date)
    """
    today = today or date.today()
    return (today + timedelta(days=1)).strftime(DATE_FORMAT)


def month_and_year(value: Optional[str] = None) -> str:
    """
    Reduce a mm/dd/yyyy date to mm/yyyy.

    >>> month_and_year("03/15/2024")
    '03/2024'
    """
    if value is None:
        value = tomorrows_date()
    month, _, year = value.split("/")
    return f"{month}/{year}"


class Calendar(TextInput):
    """Calendar input; "today" is accepted from the picker's default."""

    TODAY = "today"

    async def set_today(self) -> None:
        """Clear, open the picker and accept its default (today)."""
        with allure.step(f"Set {self.locator} to today"):
            await self.clear_value()
            await self.click()
            await self.press_enter_key()

    @allure.step("Set date: {value}")
    async def set_date(self, value: str) -> None:
        """
        Set a date.

        Args:
            value: mm/dd/yyyy date, or "today"
        """
        if value == self.TODAY:
            await self.set_today()
        else:
            await self.set_value(value, submit=True)

    tomorrows_date = staticmethod(tomorrows_date)
    month_and_year = staticmethod(month_and_year)


__all__ = [
    "Calendar",
    "month_and_year",
    "tomorrows_date",
]
