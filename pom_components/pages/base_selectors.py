"""
Components shared by every page.
"""

from __future__ import annotations

from ..components.text_input import TextInput
from ..framework.capabilities import DriverClient
from ..framework.locator import LocateStrategy


class HeaderBar:
    """Application header: the global search field."""

    def __init__(self, driver: DriverClient):
        self.search = TextInput(driver, LocateStrategy.CSS, "input#headerSearch")


__all__ = [
    "HeaderBar",
]
