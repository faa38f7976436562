"""
================================================================================
Task Card Component
================================================================================

A patient task card. The card's open state is the "cardChecked" class
token; the task status is moved through whichever control the UI happens to
render: the selected status button, the default status button, or the
"more" overflow menu.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from ..framework.capabilities import DriverClient
from ..framework.locator import LocateStrategy
from .basic import ElementHandle
from .class_list import CardState, card_state_from_classes
from .dropdown import Dropdown


OPEN_CLASS_TOKEN = "cardChecked"
EXPANDED_MENU_SELECTOR = 'div[role="presentation"] div[style*="transform: none"]'


class TaskCard(ElementHandle):
    """
    Task card, located by task name.

    Usage:
        >>> card = TaskCard(driver, "Data Collect")
        >>> await card.open_card()
        >>> await card.move_to_status("Completed")
        >>> await card.verify_task_status("Completed")
    """

    # Probe timeout for each control in the status fallback chain
    STATUS_PROBE_TIMEOUT = 3000

    def __init__(self, driver: DriverClient, name: str):
        super().__init__(driver, LocateStrategy.CSS, f'[data-qa-id="task-card-{name.upper()}"]')
        self.name = name
        self.card_content = ElementHandle(driver, LocateStrategy.CSS, '[data-qa-id="card-content"]')
        self.current_status = ElementHandle(driver, LocateStrategy.CSS, '[data-qa-id="current-status-chip"]')
        self.more_button = Dropdown(driver, LocateStrategy.CSS, '[data-qa-id="status-more-button"]')

    async def card_state(self) -> CardState:
        return card_state_from_classes(await self.get_property("classList"), OPEN_CLASS_TOKEN)

    async def open_card(self) -> None:
        """Open the card content unless it is already open."""
        with allure.step(f"Open task card {self.name}"):
            if await self.card_state() is CardState.CLOSED:
                await self.click()
                await self.card_content.wait_present()

    async def close_card(self) -> None:
        """Close the card content unless it is already closed."""
        with allure.step(f"Close task card {self.name}"):
            if await self.card_state() is CardState.OPEN:
                await self.click()
                await self.card_content.wait_absent()

    async def verify_card_content_next_default_status(self, status: str) -> None:
        await self.card_content.scoped('[name="status_id"]').verify_text(status)

    async def move_to_status(self, next_status: str) -> None:
        """
        Move the task to ``next_status``.

        Tries, in order: the selected status button, the default status
        button, then the overflow menu.
        """
        selected_status = self.card_content.scoped(f'[data-qa-id="status_id_{next_status}_selected"]')
        next_default_status = self.card_content.scoped(f'[data-qa-id="status_id_{next_status}"]')

        with allure.step(f"Move task {self.name} to status {next_status}"):
            if await selected_status.wait_present(self.STATUS_PROBE_TIMEOUT, False):
                await selected_status.click()
            elif await next_default_status.wait_present(self.STATUS_PROBE_TIMEOUT, False):
                await next_default_status.click()
            else:
                logger.debug(f"Status {next_status} not rendered directly, using overflow menu")
                await self.more_button.click()
                menu = ElementHandle(self.driver, LocateStrategy.CSS, EXPANDED_MENU_SELECTOR)
                await menu.wait_present()
                await self.more_button.click_option(next_status)

    async def verify_task_status(self, status: str) -> None:
        card_status = self.scoped(f'[data-qa-id="task-card-status-{status}"]')
        await card_status.wait_visible()
        await card_status.verify_text(status)


__all__ = [
    "TaskCard",
]
