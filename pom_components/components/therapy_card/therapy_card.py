"""
================================================================================
Therapy Card Component
================================================================================

A patient therapy card, located by the therapy's NDC. Expanded state is the
"Mui-expanded" class token on the card.

================================================================================
"""

from __future__ import annotations

from typing import Sequence

import allure

from ...framework.capabilities import DriverClient
from ...framework.locator import LocateStrategy
from ..basic import ElementHandle
from ..class_list import CardState, card_state_from_classes
from ..dropdown import Dropdown
from .administration_status import AdministrationStatus
from .service_enrollment import ServiceEnrollment


EXPANDED_CLASS_TOKEN = "Mui-expanded"


class TherapyCard(ElementHandle):
    """
    Therapy card with its service enrollment and administration status editors.

    Usage:
        >>> card = TherapyCard(driver, "69413033010")
        >>> await card.expand_card()
        >>> await card.administration_status.select_on_therapy("today")
    """

    def __init__(self, driver: DriverClient, therapy_ndc: str):
        super().__init__(driver, LocateStrategy.CSS, f'[data-qa-id="therapy-card-{therapy_ndc}"]')
        self.therapy_ndc = therapy_ndc
        self.expand_button = self.scoped('[id^="therapy-expand"]')
        self.edit_button = self.scoped('button[name="edit_button"]')
        self.new_task_button = self.scoped('button[name="add_task_button"]')
        self.notes_button = self.scoped('img[alt="note"]')
        self.service_enrollment = ServiceEnrollment(driver, self.selector)
        self.administration_status = AdministrationStatus(driver, self.selector)

    async def card_state(self) -> CardState:
        return card_state_from_classes(await self.get_property("classList"), EXPANDED_CLASS_TOKEN)

    async def expand_card(self) -> None:
        """Expand the card unless it is already expanded."""
        with allure.step(f"Expand therapy card {self.therapy_ndc}"):
            if await self.card_state() is CardState.CLOSED:
                await self.expand_button.click()
                await self.new_task_button.wait_visible()

    async def collapse_card(self) -> None:
        """Collapse the card unless it is already collapsed."""
        with allure.step(f"Collapse therapy card {self.therapy_ndc}"):
            if await self.card_state() is CardState.OPEN:
                await self.expand_button.click()
                await self.new_task_button.wait_absent()

    @allure.step("Open therapy task: {task}")
    async def open_task(self, task: str) -> None:
        """
        Args:
            task: "Data Collect", "Prior Authorization", "Financial Assistance",
                "Fill Coordination", "Interventions", "Medication Review",
                "Counseling", "Outreach", "Third Party Referral" or
                "Quality Related Event"
        """
        await self.scoped(f'button[title="{task}"]').click()

    async def verify_task_status_options(self, task: str, options: Sequence[str]) -> None:
        status_dropdown = self.scoped(
            f'[data-qa-id="therapy-task-{task.upper()}-status"] input', Dropdown
        )
        await status_dropdown.verify_all_options(options)

    async def open_notes(self) -> None:
        await self.notes_button.click()


__all__ = [
    "TherapyCard",
]
