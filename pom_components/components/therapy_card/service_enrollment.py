"""
Service enrollment section of a therapy card.
"""

from __future__ import annotations

from ...framework.capabilities import DriverClient
from ...framework.locator import LocateStrategy
from ..basic import ElementHandle
from .clinical_support import ClinicalSupport
from .dispensing import Dispensing


class ServiceEnrollment(ElementHandle):
    """Groups the dispensing and clinical support editors with their edit/save buttons."""

    def __init__(self, driver: DriverClient, parent_card_selector: str):
        super().__init__(driver, LocateStrategy.CSS, parent_card_selector)
        self.dispensing = Dispensing(driver, parent_card_selector)
        self.clinical_support = ClinicalSupport(driver, parent_card_selector)
        self.edit_button = self.scoped('button[name="edit_service_button"]')
        self.save_button = self.scoped('button[name="edit_enrollment_submit_button"]')

    async def edit(self) -> None:
        await self.edit_button.click()

    async def save(self) -> None:
        await self.save_button.click()


__all__ = [
    "ServiceEnrollment",
]
