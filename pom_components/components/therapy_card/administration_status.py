"""
Administration status section of a therapy card.
"""

from __future__ import annotations

from typing import Optional

import allure

from ...framework.capabilities import DriverClient
from ...framework.locator import LocateStrategy
from ..basic import ElementHandle
from ..calendar import Calendar
from ..checkbox import Checkbox
from ..dropdown import Dropdown
from ..text_input import TextInput


class AdministrationStatus(ElementHandle):
    """
    Administration status editor, scoped under its therapy card.

    Dates accept mm/dd/yyyy or "today".
    """

    UNKNOWN_START_DATE = "unknown"

    def __init__(self, driver: DriverClient, parent_card_selector: str):
        super().__init__(driver, LocateStrategy.CSS, parent_card_selector)
        self.edit_button = self.scoped('button[name="edit_administration_button"]')
        self.save_button = self.scoped('button[name="edit_administration_submit_button"]')
        self.unknown_start_date = self.scoped('input[name="start_date_unknown"]', Checkbox)
        self.status_dropdown = self.scoped('#administration_status-select input[type="text"]', Dropdown)
        self.reason_dropdown = self.scoped('#administration_status_reason-select input[type="text"]', Dropdown)
        self.date = self.scoped('input[placeholder="mm/dd/yyyy"]', Calendar)
        self.note = self.scoped('textarea[placeholder="Add a Note"]', TextInput)
        self.other_reason = self.scoped('input[name="administration_status_additional_reason"]', TextInput)

    async def edit(self) -> None:
        await self.edit_button.click()

    async def save(self) -> None:
        await self.save_button.click()

    async def _select_with_reason(
        self,
        status: str,
        reason: str,
        date: str,
        other_reason: Optional[str],
    ) -> None:
        await self.status_dropdown.select_option(status)
        await self.reason_dropdown.select_option(reason)
        if reason == "Other" and other_reason is not None:
            await self.other_reason.set_value(other_reason)
        await self.date.set_date(date)

    @allure.step("Administration status: Pre-Therapy")
    async def select_pre_therapy(self) -> None:
        await self.status_dropdown.select_option("Pre-Therapy")

    @allure.step("Administration status: On Therapy ({start_date})")
    async def select_on_therapy(self, start_date: str, note: Optional[str] = None) -> None:
        """
        Args:
            start_date: Start date, "today", or "unknown" to tick "Unknown Start Date"
            note: Note; only offered the first time the status is set
        """
        await self.status_dropdown.select_option("On Therapy")
        if start_date == self.UNKNOWN_START_DATE:
            await self.unknown_start_date.check()
        else:
            await self.date.set_date(start_date)
        if note:
            await self.note.set_value(note)

    @allure.step("Administration status: No-Go ({reason})")
    async def select_no_go(self, reason: str, no_go_date: str, other_reason: Optional[str] = None) -> None:
        """
        Args:
            reason: "FA unavailable", "Formulary", "No insurance", "PA denied",
                "Patient choice", "Patient unreachable", "Therapy inappropriate" or "Other"
            no_go_date: No-Go date
            other_reason: Free text, used only with reason "Other"
        """
        await self._select_with_reason("No-Go", reason, no_go_date, other_reason)

    @allure.step("Administration status: Discontinued ({reason})")
    async def select_discontinued(
        self,
        reason: str,
        discontinued_date: str,
        other_reason: Optional[str] = None,
    ) -> None:
        await self._select_with_reason("Discontinued", reason, discontinued_date, other_reason)

    @allure.step("Administration status: On Hold ({reason})")
    async def select_on_hold(self, reason: str, recheck_date: str, other_reason: Optional[str] = None) -> None:
        """
        Args:
            reason: "Attempting Pregnancy", "Currently Pregnant", "Drug holiday",
                "Hospitalization", "Medical procedure", "Patient unreachable" or "Other"
            recheck_date: Recheck date
            other_reason: Free text, used only with reason "Other"
        """
        await self._select_with_reason("On Hold", reason, recheck_date, other_reason)


__all__ = [
    "AdministrationStatus",
]
