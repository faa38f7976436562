"""
Dispensing enrollment, part of a therapy card's service enrollment.
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


class Dispensing(ElementHandle):

    def __init__(self, driver: DriverClient, parent_card_selector: str):
        super().__init__(driver, LocateStrategy.CSS, parent_card_selector)
        self.undecided_button = self.scoped('input[name="dispensing_status"][value="Undecided"]')
        self.opt_in_button = self.scoped('input[name="dispensing_status"][value="Opt in"]')
        self.opt_out_button = self.scoped('input[name="dispensing_status"][value="Opt out"]')
        self.days_supply = self.scoped('input[name="days_supply"]', TextInput)
        self.outside_pharmacy_other_reason = self.scoped(
            'input[name="external_dispensing_additional_reason"]', TextInput
        )
        self.per_protocol = self.scoped('input[name="is_needsby_per_protocol"]', Checkbox)
        self.undecided_reason = self.scoped(
            '#dispensing_undecided_reason-select input[type="text"]', Dropdown
        )
        self.transfer_from_pharmacy = self.scoped('input[name="transfer_pharmacy"]', Dropdown)
        self.dispensing_pharmacy = self.scoped('input[name="dispensing_pharmacy"]', Dropdown)
        self.outside_pharmacy_reason = self.scoped(
            '#external_dispensing_reason-select input[type="text"]', Dropdown
        )
        # The follow-up and needs-by pickers share one input slot
        self.follow_up_date = self.scoped('input[placeholder="mm/dd/yyyy"]', Calendar)
        self.needs_by_date = self.follow_up_date

    @allure.step("Dispensing: Undecided ({reason})")
    async def select_undecided(self, reason: str, follow_up_date: Optional[str] = None) -> None:
        """
        Args:
            reason: "Not yet offered to patient" or "Patient deferred decision"
            follow_up_date: Follow-up date, used with "Patient deferred decision"
        """
        await self.undecided_button.click()
        await self.undecided_reason.select_option(reason)
        if reason == "Patient deferred decision" and follow_up_date:
            await self.follow_up_date.set_date(follow_up_date)

    @allure.step("Dispensing: Opt in ({dispensing_pharmacy})")
    async def select_opt_in(
        self,
        dispensing_pharmacy: str,
        outside_pharmacy_reason: Optional[str] = None,
        other_reason: Optional[str] = None,
        needs_by_date: Optional[str] = None,
        days_supply: Optional[str] = None,
        per_protocol: bool = False,
        transfer_from_pharmacy: Optional[str] = None,
    ) -> None:
        """
        Opt the therapy in to dispensing.

        Args:
            dispensing_pharmacy: Dispensing pharmacy
            outside_pharmacy_reason: Outside dispensing pharmacy reason
            other_reason: Free text, used only with outside reason "Other"
            needs_by_date: Needs-by date or "today"
            days_supply: Days supply
            per_protocol: Needs-by date is per protocol
            transfer_from_pharmacy: Pharmacy to transfer from
        """
        await self.opt_in_button.click()
        await self.dispensing_pharmacy.select_option(dispensing_pharmacy)
        await self.per_protocol.set_check_status(per_protocol)
        if outside_pharmacy_reason:
            await self.outside_pharmacy_reason.select_option(outside_pharmacy_reason)
        if outside_pharmacy_reason == "Other" and other_reason is not None:
            await self.outside_pharmacy_other_reason.set_value(other_reason)
        if needs_by_date:
            await self.needs_by_date.set_date(needs_by_date)
        if days_supply:
            await self.days_supply.set_value(days_supply)
        if transfer_from_pharmacy:
            await self.transfer_from_pharmacy.select_option(transfer_from_pharmacy)

    @allure.step("Dispensing: Opt out ({dispensing_pharmacy})")
    async def select_opt_out(
        self,
        dispensing_pharmacy: str,
        outside_pharmacy_reason: str,
        other_reason: Optional[str] = None,
    ) -> None:
        """
        Args:
            dispensing_pharmacy: Dispensing pharmacy
            outside_pharmacy_reason: e.g. "LDD", "Payor Lockout", "Out of Service Area", "Other"
            other_reason: Free text, used only with outside reason "Other"
        """
        await self.opt_out_button.click()
        await self.dispensing_pharmacy.select_option(dispensing_pharmacy)
        await self.outside_pharmacy_reason.select_option(outside_pharmacy_reason)
        if outside_pharmacy_reason == "Other" and other_reason is not None:
            await self.outside_pharmacy_other_reason.set_value(other_reason)


__all__ = [
    "Dispensing",
]
