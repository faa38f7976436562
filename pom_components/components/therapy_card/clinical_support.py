"""
Clinical support enrollment, part of a therapy card's service enrollment.
"""

from __future__ import annotations

from typing import Optional

import allure

from ...framework.capabilities import DriverClient
from ...framework.exceptions import AssertionFailure
from ...framework.locator import LocateStrategy, xpath_literal
from ..basic import ElementHandle
from ..calendar import Calendar
from ..dropdown import Dropdown
from ..text_input import TextInput


CHECKED_CLASS = "Mui-checked"


class ClinicalSupport(ElementHandle):

    def __init__(self, driver: DriverClient, parent_card_selector: str):
        super().__init__(driver, LocateStrategy.CSS, parent_card_selector)
        self.undecided_button = self.scoped('input[data-qa-id="clinical_support_status_Undecided"]')
        self.opt_in_button = self.scoped('input[data-qa-id="clinical_support_status_Opt in"]')
        self.opt_out_button = self.scoped('input[data-qa-id="clinical_support_status_Opt out"]')
        self.other_reason = self.scoped('[data-qa-id="clinical_support_other_reason"] input', TextInput)
        self.undecided_reason = self.scoped(
            '[data-qa-id="clinical_support_undecided_reason_select"] input', Dropdown
        )
        self.opt_out_reason = self.scoped(
            '[data-qa-id="clinical_support_opt_out_reason_select"] input', Dropdown
        )
        self.follow_up_date = self.scoped('input[placeholder="mm/dd/yyyy"]', Calendar)

    @allure.step("Clinical support: Undecided ({reason})")
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

    @allure.step("Clinical support: Opt in")
    async def select_opt_in(self) -> None:
        await self.opt_in_button.click()

    @allure.step("Clinical support: Opt out ({reason})")
    async def select_opt_out(self, reason: str, other_reason: Optional[str] = None) -> None:
        """
        Args:
            reason: "Patient Perception – Therapy Control", "Patient Perception – Long Time Use",
                "Time Constraint", "Clinician Recommendation - Complexity" or "Other"
            other_reason: Free text, used only with reason "Other"
        """
        await self.opt_out_button.click()
        await self.opt_out_reason.select_option(reason)
        if reason == "Other" and other_reason is not None:
            await self.other_reason.set_value(other_reason)

    async def verify_option_is_selected(self, option: str) -> None:
        """
        Assert ``option`` ("Opt in", "Opt out" or "Undecided") is the checked one.
        """
        control = ElementHandle(
            self.driver,
            LocateStrategy.XPATH,
            f"//input[@data-qa-id={xpath_literal('clinical_support_status_' + option)}]"
            f'/ancestor::span[@aria-disabled="false"]',
        )
        await control.wait_present()
        if not await control.has_class(CHECKED_CLASS):
            raise AssertionFailure(
                f"Clinical support option '{option}' is not selected",
                selector=control.selector,
            )


__all__ = [
    "ClinicalSupport",
]
