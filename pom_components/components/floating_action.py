"""
Floating action menu: a button that unfolds into shortcut buttons.
"""

from __future__ import annotations

from typing import Optional

import allure

from .basic import ElementHandle


class FloatingActionMenu(ElementHandle):
    """
    Floating action button and the entries it reveals.

    Each ``open_*`` verb clicks the floating button, then the entry. Entries
    not passed at construction raise ValueError when used.
    """

    def __init__(
        self,
        floating_button: ElementHandle,
        new_patient_button: Optional[ElementHandle] = None,
        new_therapy_button: Optional[ElementHandle] = None,
        new_note_button: Optional[ElementHandle] = None,
        new_pbm_insurance_button: Optional[ElementHandle] = None,
        new_financial_assistance_button: Optional[ElementHandle] = None,
        new_income_button: Optional[ElementHandle] = None,
        new_medical_insurance_button: Optional[ElementHandle] = None,
    ):
        super().__init__(floating_button.driver, floating_button.locator.strategy, floating_button.selector)
        self.new_patient_button = new_patient_button
        self.new_therapy_button = new_therapy_button
        self.new_note_button = new_note_button
        self.new_pbm_insurance_button = new_pbm_insurance_button
        self.new_financial_assistance_button = new_financial_assistance_button
        self.new_income_button = new_income_button
        self.new_medical_insurance_button = new_medical_insurance_button

    async def _open(self, entry: Optional[ElementHandle], name: str) -> None:
        if entry is None:
            raise ValueError(f"{self!r} was built without a '{name}' entry")
        with allure.step(f"Open {name} from floating action menu"):
            await self.click()
            await entry.click()

    async def open_new_patient_form(self) -> None:
        await self._open(self.new_patient_button, "new patient")

    async def open_new_therapy_form(self) -> None:
        await self._open(self.new_therapy_button, "new therapy")

    async def open_new_note_side_panel(self) -> None:
        await self._open(self.new_note_button, "new note")

    async def open_add_pbm_insurance(self) -> None:
        await self._open(self.new_pbm_insurance_button, "PBM insurance")

    async def open_add_financial_assistance(self) -> None:
        await self._open(self.new_financial_assistance_button, "financial assistance")

    async def open_add_income(self) -> None:
        await self._open(self.new_income_button, "new income")

    async def open_add_medical_insurance(self) -> None:
        await self._open(self.new_medical_insurance_button, "medical insurance")


__all__ = [
    "FloatingActionMenu",
]
