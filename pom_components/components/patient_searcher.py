"""
Patient searcher: a search button revealing a search input.
"""

from __future__ import annotations

import allure

from .basic import ElementHandle
from .text_input import TextInput


class PatientSearcher(ElementHandle):

    def __init__(self, search_button: ElementHandle, search_input: TextInput):
        super().__init__(search_button.driver, search_button.locator.strategy, search_button.selector)
        self.search_input = search_input

    @allure.step("Search patient: {patient}")
    async def search_patient(self, patient: str) -> None:
        """
        Search for a patient.

        Args:
            patient: "Last, First" name, MRN, DOB (mm/dd/yyyy) or phone (xxx-xxx-xxxx)
        """
        await self.click()
        await self.search_input.set_value(patient)


__all__ = [
    "PatientSearcher",
]
