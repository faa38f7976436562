"""
================================================================================
Floating Action Menu / Patient Searcher Unit Tests
================================================================================
"""

import allure
import pytest

from pom_components.components.basic import ElementHandle
from pom_components.components.floating_action import FloatingActionMenu
from pom_components.components.patient_searcher import PatientSearcher
from pom_components.components.text_input import TextInput


ENTRIES = {
    "new_patient_button": ("open_new_patient_form", "#new-patient"),
    "new_therapy_button": ("open_new_therapy_form", "#new-therapy"),
    "new_note_button": ("open_new_note_side_panel", "#new-note"),
    "new_pbm_insurance_button": ("open_add_pbm_insurance", "#new-pbm"),
    "new_financial_assistance_button": ("open_add_financial_assistance", "#new-fa"),
    "new_income_button": ("open_add_income", "#new-income"),
    "new_medical_insurance_button": ("open_add_medical_insurance", "#new-medical"),
}


@allure.epic("Components")
@allure.feature("Floating action menu")
class TestFloatingActionMenu:

    @allure.story("Open entries")
    @pytest.mark.asyncio
    @pytest.mark.parametrize("argument", sorted(ENTRIES))
    async def test_open_entry_clicks_menu_then_entry(self, driver, argument):
        verb, selector = ENTRIES[argument]
        driver.add("#fab")
        driver.add(selector)
        menu = FloatingActionMenu(
            ElementHandle(driver, "css selector", "#fab"),
            **{argument: ElementHandle(driver, "css selector", selector)},
        )

        await getattr(menu, verb)()

        assert driver.clicked() == ["#fab", selector]

    @allure.story("Open entries")
    @pytest.mark.asyncio
    async def test_missing_entry_raises(self, driver):
        menu = FloatingActionMenu(ElementHandle(driver, "css selector", "#fab"))
        with pytest.raises(ValueError, match="new income"):
            await menu.open_add_income()
        assert driver.calls == []


@allure.epic("Components")
@allure.feature("Patient searcher")
class TestPatientSearcher:

    @allure.story("Search")
    @pytest.mark.asyncio
    async def test_search_patient(self, driver):
        driver.add("button#search")
        search_field = driver.add("input#search", value="previous")
        searcher = PatientSearcher(
            ElementHandle(driver, "css selector", "button#search"),
            TextInput(driver, "css selector", "input#search"),
        )

        await searcher.search_patient("Doe, John")

        assert driver.clicked() == ["button#search"]
        assert search_field.value == "Doe, John"
