"""
================================================================================
Checkbox / Dropdown / Multi-select / Radio Unit Tests
================================================================================
"""

import allure
import pytest

from pom_components.components.checkbox import Checkbox
from pom_components.components.dropdown import Dropdown, verify_options_from_dropdown
from pom_components.components.multi_select import MultiSelectDropdown
from pom_components.components.radio_button import RadioButton
from pom_components.framework.capabilities import Checkable
from pom_components.framework.driver import Keys
from pom_components.framework.exceptions import AssertionFailure


def add_checkbox(driver, selector, checked=False, strategy="css selector"):
    element = driver.add(selector, strategy=strategy, attributes={"checked": "true" if checked else None})

    def toggle():
        element.attributes["checked"] = None if element.attributes["checked"] else "true"

    element.on_click = toggle
    return element


@allure.epic("Components")
@allure.feature("Checkbox")
class TestCheckbox:

    @allure.story("State")
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "attribute, expected",
        [("true", True), ("checked", True), ("", True), (None, False), ("false", False)],
    )
    async def test_is_checked(self, driver, attribute, expected):
        driver.add("input#c", attributes={"checked": attribute})
        assert await Checkbox(driver, "css selector", "input#c").is_checked() is expected

    @allure.story("Idempotence")
    @pytest.mark.asyncio
    async def test_check_twice_clicks_once(self, driver):
        element = add_checkbox(driver, "input#c")
        checkbox = Checkbox(driver, "css selector", "input#c")

        await checkbox.check()
        await checkbox.check()

        assert driver.clicked() == ["input#c"]
        assert element.attributes["checked"] == "true"

    @allure.story("Idempotence")
    @pytest.mark.asyncio
    async def test_uncheck_unchecked_never_clicks(self, driver):
        add_checkbox(driver, "input#c")
        await Checkbox(driver, "css selector", "input#c").uncheck()
        assert driver.clicked() == []

    @allure.story("Set status")
    @pytest.mark.asyncio
    async def test_set_check_status(self, driver):
        element = add_checkbox(driver, "input#c", checked=True)
        checkbox = Checkbox(driver, "css selector", "input#c")

        await checkbox.set_check_status(True)
        assert driver.clicked() == []
        await checkbox.set_check_status(False)
        assert element.attributes["checked"] is None
        assert driver.clicked() == ["input#c"]

    def test_checkable_capability(self, driver):
        assert isinstance(Checkbox(driver, "css selector", "input"), Checkable)


@allure.epic("Components")
@allure.feature("Dropdown")
class TestOptionComparison:

    @allure.story("Permutation")
    def test_permutation_passes(self):
        verify_options_from_dropdown(["a", "b", "c"], ["c", "a", "b"])

    @allure.story("Duplicates")
    def test_duplicates_are_counted(self):
        verify_options_from_dropdown(["a", "a"], ["a", "a"])
        with pytest.raises(AssertionFailure, match="does not contain the option: a"):
            verify_options_from_dropdown(["a", "a"], ["a"])

    @allure.story("Missing")
    def test_missing_option_is_named(self):
        with pytest.raises(AssertionFailure, match="does not contain the option: c"):
            verify_options_from_dropdown(["a", "c"], ["a", "b"])

    @allure.story("Extras")
    def test_extra_options_are_named(self):
        with pytest.raises(AssertionFailure, match="contains extra options: b,d"):
            verify_options_from_dropdown(["a"], ["a", "b", "d"])

    @allure.story("Inputs")
    def test_caller_list_is_not_mutated(self):
        rendered = ["a", "b"]
        verify_options_from_dropdown(["a", "b"], rendered)
        assert rendered == ["a", "b"]


@allure.epic("Components")
@allure.feature("Dropdown")
class TestDropdown:

    @allure.story("Select")
    @pytest.mark.asyncio
    async def test_select_option(self, driver):
        element = driver.add("#status input")
        driver.add('[data-qa-id="option-Active"]')
        await Dropdown(driver, "css selector", "#status input").select_option("Active")

        assert driver.calls_of("execute")[0][1] == "#status input"
        assert element.value == "Active"
        assert driver.clicked() == ['[data-qa-id="option-Active"]']

    @allure.story("Select")
    @pytest.mark.asyncio
    async def test_select_random_option_sends_two_spaces(self, driver):
        driver.add("#status input")
        await Dropdown(driver, "css selector", "#status input").select_random_option()
        assert driver.calls_of("set_value") == [
            ("set_value", "#status input", Keys.SPACE),
            ("set_value", "#status input", Keys.SPACE),
        ]

    @allure.story("Verify options")
    @pytest.mark.asyncio
    async def test_verify_options_by_state(self, driver):
        driver.add("#status input")
        driver.set_texts(".qa-option", ["Active", "Inactive", "Archived"])
        driver.set_texts('.qa-option[aria-disabled="false"]', ["Active", "Inactive"])
        driver.set_texts('.qa-option[aria-disabled="true"]', ["Archived"])
        dropdown = Dropdown(driver, "css selector", "#status input")

        await dropdown.verify_all_options(["Archived", "Active", "Inactive"])
        await dropdown.verify_available_options(["Inactive", "Active"])
        await dropdown.verify_disabled_options(["Archived"])

        assert driver.clicked() == ["#status input"] * 3
        assert driver.calls_of("keys") == [("keys", Keys.ESCAPE)] * 3

    @allure.story("Verify options")
    @pytest.mark.asyncio
    async def test_failed_verification_still_closes_list(self, driver):
        driver.add("#status input")
        driver.set_texts(".qa-option", ["Active"])
        with pytest.raises(AssertionFailure, match="Inactive"):
            await Dropdown(driver, "css selector", "#status input").verify_all_options(["Inactive"])
        assert driver.calls[-1] == ("keys", Keys.ESCAPE)


@allure.epic("Components")
@allure.feature("Multi-select dropdown")
class TestMultiSelect:

    def test_option_checkbox_xpath(self):
        assert MultiSelectDropdown.option_checkbox_xpath("Oncology") == (
            '(//span[@title="Oncology "]//parent::li//span)[2]'
        )

    @allure.story("Select many")
    @pytest.mark.asyncio
    async def test_multi_select_checks_each_value(self, driver):
        filter_input = driver.add("#programs input")
        first = add_checkbox(driver, MultiSelectDropdown.option_checkbox_xpath("A"), strategy="xpath")
        second = add_checkbox(
            driver, MultiSelectDropdown.option_checkbox_xpath("B"), checked=True, strategy="xpath"
        )

        await MultiSelectDropdown(driver, "css selector", "#programs input").multi_select(["A", "B"])

        assert first.attributes["checked"] == "true"
        assert second.attributes["checked"] == "true"
        assert filter_input.value == "AB"
        assert driver.clicked() == [MultiSelectDropdown.option_checkbox_xpath("A")]
        assert driver.calls[-1] == ("keys", Keys.ESCAPE)


@allure.epic("Components")
@allure.feature("Radio button")
class TestRadioButton:

    @allure.story("Select")
    @pytest.mark.asyncio
    async def test_select_option_css(self, driver):
        driver.add('div#gender [aria-label="Female"]')
        await RadioButton(driver, "css selector", "div#gender").select_option("Female")
        assert driver.clicked() == ['div#gender [aria-label="Female"]']

    @allure.story("Select")
    @pytest.mark.asyncio
    async def test_select_option_xpath_by_value(self, driver):
        driver.add('//div[@id="gender"]//*[@value="M"]', strategy="xpath")
        await RadioButton(driver, "xpath", '//div[@id="gender"]').select_option("M", "value")
        assert driver.clicked() == ['//div[@id="gender"]//*[@value="M"]']

    @allure.story("Select")
    @pytest.mark.asyncio
    async def test_missing_option_fails(self, driver):
        with pytest.raises(AssertionFailure):
            await RadioButton(driver, "css selector", "div#gender").select_option("Other")
