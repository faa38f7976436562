"""
================================================================================
POM Components
================================================================================

Page Object Model component library on top of a Playwright browser driver.

Modules:
    - common: Shared configuration and logging utilities
    - framework: Locators, waits, the driver adapter and browser lifecycle
    - components: Reusable widgets (inputs, dropdowns, tables, cards, ...)
    - pages: Page objects composed from components

Example:
    from pom_components.framework import BrowserManager
    from pom_components.components import Table

    async with BrowserManager() as manager:
        driver = await manager.new_driver()
        table = Table(driver, "css selector", '[data-qa-id="therapies-table"]')
        await table.verify_row_is_present("69413033010", {"ndc": "69413033010"})

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "components",
    "framework",
    "pages",
]
