"""
================================================================================
Table Component
================================================================================

Tables whose rows and cells are tagged with ``data-qa-id`` values sharing a
common prefix:

    <table data-qa-id="therapy-table">
      <tr data-qa-id="therapy-row-69413033010">
        <td data-qa-id="therapy-name">Daraprim PO 25 MG</td>
        <td data-qa-id="therapy-status">Active</td>
      </tr>
    </table>

The prefix ("therapy") can be passed explicitly; when omitted it is derived
once from the table's own ``data-qa-id`` by dropping its "-table" suffix.

================================================================================
"""

from __future__ import annotations

import warnings
from typing import Dict, Mapping, Optional

import allure
from loguru import logger

from ..framework.capabilities import DriverClient
from ..framework.exceptions import AssertionFailure
from ..framework.locator import LocateStrategy, StrategyLike, xpath_literal
from .basic import ElementHandle


TABLE_ID_SUFFIX = "-table"
EXPAND_BUTTON_LABEL = "expand row"


class Table(ElementHandle):
    """
    Row-level verification and actions for a data-qa-id tagged table.

    Usage:
        >>> table = Table(driver, "css selector", "table[data-qa-id='therapy-table']")
        >>> await table.verify_row_is_present(
        ...     "69413033010",
        ...     {"name": "Daraprim PO 25 MG", "status": "Active"},
        ... )
    """

    def __init__(
        self,
        driver: DriverClient,
        locate_strategy: StrategyLike,
        selector: str,
        prefix: Optional[str] = None,
    ):
        """
        Args:
            driver: Driver capability
            locate_strategy: Locator strategy of the table
            selector: Table selector
            prefix: data-qa-id prefix of rows and cells; derived when omitted
        """
        super().__init__(driver, locate_strategy, selector)
        self.prefix = prefix

    async def row_prefix(self) -> str:
        if self.prefix is None:
            qa_id = await self.get_attribute("data-qa-id")
            if not qa_id:
                raise AssertionFailure(
                    f"{self.locator} has no data-qa-id to derive a row prefix from",
                    selector=self.selector,
                )
            if qa_id.endswith(TABLE_ID_SUFFIX):
                qa_id = qa_id[: -len(TABLE_ID_SUFFIX)]
            self.prefix = qa_id
            logger.debug(f"Derived row prefix '{qa_id}' for {self.locator}")
        return self.prefix

    def tagged(
        self,
        tag: str,
        attribute: str,
        value: str,
        within: Optional[ElementHandle] = None,
    ) -> ElementHandle:
        """Descendant ``tag`` with ``attribute == value``, in this table's locator strategy."""
        parent = within or self
        if self.locator.strategy is LocateStrategy.XPATH:
            return parent.scoped(f"//{tag}[@{attribute}={xpath_literal(value)}]")
        return parent.scoped(f'{tag}[{attribute}="{value}"]')

    async def row(self, row_id: str) -> ElementHandle:
        prefix = await self.row_prefix()
        return self.tagged("tr", "data-qa-id", f"{prefix}-row-{row_id}")

    async def verify_row_is_present(
        self,
        row_id: str,
        cells: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Assert a row is present and, optionally, that its cells contain text.

        Args:
            row_id: Row id after the "{prefix}-row-" part of its data-qa-id
            cells: Cell key -> expected substring; the cell's data-qa-id is
                "{prefix}-{key}"

        Raises:
            AssertionFailure: Row missing, or a cell does not contain its text
        """
        with allure.step(f"Verify row {row_id} is present"):
            prefix = await self.row_prefix()
            row = await self.row(row_id)
            await row.wait_present()
            await row.scroll_into_view()
            await row.wait_visible()
            for key, expected in (cells or {}).items():
                cell = self.tagged("td", "data-qa-id", f"{prefix}-{key}", within=row)
                await cell.verify_text_contains(expected)

    async def verify_row_is_not_present(self, row_id: str) -> None:
        with allure.step(f"Verify row {row_id} is not present"):
            row = await self.row(row_id)
            await row.wait_absent()

    async def edit_row(self, row_id: str) -> None:
        prefix = await self.row_prefix()
        row = await self.row(row_id)
        await self.tagged("button", "data-qa-id", f"{prefix}-edit", within=row).click()

    async def expand_row(self, row_id: str) -> None:
        row = await self.row(row_id)
        await self.tagged("button", "aria-label", EXPAND_BUTTON_LABEL, within=row).click()

    async def verify_expand_row_is_not_present(self, row_id: str) -> None:
        row = await self.row(row_id)
        await self.tagged("button", "aria-label", EXPAND_BUTTON_LABEL, within=row).wait_absent()

    async def verify_record(self, attributes: Dict[str, str]) -> None:
        """
        Assert a row carrying ``data-{key}="{value}"`` attributes is visible.

        Deprecated: use verify_row_is_present instead.
        """
        warnings.warn(
            "verify_record is deprecated, use verify_row_is_present",
            DeprecationWarning,
            stacklevel=2,
        )
        if self.locator.strategy is LocateStrategy.XPATH:
            data = "".join(
                f"[@data-{key}={xpath_literal(value)}]" for key, value in attributes.items()
            )
            row = self.scoped(f"//tr{data}")
        else:
            data = "".join(f'[data-{key}="{value}"]' for key, value in attributes.items())
            row = self.scoped(f"tr{data}")
        await row.wait_present()
        await row.wait_visible()


__all__ = [
    "Table",
]
