"""
================================================================================
Locator
================================================================================

Immutable (strategy, selector) pairs and their translation into Playwright
selector engine strings.

Supported strategies follow the WebDriver locator strategies:
    - css selector
    - xpath
    - link text
    - partial link text
    - tag name

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class LocateStrategy(str, Enum):
    """WebDriver locator strategies."""

    CSS = "css selector"
    XPATH = "xpath"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"
    TAG_NAME = "tag name"


def xpath_literal(value: str) -> str:
    """
    Quote a string for use inside an XPath expression.

    XPath 1.0 has no escape sequences, so values holding both quote kinds
    are split and joined with concat().
    """
    if '"' not in value:
        return f'"{value}"'
    if "'" not in value:
        return f"'{value}'"
    parts = value.split('"')
    return "concat(" + ", '\"', ".join(f'"{part}"' for part in parts) + ")"


@dataclass(frozen=True)
class Locator:
    """
    Identifies zero, one or many live DOM nodes at evaluation time.

    Attributes:
        strategy: Locator strategy
        selector: Selector query for the strategy
    """

    strategy: LocateStrategy
    selector: str

    def __post_init__(self) -> None:
        # Accept plain strings such as "css selector" / "xpath"
        object.__setattr__(self, "strategy", LocateStrategy(self.strategy))

    @classmethod
    def css(cls, selector: str) -> "Locator":
        return cls(LocateStrategy.CSS, selector)

    @classmethod
    def xpath(cls, selector: str) -> "Locator":
        return cls(LocateStrategy.XPATH, selector)

    def child(self, suffix: str) -> "Locator":
        """
        Build a locator scoped under this one.

        CSS selectors are joined with a descendant combinator; XPath suffixes
        are appended verbatim and must start with "/" or "//".
        """
        if self.strategy is LocateStrategy.XPATH:
            return Locator(self.strategy, f"{self.selector}{suffix}")
        return Locator(self.strategy, f"{self.selector} {suffix}")

    def to_playwright(self) -> str:
        """Translate into a Playwright selector engine string."""
        if self.strategy is LocateStrategy.XPATH:
            return f"xpath={self.selector}"
        if self.strategy is LocateStrategy.LINK_TEXT:
            return f"xpath=//a[normalize-space(.)={xpath_literal(self.selector)}]"
        if self.strategy is LocateStrategy.PARTIAL_LINK_TEXT:
            return f"xpath=//a[contains(normalize-space(.), {xpath_literal(self.selector)})]"
        return f"css={self.selector}"

    def __str__(self) -> str:
        return f"{self.strategy.value}={self.selector}"


StrategyLike = Union[LocateStrategy, str]


__all__ = [
    "LocateStrategy",
    "Locator",
    "StrategyLike",
    "xpath_literal",
]
