"""
================================================================================
Unit Test Configuration
================================================================================

Provides ``FakeDriver``: an in-memory driver capability that records every
call. Elements are registered by locator and carry just enough state for the
components under test (presence, visibility, text, value, attributes).

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest

from pom_components.components.basic import FORCE_CLICK_SCRIPT, HIDE_SCRIPT, SHOW_SCRIPT
from pom_components.framework.driver import Keys
from pom_components.framework.exceptions import DriverCommunicationError
from pom_components.framework.locator import Locator, StrategyLike
from pom_components.framework.waits import WaitSettings


@dataclass
class FakeElement:
    present: bool = True
    visible: bool = True
    enabled: bool = True
    text: str = ""
    value: str = ""
    attributes: Dict[str, Any] = field(default_factory=dict)
    properties: Dict[str, Any] = field(default_factory=dict)
    css: Dict[str, str] = field(default_factory=dict)
    size: Dict[str, float] = field(default_factory=lambda: {"height": 20, "width": 100})
    on_click: Optional[Callable[[], None]] = None


class FakeDriver:
    """Recording driver double keyed by (strategy, selector)."""

    def __init__(self, settings: Optional[WaitSettings] = None):
        self.settings = settings or WaitSettings(condition_timeout=50, poll_interval=10, abort_on_failure=True)
        self.elements: Dict[Locator, FakeElement] = {}
        self.element_texts: Dict[Locator, List[str]] = {}
        self.calls: List[Tuple[Any, ...]] = []
        self.focused: Optional[FakeElement] = None
        self.url = "about:blank"
        self.window_size = {"width": 1280, "height": 720}
        self.windows = 1
        self.current_window = 0
        self.cookies: Dict[str, str] = {}

    # -------------------------------------------------------------------------
    # Test helpers
    # -------------------------------------------------------------------------

    def add(self, selector: str, strategy: StrategyLike = "css selector", **state: Any) -> FakeElement:
        element = FakeElement(**state)
        self.elements[Locator(strategy, selector)] = element
        return element

    def remove(self, selector: str, strategy: StrategyLike = "css selector") -> None:
        self.elements.pop(Locator(strategy, selector), None)

    def set_texts(self, selector: str, texts: List[str], strategy: StrategyLike = "css selector") -> None:
        self.element_texts[Locator(strategy, selector)] = list(texts)

    def calls_of(self, name: str) -> List[Tuple[Any, ...]]:
        return [call for call in self.calls if call[0] == name]

    def clicked(self) -> List[str]:
        """Selectors of every native click, in order."""
        return [call[1] for call in self.calls_of("click")]

    def _element(self, locator: Locator) -> FakeElement:
        element = self.elements.get(locator)
        if element is None or not element.present:
            raise DriverCommunicationError(f"no such element: {locator}")
        return element

    # -------------------------------------------------------------------------
    # Element probes
    # -------------------------------------------------------------------------

    async def count(self, locator: Locator) -> int:
        element = self.elements.get(locator)
        return 1 if element is not None and element.present else 0

    async def is_present(self, locator: Locator) -> bool:
        return await self.count(locator) > 0

    async def is_visible(self, locator: Locator) -> bool:
        element = self.elements.get(locator)
        return element is not None and element.present and element.visible

    async def is_enabled(self, locator: Locator) -> bool:
        return self._element(locator).enabled

    # -------------------------------------------------------------------------
    # Interaction
    # -------------------------------------------------------------------------

    async def click(self, locator: Locator) -> None:
        element = self._element(locator)
        self.calls.append(("click", locator.selector))
        if element.on_click:
            element.on_click()

    async def move_to(self, locator: Locator, x_offset: float, y_offset: float) -> None:
        self._element(locator)
        self.calls.append(("move_to", locator.selector, x_offset, y_offset))

    async def set_value(self, locator: Locator, value: str) -> None:
        element = self._element(locator)
        self.focused = element
        element.value += value
        self.calls.append(("set_value", locator.selector, value))

    async def clear_value(self, locator: Locator) -> None:
        self._element(locator).value = ""
        self.calls.append(("clear_value", locator.selector))

    async def keys(self, *keys: str) -> None:
        self.calls.append(("keys",) + keys)
        if Keys.CONTROL in keys and "a" in keys and Keys.DELETE in keys and self.focused:
            self.focused.value = ""

    async def execute(self, locator: Locator, script: str, arg: Any = None) -> Any:
        element = self._element(locator)
        self.calls.append(("execute", locator.selector, script))
        if script == FORCE_CLICK_SCRIPT and element.on_click:
            element.on_click()
        elif script == HIDE_SCRIPT:
            element.visible = False
        elif script == SHOW_SCRIPT:
            element.visible = True
        return True

    # -------------------------------------------------------------------------
    # Getters
    # -------------------------------------------------------------------------

    async def get_value(self, locator: Locator) -> Optional[str]:
        return self._element(locator).value

    async def get_attribute(self, locator: Locator, name: str) -> Optional[str]:
        return self._element(locator).attributes.get(name)

    async def get_css_property(self, locator: Locator, name: str) -> Optional[str]:
        return self._element(locator).css.get(name)

    async def get_property(self, locator: Locator, name: str) -> Any:
        return self._element(locator).properties.get(name)

    async def get_text(self, locator: Locator) -> Optional[str]:
        return self._element(locator).text

    async def get_size(self, locator: Locator) -> Dict[str, float]:
        return dict(self._element(locator).size)

    async def elements_text(self, locator: Locator) -> List[str]:
        return list(self.element_texts.get(locator, []))

    # -------------------------------------------------------------------------
    # Browser
    # -------------------------------------------------------------------------

    async def goto(self, url: str) -> None:
        self.url = url
        self.calls.append(("goto", url))

    async def refresh(self) -> None:
        self.calls.append(("refresh",))

    async def maximize_window(self) -> None:
        self.window_size = {"width": 1920, "height": 1080}
        self.calls.append(("maximize_window",))

    async def get_window_size(self) -> Dict[str, int]:
        return dict(self.window_size)

    async def resize_window(self, width: int, height: int) -> None:
        self.window_size = {"width": width, "height": height}

    async def open_new_window(self) -> None:
        self.windows += 1

    async def switch_to_window(self, index: int) -> None:
        if not 0 <= index < self.windows:
            raise DriverCommunicationError(f"No window at index {index}")
        self.current_window = index

    async def delete_cookies(self) -> None:
        self.cookies.clear()

    async def set_cookie(self, name: str, value: str) -> None:
        self.cookies[name] = value

    async def pause(self, milliseconds: int) -> None:
        self.calls.append(("pause", milliseconds))

    async def screenshot(self) -> bytes:
        return b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def driver() -> FakeDriver:
    """Fresh fake driver with short wait settings."""
    return FakeDriver()


@pytest.fixture
def tolerant_driver() -> FakeDriver:
    """Fake driver whose waits return False instead of raising."""
    return FakeDriver(WaitSettings(condition_timeout=50, poll_interval=10, abort_on_failure=False))
