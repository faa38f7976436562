"""
================================================================================
Capabilities
================================================================================

Narrow interfaces implemented by components and by the driver adapter.

Widgets declare the capability set they satisfy instead of relying on one
linear base-class chain, so a widget can be both checkbox-like and text-like
without extension conflicts.

================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from .locator import Locator
from .waits import WaitSettings


@runtime_checkable
class Waitable(Protocol):
    async def wait_present(self, timeout: Optional[int] = None, abort_on_failure: Optional[bool] = None) -> bool: ...

    async def wait_absent(self, timeout: Optional[int] = None, abort_on_failure: Optional[bool] = None) -> bool: ...

    async def wait_visible(self, timeout: Optional[int] = None, abort_on_failure: Optional[bool] = None) -> bool: ...

    async def wait_hidden(self, timeout: Optional[int] = None, abort_on_failure: Optional[bool] = None) -> bool: ...


@runtime_checkable
class Clickable(Protocol):
    async def click(self) -> None: ...

    async def force_click(self) -> None: ...


@runtime_checkable
class ValueHolder(Protocol):
    async def set_value(self, value: str, submit: bool = False) -> None: ...

    async def get_value(self) -> Optional[str]: ...

    async def clear_value(self) -> None: ...


@runtime_checkable
class Checkable(Protocol):
    async def is_checked(self) -> bool: ...

    async def check(self) -> None: ...

    async def uncheck(self) -> None: ...


@runtime_checkable
class DriverClient(Protocol):
    """
    The browser-driver capability consumed by every component.

    Components never manage its lifecycle; they only hold a reference.
    """

    settings: WaitSettings

    # Element probes
    async def count(self, locator: Locator) -> int: ...

    async def is_present(self, locator: Locator) -> bool: ...

    async def is_visible(self, locator: Locator) -> bool: ...

    async def is_enabled(self, locator: Locator) -> bool: ...

    # Interaction
    async def click(self, locator: Locator) -> None: ...

    async def move_to(self, locator: Locator, x_offset: float, y_offset: float) -> None: ...

    async def set_value(self, locator: Locator, value: str) -> None: ...

    async def clear_value(self, locator: Locator) -> None: ...

    async def keys(self, *keys: str) -> None: ...

    async def execute(self, locator: Locator, script: str, arg: Any = None) -> Any: ...

    # Getters
    async def get_value(self, locator: Locator) -> Optional[str]: ...

    async def get_attribute(self, locator: Locator, name: str) -> Optional[str]: ...

    async def get_css_property(self, locator: Locator, name: str) -> Optional[str]: ...

    async def get_property(self, locator: Locator, name: str) -> Any: ...

    async def get_text(self, locator: Locator) -> Optional[str]: ...

    async def get_size(self, locator: Locator) -> Dict[str, float]: ...

    async def elements_text(self, locator: Locator) -> List[str]: ...

    # Browser
    async def goto(self, url: str) -> None: ...

    async def refresh(self) -> None: ...

    async def maximize_window(self) -> None: ...

    async def get_window_size(self) -> Dict[str, int]: ...

    async def resize_window(self, width: int, height: int) -> None: ...

    async def open_new_window(self) -> None: ...

    async def switch_to_window(self, index: int) -> None: ...

    async def delete_cookies(self) -> None: ...

    async def set_cookie(self, name: str, value: str) -> None: ...

    async def pause(self, milliseconds: int) -> None: ...

    async def screenshot(self) -> bytes: ...


__all__ = [
    "Checkable",
    "Clickable",
    "DriverClient",
    "ValueHolder",
    "Waitable",
]
