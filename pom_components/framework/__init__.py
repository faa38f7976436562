"""
================================================================================
Component Framework
================================================================================

Playwright-backed driver layer underneath the page components.

Components:
    - locator: Locator strategies and selector translation
    - waits: Poll-wait primitives and wait defaults
    - driver: The Playwright driver adapter
    - browser_manager: Browser session lifecycle
    - capabilities: Narrow interfaces implemented by widgets

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .capabilities import Checkable, Clickable, DriverClient, ValueHolder, Waitable
from .driver import BrowserDriver, Keys
from .exceptions import AssertionFailure, DriverCommunicationError
from .locator import LocateStrategy, Locator
from .waits import WaitOutcome, WaitSettings, poll_until

__all__ = [
    "AssertionFailure",
    "BrowserDriver",
    "BrowserManager",
    "Checkable",
    "Clickable",
    "DriverClient",
    "DriverCommunicationError",
    "Keys",
    "LocateStrategy",
    "Locator",
    "ValueHolder",
    "WaitOutcome",
    "WaitSettings",
    "Waitable",
    "poll_until",
]
