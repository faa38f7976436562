"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Its URL path
    - Shared header components
    - Page-specific actions

Author: Automation Team
License: MIT
================================================================================
"""

from .base_page import BasePage
from .base_selectors import HeaderBar
from .home_page import HomePage

__all__ = [
    "BasePage",
    "HeaderBar",
    "HomePage",
]
