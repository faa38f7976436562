"""
================================================================================
Framework Exceptions
================================================================================

Two failure kinds surface from the component layer:

    - AssertionFailure: an expected condition (presence, visibility, value,
      text, attribute) was not met within the allotted wait.
    - DriverCommunicationError: the browser driver round trip itself failed.

================================================================================
"""

from typing import Optional


class AssertionFailure(AssertionError):
    """Raised when a wait or verification does not hold before its deadline."""

    def __init__(self, message: str, selector: Optional[str] = None):
        super().__init__(message)
        self.selector = selector


class DriverCommunicationError(Exception):
    """Raised when a call to the underlying browser driver fails."""
    pass


__all__ = [
    "AssertionFailure",
    "DriverCommunicationError",
]
