"""
================================================================================
Wait Helpers
================================================================================

Poll-wait primitives shared by every component.

A poll-wait repeatedly checks a condition against the live DOM until it
holds or the deadline elapses. The outcome is tri-state:

    - SATISFIED: the condition held before the deadline
    - TIMED_OUT_FAILED: deadline elapsed and the caller asked to abort
    - TIMED_OUT_TOLERATED: deadline elapsed and the caller opted out of failure

Usage:
    satisfied = await poll_until(check, timeout=5000, poll_interval=500)

================================================================================
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable

from loguru import logger

from ..common.global_config import get_config


def as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)


@dataclass(frozen=True)
class WaitSettings:
    """
    Defaults for wait and assertion calls.

    Attributes:
        condition_timeout: Wait deadline in milliseconds
        poll_interval: Delay between condition checks in milliseconds
        abort_on_failure: Raise on timeout instead of returning False
    """

    condition_timeout: int = 5000
    poll_interval: int = 500
    abort_on_failure: bool = True

    @classmethod
    def from_config(cls) -> "WaitSettings":
        """Build settings from the ``waits`` configuration section."""
        return cls(
            condition_timeout=int(get_config("waits.condition_timeout", cls.condition_timeout)),
            poll_interval=int(get_config("waits.poll_interval", cls.poll_interval)),
            abort_on_failure=as_bool(get_config("waits.abort_on_failure", cls.abort_on_failure)),
        )


class WaitOutcome(Enum):
    """Result of a presence/visibility condition."""

    SATISFIED = "satisfied"
    TIMED_OUT_FAILED = "timed-out-and-failed"
    TIMED_OUT_TOLERATED = "timed-out-and-tolerated"


def resolve_outcome(satisfied: bool, abort_on_failure: bool) -> WaitOutcome:
    if satisfied:
        return WaitOutcome.SATISFIED
    if abort_on_failure:
        return WaitOutcome.TIMED_OUT_FAILED
    return WaitOutcome.TIMED_OUT_TOLERATED


async def poll_until(
    condition: Callable[[], Awaitable[bool]],
    timeout: int,
    poll_interval: int,
    description: str = "condition",
) -> bool:
    """
    Poll an async condition until it holds or the deadline elapses.

    The condition is always evaluated at least once, even with a zero timeout.

    Args:
        condition: Async callable returning True when satisfied
        timeout: Deadline in milliseconds
        poll_interval: Delay between checks in milliseconds
        description: Human-readable description for logging

    Returns:
        True if the condition held before the deadline, False otherwise
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + max(timeout, 0) / 1000
    interval = max(poll_interval, 1) / 1000
    attempt = 0

    while True:
        attempt += 1
        if await condition():
            logger.debug(f"Wait satisfied after {attempt} attempt(s): {description}")
            return True

        remaining = deadline - loop.time()
        if remaining <= 0:
            logger.warning(f"Timed out after {timeout} ms waiting for: {description}")
            return False

        await asyncio.sleep(min(interval, remaining))


__all__ = [
    "as_bool",
    "WaitOutcome",
    "WaitSettings",
    "poll_until",
    "resolve_outcome",
]
