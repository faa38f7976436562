"""
================================================================================
Page Components Common Utilities
================================================================================

Shared configuration management and logging setup.

Usage:
    from pom_components.common import get_config, init_logger

    init_logger()
    timeout = get_config("waits.condition_timeout", 5000)

================================================================================
"""

from .global_config import (
    get_config,
    get_logger,
    init_logger,
    reload_config,
    set_config,
)

__all__ = [
    "get_config",
    "get_logger",
    "init_logger",
    "reload_config",
    "set_config",
]
