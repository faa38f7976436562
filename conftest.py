"""
================================================================================
Root Pytest Configuration
================================================================================

Registers project-wide markers, tags tests by directory and sets safe
environment defaults for local runs.

================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end component flows against a real browser"
    )

    # Layer markers
    config.addinivalue_line(
        "markers", "unit: Component tests against the recording fake driver"
    )
    config.addinivalue_line(
        "markers", "ui: Playwright-backed browser tests"
    )


def pytest_collection_modifyitems(config, items):
    """Tag collected tests with their layer marker."""
    for item in items:
        path = str(item.fspath)
        if f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)
        if f"{os.sep}ui{os.sep}" in path:
            item.add_marker(pytest.mark.ui)


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _safe_env_defaults() -> Generator[None, None, None]:
    """
    Set environment defaults if not already provided by the user/CI.
    """
    defaults = {
        "UI_BASE_URL": "http://localhost:3000",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
