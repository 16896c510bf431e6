"""
Repository-level pytest configuration.

Why this exists:
  - Keep every test independent of the developer's shell environment
  - Reset the configuration singleton between tests

Important:
  Suite definitions read the root browser set from config/config.yaml unless
  BROWSERS is exported. Tests that need a specific set pass it explicitly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest

from capture_suites.framework.config_loader import ConfigLoader


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch) -> Generator[None, None, None]:
    """Drop environment overrides and the cached configuration around each test."""
    for key in (
        "BROWSERS",
        "LOGGING_LEVEL",
        "LOGGING_FORMAT",
        "LOGGING_FILE",
        "LOGGING_ROTATION",
        "LOGGING_RETENTION",
    ):
        monkeypatch.delenv(key, raising=False)

    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
