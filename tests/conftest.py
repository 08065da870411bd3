"""Pytest configuration and fixtures for tx_mode tests."""

from __future__ import annotations

import logging
from typing import Generator

import pytest
import structlog

from tx_mode.infrastructure.config import get_config
from tx_mode.infrastructure.logging import PACKAGE_LOGGER


@pytest.fixture
def fresh_config(monkeypatch: pytest.MonkeyPatch) -> Generator[pytest.MonkeyPatch, None, None]:
    """Clear the cached config so TX_MODE_* variables set in a test apply."""
    for name in (
        "TX_MODE_SQL__CAPITALIZE",
        "TX_MODE_OBSERVABILITY__LOG_LEVEL",
        "TX_MODE_OBSERVABILITY__LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_config.cache_clear()
    yield monkeypatch
    get_config.cache_clear()


@pytest.fixture(autouse=True)
def unconfigured_logging() -> Generator[None, None, None]:
    """Undo any setup_logging() call made by a test."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    structlog.reset_defaults()


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
