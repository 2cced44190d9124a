#!/usr/bin/env python
"""Root conftest.py that provides fixtures for the test suite.

This file contains:
1. Custom marker registration
2. Settings isolation so configure() calls never leak between tests
3. A loguru capture fixture for asserting on emitted log records
"""

import pytest

from chronokit.utils.config import reset_settings
from chronokit.utils.loguru_setup import logger


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "serial: mark test to run serially (non-parallel)")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against default settings, regardless of the environment."""
    monkeypatch.delenv("CHRONOKIT_DEFAULT_ZONE", raising=False)
    monkeypatch.delenv("CHRONOKIT_LOCALE", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def log_records():
    """Collect loguru messages at DEBUG and above while the test runs."""
    previous_level = logger.getEffectiveLevel()
    logger.configure_level("DEBUG")
    records: list[str] = []
    handler_id = logger.add_sink(lambda message: records.append(message.record["message"]), level="DEBUG")
    yield records
    logger.remove_sink(handler_id)
    logger.configure_level(previous_level)
