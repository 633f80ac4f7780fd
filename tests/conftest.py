"""Pytest hooks and fixtures."""

import pytest
from loguru import logger

from jmapcontract.config import clear_settings_cache


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line(
        "markers",
        "wire: exercises the JSON wire representation end to end",
    )


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def log_lines():
    """Capture loguru messages emitted during a test."""
    lines: list[str] = []
    sink_id = logger.add(lines.append, level="DEBUG", format="{level}|{message}")
    yield lines
    logger.remove(sink_id)
