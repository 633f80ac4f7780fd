"""Loguru setup for structured JSON logs on stdout."""

from __future__ import annotations

import sys
from typing import Any

from loguru import logger

from jmapcontract.config.access import get_settings
from jmapcontract.config.schema import normalize_level


def configure_logging(level: str | None = None, sink: Any = None, serialize: bool | None = None) -> int:
    """Replace existing sinks with a single sink and return its id.

    ``level`` overrides LOG_LEVEL and ``serialize`` overrides LOG_JSON.
    """
    settings = get_settings()
    logger.remove()
    return logger.add(
        sink if sink is not None else sys.stdout,
        level=normalize_level(level) if level is not None else settings.log_level,
        serialize=settings.log_json if serialize is None else serialize,
        backtrace=False,
        diagnose=False,
    )
