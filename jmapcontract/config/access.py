"""Cached settings access facade."""

from __future__ import annotations

import threading

from jmapcontract.config.schema import Settings

_lock = threading.RLock()
_settings: Settings | None = None


def get_settings(*, force_reload: bool = False) -> Settings:
    """Get settings with process-local cache and optional refresh."""
    global _settings
    with _lock:
        if force_reload or _settings is None:
            _settings = Settings()
        return _settings


def clear_settings_cache() -> None:
    global _settings
    with _lock:
        _settings = None
