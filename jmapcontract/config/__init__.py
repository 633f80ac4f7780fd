"""Configuration module for jmapcontract."""

from jmapcontract.config.access import clear_settings_cache, get_settings
from jmapcontract.config.schema import Settings, normalize_level

__all__ = ["Settings", "normalize_level", "get_settings", "clear_settings_cache"]
