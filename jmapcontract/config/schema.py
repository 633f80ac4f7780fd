"""Ambient settings read from the environment using pydantic-settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVEL_ALIASES = {
    "DEBUG": "DEBUG",
    "INFO": "INFO",
    "WARN": "WARNING",
    "WARNING": "WARNING",
    "ERROR": "ERROR",
}


def normalize_level(value: object) -> str:
    """Map a level name to a loguru level; unknown or empty names become INFO."""
    name = str(value or "").strip().upper()
    return _LEVEL_ALIASES.get(name, "INFO")


class Settings(BaseSettings):
    """Process-wide settings. LOG_LEVEL accepts DEBUG, INFO, WARN/WARNING, ERROR."""
    log_level: str = "INFO"
    log_json: bool = True  # One JSON object per log line

    model_config = SettingsConfigDict(extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        return normalize_level(value)
