"""Configuration package for the TikTok Business API client."""

from .settings import (
    DEFAULT_TIMEOUT,
    PRODUCTION_BASE_URL,
    SANDBOX_BASE_URL,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "PRODUCTION_BASE_URL",
    "SANDBOX_BASE_URL",
    "DEFAULT_TIMEOUT",
]
