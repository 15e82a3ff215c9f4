"""TikTok Business API client package.

This package provides an async client for the TikTok Business (Marketing)
API. A single transport client handles authentication, the response
envelope and error mapping; resource classes group the endpoints of each
API area on top of it.

:var __version__: Current package version
:type __version__: str
"""

from .client import Client
from .config.settings import Settings, get_settings
from .exceptions import (
    APIError,
    ConfigurationError,
    DownloadError,
    RequestEncodingError,
    ResponseDecodeError,
    TikTokBusinessError,
    TimeoutError,
    TransportError,
    ValidationError,
)
from .sdk import TikTokBusinessClient

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "Client",
    "ConfigurationError",
    "DownloadError",
    "RequestEncodingError",
    "ResponseDecodeError",
    "Settings",
    "TikTokBusinessClient",
    "TikTokBusinessError",
    "TimeoutError",
    "TransportError",
    "ValidationError",
    "get_settings",
]
