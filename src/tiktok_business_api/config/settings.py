"""Configuration settings for the TikTok Business API client.

This module defines the configuration settings for the client, including
the access token, the API host and request timeouts. Settings are loaded from
environment variables and .env files.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION_BASE_URL = "https://business-api.tiktok.com"
SANDBOX_BASE_URL = "https://sandbox-ads.tiktok.com"
DEFAULT_TIMEOUT = 30.0


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Settings can be configured via environment variables or .env files.
    Field names map to upper-case environment variables, e.g.
    ``tiktok_access_token`` is read from ``TIKTOK_ACCESS_TOKEN``.

    :param tiktok_access_token: Access token sent in the Access-Token header
    :type tiktok_access_token: Optional[str]
    :param tiktok_ad_is_sandbox: Route requests to the sandbox host
    :type tiktok_ad_is_sandbox: bool
    :param tiktok_api_base_url: Base URL for API requests
    :type tiktok_api_base_url: str
    :param tiktok_request_timeout: Per-request timeout in seconds
    :type tiktok_request_timeout: float
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields in .env file
    )

    # Credential
    tiktok_access_token: Optional[str] = Field(
        None, description="TikTok Business API access token"
    )

    # API Configuration
    # Declared before the base URL so the validator below can read it.
    tiktok_ad_is_sandbox: bool = Field(
        False, description="Use the sandbox host instead of production"
    )
    tiktok_api_base_url: str = Field(
        PRODUCTION_BASE_URL, description="TikTok Business API Base URL"
    )
    tiktok_request_timeout: float = Field(
        DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds"
    )

    @field_validator("tiktok_api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str, info) -> str:
        """Switch to the sandbox host when sandbox mode is enabled.

        Only the default production URL is replaced; an explicit custom
        base URL is kept as given.

        :param v: The configured API base URL
        :type v: str
        :param info: Validation info containing other field values
        :type info: Any
        :return: Base URL with any trailing slash removed
        :rtype: str
        """
        v = v.rstrip("/")
        if info.data.get("tiktok_ad_is_sandbox") and v == PRODUCTION_BASE_URL:
            return SANDBOX_BASE_URL
        return v


def get_settings() -> Settings:
    """Load a fresh settings instance from the current environment.

    :return: Settings populated from environment variables and .env
    :rtype: Settings
    """
    return Settings()
