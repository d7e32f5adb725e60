"""
Provider configuration settings.

Loads Instatus credentials and client tuning from environment variables
(INSTATUS_*) or a local .env file.

Dependencies: pydantic_settings
System role: Fallback source for provider-level configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from instatus_provider.configs.constants import BASE_URL, DEFAULT_TIMEOUT_SECONDS


class ProviderSettings(BaseSettings):
    """Instatus provider settings resolved from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="INSTATUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        repr=False,
        description="The API key for Instatus API authentication",
    )
    page_id: str | None = Field(
        default=None,
        description="The Instatus status page ID",
    )
    base_url: str = Field(
        default=BASE_URL,
        description="Base URL of the Instatus API",
    )
    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Timeout in seconds for each API request",
    )