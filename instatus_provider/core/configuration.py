"""
Provider-level configuration.

Resolves the API key and page ID from explicit provider config or the
environment, reporting every missing value as a diagnostic before any
client is built.

Dependencies: pydantic_settings (via ProviderSettings)
System role: Turns provider configuration into a ready API client
"""

import logging

from instatus_provider.boundary.instatus.client import InstatusClient
from instatus_provider.configs.base import ProviderSettings
from instatus_provider.configs.constants import CONFIG_KEYS, ENV_VARS
from instatus_provider.core.exceptions import ConfigurationError, Diagnostic, Severity
from instatus_provider.core.schema import SchemaField

logger = logging.getLogger(__name__)

PROVIDER_SCHEMA: dict[str, SchemaField] = {
    "api_key": SchemaField(
        type=str,
        required=True,
        sensitive=True,
        env_var=ENV_VARS["api_key"],
        description="The API key for Instatus API authentication",
    ),
    "page_id": SchemaField(
        type=str,
        required=True,
        env_var=ENV_VARS["page_id"],
        description="The Instatus status page ID",
    ),
}


def configure_provider(
    api_key: str | None = None,
    page_id: str | None = None,
    settings: ProviderSettings | None = None,
) -> InstatusClient:
    """
    Build an API client from provider configuration.

    Explicit arguments win over environment variables.

    Args:
        api_key: API key from provider config, if set
        page_id: Page ID from provider config, if set
        settings: Environment-backed settings (loaded when omitted)

    Returns:
        InstatusClient: Client bound to the configured page

    Raises:
        ConfigurationError: If the API key or page ID is missing
    """
    settings = settings or ProviderSettings()
    api_key = api_key or settings.api_key
    page_id = page_id or settings.page_id

    diagnostics: list[Diagnostic] = []
    if not api_key:
        diagnostics.append(
            Diagnostic(
                severity=Severity.ERROR,
                summary="Missing API Key",
                detail=(
                    f"API key must be provided via the {CONFIG_KEYS['api_key']} provider "
                    f"config or {PROVIDER_SCHEMA['api_key'].env_var} environment variable"
                ),
            )
        )
    if not page_id:
        diagnostics.append(
            Diagnostic(
                severity=Severity.ERROR,
                summary="Missing Page ID",
                detail=(
                    f"Page ID must be provided via the {CONFIG_KEYS['page_id']} provider "
                    f"config or {PROVIDER_SCHEMA['page_id'].env_var} environment variable"
                ),
            )
        )

    if diagnostics:
        logger.error(f"{__name__}:configure_provider - {len(diagnostics)} configuration error(s)")
        raise ConfigurationError(diagnostics)

    logger.debug(f"{__name__}:configure_provider - Configured client for page {page_id}")
    return InstatusClient(
        api_key=api_key,
        page_id=page_id,
        base_url=settings.base_url,
        timeout=settings.request_timeout,
    )
