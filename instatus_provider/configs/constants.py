"""
Provider constants for the Instatus API.

Contains endpoints, timeouts, the status enumeration and schema defaults.
"""

from typing import Final

# API
BASE_URL: Final[str] = "https://api.instatus.com"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0

# Endpoint templates (page ID, component ID)
COMPONENTS_ENDPOINT: Final[str] = "/v1/{page_id}/components"
COMPONENT_ENDPOINT_V1: Final[str] = "/v1/{page_id}/components/{component_id}"
COMPONENT_ENDPOINT_V2: Final[str] = "/v2/{page_id}/components/{component_id}"

# Component statuses accepted by the API
COMPONENT_STATUSES: Final[tuple[str, ...]] = (
    "OPERATIONAL",
    "UNDERMAINTENANCE",
    "DEGRADEDPERFORMANCE",
    "PARTIALOUTAGE",
    "MAJOROUTAGE",
)
DEFAULT_STATUS: Final[str] = "OPERATIONAL"

# Registry names
RESOURCE_TYPE_COMPONENT: Final[str] = "instatus_component"

# Provider configuration sources
CONFIG_NAMESPACE: Final[str] = "instatus"
CONFIG_KEYS: Final[dict[str, str]] = {
    "api_key": "instatus:apiKey",
    "page_id": "instatus:pageId",
}
ENV_VARS: Final[dict[str, str]] = {
    "api_key": "INSTATUS_API_KEY",
    "page_id": "INSTATUS_PAGE_ID",
}
