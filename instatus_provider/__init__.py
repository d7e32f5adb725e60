"""
Pulumi dynamic provider for Instatus status page components.

This package defines:
- An httpx-based client for the Instatus REST API
- A dynamic resource provider reconciling status page components
- Provider registration and configuration (API key, page ID)
"""

from instatus_provider.components.component import (
    ComponentArgs,
    ComponentProvider,
    InstatusComponent,
)
from instatus_provider.provider import configure_provider, get_resource_provider

__all__ = [
    "ComponentArgs",
    "ComponentProvider",
    "InstatusComponent",
    "configure_provider",
    "get_resource_provider",
]
