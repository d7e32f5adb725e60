"""
Provider registration.

Declares the provider configuration schema and the resource types the
provider serves.
"""

from pulumi.dynamic import ResourceProvider

from instatus_provider.components.component import ComponentProvider
from instatus_provider.configs.constants import RESOURCE_TYPE_COMPONENT
from instatus_provider.core.configuration import PROVIDER_SCHEMA, configure_provider

RESOURCES: dict[str, type[ResourceProvider]] = {
    RESOURCE_TYPE_COMPONENT: ComponentProvider,
}

DATA_SOURCES: dict[str, type[ResourceProvider]] = {}


def get_resource_provider(type_name: str) -> type[ResourceProvider]:
    """
    Look up the provider class serving a resource type.

    Args:
        type_name: Registered resource type name (e.g. 'instatus_component')

    Returns:
        type[ResourceProvider]: Provider class for the resource type

    Raises:
        KeyError: If the resource type is not registered
    """
    try:
        return RESOURCES[type_name]
    except KeyError:
        raise KeyError(
            f"Unknown resource type {type_name!r}; available: {', '.join(sorted(RESOURCES))}"
        ) from None


__all__ = [
    "DATA_SOURCES",
    "PROVIDER_SCHEMA",
    "RESOURCES",
    "configure_provider",
    "get_resource_provider",
]
