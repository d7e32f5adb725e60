"""
Pulumi program for Instatus status page components.

Declares one component per entry in `instatus:components` and adopts every
existing component listed in `instatus:imports`, then exports their IDs and
unique email addresses.
"""

from dataclasses import fields
from typing import Any

import pulumi

from instatus_provider.components.component import ComponentArgs, InstatusComponent
from instatus_provider.configs.constants import RESOURCE_TYPE_COMPONENT
from instatus_provider.configs.environment import ProgramConfig, get_config
from instatus_provider.observability.logger import configure_logging, get_logger
from instatus_provider.provider import get_resource_provider

logger = get_logger(__name__)

_ARG_NAMES = {f.name for f in fields(ComponentArgs)}


def _component_args(resource_name: str, spec: dict[str, Any]) -> ComponentArgs:
    """
    Build ComponentArgs from a stack config entry.

    Args:
        resource_name: Logical name, used in error messages
        spec: Component attributes from stack config

    Returns:
        ComponentArgs: Declared inputs

    Raises:
        ValueError: If the entry has unknown attributes or no name
    """
    unknown = set(spec) - _ARG_NAMES
    if unknown:
        raise ValueError(
            f"Component {resource_name!r} has unknown attributes: {', '.join(sorted(unknown))}"
        )
    if "name" not in spec:
        raise ValueError(f"Component {resource_name!r} is missing required attribute 'name'")
    return ComponentArgs(**spec)


def declare_components(config: ProgramConfig) -> dict[str, InstatusComponent]:
    """
    Declare or adopt every configured component.

    Args:
        config: Program configuration from the stack

    Returns:
        dict: Logical name -> declared resource

    Raises:
        ValueError: If an import names an undeclared component, or a
            component entry is invalid
    """
    orphans = set(config.imports) - set(config.components)
    if orphans:
        raise ValueError(
            f"instatus:imports references undeclared components: {', '.join(sorted(orphans))}"
        )

    provider_cls = get_resource_provider(RESOURCE_TYPE_COMPONENT)
    components: dict[str, InstatusComponent] = {}

    for resource_name, spec in config.components.items():
        component_id = config.imports.get(resource_name)
        args = _component_args(resource_name, spec)
        if component_id:
            components[resource_name] = InstatusComponent.adopt(
                resource_name, component_id, args, provider=provider_cls()
            )
        else:
            components[resource_name] = InstatusComponent(resource_name, args, provider=provider_cls())

    logger.info(f"{__name__}:declare_components - Declared {len(components)} component(s)")
    return components


def main() -> None:
    """Declare Instatus components from stack configuration."""
    config = get_config()
    configure_logging(config.log_level)

    components = declare_components(config)

    # --- Exports ---
    for resource_name, component in components.items():
        pulumi.export(f"{resource_name}_id", component.id)
        pulumi.export(f"{resource_name}_unique_email", component.unique_email)
