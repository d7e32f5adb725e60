"""
Program configuration loader.

Loads the declared components from the Pulumi stack config file.
"""

from dataclasses import dataclass, field
from typing import Any

import pulumi

from instatus_provider.configs.constants import CONFIG_NAMESPACE


@dataclass(frozen=True)
class ProgramConfig:
    """
    Stack configuration for the Instatus program.

    Attributes:
        components: Component declarations keyed by logical resource name
        imports: Existing component IDs to adopt, keyed by logical resource name
        log_level: Logging level for the program run
    """
    components: dict[str, dict[str, Any]] = field(default_factory=dict)
    imports: dict[str, str] = field(default_factory=dict)
    log_level: str = "INFO"


def get_config() -> ProgramConfig:
    """
    Load program configuration from Pulumi stack config.

    Example stack config:
        instatus:components:
          api:
            name: Public API
            status: OPERATIONAL
        instatus:imports:
          website: cl1abc...

    Returns:
        ProgramConfig: Validated configuration object

    Raises:
        ValueError: If components or imports are not mappings
    """
    config = pulumi.Config(CONFIG_NAMESPACE)

    components = config.get_object("components") or {}
    imports = config.get_object("imports") or {}
    if not isinstance(components, dict):
        raise ValueError("instatus:components must be a mapping of name to component")
    if not isinstance(imports, dict):
        raise ValueError("instatus:imports must be a mapping of name to component ID")

    return ProgramConfig(
        components={str(name): dict(spec) for name, spec in components.items()},
        imports={str(name): str(component_id) for name, component_id in imports.items()},
        log_level=config.get("logLevel") or "INFO",
    )
