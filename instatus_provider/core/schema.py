"""
Declarative schema attributes shared by the provider and its resources.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SchemaField:
    """
    Description of one user-facing attribute.

    Attributes:
        type: Python type of the attribute value
        description: Human-readable description
        required: Must be set by the user
        optional: May be set by the user
        computed: Filled in by the provider when not set
        sensitive: Value must never be logged or shown
        default: Value used when the user leaves the attribute unset
        env_var: Environment variable consulted when unset
    """
    type: type
    description: str
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    default: Any = None
    env_var: str | None = None


def computed_fields(schema: dict[str, SchemaField]) -> list[str]:
    """Return the names of attributes the provider may fill in."""
    return [name for name, spec in schema.items() if spec.computed]
