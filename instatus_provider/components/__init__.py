"""
Pulumi resources for Instatus.

Provides the status page component resource and its dynamic provider.
"""

from instatus_provider.components.component import (
    ComponentArgs,
    ComponentProvider,
    InstatusComponent,
)
from instatus_provider.components.schema import SCHEMA, ComponentInputs

__all__ = [
    "ComponentArgs",
    "ComponentProvider",
    "InstatusComponent",
    "SCHEMA",
    "ComponentInputs",
]
