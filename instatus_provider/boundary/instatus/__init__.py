"""Instatus API client and wire models."""

from instatus_provider.boundary.instatus.client import InstatusClient
from instatus_provider.boundary.instatus.models import (
    Component,
    ComponentGroup,
    ComponentResponse,
)

__all__ = ["InstatusClient", "Component", "ComponentGroup", "ComponentResponse"]
