"""
Schema for the instatus_component resource.

Declares user-facing attributes, their defaults and validation.

Dependencies: pydantic
System role: Validates and normalises declared component inputs
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from instatus_provider.configs.constants import COMPONENT_STATUSES, DEFAULT_STATUS
from instatus_provider.core.schema import SchemaField

SCHEMA: dict[str, SchemaField] = {
    "name": SchemaField(
        type=str,
        required=True,
        description="The name of the component",
    ),
    "description": SchemaField(
        type=str,
        optional=True,
        default="",
        description="The description of the component",
    ),
    "status": SchemaField(
        type=str,
        optional=True,
        default=DEFAULT_STATUS,
        description=f"The status of the component ({', '.join(COMPONENT_STATUSES)})",
    ),
    "show_uptime": SchemaField(
        type=bool,
        optional=True,
        default=True,
        description="Whether to show uptime for this component",
    ),
    "order": SchemaField(
        type=int,
        optional=True,
        computed=True,
        description="The order of the component (managed in UI)",
    ),
    "grouped": SchemaField(
        type=bool,
        optional=True,
        default=False,
        description="Whether this component belongs to a group",
    ),
    "group_id": SchemaField(
        type=str,
        optional=True,
        description="The ID of the parent group (if grouped is true)",
    ),
    "group_name": SchemaField(
        type=str,
        optional=True,
        computed=True,
        description="The name of the parent group (for display)",
    ),
    "archived": SchemaField(
        type=bool,
        optional=True,
        default=False,
        description="Whether the component is archived",
    ),
    "unique_email": SchemaField(
        type=str,
        computed=True,
        description="The unique email address for this component",
    ),
}


class ComponentInputs(BaseModel):
    """Declared component inputs with schema defaults applied."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    description: str = SCHEMA["description"].default
    status: str = SCHEMA["status"].default
    show_uptime: bool = SCHEMA["show_uptime"].default
    order: int | None = None
    grouped: bool = SCHEMA["grouped"].default
    group_id: str | None = None
    group_name: str | None = None
    archived: bool = SCHEMA["archived"].default

    @model_validator(mode="before")
    @classmethod
    def _drop_unset(cls, data: Any) -> Any:
        # Unset inputs arrive as None; let the schema defaults apply
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @field_validator("status")
    @classmethod
    def _known_status(cls, value: str) -> str:
        if value not in COMPONENT_STATUSES:
            raise ValueError(f"status must be one of {', '.join(COMPONENT_STATUSES)}, got {value!r}")
        return value

    @field_validator("group_id")
    @classmethod
    def _empty_group(cls, value: str | None) -> str | None:
        return value or None
