"""
Instatus component wire models.

The API names the parent group differently per operation: create requests
take it as `group`, update requests take it as `groupId`, and read responses
return `groupId` plus a nested `group` object carrying the group's name.

Dependencies: pydantic
System role: Request/response shapes for the Instatus components API
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from instatus_provider.configs.constants import DEFAULT_STATUS


class Component(BaseModel):
    """Client-side view of a status page component."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = Field(None, description="Server-assigned component ID")
    name: str = Field(..., description="Component name")
    description: str = Field("", description="Component description")
    status: str = Field(DEFAULT_STATUS, description="Component status")
    show_uptime: bool = Field(True, description="Whether uptime is shown")
    order: int | None = Field(None, description="Display order, None when unset")
    grouped: bool = Field(False, description="Whether the component belongs to a group")
    group_id: str | None = Field(None, description="Parent group ID")
    group_name: str | None = Field(None, description="Parent group name (read only)")
    archived: bool = Field(False, description="Whether the component is archived")
    unique_email: str | None = Field(None, description="Unique email address (read only)")
    translations: dict[str, Any] | None = Field(None, description="Localised names")

    def _common_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "status": self.status,
            "showUptime": self.show_uptime,
            "grouped": self.grouped,
            "archived": self.archived,
        }
        if self.description:
            payload["description"] = self.description
        # Order is managed in the UI; only send it when explicitly set
        if self.order is not None:
            payload["order"] = self.order
        if self.translations:
            payload["translations"] = self.translations
        return payload

    def to_create_payload(self) -> dict[str, Any]:
        """
        Build the JSON body for a create request.

        Returns:
            dict: Payload with the parent group under `group`
        """
        payload = self._common_payload()
        if self.group_id:
            payload["group"] = self.group_id
        return payload

    def to_update_payload(self) -> dict[str, Any]:
        """
        Build the JSON body for an update request.

        Returns:
            dict: Payload with the parent group under `groupId`
        """
        payload = self._common_payload()
        if self.group_id:
            payload["groupId"] = self.group_id
        return payload


class ComponentGroup(BaseModel):
    """Nested group object returned on reads."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    name: str | None = None


class ComponentResponse(BaseModel):
    """Component as returned by the Instatus API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = ""
    name: str = ""
    description: str = ""
    status: str = ""
    show_uptime: bool = Field(False, alias="showUptime")
    order: int = 0
    group_id: str | None = Field(None, alias="groupId")
    archived: bool = False
    unique_email: str | None = Field(None, alias="uniqueEmail")
    group: ComponentGroup | None = None
    translations: dict[str, Any] | None = None

    @field_validator("id", "name", "description", "status", mode="before")
    @classmethod
    def _null_string(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("order", mode="before")
    @classmethod
    def _null_order(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("show_uptime", "archived", mode="before")
    @classmethod
    def _null_flag(cls, value: Any) -> Any:
        return False if value is None else value

    def to_component(self) -> Component:
        """
        Convert the response into a client-side Component.

        Returns:
            Component: With `group_name` taken from the nested group, if any
        """
        return Component(
            id=self.id,
            name=self.name,
            description=self.description,
            status=self.status,
            show_uptime=self.show_uptime,
            order=self.order,
            grouped=bool(self.group_id),
            group_id=self.group_id or None,
            group_name=self.group.name if self.group else None,
            archived=self.archived,
            unique_email=self.unique_email or None,
            translations=self.translations,
        )
