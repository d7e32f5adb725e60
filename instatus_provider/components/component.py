"""
Instatus status page component resource.

Maps declared component inputs to Instatus API calls and API responses back
to resource state. The Pulumi engine owns diffing, planning and state; this
module only supplies the CRUD callbacks.

Behaviour worth knowing:
- create sends the parent group as `group` and takes `grouped` from input
- update sends the parent group as `groupId` and derives `grouped` from
  whether a group ID is set
- `order` is only sent when explicitly declared, so reordering done in the
  Instatus UI is not overwritten
- create and update both finish by reading the component back

Example Pulumi Usage:
  api = InstatusComponent(
      "api",
      ComponentArgs(name="Public API", group_id=core_group_id),
  )
  pulumi.export("api_email", api.unique_email)
"""

import logging
from dataclasses import dataclass, fields
from typing import Any

import pulumi
from pulumi.dynamic import (
    CheckFailure,
    CheckResult,
    ConfigureRequest,
    CreateResult,
    ReadResult,
    Resource,
    ResourceProvider,
    UpdateResult,
)
from pulumi.runtime import rpc
from pydantic import ValidationError

from instatus_provider.boundary.instatus.client import InstatusClient
from instatus_provider.boundary.instatus.models import Component
from instatus_provider.components.schema import SCHEMA, ComponentInputs
from instatus_provider.configs.constants import CONFIG_KEYS
from instatus_provider.core.configuration import configure_provider
from instatus_provider.core.exceptions import (
    ConfigurationError,
    InstatusAPIError,
    ResourceOperationError,
    diagnostics_from_error,
)
from instatus_provider.core.schema import computed_fields

logger = logging.getLogger(__name__)


def _state_from_component(component: Component, grouped: bool) -> dict[str, Any]:
    """
    Build resource state from a component read back from the API.

    Args:
        component: Component as returned by a read
        grouped: `grouped` value kept from declared state

    Returns:
        dict: Resource outputs
    """
    return {
        "name": component.name,
        "description": component.description,
        "status": component.status,
        "show_uptime": component.show_uptime,
        "order": component.order,
        "grouped": grouped,
        "group_id": component.group_id,
        "group_name": component.group_name,
        "archived": component.archived,
        "unique_email": component.unique_email,
    }


class ComponentProvider(ResourceProvider):
    """Dynamic provider reconciling Instatus components."""

    def __init__(self, client: InstatusClient | None = None) -> None:
        """
        Initialize the provider.

        Args:
            client: Pre-built API client. When omitted the client is built
                from provider config in configure(), or from the environment
                on first use.
        """
        super().__init__()
        self._client = client

    def configure(self, req: ConfigureRequest) -> None:
        try:
            client = configure_provider(
                api_key=req.config.get(CONFIG_KEYS["api_key"]),
                page_id=req.config.get(CONFIG_KEYS["page_id"]),
            )
        except ConfigurationError as e:
            for diagnostic in diagnostics_from_error(e):
                logger.error(f"{__name__}:configure - {diagnostic}")
            raise

        if self._client is not None:
            self._client.close()
        self._client = client

    def _get_client(self) -> InstatusClient:
        if self._client is None:
            self._client = configure_provider()
        return self._client

    def check(self, _olds: Any, news: Any) -> CheckResult:
        """
        Apply schema defaults and validate declared inputs.

        Inputs still unknown during preview are passed through untouched and
        validated once their values resolve.

        Returns:
            CheckResult: Normalised inputs, or one failure per invalid field
        """
        unknown = {key for key, value in news.items() if value == rpc.UNKNOWN}
        known = {key: value for key, value in news.items() if key not in unknown}

        try:
            inputs = ComponentInputs.model_validate(known)
        except ValidationError as e:
            failures = [
                CheckFailure(".".join(str(part) for part in error["loc"]), error["msg"])
                for error in e.errors()
                if not error["loc"] or error["loc"][0] not in unknown
            ]
            return CheckResult(news, failures)
        return CheckResult({**news, **inputs.model_dump(exclude=unknown)}, [])

    def _read_state(self, component_id: str, grouped: bool | None) -> dict[str, Any]:
        try:
            component = self._get_client().get_component(component_id)
        except InstatusAPIError as e:
            raise ResourceOperationError("reading", e) from e
        if grouped is None:
            grouped = bool(component.group_id)
        return _state_from_component(component, grouped)

    def create(self, props: Any) -> CreateResult:
        inputs = ComponentInputs.model_validate(props)
        component = Component(
            name=inputs.name,
            description=inputs.description,
            status=inputs.status,
            show_uptime=inputs.show_uptime,
            order=inputs.order,
            grouped=inputs.grouped,
            group_id=inputs.group_id,
            archived=inputs.archived,
        )

        try:
            created = self._get_client().create_component(component)
        except InstatusAPIError as e:
            raise ResourceOperationError("creating", e) from e

        outs = self._read_state(created.id, inputs.grouped)
        return CreateResult(created.id, outs)

    def read(self, id_: str, props: Any) -> ReadResult:
        """
        Refresh state from the API.

        Also used for imports, where no prior state exists; `grouped` is
        then inferred from the returned group ID.
        """
        grouped = (props or {}).get("grouped")
        return ReadResult(id_, self._read_state(id_, grouped))

    def update(self, id_: str, _olds: Any, news: Any) -> UpdateResult:
        inputs = ComponentInputs.model_validate(news)
        component = Component(
            name=inputs.name,
            description=inputs.description,
            status=inputs.status,
            show_uptime=inputs.show_uptime,
            order=inputs.order,
            grouped=inputs.group_id is not None,
            group_id=inputs.group_id,
            archived=inputs.archived,
        )

        try:
            self._get_client().update_component(id_, component)
        except InstatusAPIError as e:
            raise ResourceOperationError("updating", e) from e

        return UpdateResult(self._read_state(id_, inputs.grouped))

    def delete(self, id_: str, _props: Any) -> None:
        try:
            self._get_client().delete_component(id_)
        except InstatusAPIError as e:
            raise ResourceOperationError("deleting", e) from e


@dataclass
class ComponentArgs:
    """Declared inputs for an InstatusComponent."""
    name: pulumi.Input[str]
    description: pulumi.Input[str] | None = None
    status: pulumi.Input[str] | None = None
    show_uptime: pulumi.Input[bool] | None = None
    order: pulumi.Input[int] | None = None
    grouped: pulumi.Input[bool] | None = None
    group_id: pulumi.Input[str] | None = None
    archived: pulumi.Input[bool] | None = None


class InstatusComponent(Resource):
    """
    A component on an Instatus status page.

    Unset optional inputs take the schema defaults; `order`, `group_name`
    and `unique_email` are filled in from the API.
    """

    name: pulumi.Output[str]
    description: pulumi.Output[str]
    status: pulumi.Output[str]
    show_uptime: pulumi.Output[bool]
    order: pulumi.Output[int]
    grouped: pulumi.Output[bool]
    group_id: pulumi.Output[str | None]
    group_name: pulumi.Output[str | None]
    archived: pulumi.Output[bool]
    unique_email: pulumi.Output[str | None]

    def __init__(
        self,
        resource_name: str,
        args: ComponentArgs,
        opts: pulumi.ResourceOptions | None = None,
        provider: ComponentProvider | None = None,
    ) -> None:
        props: dict[str, Any] = {f.name: getattr(args, f.name) for f in fields(args)}
        for name in computed_fields(SCHEMA):
            props.setdefault(name, None)
        super().__init__(provider or ComponentProvider(), resource_name, props, opts)

    @classmethod
    def adopt(
        cls,
        resource_name: str,
        component_id: str,
        args: ComponentArgs,
        opts: pulumi.ResourceOptions | None = None,
        provider: ComponentProvider | None = None,
    ) -> "InstatusComponent":
        """
        Bring an existing component under management.

        Args:
            resource_name: Logical Pulumi resource name
            component_id: ID of the existing Instatus component
            args: Declared inputs; must match the remote component
            opts: Additional resource options
            provider: Provider instance; a fresh ComponentProvider by default

        Returns:
            InstatusComponent: Resource imported by ID
        """
        logger.info(f"{__name__}:adopt - Importing component {component_id} as {resource_name}")
        import_opts = pulumi.ResourceOptions(import_=component_id)
        return cls(resource_name, args, pulumi.ResourceOptions.merge(opts, import_opts), provider)
