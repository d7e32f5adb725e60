"""
Instatus REST API client.

Authenticates every request with a bearer token, encodes JSON bodies and
maps non-2xx responses to APIResponseError. No retries: every failure is
raised to the caller as-is.

Dependencies: httpx, pydantic
System role: HTTP boundary between the resource adapter and Instatus
"""

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from instatus_provider.boundary.instatus.models import Component, ComponentResponse
from instatus_provider.configs.constants import (
    BASE_URL,
    COMPONENT_ENDPOINT_V1,
    COMPONENT_ENDPOINT_V2,
    COMPONENTS_ENDPOINT,
    DEFAULT_TIMEOUT_SECONDS,
)
from instatus_provider.core.exceptions import (
    APIResponseError,
    InstatusConnectionError,
    RequestConstructionError,
    ResponseDecodeError,
)

logger = logging.getLogger(__name__)


class InstatusClient:
    """Synchronous client for the Instatus components API."""

    def __init__(
        self,
        api_key: str,
        page_id: str,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            api_key: Instatus API key, sent as a bearer token
            page_id: Status page that owns the components
            base_url: API base URL
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._api_key = api_key
        self._page_id = page_id
        self._http_client = httpx.Client(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @property
    def page_id(self) -> str:
        return self._page_id

    def __enter__(self) -> "InstatusClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http_client.close()

    def _request(self, method: str, endpoint: str, body: dict[str, Any] | None = None) -> bytes:
        """
        Perform an authenticated request and return the raw response body.

        Args:
            method: HTTP method
            endpoint: Path relative to the base URL
            body: JSON-serialisable request body, if any

        Returns:
            bytes: Response body of a 2xx response

        Raises:
            RequestConstructionError: If the body or request cannot be built
            InstatusConnectionError: If the request fails in transit
            APIResponseError: If the API answers with a non-2xx status
        """
        content = None
        if body is not None:
            try:
                content = json.dumps(body)
            except (TypeError, ValueError) as e:
                raise RequestConstructionError(
                    f"error marshaling request body: {e}",
                    details={"method": method, "endpoint": endpoint},
                ) from e

        try:
            request = self._http_client.build_request(
                method,
                endpoint,
                content=content,
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Content-Type": "application/json",
                },
            )
        except (httpx.InvalidURL, ValueError) as e:
            raise RequestConstructionError(
                f"error creating request: {e}",
                details={"method": method, "endpoint": endpoint},
            ) from e

        logger.debug(f"{__name__}:_request - {method} {endpoint}")
        try:
            response = self._http_client.send(request)
        except httpx.HTTPError as e:
            raise InstatusConnectionError(
                f"error making request: {e}",
                details={"method": method, "endpoint": endpoint},
            ) from e

        if not response.is_success:
            logger.debug(
                f"{__name__}:_request - {method} {endpoint} failed with status {response.status_code}"
            )
            raise APIResponseError(response.status_code, response.text)

        return response.content

    @staticmethod
    def _decode_component(raw: bytes) -> Component:
        try:
            return ComponentResponse.model_validate_json(raw).to_component()
        except ValidationError as e:
            raise ResponseDecodeError(f"error unmarshaling response: {e}") from e

    def create_component(self, component: Component) -> Component:
        """
        Create a new component.

        Args:
            component: Desired component; its group ID is sent as `group`

        Returns:
            Component: The created component with its server-assigned ID
        """
        endpoint = COMPONENTS_ENDPOINT.format(page_id=self._page_id)
        raw = self._request("POST", endpoint, component.to_create_payload())
        created = self._decode_component(raw)
        logger.info(f"{__name__}:create_component - Created component {created.id}")
        return created

    def get_component(self, component_id: str) -> Component:
        """
        Retrieve a component by ID.

        Args:
            component_id: Component ID

        Returns:
            Component: Current remote state, including the parent group name
        """
        endpoint = COMPONENT_ENDPOINT_V2.format(page_id=self._page_id, component_id=component_id)
        raw = self._request("GET", endpoint)
        return self._decode_component(raw)

    def update_component(self, component_id: str, component: Component) -> Component:
        """
        Update an existing component in place.

        Args:
            component_id: Component ID
            component: Desired component; its group ID is sent as `groupId`

        Returns:
            Component: The updated component
        """
        endpoint = COMPONENT_ENDPOINT_V2.format(page_id=self._page_id, component_id=component_id)
        raw = self._request("PUT", endpoint, component.to_update_payload())
        logger.info(f"{__name__}:update_component - Updated component {component_id}")
        return self._decode_component(raw)

    def delete_component(self, component_id: str) -> None:
        """
        Delete a component.

        Args:
            component_id: Component ID
        """
        endpoint = COMPONENT_ENDPOINT_V1.format(page_id=self._page_id, component_id=component_id)
        self._request("DELETE", endpoint)
        logger.info(f"{__name__}:delete_component - Deleted component {component_id}")
