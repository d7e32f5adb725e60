"""
Test suite for InstatusClient.

Covers authentication headers, endpoint routing, the CRUD round trip
against an in-memory API, and mapping of failures to client errors.
"""

import json

import httpx
import pytest

from instatus_provider.boundary.instatus.client import InstatusClient
from instatus_provider.boundary.instatus.models import Component
from instatus_provider.core.exceptions import (
    APIResponseError,
    InstatusConnectionError,
    RequestConstructionError,
    ResponseDecodeError,
)
from tests.conftest import API_KEY, PAGE_ID, FakeInstatusAPI


class TestRequests:
    """Request construction and routing."""

    def test_every_request_is_authenticated_as_json(
        self, client: InstatusClient, fake_api: FakeInstatusAPI
    ) -> None:
        created = client.create_component(Component(name="API"))
        client.get_component(created.id)
        client.delete_component(created.id)

        for request in fake_api.requests:
            assert request.headers["Authorization"] == f"Bearer {API_KEY}"
            assert request.headers["Content-Type"] == "application/json"

    def test_endpoints_and_methods(self, client: InstatusClient, fake_api: FakeInstatusAPI) -> None:
        created = client.create_component(Component(name="API"))
        client.get_component(created.id)
        client.update_component(created.id, Component(name="API v2"))
        client.delete_component(created.id)

        calls = [(r.method, r.url.path) for r in fake_api.requests]
        assert calls == [
            ("POST", f"/v1/{PAGE_ID}/components"),
            ("GET", f"/v2/{PAGE_ID}/components/{created.id}"),
            ("PUT", f"/v2/{PAGE_ID}/components/{created.id}"),
            ("DELETE", f"/v1/{PAGE_ID}/components/{created.id}"),
        ]

    def test_create_body_uses_group_field(self, client: InstatusClient, fake_api: FakeInstatusAPI) -> None:
        client.create_component(Component(name="API", grouped=True, group_id="grp_core"))

        body = fake_api.last_body()
        assert body["group"] == "grp_core"
        assert "groupId" not in body

    def test_update_body_uses_group_id_field(
        self, client: InstatusClient, fake_api: FakeInstatusAPI
    ) -> None:
        created = client.create_component(Component(name="API"))
        client.update_component(created.id, Component(name="API", grouped=True, group_id="grp_core"))

        body = fake_api.last_body()
        assert body["groupId"] == "grp_core"
        assert "group" not in body


class TestComponentLifecycle:
    """CRUD round trip against the in-memory API."""

    def test_create_returns_server_assigned_id(self, client: InstatusClient) -> None:
        created = client.create_component(Component(name="API", status="OPERATIONAL"))

        assert created.id

    def test_create_then_read_matches(self, client: InstatusClient) -> None:
        created = client.create_component(
            Component(name="Website", status="OPERATIONAL", show_uptime=False)
        )

        fetched = client.get_component(created.id)

        assert fetched.id == created.id
        assert fetched.name == "Website"
        assert fetched.status == "OPERATIONAL"
        assert fetched.show_uptime is False

    def test_read_extracts_group_name(self, client: InstatusClient) -> None:
        created = client.create_component(Component(name="API", grouped=True, group_id="grp_core"))

        fetched = client.get_component(created.id)

        assert fetched.group_id == "grp_core"
        assert fetched.group_name == "Core Services"

    def test_update_status_is_reflected(self, client: InstatusClient) -> None:
        created = client.create_component(Component(name="API"))

        client.update_component(created.id, Component(name="API", status="PARTIALOUTAGE"))

        assert client.get_component(created.id).status == "PARTIALOUTAGE"

    def test_read_after_delete_raises(self, client: InstatusClient) -> None:
        created = client.create_component(Component(name="API"))
        client.delete_component(created.id)

        with pytest.raises(APIResponseError) as exc_info:
            client.get_component(created.id)

        assert exc_info.value.status_code == 404


class TestErrorMapping:
    """Failures surface as typed client errors."""

    def test_not_found_reports_status_and_raw_body(self, client: InstatusClient) -> None:
        with pytest.raises(APIResponseError) as exc_info:
            client.get_component("missing")

        error = exc_info.value
        assert error.status_code == 404
        assert error.body == '{"message":"Component not found"}'
        assert str(error) == 'API request failed with status 404: {"message":"Component not found"}'

    def test_wrong_api_key_is_rejected(self, fake_api: FakeInstatusAPI) -> None:
        with InstatusClient("wrong", PAGE_ID, transport=httpx.MockTransport(fake_api.handle)) as api:
            with pytest.raises(APIResponseError) as exc_info:
                api.create_component(Component(name="API"))

        assert exc_info.value.status_code == 401

    def test_network_failure(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with InstatusClient(API_KEY, PAGE_ID, transport=httpx.MockTransport(refuse)) as api:
            with pytest.raises(InstatusConnectionError, match="error making request"):
                api.get_component("cmp_1")

    def test_timeout_is_a_network_failure(self) -> None:
        def slow(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with InstatusClient(API_KEY, PAGE_ID, transport=httpx.MockTransport(slow)) as api:
            with pytest.raises(InstatusConnectionError):
                api.delete_component("cmp_1")

    def test_invalid_json_response(self) -> None:
        def garbage(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>maintenance</html>")

        with InstatusClient(API_KEY, PAGE_ID, transport=httpx.MockTransport(garbage)) as api:
            with pytest.raises(ResponseDecodeError, match="error unmarshaling response"):
                api.get_component("cmp_1")

    def test_unserialisable_body(self, fake_api: FakeInstatusAPI) -> None:
        component = Component(name="API", translations={"name": {"fr": object()}})

        with InstatusClient(API_KEY, PAGE_ID, transport=httpx.MockTransport(fake_api.handle)) as api:
            with pytest.raises(RequestConstructionError, match="error marshaling request body"):
                api.create_component(component)

        assert fake_api.requests == []

    def test_delete_ignores_response_body(self) -> None:
        def empty(request: httpx.Request) -> httpx.Response:
            return httpx.Response(204)

        with InstatusClient(API_KEY, PAGE_ID, transport=httpx.MockTransport(empty)) as api:
            assert api.delete_component("cmp_1") is None

    def test_translations_are_sent_as_json(self, fake_api: FakeInstatusAPI, client: InstatusClient) -> None:
        client.create_component(Component(name="API", translations={"name": {"fr": "API publique"}}))

        assert json.loads(fake_api.requests[-1].content)["translations"] == {"name": {"fr": "API publique"}}
