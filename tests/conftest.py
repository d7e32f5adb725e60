"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory Instatus API on httpx.MockTransport, API clients bound
to it, and an environment free of INSTATUS_* variables.
Dependencies: pytest, httpx
System role: Test infrastructure and fixture management
"""

import itertools
import json
import re
from typing import Any

import httpx
import pytest

from instatus_provider.boundary.instatus.client import InstatusClient

API_KEY = "test-api-key"
PAGE_ID = "page-1"

_COMPONENTS = re.compile(r"^/v1/(?P<page>[^/]+)/components$")
_COMPONENT = re.compile(r"^/(?P<version>v1|v2)/(?P<page>[^/]+)/components/(?P<component_id>[^/]+)$")


class FakeInstatusAPI:
    """In-memory stand-in for the Instatus components API."""

    def __init__(self, api_key: str = API_KEY, page_id: str = PAGE_ID) -> None:
        self.api_key = api_key
        self.page_id = page_id
        self.components: dict[str, dict[str, Any]] = {}
        self.groups: dict[str, str] = {"grp_core": "Core Services"}
        self.requests: list[httpx.Request] = []
        self._ids = itertools.count(1)

    def last_body(self) -> dict[str, Any]:
        """Decoded JSON body of the most recent request."""
        return json.loads(self.requests[-1].content)

    def _render(self, component: dict[str, Any]) -> dict[str, Any]:
        rendered = dict(component)
        group_id = component.get("groupId")
        if group_id:
            rendered["group"] = {"id": group_id, "name": self.groups.get(group_id)}
        else:
            rendered["group"] = None
        return rendered

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.headers.get("Authorization") != f"Bearer {self.api_key}":
            return httpx.Response(401, text='{"message":"Unauthorized"}')

        path = request.url.path
        match = _COMPONENTS.match(path)
        if match and request.method == "POST":
            if match["page"] != self.page_id:
                return httpx.Response(404, text='{"message":"Page not found"}')
            body = json.loads(request.content)
            component_id = f"cmp_{next(self._ids)}"
            component = {
                "id": component_id,
                "name": body["name"],
                "description": body.get("description"),
                "status": body["status"],
                "showUptime": body["showUptime"],
                "order": body.get("order", len(self.components)),
                "groupId": body.get("group"),
                "archived": body["archived"],
                "uniqueEmail": f"{component_id}@mail.instatus.test",
            }
            self.components[component_id] = component
            return httpx.Response(200, json={k: v for k, v in component.items() if k != "groupId"})

        match = _COMPONENT.match(path)
        if not match or match["page"] != self.page_id:
            return httpx.Response(404, text='{"message":"Not found"}')

        component = self.components.get(match["component_id"])
        if component is None:
            return httpx.Response(404, text='{"message":"Component not found"}')

        if request.method == "GET" and match["version"] == "v2":
            return httpx.Response(200, json=self._render(component))

        if request.method == "PUT" and match["version"] == "v2":
            body = json.loads(request.content)
            component.update(
                name=body["name"],
                description=body.get("description"),
                status=body["status"],
                showUptime=body["showUptime"],
                groupId=body.get("groupId"),
                archived=body["archived"],
            )
            if "order" in body:
                component["order"] = body["order"]
            return httpx.Response(200, json=self._render(component))

        if request.method == "DELETE" and match["version"] == "v1":
            del self.components[match["component_id"]]
            return httpx.Response(200, json={"id": match["component_id"]})

        return httpx.Response(405, text='{"message":"Method not allowed"}')


@pytest.fixture
def fake_api() -> FakeInstatusAPI:
    """Provide an empty in-memory Instatus API."""
    return FakeInstatusAPI()


@pytest.fixture
def client(fake_api: FakeInstatusAPI) -> InstatusClient:
    """
    Create InstatusClient wired to the fake API.

    Yields:
        InstatusClient: Client authenticated with the fake API's key
    """
    with InstatusClient(API_KEY, PAGE_ID, transport=httpx.MockTransport(fake_api.handle)) as api_client:
        yield api_client


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Remove INSTATUS_* variables and run from a directory without .env."""
    for name in ("INSTATUS_API_KEY", "INSTATUS_PAGE_ID", "INSTATUS_BASE_URL", "INSTATUS_REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
