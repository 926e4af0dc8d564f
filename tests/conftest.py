"""Shared fixtures: fake backend client and small fake capability groups."""

import asyncio
import os
import tempfile

# Keep log files out of the user's home directory
os.environ.setdefault("GHL_MCP_HOME", tempfile.mkdtemp(prefix="ghl-mcp-test-"))

import pytest

from ghl_mcp.catalog import ToolDefinition, ToolRegistry
from ghl_mcp.dispatch import DispatchRouter
from ghl_mcp.groups import build_groups
from ghl_mcp.router import Router


@pytest.fixture
def anyio_backend():
    return "asyncio"


class FakeClient:
    """Records every request instead of calling GoHighLevel."""

    def __init__(self, location_id="loc_123", responses=None):
        self.location_id = location_id
        self.responses = responses or {}
        self.calls = []
        self.closed = False

    async def request(self, method, path, params=None, json=None):
        self.calls.append({"method": method, "path": path, "params": params, "json": json})
        return self.responses.get((method, path), {"ok": True})

    async def get(self, path, params=None):
        return await self.request("GET", path, params=params)

    async def aclose(self):
        self.closed = True

    @property
    def last(self):
        return self.calls[-1]


class FakeGroup:
    """Minimal capability group: fixed names, canned result or error."""

    def __init__(self, name, tools, result=None, error=None, declared=None, delay=0.0):
        self.name = name
        self._definitions = tuple(
            ToolDefinition(
                t,
                f"The {t} tool",
                {"type": "object", "properties": {"id": {"type": "string"}}},
            )
            for t in tools
        )
        self._declared = tuple(tools if declared is None else declared)
        self.result = result
        self.error = error
        self.delay = delay
        self.calls = []

    def owned_tools(self):
        return self._declared

    def list_definitions(self):
        return self._definitions

    async def execute(self, name, args):
        self.calls.append((name, args))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if self.result is not None:
            return self.result
        return {"tool": name, "args": args}


@pytest.fixture
def contact_group():
    return FakeGroup("contacts", ["create_contact", "get_contact", "search_contacts"])


@pytest.fixture
def messaging_group():
    return FakeGroup("conversations", ["send_sms", "send_email", "get_conversation"])


@pytest.fixture
def registry(contact_group, messaging_group):
    return ToolRegistry.from_groups([contact_group, messaging_group])


@pytest.fixture
def dispatcher(registry):
    return DispatchRouter(registry)


@pytest.fixture
def router(registry, dispatcher):
    return Router(registry, dispatcher)


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def full_registry(fake_client):
    """The real 19-group catalog wired to a recording client."""
    return ToolRegistry.from_groups(build_groups(fake_client))
