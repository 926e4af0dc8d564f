"""Tests for JSON-RPC validation and MCP method routing."""

import json

import pytest

from ghl_mcp.catalog import ToolRegistry
from ghl_mcp.client import GHLApiError
from ghl_mcp.dispatch import DispatchRouter
from ghl_mcp.protocol import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    ProtocolError,
    validate_message,
)
from ghl_mcp.router import Router

from conftest import FakeGroup

pytestmark = pytest.mark.anyio


def _request(method, params=None, msg_id=1):
    msg = {"jsonrpc": "2.0", "id": msg_id, "method": method}
    if params is not None:
        msg["params"] = params
    return msg


class TestValidateMessage:
    def test_kinds(self):
        assert validate_message({"jsonrpc": "2.0", "id": 1, "method": "ping"}) == "request"
        assert validate_message({"jsonrpc": "2.0", "method": "initialized"}) == "notification"
        assert validate_message({"jsonrpc": "2.0", "id": 1, "result": {}}) == "response"
        assert validate_message({"jsonrpc": "2.0", "id": 1, "error": {}}) == "error"

    @pytest.mark.parametrize("msg", [
        [],
        {"id": 1, "method": "ping"},
        {"jsonrpc": "1.0", "id": 1, "method": "ping"},
        {"jsonrpc": "2.0", "id": 1, "method": ""},
        {"jsonrpc": "2.0", "id": 1, "method": "ping", "params": "x"},
        {"jsonrpc": "2.0", "id": 1},
    ])
    def test_invalid(self, msg):
        with pytest.raises(ProtocolError) as exc_info:
            validate_message(msg)
        assert exc_info.value.code == INVALID_REQUEST


class TestLifecycle:
    async def test_initialize(self, router):
        resp = await router.handle(_request("initialize", {
            "protocolVersion": "2024-11-05",
            "clientInfo": {"name": "pytest"},
        }))
        result = resp["result"]
        assert resp["id"] == 1
        assert result["protocolVersion"] == "2024-11-05"
        assert result["serverInfo"] == {"name": "GoHighLevel MCP Server", "version": "1.0.0"}
        assert result["capabilities"]["tools"] == {"listChanged": True}
        assert "Total tools: 6." in result["instructions"]

    @pytest.mark.parametrize("method", [
        "initialized", "notifications/initialized", "notifications/cancelled",
    ])
    async def test_notifications_get_no_response(self, router, method):
        assert await router.handle({"jsonrpc": "2.0", "method": method}) is None

    async def test_ping(self, router):
        assert await router.handle(_request("ping", msg_id="p")) == {
            "jsonrpc": "2.0", "id": "p", "result": {},
        }

    async def test_client_responses_ignored(self, router):
        assert await router.handle({"jsonrpc": "2.0", "id": 9, "result": {}}) is None

    async def test_unknown_method(self, router):
        resp = await router.handle(_request("resources/list"))
        assert resp["error"]["code"] == METHOD_NOT_FOUND

    async def test_unknown_method_notification_silent(self, router):
        assert await router.handle({"jsonrpc": "2.0", "method": "whatever"}) is None

    async def test_invalid_request_with_id(self, router):
        resp = await router.handle({"id": 4, "method": "ping"})
        assert resp["id"] == 4
        assert resp["error"]["code"] == INVALID_REQUEST


class TestToolsList:
    async def test_tools_and_meta(self, router):
        resp = await router.handle(_request("tools/list"))
        result = resp["result"]
        assert [t["name"] for t in result["tools"]][:2] == ["create_contact", "get_contact"]
        meta = result["_meta"]
        assert meta["totalCount"] == 6
        assert meta["serverInfo"]["name"] == "GoHighLevel MCP Server"
        assert meta["categories"][0] == {
            "name": "Contact Management",
            "count": 3,
            "tools": ["create_contact", "get_contact", "search_contacts"],
        }


class TestToolsCall:
    async def test_success(self, router, messaging_group):
        resp = await router.handle(_request("tools/call", {
            "name": "send_sms", "arguments": {"message": "hi"},
        }))
        text = resp["result"]["content"][0]["text"]
        assert json.loads(text)["args"] == {"message": "hi"}
        assert messaging_group.calls == [("send_sms", {"message": "hi"})]

    async def test_arguments_optional(self, router, contact_group):
        await router.handle(_request("tools/call", {"name": "get_contact"}))
        assert contact_group.calls == [("get_contact", {})]

    async def test_missing_name(self, router):
        resp = await router.handle(_request("tools/call", {"arguments": {}}))
        assert resp["error"]["code"] == INVALID_PARAMS

    async def test_arguments_must_be_object(self, router):
        resp = await router.handle(_request("tools/call", {"name": "get_contact", "arguments": [1]}))
        assert resp["error"]["code"] == INVALID_PARAMS

    async def test_unknown_tool(self, router):
        resp = await router.handle(_request("tools/call", {"name": "delete_contact_permanently"}))
        assert resp["error"] == {
            "code": INVALID_REQUEST,
            "message": "Unknown tool: delete_contact_permanently",
            "data": {"tool": "delete_contact_permanently"},
        }

    async def test_not_found_failure(self):
        group = FakeGroup("misc", ["boom"], error=GHLApiError(404, "gone"))
        registry = ToolRegistry.from_groups([group])
        router = Router(registry, DispatchRouter(registry))
        resp = await router.handle(_request("tools/call", {"name": "boom"}))
        assert resp["error"]["code"] == INVALID_REQUEST

    async def test_internal_failure(self):
        group = FakeGroup("misc", ["boom"], error=RuntimeError("kaput"))
        registry = ToolRegistry.from_groups([group])
        router = Router(registry, DispatchRouter(registry))
        resp = await router.handle(_request("tools/call", {"name": "boom"}))
        assert resp["error"]["code"] == INTERNAL_ERROR
        assert "kaput" in resp["error"]["message"]
