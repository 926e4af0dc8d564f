"""Tests for SSE push-channel sessions."""

import asyncio
import json

import pytest

from ghl_mcp.catalog import ToolRegistry
from ghl_mcp.dispatch import DispatchRouter
from ghl_mcp.router import Router
from ghl_mcp.sse import KEEPALIVE, SessionClosedError, SessionManager

from conftest import FakeGroup

pytestmark = pytest.mark.anyio


def _call(msg_id, name):
    return {"jsonrpc": "2.0", "id": msg_id, "method": "tools/call", "params": {"name": name}}


def _data(event):
    line = next(l for l in event.splitlines() if l.startswith("data: "))
    return line[len("data: "):]


async def _next_or_end(stream):
    try:
        return await stream.__anext__()
    except StopAsyncIteration:
        return None


@pytest.fixture
def manager(router):
    manager = SessionManager(router)
    yield manager
    manager.close_all()


class TestSession:
    async def test_responses_in_request_order(self):
        """A slow first call still answers before a fast second one."""
        slow = FakeGroup("slow", ["slow_tool"], delay=0.05)
        fast = FakeGroup("fast", ["fast_tool"])
        registry = ToolRegistry.from_groups([slow, fast])
        manager = SessionManager(Router(registry, DispatchRouter(registry)))
        session = manager.create()

        await session.submit(_call(1, "slow_tool"))
        await session.submit(_call(2, "fast_tool"))
        first = await session.next_response(timeout=2)
        second = await session.next_response(timeout=2)
        assert [first["id"], second["id"]] == [1, 2]
        manager.close_all()

    async def test_notifications_produce_nothing(self, manager):
        session = manager.create()
        await session.submit({"jsonrpc": "2.0", "method": "notifications/initialized"})
        await session.submit({"jsonrpc": "2.0", "id": 7, "method": "ping"})
        resp = await session.next_response(timeout=2)
        assert resp == {"jsonrpc": "2.0", "id": 7, "result": {}}

    async def test_sessions_isolated(self, manager):
        a = manager.create()
        b = manager.create()
        await a.submit({"jsonrpc": "2.0", "id": "a1", "method": "ping"})
        assert (await a.next_response(timeout=2))["id"] == "a1"
        with pytest.raises(asyncio.TimeoutError):
            await b.next_response(timeout=0.05)


class TestEventStream:
    async def test_endpoint_then_messages(self, manager):
        session = manager.create()
        stream = manager.stream(session, keepalive=5)

        endpoint = await stream.__anext__()
        assert endpoint.startswith("event: endpoint\n")
        assert _data(endpoint) == f"/sse?sessionId={session.id}"

        await session.submit({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
        message = await stream.__anext__()
        assert message.startswith("event: message\n")
        assert message.endswith("\n\n")
        assert json.loads(_data(message))["result"]["_meta"]["totalCount"] == 6
        await stream.aclose()

    async def test_keepalive(self, manager):
        session = manager.create()
        stream = manager.stream(session, keepalive=0.01)
        await stream.__anext__()
        assert await stream.__anext__() == KEEPALIVE
        await stream.aclose()

    async def test_stream_close_removes_session(self, manager):
        session = manager.create()
        stream = manager.stream(session, keepalive=5)
        await stream.__anext__()
        assert session.id in manager
        await stream.aclose()
        assert session.id not in manager
        assert session.closed

    async def test_close_ends_waiting_stream(self, manager):
        """close_all() ends an idle stream without waiting out the keepalive."""
        session = manager.create()
        stream = manager.stream(session, keepalive=30)
        await stream.__anext__()
        pending = asyncio.ensure_future(_next_or_end(stream))
        await asyncio.sleep(0.01)

        manager.close_all()
        assert await asyncio.wait_for(pending, 1) is None

    async def test_next_response_after_close(self, manager):
        session = manager.create()
        await session.submit({"jsonrpc": "2.0", "id": 1, "method": "ping"})
        assert (await session.next_response(timeout=2))["id"] == 1
        manager.close(session.id)
        for _ in range(2):
            with pytest.raises(SessionClosedError):
                await session.next_response(timeout=1)


class TestSessionManager:
    def test_create_and_get(self, manager):
        session = manager.create()
        assert manager.get(session.id) is session
        assert len(manager) == 1
        assert manager.get("nope") is None

    async def test_closed_session_rejects(self, manager):
        session = manager.create()
        manager.close(session.id)
        assert len(manager) == 0
        with pytest.raises(SessionClosedError):
            await session.submit({"jsonrpc": "2.0", "id": 1, "method": "ping"})

    async def test_close_drops_pending_work(self):
        blocked = FakeGroup("slow", ["slow_tool"], delay=10)
        registry = ToolRegistry.from_groups([blocked])
        manager = SessionManager(Router(registry, DispatchRouter(registry)))
        session = manager.create()
        await session.submit(_call(1, "slow_tool"))
        await asyncio.sleep(0.01)
        manager.close(session.id)
        await asyncio.sleep(0.01)
        assert session.closed
        assert session._worker.cancelled()

    def test_close_unknown_is_noop(self, manager):
        manager.close("nope")
