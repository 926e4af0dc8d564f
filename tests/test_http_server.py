"""Tests for the FastAPI discovery routes and SSE message intake."""

import asyncio
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from ghl_mcp.http_server import create_app


@pytest.fixture
def app(registry, dispatcher):
    return create_app(registry, dispatcher)


@pytest.fixture
def http(app):
    with TestClient(app) as client:
        yield client


class TestDiscoveryRoutes:
    def test_root(self, http):
        body = http.get("/").json()
        assert body["name"] == "GoHighLevel MCP Server"
        assert body["status"] == "running"
        assert body["toolsCount"] == 6
        assert body["endpoints"]["sse"] == "/sse"
        assert body["categories"] == [
            {"name": "Contact Management", "count": 3},
            {"name": "Messaging & Communication", "count": 3},
        ]

    def test_describe(self, http):
        body = http.get("/describe").json()
        assert body["toolsCount"] == 6
        assert len(body["tools"]) == 6
        assert body["capabilities"]["tools"]["listChanged"] is True

    def test_describe_tool(self, http):
        body = http.get("/describe/tool/send_sms").json()
        assert body["tool"]["name"] == "send_sms"
        assert body["category"] == "Messaging & Communication"
        assert body["relatedTools"] == []

    def test_describe_tool_not_found(self, http):
        resp = http.get("/describe/tool/delete_contact_permanently")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Tool 'delete_contact_permanently' not found"}

    def test_health(self, http):
        body = http.get("/health").json()
        assert body["status"] == "healthy"
        assert body["toolsCount"] == 6
        assert body["activeSessions"] == 0
        assert "timestamp" in body

    def test_capabilities(self, http):
        body = http.get("/capabilities").json()
        assert body["capabilities"]["resources"] == {"subscribe": False, "listChanged": False}
        assert body["capabilities"]["prompts"] == {"listChanged": False}
        assert body["server"] == {"name": "GoHighLevel MCP Server", "version": "1.0.0"}

    def test_tools(self, http):
        body = http.get("/tools").json()
        assert body["count"] == 6
        assert [t["name"] for t in body["tools"]][0] == "create_contact"
        assert body["categories"][0]["tools"] == ["create_contact", "get_contact", "search_contacts"]


class TestCors:
    def test_allowed_origin(self, http):
        resp = http.get("/health", headers={"Origin": "https://claude.ai"})
        assert resp.headers["access-control-allow-origin"] == "https://claude.ai"

    def test_localhost_pattern(self, http):
        resp = http.get("/health", headers={"Origin": "http://localhost:5173"})
        assert resp.headers["access-control-allow-origin"] == "http://localhost:5173"

    def test_foreign_origin(self, http):
        resp = http.get("/health", headers={"Origin": "https://evil.example"})
        assert "access-control-allow-origin" not in resp.headers


class TestMessageIntake:
    """POST /sse?sessionId=..."""

    def test_missing_session_id(self, http):
        resp = http.post("/sse", json={"jsonrpc": "2.0", "id": 1, "method": "ping"})
        assert resp.status_code == 400

    def test_unknown_session(self, http):
        resp = http.post("/sse?sessionId=nope", json={"jsonrpc": "2.0", "id": 1, "method": "ping"})
        assert resp.status_code == 404

    def test_invalid_json(self, app, http):
        session = app.state.sessions.create()
        resp = http.post(
            f"/sse?sessionId={session.id}",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400

    def test_accepted(self, app, http):
        session = app.state.sessions.create()
        resp = http.post(f"/sse?sessionId={session.id}", json={"jsonrpc": "2.0", "id": 1, "method": "ping"})
        assert resp.status_code == 202

    def test_closed_session(self, app, http):
        session = app.state.sessions.create()
        app.state.sessions.close(session.id)
        resp = http.post(f"/sse?sessionId={session.id}", json={"jsonrpc": "2.0", "id": 1, "method": "ping"})
        assert resp.status_code == 404


@pytest.mark.anyio
class TestEventStreamRoundTrip:
    """GET /sse, POST a tools/call, read the answer off the stream."""

    async def test_tools_call(self, app):
        sessions = app.state.sessions
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            stream = asyncio.ensure_future(client.get("/sse"))
            for _ in range(200):
                if len(sessions):
                    break
                await asyncio.sleep(0.01)
            session_id = next(iter(sessions._sessions))

            resp = await client.post(
                f"/sse?sessionId={session_id}",
                json={
                    "jsonrpc": "2.0", "id": 9, "method": "tools/call",
                    "params": {"name": "send_sms", "arguments": {"id": "c1"}},
                },
            )
            assert resp.status_code == 202

            await asyncio.sleep(0.1)
            sessions.close(session_id)
            response = await asyncio.wait_for(stream, 2)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/event-stream")
        events = [e for e in response.text.split("\n\n") if e]
        assert events[0] == f"event: endpoint\ndata: /sse?sessionId={session_id}"

        event, data = events[1].split("\n", 1)
        assert event == "event: message"
        message = json.loads(data[len("data: "):])
        assert message["id"] == 9
        payload = json.loads(message["result"]["content"][0]["text"])
        assert payload == {"args": {"id": "c1"}, "tool": "send_sms"}
        assert len(sessions) == 0
