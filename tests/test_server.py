"""Tests for the stdio transport and server loop (in-memory pipes)."""

import asyncio
import io
import json

import pytest

from ghl_mcp.protocol import INVALID_REQUEST, PARSE_ERROR
from ghl_mcp.server import StdioServer
from ghl_mcp.transport import OVERSIZED, PARSE_FAILURE, StdioTransport

from conftest import FakeClient

pytestmark = pytest.mark.anyio


def _pipe(*lines, limit=2**16):
    reader = asyncio.StreamReader(limit=limit)
    for line in lines:
        data = line if isinstance(line, bytes) else (json.dumps(line) + "\n").encode()
        reader.feed_data(data)
    reader.feed_eof()
    return reader


def _written(buffer):
    return [json.loads(line) for line in buffer.getvalue().decode().splitlines()]


class TestTransport:
    async def test_read_and_eof(self):
        transport = StdioTransport(_pipe({"jsonrpc": "2.0", "id": 1, "method": "ping"}), io.BytesIO())
        await transport.start()
        assert (await transport.read_message())["method"] == "ping"
        assert await transport.read_message() is None

    async def test_parse_failure(self):
        transport = StdioTransport(_pipe(b"{broken\n"), io.BytesIO())
        await transport.start()
        assert await transport.read_message() is PARSE_FAILURE

    async def test_blank_lines_skipped(self):
        transport = StdioTransport(_pipe(b"\n", b"  \n", {"jsonrpc": "2.0", "method": "x"}), io.BytesIO())
        await transport.start()
        assert (await transport.read_message())["method"] == "x"

    async def test_write_one_line(self):
        out = io.BytesIO()
        transport = StdioTransport(_pipe(), out)
        await transport.start()
        await transport.write_message({"jsonrpc": "2.0", "id": 1, "result": {}})
        assert out.getvalue() == b'{"jsonrpc":"2.0","id":1,"result":{}}\n'

    async def test_oversized_line_skipped(self):
        reader = _pipe(b"x" * 200 + b"\n", {"jsonrpc": "2.0", "id": 2, "method": "ping"}, limit=64)
        transport = StdioTransport(reader, io.BytesIO())
        await transport.start()
        assert await transport.read_message() is OVERSIZED
        assert (await transport.read_message())["id"] == 2
        assert await transport.read_message() is None

    async def test_oversized_line_arriving_in_pieces(self):
        reader = asyncio.StreamReader(limit=64)
        transport = StdioTransport(reader, io.BytesIO())
        await transport.start()
        reader.feed_data(b"x" * 200)
        pending = asyncio.ensure_future(transport.read_message())
        await asyncio.sleep(0)
        reader.feed_data(b"y" * 300)
        await asyncio.sleep(0)
        reader.feed_data(b"z\n" + b'{"jsonrpc":"2.0","id":3,"method":"ping"}\n')
        reader.feed_eof()
        assert await pending is OVERSIZED
        assert (await transport.read_message())["id"] == 3

    async def test_oversized_line_at_eof(self):
        transport = StdioTransport(_pipe(b"x" * 200, limit=64), io.BytesIO())
        await transport.start()
        assert await transport.read_message() is OVERSIZED
        assert await transport.read_message() is None

    async def test_not_started(self):
        with pytest.raises(RuntimeError):
            await StdioTransport().read_message()


class TestStdioServer:
    async def test_session_in_order(self, registry):
        out = io.BytesIO()
        client = FakeClient()
        reader = _pipe(
            {"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {"protocolVersion": "2024-11-05"}},
            {"jsonrpc": "2.0", "method": "notifications/initialized"},
            {"jsonrpc": "2.0", "id": 2, "method": "tools/list"},
            {"jsonrpc": "2.0", "id": 3, "method": "tools/call", "params": {"name": "get_contact", "arguments": {"id": "c1"}}},
            {"jsonrpc": "2.0", "id": 4, "method": "tools/call", "params": {"name": "nope"}},
        )
        server = StdioServer(registry, client, StdioTransport(reader, out))
        await server.run()

        responses = _written(out)
        assert [r["id"] for r in responses] == [1, 2, 3, 4]
        assert responses[0]["result"]["serverInfo"]["name"] == "GoHighLevel MCP Server"
        assert responses[1]["result"]["_meta"]["totalCount"] == 6
        assert "content" in responses[2]["result"]
        assert responses[3]["error"]["message"] == "Unknown tool: nope"
        assert client.closed

    async def test_parse_error_keeps_going(self, registry):
        out = io.BytesIO()
        reader = _pipe(b"not json\n", {"jsonrpc": "2.0", "id": 5, "method": "ping"})
        server = StdioServer(registry, None, StdioTransport(reader, out))
        await server.run()

        responses = _written(out)
        assert responses[0] == {
            "jsonrpc": "2.0", "id": None,
            "error": {"code": PARSE_ERROR, "message": "Parse error"},
        }
        assert responses[1] == {"jsonrpc": "2.0", "id": 5, "result": {}}

    async def test_shutdown_idempotent(self, registry):
        client = FakeClient()
        server = StdioServer(registry, client, StdioTransport(_pipe(), io.BytesIO()))
        await server.run()
        await server.shutdown()
        assert client.closed

    async def test_oversized_request_does_not_stop_server(self, registry):
        """A request past the line limit is rejected; later requests still answered."""
        out = io.BytesIO()
        big = {
            "jsonrpc": "2.0", "id": 1, "method": "tools/call",
            "params": {"name": "create_contact", "arguments": {"id": "x" * 500}},
        }
        reader = _pipe(big, {"jsonrpc": "2.0", "id": 2, "method": "ping"}, limit=256)
        server = StdioServer(registry, None, StdioTransport(reader, out))
        await server.run()

        responses = _written(out)
        assert responses[0]["id"] is None
        assert responses[0]["error"]["code"] == INVALID_REQUEST
        assert responses[1] == {"jsonrpc": "2.0", "id": 2, "result": {}}
