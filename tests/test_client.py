"""Tests for the GoHighLevel REST client (httpx.MockTransport, no network)."""

import json

import httpx
import pytest

from ghl_mcp.client import GHLApiClient, GHLApiError

pytestmark = pytest.mark.anyio


def _client(handler):
    return GHLApiClient(
        access_token="tok",
        location_id="loc_123",
        base_url="https://ghl.test/",
        transport=httpx.MockTransport(handler),
    )


class TestRequests:
    async def test_headers_and_url(self):
        seen = {}

        def handler(request):
            seen["request"] = request
            return httpx.Response(200, json={"contact": {"id": "c1"}})

        async with _client(handler) as client:
            data = await client.get("/contacts/c1", params={"a": "1", "skip": None})

        request = seen["request"]
        assert data == {"contact": {"id": "c1"}}
        assert str(request.url) == "https://ghl.test/contacts/c1?a=1"
        assert request.headers["Authorization"] == "Bearer tok"
        assert request.headers["Version"] == "2021-07-28"
        assert request.headers["Accept"] == "application/json"

    async def test_json_body(self):
        seen = {}

        def handler(request):
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"ok": True})

        async with _client(handler) as client:
            await client.post("/contacts/", json={"email": "a@b.co"})
        assert seen["body"] == {"email": "a@b.co"}

    async def test_delete_with_body(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={})

        async with _client(handler) as client:
            await client.delete("/payments/coupon", json={"id": "cp1"})
        assert seen == {"method": "DELETE", "body": {"id": "cp1"}}

    async def test_empty_body(self):
        async with _client(lambda r: httpx.Response(204)) as client:
            assert await client.delete("/contacts/c1") == {}

    async def test_non_json_body(self):
        async with _client(lambda r: httpx.Response(200, text="OK")) as client:
            assert await client.get("/x") == {"raw": "OK"}


class TestErrors:
    async def test_status_error(self):
        def handler(request):
            return httpx.Response(404, json={"message": "Contact not found"})

        async with _client(handler) as client:
            with pytest.raises(GHLApiError) as exc_info:
                await client.get("/contacts/missing")
        err = exc_info.value
        assert err.status_code == 404
        assert str(err) == "GHL API Error (404): Contact not found"
        assert err.body == {"message": "Contact not found"}

    async def test_message_list_joined(self):
        def handler(request):
            return httpx.Response(422, json={"message": ["email is invalid", "phone is invalid"]})

        async with _client(handler) as client:
            with pytest.raises(GHLApiError, match="email is invalid; phone is invalid"):
                await client.post("/contacts/", json={})

    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(GHLApiError) as exc_info:
                await client.get("/x")
        assert exc_info.value.status_code == 0
        assert "ConnectError" in str(exc_info.value)


class TestConnection:
    async def test_test_connection(self):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            return httpx.Response(200, json={"location": {"id": "loc_123"}})

        async with _client(handler) as client:
            result = await client.test_connection()
        assert seen["path"] == "/locations/loc_123"
        assert result["success"] is True
        assert result["data"]["locationId"] == "loc_123"
