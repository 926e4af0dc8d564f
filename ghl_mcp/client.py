"""GoHighLevel REST client — thin async wrapper over httpx.

Every capability group shares one instance. The client attaches the bearer
credential and the fixed API version header, turns HTTP failures into
GHLApiError, and does nothing else: no retries, no caching.
"""

from typing import Any

import httpx

from .config import Config
from .logger import get_logger

logger = get_logger("client")

DEFAULT_TIMEOUT = 30.0


class GHLApiError(Exception):
    """Backend call failed. status_code is 0 for transport-level failures."""

    def __init__(self, status_code: int, message: str, body: Any = None):
        super().__init__(f"GHL API Error ({status_code}): {message}")
        self.status_code = status_code
        self.body = body


def _error_detail(response: httpx.Response) -> tuple[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase, response.text
    if isinstance(body, dict):
        msg = body.get("message") or body.get("error") or response.reason_phrase
        if isinstance(msg, list):
            msg = "; ".join(str(m) for m in msg)
        return str(msg), body
    return response.reason_phrase, body


class GHLApiClient:
    """Async HTTP client for services.leadconnectorhq.com."""

    def __init__(
        self,
        access_token: str,
        location_id: str,
        base_url: str = Config.BASE_URL,
        version: str = Config.API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.location_id = location_id
        self.base_url = base_url.rstrip("/")
        self.version = version
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Version": version,
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(cls) -> "GHLApiClient":
        Config.require_credentials()
        return cls(
            access_token=Config.API_KEY,
            location_id=Config.LOCATION_ID,
            base_url=Config.BASE_URL,
            version=Config.API_VERSION,
            timeout=Config.request_timeout(),
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *_):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    # =====================================================================
    # Requests
    # =====================================================================

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        logger.debug(f"{method} {path} params={params}")
        try:
            response = await self._client.request(method, path, params=params or None, json=json)
        except httpx.HTTPError as exc:
            raise GHLApiError(0, f"{type(exc).__name__}: {exc}") from exc

        if response.status_code >= 400:
            message, body = _error_detail(response)
            raise GHLApiError(response.status_code, message, body)

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return {"raw": response.text}

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None, params: dict[str, Any] | None = None) -> Any:
        return await self.request("POST", path, params=params, json=json)

    async def put(self, path: str, json: Any = None, params: dict[str, Any] | None = None) -> Any:
        return await self.request("PUT", path, params=params, json=json)

    async def patch(self, path: str, json: Any = None, params: dict[str, Any] | None = None) -> Any:
        return await self.request("PATCH", path, params=params, json=json)

    async def delete(self, path: str, params: dict[str, Any] | None = None, json: Any = None) -> Any:
        return await self.request("DELETE", path, params=params, json=json)

    async def test_connection(self) -> dict:
        """Fetch the configured location; raises GHLApiError when unreachable."""
        data = await self.get(f"/locations/{self.location_id}")
        return {"success": True, "data": {"locationId": self.location_id, "location": data}}
