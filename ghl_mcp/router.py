"""
Method Router — Dispatch MCP methods to handlers

Routes:
  initialize                 → server capabilities handshake
  initialized                → notification (no response)
  notifications/initialized  → notification (no response)
  notifications/cancelled    → notification (no response)
  ping                       → {}
  tools/list                 → catalog + _meta {totalCount, categories, serverInfo}
  tools/call                 → DispatchRouter

Shared by the stdio and SSE transports. handle() takes one decoded
message and returns the full JSON-RPC response, or None when the message
is a notification (or anything else that must not be answered).
"""

from typing import Any, Dict, Optional

from .catalog import ToolRegistry
from .classifier import classify
from .config import Config
from .describe import instructions, server_capabilities, server_info
from .dispatch import DispatchRouter
from .logger import get_logger
from .protocol import (
    initialize_result,
    make_error,
    make_response,
    tools_list_result,
    validate_message,
    ProtocolError,
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
)

log = get_logger("router")

_NOTIFICATIONS = frozenset({
    "initialized",
    "notifications/initialized",
    "notifications/cancelled",
})


class Router:
    """MCP method dispatcher. Holds no per-connection state."""

    def __init__(self, registry: ToolRegistry, dispatcher: DispatchRouter):
        self.registry = registry
        self.dispatcher = dispatcher

    async def handle(self, msg: Any) -> Optional[Dict[str, Any]]:
        request_id = msg.get("id") if isinstance(msg, dict) else None
        try:
            msg_type = validate_message(msg)
            if msg_type in ("response", "error"):
                # clients answering server requests; we never send any
                return None

            result = await self.route(msg)
            if msg_type == "notification" or result is None:
                return None
            return make_response(request_id, result)

        except ProtocolError as exc:
            log.warning(f"Protocol error: {exc.message} (code={exc.code})")
            if request_id is None:
                return None
            return make_error(request_id, exc.code, exc.message, exc.data)

        except Exception as exc:
            log.error(f"Unhandled error: {exc}", exc_info=True)
            if request_id is None:
                return None
            return make_error(request_id, INTERNAL_ERROR, str(exc))

    async def route(self, msg: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Result payload for a validated request, or None for notifications."""
        method = msg["method"]
        params = msg.get("params") or {}

        if method == "initialize":
            return self._handle_initialize(params if isinstance(params, dict) else {})

        if method in _NOTIFICATIONS:
            return None

        if method == "ping":
            return {}

        if method == "tools/list":
            return self._handle_tools_list()

        if method == "tools/call":
            return await self._handle_tools_call(params)

        raise ProtocolError(METHOD_NOT_FOUND, f"Unknown method: {method}")

    # ── handlers ─────────────────────────────────────────────────

    def _handle_initialize(self, params: Dict) -> Dict[str, Any]:
        log.info(
            f"Client initialize: {params.get('clientInfo', {}).get('name', '?')} "
            f"protocol={params.get('protocolVersion', '?')}"
        )
        return initialize_result(
            server_name=Config.SERVER_NAME,
            server_version=Config.SERVER_VERSION,
            protocol_version=Config.PROTOCOL_VERSION,
            capabilities=server_capabilities(),
            instructions=instructions(self.registry),
        )

    def _handle_tools_list(self) -> Dict[str, Any]:
        log.info(f"Listing {self.registry.tool_count} tools")
        return tools_list_result(
            self.registry.catalog.to_list(),
            meta={
                "totalCount": self.registry.tool_count,
                "categories": [c.to_dict() for c in classify(self.registry.catalog)],
                "serverInfo": server_info(),
            },
        )

    async def _handle_tools_call(self, params: Any) -> Dict[str, Any]:
        if not isinstance(params, dict):
            raise ProtocolError(INVALID_PARAMS, "tools/call params must be an object")
        name = params.get("name")
        if not name or not isinstance(name, str):
            raise ProtocolError(INVALID_PARAMS, "Missing tool name")
        args = params.get("arguments")
        if args is not None and not isinstance(args, dict):
            raise ProtocolError(INVALID_PARAMS, "'arguments' must be an object")

        return await self.dispatcher.dispatch(name, args)
