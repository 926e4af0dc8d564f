"""
JSON-RPC 2.0 / MCP message helpers.

Validation, response/error envelopes and the MCP result shapes shared
by both transports.
"""

from typing import Any, Dict, List, Optional

JSONRPC_VERSION = "2.0"

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class ProtocolError(Exception):
    """An error that maps directly onto a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Any = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data


def validate_message(msg: Any) -> str:
    """
    Classify a decoded JSON-RPC message.

    Returns one of "request", "notification", "response", "error".
    Raises ProtocolError(INVALID_REQUEST) for anything else.
    """
    if not isinstance(msg, dict):
        raise ProtocolError(INVALID_REQUEST, "Message must be a JSON object")
    if msg.get("jsonrpc") != JSONRPC_VERSION:
        raise ProtocolError(INVALID_REQUEST, "Missing or invalid 'jsonrpc' version")

    if "method" in msg:
        if not isinstance(msg["method"], str) or not msg["method"]:
            raise ProtocolError(INVALID_REQUEST, "'method' must be a non-empty string")
        params = msg.get("params")
        if params is not None and not isinstance(params, (dict, list)):
            raise ProtocolError(INVALID_REQUEST, "'params' must be an object or array")
        return "request" if "id" in msg else "notification"

    if "id" in msg:
        if "error" in msg:
            return "error"
        if "result" in msg:
            return "response"

    raise ProtocolError(INVALID_REQUEST, "Not a JSON-RPC request, notification or response")


def make_response(request_id: Any, result: Dict[str, Any]) -> Dict[str, Any]:
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def make_error(request_id: Any, code: int, message: str, data: Any = None) -> Dict[str, Any]:
    err: Dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        err["data"] = data
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "error": err}


# ── MCP result shapes ────────────────────────────────────────────

def initialize_result(
    server_name: str,
    server_version: str,
    protocol_version: str,
    capabilities: Optional[Dict[str, Any]] = None,
    instructions: Optional[str] = None,
) -> Dict[str, Any]:
    result: Dict[str, Any] = {
        "protocolVersion": protocol_version,
        "capabilities": capabilities if capabilities is not None else {"tools": {}},
        "serverInfo": {"name": server_name, "version": server_version},
    }
    if instructions:
        result["instructions"] = instructions
    return result


def text_content(text: str) -> Dict[str, str]:
    return {"type": "text", "text": text}


def tool_result_content(content: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"content": content}


def tools_list_result(tools: List[Dict[str, Any]], meta: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    result: Dict[str, Any] = {"tools": tools}
    if meta is not None:
        result["_meta"] = meta
    return result
