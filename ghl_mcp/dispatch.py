"""
Dispatch Router — name → owning group → uniform result envelope.

Resolution is a single lookup in the registry's ownership index. Every
failure raised by a group is caught here and reshaped into one of two
caller-visible errors; nothing a group raises escapes as anything else.
"""

import json
from typing import Any, Dict, Mapping, Optional

from .catalog import ToolRegistry
from .errors import InternalError, InvalidRequestError, UnknownToolError
from .logger import get_logger
from .protocol import text_content, tool_result_content

log = get_logger("dispatch")


def serialize(payload: Any) -> str:
    """Stable, diffable JSON text for a tool result."""
    return json.dumps(payload, indent=2, sort_keys=True, default=str)


def is_not_found(exc: BaseException) -> bool:
    message = str(exc)
    return "404" in message or "not found" in message.lower()


def translate_error(name: str, exc: Exception):
    """Map a group failure onto InvalidRequestError or InternalError."""
    message = f"Tool execution failed: {exc}"
    data = {"tool": name}
    if is_not_found(exc):
        return InvalidRequestError(message, data)
    return InternalError(message, data)


class DispatchRouter:
    """Routes tool invocations to their owning capability group."""

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    async def dispatch(self, name: str, args: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Invoke `name` with `args` and wrap the result.

        Raises:
            UnknownToolError: no group owns `name` (no group is touched).
            InvalidRequestError: the group reported a not-found condition.
            InternalError: any other group failure.
        """
        group = self.registry.owner_of(name)
        if group is None:
            log.warning(f"Unknown tool: {name}")
            raise UnknownToolError(name)

        arguments = dict(args) if args else {}
        log.info(f"Executing tool: {name} (group={group.name})")
        try:
            result = await group.execute(name, arguments)
        except Exception as exc:
            log.error(f"Error executing tool {name}: {exc}")
            raise translate_error(name, exc) from exc

        log.info(f"Tool {name} executed successfully")
        return tool_result_content([text_content(serialize(result))])
