"""
Discovery payloads — list, describe-server, describe-tool, capabilities.

Pure functions over a ToolRegistry. Both transports render these; neither
adds business logic of its own.
"""

import re
from typing import Any, Dict, List, Mapping

from .catalog import ToolDefinition, ToolRegistry
from .classifier import category_for, classify
from .config import Config

MAX_RELATED = 5

_ENTITY = re.compile(
    r"(contact|conversation|opportunity|appointment|invoice|payment"
    r"|social|workflow|object|location|blog)"
)


class ToolNotFoundError(LookupError):
    def __init__(self, name: str):
        super().__init__(f"Tool '{name}' not found")
        self.name = name


def server_info() -> Dict[str, str]:
    return {"name": Config.SERVER_NAME, "version": Config.SERVER_VERSION}


def server_capabilities() -> Dict[str, Any]:
    return {
        "tools": {"listChanged": True},
        "resources": {"subscribe": False, "listChanged": False},
        "prompts": {"listChanged": False},
        "logging": {},
        "experimental": Config.experimental_capabilities(),
    }


def instructions(registry: ToolRegistry) -> str:
    categories = classify(registry.catalog)
    return (
        "GoHighLevel MCP Server provides comprehensive access to GoHighLevel CRM APIs.\n"
        f"Available categories: {', '.join(c.name for c in categories)}.\n"
        f"Total tools: {registry.tool_count}.\n"
        "Use tools to manage contacts, send messages, create opportunities, "
        "schedule appointments, process payments, and more."
    )


def list_tools(registry: ToolRegistry) -> Dict[str, Any]:
    return {
        "tools": registry.catalog.to_list(),
        "totalCount": registry.tool_count,
        "categories": [c.to_dict() for c in classify(registry.catalog)],
    }


def describe_server(registry: ToolRegistry) -> Dict[str, Any]:
    capabilities = server_capabilities()
    return {
        "serverInfo": {
            **server_info(),
            "capabilities": capabilities,
            "instructions": instructions(registry),
        },
        "capabilities": capabilities,
        "tools": registry.catalog.to_list(),
        "toolsCount": registry.tool_count,
        "categories": [c.to_dict() for c in classify(registry.catalog)],
    }


# ── Single tool ──────────────────────────────────────────────────

def _example_value(field: str, prop: Mapping[str, Any]) -> Any:
    if prop.get("enum"):
        return prop["enum"][0]
    kind = prop.get("type", "string")
    lowered = field.lower()
    if kind == "number" or kind == "integer":
        return 100.0 if "amount" in lowered else 1
    if kind == "boolean":
        return True
    if kind == "object":
        return {}
    if kind == "array":
        return []
    if "email" in lowered:
        return "user@example.com"
    if "phone" in lowered:
        return "+1234567890"
    if "id" in lowered:
        return "example_id_123"
    return "example_value"


def example_arguments(tool: ToolDefinition) -> Dict[str, Any]:
    """Plausible literal for every required field, guessed from its name and type."""
    properties = tool.input_schema.get("properties") or {}
    args: Dict[str, Any] = {}
    for field in tool.input_schema.get("required") or []:
        args[field] = _example_value(field, properties.get(field) or {})
    return args


def related_tools(tool: ToolDefinition, registry: ToolRegistry) -> List[str]:
    match = _ENTITY.search(tool.name.lower())
    if not match:
        return []
    entity = match.group(1)
    related = [
        t.name for t in registry.catalog
        if t.name != tool.name and entity in t.name.lower()
    ]
    return related[:MAX_RELATED]


def describe_tool(registry: ToolRegistry, name: str) -> Dict[str, Any]:
    tool = registry.catalog.get(name)
    if tool is None:
        raise ToolNotFoundError(name)
    return {
        "tool": tool.to_dict(),
        "examples": [{"tool": tool.name, "arguments": example_arguments(tool)}],
        "relatedTools": related_tools(tool, registry),
        "category": category_for(tool.name),
    }
