"""
CapabilityGroup — contract every tool group implements.

A group owns a fixed, disjoint slice of tool names. The router only ever
touches three things on it:

  owned_tools()        — static name list (routing)
  list_definitions()   — published ToolDefinitions (discovery)
  execute(name, args)  — run one tool, return a JSON value or raise

Most GoHighLevel tools are a single REST call, so groups describe their
tools as Endpoint declarations and inherit a generic execute(). Tools that
need more than one call or reshaping override it with a `_tool_<name>`
coroutine.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import quote

from ..catalog import ToolDefinition
from ..client import GHLApiClient

_PATH_PARAM = re.compile(r"{(\w+)}")

LOCATION_ID = "locationId"


# ── Schema helpers ───────────────────────────────────────────────

def string(description: str, **extra) -> Dict[str, Any]:
    return {"type": "string", "description": description, **extra}


def number(description: str, **extra) -> Dict[str, Any]:
    return {"type": "number", "description": description, **extra}


def boolean(description: str, **extra) -> Dict[str, Any]:
    return {"type": "boolean", "description": description, **extra}


def array(description: str, items: str = "string", **extra) -> Dict[str, Any]:
    return {"type": "array", "items": {"type": items}, "description": description, **extra}


def obj(description: str, **extra) -> Dict[str, Any]:
    return {"type": "object", "description": description, **extra}


def enum(description: str, values: List[str], **extra) -> Dict[str, Any]:
    return {"type": "string", "enum": list(values), "description": description, **extra}


# ── Endpoint declaration ─────────────────────────────────────────

@dataclass(frozen=True)
class Endpoint:
    """One tool backed by one REST call."""

    name: str
    description: str
    method: str
    path: str
    properties: Mapping[str, Dict[str, Any]] = field(default_factory=dict)
    required: Tuple[str, ...] = ()
    query: Tuple[str, ...] = ()          # always sent as query params
    fixed: Mapping[str, Any] = field(default_factory=dict)  # merged into the body
    location: str = ""                   # "", "query", "body" or "alt"
    send_body: Optional[bool] = None     # default: POST/PUT/PATCH only

    @property
    def path_params(self) -> List[str]:
        return _PATH_PARAM.findall(self.path)

    @property
    def required_fields(self) -> List[str]:
        fields = list(self.required)
        for p in self.path_params:
            if p != LOCATION_ID and p not in fields:
                fields.append(p)
        return fields

    @property
    def has_body(self) -> bool:
        if self.send_body is not None:
            return self.send_body
        return self.method in ("POST", "PUT", "PATCH")

    def definition(self) -> ToolDefinition:
        properties = dict(self.properties)
        for p in self.path_params:
            properties.setdefault(
                p,
                string("Location ID (defaults to the configured location)")
                if p == LOCATION_ID else string(f"The {p}"),
            )
        schema: Dict[str, Any] = {"type": "object", "properties": properties}
        required = self.required_fields
        if required:
            schema["required"] = required
        return ToolDefinition(self.name, self.description, schema)


# ── Base group ───────────────────────────────────────────────────

class CapabilityGroup:
    """Base class for the 19 GoHighLevel capability groups."""

    name: str = ""
    TOOL_NAMES: Tuple[str, ...] = ()
    ENDPOINTS: Tuple[Endpoint, ...] = ()

    def __init__(self, client: GHLApiClient):
        self.client = client
        self._endpoints: Dict[str, Endpoint] = {ep.name: ep for ep in self.ENDPOINTS}
        self._definitions: Tuple[ToolDefinition, ...] = tuple(
            ep.definition() for ep in self.ENDPOINTS
        )

    def __repr__(self):
        return f"<{type(self).__name__} {self.name} tools={len(self._definitions)}>"

    def owned_tools(self) -> Tuple[str, ...]:
        return self.TOOL_NAMES

    def list_definitions(self) -> Tuple[ToolDefinition, ...]:
        return self._definitions

    async def execute(self, name: str, args: Dict[str, Any]) -> Any:
        ep = self._endpoints.get(name)
        if ep is None:
            raise ValueError(f"Unknown {self.name} tool: {name}")

        args = dict(args or {})
        missing = [f for f in ep.required_fields if args.get(f) in (None, "")]
        if missing:
            raise ValueError(f"Missing required argument(s) for {name}: {', '.join(missing)}")

        custom = getattr(self, f"_tool_{name}", None)
        if custom is not None:
            return await custom(args)
        return await self.call(ep, args)

    async def call(self, ep: Endpoint, args: Dict[str, Any]) -> Any:
        """Map arguments onto path / query / body and issue the request."""
        path_values = {}
        for p in ep.path_params:
            value = args.pop(p, None)
            if value in (None, "") and p == LOCATION_ID:
                value = self.client.location_id
            path_values[p] = quote(str(value), safe="")
        path = ep.path.format(**path_values)

        query = {k: args.pop(k) for k in ep.query if k in args}
        body = None
        if ep.has_body:
            body = {**ep.fixed, **args}
        else:
            query.update(args)

        if ep.location == "query":
            query.setdefault(LOCATION_ID, self.client.location_id)
        elif ep.location == "body" and body is not None:
            body.setdefault(LOCATION_ID, self.client.location_id)
        elif ep.location == "alt":
            # payments, invoices and store scope by altId/altType instead
            target = body if body is not None else query
            target.setdefault("altId", self.client.location_id)
            target.setdefault("altType", "location")

        return await self.client.request(ep.method, path, params=query or None, json=body)
