"""
Error taxonomy.

Startup errors (ConfigError, RegistryError) abort the process before any
transport accepts connections. DispatchError subclasses are per-invocation,
reported to the caller as JSON-RPC errors, and never take the process down.
"""

from typing import Iterable

from .protocol import ProtocolError, INVALID_REQUEST, INTERNAL_ERROR


class ConfigError(Exception):
    """Missing or invalid configuration."""


# ── Startup / registry ───────────────────────────────────────────

class RegistryError(Exception):
    """The capability group set is inconsistent."""


class DuplicateToolNameError(RegistryError):
    def __init__(self, name: str, first_group: str, second_group: str):
        super().__init__(
            f"Tool '{name}' is claimed by both '{first_group}' and '{second_group}'"
        )
        self.name = name
        self.first_group = first_group
        self.second_group = second_group


class OwnershipMismatchError(RegistryError):
    """A group's declared names disagree with the definitions it publishes."""

    def __init__(self, group: str, unpublished: Iterable[str], undeclared: Iterable[str]):
        self.group = group
        self.unpublished = sorted(unpublished)
        self.undeclared = sorted(undeclared)
        parts = []
        if self.unpublished:
            parts.append(f"routable but not published: {', '.join(self.unpublished)}")
        if self.undeclared:
            parts.append(f"published but not routable: {', '.join(self.undeclared)}")
        super().__init__(f"Group '{group}' ownership mismatch ({'; '.join(parts)})")


# ── Dispatch ─────────────────────────────────────────────────────

class DispatchError(ProtocolError):
    """Base for errors surfaced to the caller from a tool invocation."""


class UnknownToolError(DispatchError):
    def __init__(self, name: str):
        super().__init__(INVALID_REQUEST, f"Unknown tool: {name}", {"tool": name})
        self.name = name


class InvalidRequestError(DispatchError):
    def __init__(self, message: str, data=None):
        super().__init__(INVALID_REQUEST, message, data)


class InternalError(DispatchError):
    def __init__(self, message: str, data=None):
        super().__init__(INTERNAL_ERROR, message, data)
