"""
Tool Catalog & Name Ownership Index

Built once at startup from the ordered capability group list, read-only
for the rest of the process. Every consistency problem between groups is
raised here as a RegistryError so that no transport ever starts with a
catalog that cannot route what it advertises.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from .errors import DuplicateToolNameError, OwnershipMismatchError

if TYPE_CHECKING:
    from .groups.base import CapabilityGroup


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


class ToolCatalog:
    """Ordered, immutable sequence of ToolDefinitions with name lookup."""

    def __init__(self, tools: Sequence[ToolDefinition]):
        self._tools: Tuple[ToolDefinition, ...] = tuple(tools)
        self._by_name = MappingProxyType({t.name: t for t in self._tools})

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __getitem__(self, index: int) -> ToolDefinition:
        return self._tools[index]

    def get(self, name: str) -> Optional[ToolDefinition]:
        return self._by_name.get(name)

    def names(self) -> List[str]:
        return [t.name for t in self._tools]

    def to_list(self) -> List[Dict[str, Any]]:
        return [t.to_dict() for t in self._tools]


def build_catalog(groups: Sequence["CapabilityGroup"]) -> ToolCatalog:
    """Concatenate every group's definitions in registration order."""
    seen: Dict[str, str] = {}
    tools: List[ToolDefinition] = []
    for group in groups:
        for tool in group.list_definitions():
            if tool.name in seen:
                raise DuplicateToolNameError(tool.name, seen[tool.name], group.name)
            seen[tool.name] = group.name
            tools.append(tool)
    return ToolCatalog(tools)


def build_ownership_index(groups: Sequence["CapabilityGroup"]) -> Mapping[str, "CapabilityGroup"]:
    """
    Map tool name -> owning group from each group's declared name list.

    Cross-checks each declaration against what the group publishes so a
    name can never be routable-but-undiscoverable or the reverse.
    """
    index: Dict[str, "CapabilityGroup"] = {}
    for group in groups:
        declared = list(group.owned_tools())
        published = {t.name for t in group.list_definitions()}

        unpublished = set(declared) - published
        undeclared = published - set(declared)
        if unpublished or undeclared:
            raise OwnershipMismatchError(group.name, unpublished, undeclared)

        for name in declared:
            owner = index.get(name)
            if owner is not None:
                raise DuplicateToolNameError(name, owner.name, group.name)
            index[name] = group
    return MappingProxyType(index)


class ToolRegistry:
    """Groups + catalog + ownership index, shared read-only by every transport."""

    def __init__(
        self,
        groups: Sequence["CapabilityGroup"],
        catalog: ToolCatalog,
        index: Mapping[str, "CapabilityGroup"],
    ):
        self.groups: Tuple["CapabilityGroup", ...] = tuple(groups)
        self.catalog = catalog
        self.index = index

    @classmethod
    def from_groups(cls, groups: Sequence["CapabilityGroup"]) -> "ToolRegistry":
        catalog = build_catalog(groups)
        index = build_ownership_index(groups)
        return cls(groups, catalog, index)

    def owner_of(self, name: str) -> Optional["CapabilityGroup"]:
        return self.index.get(name)

    @property
    def tool_count(self) -> int:
        return len(self.catalog)
