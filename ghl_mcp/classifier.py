"""
Category Classifier — presentational grouping of tool names.

Rules are checked in priority order and the first rule whose cue appears
in the lower-cased tool name wins. Names can carry several cues
("get_email_templates" is messaging before it is anything else), so the
order below is part of the contract. Never consulted on the dispatch path.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple

from .catalog import ToolDefinition

OTHER = "Other"

RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Contact Management", ("contact",)),
    ("Messaging & Communication", ("message", "sms", "email", "conversation")),
    ("Sales & Opportunities", ("opportunity", "pipeline")),
    ("Calendar & Appointments", ("calendar", "appointment", "event")),
    ("Payments & Billing", ("payment", "invoice", "billing", "transaction")),
    ("Marketing & Social Media", ("social", "blog", "media", "campaign")),
    ("Business Operations", ("location", "workflow", "survey", "store")),
    ("Custom Objects & Data", ("object", "custom", "field", "association")),
)

CATEGORY_NAMES: Tuple[str, ...] = tuple(label for label, _ in RULES) + (OTHER,)


@dataclass
class Category:
    name: str
    tools: List[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.tools)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "count": self.count, "tools": list(self.tools)}


def category_for(name: str) -> str:
    """Label of the first rule matching `name`, or "Other"."""
    lowered = name.lower()
    for label, cues in RULES:
        if any(cue in lowered for cue in cues):
            return label
    return OTHER


def classify(tools: Iterable[ToolDefinition]) -> List[Category]:
    """
    Bucket tools into categories.

    Every tool lands in exactly one category. Categories come back in rule
    order with empty ones omitted, and each member list is sorted.
    """
    buckets: Dict[str, List[str]] = {label: [] for label in CATEGORY_NAMES}
    for tool in tools:
        buckets[category_for(tool.name)].append(tool.name)

    return [
        Category(label, sorted(names))
        for label, names in buckets.items()
        if names
    ]


def summary(categories: Iterable[Category]) -> List[Dict[str, Any]]:
    """`{name, count}` pairs, for endpoints that don't need member lists."""
    return [{"name": c.name, "count": c.count} for c in categories]
