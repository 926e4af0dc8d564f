"""Workflow Tools."""

from .base import CapabilityGroup, Endpoint


class WorkflowGroup(CapabilityGroup):
    name = "workflows"

    TOOL_NAMES = ("ghl_get_workflows",)

    ENDPOINTS = (
        Endpoint("ghl_get_workflows", "List automation workflows of the location", "GET", "/workflows/", location="query"),
    )
