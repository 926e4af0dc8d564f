"""
GoHighLevel MCP Server

Exposes the GoHighLevel CRM REST API as 249 MCP tools in 19 capability
groups, over stdio or HTTP + SSE.
"""

__version__ = "1.0.0"

from .config import Config
from .catalog import ToolDefinition, ToolRegistry
from .dispatch import DispatchRouter
from .router import Router
from .server import StdioServer
