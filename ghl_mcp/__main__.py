#!/usr/bin/env python3
"""
GoHighLevel MCP CLI.

Usage:
    python3 -m ghl_mcp                      stdio server (default)
    python3 -m ghl_mcp stdio                stdio server
    python3 -m ghl_mcp http [--port N]      HTTP + SSE server
    python3 -m ghl_mcp tools [--category X] list the tool catalog
    python3 -m ghl_mcp describe TOOL        describe one tool as JSON
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from .catalog import ToolRegistry
from .classifier import CATEGORY_NAMES, classify
from .client import GHLApiClient, GHLApiError
from .config import Config
from .describe import ToolNotFoundError, describe_tool, list_tools
from .dispatch import DispatchRouter
from .errors import ConfigError, RegistryError
from .groups import build_groups
from .logger import enable_stderr, get_logger

log = get_logger("main")


def build_registry(client: GHLApiClient) -> ToolRegistry:
    """Construct every group around `client` and validate the catalog."""
    groups = build_groups(client)
    for group in groups:
        log.info(f"Registered group {group.name}: {len(group.list_definitions())} tools")
    registry = ToolRegistry.from_groups(groups)
    log.info(f"Catalog ready — {registry.tool_count} tools across {len(groups)} groups")
    return registry


def _offline_client() -> GHLApiClient:
    """Client for catalog-only commands; never issues a request."""
    return GHLApiClient(
        access_token=Config.API_KEY,
        location_id=Config.LOCATION_ID,
        base_url=Config.BASE_URL,
        version=Config.API_VERSION,
    )


# ── Commands ─────────────────────────────────────────────────────

async def cmd_stdio(args) -> int:
    from .server import StdioServer

    client = GHLApiClient.from_config()
    try:
        registry = build_registry(client)
    except RegistryError:
        await client.aclose()
        raise
    server = StdioServer(registry, client)
    await server.run()
    return 0


async def _check_connection():
    log.info("Testing GHL API connection...")
    try:
        async with GHLApiClient.from_config() as probe:
            result = await probe.test_connection()
    except GHLApiError as exc:
        raise ConfigError(f"Failed to connect to GHL API: {exc}") from exc
    log.info(f"GHL API connection successful — location {result['data']['locationId']}")


def cmd_http(args) -> int:
    import uvicorn

    from .http_server import create_app

    enable_stderr()
    port = args.port if args.port is not None else Config.port()
    client = GHLApiClient.from_config()
    registry = build_registry(client)

    if not args.skip_connection_test:
        # separate client: the serving one must not hold connections from this loop
        asyncio.run(_check_connection())

    app = create_app(registry, DispatchRouter(registry), client=client)
    log.info(f"Serving on http://{args.host}:{port} (SSE at /sse, describe at /describe)")
    uvicorn.run(app, host=args.host, port=port, log_level="info")
    return 0


def cmd_tools(args) -> int:
    client = _offline_client()
    try:
        registry = build_registry(client)
    finally:
        asyncio.run(client.aclose())

    if args.json:
        print(json.dumps(list_tools(registry), indent=2))
        return 0

    console = Console()
    descriptions = {t.name: t.description for t in registry.catalog}
    shown = 0
    for category in classify(registry.catalog):
        if args.category and category.name != args.category:
            continue
        table = Table(title=f"{category.name} ({category.count})", title_justify="left")
        table.add_column("Tool", style="cyan", no_wrap=True)
        table.add_column("Description")
        for name in category.tools:
            table.add_row(name, descriptions[name])
        console.print(table)
        shown += category.count

    console.print(f"[green]{shown}[/green] of {registry.tool_count} tools")
    return 0


def cmd_describe(args) -> int:
    client = _offline_client()
    try:
        registry = build_registry(client)
    finally:
        asyncio.run(client.aclose())

    try:
        payload = describe_tool(registry, args.tool)
    except ToolNotFoundError as exc:
        Console(stderr=True).print(f"[red]{exc}[/red]")
        return 1
    print(json.dumps(payload, indent=2))
    return 0


# ── Entry point ──────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghl-mcp",
        description="GoHighLevel MCP server (stdio or HTTP/SSE)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("stdio", help="Serve MCP over stdin/stdout (default)")

    http_parser = subparsers.add_parser("http", help="Serve MCP over HTTP + SSE")
    http_parser.add_argument("--host", default=Config.HOST)
    http_parser.add_argument("--port", type=int, help="Default: $PORT, $MCP_SERVER_PORT or 8000")
    http_parser.add_argument(
        "--skip-connection-test", action="store_true",
        help="Start without checking the GHL API first",
    )

    tools_parser = subparsers.add_parser("tools", help="List the tool catalog")
    tools_parser.add_argument("--category", choices=CATEGORY_NAMES, help="Only this category")
    tools_parser.add_argument("--json", action="store_true", help="Print the raw list payload")

    describe_parser = subparsers.add_parser("describe", help="Describe one tool")
    describe_parser.add_argument("tool", help="Tool name")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    command = args.command or "stdio"

    try:
        if command == "stdio":
            return asyncio.run(cmd_stdio(args))
        if command == "http":
            return cmd_http(args)
        if command == "tools":
            return cmd_tools(args)
        if command == "describe":
            return cmd_describe(args)
    except (ConfigError, RegistryError) as exc:
        log.error(f"Startup failed: {exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
