"""
STDIO MCP Server — Main Orchestrator

Ties together:
  Transport → Router → DispatchRouter → CapabilityGroup → GHLApiClient

One request is read, routed and answered before the next line is read,
so responses leave in arrival order. The process lives as long as stdin.
"""

import asyncio
import signal
from typing import Optional

from .catalog import ToolRegistry
from .client import GHLApiClient
from .config import Config
from .dispatch import DispatchRouter
from .logger import get_logger
from .protocol import make_error, INVALID_REQUEST, PARSE_ERROR
from .router import Router
from .transport import OVERSIZED, PARSE_FAILURE, StdioTransport

log = get_logger("server")


class StdioServer:
    """
    Usage:
        server = StdioServer(registry, client)
        await server.run()
    """

    def __init__(
        self,
        registry: ToolRegistry,
        client: Optional[GHLApiClient] = None,
        transport: Optional[StdioTransport] = None,
    ):
        self.registry = registry
        self._client = client
        self._transport = transport or StdioTransport()
        self._router = Router(registry, DispatchRouter(registry))
        self._running = False
        self._stopped = False

    @property
    def router(self) -> Router:
        return self._router

    # ── main loop ────────────────────────────────────────────────

    async def run(self):
        """Start the server and process messages until EOF or signal."""
        log.info(f"Starting {Config.SERVER_NAME} v{Config.SERVER_VERSION} (stdio)")

        await self._transport.start()

        loop = asyncio.get_running_loop()
        main_task = asyncio.current_task()
        installed = []
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, main_task.cancel)
                installed.append(sig)
            except (NotImplementedError, RuntimeError):
                pass  # Windows, or not on the main thread

        self._running = True
        log.info(
            f"Server ready — tools={self.registry.tool_count} "
            f"groups={len(self.registry.groups)}"
        )

        try:
            while self._running:
                msg = await self._transport.read_message()
                if msg is None:
                    log.info("EOF on stdin — shutting down")
                    break
                await self.handle_message(msg)

        except asyncio.CancelledError:
            log.info("Server cancelled")
        except Exception as exc:
            log.error(f"Server error: {exc}", exc_info=True)
        finally:
            for sig in installed:
                loop.remove_signal_handler(sig)
            await self.shutdown()

    async def handle_message(self, msg):
        """Answer one decoded line (or unreadable-line marker) on the transport."""
        if msg is PARSE_FAILURE:
            await self._transport.write_message(make_error(None, PARSE_ERROR, "Parse error"))
            return
        if msg is OVERSIZED:
            await self._transport.write_message(
                make_error(None, INVALID_REQUEST, "Request line exceeds the size limit")
            )
            return

        response = await self._router.handle(msg)
        if response is not None:
            await self._transport.write_message(response)

    async def shutdown(self):
        """Graceful shutdown — close transport and backend client."""
        if self._stopped:
            return
        self._stopped = True
        self._running = False

        await self._transport.close()
        if self._client is not None:
            await self._client.aclose()

        log.info("Server stopped")
