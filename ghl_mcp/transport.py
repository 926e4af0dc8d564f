"""
STDIO Transport — newline-delimited JSON-RPC

One message per line in each direction. stdout carries protocol
frames only; logging goes through ghl_mcp.logger.
"""

import asyncio
import json
import sys
from typing import Any, BinaryIO, Dict, Optional

from .logger import get_logger

log = get_logger("transport")

# read_message() returns this for a line that is not valid JSON
PARSE_FAILURE = object()

# ...and this for a line longer than the reader limit (rest of line skipped)
OVERSIZED = object()

MAX_LINE_BYTES = 2**20


class StdioTransport:
    """Line-oriented duplex pipe over the process's stdin/stdout."""

    def __init__(
        self,
        reader: Optional[asyncio.StreamReader] = None,
        writer: Optional[BinaryIO] = None,
    ):
        self._reader = reader
        self._stdout = writer
        self.running = False

    async def start(self):
        """Attach to stdin/stdout unless a reader or writer was injected."""
        if self._reader is None:
            loop = asyncio.get_running_loop()
            self._reader = asyncio.StreamReader(limit=MAX_LINE_BYTES)
            protocol = asyncio.StreamReaderProtocol(self._reader)
            await loop.connect_read_pipe(lambda: protocol, sys.stdin.buffer)

        # connect_write_pipe fails when stdout is not a proper pipe
        if self._stdout is None:
            self._stdout = sys.stdout.buffer
        self.running = True
        log.info("Transport initialized")

    async def read_message(self) -> Any:
        """
        Next message from the reader.

        Returns the decoded message, PARSE_FAILURE for an undecodable
        line, OVERSIZED for a line past the reader's limit, or None on
        EOF. Blank lines are skipped.
        """
        if self._reader is None:
            raise RuntimeError("Transport not started")

        while True:
            try:
                raw_bytes = await self._reader.readuntil(b"\n")
            except asyncio.IncompleteReadError as exc:
                raw_bytes = exc.partial  # last line without a newline
                if not raw_bytes:
                    return None  # EOF
            except asyncio.LimitOverrunError as exc:
                log.warning(f"Discarding oversized line ({exc.consumed}+ bytes)")
                await self._discard_line(exc.consumed)
                return OVERSIZED
            if raw_bytes.strip():
                break

        try:
            return json.loads(raw_bytes)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            log.error(f"JSON parse error: {exc}")
            return PARSE_FAILURE

    async def _discard_line(self, consumed: int):
        """Drop buffered bytes up to and including the next newline."""
        while True:
            await self._reader.readexactly(consumed)
            try:
                await self._reader.readuntil(b"\n")
                return
            except asyncio.LimitOverrunError as exc:
                consumed = exc.consumed
            except asyncio.IncompleteReadError:
                return  # EOF mid-line

    async def write_message(self, message: Dict[str, Any]):
        """Emit `message` as one compact JSON line and flush."""
        if self._stdout is None:
            raise RuntimeError("Transport not started")

        raw_bytes = (json.dumps(message, separators=(",", ":")) + "\n").encode("utf-8")
        self._stdout.write(raw_bytes)
        self._stdout.flush()

    async def close(self):
        self.running = False
        log.info("Transport closed")
