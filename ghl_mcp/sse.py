"""
SSE push-channel sessions.

Each connected agent holds one GET /sse stream. The first event names the
endpoint the agent POSTs its JSON-RPC messages to; every response comes
back on the stream as a `message` event. A session works through its
inbound messages one at a time on its own worker task, so responses on a
stream keep request order. Sessions share the Router and never see each
other's traffic.
"""

import asyncio
import json
import uuid
from typing import Any, AsyncIterator, Dict, Optional

from .logger import get_logger
from .router import Router

log = get_logger("sse")


def _sse(event: str, data: Any) -> str:
    payload = data if isinstance(data, str) else json.dumps(data, separators=(",", ":"))
    return f"event: {event}\ndata: {payload}\n\n"


KEEPALIVE = ": keepalive\n\n"

# queued by close() so a waiting stream ends at once
_CLOSED = object()


class SessionClosedError(RuntimeError):
    pass


class SseSession:
    """One agent's push channel plus its ordered inbound work queue."""

    def __init__(self, session_id: str, router: Router, endpoint: str = "/sse"):
        self.id = session_id
        self.router = router
        self.endpoint = f"{endpoint}?sessionId={session_id}"
        self.closed = False
        self._inbox: asyncio.Queue = asyncio.Queue()
        self._outbox: asyncio.Queue = asyncio.Queue()
        self._worker: Optional[asyncio.Task] = None

    def _ensure_worker(self):
        if self._worker is None:
            self._worker = asyncio.create_task(self._work(), name=f"sse-{self.id}")

    async def submit(self, msg: Any):
        """Queue one decoded JSON-RPC message for processing."""
        if self.closed:
            raise SessionClosedError(self.id)
        self._ensure_worker()
        await self._inbox.put(msg)

    async def _work(self):
        while True:
            msg = await self._inbox.get()
            try:
                response = await self.router.handle(msg)
            except Exception as exc:
                log.error(f"Session {self.id} failed on message: {exc}", exc_info=True)
                continue
            if response is not None:
                await self._outbox.put(response)

    async def next_response(self, timeout: Optional[float] = None) -> Dict[str, Any]:
        """
        Next outbound JSON-RPC response.

        Raises asyncio.TimeoutError on timeout and SessionClosedError once
        the session is closed and every earlier response has been taken.
        """
        response = await asyncio.wait_for(self._outbox.get(), timeout)
        if response is _CLOSED:
            self._outbox.put_nowait(_CLOSED)
            raise SessionClosedError(self.id)
        return response

    async def events(self, keepalive: float = 15.0) -> AsyncIterator[str]:
        """Render the stream: endpoint event, then responses and keep-alives."""
        self._ensure_worker()
        yield _sse("endpoint", self.endpoint)
        while not self.closed:
            try:
                response = await self.next_response(keepalive)
            except asyncio.TimeoutError:
                yield KEEPALIVE
                continue
            except SessionClosedError:
                return
            yield _sse("message", response)

    def close(self):
        """Stop the worker. Messages still queued are dropped."""
        if self.closed:
            return
        self.closed = True
        if self._worker is not None:
            self._worker.cancel()
        self._outbox.put_nowait(_CLOSED)
        dropped = self._inbox.qsize()
        if dropped:
            log.info(f"Session {self.id} closed with {dropped} pending message(s) dropped")


class SessionManager:
    """Registry of live sessions keyed by session id."""

    def __init__(self, router: Router, endpoint: str = "/sse"):
        self.router = router
        self.endpoint = endpoint
        self._sessions: Dict[str, SseSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(self) -> SseSession:
        session = SseSession(uuid.uuid4().hex, self.router, self.endpoint)
        self._sessions[session.id] = session
        log.info(f"SSE session opened: {session.id} (active={len(self._sessions)})")
        return session

    def get(self, session_id: str) -> Optional[SseSession]:
        return self._sessions.get(session_id)

    def close(self, session_id: str):
        session = self._sessions.pop(session_id, None)
        if session is None:
            return
        session.close()
        log.info(f"SSE session closed: {session_id} (active={len(self._sessions)})")

    def close_all(self):
        for session_id in list(self._sessions):
            self.close(session_id)

    async def stream(self, session: SseSession, keepalive: float) -> AsyncIterator[str]:
        """session.events(), closing the session when the client goes away."""
        try:
            async for chunk in session.events(keepalive):
                yield chunk
        finally:
            self.close(session.id)
