"""
HTTP / SSE transport — FastAPI app.

Discovery endpoints are plain request/response over the shared registry.
Protocol traffic rides a per-agent SSE stream:

  GET  /sse                    → opens a session; first event is `endpoint`
  POST /sse?sessionId=<id>     → one JSON-RPC message, answered on the stream

Usage:
    app = create_app(registry, DispatchRouter(registry))
    uvicorn.run(app, host=Config.HOST, port=Config.port())
"""

import json
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response, StreamingResponse

from .catalog import ToolRegistry
from .classifier import classify, summary
from .client import GHLApiClient
from .config import Config
from .describe import (
    ToolNotFoundError,
    describe_server,
    describe_tool,
    server_capabilities,
    server_info,
)
from .dispatch import DispatchRouter
from .logger import get_logger
from .router import Router
from .sse import SessionClosedError, SessionManager

log = get_logger("http")

ENDPOINTS = {
    "describe": "/describe",
    "describe-tool": "/describe/tool/:toolName",
    "health": "/health",
    "capabilities": "/capabilities",
    "tools": "/tools",
    "sse": "/sse",
}

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


def create_app(
    registry: ToolRegistry,
    dispatcher: Optional[DispatchRouter] = None,
    client: Optional[GHLApiClient] = None,
    keepalive: Optional[float] = None,
) -> FastAPI:
    """Build the HTTP app around an already-validated registry."""
    if keepalive is None:
        keepalive = Config.sse_keepalive()
    router = Router(registry, dispatcher or DispatchRouter(registry))
    sessions = SessionManager(router, endpoint="/sse")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info(f"HTTP server ready — tools={registry.tool_count}")
        yield
        sessions.close_all()
        if client is not None:
            await client.aclose()
        log.info("HTTP server stopped")

    app = FastAPI(
        title=Config.SERVER_NAME,
        version=Config.SERVER_VERSION,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.registry = registry
    app.state.router = router
    app.state.sessions = sessions

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_origin_regex=Config.CORS_ORIGIN_REGEX,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Accept", "Cache-Control"],
        allow_credentials=True,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        log.info(f"{request.method} {request.url.path} → {response.status_code} ({elapsed_ms:.1f}ms)")
        return response

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception):
        log.error(f"Error handling {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": str(exc)},
        )

    # ── Discovery ────────────────────────────────────────────

    @app.get("/")
    async def root():
        return {
            **server_info(),
            "status": "running",
            "description": "GoHighLevel MCP Server with comprehensive CRM API access",
            "endpoints": ENDPOINTS,
            "toolsCount": registry.tool_count,
            "categories": summary(classify(registry.catalog)),
        }

    @app.get("/describe")
    async def describe():
        return describe_server(registry)

    @app.get("/describe/tool/{tool_name}")
    async def describe_one(tool_name: str):
        try:
            return describe_tool(registry, tool_name)
        except ToolNotFoundError as exc:
            return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "server": Config.SERVER_NAME,
            "version": Config.SERVER_VERSION,
            "toolsCount": registry.tool_count,
            "activeSessions": len(sessions),
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "categories": summary(classify(registry.catalog)),
            "endpoints": ENDPOINTS,
        }

    @app.get("/capabilities")
    async def capabilities():
        return {
            "capabilities": server_capabilities(),
            "server": server_info(),
            "toolsCount": registry.tool_count,
        }

    @app.get("/tools")
    async def tools():
        return {
            "tools": registry.catalog.to_list(),
            "count": registry.tool_count,
            "categories": [c.to_dict() for c in classify(registry.catalog)],
            "serverInfo": server_info(),
        }

    # ── Push channel ─────────────────────────────────────────

    @app.get("/sse")
    async def open_stream(request: Request):
        session = sessions.create()
        client_host = request.client.host if request.client else "?"
        log.info(f"New SSE connection from {client_host}, sessionId={session.id}")
        return StreamingResponse(
            sessions.stream(session, keepalive),
            media_type="text/event-stream",
            headers=SSE_HEADERS,
        )

    @app.post("/sse")
    async def post_message(request: Request, sessionId: Optional[str] = None):
        if not sessionId:
            return JSONResponse(status_code=400, content={"error": "Missing sessionId"})
        session = sessions.get(sessionId)
        if session is None:
            return JSONResponse(status_code=404, content={"error": f"Unknown session: {sessionId}"})

        body = await request.body()
        try:
            msg = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            return JSONResponse(status_code=400, content={"error": f"Invalid JSON: {exc}"})

        try:
            await session.submit(msg)
        except SessionClosedError:
            return JSONResponse(status_code=404, content={"error": f"Session closed: {sessionId}"})
        return Response(status_code=202, content="Accepted")

    return app
