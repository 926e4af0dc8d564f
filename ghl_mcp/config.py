"""Configuration for the GoHighLevel MCP server"""

import os
from pathlib import Path

from .errors import ConfigError


def _env_number(cast, default, *names):
    """First set variable among `names` parsed with `cast`; ConfigError if malformed."""
    for name in names:
        raw = os.environ.get(name)
        if raw:
            try:
                return cast(raw)
            except ValueError:
                raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    return cast(default)


class Config:
    # Server identity
    SERVER_NAME = "GoHighLevel MCP Server"
    SERVER_VERSION = "1.0.0"
    PROTOCOL_VERSION = "2024-11-05"

    # Backend (GoHighLevel REST API)
    API_KEY = os.environ.get("GHL_API_KEY", "")
    LOCATION_ID = os.environ.get("GHL_LOCATION_ID", "")
    BASE_URL = os.environ.get("GHL_BASE_URL", "https://services.leadconnectorhq.com")
    API_VERSION = "2021-07-28"

    SUPPORTED_FEATURES = [
        "contacts", "conversations", "opportunities", "calendars",
        "invoices", "payments", "social_media", "workflows", "custom_objects",
    ]

    # HTTP transport
    HOST = os.environ.get("MCP_SERVER_HOST", "0.0.0.0")
    CORS_ORIGINS = [
        "https://chatgpt.com",
        "https://chat.openai.com",
        "https://claude.ai",
        "https://console.anthropic.com",
    ]
    CORS_ORIGIN_REGEX = (
        r"^(http://localhost:\d+|https://.*\.vercel\.app|https://.*\.netlify\.app)$"
    )

    # Paths
    APP_DIR = Path(os.environ.get("GHL_MCP_HOME", str(Path.home() / ".ghl-mcp")))
    LOG_DIR = APP_DIR / "logs"

    # Logging (NEVER to stdout in stdio mode)
    LOG_FILE = LOG_DIR / "ghl-mcp.log"
    ERROR_LOG = LOG_DIR / "ghl-mcp-errors.log"

    @classmethod
    def ensure_dirs(cls):
        """Create required directories"""
        cls.APP_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)

    @classmethod
    def require_credentials(cls):
        """Fail fast when the backend credential or location is missing."""
        missing = [
            var for var, value in (
                ("GHL_API_KEY", cls.API_KEY),
                ("GHL_LOCATION_ID", cls.LOCATION_ID),
            )
            if not value
        ]
        if missing:
            raise ConfigError(
                f"{' and '.join(missing)} environment variable"
                f"{'s are' if len(missing) > 1 else ' is'} required"
            )

    # Numeric settings: parsed on use, ConfigError when malformed

    @classmethod
    def port(cls) -> int:
        return _env_number(int, "8000", "PORT", "MCP_SERVER_PORT")

    @classmethod
    def request_timeout(cls) -> float:
        return _env_number(float, "30", "GHL_TIMEOUT")

    @classmethod
    def sse_keepalive(cls) -> float:
        return _env_number(float, "15", "MCP_SSE_KEEPALIVE")

    @classmethod
    def experimental_capabilities(cls) -> dict:
        return {
            "ghl": {
                "version": f"v{cls.API_VERSION}",
                "apiVersion": cls.API_VERSION,
                "supportedFeatures": list(cls.SUPPORTED_FEATURES),
            }
        }
