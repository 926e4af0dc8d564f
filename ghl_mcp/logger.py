"""
File-only logger — NEVER writes to stdout (would corrupt the stdio protocol)
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import Config

_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def _secure_handler(log_path: Path, level: int, fmt: str) -> RotatingFileHandler:
    """Create a rotating file handler with restricted permissions."""
    handler = RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S"))

    # Tool arguments can carry contact PII
    try:
        os.chmod(log_path, 0o600)
    except OSError:
        pass

    return handler


def _root() -> logging.Logger:
    root = logging.getLogger("ghl_mcp")
    if root.handlers:
        return root

    Config.ensure_dirs()
    root.setLevel(logging.DEBUG)
    root.addHandler(_secure_handler(Config.LOG_FILE, logging.DEBUG, _FORMAT))
    root.addHandler(_secure_handler(Config.ERROR_LOG, logging.ERROR, _FORMAT))

    # stdout belongs to the protocol
    root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """Child of the ghl_mcp logger; file handlers only until enable_stderr()."""
    _root()
    return logging.getLogger(f"ghl_mcp.{name}")


def enable_stderr(level: int = logging.INFO) -> None:
    """Mirror log output to stderr (HTTP mode and CLI only)."""
    root = _root()
    for handler in root.handlers:
        if getattr(handler, "_ghl_stderr", False):
            return
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level)
    sh.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    sh._ghl_stderr = True
    root.addHandler(sh)
