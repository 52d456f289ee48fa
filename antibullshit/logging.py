"""
Structured Logging — JSON Output for Production

Configures Python logging to emit structured JSON logs.
Each log entry includes timestamp, level, module, and
any additional context fields.

Logs go to stderr: stdout belongs to the stdio protocol stream.

Usage:
    from antibullshit.logging import get_logger
    logger = get_logger("tools")
    logger.info("Tool complete", extra={"tool": "analyze_claim", "framework": "empirical"})
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone


LOG_LEVEL = os.getenv("ANTIBULLSHIT_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("ANTIBULLSHIT_LOG_FORMAT", "json")  # "json" or "text"

EXTRA_FIELDS = (
    "tool", "framework", "confidence", "sources_count", "patterns",
    "duration_ms", "error", "error_type", "status_code", "method", "path",
)


class JSONFormatter(logging.Formatter):
    """Formats log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                entry[key] = val

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable format for development."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(log_format: str | None = None):
    """Configure the package logger. Call once at startup."""
    root = logging.getLogger("antibullshit")
    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if (log_format or LOG_FORMAT) == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())

    root.addHandler(handler)

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("mcp").setLevel(logging.WARNING)

    return root


def get_logger(name: str) -> logging.Logger:
    """Get a named logger under the antibullshit namespace."""
    return logging.getLogger(f"antibullshit.{name}")
