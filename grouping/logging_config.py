"""
Centralized logging configuration for name-cluster.

Every entry point (CLI, API) logs in the same format:
Format: 2026-01-06T14:05:52Z [source] LEVEL message

Environment Variables:
    LOG_LEVEL: Set to "DEBUG", "TRACE", or "INFO" (default)
               - INFO: Run summaries (group counts, early merge stops)
               - DEBUG: Every builder and merger decision
               - TRACE: Closure scans and pair scores

Usage:
    from grouping.logging_config import configure_logging, get_logger

    configure_logging(source="cli")
    logger = get_logger(__name__)
    logger.info("Grouping started")
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import UTC, datetime

# Custom TRACE level for very verbose diagnostics
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class ISO8601Formatter(logging.Formatter):
    """Formatter producing ISO8601 UTC timestamps.

    Output format: 2026-01-06T14:05:52Z [source] LEVEL message
    """

    def __init__(self, source: str = "grouping"):
        """
        Args:
            source: Identifier shown in brackets (e.g., "api", "cli")
        """
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
        message = record.getMessage()

        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        return f"{timestamp} [{self.source}] {record.levelname} {message}"


class HealthCheckFilter(logging.Filter):
    """Drop successful ``GET /health`` access lines above DEBUG."""

    HEALTH_PATH = "/health"

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno <= logging.DEBUG:
            return True

        message = record.getMessage()
        is_health_poll = self.HEALTH_PATH in message and ("GET" in message or "200" in message)
        return not is_health_poll


def _level_from_env(debug: bool | None) -> int:
    log_level_env = os.getenv("LOG_LEVEL", "").upper()
    if log_level_env == "TRACE":
        return TRACE
    if log_level_env == "DEBUG" or debug:
        return logging.DEBUG
    return logging.INFO


def configure_logging(
    source: str = "grouping",
    level: int | None = None,
    debug: bool | None = None,
) -> logging.Logger:
    """Configure logging for an entry point.

    Args:
        source: Source identifier for log messages (e.g., "api", "cli")
        level: Logging level (defaults to INFO, or DEBUG/TRACE from LOG_LEVEL env var)
        debug: Enable debug mode (overrides level to DEBUG)

    Returns:
        Configured root logger
    """
    if level is None:
        level = _level_from_env(debug)
    handler = _stdout_handler(source, level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers[:] = [handler]

    # Server loggers do not propagate, so they get the same handler directly
    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers[:] = [handler]
        server_logger.setLevel(level)
        server_logger.propagate = False

    # TestClient requests are logged by httpx at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return root_logger


def _stdout_handler(source: str, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ISO8601Formatter(source=source))
    handler.addFilter(HealthCheckFilter())
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)
