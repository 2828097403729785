"""
Structured logging configuration for SteadyDay, using structlog wrapping stdlib.

Both entry points configure logging once at startup: `steadyday.api.main`
calls `setup_logging()` at import, and `steadyday.cli.main` calls it before
dispatching a command. Package modules keep plain `logging.getLogger(__name__)`
loggers; their records are rendered through the same processor chain.

Environment:
    STEADYDAY_LOG_LEVEL   Root level (default INFO)
    STEADYDAY_LOG_FORMAT  "json" for JSON lines; console output otherwise

Usage:
    from steadyday.logging_config import setup_logging, get_logger
    setup_logging()
    log = get_logger(__name__)
"""

from __future__ import annotations

import logging
import os
import sys

import structlog


def setup_logging(level: str | None = None, json_output: bool | None = None) -> None:
    if level is None:
        level = os.environ.get("STEADYDAY_LOG_LEVEL", "INFO")

    if json_output is None:
        json_output = os.environ.get("STEADYDAY_LOG_FORMAT", "").lower() == "json"

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Records from plain logging.getLogger() callers go through the same chain
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)

    # uvicorn access logs are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(max(numeric_level, logging.WARNING))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


__all__ = ["get_logger", "setup_logging"]
