"""Structured logging for the engine's host surfaces.

Library modules log through plain ``logging.getLogger(__name__)``; the CLI
uses structlog loggers from :func:`get_logger`.  Both end up on the same
stderr handler once :func:`setup_logging` has run.  Every structlog entry
carries the ``run_id`` bound by :func:`new_run_id`, so the lines of one
recomputation can be grouped.
"""

from __future__ import annotations

import logging
import sys
import uuid
from typing import IO, Any

import structlog


def new_run_id() -> str:
    """Bind a fresh run ID to the current context and return it."""
    rid = uuid.uuid4().hex[:12]
    structlog.contextvars.bind_contextvars(run_id=rid)
    return rid


def get_run_id() -> str:
    """Run ID bound to the current context, or ``""`` before the first run."""
    return structlog.contextvars.get_contextvars().get("run_id", "")


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    stream: IO[str] | None = None,
) -> None:
    """Configure structlog and the stdlib root handler.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR).
        format: "json" for machine-readable lines, "console" for humans.
        stream: Output stream; defaults to the current ``sys.stderr``.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]
    if format == "json":
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force: a second call (another CLI invocation in the same process)
    # must write to the stream that is current now.
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stderr,
        level=log_level,
        force=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
