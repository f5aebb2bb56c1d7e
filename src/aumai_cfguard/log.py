"""structlog configuration for aumai-cfguard.

Everything is written to stderr: stdout carries the MCP protocol stream and
must never receive log output.
"""

from __future__ import annotations

import datetime
import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor


def add_timestamp(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:  # noqa: ANN401
    """Add an ISO 8601 UTC timestamp unless the event already carries one."""
    event_dict.setdefault("timestamp", datetime.datetime.now(datetime.UTC).isoformat())
    return event_dict


def configure_logging(log_level: str = "INFO", json_output: bool = True) -> None:
    """Configure structlog for the process.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: One JSON object per line when True, coloured console
            output otherwise.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level '{log_level}'")

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        add_timestamp,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def get_logger(name: str = "aumai_cfguard") -> Any:  # noqa: ANN401
    """Return a structlog logger bound to *name*."""
    return structlog.get_logger(name)


__all__ = ["add_timestamp", "configure_logging", "get_logger"]
