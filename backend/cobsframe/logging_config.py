"""JSON logging for the cobsframe command line.

stdout carries encoded frames and decoded packets, so the command line hands
``sys.stderr`` in as ``stream``. Both structlog events and the stdlib warnings
raised by ``cobsframe.cobs`` on malformed frames are written there. Calling
``configure_logging`` again replaces the previous stream and level.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(
    service_name: str, level: str = "INFO", stream: TextIO | None = None
) -> None:
    """Configure structlog with JSON rendering for a named service.

    Args:
        service_name: Bound to every log entry (e.g. "cobsframe").
        level: Root log level as a string (e.g. "DEBUG", "INFO", "WARNING").
        stream: Destination for log lines, stderr when omitted.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    if stream is None:
        stream = sys.stderr

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *processors,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

    # Replace any earlier root handler so stdlib records follow the new stream
    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=numeric_level,
        force=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=service_name)
