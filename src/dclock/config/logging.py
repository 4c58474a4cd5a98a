"""structlog configuration for dclock.

stdout carries only the clock reading, so every log line goes to stderr:
- Human (default): console renderer, colored when stderr is a TTY
- JSON (--log-json): one JSON object per line

Library code logs through ``logging.getLogger(__name__)``; the stdlib
records are rendered by the same processor chain as structlog events.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "dclock"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _stderr_handler(renderer: structlog.types.Processor) -> logging.Handler:
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Configure structlog and replace the root handler.

    Safe to call repeatedly; the root logger ends up with exactly one handler.

    Args:
        verbose: DEBUG for the ``dclock`` logger.  When False, only WARNING+.
        log_json: Use the JSON renderer instead of the console renderer.
    """
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(_stderr_handler(renderer))
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
