"""structlog setup for the command line tool. The library itself never logs."""

from __future__ import annotations

import logging
import os
import sys

import structlog

LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def configure_logging(level: str | None = None) -> None:
    """
    Route structlog through stdlib logging on stderr.

    LOG_LEVEL picks the level (default WARNING) unless `level` is given;
    LOG_FORMAT=json switches from the console renderer to JSON lines.
    stdout stays free for share output.
    """
    level_name = (level or os.getenv('LOG_LEVEL', 'WARNING')).upper()
    if level_name not in LEVELS:
        raise ValueError(f"Invalid LOG_LEVEL {level_name!r}, expected one of {LEVELS}")
    log_format = os.getenv('LOG_FORMAT', 'console').lower()

    if log_format == 'json':
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt='iso'),
    ]

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    ))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level_name))
