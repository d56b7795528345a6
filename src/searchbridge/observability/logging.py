"""Structured logging configuration using structlog.

Modules log through the standard library (``logging.getLogger(__name__)``).
``setup_logging()`` installs a root handler whose formatter runs those
records through the same structlog processor chain as structlog-native
loggers, so both come out as JSON (or console) lines.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from searchbridge.config.settings import ObservabilitySettings

_HANDLER_NAME = "searchbridge"


def setup_logging(settings: ObservabilitySettings | None = None, stream: IO[str] | None = None) -> None:
    """Configure structured logging for searchbridge.

    Args:
        settings: Observability settings. Uses defaults if None.
        stream: Where log lines are written. Defaults to stdout.
    """
    log_level = settings.log_level.upper() if settings else "INFO"
    log_format = settings.log_format if settings else "json"

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer = structlog.dev.ConsoleRenderer() if log_format == "console" else structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    final_processors: list = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if log_format != "console":
        final_processors.append(structlog.processors.format_exc_info)
    final_processors += [structlog.processors.UnicodeDecoder(), renderer]

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=final_processors,
        )
    )

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, log_level, logging.INFO))
