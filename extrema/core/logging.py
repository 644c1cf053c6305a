"""structlog configuration for extrema.

The library never configures logging itself; applications call
configure_logging() once at startup. Only the ``extrema`` logger gets a
handler; root handlers of the host application are left untouched, and
``extrema`` records stop propagating to them.

Two output modes:
- Human (default): console renderer to stderr
- JSON (log_json=True): structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output for the ``extrema`` logger.
            When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.

    structlog.configure() is process-wide: structlog loggers of the host
    application are routed through the stdlib as well.
    """
    extrema_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    # Root logger хост-приложения не трогаем
    extrema_logger = logging.getLogger("extrema")
    extrema_logger.handlers.clear()
    extrema_logger.addHandler(handler)
    extrema_logger.setLevel(extrema_level)
    extrema_logger.propagate = False
