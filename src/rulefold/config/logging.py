"""structlog configuration for rulefold.

Output goes through one handler on the ``rulefold`` logger, which stops
propagation so records are not duplicated by the host application's
handlers. The root logger is never modified.

Two output modes:
- Human (default): console-formatted output to stderr
- JSON (log_json=True): Structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "rulefold"

# Marks the handler installed here so a later call can replace it.
_HANDLER_MARKER = "_rulefold_owned"


def _build_formatter(*, log_json: bool) -> logging.Formatter:
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

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> logging.Handler:
    """Route ``rulefold`` log records through a structlog formatter.

    Calling again replaces the handler installed by the previous call;
    handlers added by anyone else are left in place.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.

    Returns:
        The handler now attached to the ``rulefold`` logger.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter(log_json=log_json))
    setattr(handler, _HANDLER_MARKER, True)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for previous in [h for h in package_logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        package_logger.removeHandler(previous)
        previous.close()
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
    return handler
