"""structlog configuration for the vkwire CLI.

Library code logs through ``logging.getLogger(__name__)`` under the
``vkwire`` namespace; this module only decides how those records reach
stderr:

- console (default): one colored line per event
- ``--log-json``: one JSON object per event

stdout is reserved for command results, so ``vkwire --json call ...``
stays parseable with logging enabled.
"""

from __future__ import annotations

import logging
import sys

import structlog

# HTTP stack loggers: httpx logs every request at INFO, httpcore every
# connection step at DEBUG.
_QUIET_LOGGERS = ("httpx", "httpcore")


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route ``vkwire`` log records to stderr through structlog.

    Args:
        verbose: Show DEBUG records from ``vkwire`` (decode failures,
            trace writes). Otherwise WARNING and above.
        log_json: Render JSON lines instead of console text.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    # Replace rather than append so repeated calls do not duplicate lines.
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("vkwire").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
