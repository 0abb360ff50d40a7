"""structlog configuration for dirjson.

Two output modes:
- Human (default): console-formatted output
- JSON (``log_json``): structured JSON lines

Levels and mode come from :class:`DirJsonSettings` (so ``DIRJSON_VERBOSE``
and ``DIRJSON_LOG_JSON`` work), with explicit keyword arguments taking
precedence. The sink is pluggable: pass any :class:`logging.Handler`.
Library code never calls this on import; applications opt in.
"""

from __future__ import annotations

import logging
import sys

import structlog

from dirjson.config.settings import DirJsonSettings

LOGGER_NAME = "dirjson"


def _renderer(log_json: bool, handler: logging.Handler) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    stream = getattr(handler, "stream", None)
    colors = bool(stream is not None and hasattr(stream, "isatty") and stream.isatty())
    return structlog.dev.ConsoleRenderer(colors=colors)


def configure_logging(
    settings: DirJsonSettings | None = None,
    *,
    verbose: bool | None = None,
    log_json: bool | None = None,
    handler: logging.Handler | None = None,
) -> logging.Handler:
    """Configure structlog processors and route dirjson records to *handler*.

    Args:
        settings: Source of the ``verbose`` and ``log_json`` defaults.
            A fresh :class:`DirJsonSettings` is read when omitted.
        verbose: Override ``settings.verbose``. DEBUG when true, else WARNING.
        log_json: Override ``settings.log_json``.
        handler: Destination for rendered records. Defaults to stderr.

    Returns:
        The installed handler. Repeated calls replace it rather than stack.
    """
    settings = settings or DirJsonSettings()
    if verbose is None:
        verbose = settings.verbose
    if log_json is None:
        log_json = settings.log_json

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

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, handler),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler
