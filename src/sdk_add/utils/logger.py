"""Structured logging built on structlog and the standard logging module.

Nothing is configured on import. Until the host application calls
:func:`configure_logging`, package loggers forward to an unconfigured stdlib
logger, so DEBUG events are dropped.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

from sdk_add.utils.settings import LoggingSettings, get_settings

if TYPE_CHECKING:
    from structlog.typing import Processor

_HANDLER_NAME = "sdk_add"


def _renderer(log_format: str) -> Processor:
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    if log_format == "plain":
        return structlog.processors.KeyValueRenderer(
            key_order=["timestamp", "level", "logger", "event"],
        )
    return structlog.processors.JSONRenderer()


def _build_handler(settings: LoggingSettings) -> logging.Handler:
    handler: logging.Handler
    if settings.log_file_path:
        handler = logging.FileHandler(settings.log_file_path, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.set_name(_HANDLER_NAME)
    return handler


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog and the root stdlib handler.

    Safe to call repeatedly; the handler installed by a previous call is
    replaced rather than duplicated.

    Args:
        settings: Logging settings to apply. Defaults to the global settings.

    """
    settings = settings or get_settings()

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
            existing.close()
    root.addHandler(_build_handler(settings))
    root.setLevel(getattr(logging, settings.log_level))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(settings.log_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str, **initial_values: Any) -> Any:
    """Return a structlog logger backed by the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )
