"""
Logging for calbounds.

The library only emits events through ``log()``; it never configures logging
on import, so a host application's structlog setup decides where they go.
``configure_logging`` is an opt-in helper for scripts and tests that want the
library's own events as JSON lines. It attaches one handler to the
``calbounds`` stdlib logger and leaves the root logger alone.
"""

import logging
import sys
from typing import Optional, TextIO

import structlog
from structlog.contextvars import merge_contextvars

from calbounds.config import settings

LOGGER_NAME = "calbounds"
_HANDLER_NAME = "calbounds-json"


def _add_library_context(_logger, _method_name: str, event_dict: dict) -> dict:
    event_dict.setdefault("env", settings.env)
    return event_dict


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(str(level or settings.log_level).upper())
    logger.propagate = False

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ]
        )
    )
    logger.addHandler(handler)

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            _add_library_context,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return logger


def log():
    return structlog.get_logger(LOGGER_NAME)
