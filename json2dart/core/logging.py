"""Logging for the CLI: structlog events rendered through stdlib handlers.

Every record, from structlog or plain ``logging``, is formatted by one
:class:`structlog.stdlib.ProcessorFormatter` and written to stderr, leaving
stdout free for generated code. Only the ``json2dart`` logger follows the
configured level; everything else stays at WARNING.
"""

from __future__ import annotations

import logging.config
import os
from typing import Any

import structlog

from json2dart.core.config import ENV_VARS

DEFAULT_LEVEL = "WARNING"
DEFAULT_FORMAT = "console"

# Applied to structlog events and to foreign stdlib records alike
_PRE_CHAIN: tuple[structlog.types.Processor, ...] = (
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.format_exc_info,
)


def _renderer(fmt: str) -> structlog.types.Processor:
    if fmt == "json":
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=False)


def logging_config(level: str, fmt: str) -> dict[str, Any]:
    """``dictConfig`` schema routing json2dart records to stderr."""
    formatter = {
        "()": structlog.stdlib.ProcessorFormatter,
        "foreign_pre_chain": list(_PRE_CHAIN),
        "processors": [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(fmt),
        ],
    }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"structlog": formatter},
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "structlog",
            },
        },
        "root": {"handlers": ["stderr"], "level": DEFAULT_LEVEL},
        "loggers": {"json2dart": {"level": level}},
    }


def setup_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure structlog and stdlib logging.

    Omitted arguments fall back to JSON2DART_LOG_LEVEL and
    JSON2DART_LOG_FORMAT, then to WARNING and console.
    """
    level = (level or os.environ.get(ENV_VARS["log_level"], DEFAULT_LEVEL)).upper()
    fmt = (fmt or os.environ.get(ENV_VARS["log_format"], DEFAULT_FORMAT)).lower()

    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.config.dictConfig(logging_config(level, fmt))
