"""Logging setup for the Sirv client and helpers.

The token manager logs through structlog with keyword fields while the
client uses stdlib loggers with ``extra=``. Both end up on one handler whose
:class:`structlog.stdlib.ProcessorFormatter` renders them the same way.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

_HANDLER_NAME = "openbeta"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def configure_logging(
    level: int = logging.INFO,
    *,
    json: bool = True,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Install the shared handler on the root logger and return it.

    Calling it again replaces the handler installed by the previous call.
    ``json=False`` switches to structlog's console renderer for local runs.
    """
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer()
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[*_shared_processors(), structlog.stdlib.ExtraAdder()],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    return handler


__all__ = ["configure_logging"]
