"""Structured logging for assertable.

Checks never log on their own. With tracing enabled (``assertable.init(trace=True)``
or ``ASSERTABLE_TRACE=1``) every evaluation goes through :func:`trace_check`,
which owns the shape of the one event this package emits:

    {"event": "check evaluated", "check": "assume_lt", "outcome": false,
     "diagnostic": "assumption failed: ..."}

``diagnostic`` is present only when the check returned Err.

:func:`configure_logging` is optional; without it events go wherever the host
application has configured structlog.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from assertable.result import Err, Result

__all__ = [
    'CHECK_EVENT',
    'configure_logging',
    'get_logger',
    'trace_check',
]

CHECK_EVENT = 'check evaluated'

# Run for structlog events and for stdlib records alike, so both render the same.
_PRE_CHAIN: tuple[Any, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt='iso'),
)


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        level: Root logging level name; unknown names fall back to INFO.
        json_output: One JSON object per line if True, else a console renderer.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(_PRE_CHAIN),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


def trace_check(name: str, result: Result[bool, Any]) -> None:
    """Emit the DEBUG event for one evaluated check.

    Args:
        name: The helper name, e.g. ``assume_io_lt``.
        result: What the check returned.
    """
    logger = get_logger('assertable.check')
    if isinstance(result, Err):
        logger.debug(CHECK_EVENT, check=name, outcome=False, diagnostic=str(result.error))
    else:
        logger.debug(CHECK_EVENT, check=name, outcome=result.value)
