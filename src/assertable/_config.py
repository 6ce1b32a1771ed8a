"""Configuration: AssertableConfig, init and get_config."""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass

from assertable._logging import configure_logging

__all__ = [
    'AssertableConfig',
    'get_config',
    'init',
]

_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})
_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class AssertableConfig:
    """Process-wide configuration for assertable.

    Attributes:
        trace: Emit a DEBUG event for every check evaluation.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
    """

    trace: bool = False
    log_level: str | None = None


_config: AssertableConfig | None = None


def _detect_trace() -> bool:
    """Read ASSERTABLE_TRACE from the environment."""
    return _parse_trace(os.environ.get('ASSERTABLE_TRACE', ''))


@functools.cache
def _parse_trace(raw: str) -> bool:
    """Parse a trace flag; unknown values log one warning and disable tracing."""
    env_trace = raw.strip().lower()
    if env_trace in _TRUE_VALUES:
        return True
    if env_trace and env_trace not in _FALSE_VALUES:
        logging.warning("Unknown ASSERTABLE_TRACE value '%s', tracing disabled", env_trace)
    return False


def _detect_log_level() -> str | None:
    """Read ASSERTABLE_LOG_LEVEL from the environment."""
    return os.environ.get('ASSERTABLE_LOG_LEVEL', '').strip().upper() or None


def init(
    trace: bool | None = None,
    log_level: str | None = None,
) -> AssertableConfig:
    """Initialize assertable with the given configuration.

    Args:
        trace: Emit a DEBUG event per check. Read from ASSERTABLE_TRACE if None.
        log_level: Logging level. Read from ASSERTABLE_LOG_LEVEL if None;
            logging is configured only when a level resolves.

    Returns:
        The AssertableConfig that was set.

    Example:
        ```python
        import assertable

        assertable.init(trace=True, log_level='DEBUG')
        assertable.assume_lt(2, 1)
        # {"check": "assume_lt", "outcome": false, ...}
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    _config = AssertableConfig(
        trace=_detect_trace() if trace is None else trace,
        log_level=resolved_level,
    )

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> AssertableConfig:
    """Get the current configuration.

    Until :func:`init` is called, the environment is read on every call, so
    setting ASSERTABLE_TRACE later in the process still takes effect. After
    :func:`init` the stored configuration wins.
    """
    if _config is None:
        return AssertableConfig(trace=_detect_trace(), log_level=_detect_log_level())
    return _config
