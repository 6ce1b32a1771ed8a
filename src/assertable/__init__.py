"""assertable: comparison checks that return Result values instead of raising.

Flat imports (preferred):
    from assertable import assume_lt, assure_gt, Ok, Err

Submodule imports (for organization):
    from assertable.assumptions import assume_ne, assume_io_lt
    from assertable.assurances import assure, assure_io_gt
    from assertable.check import Check, Mode, Comparison, Encoding
"""

from assertable._config import AssertableConfig, get_config, init
from assertable._logging import configure_logging, get_logger, trace_check
from assertable.assumptions import (
    assume,
    assume_eq,
    assume_ge,
    assume_gt,
    assume_io,
    assume_io_eq,
    assume_io_ge,
    assume_io_gt,
    assume_io_le,
    assume_io_lt,
    assume_io_ne,
    assume_le,
    assume_lt,
    assume_ne,
    compare_io_lt,
    compare_io_ne,
    compare_lt,
    compare_ne,
)
from assertable.assurances import (
    assure,
    assure_eq,
    assure_ge,
    assure_gt,
    assure_io,
    assure_io_eq,
    assure_io_ge,
    assure_io_gt,
    assure_io_le,
    assure_io_lt,
    assure_io_ne,
    assure_le,
    assure_lt,
    assure_ne,
    query_condition,
    query_gt,
    query_io_condition,
    query_io_gt,
    query_io_lt,
    query_lt,
)
from assertable.check import (
    BinaryHelper,
    Check,
    Comparison,
    ConditionHelper,
    Encoding,
    Mode,
    bind_binary,
    bind_condition,
)
from assertable.errors import ErrorKind, IoError, IoException, invalid_input
from assertable.result import Err, Ok, Result, collect

__all__ = [
    # Configuration
    'AssertableConfig',
    # Generic comparator
    'BinaryHelper',
    'Check',
    'Comparison',
    'ConditionHelper',
    'Encoding',
    # Result types
    'Err',
    # Errors
    'ErrorKind',
    'IoError',
    'IoException',
    'Mode',
    'Ok',
    'Result',
    # assume
    'assume',
    'assume_eq',
    'assume_ge',
    'assume_gt',
    'assume_io',
    'assume_io_eq',
    'assume_io_ge',
    'assume_io_gt',
    'assume_io_le',
    'assume_io_lt',
    'assume_io_ne',
    'assume_le',
    'assume_lt',
    'assume_ne',
    # assure
    'assure',
    'assure_eq',
    'assure_ge',
    'assure_gt',
    'assure_io',
    'assure_io_eq',
    'assure_io_ge',
    'assure_io_gt',
    'assure_io_le',
    'assure_io_lt',
    'assure_io_ne',
    'assure_le',
    'assure_lt',
    'assure_ne',
    'bind_binary',
    'bind_condition',
    'collect',
    'compare_io_lt',
    'compare_io_ne',
    'compare_lt',
    'compare_ne',
    # Logging
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'invalid_input',
    'query_condition',
    'query_gt',
    'query_io_condition',
    'query_io_gt',
    'query_io_lt',
    'query_lt',
    'trace_check',
]
