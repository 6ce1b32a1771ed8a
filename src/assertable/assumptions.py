"""assume helpers: a false condition is reported through Err.

Each helper returns ``Ok(True)`` when its condition holds. Otherwise it
returns ``Err`` carrying either the default diagnostic or, when given, the
caller's message verbatim:

```python
assume_lt(1, 2)
# Ok(value=True)

assume_lt(2, 1)
# Err(error='assumption failed: `assume_lt(left, right)`\\n  left: `2`\\n right: `1`')

assume_lt(2, 1, 'custom')
# Err(error='custom')
```

The ``assume_io_*`` helpers wrap the diagnostic in an
:class:`~assertable.errors.IoError` tagged ``INVALID_INPUT`` for callers
that expect OS-style errors.
"""

from __future__ import annotations

from assertable.check import (
    BinaryHelper,
    Comparison,
    ConditionHelper,
    Encoding,
    Mode,
    bind_binary,
    bind_condition,
)
from assertable.errors import IoError

__all__ = [
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
    'compare_io_lt',
    'compare_io_ne',
    'compare_lt',
    'compare_ne',
]

_OPERATOR_TEXT = {
    Comparison.EQ: 'equal to',
    Comparison.NE: 'not equal to',
    Comparison.LT: 'less than',
    Comparison.LE: 'less than or equal to',
    Comparison.GT: 'greater than',
    Comparison.GE: 'greater than or equal to',
}


def _doc(comparison: Comparison, encoding: Encoding) -> str:
    error = 'IoError(INVALID_INPUT, diagnostic)' if encoding is Encoding.IO else 'diagnostic'
    if comparison is Comparison.CONDITION:
        subject = 'Assume a condition is true.'
    else:
        subject = f'Assume left is {_OPERATOR_TEXT[comparison]} right.'
    return f'{subject}\n\nReturns Ok(True) when it holds, else Err({error}).\nA given message replaces the default diagnostic.\n'


def _binary(comparison: Comparison) -> BinaryHelper[str]:
    return bind_binary(Mode.ASSUME, comparison, Encoding.PLAIN, _doc(comparison, Encoding.PLAIN), __name__)


def _binary_io(comparison: Comparison) -> BinaryHelper[IoError]:
    return bind_binary(Mode.ASSUME, comparison, Encoding.IO, _doc(comparison, Encoding.IO), __name__)


assume: ConditionHelper[str] = bind_condition(
    Mode.ASSUME, Encoding.PLAIN, _doc(Comparison.CONDITION, Encoding.PLAIN), __name__
)
assume_eq = _binary(Comparison.EQ)
assume_ne = _binary(Comparison.NE)
assume_lt = _binary(Comparison.LT)
assume_le = _binary(Comparison.LE)
assume_gt = _binary(Comparison.GT)
assume_ge = _binary(Comparison.GE)

assume_io: ConditionHelper[IoError] = bind_condition(
    Mode.ASSUME, Encoding.IO, _doc(Comparison.CONDITION, Encoding.IO), __name__
)
assume_io_eq = _binary_io(Comparison.EQ)
assume_io_ne = _binary_io(Comparison.NE)
assume_io_lt = _binary_io(Comparison.LT)
assume_io_le = _binary_io(Comparison.LE)
assume_io_gt = _binary_io(Comparison.GT)
assume_io_ge = _binary_io(Comparison.GE)

compare_lt = assume_lt
compare_ne = assume_ne
compare_io_lt = assume_io_lt
compare_io_ne = assume_io_ne
