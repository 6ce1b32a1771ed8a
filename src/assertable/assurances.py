"""assure helpers: the outcome is always reported as Ok(bool).

Unlike :mod:`assertable.assumptions`, a false condition is a normal, queryable
result and never reaches the Err channel:

```python
assure(False)
# Ok(value=False)

assure_gt(2, 1, 'msg')
# Ok(value=True)
```

A message is accepted for symmetry with the assume helpers and ignored.
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
    'query_condition',
    'query_gt',
    'query_io_condition',
    'query_io_gt',
    'query_io_lt',
    'query_lt',
]

_CONDITION_DOC = 'Return Ok(True) if the condition is truthy, else Ok(False).\n'


def _doc(comparison: Comparison) -> str:
    return f'Return Ok(left {comparison.value} right) as a bool. Never returns Err.\n'


def _binary(comparison: Comparison) -> BinaryHelper[str]:
    return bind_binary(Mode.ASSURE, comparison, Encoding.PLAIN, _doc(comparison), __name__)


def _binary_io(comparison: Comparison) -> BinaryHelper[IoError]:
    return bind_binary(Mode.ASSURE, comparison, Encoding.IO, _doc(comparison), __name__)


assure: ConditionHelper[str] = bind_condition(Mode.ASSURE, Encoding.PLAIN, _CONDITION_DOC, __name__)
assure_eq = _binary(Comparison.EQ)
assure_ne = _binary(Comparison.NE)
assure_lt = _binary(Comparison.LT)
assure_le = _binary(Comparison.LE)
assure_gt = _binary(Comparison.GT)
assure_ge = _binary(Comparison.GE)

# Result[bool, IoError]: the error type only matters when chained with assume_io_*.
assure_io: ConditionHelper[IoError] = bind_condition(Mode.ASSURE, Encoding.IO, _CONDITION_DOC, __name__)
assure_io_eq = _binary_io(Comparison.EQ)
assure_io_ne = _binary_io(Comparison.NE)
assure_io_lt = _binary_io(Comparison.LT)
assure_io_le = _binary_io(Comparison.LE)
assure_io_gt = _binary_io(Comparison.GT)
assure_io_ge = _binary_io(Comparison.GE)

query_condition = assure
query_lt = assure_lt
query_gt = assure_gt
query_io_condition = assure_io
query_io_lt = assure_io_lt
query_io_gt = assure_io_gt
