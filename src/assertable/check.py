"""The generic comparator behind every assume/assure helper.

A :class:`Check` is a ``(Mode, Comparison, Encoding)`` triple:

- ``Mode.ASSUME`` reports a false condition through ``Err``.
- ``Mode.ASSURE`` reports the outcome as ``Ok(True)`` or ``Ok(False)``.
- ``Encoding.IO`` wraps the diagnostic in an ``INVALID_INPUT`` :class:`IoError`.

The public helpers in :mod:`assertable.assumptions` and :mod:`assertable.assurances`
are built by :func:`bind_binary` and :func:`bind_condition`, one ``Check`` each.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Protocol, cast, overload

from assertable._config import get_config
from assertable._logging import trace_check
from assertable.errors import IoError, invalid_input
from assertable.result import Err, Ok, Result

__all__ = [
    'BinaryHelper',
    'Check',
    'Comparison',
    'ConditionHelper',
    'Encoding',
    'Mode',
    'bind_binary',
    'bind_condition',
]


class Mode(Enum):
    """How a false condition is reported."""

    ASSUME = 'assume'
    ASSURE = 'assure'


class Encoding(Enum):
    """How a failure diagnostic is packaged."""

    PLAIN = 'plain'
    IO = 'io'


class Comparison(Enum):
    """The condition a check evaluates."""

    CONDITION = ''
    EQ = 'eq'
    NE = 'ne'
    LT = 'lt'
    LE = 'le'
    GT = 'gt'
    GE = 'ge'

    @property
    def operator(self) -> Callable[[Any, Any], Any]:
        """The binary operator for this comparison."""
        if self is Comparison.CONDITION:
            msg = 'CONDITION is unary and has no binary operator'
            raise ValueError(msg)
        return _OPERATORS[self]


_OPERATORS: dict[Comparison, Callable[[Any, Any], Any]] = {
    Comparison.EQ: operator.eq,
    Comparison.NE: operator.ne,
    Comparison.LT: operator.lt,
    Comparison.LE: operator.le,
    Comparison.GT: operator.gt,
    Comparison.GE: operator.ge,
}


@dataclass(frozen=True)
class Check:
    """One assume/assure helper, described as data.

    Attributes:
        mode: Fail-on-false (ASSUME) or always-succeed (ASSURE).
        comparison: The condition to evaluate.
        encoding: Plain text or OS-style diagnostic.

    Example:
        ```python
        check = Check(Mode.ASSUME, Comparison.LT, Encoding.IO)
        check.name
        # 'assume_io_lt'
        check.evaluate(2, 1).unwrap_err().kind
        # <ErrorKind.INVALID_INPUT: 'invalid_input'>
        ```
    """

    mode: Mode
    comparison: Comparison
    encoding: Encoding = Encoding.PLAIN

    @property
    def name(self) -> str:
        """The helper name, e.g. ``assume_lt`` or ``assure_io_gt``."""
        parts = [self.mode.value]
        if self.encoding is Encoding.IO:
            parts.append('io')
        if self.comparison is not Comparison.CONDITION:
            parts.append(self.comparison.value)
        return '_'.join(parts)

    def evaluate(self, left: Any, right: Any, message: object = None) -> Result[bool, Any]:
        """Compare two operands.

        Args:
            left: Left operand.
            right: Right operand.
            message: Replaces the default diagnostic verbatim when given.
                Ignored by ASSURE checks.

        Returns:
            Ok(True) when the comparison holds. Otherwise Err(diagnostic) for
            ASSUME checks and Ok(False) for ASSURE checks.

        Raises:
            TypeError: If the operands do not support the comparison.
        """
        outcome = bool(self.comparison.operator(left, right))
        return self._finish(outcome, message, lambda: self._binary_diagnostic(left, right))

    def evaluate_condition(self, condition: object, message: object = None) -> Result[bool, Any]:
        """Evaluate a single boolean condition.

        Args:
            condition: Any value; its truthiness is the outcome.
            message: Replaces the default diagnostic verbatim when given.
                Ignored by ASSURE checks.
        """
        if self.comparison is not Comparison.CONDITION:
            msg = f'{self.name} compares two operands; use evaluate()'
            raise ValueError(msg)
        return self._finish(bool(condition), message, self._condition_diagnostic)

    def _binary_diagnostic(self, left: Any, right: Any) -> str:
        return f'assumption failed: `{self.name}(left, right)`\n  left: `{left!r}`\n right: `{right!r}`'

    def _condition_diagnostic(self) -> str:
        return f'assumption failed: `{self.name}(condition)`'

    def _finish(self, outcome: bool, message: object, diagnostic: Callable[[], str]) -> Result[bool, Any]:
        if outcome or self.mode is Mode.ASSURE:
            result: Result[bool, Any] = Ok(outcome)
        else:
            error = diagnostic() if message is None else message
            result = Err(self._package(error))
        if get_config().trace:
            trace_check(self.name, result)
        return result

    def _package(self, error: object) -> object:
        if self.encoding is Encoding.IO:
            return error if isinstance(error, IoError) else invalid_input(error)
        return error


class BinaryHelper[E](Protocol):
    """A two-operand helper such as ``assume_lt`` (E = str) or ``assume_io_lt`` (E = IoError).

    A non-string ``message`` on a plain helper is returned verbatim as the error.
    """

    __name__: str
    check: Check

    def __call__[T](self, left: T, right: T, message: object = None) -> Result[bool, E]: ...


class ConditionHelper[E](Protocol):
    """A one-condition helper such as ``assume`` (E = str) or ``assure_io`` (E = IoError)."""

    __name__: str
    check: Check

    def __call__(self, condition: object, message: object = None) -> Result[bool, E]: ...


def _name(helper: Callable[..., Any], check: Check, doc: str, module: str | None) -> None:
    helper.__name__ = helper.__qualname__ = check.name
    helper.__doc__ = doc
    if module is not None:
        helper.__module__ = module
    helper.check = check  # type: ignore[attr-defined]


@overload
def bind_binary(
    mode: Mode, comparison: Comparison, encoding: Literal[Encoding.PLAIN], doc: str, module: str | None = None
) -> BinaryHelper[str]: ...


@overload
def bind_binary(
    mode: Mode, comparison: Comparison, encoding: Literal[Encoding.IO], doc: str, module: str | None = None
) -> BinaryHelper[IoError]: ...


def bind_binary(
    mode: Mode, comparison: Comparison, encoding: Encoding, doc: str, module: str | None = None
) -> BinaryHelper[Any]:
    """Expose a two-operand check as a named module-level helper.

    Args:
        mode: ASSUME or ASSURE.
        comparison: Any comparison except CONDITION.
        encoding: PLAIN helpers fail with ``str``, IO helpers with :class:`IoError`.
        doc: Docstring of the helper.
        module: ``__module__`` of the helper, so it documents where it is exported.

    Raises:
        ValueError: If comparison is CONDITION.
    """
    if comparison is Comparison.CONDITION:
        msg = 'CONDITION is unary; use bind_condition()'
        raise ValueError(msg)
    check = Check(mode, comparison, encoding)

    def helper(left: Any, right: Any, message: object = None) -> Result[bool, Any]:
        return check.evaluate(left, right, message)

    _name(helper, check, doc, module)
    return cast('BinaryHelper[Any]', helper)


@overload
def bind_condition(
    mode: Mode, encoding: Literal[Encoding.PLAIN], doc: str, module: str | None = None
) -> ConditionHelper[str]: ...


@overload
def bind_condition(
    mode: Mode, encoding: Literal[Encoding.IO], doc: str, module: str | None = None
) -> ConditionHelper[IoError]: ...


def bind_condition(mode: Mode, encoding: Encoding, doc: str, module: str | None = None) -> ConditionHelper[Any]:
    """Expose a one-condition check as a named module-level helper."""
    check = Check(mode, Comparison.CONDITION, encoding)

    def helper(condition: object, message: object = None) -> Result[bool, Any]:
        return check.evaluate_condition(condition, message)

    _name(helper, check, doc, module)
    return cast('ConditionHelper[Any]', helper)
