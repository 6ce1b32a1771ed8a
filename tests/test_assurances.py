"""Tests for the assure helpers."""

import pytest
from hypothesis import given
from strategies import booleans, ordered_pairs

from assertable import (
    Ok,
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
    collect,
    query_condition,
    query_gt,
    query_io_condition,
    query_io_gt,
    query_io_lt,
    query_lt,
)


class TestAssure:
    """Tests for assure(condition)."""

    def test_arity_2_success(self):
        """A true condition gives Ok(True)."""
        assert assure(True) == Ok(True)

    def test_arity_2_failure(self):
        """A false condition gives Ok(False), not Err."""
        assert assure(False) == Ok(False)

    def test_arity_3_success(self):
        """A message does not change a passing result."""
        assert assure(True, 'message') == Ok(True)

    def test_arity_3_failure(self):
        """A message does not turn a false condition into Err."""
        assert assure(False, 'message') == Ok(False)

    @given(booleans)
    def test_always_ok(self, condition: bool):
        """assure always returns Ok carrying the condition."""
        result = assure(condition, 'message')
        assert result.is_ok()
        assert result.unwrap() is condition


class TestAssureLt:
    """Tests for assure_lt."""

    def test_arity_2_success(self):
        """Two operands in order give Ok(True)."""
        assert assure_lt(1, 2) == Ok(True)

    def test_arity_2_failure(self):
        """Operands out of order give Ok(False)."""
        assert assure_lt(2, 1) == Ok(False)

    def test_arity_3_success(self):
        """A message does not change a passing result."""
        assert assure_lt(1, 2, 'message') == Ok(True)

    def test_arity_3_failure(self):
        """A message does not turn a false comparison into Err."""
        assert assure_lt(2, 1, 'message') == Ok(False)

    @given(ordered_pairs())
    def test_reports_ordering(self, pair: tuple[int, int]):
        """assure_lt reports the ordering in both directions."""
        a, b = pair
        assert assure_lt(a, b) == Ok(True)
        assert assure_lt(b, a) == Ok(False)


class TestAssureIo:
    """Tests for the OS-error flavored assure helpers."""

    def test_condition(self):
        """assure_io reports the condition through Ok."""
        assert assure_io(True) == Ok(True)
        assert assure_io(False) == Ok(False)
        assert assure_io(False, 'message') == Ok(False)

    def test_gt(self):
        """assure_io_gt reports the ordering through Ok, message or not."""
        assert assure_io_gt(2, 1) == Ok(True)
        assert assure_io_gt(1, 2) == Ok(False)
        assert assure_io_gt(2, 1, 'message') == Ok(True)
        assert assure_io_gt(1, 2, 'message') == Ok(False)

    def test_lt(self):
        """assure_io_lt reports the ordering through Ok."""
        assert assure_io_lt(1, 2) == Ok(True)
        assert assure_io_lt(2, 1, 'message') == Ok(False)


class TestAllComparisons:
    """Every assure helper reports False through Ok."""

    @pytest.mark.parametrize(
        ('helper', 'true_args', 'false_args'),
        [
            (assure_eq, (1, 1), (1, 2)),
            (assure_ne, (1, 2), (1, 1)),
            (assure_le, (1, 1), (2, 1)),
            (assure_gt, (2, 1), (1, 1)),
            (assure_ge, (1, 1), (1, 2)),
            (assure_io_eq, (1, 1), (1, 2)),
            (assure_io_ne, (1, 2), (1, 1)),
            (assure_io_le, (1, 1), (2, 1)),
            (assure_io_ge, (1, 1), (1, 2)),
        ],
    )
    def test_outcomes(self, helper, true_args, false_args):
        """True and false comparisons both come back as Ok."""
        assert helper(*true_args) == Ok(True)
        assert helper(*false_args) == Ok(False)
        assert helper(*false_args, 'message') == Ok(False)

    def test_collect_never_short_circuits(self):
        """collect keeps every assure outcome since none is Err."""
        results = [assure_lt(1, 2), assure_lt(2, 1), assure_eq('a', 'a')]
        assert collect(results) == Ok([True, False, True])


class TestQueryNames:
    """The query_* names are the assure helpers."""

    def test_aliases(self):
        """query_* names are the same functions as assure_*."""
        assert query_condition is assure
        assert query_lt is assure_lt
        assert query_gt is assure_gt
        assert query_io_condition is assure_io
        assert query_io_lt is assure_io_lt
        assert query_io_gt is assure_io_gt

    def test_scenario(self):
        """query_* reproduce the documented outcomes."""
        assert query_condition(False) == Ok(False)
        assert query_gt(2, 1, 'msg') == Ok(True)
        assert query_lt(2, 1, 'msg') == Ok(False)
