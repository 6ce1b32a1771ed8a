"""Tests for the public import surface."""

import assertable
from assertable import assumptions, assurances, check, errors, result


def test_all_names_resolve():
    """Every name in __all__ is importable from the package."""
    for name in assertable.__all__:
        assert hasattr(assertable, name), name


def test_flat_and_submodule_imports_agree():
    """Flat re-exports are the submodule objects themselves."""
    assert assertable.Ok is result.Ok
    assert assertable.IoError is errors.IoError
    assert assertable.Check is check.Check
    assert assertable.assume_lt is assumptions.assume_lt
    assert assertable.assure_io_gt is assurances.assure_io_gt


def test_helpers_are_named_after_their_check():
    """Each helper is named, placed and documented after its check."""
    for module in (assumptions, assurances):
        for name in module.__all__:
            helper = getattr(module, name)
            assert helper.check.name == helper.__name__
            assert helper.__module__ == module.__name__
            assert helper.__doc__


def test_helper_families_are_complete():
    """Both families expose a condition helper and all six comparisons, plain and io."""
    for family in ('assume', 'assure'):
        for infix in ('', '_io'):
            assert hasattr(assertable, f'{family}{infix}')
            for op in ('eq', 'ne', 'lt', 'le', 'gt', 'ge'):
                assert hasattr(assertable, f'{family}{infix}_{op}')
