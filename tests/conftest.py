"""Shared fixtures for polynomial tests."""

import pytest

from sparse_polynomial import Polynomial


@pytest.fixture
def quadratic():
    """3x^2 + 5"""
    return Polynomial([(2, 3), (0, 5)])


@pytest.fixture
def x_plus_one():
    return Polynomial([(1, 1), (0, 1)])


@pytest.fixture
def x_minus_one():
    return Polynomial([(1, 1), (0, -1)])


@pytest.fixture
def mixed():
    """Negative and fractional degrees, out of order."""
    return Polynomial([(0.5, 2), (-1, -4), (3, 1.5)])


def _assert_invariants(p):
    degrees = [term.degree for term in p.to_array()]
    assert len(degrees) == len(set(degrees))
    assert all(term.coefficient != 0 for term in p.to_array())


@pytest.fixture
def assert_invariants():
    """Checker for unique degrees and non-zero coefficients."""
    return _assert_invariants
