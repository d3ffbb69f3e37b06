"""Tests for Term and numeric coercion."""

import numpy as np
import pytest
from fractions import Fraction

from sparse_polynomial import Term, PolynomialArgumentError
from sparse_polynomial.term import to_pair, to_real


class TestTerm:
    """Tests for the Term dataclass."""

    def test_fields(self):
        term = Term(2, 3)
        assert term.degree == 2
        assert term.coefficient == 3
        assert term.as_tuple() == (2, 3)

    def test_coefficient_is_mutable(self):
        term = Term(1, 2)
        term.coefficient = 5
        assert term.coefficient == 5

    def test_numpy_scalars_unwrapped(self):
        term = Term(np.int64(2), np.float64(1.5))
        assert type(term.degree) is int
        assert type(term.coefficient) is float

    def test_zero_dim_array_unwrapped(self):
        term = Term(np.array(3), np.array(-2.0))
        assert term.as_tuple() == (3, -2.0)

    def test_fraction_kept(self):
        term = Term(Fraction(1, 2), 1)
        assert term.degree == Fraction(1, 2)

    def test_non_real_rejected(self):
        with pytest.raises(PolynomialArgumentError):
            Term("2", 1)
        with pytest.raises(PolynomialArgumentError):
            Term(1, 2j)
        with pytest.raises(PolynomialArgumentError):
            Term(np.array([1, 2]), 1)

    def test_from_pair(self):
        assert Term.from_pair((2, 3)) == Term(2, 3)

    def test_from_pair_malformed(self):
        with pytest.raises(PolynomialArgumentError):
            Term.from_pair((1, 2, 3))
        with pytest.raises(PolynomialArgumentError):
            Term.from_pair(5)

    def test_equality(self):
        assert Term(2, 3) == Term(2.0, 3.0)
        assert Term(2, 3) != Term(2, 4)


class TestTermFormatting:
    """Tests for str(Term)."""

    @pytest.mark.parametrize("term, text", [
        (Term(0, 5), "5"),
        (Term(1, 1), "x"),
        (Term(1, -1), "-x"),
        (Term(2, 3), "3x^2"),
        (Term(2.0, 3.0), "3x^2"),
        (Term(-1, 2), "2x^-1"),
        (Term(0.5, -1), "-x^0.5"),
        (Term(3, 1.5), "1.5x^3"),
    ])
    def test_str(self, term, text):
        assert str(term) == text

    def test_repr(self):
        assert repr(Term(2, 3)) == "Term(degree=2, coefficient=3)"


class TestCoercion:
    """Tests for to_real / to_pair helpers."""

    def test_to_real_passthrough(self):
        assert to_real(4) == 4
        assert to_real(-0.25) == -0.25

    def test_to_real_rejects_none(self):
        with pytest.raises(PolynomialArgumentError):
            to_real(None)

    def test_to_pair_from_array_row(self):
        row = np.array([2, 7])
        assert to_pair(row) == (2, 7)
