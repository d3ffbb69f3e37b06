"""
Polynomial terms.

A term is a single monomial ``coefficient * x^degree``. Degrees are general
real numbers (negative and fractional exponents are allowed), so a
polynomial here is really a finite sum of real powers of one variable.

Example:
    >>> term = Term(2, 3)
    >>> print(term)
    3x^2
    >>> term.as_tuple()
    (2, 3)
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Real
from typing import Tuple, Union

import numpy as np

from .exceptions import PolynomialArgumentError

Number = Union[int, float, Real]
Pair = Tuple[Number, Number]


def to_real(value: object, name: str = "value") -> Number:
    """
    Normalize a degree or coefficient to a plain Python real number.

    numpy scalars (and 0-d arrays) are unwrapped with ``.item()`` so terms
    built from arrays compare like ordinary numbers. Anything that is not a
    real number is rejected.
    """
    if isinstance(value, (np.generic, np.ndarray)):
        if np.ndim(value) != 0:
            raise PolynomialArgumentError(f"{name} must be a scalar, got shape {np.shape(value)}")
        value = value.item()
    if not isinstance(value, Real):
        raise PolynomialArgumentError(f"{name} must be a real number, got {type(value).__name__}")
    return value


def to_pair(member: object) -> Pair:
    """Unpack a ``(degree, coefficient)`` pair, normalizing both numbers."""
    try:
        degree, coefficient = member
    except (TypeError, ValueError):
        raise PolynomialArgumentError(
            f"Expected a (degree, coefficient) pair, got {member!r}"
        ) from None
    return to_real(degree, "degree"), to_real(coefficient, "coefficient")


def format_number(value: Number) -> str:
    """Render 2.0 as '2' and leave everything else to ``str``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class Term:
    """
    A single term of a polynomial.

    The coefficient may be updated in place once the term is stored in a
    Polynomial (indexed assignment does exactly that). The degree must not
    be changed after insertion: it is the key the polynomial uses to keep
    its terms unique.

    Attributes:
        degree: Exponent of the variable, any finite real number
        coefficient: Real multiplier, never zero while stored
    """
    degree: Number
    coefficient: Number

    def __post_init__(self):
        self.degree = to_real(self.degree, "degree")
        self.coefficient = to_real(self.coefficient, "coefficient")

    @classmethod
    def from_pair(cls, member: Pair) -> Term:
        degree, coefficient = to_pair(member)
        return cls(degree, coefficient)

    def as_tuple(self) -> Pair:
        return (self.degree, self.coefficient)

    def __str__(self) -> str:
        coef = format_number(self.coefficient)
        if self.degree == 0:
            return coef
        if self.coefficient == 1:
            coef = ""
        elif self.coefficient == -1:
            coef = "-"
        if self.degree == 1:
            return f"{coef}x"
        return f"{coef}x^{format_number(self.degree)}"
