"""
Sparse Polynomial
=================

Single-variable polynomials stored as sparse collections of
(degree, coefficient) terms, with addition, subtraction and multiplication.

Modules:
    - term: The Term dataclass and numeric coercion helpers
    - polynomial: The Polynomial container (lookup, indexed access, operators)
    - arithmetic: add / subtract / multiply / negate as free functions
    - exceptions: Error hierarchy
    - log: Logging helpers

Quick Start:
    >>> from sparse_polynomial import Polynomial
    >>> p = Polynomial([(2, 3), (0, 5)])
    >>> p.degree
    2
    >>> print(p + (1, 4))
    3x^2 + 5 + 4x
"""

__version__ = "0.1.0"

from .exceptions import (
    PolynomialError,
    PolynomialArgumentError,
    PolynomialArgumentNullError,
)
from .term import Term
from .polynomial import Polynomial
from .arithmetic import add, subtract, multiply, negate

__all__ = [
    "PolynomialError",
    "PolynomialArgumentError",
    "PolynomialArgumentNullError",
    "Term",
    "Polynomial",
    "add",
    "subtract",
    "multiply",
    "negate",
]
