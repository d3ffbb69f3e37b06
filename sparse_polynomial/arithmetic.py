"""
Polynomial Arithmetic.

Addition, subtraction and multiplication over sparse term lists. These are
the functions behind the ``+``, ``-`` and ``*`` operators of Polynomial.

All three merge terms through indexed assignment (``result[d] += c``), so
whenever a merge drives a coefficient to exactly 0 the term disappears from
the result (zero-cancellation):

    (2x) + (-2x)        ->  0          (no terms)
    (x + 1) * (x - 1)   ->  x^2 - 1    (the x terms cancel)

Operands are never mutated. Results are built from fresh Term objects, so
editing a result cannot reach back into either operand.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Optional

from .exceptions import PolynomialArgumentNullError
from .log import get_logger
from .polynomial import Polynomial
from .term import Term

logger = get_logger(__name__)


def _require_operands(a: Optional[Polynomial], b: Optional[Polynomial]) -> None:
    if a is None:
        raise PolynomialArgumentNullError("Polynomial a is None")
    if b is None:
        raise PolynomialArgumentNullError("Polynomial b is None")


def add(a: Polynomial, b: Polynomial) -> Polynomial:
    """
    Add two polynomials.

    Starts from a copy of ``a``. Each term of ``b`` with a new degree is
    inserted as-is; a term whose degree is already present is added onto
    the existing coefficient.

    Raises:
        PolynomialArgumentNullError: if either operand is None
    """
    _require_operands(a, b)

    result = a.copy()
    for term in b.to_array():
        if not result.contains_member(term.degree) and term.coefficient != 0:
            result.add_member(replace(term))
        elif result.contains_member(term.degree):
            result[term.degree] += term.coefficient

    logger.debug("add: %d + %d terms -> %d terms", a.count, b.count, result.count)
    return result


def subtract(a: Polynomial, b: Polynomial) -> Polynomial:
    """
    Subtract ``b`` from ``a``.

    A term of ``b`` with a new degree is inserted and then negated; one
    whose degree is already present is subtracted from the existing
    coefficient.

    Raises:
        PolynomialArgumentNullError: if either operand is None
    """
    _require_operands(a, b)

    result = a.copy()
    for term in b.to_array():
        if not result.contains_member(term.degree) and term.coefficient != 0:
            result.add_member(replace(term))
            result[term.degree] *= -1
        elif result.contains_member(term.degree):
            result[term.degree] -= term.coefficient

    logger.debug("subtract: %d - %d terms -> %d terms", a.count, b.count, result.count)
    return result


def multiply(a: Polynomial, b: Polynomial) -> Polynomial:
    """
    Multiply two polynomials.

    Every pair of terms contributes ``(da + db, ca * cb)``; contributions
    landing on the same degree are summed. This is the plain O(n*m)
    convolution over the sparse lists, with no sorting.

    Raises:
        PolynomialArgumentNullError: if either operand is None
    """
    _require_operands(a, b)

    result = Polynomial()
    for term_a in a.to_array():
        for term_b in b.to_array():
            coefficient = term_a.coefficient * term_b.coefficient
            if coefficient == 0:
                continue

            product = Term(term_a.degree + term_b.degree, coefficient)
            if not result.contains_member(product.degree):
                result.add_member(product)
            else:
                result[product.degree] += product.coefficient

    logger.debug("multiply: %d * %d terms -> %d terms", a.count, b.count, result.count)
    return result


def negate(p: Polynomial) -> Polynomial:
    """Return a new polynomial with every coefficient's sign flipped."""
    if p is None:
        raise PolynomialArgumentNullError("Polynomial is None")

    result = p.copy()
    for term in result.members:
        term.coefficient = -term.coefficient
    return result
