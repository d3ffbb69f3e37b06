"""
Sparse Polynomial of One Variable.

A polynomial is stored as an insertion-ordered list of terms, each a
(degree, coefficient) pair. Only non-zero terms are kept, and each degree
appears at most once:

    3x^2 + 5          ->  [Term(2, 3), Term(0, 5)]
    x^-1 + 2x^0.5     ->  [Term(-1, 1), Term(0.5, 2)]

Key Concepts:
    - Uniqueness: at most one stored term per degree (exact == comparison)
    - Non-zero: a term whose coefficient reaches 0 is removed, never kept
    - Order: terms keep insertion order; it carries no meaning

Indexed access is the main way to edit coefficients:

    >>> p = Polynomial([(2, 3), (0, 5)])
    >>> p[1]            # absent degree reads as 0
    0
    >>> p[1] = 4        # inserts 4x
    >>> p[2] = 0        # removes 3x^2
    >>> print(p)
    5 + 4x

Arithmetic (+, -, *) always builds a new polynomial and leaves both
operands untouched. The right operand may be another Polynomial or a
single (degree, coefficient) tuple.
"""

from __future__ import annotations
from dataclasses import replace
from numbers import Real
from typing import Dict, Iterable, Iterator, List, Optional, Union

import numpy as np

from .exceptions import PolynomialArgumentError, PolynomialArgumentNullError
from .log import get_logger
from .term import Number, Pair, Term, to_pair, to_real

logger = get_logger(__name__)

Member = Union[Term, Pair]


def _is_pair(value: object) -> bool:
    """True for a bare (degree, coefficient) tuple of two scalars."""
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and all(isinstance(v, (Real, np.generic)) for v in value)
    )


class Polynomial:
    """
    A single-variable polynomial as a sparse collection of terms.

    Can be built empty, from one Term, from one (degree, coefficient)
    tuple, or from any iterable mixing Terms and tuples. Zero-coefficient
    inputs are silently dropped in every case.

    Attributes:
        members: The stored terms, in insertion order

    Example:
        >>> a = Polynomial([(1, 1), (0, 1)])    # x + 1
        >>> b = Polynomial([(1, 1), (0, -1)])   # x - 1
        >>> print(a * b)
        x^2 - 1
    """

    __hash__ = None

    def __init__(self, members: Optional[Union[Member, Iterable[Optional[Member]]]] = None):
        self.members: List[Term] = []

        if members is None:
            return

        if isinstance(members, Term):
            if members.coefficient != 0:
                self.add_member(members)
            return

        if _is_pair(members):
            degree, coefficient = to_pair(members)
            if coefficient != 0:
                self.add_member((degree, coefficient))
            return

        for member in members:
            if member is None:
                raise PolynomialArgumentError("Member in sequence is None")
            if isinstance(member, Term):
                if member.coefficient != 0:
                    self.add_member(member)
            else:
                degree, coefficient = to_pair(member)
                if coefficient != 0:
                    self.add_member((degree, coefficient))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def count(self) -> int:
        """Number of stored terms."""
        return len(self.members)

    @property
    def degree(self) -> Number:
        """
        Largest degree among stored terms.

        The scan starts from 0, so an empty polynomial reports 0, and so
        does one whose terms all have negative degree.
        """
        largest = 0
        for term in self.members:
            if term.degree > largest:
                largest = term.degree
        return largest

    def contains_member(self, degree: Number) -> bool:
        """True if a term with exactly this degree is stored."""
        return self.find(degree) is not None

    def find(self, degree: Number) -> Optional[Term]:
        """Return the stored term of the given degree, or None."""
        for term in self.members:
            if term.degree == degree:
                return term
        return None

    def to_array(self) -> List[Term]:
        """Snapshot of the stored terms in current order."""
        return list(self.members)

    def as_dict(self) -> Dict[Number, Number]:
        """Mapping of degree to coefficient."""
        return {term.degree: term.coefficient for term in self.members}

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Term]:
        return iter(self.to_array())

    def __contains__(self, degree: object) -> bool:
        return self.contains_member(degree)

    # -------------------------------------------------------------------------
    # Indexed access
    # -------------------------------------------------------------------------

    def get_coefficient(self, degree: Number) -> Number:
        """Coefficient at ``degree``; 0 when no term has that degree."""
        term = self.find(degree)
        if term is None:
            return 0
        return term.coefficient

    def set_coefficient(self, degree: Number, value: Number) -> None:
        """
        Set the coefficient at ``degree``.

        A non-zero value updates the existing term in place or appends a
        new one. Zero removes the term (no-op when absent).
        """
        degree = to_real(degree, "degree")
        value = to_real(value, "coefficient")

        if value != 0:
            term = self.find(degree)
            if term is not None:
                term.coefficient = value
            else:
                self.members.append(Term(degree, value))
        elif self.remove_member(degree):
            logger.debug("Coefficient at degree %s set to zero, term removed", degree)

    def __getitem__(self, degree: Number) -> Number:
        return self.get_coefficient(degree)

    def __setitem__(self, degree: Number, value: Number) -> None:
        self.set_coefficient(degree, value)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_member(self, member: Optional[Member]) -> None:
        """
        Add a new unique member.

        Args:
            member: A Term, or a (degree, coefficient) tuple

        Raises:
            PolynomialArgumentNullError: member is None
            PolynomialArgumentError: coefficient is zero, or a term with
                that degree is already stored
        """
        if member is None:
            raise PolynomialArgumentNullError("Member to add is None")

        term = member if isinstance(member, Term) else Term.from_pair(member)

        if term.coefficient == 0:
            logger.debug("Rejected member %r: zero coefficient", term)
            raise PolynomialArgumentError("Coefficient is zero")
        if self.contains_member(term.degree):
            logger.debug("Rejected member %r: degree already present", term)
            raise PolynomialArgumentError(
                "Member to add with such degree already exist in polynomial"
            )

        self.members.append(term)

    def remove_member(self, degree: Number) -> bool:
        """Remove the first term of the given degree. Returns True if removed."""
        for i, term in enumerate(self.members):
            if term.degree == degree:
                del self.members[i]
                return True
        return False

    def copy(self) -> Polynomial:
        """Independent copy; the new polynomial shares no Term objects."""
        result = Polynomial()
        result.members = [replace(term) for term in self.members]
        return result

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    @staticmethod
    def _operand(other: object):
        """Normalize a right-hand operand: Polynomial, None, or a pair."""
        if other is None or isinstance(other, Polynomial):
            return other
        if isinstance(other, tuple):
            return Polynomial(Term.from_pair(other))
        return NotImplemented

    def __add__(self, other: Union[Polynomial, Pair, None]) -> Polynomial:
        from .arithmetic import add

        other = self._operand(other)
        if other is NotImplemented:
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Union[Polynomial, Pair, None]) -> Polynomial:
        from .arithmetic import subtract

        other = self._operand(other)
        if other is NotImplemented:
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other: Union[Polynomial, Pair, None]) -> Polynomial:
        from .arithmetic import multiply

        other = self._operand(other)
        if other is NotImplemented:
            return NotImplemented
        return multiply(self, other)

    # Reflected forms only exist to report a None left operand; a tuple on
    # the left is not supported.

    def __radd__(self, other: object) -> Polynomial:
        from .arithmetic import add

        if other is not None:
            return NotImplemented
        return add(None, self)

    def __rsub__(self, other: object) -> Polynomial:
        from .arithmetic import subtract

        if other is not None:
            return NotImplemented
        return subtract(None, self)

    def __rmul__(self, other: object) -> Polynomial:
        from .arithmetic import multiply

        if other is not None:
            return NotImplemented
        return multiply(None, self)

    def __neg__(self) -> Polynomial:
        from .arithmetic import negate
        return negate(self)

    def add(self, polynomial: Optional[Polynomial]) -> Polynomial:
        """Return ``self + polynomial``. Raises PolynomialArgumentNullError on None."""
        if polynomial is None:
            raise PolynomialArgumentNullError("Polynomial is None")
        return self + polynomial

    def subtract(self, polynomial: Optional[Polynomial]) -> Polynomial:
        """Return ``self - polynomial``. Raises PolynomialArgumentNullError on None."""
        if polynomial is None:
            raise PolynomialArgumentNullError("Polynomial is None")
        return self - polynomial

    def multiply(self, polynomial: Optional[Polynomial]) -> Polynomial:
        """Return ``self * polynomial``. Raises PolynomialArgumentNullError on None."""
        if polynomial is None:
            raise PolynomialArgumentNullError("Polynomial is None")
        return self * polynomial

    def add_pair(self, member: Pair) -> Polynomial:
        return self + tuple(member)

    def subtract_pair(self, member: Pair) -> Polynomial:
        return self - tuple(member)

    def multiply_pair(self, member: Pair) -> Polynomial:
        return self * tuple(member)

    # -------------------------------------------------------------------------
    # Comparison and display
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        return f"Polynomial({self.members!r})"

    def __str__(self) -> str:
        if not self.members:
            return "0"

        parts = []
        for i, term in enumerate(self.members):
            text = str(term)
            if i > 0:
                if text.startswith("-"):
                    text = "- " + text[1:]
                else:
                    text = "+ " + text
            parts.append(text)
        return " ".join(parts)
