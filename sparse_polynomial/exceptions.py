"""Exception hierarchy for polynomial operations."""


class PolynomialError(Exception):
    """Base class for errors raised by sparse_polynomial."""

    pass


class PolynomialArgumentError(PolynomialError, ValueError):
    """Invalid argument for a polynomial operation.

    Raised when adding a member with a zero coefficient, adding a member
    whose degree is already present, or building a polynomial from a
    sequence that contains ``None``.
    """

    pass


class PolynomialArgumentNullError(PolynomialError, TypeError):
    """A required Polynomial or Term argument was ``None``."""

    pass
