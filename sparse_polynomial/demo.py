"""
Sparse Polynomial Demo

Walks through construction, indexed access and arithmetic.

Run with:
    python -m sparse_polynomial.demo
"""

from sparse_polynomial import Polynomial, Term, PolynomialArgumentError
from sparse_polynomial.log import setup_logging


def demo_construction():
    """Build polynomials from tuples and terms."""
    print("\n" + "=" * 60)
    print("DEMO 1: CONSTRUCTION AND LOOKUP")
    print("=" * 60)

    p = Polynomial([(2, 3), (0, 5), (1, 0)])
    print(f"\np = {p}")
    print(f"  count:  {p.count}   (the zero term was dropped)")
    print(f"  degree: {p.degree}")
    print(f"  p[1]:   {p[1]}")
    print(f"  find(2): {p.find(2)!r}")

    q = Polynomial([Term(-1, 2), Term(0.5, -1)])
    print(f"\nq = {q}")
    print(f"  degree: {q.degree}   (scan starts at 0)")
    print(f"  empty polynomial degree: {Polynomial().degree}")


def demo_indexed_access():
    """Edit coefficients through p[degree]."""
    print("\n" + "=" * 60)
    print("DEMO 2: INDEXED ACCESS")
    print("=" * 60)

    p = Polynomial((2, 3))
    print(f"\nstart:        {p}")
    p[1] = 4
    print(f"p[1] = 4  ->  {p}")
    p[2] = 7
    print(f"p[2] = 7  ->  {p}")
    p[2] = 0
    print(f"p[2] = 0  ->  {p}")

    try:
        p.add_member((1, 9))
    except PolynomialArgumentError as e:
        print(f"\nadd_member((1, 9)) failed: {e}")


def demo_arithmetic():
    """Add, subtract and multiply."""
    print("\n" + "=" * 60)
    print("DEMO 3: ARITHMETIC")
    print("=" * 60)

    a = Polynomial([(1, 1), (0, 1)])
    b = Polynomial([(1, 1), (0, -1)])
    print(f"\na = {a}")
    print(f"b = {b}")
    print(f"a + b = {a + b}")
    print(f"a - b = {a - b}")
    print(f"a * b = {a * b}")
    print(f"a * (2, 3) = {a * (2, 3)}")
    print(f"a + (-a) = {a + (-a)}   (every term cancels)")


def main():
    setup_logging("WARNING")

    print("╔" + "═" * 58 + "╗")
    print("║" + " " * 16 + "SPARSE POLYNOMIAL DEMO" + " " * 20 + "║")
    print("╚" + "═" * 58 + "╝")

    for demo_func in (demo_construction, demo_indexed_access, demo_arithmetic):
        demo_func()

    print("\n" + "═" * 60)
    print("DEMOS COMPLETE")
    print("═" * 60)


if __name__ == "__main__":
    main()
