"""Free-function API over Polynomial values.

Each function delegates to the matching Polynomial method; they exist so
callers and test harnesses can work with plain functions.
"""

from polynom.polynomial import Polynomial


def add(a: Polynomial, b: Polynomial, *, strict: bool = False) -> Polynomial:
    """Return ``a + b``.

    Raises:
        TypeError: If either operand is not a Polynomial.
        MismatchedIndeterminateError: If strict and the symbols differ.
    """
    return _require(a).add(b, strict=strict)


def sub(a: Polynomial, b: Polynomial, *, strict: bool = False) -> Polynomial:
    """Return ``a - b``."""
    return _require(a).sub(b, strict=strict)


def multiply(a: Polynomial, b: Polynomial, *, strict: bool = False) -> Polynomial:
    """Return ``a * b``."""
    return _require(a).multiply(b, strict=strict)


def evaluate_at(p: Polynomial, value: float) -> float:
    return _require(p).evaluate_at(value)


def to_display_string(p: Polynomial) -> str:
    return _require(p).as_string()


def _require(p: Polynomial) -> Polynomial:
    if not isinstance(p, Polynomial):
        raise TypeError(f"Operand must be Polynomial, got {type(p)}")
    return p
