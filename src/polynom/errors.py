"""Exceptions raised by polynomial operations."""


class PolynomialError(Exception):
    """Base class for polynomial errors."""


class MismatchedIndeterminateError(PolynomialError, ValueError):
    """Binary operation between polynomials over different indeterminates.

    Only raised when the operation is called with ``strict=True``; the
    default behaviour adopts the left operand's symbol.
    """

    def __init__(self, left: str, right: str) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot combine polynomials in '{left}' and '{right}'"
        )
