"""Univariate polynomial value type with float coefficients."""

import hashlib
import math
import struct
from collections.abc import Iterable, Iterator
from numbers import Real
from typing import BinaryIO

from polynom.errors import MismatchedIndeterminateError

_DOUBLE = struct.Struct(">d")


class Polynomial:
    """A polynomial in one indeterminate.

    Represents a polynomial as a tuple of float coefficients, where the index
    represents the degree (coefficient at index i is the coefficient of x^i).
    The indeterminate is a single character used only when rendering.

    Coefficients are kept verbatim: trailing zeros are not stripped unless
    ``normalized()`` is called, and an empty tuple is the zero polynomial.
    Instances are never mutated; every operation returns a new Polynomial.
    """

    def __init__(
        self, coefficients: Iterable[float] = (), indeterminate: str = "x"
    ) -> None:
        """Initialize with coefficient sequence.

        Args:
            coefficients: Real numbers, index i is the coefficient of x^i.
                         Each one is converted to float.
            indeterminate: Single character used to render the polynomial.

        Raises:
            TypeError: If a coefficient is not a real number or the
                      indeterminate is not a string.
            ValueError: If the indeterminate is not exactly one character.
        """
        coeffs = []
        for i, coeff in enumerate(coefficients):
            if isinstance(coeff, bool) or not isinstance(coeff, Real):
                raise TypeError(
                    f"Coefficient at index {i} must be a real number, got {type(coeff)}"
                )
            coeffs.append(float(coeff))
        self.coefficients: tuple[float, ...] = tuple(coeffs)
        self.indeterminate = _check_indeterminate(indeterminate)

    @classmethod
    def from_ints(
        cls, coefficients: Iterable[int], indeterminate: str = "x"
    ) -> "Polynomial":
        """Create a polynomial from integer coefficients.

        Raises:
            TypeError: If a coefficient is not an int.
        """
        int_coeffs = []
        for i, coeff in enumerate(coefficients):
            if isinstance(coeff, bool) or not isinstance(coeff, int):
                raise TypeError(f"Coefficient at index {i} must be int, got {type(coeff)}")
            int_coeffs.append(float(coeff))
        return cls(int_coeffs, indeterminate)

    @property
    def degree(self) -> int:
        """Length of the coefficient tuple minus one (-1 for the zero polynomial)."""
        return len(self.coefficients) - 1

    def is_zero(self) -> bool:
        """True if the polynomial has no coefficients."""
        return not self.coefficients

    def normalized(self) -> "Polynomial":
        """Return a copy with trailing zero coefficients stripped."""
        coeffs = self.coefficients
        end = len(coeffs)
        while end > 0 and coeffs[end - 1] == 0:
            end -= 1
        return Polynomial(coeffs[:end], self.indeterminate)

    def add(self, other: "Polynomial", *, strict: bool = False) -> "Polynomial":
        """Add two polynomials (pairwise addition, zero-pad shorter polynomial).

        Args:
            other: Polynomial to add.
            strict: Raise instead of adopting this polynomial's indeterminate
                   when the two symbols differ.

        Returns:
            Sum of the two polynomials, in this polynomial's indeterminate.

        Raises:
            MismatchedIndeterminateError: If strict and the symbols differ.
        """
        self._check_compatible(other, strict)
        a, b = self.coefficients, other.coefficients
        max_len = max(len(a), len(b))
        result_coeffs = []
        for i in range(max_len):
            coeff_a = a[i] if i < len(a) else 0.0
            coeff_b = b[i] if i < len(b) else 0.0
            result_coeffs.append(coeff_a + coeff_b)
        return Polynomial(result_coeffs, self.indeterminate)

    def sub(self, other: "Polynomial", *, strict: bool = False) -> "Polynomial":
        """Subtract ``other`` from this polynomial, zero-padding the shorter one."""
        self._check_compatible(other, strict)
        a, b = self.coefficients, other.coefficients
        max_len = max(len(a), len(b))
        result_coeffs = []
        for i in range(max_len):
            coeff_a = a[i] if i < len(a) else 0.0
            coeff_b = b[i] if i < len(b) else 0.0
            result_coeffs.append(coeff_a - coeff_b)
        return Polynomial(result_coeffs, self.indeterminate)

    def multiply(self, other: "Polynomial", *, strict: bool = False) -> "Polynomial":
        """Multiply two polynomials (convolution of coefficient lists).

        If either operand is the zero polynomial the product is the zero
        polynomial. Otherwise the product has len(self) + len(other) - 1
        coefficients.
        """
        self._check_compatible(other, strict)
        a, b = self.coefficients, other.coefficients
        if not a or not b:
            return Polynomial((), self.indeterminate)

        result_coeffs = [0.0] * (len(a) + len(b) - 1)
        # Convolution: result[i+j] += a[i] * b[j]
        for i, coeff_a in enumerate(a):
            for j, coeff_b in enumerate(b):
                result_coeffs[i + j] += coeff_a * coeff_b
        return Polynomial(result_coeffs, self.indeterminate)

    def evaluate_at(self, value: float) -> float:
        """Evaluate the polynomial at ``value`` using Horner's method.

        Horner's rounding differs slightly from summing c[i] * value**i term
        by term. The zero polynomial evaluates to 0.0 for every value.
        Non-finite values propagate by IEEE-754 rules.

        Raises:
            TypeError: If value is not a real number.
        """
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"value must be a real number, got {type(value)}")
        if not self.coefficients:
            return 0.0
        x = float(value)
        # Seeded with the leading coefficient: a constant stays finite at inf,
        # but a zero leading coefficient still gives 0 * inf = nan.
        result = self.coefficients[-1]
        for coeff in reversed(self.coefficients[:-1]):
            result = result * x + coeff
        return result

    def as_string(self) -> str:
        """Return the polynomial rendered as text, e.g. ``f(x) = 1 + 2x + 3x^2``."""
        symbol = self.indeterminate
        if not self.coefficients:
            return f"f({symbol}) = 0"

        terms = []
        for degree, coeff in enumerate(self.coefficients):
            text = _format_coefficient(coeff)
            if degree == 0:
                terms.append(text)
            elif degree == 1:
                terms.append(f"{text}{symbol}")
            else:
                terms.append(f"{text}{symbol}^{degree}")
        return f"f({symbol}) = " + " + ".join(terms)

    def _check_compatible(self, other: "Polynomial", strict: bool) -> None:
        if not isinstance(other, Polynomial):
            raise TypeError(f"Operand must be Polynomial, got {type(other)}")
        if strict and other.indeterminate != self.indeterminate:
            raise MismatchedIndeterminateError(self.indeterminate, other.indeterminate)

    def get_stable_hash(self) -> str:
        """Return SHA-256 hash of the indeterminate and exact coefficient values."""
        # float.hex() is exact, so distinct doubles never collide
        parts = [self.indeterminate] + [c.hex() for c in self.coefficients]
        return hashlib.sha256(",".join(parts).encode("utf-8")).hexdigest()

    def to_stream(self, stream: BinaryIO) -> None:
        """Serialize polynomial to stream.

        Format: length-prefixed UTF-8 indeterminate, then a length-prefixed
        sequence of 8-byte big-endian IEEE-754 doubles.
        """
        symbol = self.indeterminate.encode("utf-8")
        stream.write(len(symbol).to_bytes(8, byteorder="big", signed=False))
        stream.write(symbol)
        stream.write(len(self.coefficients).to_bytes(8, byteorder="big", signed=False))
        for coeff in self.coefficients:
            stream.write(_DOUBLE.pack(coeff))

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> "Polynomial":
        """Deserialize polynomial from stream.

        Raises:
            ValueError: If the stream ends before the polynomial is complete.
        """
        symbol_len = int.from_bytes(_read_exact(stream, 8), byteorder="big", signed=False)
        symbol = _read_exact(stream, symbol_len).decode("utf-8")
        length = int.from_bytes(_read_exact(stream, 8), byteorder="big", signed=False)
        coefficients = [_DOUBLE.unpack(_read_exact(stream, 8))[0] for _ in range(length)]
        return cls(coefficients, symbol)

    def __add__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.multiply(other)

    def __call__(self, value: float) -> float:
        return self.evaluate_at(value)

    def __len__(self) -> int:
        return len(self.coefficients)

    def __iter__(self) -> Iterator[float]:
        return iter(self.coefficients)

    def __eq__(self, other: object) -> bool:
        """Exact comparison of coefficients and indeterminate."""
        if not isinstance(other, Polynomial):
            return False
        return (
            self.coefficients == other.coefficients
            and self.indeterminate == other.indeterminate
        )

    def __hash__(self) -> int:
        return hash((self.coefficients, self.indeterminate))

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        """String representation."""
        return f"Polynomial({list(self.coefficients)}, {self.indeterminate!r})"


def _check_indeterminate(indeterminate: str) -> str:
    if not isinstance(indeterminate, str):
        raise TypeError(f"indeterminate must be str, got {type(indeterminate)}")
    if len(indeterminate) != 1:
        raise ValueError(
            f"indeterminate must be a single character, got {indeterminate!r}"
        )
    return indeterminate


def _format_coefficient(coeff: float) -> str:
    # Integral values print without a trailing ".0"; -0.0 prints as "0".
    if math.isfinite(coeff) and coeff.is_integer():
        return str(int(coeff))
    return repr(coeff)


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise ValueError(
            f"Unexpected end of stream: wanted {size} bytes, got {len(data)}"
        )
    return data
