"""Polynom: univariate polynomial arithmetic over float coefficients."""

from importlib.metadata import PackageNotFoundError, version

from polynom.arithmetic import add, evaluate_at, multiply, sub, to_display_string
from polynom.errors import MismatchedIndeterminateError, PolynomialError
from polynom.polynomial import Polynomial

try:
    __version__ = version("polynom")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    "MismatchedIndeterminateError",
    "Polynomial",
    "PolynomialError",
    "add",
    "evaluate_at",
    "multiply",
    "sub",
    "to_display_string",
    "__version__",
]
