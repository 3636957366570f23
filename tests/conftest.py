"""Pytest configuration and fixtures."""

import pytest

from polynom.polynomial import Polynomial


@pytest.fixture
def zero():
    """The zero polynomial."""
    return Polynomial([], "x")
