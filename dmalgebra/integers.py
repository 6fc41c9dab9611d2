"""Arithmetic on integers (Z) and conversions between naturals and integers.

Naturals are non-negative ``int`` values; integers are arbitrary ``int`` values.
Division follows the Euclidean convention: the remainder is always
non-negative and smaller than the absolute value of the divisor.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "Sign",
    "abs_z",
    "poz_z",
    "mul_zm",
    "trans_n_z",
    "trans_z_n",
    "add_zz",
    "sub_zz",
    "mul_zz",
    "div_zz",
    "mod_zz",
]


class Sign(IntEnum):
    """Sign of an integer, with the numeric codes used by the menus."""

    ZERO = 0
    NEGATIVE = 1
    POSITIVE = 2


def _integer(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def _natural(value: int) -> int:
    value = _integer(value)
    if value < 0:
        raise ValueError(f"expected a natural number, got {value}")
    return value


def abs_z(value: int) -> int:
    """Return the absolute value of an integer."""
    return abs(_integer(value))


def poz_z(value: int) -> Sign:
    """Return whether an integer is positive, zero or negative."""
    value = _integer(value)
    if value == 0:
        return Sign.ZERO
    return Sign.NEGATIVE if value < 0 else Sign.POSITIVE


def mul_zm(value: int) -> int:
    """Multiply an integer by -1; zero stays zero."""
    return -_integer(value)


def trans_n_z(value: int) -> int:
    """Convert a natural number to an integer."""
    return _natural(value)


def trans_z_n(value: int) -> int:
    """Convert a non-negative integer to a natural number.

    Raises ValueError for a negative integer.
    """
    return _natural(value)


def add_zz(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return _integer(a) + _integer(b)


def sub_zz(a: int, b: int) -> int:
    """Return the difference ``a - b`` of two integers."""
    return _integer(a) - _integer(b)


def mul_zz(a: int, b: int) -> int:
    """Return the product of two integers."""
    return _integer(a) * _integer(b)


def div_zz(a: int, b: int) -> int:
    """Return the Euclidean quotient of ``a`` by ``b``.

    The quotient ``q`` is chosen so that ``a - q*b`` lies in ``[0, |b|)``.
    Raises ZeroDivisionError when ``b`` is zero.
    """
    a, b = _integer(a), _integer(b)
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = a // abs(b)
    return quotient if b > 0 else -quotient


def mod_zz(a: int, b: int) -> int:
    """Return the Euclidean remainder of ``a`` by ``b``, always ``>= 0``.

    Raises ZeroDivisionError when ``b`` is zero.
    """
    quotient = div_zz(a, b)
    return a - quotient * b