"""Arithmetic on rational numbers (Q).

A rational number keeps its sign in the numerator; the denominator is
always a positive natural number. Fractions are stored exactly as given:
reduction happens only where an operation asks for it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = [
    "Rational",
    "red_q",
    "int_q",
    "trans_z_q",
    "trans_q_z",
    "add_qq",
    "sub_qq",
    "mul_qq",
    "div_qq",
]


def _check_int(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Rational:
    """A fraction ``numerator/denominator`` with a positive denominator."""

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        _check_int(self.numerator, "numerator")
        _check_int(self.denominator, "denominator")
        if self.denominator == 0:
            raise ZeroDivisionError("denominator must not be zero")
        if self.denominator < 0:
            raise ValueError("denominator must be a natural number")

    def __str__(self) -> str:
        if self.numerator == 0:
            return "0"
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


def red_q(value: Rational) -> Rational:
    """Reduce a fraction by the greatest common divisor of its parts.

    A zero numerator gives ``0/1``.
    """
    if value.numerator == 0:
        return Rational(0, 1)
    divisor = math.gcd(abs(value.numerator), value.denominator)
    return Rational(value.numerator // divisor, value.denominator // divisor)


def int_q(value: Rational) -> bool:
    """Return True when the fraction, as stored, has denominator 1."""
    return value.denominator == 1


def trans_z_q(value: int) -> Rational:
    """Turn an integer into the fraction ``value/1``."""
    return Rational(_check_int(value, "value"), 1)


def trans_q_z(value: Rational) -> int:
    """Turn a fraction with denominator 1 into an integer.

    Raises ValueError when the denominator is not 1.
    """
    if value.denominator != 1:
        raise ValueError(f"{value} is not an integer: denominator is not 1")
    return value.numerator


def _common_terms(a: Rational, b: Rational) -> tuple[int, int, int]:
    common = math.lcm(a.denominator, b.denominator)
    return (
        a.numerator * (common // a.denominator),
        b.numerator * (common // b.denominator),
        common,
    )


def add_qq(a: Rational, b: Rational) -> Rational:
    """Return the reduced sum of two fractions."""
    first, second, common = _common_terms(a, b)
    return red_q(Rational(first + second, common))


def sub_qq(a: Rational, b: Rational) -> Rational:
    """Return ``a - b`` over the least common denominator, without reducing."""
    first, second, common = _common_terms(a, b)
    return Rational(first - second, common)


def mul_qq(a: Rational, b: Rational) -> Rational:
    """Return the reduced product of two fractions."""
    return red_q(
        Rational(a.numerator * b.numerator, a.denominator * b.denominator)
    )


def div_qq(a: Rational, b: Rational) -> Rational:
    """Return the reduced quotient ``a / b``.

    Raises ZeroDivisionError when ``b`` is zero.
    """
    if b.numerator == 0:
        raise ZeroDivisionError("division by a zero fraction")
    numerator = a.numerator * b.denominator
    if b.numerator < 0:
        numerator = -numerator
    return red_q(Rational(numerator, a.denominator * abs(b.numerator)))