"""Reading numbers and polynomials from text and writing them back as text.

Naturals and integers are plain ``int`` values, rationals are
:class:`~dmalgebra.rationals.Rational`, and a polynomial is a list of
rational coefficients starting with the constant term.
"""

from __future__ import annotations

import re
import warnings
from collections.abc import Iterable, Sequence

from dmalgebra.rationals import Rational, red_q

__all__ = [
    "InputError",
    "parse_natural",
    "parse_integer",
    "parse_rational",
    "parse_polynomial",
    "format_natural",
    "format_integer",
    "format_rational",
    "format_polynomial",
]


class InputError(ValueError):
    """Raised when text does not describe a number of the expected kind."""


_DIGITS = re.compile(r"[0-9]+")
_INTEGER = re.compile(r"[ \t]*([+-]?)([0-9]*)(.*)", re.DOTALL)
_RATIONAL = re.compile(
    r"[ \t]*([+-]?)([0-9]*)(?:(/)[ \t]*([0-9]*))?(.*)", re.DOTALL
)
_POWER = re.compile(r"\s*([+-]?[0-9]+)\s*")
_BLANK = re.compile(r"[ \t]*")


def _line(text: str) -> str:
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    return text[:-1] if text.endswith("\n") else text


def parse_natural(text: str) -> int:
    """Parse a line of decimal digits into a natural number."""
    text = _line(text)
    if not text:
        raise InputError("пустой ввод")
    if not _DIGITS.fullmatch(text):
        raise InputError("введите только цифры")
    return int(text)


def parse_integer(text: str) -> int:
    """Parse an optionally signed integer, allowing leading blanks."""
    match = _INTEGER.fullmatch(_line(text))
    sign, digits, rest = match.groups()
    if not digits:
        raise InputError("ожидались цифры после знака")
    if rest:
        raise InputError("неверный формат числа")
    value = int(digits)
    return -value if sign == "-" else value


def parse_rational(text: str) -> Rational:
    """Parse a fraction ``[sign]p[/q]``; the result is not reduced."""
    match = _RATIONAL.fullmatch(_line(text))
    sign, numerator, slash, denominator, rest = match.groups()
    if rest:
        raise InputError("неверный формат дроби")
    if not numerator:
        raise InputError("дробь без числителя")
    if slash is None:
        denominator = "1"
    if not denominator:
        raise InputError("неверный формат дроби")
    if int(denominator) == 0:
        raise InputError("знаменатель не может быть 0")
    value = int(numerator)
    return Rational(-value if sign == "-" else value, int(denominator))


def _parse_coefficient(text: str) -> Rational:
    text = text.rstrip("\r\n")
    if not text:
        raise InputError("не указан коэффициент")
    negative = text[0] == "-"
    if text[0] in "+-":
        text = text[1:]
    numerator, slash, denominator = text.partition("/")
    if not slash:
        denominator = "1"
    if not _DIGITS.fullmatch(numerator) or not _DIGITS.fullmatch(denominator):
        raise InputError("некорректный коэффициент")
    if int(denominator) == 0:
        raise InputError("знаменатель не может быть 0")
    value = int(numerator)
    return Rational(-value if negative else value, int(denominator))


def parse_polynomial(degree: int, lines: Iterable[str]) -> list[Rational]:
    """Build a polynomial of at most ``degree`` from ``power coefficient`` lines.

    Reading stops at the first blank line or when ``lines`` runs out. A line
    that cannot be used is skipped with a warning. Later lines for the same
    power replace earlier ones, and leading zero coefficients are dropped.
    """
    if isinstance(degree, bool) or not isinstance(degree, int) or degree < 0:
        raise InputError("степень должна быть целым неотрицательным числом")

    coefficients = [Rational(0, 1) for _ in range(degree + 1)]
    for raw in lines:
        line = _line(raw)
        if _BLANK.fullmatch(line):
            break
        match = _POWER.match(line)
        if match is None:
            warnings.warn("ожидается формат «степень коэффициент»", stacklevel=2)
            continue
        power = int(match.group(1))
        if not 0 <= power <= degree:
            warnings.warn(f"степень должна быть от 0 до {degree}", stacklevel=2)
            continue
        try:
            coefficients[power] = _parse_coefficient(line[match.end():])
        except InputError as error:
            warnings.warn(str(error), stacklevel=2)

    while len(coefficients) > 1 and coefficients[-1].numerator == 0:
        coefficients.pop()
    return coefficients


def format_natural(value: int) -> str:
    """Write a natural number as decimal digits."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"expected a natural number, got {value}")
    return str(value)


def format_integer(value: int) -> str:
    """Write an integer, with a minus sign when negative."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return str(value)


def format_rational(value: Rational) -> str:
    """Write a fraction as ``p/q``, or as ``p`` when the denominator is 1."""
    if not isinstance(value, Rational):
        raise TypeError(f"expected a Rational, got {type(value).__name__}")
    return str(value)


def _as_rational(value: Rational | int) -> Rational:
    return value if isinstance(value, Rational) else Rational(value, 1)


def format_polynomial(coefficients: Sequence[Rational | int]) -> str:
    """Write a polynomial given by its coefficients, constant term first.

    Terms run from the highest power down, each coefficient reduced; a unit
    coefficient is omitted in front of ``x``.
    """
    if not coefficients:
        raise ValueError("a polynomial needs at least one coefficient")

    parts: list[str] = []
    for power in reversed(range(len(coefficients))):
        coefficient = _as_rational(coefficients[power])
        if coefficient.numerator == 0:
            continue
        reduced = red_q(coefficient)
        negative = reduced.numerator < 0
        magnitude = abs(reduced.numerator)
        if parts:
            parts.append(" - " if negative else " + ")
        elif negative:
            parts.append("-")
        if not (magnitude == 1 and reduced.denominator == 1) or power == 0:
            parts.append(str(magnitude))
            if reduced.denominator != 1:
                parts.append(f"/{reduced.denominator}")
        if power == 1:
            parts.append("x")
        elif power > 1:
            parts.append(f"x^{power}")

    return "".join(parts) if parts else "0"