import pytest

from dmalgebra.rationals import Rational
from dmalgebra.textio import (
    InputError,
    format_integer,
    format_natural,
    format_polynomial,
    format_rational,
    parse_integer,
    parse_natural,
    parse_polynomial,
    parse_rational,
)


def test_parse_natural_strips_leading_zeros():
    assert parse_natural("0012345") == 12345
    assert parse_natural("000") == 0
    assert parse_natural("6789\n") == 6789


@pytest.mark.parametrize("text", ["", "\n", "12a", " 12", "-5", "1 2"])
def test_parse_natural_rejects(text):
    with pytest.raises(InputError):
        parse_natural(text)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_natural("x")


def test_parse_integer_signs_and_blanks():
    assert parse_integer("-12345") == -12345
    assert parse_integer("  \t+6789") == 6789
    assert parse_integer("-0") == 0
    assert parse_integer("007\n") == 7


@pytest.mark.parametrize("text", ["", "-", "+", "12x", "1 ", "--3"])
def test_parse_integer_rejects(text):
    with pytest.raises(InputError):
        parse_integer(text)


def test_parse_rational_keeps_fraction_unreduced():
    assert parse_rational("-6/ 9") == Rational(-6, 9)
    assert parse_rational("  12/8") == Rational(12, 8)
    assert parse_rational("5") == Rational(5, 1)
    assert parse_rational("-0/7") == Rational(0, 7)
    assert parse_rational("003/004") == Rational(3, 4)


@pytest.mark.parametrize("text", ["1/0", "1/00", "/3", "1/", "1/2x", "a", ""])
def test_parse_rational_rejects(text):
    with pytest.raises(InputError):
        parse_rational(text)


@pytest.mark.parametrize("text", ["0", "42", "12345"])
def test_natural_round_trip(text):
    assert format_natural(parse_natural(text)) == text


@pytest.mark.parametrize("text", ["0", "-5556", "19134", "-83810205"])
def test_integer_round_trip(text):
    assert format_integer(parse_integer(text)) == text


@pytest.mark.parametrize("text", ["2/3", "-3/2", "-7", "1/2"])
def test_rational_round_trip(text):
    assert format_rational(parse_rational(text)) == text


def test_format_rational_zero_and_unit_denominator():
    assert format_rational(Rational(0, 7)) == "0"
    assert format_rational(Rational(5, 1)) == "5"


def test_format_natural_rejects_negative():
    with pytest.raises(ValueError):
        format_natural(-1)


def test_format_integer_rejects_non_integer():
    with pytest.raises(TypeError):
        format_integer("5")


def test_parse_polynomial_basic():
    result = parse_polynomial(2, ["2 1", "0 -1", ""])
    assert result == [Rational(-1), Rational(0), Rational(1)]


def test_parse_polynomial_trims_leading_zeros():
    result = parse_polynomial(3, ["1 1", "0 1"])
    assert result == [Rational(1), Rational(1)]


def test_parse_polynomial_all_zero_keeps_constant():
    assert parse_polynomial(4, []) == [Rational(0, 1)]


def test_parse_polynomial_stops_at_blank_line():
    result = parse_polynomial(1, ["1 1", "   ", "0 5"])
    assert result == [Rational(0), Rational(1)]


def test_parse_polynomial_later_line_wins():
    result = parse_polynomial(1, ["1 2/3", "1 -1/2\n"])
    assert result == [Rational(0), Rational(-1, 2)]


@pytest.mark.parametrize(
    "bad_line",
    ["5 1", "-1 1", "x 1", "1", "1 1/0", "1 1/", "1 a/2", "1 2 "],
)
def test_parse_polynomial_skips_bad_lines(bad_line):
    with pytest.warns(UserWarning):
        result = parse_polynomial(1, [bad_line, "0 3"])
    assert result == [Rational(3)]


def test_parse_polynomial_rejects_negative_degree():
    with pytest.raises(InputError):
        parse_polynomial(-1, [])


def test_format_polynomial_difference_of_squares():
    assert format_polynomial([Rational(-1), Rational(0), Rational(1)]) == "x^2 - 1"


def test_format_polynomial_reduces_and_shows_fractions():
    assert format_polynomial([Rational(2, 4), Rational(1, 2)]) == "1/2x + 1/2"


def test_format_polynomial_leading_negative_unit():
    assert format_polynomial([Rational(1), Rational(-1)]) == "-x + 1"


def test_format_polynomial_zero():
    assert format_polynomial([Rational(0), Rational(0, 3)]) == "0"


def test_format_polynomial_accepts_ints():
    assert format_polynomial([-1, 0, 1]) == format_polynomial(
        [Rational(-1), Rational(0), Rational(1)]
    )


def test_format_polynomial_rejects_empty():
    with pytest.raises(ValueError):
        format_polynomial([])


def test_polynomial_round_trip_through_lines():
    text = format_polynomial(parse_polynomial(2, ["2 1", "0 -1"]))
    assert text == format_polynomial([Rational(-1), Rational(0), Rational(1)])