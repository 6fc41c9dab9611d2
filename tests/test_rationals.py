import pytest

from dmalgebra.rationals import (
    Rational,
    add_qq,
    div_qq,
    int_q,
    mul_qq,
    red_q,
    sub_qq,
    trans_q_z,
    trans_z_q,
)


@pytest.mark.parametrize(
    "given, expected",
    [
        (Rational(6, 9), Rational(2, 3)),
        (Rational(-12, 8), Rational(-3, 2)),
        (Rational(0, 7), Rational(0, 1)),
    ],
)
def test_red_q(given, expected):
    assert red_q(given) == expected


def test_red_q_keeps_sign_in_numerator():
    result = red_q(Rational(-10, 4))
    assert (result.numerator, result.denominator) == (-5, 2)


@pytest.mark.parametrize(
    "given, expected",
    [
        (Rational(6, 1), True),
        (Rational(1, 3), False),
        (Rational(0, 5), False),
    ],
)
def test_int_q(given, expected):
    assert int_q(given) is expected


def test_trans_z_q():
    assert trans_z_q(-7) == Rational(-7, 1)


def test_trans_q_z():
    assert trans_q_z(Rational(5, 1)) == 5


def test_trans_q_z_rejects_non_integer():
    with pytest.raises(ValueError):
        trans_q_z(Rational(2, 3))


def test_trans_round_trip():
    assert trans_q_z(trans_z_q(-123456789)) == -123456789


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Rational(1, 3), Rational(1, 6), Rational(1, 2)),
        (Rational(-3, 4), Rational(1, 4), Rational(-1, 2)),
    ],
)
def test_add_qq(a, b, expected):
    assert add_qq(a, b) == expected


def test_add_qq_to_zero():
    assert add_qq(Rational(1, 2), Rational(-2, 4)) == Rational(0, 1)


def test_sub_qq_is_not_reduced():
    result = sub_qq(Rational(3, 4), Rational(1, 4))
    assert result == Rational(2, 4)
    assert red_q(result) == Rational(1, 2)


def test_sub_qq_negative_result():
    assert sub_qq(Rational(1, 2), Rational(2, 3)) == Rational(-1, 6)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Rational(2, 3), Rational(3, 4), Rational(1, 2)),
        (Rational(-2, 5), Rational(5, 6), Rational(-1, 3)),
    ],
)
def test_mul_qq(a, b, expected):
    assert mul_qq(a, b) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Rational(2, 3), Rational(4, 9), Rational(3, 2)),
        (Rational(-1, 2), Rational(3, 4), Rational(-2, 3)),
        (Rational(1, 2), Rational(-1, 4), Rational(-2, 1)),
    ],
)
def test_div_qq(a, b, expected):
    assert div_qq(a, b) == expected


def test_div_qq_by_zero():
    with pytest.raises(ZeroDivisionError):
        div_qq(Rational(1, 2), Rational(0, 3))


def test_div_undoes_mul():
    a, b = Rational(-7, 12), Rational(5, 9)
    assert div_qq(mul_qq(a, b), b) == red_q(a)


@pytest.mark.parametrize(
    "given, text",
    [
        (Rational(0, 5), "0"),
        (Rational(-7, 1), "-7"),
        (Rational(2, 3), "2/3"),
        (Rational(-6, 9), "-6/9"),
    ],
)
def test_str(given, text):
    assert str(given) == text


def test_zero_denominator_rejected():
    with pytest.raises(ZeroDivisionError):
        Rational(1, 0)


def test_negative_denominator_rejected():
    with pytest.raises(ValueError):
        Rational(1, -2)


def test_non_integer_parts_rejected():
    with pytest.raises(TypeError):
        Rational(1.5, 2)