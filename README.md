# dmalgebra

Exact arithmetic on integers and rational numbers. It also has text parsing
and formatting for numbers and polynomials, and a small interactive,
menu-driven calculator. The calculator's prompts and messages are in Russian.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Integers: `dmalgebra.integers`

Naturals and integers are plain Python `int` values.

```python
from dmalgebra.integers import add_zz, div_zz, mod_zz, poz_z, Sign

add_zz(-12345, 6789)   # -5556
div_zz(-12345, 6789)   # -2
mod_zz(-12345, 6789)   # 1233
poz_z(-3)              # Sign.NEGATIVE
```

The module provides these functions:

- `abs_z` gives the absolute value.
- `poz_z` returns a `Sign`: `ZERO` = 0, `NEGATIVE` = 1 or `POSITIVE` = 2.
- `mul_zm` negates.
- `trans_n_z` and `trans_z_n` convert between naturals and integers. Both raise
  `ValueError` for a negative value.
- `add_zz`, `sub_zz` and `mul_zz` add, subtract and multiply.
- `div_zz` and `mod_zz` give the Euclidean quotient and remainder. The
  remainder always lies in `[0, |b|)`, and a zero divisor raises
  `ZeroDivisionError`.

Every function raises `TypeError` for an argument that is not an `int`, and
`bool` counts as not an `int`.

## Rationals: `dmalgebra.rationals`

`Rational(numerator, denominator=1)` is a frozen dataclass. The sign is kept in
the numerator and the denominator must be positive. A zero denominator raises
`ZeroDivisionError` and a negative one raises `ValueError`. A fraction is stored
exactly as given and is not reduced automatically. `str()` writes it as `p/q`,
as `p` when the denominator is 1, and as `0` when the numerator is zero.

```python
from dmalgebra.rationals import Rational, add_qq, sub_qq, div_qq, red_q

str(red_q(Rational(-12, 8)))                  # "-3/2"
str(add_qq(Rational(1, 3), Rational(1, 6)))   # "1/2"
str(sub_qq(Rational(3, 4), Rational(1, 4)))   # "2/4"
str(div_qq(Rational(2, 3), Rational(4, 9)))   # "3/2"
```

The module provides these functions:

- `red_q` reduces a fraction to lowest terms. A zero numerator gives `0/1`.
- `int_q` is true when the stored denominator is 1. The fraction is not
  reduced first.
- `trans_z_q` turns an integer into `n/1`.
- `trans_q_z` turns a fraction with denominator 1 into an `int`. Any other
  denominator raises `ValueError`.
- `add_qq`, `mul_qq` and `div_qq` return reduced results. `div_qq` raises
  `ZeroDivisionError` for a zero divisor.
- `sub_qq` returns the difference over the least common multiple of the
  denominators and does not reduce it.

## Text form: `dmalgebra.textio`

- `parse_natural` reads a line of digits.
- `parse_integer` reads an optionally signed integer. Leading blanks are
  allowed.
- `parse_rational` reads `[sign]p[/q]`. The result is not reduced.
- `parse_polynomial(degree, lines)` reads `power coefficient` lines, for example
  `2 -3/4`. It stops at a blank line or at the end of `lines`, and returns a
  list of `Rational` coefficients with the constant term first and any leading
  zero coefficients removed. A line it cannot use is skipped with a warning
  issued through `warnings.warn`. A negative or non-integer degree raises
  `InputError`.
- `format_natural`, `format_integer` and `format_rational` write numbers back
  as text.
- `format_polynomial` writes a list of coefficients, constant term first, for
  example `x^2 - 1/2x + 3`.

Malformed text raises `InputError`, which is a subclass of `ValueError`.

## Interactive calculator

```
dmalgebra
```

The calculator reads from standard input. First enter a number type: `Z` for
integers or `Q` for rationals. Case does not matter. Then enter an operation by
its number and give the operands when asked. After each operation it returns to
the number-type prompt. Entering `0` at that prompt ends the session with exit
status 0.

Any invalid input prints an `ОШИБКА: ...` message and ends the session with
exit status 1. This covers an unknown number type, an unknown operation number,
a malformed number, a zero divisor and the end of input. Entering `0` at an
operation prompt returns to the number-type prompt without doing anything.

The menus can also be driven from code. `dmalgebra.cli.menu_z(lines, out)` and
`menu_q(lines, out)` run one operation. They read answers from an iterable of
lines and write to a text stream.

## What it does not do

The calculator offers only integer and rational operations. It has no menu of
operations on natural numbers. Polynomials can be parsed and formatted, but the
package has no polynomial arithmetic: no addition, multiplication, division,
GCD or derivative.