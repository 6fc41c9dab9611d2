"""Interactive text menus for integer and rational arithmetic."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from dmalgebra.integers import (
    Sign,
    abs_z,
    add_zz,
    div_zz,
    mod_zz,
    mul_zm,
    mul_zz,
    poz_z,
    sub_zz,
    trans_n_z,
    trans_z_n,
)
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
from dmalgebra.textio import (
    InputError,
    format_integer,
    format_natural,
    format_rational,
    parse_integer,
    parse_natural,
    parse_rational,
)

__all__ = ["menu_z", "menu_q", "main"]

_RULE = "============================================"
_NUMBER = re.compile(r"[+-]?[0-9]+")

_MENU_Z = """
========== ЦЕЛЫЕ ЧИСЛА ==========
 1 - ABS_Z_Z   (Абсолютная величина)
 2 - POZ_Z_D   (Определение положительности)
 3 - MUL_ZM_Z  (Умножение на -1)
 4 - TRANS_N_Z (Нат. → целое)
 5 - TRANS_Z_N (Целое неотриц. → нат.)
 6 - ADD_ZZ_Z  (Сложение)
 7 - SUB_ZZ_Z  (Вычитание)
 8 - MUL_ZZ_Z  (Умножение)
 9 - DIV_ZZ_Z  (Частное)
10 - MOD_ZZ_Z  (Остаток)
 0 - Назад
> """

_MENU_Q = """
========== РАЦИОНАЛЬНЫЕ ЧИСЛА ==========
1 - RED_Q_Q   (Сокращение дроби)
2 - INT_Q_B   (Проверка на целое)
3 - TRANS_Z_Q (Целое → дробное)
4 - TRANS_Q_Z (Дробное → целое)
5 - ADD_QQ_Q  (Сложение)
6 - SUB_QQ_Q  (Вычитание)
7 - MUL_QQ_Q  (Умножение)
8 - DIV_QQ_Q  (Деление)
0 - Назад
> """

_SIGN_NAMES = {
    Sign.POSITIVE: "положительное",
    Sign.ZERO: "ноль",
    Sign.NEGATIVE: "отрицательное",
}


def _read(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise InputError("неожиданный конец ввода") from None


def _read_operation(lines: Iterator[str]) -> int:
    match = _NUMBER.match(_read(lines).strip())
    if match is None:
        raise InputError("введите номер")
    return int(match.group())


def _ask_natural(lines: Iterator[str], out: TextIO, prompt: str) -> int:
    out.write(f"{prompt}: ")
    return parse_natural(_read(lines))


def _ask_integer(lines: Iterator[str], out: TextIO, prompt: str) -> int:
    out.write(prompt)
    return parse_integer(_read(lines))


def _ask_rational(lines: Iterator[str], out: TextIO, prompt: str) -> Rational:
    out.write(prompt)
    return parse_rational(_read(lines))


def menu_z(lines: Iterable[str], out: TextIO) -> None:
    """Run one operation of the integer menu, reading answers from ``lines``.

    Raises InputError when the input is invalid or the operation is undefined.
    """
    lines = iter(lines)
    out.write(_MENU_Z)
    op = _read_operation(lines)
    if op == 0:
        return

    if op == 1:
        a = _ask_integer(lines, out, "Введите целое число: ")
        out.write(f"Абсолютная величина: {format_integer(abs_z(a))}\n")
    elif op == 2:
        a = _ask_integer(lines, out, "Введите целое число: ")
        out.write(f"Результат: {_SIGN_NAMES[poz_z(a)]}\n")
    elif op == 3:
        a = _ask_integer(lines, out, "Введите целое число: ")
        out.write(f"Результат: {format_integer(mul_zm(a))}\n")
    elif op == 4:
        a = _ask_natural(lines, out, "Введите натуральное число: ")
        out.write(f"Результат: {format_integer(trans_n_z(a))}\n")
    elif op == 5:
        a = _ask_integer(lines, out, "Введите целое неотрицательное число: ")
        if poz_z(a) is Sign.NEGATIVE:
            raise InputError("число отрицательное")
        out.write(f"Результат: {format_natural(trans_z_n(a))}\n")
    elif op in (6, 7, 8):
        prompts = {
            6: ("Введите первое число: ", "Введите второе число: "),
            7: ("Введите уменьшаемое: ", "Введите вычитаемое: "),
            8: ("Введите первый множитель: ", "Введите второй множитель: "),
        }[op]
        operation = {6: add_zz, 7: sub_zz, 8: mul_zz}[op]
        a = _ask_integer(lines, out, prompts[0])
        b = _ask_integer(lines, out, prompts[1])
        out.write(f"Результат: {format_integer(operation(a, b))}\n")
    elif op in (9, 10):
        a = _ask_integer(lines, out, "Введите делимое: ")
        b = _ask_integer(lines, out, "Введите делитель: ")
        if b == 0:
            raise InputError("деление на ноль")
        if op == 9:
            out.write(f"Частное: {format_integer(div_zz(a, b))}\n")
        else:
            out.write(f"Остаток: {format_integer(mod_zz(a, b))}\n")
    else:
        raise InputError("неверный выбор операции")


def menu_q(lines: Iterable[str], out: TextIO) -> None:
    """Run one operation of the rational menu, reading answers from ``lines``.

    Raises InputError when the input is invalid or the operation is undefined.
    """
    lines = iter(lines)
    out.write(_MENU_Q)
    op = _read_operation(lines)
    if op == 0:
        return

    if op == 1:
        a = _ask_rational(lines, out, "Введите дробь: ")
        out.write(f"Сокращённая дробь: {format_rational(red_q(a))}\n")
    elif op == 2:
        a = _ask_rational(lines, out, "Введите дробь: ")
        out.write(f"Результат: {'целое' if int_q(a) else 'не целое'}\n")
    elif op == 3:
        a = _ask_integer(lines, out, "Введите целое число: ")
        out.write(f"Результат: {format_rational(trans_z_q(a))}\n")
    elif op == 4:
        a = _ask_rational(lines, out, "Введите дробь: ")
        reduced = red_q(a)
        if reduced.denominator != 1:
            raise InputError("знаменатель не равен 1")
        out.write(f"Результат: {format_integer(trans_q_z(reduced))}\n")
    elif op in (5, 6, 7):
        prompts = {
            5: ("Введите первую дробь: ", "Введите вторую дробь: "),
            6: ("Введите уменьшаемое: ", "Введите вычитаемое: "),
            7: ("Введите первую дробь: ", "Введите вторую дробь: "),
        }[op]
        operation = {5: add_qq, 6: sub_qq, 7: mul_qq}[op]
        a = _ask_rational(lines, out, prompts[0])
        b = _ask_rational(lines, out, prompts[1])
        out.write(f"Результат: {format_rational(operation(a, b))}\n")
    elif op == 8:
        a = _ask_rational(lines, out, "Введите делимое: ")
        b = _ask_rational(lines, out, "Введите делитель: ")
        if b.numerator == 0:
            raise InputError("делитель равен нулю")
        out.write(f"Результат: {format_rational(div_qq(a, b))}\n")
    else:
        raise InputError("неверный выбор операции")


def _read_choice(lines: Iterator[str]) -> str:
    for line in lines:
        stripped = line.strip()
        if stripped:
            return stripped[0]
    raise InputError("неожиданный конец ввода")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive calculator on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dmalgebra",
        description="Интерактивная арифметика целых и рациональных чисел.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    lines = iter(sys.stdin)
    out.write(f"{_RULE}\n     КОМПЬЮТЕРНАЯ АЛГЕБРА\n{_RULE}\n")
    out.write("  Z - Целые числа\n  Q - Рациональные числа\n  0 - Выход\n")

    menus = {"z": menu_z, "q": menu_q}
    try:
        while True:
            out.write("Выберите тип чисел:\n")
            choice = _read_choice(lines)
            if choice == "0":
                out.write("Работа завершена!\n")
                return 0
            menu = menus.get(choice.lower())
            if menu is None:
                out.write("ОШИБКА: неверный выбор типа\n")
                out.write("Допустимые варианты: Z, Q, 0\n")
                return 1
            menu(lines, out)
            out.write(f"\n{_RULE}\n")
    except InputError as error:
        out.write(f"ОШИБКА: {error}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())