"""Floating point and bitwise calculators."""

from __future__ import annotations

import math
import operator
import re

DIVISION_BY_ZERO = "Erro: Divisão por zero"
INVALID_OPERATOR = "Erro: Operador inválido"
INVALID_BITS_OPERATOR = "Operador inválido!"

_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")

_INT_BITS = 32


class CalcError(ValueError):
    """Raised when a calculation cannot be carried out."""


def to_float(text: str) -> float:
    """Read the leading number of *text*; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _wrap_int(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return ((value + half) % (1 << _INT_BITS)) - half


def to_int(text: str) -> int:
    """Read the leading integer of *text* as a 32-bit int; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return _wrap_int(int(match.group(1))) if match else 0


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and exponent.is_integer() and int(exponent) % 2 == 1
        return -math.inf if negative else math.inf
    except ValueError:
        return math.inf if base == 0 else math.nan


def _divide(a: float, b: float) -> float:
    if b == 0.0:
        raise CalcError(DIVISION_BY_ZERO)
    return a / b


_FLOAT_OPS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "^": _power,
}


def calc(value1: str, op: str, value2: str) -> float:
    """Apply one of + - * / ^ to two numbers given as text."""
    try:
        func = _FLOAT_OPS[op]
    except KeyError:
        raise CalcError(INVALID_OPERATOR) from None
    return func(to_float(value1), to_float(value2))


def format_calc(value1: str, op: str, value2: str) -> str:
    """Return the line the calc command prints."""
    try:
        return f"Resultado: {calc(value1, op, value2):.3f}"
    except CalcError as exc:
        return str(exc)


def _shift_count(count: int) -> int:
    if not 0 <= count < _INT_BITS:
        raise CalcError(f"Deslocamento fora do intervalo: {count}")
    return count


_BIT_OPS = {
    "&": operator.and_,
    "^": operator.xor,
    "|": operator.or_,
    "<<": lambda a, b: a << _shift_count(b),
    ">>": lambda a, b: a >> _shift_count(b),
}


def bits(op1: str, op: str, op2: str) -> int:
    """Apply one of & ^ | ~ << >> to 32-bit integers given as text.

    The ``~`` operator negates only the first operand.
    """
    num1 = to_int(op1)
    if op == "~":
        return ~num1
    try:
        func = _BIT_OPS[op]
    except KeyError:
        raise CalcError(INVALID_BITS_OPERATOR) from None
    return _wrap_int(func(num1, to_int(op2)))


def format_bits(op1: str, op: str, op2: str) -> str:
    """Return the line the bits command prints."""
    try:
        result = bits(op1, op, op2)
    except CalcError as exc:
        return str(exc)
    if op == "~":
        return f"~{to_int(op1)} = {result}"
    return f"Resultado {to_int(op1)} {op} {to_int(op2)} = {result}"