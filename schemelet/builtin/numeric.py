"""Integer predicates, comparisons and arithmetic.

Results are wrapped into the signed 32-bit domain. Division truncates toward
zero; dividing by zero raises ZeroDivisionError, which is deliberately not a
SchemeError.
"""
from __future__ import annotations

import operator
from typing import Callable

from schemelet.builtin.arguments import expect_arity, expect_at_least, expect_number
from schemelet.config import INT_BITS
from schemelet.types import Boolean, Number, Symbol, Value

_MODULUS = 1 << INT_BITS
_SIGN_BIT = 1 << (INT_BITS - 1)


def wrap_int(value: int) -> int:
    """Two's complement wrap into the signed INT_BITS range."""
    return ((value + _SIGN_BIT) % _MODULUS) - _SIGN_BIT


def truncating_div(lhs: int, rhs: int) -> int:
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


# -------------------------------
# Predicates and comparison
# -------------------------------
def is_number(args: list[Value]) -> Boolean:
    expect_arity("number?", args, 1)
    return Boolean(isinstance(args[0], Number))


def _comparison(name: str, relation: Callable[[int, int], bool]):
    # Argument 0 is compared against every other argument, not pairwise.
    def compare(args: list[Value]) -> Boolean:
        if not args:
            return Boolean(True)
        numbers = [expect_number(name, arg) for arg in args]
        first = numbers[0]
        return Boolean(all(relation(first, other) for other in numbers[1:]))

    return compare


# -------------------------------
# Arithmetic
# -------------------------------
def _fold(name: str, seed: int, args: list[Value], op: Callable[[int, int], int]) -> Number:
    result = seed
    for arg in args:
        result = op(result, expect_number(name, arg))
    return Number(wrap_int(result))


def add(args: list[Value]) -> Number:
    return _fold("+", 0, args, operator.add)


def sub(args: list[Value]) -> Number:
    expect_at_least("-", args, 1)
    first = expect_number("-", args[0])
    if len(args) == 1:
        return Number(wrap_int(-first))
    return _fold("-", first, args[1:], operator.sub)


def mul(args: list[Value]) -> Number:
    return _fold("*", 1, args, operator.mul)


def div(args: list[Value]) -> Number:
    expect_at_least("/", args, 1)
    return _fold("/", expect_number("/", args[0]), args[1:], truncating_div)


def maximum(args: list[Value]) -> Value:
    expect_at_least("max", args, 1)
    for arg in args:
        expect_number("max", arg)
    # max() keeps the first of equal elements
    return max(args, key=lambda number: number.value)


def minimum(args: list[Value]) -> Value:
    expect_at_least("min", args, 1)
    for arg in args:
        expect_number("min", arg)
    return min(args, key=lambda number: number.value)


def absolute(args: list[Value]) -> Number:
    expect_arity("abs", args, 1)
    return Number(wrap_int(abs(expect_number("abs", args[0]))))


# -------------------------------
# Registration
# -------------------------------
def register(table: dict) -> None:
    table.update({
        Symbol('number?'): is_number,
        Symbol('='): _comparison('=', operator.eq),
        Symbol('>'): _comparison('>', operator.gt),
        Symbol('<'): _comparison('<', operator.lt),
        Symbol('>='): _comparison('>=', operator.ge),
        Symbol('<='): _comparison('<=', operator.le),
        Symbol('+'): add,
        Symbol('-'): sub,
        Symbol('*'): mul,
        Symbol('/'): div,
        Symbol('max'): maximum,
        Symbol('min'): minimum,
        Symbol('abs'): absolute,
    })
