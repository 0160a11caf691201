"""Argument checking shared by the builtin operations."""

from __future__ import annotations

from schemelet.errors import SchemeArityError, SchemeTypeError
from schemelet.types import Number, Pair, Value


def expect_arity(name: str, args: list[Value], count: int) -> None:
    if len(args) != count:
        plural = "argument" if count == 1 else "arguments"
        raise SchemeArityError(f"{name} requires exactly {count} {plural}, got {len(args)}")


def expect_at_least(name: str, args: list[Value], count: int) -> None:
    if len(args) < count:
        plural = "argument" if count == 1 else "arguments"
        raise SchemeArityError(f"{name} requires at least {count} {plural}")


def expect_number(name: str, value: Value) -> int:
    if not isinstance(value, Number):
        raise SchemeTypeError(f"All arguments to {name} must be numbers")
    return value.value


def expect_pair(name: str, value: Value) -> Pair:
    if not isinstance(value, Pair) or value.is_empty():
        raise SchemeTypeError(f"{name} requires a non-empty pair")
    return value
