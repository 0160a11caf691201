"""Boolean predicates and logic. Only #f is false."""
from __future__ import annotations

from schemelet.builtin.arguments import expect_arity
from schemelet.types import Boolean, EmptyListType, Symbol, Value, is_false


def is_boolean(args: list[Value]) -> Boolean:
    expect_arity("boolean?", args, 1)
    return Boolean(isinstance(args[0], Boolean))


def logical_not(args: list[Value]) -> Boolean:
    expect_arity("not", args, 1)
    arg = args[0]
    if isinstance(arg, Boolean):
        return Boolean(not arg.state)
    return Boolean(False)


def logical_and(args: list[Value]) -> Value:
    """Return the first #f argument, else the last argument (#t when empty)."""
    if not args:
        return Boolean(True)
    for arg in args:
        if is_false(arg):
            return arg
    return args[-1]


def logical_or(args: list[Value]) -> Value:
    """Return the first argument that is neither #f nor the EmptyList, else #f.

    An empty Pair such as the result of `(list)` is returned like any other value.
    """
    for arg in args:
        if is_false(arg) or isinstance(arg, EmptyListType):
            continue
        return arg
    return Boolean(False)


def register(table: dict) -> None:
    table.update({
        Symbol('boolean?'): is_boolean,
        Symbol('not'): logical_not,
        Symbol('and'): logical_and,
        Symbol('or'): logical_or,
    })
