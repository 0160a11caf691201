"""List predicates, constructors and accessors.

Anything that builds a result out of its arguments copies them first: quoted
data is shared with the parse tree, and a fresh list must never alias it.
`list-ref` and `list-tail` only select existing structure.
"""
from __future__ import annotations

from schemelet.builtin.arguments import expect_arity, expect_number, expect_pair
from schemelet.errors import SchemeRuntimeError, SchemeTypeError
from schemelet.types import Boolean, EmptyList, Pair, Symbol, Value, is_empty_marker, is_null, make_copy


# -------------------------------
# Predicates
# -------------------------------
def is_pair(args: list[Value]) -> Boolean:
    expect_arity("pair?", args, 1)
    return Boolean(isinstance(args[0], Pair) and not is_empty_marker(args[0]))


def is_null_list(args: list[Value]) -> Boolean:
    expect_arity("null?", args, 1)
    return Boolean(is_null(args[0]))


def is_list(args: list[Value]) -> Boolean:
    expect_arity("list?", args, 1)
    arg = args[0]
    if is_null(arg):
        return Boolean(True)
    if not isinstance(arg, Pair):
        return Boolean(False)
    tail = arg
    while isinstance(tail, Pair) and not tail.is_empty():
        tail = tail.second
    return Boolean(tail is None or is_null(tail))


# -------------------------------
# Construction and access
# -------------------------------
def cons(args: list[Value]) -> Pair:
    expect_arity("cons", args, 2)
    head, tail = args
    return Pair(make_copy(head), make_copy(tail))


def car(args: list[Value]) -> Value:
    expect_arity("car", args, 1)
    pair = expect_pair("car", args[0])
    if pair.first is None:
        return EmptyList
    return make_copy(pair.first)


def cdr(args: list[Value]) -> Value:
    expect_arity("cdr", args, 1)
    pair = expect_pair("cdr", args[0])
    if pair.second is None:
        return Pair()
    return make_copy(pair.second)


def list_builtin(args: list[Value]) -> Value:
    if len(args) == 1 and args[0] is EmptyList:
        return args[0]
    head = Pair()
    tail = None
    for arg in args:
        if tail is None:
            head.first = make_copy(arg)
            tail = head
        else:
            tail.second = Pair(make_copy(arg))
            tail = tail.second
    return head


def elements(pair: Pair) -> list[Value]:
    """Elements of a chain in order; a dotted tail counts as the last element."""
    if pair.is_empty():
        return [EmptyList]
    items: list[Value] = []
    last = None
    for last in pair.nodes():
        items.append(EmptyList if last.first is None else last.first)
    if last is not None and last.second is not None and not is_null(last.second):
        items.append(last.second)
    return items


def list_ref(args: list[Value]) -> Value:
    expect_arity("list-ref", args, 2)
    if not isinstance(args[0], Pair):
        raise SchemeTypeError("list-ref requires a list")
    items = elements(args[0])
    index = expect_number("list-ref", args[1])
    if not 0 <= index < len(items):
        raise SchemeRuntimeError(f"list-ref index {index} out of range")
    return items[index]


def list_tail(args: list[Value]) -> Value:
    expect_arity("list-tail", args, 2)
    if not isinstance(args[0], Pair):
        raise SchemeTypeError("list-tail requires a list")
    count = expect_number("list-tail", args[1])
    if count < 0:
        raise SchemeRuntimeError(f"list-tail index {count} out of range")
    node = args[0]
    for step in range(count):
        following = node.second
        if not isinstance(following, Pair) or following.is_empty():
            # Walking off the end is only allowed on the final step.
            if step != count - 1:
                raise SchemeRuntimeError(f"list-tail index {count} out of range")
            return Pair()
        node = following
    return node


# -------------------------------
# Registration
# -------------------------------
def register(table: dict) -> None:
    table.update({
        Symbol('pair?'): is_pair,
        Symbol('null?'): is_null_list,
        Symbol('list?'): is_list,
        Symbol('cons'): cons,
        Symbol('car'): car,
        Symbol('cdr'): cdr,
        Symbol('list'): list_builtin,
        Symbol('list-ref'): list_ref,
        Symbol('list-tail'): list_tail,
    })
