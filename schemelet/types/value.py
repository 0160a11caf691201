"""The closed set of runtime values and the helpers shared by every component.

Ownership contract: parse trees are shared by reference. ``quote`` hands out
the parsed subtree itself, so anything that builds new structure from its
arguments (``car``, ``cdr``, ``cons``, ``list``) goes through `make_copy`
and never links a caller-visible subtree into a fresh result.
"""

from __future__ import annotations

from typing import Optional, Union

from schemelet.types.atoms import Boolean, Number
from schemelet.types.nil import EmptyList, EmptyListType
from schemelet.types.pair import Pair
from schemelet.types.symbol import Symbol

Value = Union[Number, Symbol, Boolean, Pair, EmptyListType]


def is_empty_marker(value: Optional[Value]) -> bool:
    return isinstance(value, Pair) and value.is_empty()


def is_null(value: Optional[Value]) -> bool:
    """True for `EmptyList` and the both-slots-absent Pair."""
    return isinstance(value, EmptyListType) or is_empty_marker(value)


def is_false(value: Optional[Value]) -> bool:
    """Only #f is false; everything else, `()` and 0 included, is truthy."""
    return isinstance(value, Boolean) and not value.state


def make_copy(value: Optional[Value]) -> Optional[Value]:
    """Deep-copy a value. Chains are copied iteratively, nested lists recursively."""
    match value:
        case None:
            return None
        case Number(number):
            return Number(number)
        case Boolean(state):
            return Boolean(state)
        case Symbol(name):
            return Symbol(name)
        case EmptyListType():
            return EmptyList
        case Pair(first, second):
            head = Pair(make_copy(first))
            target = head
            source = second
            while isinstance(source, Pair):
                node = Pair(make_copy(source.first))
                target.second = node
                target = node
                source = source.second
            target.second = make_copy(source)
            return head
    raise TypeError(f"Not a Scheme value: {value!r}")
