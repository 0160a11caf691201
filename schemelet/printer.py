"""Serialization of runtime values to their textual form.

    Number   -> decimal digits, leading '-' when negative
    Boolean  -> #t / #f
    Symbol   -> its name
    ()       -> EmptyList, an absent value, or a Pair with both slots absent
    Pair     -> (a b c) for proper lists, (a b . c) for dotted chains
"""

from __future__ import annotations

from io import StringIO
from typing import Optional, TextIO

from schemelet.types import Boolean, EmptyListType, Number, Pair, Symbol, Value, is_null


def serialize(value: Optional[Value]) -> str:
    with StringIO() as buffer:
        write(buffer, value)
        return buffer.getvalue()


def write(buffer: TextIO, value: Optional[Value]) -> None:
    match value:
        case None | EmptyListType():
            buffer.write("()")
        case Number(number):
            buffer.write(str(number))
        case Boolean(state):
            buffer.write("#t" if state else "#f")
        case Symbol(name):
            buffer.write(name)
        case Pair() if value.is_empty():
            buffer.write("()")
        case Pair(first, second):
            buffer.write("(")
            write(buffer, first)
            tail = second
            while isinstance(tail, Pair) and not tail.is_empty():
                buffer.write(" ")
                write(buffer, tail.first)
                tail = tail.second
            if tail is not None and not is_null(tail):
                buffer.write(" . ")
                write(buffer, tail)
            buffer.write(")")
        case _:
            raise TypeError(f"Cannot serialize {value!r}")
