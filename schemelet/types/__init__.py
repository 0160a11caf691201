"""Runtime value model: numbers, symbols, booleans, pairs and the empty list."""

from schemelet.types.atoms import Boolean, Number
from schemelet.types.nil import EmptyList, EmptyListType
from schemelet.types.pair import Pair
from schemelet.types.symbol import Symbol
from schemelet.types.value import Value, is_empty_marker, is_false, is_null, make_copy

__all__ = [
    "Boolean",
    "EmptyList",
    "EmptyListType",
    "Number",
    "Pair",
    "Symbol",
    "Value",
    "is_empty_marker",
    "is_false",
    "is_null",
    "make_copy",
]
