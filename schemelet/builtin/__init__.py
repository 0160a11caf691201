"""The builtin dispatch table.

Built once at import time and exposed read-only; evaluation only ever looks
names up in it.
"""

from types import MappingProxyType
from typing import Callable, Mapping

from schemelet.builtin import boolean, lists, numeric
from schemelet.types import Symbol, Value

Builtin = Callable[[list[Value]], Value]


def _build_table() -> Mapping[Symbol, Builtin]:
    table: dict[Symbol, Builtin] = {}
    numeric.register(table)
    boolean.register(table)
    lists.register(table)
    return MappingProxyType(table)


BUILTINS: Mapping[Symbol, Builtin] = _build_table()
