from __future__ import annotations

from typing import Optional

from schemelet.types import EmptyList, Pair, Value, is_empty_marker


def quote_form(argument: Optional[Value]) -> Value:
    """Return the quoted datum unevaluated.

    The datum is the parsed subtree itself, not a copy. `'()` has no argument
    and yields `()`; an argument that is the empty marker yields `(())`.
    """
    if argument is None:
        return EmptyList
    if is_empty_marker(argument):
        return Pair(EmptyList)
    return argument
