"""The cons cell used for lists, dotted pairs and parse trees."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class Pair:
    """A two-slot node. Either slot may be absent (``None``).

    A Pair with both slots absent is the empty-list marker: ``(list)`` and
    ``cdr`` of a one-element list produce it, and it prints as ``()``.
    """

    __slots__ = ("first", "second")
    __match_args__ = ("first", "second")
    __hash__ = None  # mutable

    def __init__(self, first: Optional[Any] = None, second: Optional[Any] = None):
        self.first = first
        self.second = second

    def is_empty(self) -> bool:
        return self.first is None and self.second is None

    def nodes(self) -> Iterator[Pair]:
        """Yield this Pair and every Pair reachable through `second` links."""
        node: Any = self
        while isinstance(node, Pair) and not node.is_empty():
            yield node
            node = node.second

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        left: Any = self
        right: Any = other
        while isinstance(left, Pair) and isinstance(right, Pair):
            if left is right:
                return True
            if left.first != right.first:
                return False
            left, right = left.second, right.second
        return left == right

    def __repr__(self):
        return f"Pair({self.first!r}, {self.second!r})"
