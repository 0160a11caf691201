from __future__ import annotations


class EmptyListType:
    """The canonical `()` terminator. Use the `EmptyList` singleton."""

    __slots__ = ()

    def __repr__(self): return "EmptyList"

    def __eq__(self, other):
        return isinstance(other, EmptyListType)

    def __hash__(self):
        return hash(EmptyListType)

    # The empty list is not falsey in Scheme, only #f is.
    def __bool__(self): return True


EmptyList = EmptyListType()
