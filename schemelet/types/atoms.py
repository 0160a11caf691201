"""Self-evaluating atoms: integers and booleans."""

from __future__ import annotations


class Number:
    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: int):
        self.value: int = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("number", self.value))

    def __repr__(self):
        return f"Number({self.value})"


class Boolean:
    __slots__ = ("state",)
    __match_args__ = ("state",)

    def __init__(self, state: bool):
        self.state: bool = bool(state)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Boolean) and self.state == other.state

    def __hash__(self) -> int:
        return hash(("boolean", self.state))

    def __repr__(self):
        return f"Boolean({self.state})"
