"""Core evaluator.

A pure recursive walk over a value-tree. Atoms evaluate to themselves. For a
Pair the head is evaluated first; a `quote` head returns its operand as-is,
a head naming a builtin is applied to the flattened operands, and any other
symbol evaluates to itself.
"""

from __future__ import annotations

import logging
from typing import Optional

from schemelet.builtin import BUILTINS
from schemelet.config import get_max_depth
from schemelet.errors import SchemeRuntimeError
from schemelet.evaluation.special_forms import SPECIAL_FORMS
from schemelet.types import Boolean, EmptyList, EmptyListType, Number, Pair, Symbol, Value, is_empty_marker

logger = logging.getLogger(__name__)


def evaluate(expr: Optional[Value], *, max_depth: int | None = None) -> Value:
    if max_depth is None:
        max_depth = get_max_depth()
    return evaluate0(expr, max_depth, 0)


def evaluate0(expr: Optional[Value], max_depth: int, depth: int) -> Value:
    match expr:
        case None:
            raise SchemeRuntimeError("Evaluating Nothing")
        case Number() | Boolean() | Symbol() | EmptyListType():
            return expr
        case Pair(head, rest):
            if depth > max_depth:
                raise SchemeRuntimeError(f"Evaluation nested deeper than {max_depth} levels")

            head = evaluate0(head, max_depth, depth + 1)

            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](rest)

            args = flatten_args(rest, max_depth, depth + 1)

            if isinstance(head, Symbol):
                builtin = BUILTINS.get(head)
                if builtin is None:
                    # Unbound operators are not an error: the symbol is the result.
                    return head
                logger.debug("apply %s to %d argument(s)", head, len(args))
                return builtin(args)
    raise SchemeRuntimeError("Evaluating Wrong Type")


def flatten_args(rest: Optional[Value], max_depth: int, depth: int) -> list[Value]:
    """Collect operands in order. Nested Pairs are evaluated, atoms are taken verbatim."""
    if rest is None:
        return []
    if is_empty_marker(rest):
        return [EmptyList]
    if not isinstance(rest, Pair):
        return [rest]

    args: list[Value] = []
    node: Optional[Value] = rest
    while isinstance(node, Pair) and not node.is_empty():
        element = node.first
        if element is None:
            args.append(EmptyList)
        elif isinstance(element, Pair):
            args.append(evaluate0(element, max_depth, depth))
        else:
            args.append(element)
        node = node.second
    if node is not None and not isinstance(node, (Pair, EmptyListType)):
        args.append(node)
    return args
