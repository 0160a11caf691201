# Schemelet: a small Scheme subset.
#
# Pipeline: characters -> reader.tokenizer -> reader.parser -> one value-tree
# -> evaluation.evaluator (consulting builtin.BUILTINS) -> printer.serialize.
#
# Values are the closed set in `schemelet.types`; there are no variables,
# no user procedures and one expression is evaluated per call.

from schemelet.errors import (
    SchemeArityError,
    SchemeError,
    SchemeNameError,
    SchemeRuntimeError,
    SchemeSyntaxError,
    SchemeTypeError,
)
from schemelet.interpreter import Interpreter, run

__version__ = "0.1.0"

__all__ = [
    "Interpreter",
    "SchemeArityError",
    "SchemeError",
    "SchemeNameError",
    "SchemeRuntimeError",
    "SchemeSyntaxError",
    "SchemeTypeError",
    "run",
]
