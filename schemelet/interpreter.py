from __future__ import annotations

import logging
from typing import Optional, TextIO, Union

from schemelet.config import get_max_depth
from schemelet.evaluation.evaluator import evaluate
from schemelet.printer import serialize
from schemelet.reader.parser import Parser
from schemelet.reader.tokenizer import Tokenizer
from schemelet.types import Value

logger = logging.getLogger(__name__)

Source = Union[str, TextIO]


class Interpreter:
    """
    Reads one expression from a source, evaluates it against the builtins and
    serializes the result. Holds no state between calls besides its settings.
    """

    def __init__(self, max_depth: int | None = None):
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()

    def read(self, source: Source) -> Optional[Value]:
        return Parser(Tokenizer(source), self.max_depth).read_expr()

    def eval(self, source: Source) -> Value:
        return evaluate(self.read(source), max_depth=self.max_depth)

    def run(self, source: Source) -> str:
        result = serialize(self.eval(source))
        logger.debug("run %r => %s", source, result)
        return result


def run(source: Source) -> str:
    """Evaluate the first expression of `source` and return the serialized result."""
    return Interpreter().run(source)
