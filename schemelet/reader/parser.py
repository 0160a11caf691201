"""
  Recursive-descent parser: tokens -> one value-tree built from Pair cells.

    ()          -> None (the absent value; a `()` inside a list is EmptyList)
    'x          -> Pair(Symbol("quote"), x)
    (quote x)   -> Pair(Symbol("quote"), x)
    (a b c)     -> Pair(a, Pair(b, Pair(c)))
    (a . b)     -> Pair(a, b)

  Only one expression is read per call; whatever follows it is left in the
  tokenizer.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO, Union

from schemelet.config import get_max_depth
from schemelet.errors import SchemeSyntaxError
from schemelet.reader.tokenizer import (
    BooleanToken,
    BracketToken,
    ConstantToken,
    DotToken,
    QuoteToken,
    SymbolToken,
    Tokenizer,
)
from schemelet.types import Boolean, EmptyList, Number, Pair, Symbol, Value

logger = logging.getLogger(__name__)

QUOTE = Symbol("quote")
# Returned by read_expr for a bare '.'; only read_list gives it meaning.
DOT = Symbol(".")


class Parser:
    def __init__(self, tokenizer: Tokenizer, max_depth: int | None = None):
        self.tokens = tokenizer
        self.max_depth = max_depth if max_depth is not None else get_max_depth()
        self._depth = 0

    def read_expr(self) -> Optional[Value]:
        if self.tokens.is_end():
            raise SchemeSyntaxError("Invalid input")

        token = self.tokens.current_token()
        match token:
            case BooleanToken(state):
                self.tokens.advance()
                return Boolean(state)
            case QuoteToken():
                self.tokens.advance()
                return self._read_quoted()
            case ConstantToken(value):
                self.tokens.advance()
                return Number(value)
            case SymbolToken(name):
                self.tokens.advance()
                return Symbol(name)
            case DotToken():
                self.tokens.advance()
                return DOT
            case BracketToken.OPEN:
                self.tokens.advance()
                if self._at(BracketToken.CLOSE):
                    self.tokens.advance()
                    return None
                current = self.tokens.current_token()
                if not self.tokens.is_end() and current == SymbolToken("quote"):
                    self.tokens.advance()
                    quoted = self._read_quoted()
                    if not self._at(BracketToken.CLOSE):
                        raise SchemeSyntaxError("Invalid Usage of Quote")
                    self.tokens.advance()
                    return quoted
                return self.read_list()
        raise SchemeSyntaxError("Invalid input")

    def read_list(self) -> Pair:
        """Read list elements up to and including the closing bracket."""
        with self._nesting():
            root = Pair()
            tail = root
            while True:
                if self.tokens.is_end():
                    raise SchemeSyntaxError("Invalid input")
                if self._at(BracketToken.CLOSE):
                    break

                value = self.read_expr()

                if value == DOT:
                    if tail.first is None or tail.second is not None:
                        raise SchemeSyntaxError("Invalid Pair")
                    tail.second = self.read_expr()
                    continue

                if value is None:
                    value = EmptyList
                if tail.first is None:
                    tail.first = value
                elif tail.second is not None:
                    raise SchemeSyntaxError("Invalid List")
                else:
                    tail.second = Pair(value)
                    tail = tail.second
            self.tokens.advance()
            return root

    def _read_quoted(self) -> Pair:
        if self.tokens.is_end():
            raise SchemeSyntaxError("Invalid Usage of Quote")
        with self._nesting():
            return Pair(QUOTE, self.read_expr())

    @contextmanager
    def _nesting(self) -> Iterator[None]:
        self._depth += 1
        try:
            if self._depth > self.max_depth:
                raise SchemeSyntaxError(f"Nesting deeper than {self.max_depth} levels")
            yield
        finally:
            self._depth -= 1

    def _at(self, token) -> bool:
        return not self.tokens.is_end() and self.tokens.current_token() == token


def read(source: Union[str, TextIO], max_depth: int | None = None) -> Optional[Value]:
    """Read the first expression of `source`."""
    expr = Parser(Tokenizer(source), max_depth).read_expr()
    logger.debug("read %r", expr)
    return expr
