"""
  Lazy tokenizer over a character stream.

  The tokenizer holds exactly one token (the one under the cursor) and an
  end-of-stream flag. Recognition order for the first non-blank character:

    '           -> QuoteToken
    .           -> DotToken
    ( )         -> BracketToken.OPEN / BracketToken.CLOSE
    digit       -> ConstantToken, greedy run of digits
    #t #f       -> BooleanToken
    +digit      -> ConstantToken (signed)
    -digit      -> ConstantToken (signed)
    identifier  -> SymbolToken, runs until blank, bracket, quote or dot
"""

from __future__ import annotations

import io
import logging
import string
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, TextIO, Union

from schemelet.config import INT_MAX, INT_MIN
from schemelet.errors import SchemeSyntaxError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SymbolToken:
    name: str


@dataclass(frozen=True)
class QuoteToken:
    pass


@dataclass(frozen=True)
class DotToken:
    pass


class BracketToken(Enum):
    OPEN = "("
    CLOSE = ")"


@dataclass(frozen=True)
class ConstantToken:
    value: int


@dataclass(frozen=True)
class BooleanToken:
    state: bool


Token = Union[SymbolToken, QuoteToken, DotToken, BracketToken, ConstantToken, BooleanToken]

_IDENTIFIER_START = frozenset(string.ascii_letters + string.digits + "<=>*/#?!-+")
_DELIMITERS = frozenset("()'.")


def _is_digit(char: str) -> bool:
    return char != "" and char in string.digits


def _is_symbol_char(char: str) -> bool:
    return char != "" and not char.isspace() and char not in _DELIMITERS


class Tokenizer:
    """Reads tokens one at a time from a text stream (or a string)."""

    def __init__(self, source: Union[str, TextIO]):
        self._stream: TextIO = io.StringIO(source) if isinstance(source, str) else source
        self._lookahead: str | None = None
        self._token: Token = SymbolToken("")
        self._at_end = False
        self.advance()

    def is_end(self) -> bool:
        return self._at_end

    def current_token(self) -> Token:
        return self._token

    def advance(self) -> None:
        """Skip blanks and consume exactly one token."""
        char = self._get()
        while char != "" and char.isspace():
            char = self._get()

        if char == "":
            self._at_end = True
            return

        self._token = self._scan(char)
        logger.debug("token %r", self._token)

    # --- character stream ---

    def _get(self) -> str:
        if self._lookahead is not None:
            char, self._lookahead = self._lookahead, None
            return char
        return self._stream.read(1)

    def _peek(self) -> str:
        if self._lookahead is None:
            self._lookahead = self._stream.read(1)
        return self._lookahead

    # --- token recognition ---

    def _scan(self, char: str) -> Token:
        if char == "'":
            return QuoteToken()
        if char == ".":
            return DotToken()
        if char == "(":
            return BracketToken.OPEN
        if char == ")":
            return BracketToken.CLOSE
        if _is_digit(char):
            return self._constant(char)
        if char == "#" and self._peek() in ("t", "f"):
            return BooleanToken(self._get() == "t")
        if char in "+-" and _is_digit(self._peek()):
            return self._constant(char)
        if char in _IDENTIFIER_START:
            name = char
            while _is_symbol_char(self._peek()):
                name += self._get()
            return SymbolToken(name)
        raise SchemeSyntaxError(f"Invalid Symbol: {char!r}")

    def _constant(self, prefix: str) -> ConstantToken:
        digits = prefix
        while _is_digit(self._peek()):
            digits += self._get()
        value = int(digits)
        if not INT_MIN <= value <= INT_MAX:
            raise SchemeSyntaxError(f"Constant out of range: {digits}")
        return ConstantToken(value)


def lex(source: Union[str, TextIO]) -> Iterator[Token]:
    """Token generator: yields every token of `source` in order."""
    tokenizer = Tokenizer(source)
    while not tokenizer.is_end():
        yield tokenizer.current_token()
        tokenizer.advance()
