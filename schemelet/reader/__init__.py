from schemelet.reader.parser import Parser, read
from schemelet.reader.tokenizer import Tokenizer, lex

__all__ = ["Parser", "Tokenizer", "lex", "read"]
