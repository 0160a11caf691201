import pytest
from hypothesis import given, strategies as st

from schemelet.errors import SchemeSyntaxError
from schemelet.printer import serialize
from schemelet.reader.parser import Parser, read
from schemelet.reader.tokenizer import Tokenizer
from schemelet.types import Boolean, EmptyList, Number, Pair, Symbol

QUOTE = Symbol("quote")


def _list(*items):
    head = None
    for item in reversed(items):
        head = Pair(item, head)
    return head


@pytest.mark.parametrize(
    "source, expected",
    [
        ("42", Number(42)),
        ("-3", Number(-3)),
        ("foo", Symbol("foo")),
        ("#f", Boolean(False)),
        (".", Symbol(".")),
        ("(1 2 3)", _list(Number(1), Number(2), Number(3))),
        ("(1 . 2)", Pair(Number(1), Number(2))),
        ("(1 2 . 3)", Pair(Number(1), Pair(Number(2), Number(3)))),
        ("(a . (b c))", _list(Symbol("a"), Symbol("b"), Symbol("c"))),
        ("(1 (2 3))", _list(Number(1), _list(Number(2), Number(3)))),
        ("'a", Pair(QUOTE, Symbol("a"))),
        ("'()", Pair(QUOTE, None)),
        ("'(1)", Pair(QUOTE, _list(Number(1)))),
        ("(quote a)", Pair(QUOTE, Symbol("a"))),
        ("(quote ())", Pair(QUOTE, None)),
        ("(list (quote a) b)", _list(Symbol("list"), Pair(QUOTE, Symbol("a")), Symbol("b"))),
        ("(())", _list(EmptyList)),
        ("(1 ())", _list(Number(1), EmptyList)),
        ("(1 2) 3", _list(Number(1), Number(2))),
    ],
)
def test_parser(source, expected):
    assert read(source) == expected


def test_empty_list_reads_as_absent():
    assert read("()") is None
    assert read("  ( )  ") is None


@pytest.mark.parametrize(
    "source",
    [
        "",
        "(",
        "(1 2",
        ")",
        "'",
        "( . 1)",
        "(1 .)",
        "(1 . 2 3)",
        "(1 . 2 . 3)",
        "(quote)",
        "(quote 1 2)",
        "(quote 1",
    ],
)
def test_parser_rejects(source):
    with pytest.raises(SchemeSyntaxError):
        read(source)


def test_parser_reads_one_expression_per_call():
    parser = Parser(Tokenizer("1 (2) x"))
    assert parser.read_expr() == Number(1)
    assert parser.read_expr() == _list(Number(2))
    assert parser.read_expr() == Symbol("x")
    assert parser.tokens.is_end()


def test_nesting_limit():
    assert read("((((1))))", max_depth=4) == _list(_list(_list(_list(Number(1)))))
    with pytest.raises(SchemeSyntaxError):
        read("((((1))))", max_depth=3)
    with pytest.raises(SchemeSyntaxError):
        read("''''a", max_depth=3)


def test_long_flat_lists_do_not_count_as_nesting():
    source = "(" + " ".join(["1"] * 5000) + ")"
    tree = read(source, max_depth=2)
    assert sum(1 for _ in tree.nodes()) == 5000


@pytest.mark.parametrize(
    "source",
    ["7", "#t", "#f", "sym", "(1 2 3)", "(1 . 2)", "(a (b c) . d)", "(1 ())", "((1) (2 (3)))"],
)
def test_read_then_serialize(source):
    assert serialize(read(source)) == source


@given(st.lists(st.integers(min_value=-2**31, max_value=2**31 - 1)))
def test_integer_lists_round_trip(numbers):
    source = "(" + " ".join(str(n) for n in numbers) + ")"
    assert serialize(read(source)) == source
