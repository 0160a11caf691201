import pytest

from schemelet import errors


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(car (cons 1 2))", "1"),
        ("(cdr (cons 1 2))", "2"),
        ("(cons 1 (cons 2 '()))", "(1 2)"),
        ("(cons 1 2)", "(1 . 2)"),
        ("(cons '(1 2) 3)", "((1 2) . 3)"),
        ("(cons 1 '(2 3))", "(1 2 3)"),
        ("(cons '() '())", "(())"),
        ("(car '(1 2 3))", "1"),
        ("(car '((1 2) 3))", "(1 2)"),
        ("(cdr '(1 2 3))", "(2 3)"),
        ("(cdr '(1 2 . 3))", "(2 . 3)"),
        ("(cdr '(1))", "()"),
        ("(car (cdr '(1 2 3)))", "2"),
        ("(cons 1 (cdr '(2)))", "(1)"),
        ("(list)", "()"),
        ("(list 1 2 3)", "(1 2 3)"),
        ("(list '())", "()"),
        ("(list 1 '())", "(1 ())"),
        ("(list (list 1 2) 3)", "((1 2) 3)"),
        ("(list-ref (list 10 20 30) 0)", "10"),
        ("(list-ref (list 10 20 30) 2)", "30"),
        ("(list-ref '(1 2 . 3) 2)", "3"),
        ("(list-ref '((1 2) 3) 0)", "(1 2)"),
        ("(list-ref (list) 0)", "()"),
        ("(list-tail '(1 2 3) 0)", "(1 2 3)"),
        ("(list-tail '(1 2 3) 1)", "(2 3)"),
        ("(list-tail '(1 2 3) 3)", "()"),
        ("(list-tail '(1 2 . 3) 2)", "()"),
    ],
)
def test_list_operations(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list? '())", "#t"),
        ("(pair? '())", "#f"),
        ("(null? '())", "#t"),
        ("(null? '(1))", "#f"),
        ("(null? 1)", "#f"),
        ("(null? (cdr '(1)))", "#t"),
        ("(null? (list))", "#t"),
        ("(pair? '(1 2))", "#t"),
        ("(pair? '(1 . 2))", "#t"),
        ("(pair? '(1 2 3))", "#t"),
        ("(pair? (cons 1 2))", "#t"),
        ("(pair? 5)", "#f"),
        ("(pair? (list))", "#f"),
        ("(list? '(1 2))", "#t"),
        ("(list? '(1 . 2))", "#f"),
        ("(list? '(1 2 . 3))", "#f"),
        ("(list? (cons 1 '()))", "#t"),
        ("(list? (cons 1 2))", "#f"),
        ("(list? (list))", "#t"),
        ("(list? 5)", "#f"),
    ],
)
def test_list_predicates(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source",
    [
        "(list-ref (list 10 20 30) 5)",
        "(list-ref (list 10 20 30) 3)",
        "(list-ref '(1 2) -1)",
        "(list-ref 5 0)",
        "(list-ref '(1) #t)",
        "(list-ref '(1))",
        "(list-ref (list) 1)",
        "(list-tail '(1 2) 3)",
        "(list-tail '(1 2) -1)",
        "(list-tail 1 0)",
        "(car '())",
        "(cdr '())",
        "(car (list))",
        "(car 1)",
        "(car)",
        "(car '(1) '(2))",
        "(cons 1)",
        "(cons 1 2 3)",
        "(pair?)",
        "(null? 1 2)",
        "(list? '(1) '(2))",
    ],
)
def test_list_errors(run, source):
    with pytest.raises(errors.SchemeRuntimeError):
        run(source)


def test_list_ref_out_of_range_message(run):
    with pytest.raises(errors.SchemeRuntimeError, match="out of range"):
        run("(list-ref (list 10 20 30) 5)")
