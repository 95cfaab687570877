from __future__ import annotations

import pytest

from tests.support.harness import binary, boolean, ident, logical, nil, num, text, unary, var
from lox_ref.parser import parse_expression
from lox_ref.printer import print_ast
from lox_ref.tree import Assign, Grouping, PrintStmt


def test_classic_tree() -> None:
    expr = binary(unary("MINUS", num(123)), "STAR", Grouping(num(45.67)))

    assert print_ast(expr) == "(* (- 123) (group 45.67))"


@pytest.mark.parametrize(
    "expr, expected",
    [
        pytest.param(nil(), "nil", id="nil"),
        pytest.param(boolean(False), "false", id="bool"),
        pytest.param(text("hi"), "hi", id="string"),
        pytest.param(var("a"), "a", id="variable"),
        pytest.param(Assign(ident("a"), num(1)), "(= a 1)", id="assign"),
        pytest.param(logical(var("a"), "OR", nil()), "(or a nil)", id="logical"),
        pytest.param(unary("BANG", boolean(True)), "(! true)", id="not"),
    ],
)
def test_print_nodes(expr, expected: str) -> None:
    assert print_ast(expr) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        pytest.param("1 + 2 * 3", "(+ 1 (* 2 3))", id="precedence"),
        pytest.param("(1 + 2) * 3", "(* (group (+ 1 2)) 3)", id="grouping"),
        pytest.param("1 - 2 - 3", "(- (- 1 2) 3)", id="left-assoc"),
        pytest.param("a = b = 1", "(= a (= b 1))", id="right-assoc-assign"),
        pytest.param("a or b and c", "(or a (and b c))", id="and-binds-tighter"),
        pytest.param("!-1 >= 2 == true", "(== (>= (! (- 1)) 2) true)", id="unary-chain"),
        pytest.param('"a" != nil', "(!= a nil)", id="string-literal"),
    ],
)
def test_print_parsed_expressions(source: str, expected: str) -> None:
    assert print_ast(parse_expression(source)) == expected


def test_printer_rejects_statements() -> None:
    with pytest.raises(TypeError):
        print_ast(PrintStmt(num(1)))
