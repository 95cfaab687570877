"""Parenthesized rendering of expression trees, for tracing and tests."""
from __future__ import annotations

from .tree import Assign, Binary, Expr, Grouping, Literal, Logical, Unary, Variable, token_name
from .utils import stringify


def print_ast(expr: Expr) -> str:
    match expr:
        case Literal(value=value):
            return stringify(value)
        case Grouping(expression=inner):
            return _parenthesize("group", inner)
        case Unary(operator=op, right=right):
            return _parenthesize(token_name(op), right)
        case Binary(left=left, operator=op, right=right) | Logical(left=left, operator=op, right=right):
            return _parenthesize(token_name(op), left, right)
        case Variable(name=name):
            return token_name(name)
        case Assign(name=name, value=value):
            return _parenthesize(f"= {token_name(name)}", value)
        case _:
            raise TypeError(f"Cannot print {type(expr).__name__}")


def _parenthesize(name: str, *exprs: Expr) -> str:
    parts = [name]
    parts.extend(print_ast(e) for e in exprs)

    return "(" + " ".join(parts) + ")"
