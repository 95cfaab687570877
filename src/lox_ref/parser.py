"""lark front end: source text -> the dataclass AST in `tree`."""
from __future__ import annotations

from functools import lru_cache
from typing import List

from lark import Lark, Token, Transformer, UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken
from lark.visitors import v_args

from .tree import (
    Assign,
    Binary,
    BlockStmt,
    Expr,
    ExpressionStmt,
    Grouping,
    IfStmt,
    Literal,
    Logical,
    PrintStmt,
    Stmt,
    Unary,
    Variable,
    VarStmt,
)
from .types import LoxBool, LoxNil, LoxNumber, LoxParseError, LoxString

GRAMMAR = r"""
program: declaration*

?declaration: var_decl
            | statement

var_decl: "var" IDENTIFIER ("=" expression)? ";"

?statement: print_stmt
          | if_stmt
          | block
          | expr_stmt

print_stmt: "print" expression ";"
if_stmt: "if" "(" expression ")" statement ("else" statement)?
block: "{" declaration* "}"
expr_stmt: expression ";"

?expression: assignment

?assignment: IDENTIFIER "=" assignment -> assign
           | logic_or

?logic_or: logic_and
         | logic_or OR logic_and -> logical

?logic_and: equality
          | logic_and AND equality -> logical

?equality: comparison
         | equality (BANG_EQUAL | EQUAL_EQUAL) comparison -> binary

?comparison: term
           | comparison (GREATER | GREATER_EQUAL | LESS | LESS_EQUAL) term -> binary

?term: factor
     | term (MINUS | PLUS) factor -> binary

?factor: unary
       | factor (SLASH | STAR) unary -> binary

?unary: (BANG | MINUS) unary -> unary_op
      | primary

?primary: NUMBER -> number
        | STRING -> string
        | TRUE -> true
        | FALSE -> false
        | NIL -> nil
        | IDENTIFIER -> variable
        | "(" expression ")" -> grouping

AND: "and"
OR: "or"
TRUE: "true"
FALSE: "false"
NIL: "nil"

BANG_EQUAL: "!="
EQUAL_EQUAL: "=="
GREATER_EQUAL: ">="
GREATER: ">"
LESS_EQUAL: "<="
LESS: "<"
MINUS: "-"
PLUS: "+"
SLASH: "/"
STAR: "*"
BANG: "!"

NUMBER: /\d+(\.\d+)?/
STRING: /"[^"]*"/
IDENTIFIER: /[A-Za-z_][A-Za-z0-9_]*/
COMMENT: /\/\/[^\n]*/

%import common.WS
%ignore WS
%ignore COMMENT
"""


@lru_cache(maxsize=None)
def build_parser() -> Lark:
    # dangling else resolves as shift: it binds to the nearest if
    return Lark(
        GRAMMAR,
        parser="lalr",
        start=["program", "expression"],
        maybe_placeholders=False,
    )


@v_args(inline=True)
class AstBuilder(Transformer):
    def program(self, *stmts: Stmt) -> List[Stmt]:
        return list(stmts)

    def var_decl(self, name: Token, initializer: Expr | None = None) -> VarStmt:
        return VarStmt(name, initializer)

    def print_stmt(self, expr: Expr) -> PrintStmt:
        return PrintStmt(expr)

    def if_stmt(self, condition: Expr, then_branch: Stmt, else_branch: Stmt | None = None) -> IfStmt:
        return IfStmt(condition, then_branch, else_branch)

    def block(self, *stmts: Stmt) -> BlockStmt:
        return BlockStmt(tuple(stmts))

    def expr_stmt(self, expr: Expr) -> ExpressionStmt:
        return ExpressionStmt(expr)

    def assign(self, name: Token, value: Expr) -> Assign:
        return Assign(name, value)

    def logical(self, left: Expr, op: Token, right: Expr) -> Logical:
        return Logical(left, op, right)

    def binary(self, left: Expr, op: Token, right: Expr) -> Binary:
        return Binary(left, op, right)

    def unary_op(self, op: Token, right: Expr) -> Unary:
        return Unary(op, right)

    def grouping(self, expr: Expr) -> Grouping:
        return Grouping(expr)

    def variable(self, name: Token) -> Variable:
        return Variable(name)

    def number(self, tok: Token) -> Literal:
        return Literal(LoxNumber(float(tok.value)))

    def string(self, tok: Token) -> Literal:
        return Literal(LoxString(tok.value[1:-1]))

    def true(self, _tok: Token) -> Literal:
        return Literal(LoxBool(True))

    def false(self, _tok: Token) -> Literal:
        return Literal(LoxBool(False))

    def nil(self, _tok: Token) -> Literal:
        return Literal(LoxNil())


def _position(value: object) -> int | None:
    # lark uses -1 (or '?') when it has no position
    return value if isinstance(value, int) and value > 0 else None


def _parse_error(exc: UnexpectedInput) -> LoxParseError:
    line = _position(getattr(exc, "line", None))
    column = _position(getattr(exc, "column", None))

    if isinstance(exc, UnexpectedEOF):
        message = "Unexpected end of input"
    elif isinstance(exc, UnexpectedToken):
        if exc.token.type == "$END":
            message = "Unexpected end of input"
        else:
            message = f"Unexpected token '{exc.token.value}'"
    elif isinstance(exc, UnexpectedCharacters):
        message = f"Unexpected character '{exc.char}'"
    else:
        message = "Syntax error"

    return LoxParseError(message, line, column)


def parse_source(source: str) -> List[Stmt]:
    try:
        tree = build_parser().parse(source, start="program")
    except UnexpectedInput as exc:
        raise _parse_error(exc) from exc

    return AstBuilder().transform(tree)


def parse_expression(source: str) -> Expr:
    try:
        tree = build_parser().parse(source, start="expression")
    except UnexpectedInput as exc:
        raise _parse_error(exc) from exc

    return AstBuilder().transform(tree)
