"""AST node classes consumed by the evaluator.

Operator and name slots hold lark Tokens so every node that can fault knows
the line it came from.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from lark import Token
from typing_extensions import TypeAlias

from .types import LoxValue

# ---------------- Expressions ----------------

@dataclass(frozen=True)
class Literal:
    value: LoxValue

@dataclass(frozen=True)
class Grouping:
    expression: 'Expr'

@dataclass(frozen=True)
class Unary:
    operator: Token
    right: 'Expr'

@dataclass(frozen=True)
class Binary:
    left: 'Expr'
    operator: Token
    right: 'Expr'

@dataclass(frozen=True)
class Logical:
    left: 'Expr'
    operator: Token
    right: 'Expr'

@dataclass(frozen=True)
class Variable:
    name: Token

@dataclass(frozen=True)
class Assign:
    name: Token
    value: 'Expr'

Expr: TypeAlias = Union[Literal, Grouping, Unary, Binary, Logical, Variable, Assign]

# ---------------- Statements ----------------

@dataclass(frozen=True)
class ExpressionStmt:
    expression: Expr

@dataclass(frozen=True)
class PrintStmt:
    expression: Expr

@dataclass(frozen=True)
class VarStmt:
    name: Token
    initializer: Optional[Expr] = None

@dataclass(frozen=True)
class BlockStmt:
    statements: Tuple['Stmt', ...]

@dataclass(frozen=True)
class IfStmt:
    condition: Expr
    then_branch: 'Stmt'
    else_branch: Optional['Stmt'] = None

Stmt: TypeAlias = Union[ExpressionStmt, PrintStmt, VarStmt, BlockStmt, IfStmt]

Node: TypeAlias = Union[Expr, Stmt]

def node_token(node: Node) -> Optional[Token]:
    match node:
        case Unary(operator=tok) | Binary(operator=tok) | Logical(operator=tok):
            return tok
        case Variable(name=tok) | Assign(name=tok) | VarStmt(name=tok):
            return tok
        case _:
            return None

def token_name(tok: Token | str) -> str:
    return str(tok.value) if isinstance(tok, Token) else str(tok)
