from __future__ import annotations

import sys
import traceback
from typing import Callable, Iterable, Optional

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
    Node,
    PrintStmt,
    Stmt,
    Unary,
    Variable,
    VarStmt,
    node_token,
    token_name,
)
from .types import Frame, LoxRuntimeError, LoxValue
from .utils import debug_py_trace_enabled

from .eval.bind import eval_assign
from .eval.blocks import eval_block, eval_program
from .eval.control import eval_if_stmt, eval_print_stmt
from .eval.expr import eval_binary, eval_logical, eval_unary
from .eval.let import eval_var_stmt

Reporter = Callable[[LoxRuntimeError], None]


def _maybe_attach_location(exc: LoxRuntimeError, node: Node) -> None:
    if exc.token is not None:
        return

    tok = node_token(node)
    if tok is not None:
        exc.token = tok

# ---------------- Public API ----------------

def report_runtime_error(exc: LoxRuntimeError) -> None:
    fault = exc.fault()
    print(f"{fault.kind}: {exc}", file=sys.stderr)

    line_text = exc.source_line()
    if line_text is not None:
        print(f"    {line_text}", file=sys.stderr)

    if debug_py_trace_enabled() and exc.__traceback__ is not None:
        print("\nPython traceback:", file=sys.stderr)
        print("".join(traceback.format_tb(exc.__traceback__)), file=sys.stderr, end="")


def interpret(statements: Iterable[Stmt], frame: Optional[Frame]=None, report: Optional[Reporter]=None) -> Optional[LoxRuntimeError]:
    """Run a program against `frame` (a fresh global frame by default).

    The first runtime error stops the run and goes to `report`; whatever
    already executed keeps its effects. Returns that error, or None.
    """
    if frame is None:
        frame = Frame()

    try:
        eval_program(statements, frame, exec_stmt)
    except LoxRuntimeError as e:
        if e.source is None:
            e.source = frame.source
        (report or report_runtime_error)(e)
        return e

    return None


def eval_expr(ast: Expr, frame: Optional[Frame]=None, source: Optional[str]=None) -> LoxValue:
    if frame is None:
        frame = Frame(source=source)
    elif source is not None:
        frame.source = source

    try:
        return eval_node(ast, frame)
    except LoxRuntimeError as e:
        if e.source is None:
            e.source = frame.source
        raise

# ---------------- Core evaluator ----------------

def eval_node(n: Expr, frame: Frame) -> LoxValue:
    try:
        return _eval_node_inner(n, frame)
    except LoxRuntimeError as e:
        _maybe_attach_location(e, n)
        raise


def _eval_node_inner(n: Expr, frame: Frame) -> LoxValue:
    match n:
        case Literal(value=value):
            return value
        case Grouping(expression=inner):
            return eval_node(inner, frame)
        case Variable(name=name):
            return frame.get(token_name(name))
        case Assign():
            return eval_assign(n, frame, eval_node)
        case Unary():
            return eval_unary(n, frame, eval_node)
        case Binary():
            return eval_binary(n, frame, eval_node)
        case Logical():
            return eval_logical(n, frame, eval_node)
        case _:
            raise LoxRuntimeError(f"Unknown expression node: {type(n).__name__}")


def exec_stmt(s: Stmt, frame: Frame) -> None:
    try:
        _exec_stmt_inner(s, frame)
    except LoxRuntimeError as e:
        _maybe_attach_location(e, s)
        raise


def _exec_stmt_inner(s: Stmt, frame: Frame) -> None:
    match s:
        case ExpressionStmt(expression=expr):
            eval_node(expr, frame)
        case PrintStmt():
            eval_print_stmt(s, frame, eval_node)
        case VarStmt():
            eval_var_stmt(s, frame, eval_node)
        case BlockStmt():
            eval_block(s, frame, exec_stmt)
        case IfStmt():
            eval_if_stmt(s, frame, eval_node, exec_stmt)
        case _:
            raise LoxRuntimeError(f"Unknown statement node: {type(s).__name__}")
