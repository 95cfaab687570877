from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator

from ..tree import BlockStmt, Stmt
from ..types import Frame
from .common import ExecFunc

@contextmanager
def child_scope(frame: Frame) -> Iterator[Frame]:
    """Yield a fresh frame enclosed by `frame`, dropped when the block exits.

    The caller keeps its own reference to `frame`, so leaving the block by an
    exception restores the outer scope the same way a normal exit does.
    """
    scope = Frame(parent=frame)

    try:
        yield scope
    finally:
        scope.vars.clear()

def eval_block(node: BlockStmt, frame: Frame, exec_func: ExecFunc) -> None:
    with child_scope(frame) as scope:
        eval_program(node.statements, scope, exec_func)

def eval_program(statements: Iterable[Stmt], frame: Frame, exec_func: ExecFunc) -> None:
    for stmt in statements:
        exec_func(stmt, frame)
