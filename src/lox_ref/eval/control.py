from __future__ import annotations

import sys

from ..tree import IfStmt, PrintStmt
from ..types import Frame
from ..utils import stringify
from .common import EvalFunc, ExecFunc
from .helpers import is_truthy

def eval_if_stmt(node: IfStmt, frame: Frame, eval_func: EvalFunc, exec_func: ExecFunc) -> None:
    if is_truthy(eval_func(node.condition, frame)):
        exec_func(node.then_branch, frame)
    elif node.else_branch is not None:
        exec_func(node.else_branch, frame)

def eval_print_stmt(node: PrintStmt, frame: Frame, eval_func: EvalFunc) -> None:
    value = eval_func(node.expression, frame)
    out = frame.out if frame.out is not None else sys.stdout
    print(stringify(value), file=out)
