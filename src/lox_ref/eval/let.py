from __future__ import annotations

from ..tree import VarStmt, token_name
from ..types import Frame, LoxNil, LoxValue
from .common import EvalFunc

def eval_var_stmt(node: VarStmt, frame: Frame, eval_func: EvalFunc) -> None:
    value: LoxValue = LoxNil()

    if node.initializer is not None:
        value = eval_func(node.initializer, frame)

    # redeclaring in the same frame overwrites
    frame.define(token_name(node.name), value)
