from __future__ import annotations

from ..tree import Assign, token_name
from ..types import Frame, LoxValue
from .common import EvalFunc

def eval_assign(node: Assign, frame: Frame, eval_func: EvalFunc) -> LoxValue:
    """Rebind the nearest existing `name`; assignment never creates a global."""
    value = eval_func(node.value, frame)
    frame.assign(token_name(node.name), value)

    return value
