from __future__ import annotations

from ..types import LoxBool, LoxNil, LoxValue

def is_truthy(val: LoxValue) -> bool:
    match val:
        case LoxNil():
            return False
        case LoxBool(value=b):
            return b
        case _:
            return True
