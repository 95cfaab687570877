from __future__ import annotations

import os

from .types import LoxBool, LoxNil, LoxNumber, LoxString, LoxValue


def debug_py_trace_enabled() -> bool:
    return os.environ.get("LOX_DEBUG_PY_TRACE", "") not in ("", "0")


def lox_equals(lhs: LoxValue, rhs: LoxValue) -> bool:
    match (lhs, rhs):
        case (LoxNil(), LoxNil()):
            return True
        case (LoxNumber(value=a), LoxNumber(value=b)):
            return a == b
        case (LoxString(value=a), LoxString(value=b)):
            return a == b
        case (LoxBool(value=a), LoxBool(value=b)):
            return a == b
        case _:
            return False


def stringify(value: LoxValue) -> str:
    if isinstance(value, LoxNil):
        return "nil"

    if isinstance(value, LoxNumber):
        return repr(value)

    if isinstance(value, LoxString):
        return value.value

    if isinstance(value, LoxBool):
        return "true" if value.value else "false"

    return str(value)
