from __future__ import annotations

import math
from typing import Callable, Optional

from lark import Token

from ..tree import Expr, Stmt
from ..types import Frame, LoxNumber, LoxTypeError, LoxValue, LoxZeroDivisionError

EvalFunc = Callable[[Expr, Frame], LoxValue]
ExecFunc = Callable[[Stmt, Frame], None]

def require_number(operator: Optional[Token], operand: LoxValue) -> float:
    if isinstance(operand, LoxNumber):
        return operand.value

    raise LoxTypeError("Operand must be a number.", operator)

def require_numbers(operator: Optional[Token], lhs: LoxValue, rhs: LoxValue) -> tuple[float, float]:
    if isinstance(lhs, LoxNumber) and isinstance(rhs, LoxNumber):
        return lhs.value, rhs.value

    raise LoxTypeError("Operands must be numbers.", operator)

def check_divisor(operator: Optional[Token], divisor: float) -> None:
    # divisor rounded to the nearest integer (halves away from zero) is 0
    if math.isnan(divisor) or -0.5 < divisor < 0.5:
        raise LoxZeroDivisionError(operator)
