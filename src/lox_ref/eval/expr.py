from __future__ import annotations

from lark import Token

from ..tree import Binary, Logical, Unary
from ..types import Frame, LoxBool, LoxNumber, LoxRuntimeError, LoxString, LoxTypeError, LoxValue
from ..utils import lox_equals
from .common import EvalFunc, check_divisor, require_number, require_numbers
from .helpers import is_truthy

def eval_unary(node: Unary, frame: Frame, eval_func: EvalFunc) -> LoxValue:
    rhs = eval_func(node.right, frame)
    op = node.operator

    match op.type:
        case 'MINUS':
            return LoxNumber(-require_number(op, rhs))
        case 'BANG':
            return LoxBool(not is_truthy(rhs))
        case _:
            raise LoxRuntimeError(f"Unsupported unary operator '{op.value}'", op)

def eval_binary(node: Binary, frame: Frame, eval_func: EvalFunc) -> LoxValue:
    lhs = eval_func(node.left, frame)
    rhs = eval_func(node.right, frame)

    return apply_binary_operator(node.operator, lhs, rhs)

def eval_logical(node: Logical, frame: Frame, eval_func: EvalFunc) -> LoxValue:
    lhs = eval_func(node.left, frame)

    match node.operator.type:
        case 'OR':
            if is_truthy(lhs):
                return lhs
        case 'AND':
            if not is_truthy(lhs):
                return lhs
        case _:
            raise LoxRuntimeError(f"Unsupported logical operator '{node.operator.value}'", node.operator)

    return eval_func(node.right, frame)

def apply_binary_operator(op: Token, lhs: LoxValue, rhs: LoxValue) -> LoxValue:
    match op.type:
        case 'EQUAL_EQUAL':
            return LoxBool(lox_equals(lhs, rhs))
        case 'BANG_EQUAL':
            return LoxBool(not lox_equals(lhs, rhs))
        case 'PLUS':
            if isinstance(lhs, LoxNumber) and isinstance(rhs, LoxNumber):
                return LoxNumber(lhs.value + rhs.value)
            if isinstance(lhs, LoxString) and isinstance(rhs, LoxString):
                return LoxString(lhs.value + rhs.value)
            raise LoxTypeError("Operands must be two numbers or two strings.", op)

    a, b = require_numbers(op, lhs, rhs)

    match op.type:
        case 'GREATER':
            return LoxBool(a > b)
        case 'GREATER_EQUAL':
            return LoxBool(a >= b)
        case 'LESS':
            return LoxBool(a < b)
        case 'LESS_EQUAL':
            return LoxBool(a <= b)
        case 'MINUS':
            return LoxNumber(a - b)
        case 'STAR':
            return LoxNumber(a * b)
        case 'SLASH':
            check_divisor(op, b)
            return LoxNumber(a / b)

    raise LoxRuntimeError(f"Unknown operator {op.value}", op)
