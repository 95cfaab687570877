from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional, TextIO

from lark import Token
from typing_extensions import TypeAlias

# ---------- Value Model ----------

@dataclass
class LoxNil:
    def __repr__(self) -> str:
        return "nil"

@dataclass
class LoxBool:
    value: bool
    def __repr__(self) -> str:
        return "true" if self.value else "false"

@dataclass
class LoxNumber:
    value: float
    def __repr__(self) -> str:
        v = float(self.value)
        if math.isnan(v):
            return "NaN"
        if math.isinf(v):
            return "Infinity" if v > 0 else "-Infinity"

        text = repr(v)
        return text[:-2] if text.endswith(".0") else text

@dataclass
class LoxString:
    value: str
    def __repr__(self) -> str:
        return f'"{self.value}"'

LoxValue: TypeAlias = LoxNil | LoxBool | LoxNumber | LoxString

# ---------- Scope chain ----------

class Frame:
    def __init__(self, parent: Optional['Frame']=None, source: Optional[str]=None, out: Optional[TextIO]=None):
        self.parent = parent
        self.vars: Dict[str, LoxValue] = {}
        self.source: Optional[str]
        self.out: Optional[TextIO]

        if source is not None:
            self.source = source
        elif parent is not None:
            self.source = parent.source
        else:
            self.source = None

        if out is not None:
            self.out = out
        elif parent is not None:
            self.out = parent.out
        else:
            self.out = None

    def define(self, name: str, val: LoxValue) -> None:
        self.vars[name] = val

    def get(self, name: str) -> LoxValue:
        if name in self.vars:
            return self.vars[name]

        if self.parent is not None:
            return self.parent.get(name)

        raise LoxUndefinedVariable(name)

    def assign(self, name: str, val: LoxValue) -> None:
        if name in self.vars:
            self.vars[name] = val
            return

        if self.parent is not None:
            self.parent.assign(name, val)
            return

        raise LoxUndefinedVariable(name)

# ---------- Exceptions ----------

@dataclass(frozen=True)
class RuntimeFault:
    """What a reporter gets to see about a runtime error."""
    kind: str
    message: str
    line: Optional[int]

class LoxRuntimeError(Exception):
    kind = "RuntimeError"

    def __init__(self, message: str, token: Optional[Token]=None):
        super().__init__(message)
        self.message = message
        self.token = token
        self.source: Optional[str] = None

    @property
    def line(self) -> Optional[int]:
        return getattr(self.token, "line", None) if self.token is not None else None

    def source_line(self) -> Optional[str]:
        """The program line the fault points at, when both are known."""
        line = self.line
        if self.source is None or line is None:
            return None

        lines = self.source.splitlines()
        if not 1 <= line <= len(lines):
            return None

        return lines[line - 1]

    def fault(self) -> RuntimeFault:
        return RuntimeFault(kind=self.kind, message=self.message, line=self.line)

    def __str__(self) -> str:
        msg = super().__str__()

        line = self.line
        if line is None:
            return msg

        col = getattr(self.token, "column", None)
        if col is None:
            return f"{msg} (line {line})"

        return f"{msg} (line {line}, col {col})"

class LoxTypeError(LoxRuntimeError):
    kind = "TypeMismatch"

class LoxZeroDivisionError(LoxRuntimeError):
    kind = "DivisionByZero"

    def __init__(self, token: Optional[Token]=None):
        super().__init__("Cannot perform division by zero.", token)

class LoxUndefinedVariable(LoxRuntimeError):
    kind = "UndefinedVariable"

    def __init__(self, name: str, token: Optional[Token]=None):
        super().__init__(f"Undefined variable '{name}'.", token)
        self.name = name

class LoxParseError(Exception):
    def __init__(self, message: str, line: Optional[int]=None, column: Optional[int]=None):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        msg = super().__str__()

        if self.line is None:
            return msg

        return f"{msg} (line {self.line}, col {self.column})"
