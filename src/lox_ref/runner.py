from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Tuple

from .evaluator import Reporter, eval_expr, interpret
from .parser import parse_expression, parse_source
from .types import Frame, LoxParseError, LoxRuntimeError, LoxValue

EXIT_OK = 0
EXIT_PARSE_ERROR = 65
EXIT_RUNTIME_ERROR = 70

def run(src: str, frame: Optional[Frame]=None, report: Optional[Reporter]=None) -> Optional[LoxRuntimeError]:
    """Parse and execute `src`. Parse errors raise; runtime errors go to `report`."""
    statements = parse_source(src)

    if frame is None:
        frame = Frame(source=src)
    else:
        frame.source = src

    return interpret(statements, frame, report=report)

def repl_eval(src: str, frame: Frame, report: Optional[Reporter]=None) -> Tuple[Optional[LoxValue], bool]:
    """Evaluate one REPL entry against a persistent frame.

    Returns (value, is_stmt): statements yield (None, True), a bare
    expression yields its value so the REPL can echo it.
    """
    try:
        statements = parse_source(src)
    except LoxParseError as stmt_err:
        try:
            expr = parse_expression(src)
        except LoxParseError:
            raise stmt_err from None

        return eval_expr(expr, frame, source=src), False

    frame.source = src
    interpret(statements, frame, report=report)
    return None, True

def _load_source(arg: Optional[str]) -> str:
    """
    Resolve CLI input into source text.
    - "-" => read stdin.
    - Otherwise the argument is a script path.
    """

    if arg == "-":
        return sys.stdin.read()

    candidate = Path(arg)
    if not candidate.exists():
        raise SystemExit(f"No such file: {arg}")

    return candidate.read_text(encoding="utf-8")

def run_file(arg: str) -> int:
    source = _load_source(arg)

    try:
        err = run(source)
    except LoxParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    return EXIT_RUNTIME_ERROR if err is not None else EXIT_OK

def main() -> None:
    args = sys.argv[1:]

    if len(args) > 1:
        raise SystemExit("Usage: lox-ref [script|-]")

    if not args:
        from .repl import repl  # prompt_toolkit only needed interactively
        repl()
        return

    sys.exit(run_file(args[0]))

if __name__ == "__main__":
    main()
