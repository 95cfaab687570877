"""Interactive REPL for Lox, powered by prompt_toolkit."""

from __future__ import annotations

import os
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from .evaluator import report_runtime_error
from .runner import repl_eval
from .types import Frame, LoxParseError, LoxRuntimeError
from .utils import debug_py_trace_enabled, stringify

_TRACE_ENV = "LOX_DEBUG_PY_TRACE"


def _set_trace(arg: str) -> str | None:
    """Apply a /py-traceback argument; returns an error message on bad input."""
    choice = arg.lower()
    if choice == "":
        choice = "off" if debug_py_trace_enabled() else "on"

    if choice == "on":
        os.environ[_TRACE_ENV] = "1"
    elif choice == "off":
        os.environ.pop(_TRACE_ENV, None)
    else:
        return "Usage: /py-traceback [on|off]"

    return None


def _handle_slash(line: str, frame_box: list[Frame]) -> bool:
    """Handle /reset and /py-traceback. Returns True if the line was a command."""
    stripped = line.strip()
    if not stripped.startswith("/"):
        return False

    cmd, _, arg = stripped.partition(" ")

    match cmd:
        case "/reset":
            frame_box[0] = Frame()
            print("Environment reset.")
        case "/py-traceback":
            problem = _set_trace(arg.strip())
            if problem is not None:
                print(problem, file=sys.stderr)
            else:
                print(f"Python traceback: {'on' if debug_py_trace_enabled() else 'off'}")
        case _:
            print(f"Unknown command: {cmd} (try /reset or /py-traceback)", file=sys.stderr)

    return True


def repl() -> None:
    """Interactive read-eval-print loop with prompt_toolkit."""
    # boxed so /reset can swap the globals
    frame_box: list[Frame] = [Frame()]
    session: PromptSession[str] = PromptSession(history=InMemoryHistory())

    print("lox repl - Ctrl-D to exit, /reset, /py-traceback [on|off]")

    while True:
        try:
            text = session.prompt("> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("KeyboardInterrupt")
            continue

        if not text.strip():
            continue

        if _handle_slash(text, frame_box):
            continue

        try:
            value, is_stmt = repl_eval(text, frame_box[0])
        except LoxParseError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            continue
        except LoxRuntimeError as exc:
            # bare expressions bypass interpret(), so report here
            report_runtime_error(exc)
            continue

        if not is_stmt:
            print(stringify(value))
