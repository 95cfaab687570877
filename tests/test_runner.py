from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

from tests.support.harness import Frame, LoxParseError, LoxZeroDivisionError, verify_result
from lox_ref import runner
from lox_ref.runner import EXIT_OK, EXIT_PARSE_ERROR, EXIT_RUNTIME_ERROR, repl_eval, run, run_file


def test_run_prints_in_order() -> None:
    out = io.StringIO()
    err = run('print 1; print "two"; print true;', Frame(out=out))

    assert err is None
    assert out.getvalue() == "1\ntwo\ntrue\n"


def test_run_records_source_on_frame() -> None:
    frame = Frame(out=io.StringIO())
    run("var a = 1;", frame)

    assert frame.source == "var a = 1;"


def test_run_raises_parse_errors() -> None:
    with pytest.raises(LoxParseError):
        run("print ;", Frame(out=io.StringIO()))


def test_run_returns_runtime_fault() -> None:
    seen = []
    err = run("print 1 / 0;", Frame(out=io.StringIO()), report=seen.append)

    assert isinstance(err, LoxZeroDivisionError)
    assert seen == [err]


def test_run_fault_report_quotes_offending_line(capsys: pytest.CaptureFixture[str]) -> None:
    err = run("print 1;\nprint 2 / 0;\nprint 3;", Frame(out=io.StringIO()))

    assert err is not None
    assert err.source_line() == "print 2 / 0;"
    captured = capsys.readouterr()
    assert captured.err.startswith("DivisionByZero: Cannot perform division by zero. (line 2")
    assert "\n    print 2 / 0;\n" in captured.err


def test_repl_eval_keeps_state_between_entries() -> None:
    frame = Frame(out=io.StringIO())

    assert repl_eval("var a = 20;", frame) == (None, True)
    value, is_stmt = repl_eval("a + 1", frame)

    assert is_stmt is False
    verify_result(value, "number", 21)


def test_repl_eval_bare_expression_faults_raise() -> None:
    with pytest.raises(LoxZeroDivisionError) as exc_info:
        repl_eval("1 / 0", Frame(out=io.StringIO()))

    assert exc_info.value.source_line() == "1 / 0"


def test_repl_eval_reports_statement_parse_error() -> None:
    with pytest.raises(LoxParseError):
        repl_eval("var = ;", Frame(out=io.StringIO()))


@pytest.mark.parametrize(
    "source, code, stdout",
    [
        pytest.param("print 1 + 2;", EXIT_OK, "3\n", id="ok"),
        pytest.param("print 1;\nprint -nil;\nprint 2;", EXIT_RUNTIME_ERROR, "1\n", id="runtime-error"),
        pytest.param("print (1;", EXIT_PARSE_ERROR, "", id="parse-error"),
    ],
)
def test_run_file_exit_codes(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    source: str,
    code: int,
    stdout: str,
) -> None:
    script = tmp_path / "script.lox"
    script.write_text(source, encoding="utf-8")

    assert run_file(str(script)) == code

    captured = capsys.readouterr()
    assert captured.out == stdout
    if code != EXIT_OK:
        assert captured.err


def test_run_file_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO('print "piped";'))

    assert run_file("-") == EXIT_OK
    assert capsys.readouterr().out == "piped\n"


def test_run_file_missing_path(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        run_file(str(tmp_path / "nope.lox"))


def test_main_exits_with_script_status(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    script = tmp_path / "bad.lox"
    script.write_text("print x;", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["lox-ref", str(script)])

    with pytest.raises(SystemExit) as exc_info:
        runner.main()

    assert exc_info.value.code == EXIT_RUNTIME_ERROR


def test_main_rejects_extra_arguments(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["lox-ref", "a.lox", "b.lox"])

    with pytest.raises(SystemExit) as exc_info:
        runner.main()

    assert "Usage" in str(exc_info.value.code)
