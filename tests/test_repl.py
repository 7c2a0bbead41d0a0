"""Tests for the explain prompt loop."""

import pytest

from cmdexplain.console import ExplainConsole
from cmdexplain.decorator import Decorator
from cmdexplain.knowledge import Knowledge
from cmdexplain.repl import explain_query, run_repl


class ScriptedSession:
    def __init__(self, answers: list[object]) -> None:
        self.answers = list(answers)

    def prompt(self, _message: str) -> str:
        if not self.answers:
            raise EOFError
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer


def _console(answers: list[object]) -> ExplainConsole:
    return ExplainConsole(
        Decorator(enabled=False),
        session=ScriptedSession(answers),
        banner_lines=["banner"],
    )


def test_explain_query_renders_and_returns_response(
    knowledge: Knowledge, capsys: pytest.CaptureFixture[str]
) -> None:
    response = explain_query(_console([]), "ls -la", knowledge)

    assert response.leaf_nodes is not None
    out = capsys.readouterr().out
    assert "  ls -la\n" in out
    assert "  ls: list directory contents\n" in out
    assert "  -l: use a long listing format\n" in out
    assert "  -a, --all: show hidden entries\n" in out


def test_explain_query_reports_no_result(
    knowledge: Knowledge, capsys: pytest.CaptureFixture[str]
) -> None:
    response = explain_query(_console([]), "echo 'oops", knowledge)

    assert response.leaf_nodes is None
    assert capsys.readouterr().err == "ERROR: No result\n"


def test_run_repl_explains_each_request_until_exit(
    knowledge: Knowledge, capsys: pytest.CaptureFixture[str]
) -> None:
    console = _console(["ls", "   ", "grep x", "exit", "ls -a"])

    run_repl(console, knowledge)

    out = capsys.readouterr().out
    assert out.startswith("banner\n\n")
    assert "  ls: list directory contents\n" in out
    assert "  grep: print lines that match patterns\n" in out
    assert "show hidden entries" not in out


def test_run_repl_quit_is_case_insensitive(
    knowledge: Knowledge, capsys: pytest.CaptureFixture[str]
) -> None:
    run_repl(_console(["QUIT", "ls"]), knowledge)
    assert "list directory contents" not in capsys.readouterr().out


@pytest.mark.parametrize("stop", [EOFError(), KeyboardInterrupt()])
def test_run_repl_stops_on_eof_and_interrupt(
    knowledge: Knowledge, stop: BaseException, capsys: pytest.CaptureFixture[str]
) -> None:
    run_repl(_console(["ls", stop, "grep x"]), knowledge)

    out = capsys.readouterr().out
    assert "list directory contents" in out
    assert "print lines that match patterns" not in out
