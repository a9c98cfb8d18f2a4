from typing import NoReturn, get_type_hints

import pytest
import typer

from asdf_direnv.models import CommandError, CommandResult
from asdf_direnv.status import check_for, fail, hmm, ok


def test_ok_prints_check_mark(capsys):
    ok("all good")

    assert capsys.readouterr().err == "✔️  all good\n"


def test_ok_without_message(capsys):
    ok()

    assert capsys.readouterr().err == "✔️\n"


def test_hmm_returns_failure_signal(capsys):
    assert hmm("careful") is False
    assert "❗️ careful" in capsys.readouterr().err


def test_fail_exits_with_status_one(capsys):
    with pytest.raises(typer.Exit) as exc_info:
        fail("boom")

    assert exc_info.value.exit_code == 1
    assert "❌  boom" in capsys.readouterr().err


def test_status_text_is_not_treated_as_markup(capsys):
    ok("[bold]literal[/bold]")

    assert "[bold]literal[/bold]" in capsys.readouterr().err


def test_check_for_returns_step_value(capsys):
    result = check_for("thing", lambda a, b: a + b, 1, 2, failure="nope")

    assert result == 3
    assert "Checking for thing..." in capsys.readouterr().err


def test_check_for_fails_on_falsy_result(capsys):
    with pytest.raises(typer.Exit) as exc_info:
        check_for("thing", lambda: None, failure="Install the thing")

    assert exc_info.value.exit_code == 1
    assert "Install the thing" in capsys.readouterr().err


def test_check_for_fails_on_command_error(capsys):
    def step():
        raise CommandError(CommandResult(args=["asdf", "install"], exit_code=2))

    with pytest.raises(typer.Exit):
        check_for("thing", step, failure="asdf broke")

    assert "asdf broke" in capsys.readouterr().err


def test_fail_is_annotated_as_never_returning():
    assert get_type_hints(fail)["return"] is NoReturn
