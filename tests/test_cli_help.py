from __future__ import annotations

from typer.testing import CliRunner

from mockbanker.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("generate", "validate", "list"):
        assert command in result.stdout


def test_generate_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "--help"])
    for option in ("--count", "--seed", "--gender", "--birth-years", "--raw", "--config"):
        assert option in result.stdout


def test_list_category() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["list", "credit_card"])
    assert result.exit_code == 0
    assert result.stdout.splitlines()[-1] == "visa"


def test_list_all() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert result.stdout.startswith("iban: ")
    assert "lei: LEI" in result.stdout


def test_list_names() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["list", "iban", "--names"])
    assert "iban\tDE\tGermany IBAN" in result.stdout.splitlines()


def test_list_unknown_category() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["list", "phone"])
    assert result.exit_code == 3
