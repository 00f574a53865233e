from __future__ import annotations

from typer.testing import CliRunner

from mockbanker import validate
from mockbanker.cli import app


def test_generate_count_and_seed() -> None:
    runner = CliRunner()
    args = ["generate", "iban", "DE", "--count", "3", "--seed", "cli"]
    first = runner.invoke(app, args)
    second = runner.invoke(app, args)
    assert first.exit_code == 0
    lines = first.stdout.splitlines()
    assert len(lines) == 3
    assert first.stdout == second.stdout
    for line in lines:
        assert line.startswith("DE")
        assert " " in line
        assert validate(line, "iban", "DE").valid


def test_generate_raw() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "card", "visa", "-n", "2", "--raw", "--seed", "1"])
    assert result.exit_code == 0
    for line in result.stdout.splitlines():
        assert len(line) == 16 and line.isdigit()


def test_generate_default_count() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "vat", "FR"])
    assert result.exit_code == 0
    assert len(result.stdout.splitlines()) == 5


def test_generate_constraints() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "generate",
            "personal_id",
            "PL",
            "-n",
            "4",
            "--gender",
            "female",
            "--birth-years",
            "1980-1985",
            "--seed",
            "pl",
        ],
    )
    assert result.exit_code == 0
    for line in result.stdout.splitlines():
        parsed = validate(line, "personal_id", "PL")
        assert parsed.details["gender"].value == "female"
        assert 1980 <= parsed.details["birth_date"].year <= 1985
