from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from mockbanker.cli import app


def test_unknown_code() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "iban", "XX"])
    assert result.exit_code == 3
    assert "iban/XX" in result.stderr


def test_unknown_category() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "phone", "DE"])
    assert result.exit_code == 3


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "iban", "DE", "--config", str(bad_cfg)])
    assert result.exit_code == 4


def test_missing_config(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["validate", "DE89370400440532013000", "--config", str(tmp_path / "missing.yml")]
    )
    assert result.exit_code == 4


def test_impossible_birth_years() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["generate", "personal_id", "PL", "--birth-years", "1500-1600", "--seed", "x"]
    )
    assert result.exit_code == 5
    assert "1500-1600" in result.stderr


def test_malformed_birth_years() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "personal_id", "PL", "--birth-years", "eighties"])
    assert result.exit_code == 2


def test_reversed_birth_years() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "personal_id", "PL", "--birth-years", "1990-1980"])
    assert result.exit_code == 5
