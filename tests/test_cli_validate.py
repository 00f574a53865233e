from __future__ import annotations

from typer.testing import CliRunner

from mockbanker.cli import app


def test_validate_detects_format() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["validate", "DE89 3704 0044 0532 0130 00"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "valid: iban/DE"


def test_validate_checksum_failure() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["validate", "DE89370400440532013001", "--category", "iban", "--code", "DE"]
    )
    assert result.exit_code == 1
    assert "checksum_mismatch" in result.stderr


def test_validate_no_match() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["validate", "not-an-id!"])
    assert result.exit_code == 1
    assert "no_match" in result.stderr


def test_validate_unknown_format() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["validate", "123", "-c", "iban", "--code", "XX"])
    assert result.exit_code == 3
    assert "unknown_format" in result.stderr


def test_validate_verbose_fields() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app, ["validate", "44051401359", "-c", "personal_id", "--code", "PL", "--verbose"]
    )
    assert result.exit_code == 0
    assert "valid: personal_id/PL" in result.stdout
    assert "birth_date: 1944-05-14" in result.stdout
    assert "gender: male" in result.stdout
    assert "serial: 013" in result.stdout
