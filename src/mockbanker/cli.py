"""Typer-based command line interface for the identifier engine.

``generate`` prints generated identifiers one per line, ``validate`` checks a
candidate (against one format or by auto-detection) and ``list`` shows the
supported format codes.  Output is plain text; serialization into files is
left to other tools.

Exit codes
----------
0 success
1 invalid value (``validate``)
3 unknown category or format code
4 configuration error
5 generation error (constraints cannot be satisfied)
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .api import Engine
from .config import ConfigModel, load_config
from .formats.model import Category, Gender
from .generate.generator import Constraints
from .utils.errors import UnknownFormatError, UnsatisfiableConstraintError
from .utils.logging import configure_logging
from .validate.validator import InvalidReason

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="mockbanker",
    help="Generate and validate checksum-correct test identifiers.",
    no_args_is_help=True,
)

_YEARS = re.compile(r"^\s*(\d{4})\s*(?:-|:|\.\.)\s*(\d{4})\s*$")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None, verbose: bool) -> ConfigModel:
    try:
        cfg = load_config(config_path)
    except (ValidationError, ValueError, OSError, yaml.YAMLError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    return cfg


def _category(value: str) -> Category:
    try:
        return Category.parse(value)
    except ValueError as exc:
        _safe_exit(3, str(exc))


def _birth_years(value: str | None) -> tuple[int, int] | None:
    if value is None:
        return None
    m = _YEARS.match(value)
    if m is None:
        raise typer.BadParameter("expected a range such as 1980-1990", param_hint="--birth-years")
    return int(m.group(1)), int(m.group(2))


@app.callback()
def main() -> None:
    """Entry point for the mockbanker command group."""

    pass


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def generate(  # noqa: PLR0913
    category: str = typer.Argument(..., help="Category, e.g. iban, personal_id, credit_card"),
    code: str = typer.Argument(..., help="Country code or scheme, e.g. DE or visa"),
    count: Optional[int] = typer.Option(  # noqa: B008
        None, "--count", "-n", min=1, help="Number of records (configured default if omitted)"
    ),
    seed: Optional[str] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed for reproducible output"
    ),
    gender: Optional[Gender] = typer.Option(  # noqa: B008
        None, "--gender", case_sensitive=False, help="Holder gender for formats encoding one"
    ),
    birth_years: Optional[str] = typer.Option(  # noqa: B008
        None, "--birth-years", help="Inclusive birth year range, e.g. 1980-1990"
    ),
    raw: bool = typer.Option(  # noqa: B008
        False, "--raw", help="Print the canonical form instead of the display form"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Log generation details to stderr"
    ),
) -> None:
    """Generate identifiers for one format."""

    years = _birth_years(birth_years)
    cfg = _load(config_path, verbose)
    engine = Engine(config=cfg)
    try:
        constraints = Constraints(gender=gender, birth_years=years, seed=seed)
        batch = engine.generate_batch(_category(category), code, count, constraints)
        for record in batch:
            typer.echo(record.raw if raw else record.formatted)
    except UnknownFormatError as exc:
        _safe_exit(3, str(exc))
    except UnsatisfiableConstraintError as exc:
        _safe_exit(5, str(exc))


@app.command()
def validate(
    value: str = typer.Argument(..., help="Candidate identifier"),
    category: Optional[str] = typer.Option(  # noqa: B008
        None, "--category", "-c", help="Restrict to one category"
    ),
    code: Optional[str] = typer.Option(  # noqa: B008
        None, "--code", help="Country code or scheme of the expected format"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Print parsed fields of a valid value"
    ),
) -> None:
    """Validate VALUE and report the matching format or the failure reason."""

    cfg = _load(config_path, verbose)
    engine = Engine(config=cfg)
    result = engine.validate(value, category, code)
    if not result.valid:
        exit_code = 3 if result.reason is InvalidReason.UNKNOWN_FORMAT else 1
        reason = result.reason.value if result.reason else "invalid"
        _safe_exit(exit_code, f"invalid: {reason}: {result.message}")
    assert result.category is not None
    typer.echo(f"valid: {result.category.value}/{result.code}")
    if verbose:
        for name, field_value in result.details.get("fields", {}).items():
            typer.echo(f"  {name}: {field_value}")
        for key in ("birth_date", "gender"):
            found = result.details.get(key)
            if found is not None:
                typer.echo(f"  {key}: {getattr(found, 'value', found)}")


@app.command("list")
def list_formats(
    category: Optional[str] = typer.Argument(  # noqa: B008
        None, help="Category to list; every category when omitted"
    ),
    names: bool = typer.Option(False, "--names", help="Include format names"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """List supported format codes."""

    cfg = _load(config_path, False)
    engine = Engine(config=cfg)
    categories = [_category(category)] if category is not None else list(Category)
    for cat in categories:
        if names:
            for code, name, _description in engine.registry.names(cat):
                typer.echo(f"{cat.value}\t{code}\t{name}")
        elif category is not None:
            for code in engine.list_supported(cat):
                typer.echo(code)
        else:
            typer.echo(f"{cat.value}: {' '.join(engine.list_supported(cat))}")


if __name__ == "__main__":  # pragma: no cover
    app()
