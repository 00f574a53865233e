"""Tests for packaging metadata and optional dependencies."""

from __future__ import annotations

import importlib
import tomllib
from pathlib import Path
from typing import Any, cast


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return tomllib.load(fh)


def _extras(pyproject: dict[str, Any]) -> dict[str, list[str]]:
    return cast(dict[str, list[str]], pyproject.get("project", {}).get("optional-dependencies", {}))


def _flatten_mypy_overrides(pyproject: dict[str, Any]) -> set[str]:
    overrides = pyproject.get("tool", {}).get("mypy", {}).get("overrides", [])
    modules: set[str] = set()
    for entry in overrides:
        modules.update(entry.get("module", []))
    return modules


def test_runtime_dependencies() -> None:
    pyproject = _load_pyproject()
    deps = " ".join(pyproject["project"]["dependencies"])
    for name in ("python-stdnum", "pydantic", "typer", "PyYAML"):
        assert name in deps


def test_optional_dependency_groups() -> None:
    extras = _extras(_load_pyproject())
    assert {"test", "dev"}.issubset(extras)
    assert any(req.startswith("pytest") for req in extras["test"])


def test_console_script_entrypoint() -> None:
    pyproject = _load_pyproject()
    scripts = pyproject.get("project", {}).get("scripts", {})
    assert scripts.get("mockbanker") == "mockbanker.cli:app"


def test_import_smoke() -> None:
    importlib.import_module("mockbanker")
    importlib.import_module("mockbanker.cli")


def test_mypy_overrides() -> None:
    mods = _flatten_mypy_overrides(_load_pyproject())
    assert {"stdnum", "stdnum.*"} <= mods
