"""Typed configuration schema and loader for the mockbanker package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, model_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class YearRange(BaseModel):
    """Inclusive range of birth years."""

    start: conint(ge=1800, le=2199)  # type: ignore[valid-type]
    end: conint(ge=1800, le=2199)  # type: ignore[valid-type]

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _ordered(self) -> YearRange:
        if self.start > self.end:
            raise ValueError(f"birth_years start {self.start} is after end {self.end}")
        return self

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)


class GenerationSettings(BaseModel):
    """Defaults applied by the generator."""

    birth_years: YearRange
    max_attempts: conint(ge=1, le=100_000)  # type: ignore[valid-type]
    default_count: conint(ge=1)  # type: ignore[valid-type]
    seed: str | None = None
    seed_env: str

    model_config = ConfigDict(extra="forbid")


class ValidationSettings(BaseModel):
    """Validator behaviour."""

    auto_detect: bool

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)  # type: ignore[valid-type]
    generation: GenerationSettings
    validation: ValidationSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``generation.seed_env`` for the seed.

    Raises
    ------
    pydantic.ValidationError
        If the merged configuration does not match the schema.
    OSError, yaml.YAMLError
        If the user file cannot be read or parsed.
    """

    with (
        importlib_resources.files("mockbanker.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"{path}: top level of a config file must be a mapping")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.generation.seed_env
    if environ.get(seed_env):
        cfg.generation.seed = environ[seed_env]

    return cfg


__all__ = [
    "ConfigModel",
    "YearRange",
    "GenerationSettings",
    "ValidationSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
]
