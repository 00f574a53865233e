from pathlib import Path

import pytest
from pydantic import ValidationError

from mockbanker.config import load_config


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file)


def test_reversed_birth_years(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("generation:\n  birth_years:\n    start: 1990\n    end: 1980\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file)


def test_invalid_log_level(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("logging:\n  level: LOUD\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file)


def test_zero_attempts(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("generation:\n  max_attempts: 0\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file)


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_config(cfg_file)


def test_partial_override(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text(
        "generation:\n  birth_years:\n    end: 1970\nvalidation:\n  auto_detect: false\n"
    )
    cfg = load_config(cfg_file, env={})
    assert cfg.generation.birth_years.as_tuple() == (1940, 1970)
    assert cfg.generation.max_attempts == 200
    assert cfg.validation.auto_detect is False
