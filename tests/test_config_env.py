from pathlib import Path
from typing import Any

from mockbanker.config import load_config


def test_env_seed(monkeypatch: Any) -> None:
    monkeypatch.setenv("MOCKBANKER_SEED", "test-seed")
    cfg = load_config()
    assert cfg.generation.seed == "test-seed"


def test_empty_env_seed_ignored(monkeypatch: Any) -> None:
    monkeypatch.setenv("MOCKBANKER_SEED", "")
    cfg = load_config()
    assert cfg.generation.seed is None


def test_custom_env_override(monkeypatch: Any, tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('generation:\n  seed: "from-file"\n  seed_env: "CUSTOM_SEED"\n')
    monkeypatch.setenv("CUSTOM_SEED", "custom")
    cfg = load_config(cfg_file)
    assert cfg.generation.seed_env == "CUSTOM_SEED"
    assert cfg.generation.seed == "custom"


def test_file_seed_without_env(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('generation:\n  seed: "from-file"\n')
    cfg = load_config(cfg_file, env={})
    assert cfg.generation.seed == "from-file"
