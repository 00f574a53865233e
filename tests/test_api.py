"""Engine facade and module level helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

import mockbanker
from mockbanker import Category, Constraints, Engine, UnknownFormatError
from mockbanker.config import load_config


def test_module_level_helpers() -> None:
    record = mockbanker.generate("iban", "DE", Constraints(seed="api"))
    assert mockbanker.validate(record.raw, "iban", "DE").valid
    assert mockbanker.validate(record.formatted).code == "DE"
    assert "DE" in mockbanker.list_supported("iban")
    assert mockbanker.lookup(Category.IBAN, "DE").total_length == 22
    assert mockbanker.default_engine() is mockbanker.default_engine()


def test_default_batch_size() -> None:
    engine = Engine(config=load_config(env={}))
    assert len(engine.generate_batch("vat", "FR")) == 5
    assert len(engine.generate_batch("vat", "FR", 2)) == 2


def test_configured_seed_is_reproducible() -> None:
    cfg = load_config(env={"MOCKBANKER_SEED": "configured"})
    first = Engine(config=cfg).generate("personal_id", "SE")
    second = Engine(config=cfg).generate("personal_id", "SE")
    assert first.raw == second.raw
    assert first.seed == "configured"
    explicit = Engine(config=cfg).generate("personal_id", "SE", Constraints(seed="explicit"))
    assert explicit.seed == "explicit"


def test_configured_birth_years(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("generation:\n  birth_years:\n    start: 1960\n    end: 1961\n")
    engine = Engine(config=load_config(cfg_file, env={}))
    for record in engine.generate_batch("personal_id", "PL", 10):
        assert record.birth_date is not None
        assert record.birth_date.year in (1960, 1961)


def test_auto_detect_setting(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("validation:\n  auto_detect: false\n")
    engine = Engine(config=load_config(cfg_file, env={}))
    assert not engine.validate("DE89370400440532013000").valid
    assert engine.validate("DE89370400440532013000", "iban", "DE").valid


def test_unknown_lookup() -> None:
    engine = Engine(config=load_config(env={}))
    with pytest.raises(UnknownFormatError) as excinfo:
        engine.lookup("iban", "ZZ")
    assert excinfo.value.code == "ZZ"


def test_unknown_category_listing() -> None:
    with pytest.raises(UnknownFormatError) as excinfo:
        mockbanker.list_supported("phone")
    assert excinfo.value.category == "phone"
    assert not mockbanker.validate("x", "phone").valid
