from mockbanker.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.generation.birth_years.as_tuple() == (1940, 2005)
    assert cfg.generation.max_attempts == 200
    assert cfg.generation.default_count == 5
    assert cfg.generation.seed is None
    assert cfg.generation.seed_env == "MOCKBANKER_SEED"
    assert cfg.validation.auto_detect is True
    assert cfg.logging.level == "WARNING"
