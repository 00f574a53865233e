from mockbanker.config.schema import deep_merge_dicts


def test_deep_merge_nested_and_list_replace() -> None:
    base = {
        "generation": {"max_attempts": 200, "birth_years": {"start": 1940, "end": 2005}},
        "list": [1, 2],
    }
    override = {
        "generation": {"birth_years": {"end": 1990}},
        "list": [3],
    }
    merged = deep_merge_dicts(base, override)
    assert merged == {
        "generation": {"max_attempts": 200, "birth_years": {"start": 1940, "end": 1990}},
        "list": [3],
    }
    # ensure original not mutated
    assert base["list"] == [1, 2]
    assert base["generation"]["birth_years"] == {"start": 1940, "end": 2005}  # type: ignore[index]
