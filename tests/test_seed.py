from __future__ import annotations

import pytest

from mockbanker.formats import Category
from mockbanker.generate.seed import canonical_seed, fresh_seed, record_digest, rng_for


def test_rng_determinism() -> None:
    r1 = rng_for("alpha", Category.IBAN, "DE", 3)
    r2 = rng_for("alpha", Category.IBAN, "DE", 3)
    assert [r1.random() for _ in range(3)] == [r2.random() for _ in range(3)]


def test_scope_sensitivity() -> None:
    base = record_digest("alpha", Category.IBAN, "DE", 0)
    assert record_digest("beta", Category.IBAN, "DE", 0) != base
    assert record_digest("alpha", Category.VAT, "DE", 0) != base
    assert record_digest("alpha", Category.IBAN, "AT", 0) != base
    assert record_digest("alpha", Category.IBAN, "DE", 1) != base
    assert record_digest("alpha", Category.IBAN, "de", 0) == base


def test_canonical_seed() -> None:
    assert canonical_seed(" 42 ") == "42"
    assert canonical_seed(42) == "42"
    with pytest.raises(TypeError):
        canonical_seed(True)


def test_fresh_seed_unique() -> None:
    assert fresh_seed() != fresh_seed()


def test_negative_index_rejected() -> None:
    with pytest.raises(ValueError):
        record_digest("alpha", Category.IBAN, "DE", -1)
