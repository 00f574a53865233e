"""Deterministic seeding helpers for record generation.

Every record draws from its own :class:`random.Random`, seeded from the user
seed, the format key and the record's position in its batch using
HMAC-SHA256 with strict domain separation.  Records are therefore independent
of one another: record ``n`` of a batch is the same whether or not records
``0..n-1`` were generated first, and batches may be produced in parallel.

A seed is any string; integers are accepted and rendered in decimal.  Seeds
are test data inputs, not secrets, and are exposed on every record.
"""

from __future__ import annotations

import hashlib
import hmac
import random
import secrets
from typing import Final

from ..formats.model import Category

# ---------------------------------------------------------------------------
# Domain separation constants
# ---------------------------------------------------------------------------

_NS_RECORD: Final = b"mockbanker/v1/record"

SeedLike = str | int


def canonical_seed(seed: SeedLike) -> str:
    """Return the string form used for hashing ``seed``."""

    if isinstance(seed, bool):
        raise TypeError("seed must be a string or an integer")
    return str(seed).strip()


def fresh_seed() -> str:
    """Return a new random seed for unseeded batches."""

    return secrets.token_hex(16)


def record_digest(seed: SeedLike, category: Category, code: str, index: int) -> bytes:
    """Digest identifying record ``index`` of format ``(category, code)``."""

    if index < 0:
        raise ValueError("index must be non-negative")
    key = canonical_seed(seed).encode("utf-8")
    data = b"\x00".join(
        (
            _NS_RECORD,
            category.value.encode("ascii"),
            code.upper().encode("utf-8"),
            str(index).encode("ascii"),
        )
    )
    return hmac.new(key, data, hashlib.sha256).digest()


def rng_for(seed: SeedLike, category: Category, code: str, index: int = 0) -> random.Random:
    """Derive the reproducible RNG for one record."""

    digest = record_digest(seed, category, code, index)
    return random.Random(int.from_bytes(digest, "big"))


__all__ = [
    "SeedLike",
    "canonical_seed",
    "fresh_seed",
    "record_digest",
    "rng_for",
]
