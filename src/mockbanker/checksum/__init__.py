"""Checksum algorithm library.

Every scheme implements ``compute(payload, context=None)`` and
``verify(payload, check, context=None)``; format definitions reference them
by name through :data:`ALGORITHMS`.
"""

from __future__ import annotations

from .base import Algorithm, NoCheckDigitError
from .catalog import ALGORITHMS
from .weighted import Cascade, NumericMod, WeightedSum

__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "Cascade",
    "NoCheckDigitError",
    "NumericMod",
    "WeightedSum",
    "get_algorithm",
]


def get_algorithm(name: str) -> Algorithm:
    """Return the catalog entry ``name``.

    Raises
    ------
    KeyError
        If no algorithm of that name exists.
    """

    return ALGORITHMS[name]
