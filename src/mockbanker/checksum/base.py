"""Common interface for check digit algorithms.

An algorithm turns the canonical payload of a format (the concatenated values
of the fields a check slot covers) into the check characters for that slot.
Algorithms are stateless and deterministic; they never draw random numbers.

``compute`` raises :class:`NoCheckDigitError` when a payload has no valid check
value at all (several mod-11 schemes simply declare such payloads unusable).
The generator reacts by drawing a new payload.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..utils.constants import DIGITS

__all__ = ["Algorithm", "NoCheckDigitError", "Context", "to_digits"]

Context = Mapping[str, Any]


class NoCheckDigitError(ValueError):
    """Raised when a payload admits no check value."""


class Algorithm:
    """Base class for check digit algorithms.

    Subclasses set :attr:`width` (number of check characters) and
    :attr:`alphabet` (every character the check may consist of) and implement
    :meth:`compute`.  The default :meth:`verify` recomputes and compares.
    """

    width: int = 1
    alphabet: str = DIGITS

    def compute(self, payload: str, context: Context | None = None) -> str:
        raise NotImplementedError

    def verify(self, payload: str, check: str, context: Context | None = None) -> bool:
        try:
            return self.compute(payload, context) == check
        except NoCheckDigitError:
            return False


def to_digits(payload: str) -> list[int]:
    """Return the decimal digits of ``payload``; raise ``ValueError`` otherwise."""

    if not payload.isdigit() or not payload.isascii():
        raise ValueError(f"expected digits, got {payload!r}")
    return [int(c) for c in payload]
