"""Parameterised weighted-sum and modulus algorithms.

Most national identifiers use some variation of "multiply every character by a
weight, add, reduce modulo N, look the result up".  Rather than one class per
country, :class:`WeightedSum` exposes the variations as parameters so the
catalog can describe a scheme as data:

``mode``
    ``"remainder"`` uses ``total % modulus``; ``"complement"`` uses
    ``modulus - total % modulus`` (range ``1..modulus``, normally remapped);
    ``"solve"`` searches the check value ``c`` that makes
    ``total + c * check_weight`` divisible by ``modulus``.
``remap``
    Pairs applied after reduction.  Mapping to ``None`` declares the value
    unusable, which raises :class:`NoCheckDigitError`.
``fallback``
    Second weight vector used when the first pass yields 10 (Estonian and
    Lithuanian personal codes, Bulgarian EIK, New Zealand IRD).
``align``/``cycle``
    Weights are applied from the left or from the right and may repeat.

:class:`NumericMod` treats the whole payload as one integer and
:class:`Cascade` chains algorithms whose later digits cover earlier ones.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal

from ..utils.constants import DIGITS
from .base import Algorithm, Context, NoCheckDigitError

__all__ = ["Remap", "WeightedSum", "NumericMod", "Cascade", "render_check"]

Remap = tuple[tuple[int, int | None], ...]
Mode = Literal["remainder", "complement", "solve"]


def render_check(value: int | None, *, table: str | None, width: int) -> str:
    """Turn a reduced check value into its textual form."""

    if value is None:
        raise NoCheckDigitError("payload has no valid check value")
    if table is not None:
        if not 0 <= value < len(table):
            raise NoCheckDigitError(f"check value {value} outside table")
        return table[value]
    if not 0 <= value < 10**width:
        raise NoCheckDigitError(f"check value {value} does not fit {width} digit(s)")
    return str(value).zfill(width)


def _apply_remap(value: int | None, remap: Remap) -> int | None:
    for src, dst in remap:
        if value == src:
            return dst
    return value


def _digit_sum(n: int) -> int:
    return sum(int(c) for c in str(abs(n)))


@dataclass(frozen=True, slots=True)
class WeightedSum(Algorithm):
    """Weighted positional sum reduced modulo ``modulus``."""

    weights: tuple[int, ...]
    modulus: int = 11
    mode: Mode = "complement"
    remap: Remap = ()
    table: str | None = None
    align: Literal["left", "right"] = "left"
    cycle: bool = False
    digit_sum: bool = False
    offset: int = 0
    values: str | None = None
    fallback: tuple[int, ...] | None = None
    check_weight: int = 1
    width: int = 1
    alphabet: str = field(default="")

    def __post_init__(self) -> None:
        if not self.alphabet:
            object.__setattr__(self, "alphabet", self.table if self.table else DIGITS)

    def _value(self, char: str) -> int:
        if self.values is not None and char in self.values:
            return self.values.index(char)
        return int(char, 36)

    def _total(self, payload: str, weights: tuple[int, ...]) -> int:
        values = [self._value(c) for c in payload]
        if self.align == "right":
            values.reverse()
        if not self.cycle and len(weights) != len(values):
            raise ValueError(f"{len(weights)} weights for a payload of {len(values)}")
        ws: Iterable[int] = itertools.cycle(weights) if self.cycle else weights
        total = 0
        for value, weight in zip(values, ws):
            product = value * weight
            total += _digit_sum(product) if self.digit_sum else product
        return total + self.offset

    def _reduce(self, total: int) -> int | None:
        m = self.modulus
        if self.mode == "remainder":
            return total % m
        if self.mode == "complement":
            return m - total % m
        candidates = len(self.table) if self.table else 10**self.width
        for c in range(candidates):
            if (total + c * self.check_weight) % m == 0:
                return c
        return None

    def compute(self, payload: str, context: Context | None = None) -> str:
        value = self._reduce(self._total(payload, self.weights))
        if self.fallback is not None and value == 10:
            value = self._reduce(self._total(payload, self.fallback))
        value = _apply_remap(value, self.remap)
        return render_check(value, table=self.table, width=self.width)


@dataclass(frozen=True, slots=True)
class NumericMod(Algorithm):
    """The payload read as one integer, reduced modulo ``modulus``.

    ``translate`` substitutes leading letters before conversion (the Spanish
    NIE prefixes X, Y and Z) and ``scale`` multiplies the integer first, which
    is how "append zeros, then reduce" schemes are written.
    """

    modulus: int
    mode: Literal["remainder", "complement"] = "remainder"
    remap: Remap = ()
    table: str | None = None
    translate: tuple[tuple[str, str], ...] = ()
    scale: int = 1
    width: int = 1
    alphabet: str = field(default="")

    def __post_init__(self) -> None:
        if not self.alphabet:
            object.__setattr__(self, "alphabet", self.table if self.table else DIGITS)

    def compute(self, payload: str, context: Context | None = None) -> str:
        for src, dst in self.translate:
            if payload.startswith(src):
                payload = dst + payload[len(src) :]
                break
        n = int(payload) * self.scale
        m = self.modulus
        value: int | None = n % m if self.mode == "remainder" else m - n % m
        value = _apply_remap(value, self.remap)
        return render_check(value, table=self.table, width=self.width)


@dataclass(frozen=True, slots=True)
class Cascade(Algorithm):
    """Successive check characters, each computed over the payload so far."""

    stages: tuple[Algorithm, ...]
    width: int = 0
    alphabet: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", sum(s.width for s in self.stages))
        chars = dict.fromkeys("".join(s.alphabet for s in self.stages))
        object.__setattr__(self, "alphabet", "".join(chars))

    def compute(self, payload: str, context: Context | None = None) -> str:
        out = ""
        for stage in self.stages:
            out += stage.compute(payload + out, context)
        return out
