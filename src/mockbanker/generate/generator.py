"""Constrained random generation of identifiers.

:class:`Generator` turns a :class:`~mockbanker.formats.model.FormatSpec` into
a :class:`GeneratedRecord`.  Generation proceeds in three steps:

1. choose a gender when the layout encodes one and a birth date when a field
   depends on the year of birth, honouring :class:`Constraints`;
2. draw every non-check field;
3. resolve check slots inner-first and splice them in.

Each record draws from an RNG derived from ``(seed, category, code, index)``
(see :mod:`mockbanker.generate.seed`), so seeded output is reproducible and
records of a batch are independent.  Payloads for which a check scheme has no
valid check value are redrawn.  Every candidate is run through the
:class:`~mockbanker.validate.Validator` before it is returned.
"""

from __future__ import annotations

import random
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from types import MappingProxyType
from typing import Any, overload

from ..checksum import NoCheckDigitError
from ..formats.dates import (
    Spans,
    encode_birth_date,
    encode_day_count,
    intersect,
    truncate_birth_date,
    union,
)
from ..formats.model import (
    BirthDate,
    Category,
    CenturyCode,
    Chars,
    Check,
    DayCount,
    DistinctDigits,
    Field,
    FormatSpec,
    Gender,
    Literal,
    Number,
    OneOf,
    Sex,
)
from ..formats.registry import Registry
from ..utils.constants import DIGITS
from ..utils.errors import UnsatisfiableConstraintError
from ..utils.logging import get_logger
from ..validate.validator import Validator
from .seed import SeedLike, canonical_seed, fresh_seed, rng_for

__all__ = [
    "Constraints",
    "GeneratedRecord",
    "Generator",
    "RecordBatch",
    "encodes_gender",
    "year_window",
]

log = get_logger(__name__)

DEFAULT_BIRTH_YEARS = (1940, 2005)
DEFAULT_MAX_ATTEMPTS = 200


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Constraints:
    """Optional restrictions applied while generating.

    ``country`` and ``category`` filter bulk generation across the registry;
    they are ignored when a single format is requested explicitly.
    """

    gender: Gender | None = None
    birth_years: tuple[int, int] | None = None
    seed: SeedLike | None = None
    country: str | None = None
    category: Category | None = None

    def __post_init__(self) -> None:
        if isinstance(self.gender, str) and not isinstance(self.gender, Gender):
            try:
                object.__setattr__(self, "gender", Gender(self.gender.strip().lower()))
            except ValueError:
                raise UnsatisfiableConstraintError(f"Unknown gender: {self.gender!r}") from None
        if isinstance(self.category, str) and not isinstance(self.category, Category):
            object.__setattr__(self, "category", Category.parse(self.category))
        if self.birth_years is not None:
            start, end = self.birth_years
            if start > end:
                raise UnsatisfiableConstraintError(
                    f"Empty birth year range: {start} is after {end}"
                )
            object.__setattr__(self, "birth_years", (int(start), int(end)))

    def matches(self, spec: FormatSpec) -> bool:
        """Whether ``spec`` passes the ``country``/``category`` filters."""

        if self.category is not None and spec.category is not self.category:
            return False
        return self.country is None or spec.code.upper() == self.country.strip().upper()


@dataclass(frozen=True, slots=True)
class GeneratedRecord:
    """One generated identifier with the metadata used to build it."""

    category: Category
    code: str
    raw: str
    formatted: str
    fields: Mapping[str, str] = field(default_factory=dict)
    birth_date: date | None = None
    gender: Gender | None = None
    seed: str | None = None
    index: int = 0

    @property
    def country_or_scheme(self) -> str:
        return self.code

    def as_dict(self) -> dict[str, Any]:
        """Plain dictionary view, suitable for JSON encoding."""

        return {
            "category": self.category.value,
            "code": self.code,
            "raw": self.raw,
            "formatted": self.formatted,
            "fields": dict(self.fields),
            "birth_date": self.birth_date.isoformat() if self.birth_date else None,
            "gender": self.gender.value if self.gender else None,
            "seed": self.seed,
            "index": self.index,
        }


# ---------------------------------------------------------------------------
# Layout inspection
# ---------------------------------------------------------------------------


def encodes_gender(spec: FormatSpec) -> bool:
    """Whether any field of ``spec`` depends on the holder's gender."""

    for token in spec.layout:
        if isinstance(token, Sex):
            return True
        if isinstance(token, Number) and (token.parity or token.male or token.female):
            return True
        if isinstance(token, CenturyCode) and any(c.gender for c in token.codes):
            return True
        if isinstance(token, BirthDate) and token.encodes_gender():
            return True
    return False


def _token_years(token: Field, gender: Gender | None) -> Spans | None:
    if isinstance(token, BirthDate):
        return (token.years,)
    if isinstance(token, DayCount):
        return (token.years,)
    if isinstance(token, CenturyCode):
        return union(
            (c.first_year, c.last_year)
            for c in token.codes
            if gender is None or c.gender in (None, gender)
        )
    if isinstance(token, Number) and token.bands:
        return union((b.first_year, b.last_year) for b in token.bands)
    return None


def year_window(spec: FormatSpec, gender: Gender | None = None) -> Spans | None:
    """Birth years ``spec`` can encode, or ``None`` if no field depends on them."""

    window: Spans | None = None
    for token in spec.layout:
        own = _token_years(token, gender)
        if own is None:
            continue
        window = own if window is None else intersect(window, own)
    return window


def _has_birth_date(spec: FormatSpec) -> bool:
    return any(isinstance(t, (BirthDate, DayCount)) for t in spec.layout)


def _as_written(spec: FormatSpec, born: date) -> date:
    """``born`` reduced to the precision the layout records."""

    for token in spec.layout:
        if isinstance(token, DayCount):
            return born
        if isinstance(token, BirthDate):
            born = truncate_birth_date(token, born)
    return born


# ---------------------------------------------------------------------------
# Field drawing
# ---------------------------------------------------------------------------


class _Redraw(Exception):
    """The current draw cannot be completed; start over."""


def _draw_date(rng: random.Random, window: Spans) -> date:
    bounds = [(date(low, 1, 1), date(high, 12, 31)) for low, high in window]
    total = sum((last - first).days + 1 for first, last in bounds)
    pick = rng.randrange(total)
    for first, last in bounds:
        size = (last - first).days + 1
        if pick < size:
            return first + timedelta(days=pick)
        pick -= size
    raise AssertionError("unreachable")


def _pick_in(rng: random.Random, spans: Sequence[tuple[int, int]]) -> tuple[int, int, int]:
    """Uniform value over ``spans``; returns ``(value, low, high)`` of its span."""

    total = sum(high - low + 1 for low, high in spans)
    if total <= 0:
        raise _Redraw
    pick = rng.randrange(total)
    for low, high in spans:
        size = high - low + 1
        if pick < size:
            return low + pick, low, high
        pick -= size
    raise AssertionError("unreachable")


def _draw_number(
    token: Number, rng: random.Random, born: date | None, gender: Gender | None
) -> str:
    if token.bands:
        if born is None:
            raise _Redraw
        spans = [
            (b.low, b.high) for b in token.bands if b.first_year <= born.year <= b.last_year
        ]
    elif gender is Gender.MALE and token.male is not None:
        spans = [token.male]
    elif gender is Gender.FEMALE and token.female is not None:
        spans = [token.female]
    else:
        spans = list(token.bounds())
    value, low, high = _pick_in(rng, spans)

    if token.parity and gender is not None:
        want_odd = (gender is Gender.MALE) == (token.parity == "odd_male")
        if value % 2 != int(want_odd):
            if value + 1 <= high:
                value += 1
            elif value - 1 >= low:
                value -= 1
            else:
                raise _Redraw
    return f"{value:0{token.width}d}"


def _draw_distinct(token: DistinctDigits, rng: random.Random) -> str:
    repeats = rng.choice(token.repeats)
    digits = rng.sample(DIGITS, token.width - repeats + 1)
    digits += [digits[0]] * (repeats - 1)
    rng.shuffle(digits)
    value = "".join(digits)
    if token.problem(value) is not None:
        raise _Redraw
    return value


def _draw_century(token: CenturyCode, born: date | None, gender: Gender | None) -> str:
    if born is None:
        raise _Redraw
    for entry in token.codes:
        if entry.first_year <= born.year <= entry.last_year and (
            entry.gender is None or gender is None or entry.gender is gender
        ):
            return entry.chars[0]
    raise _Redraw


def _draw_field(
    token: Field, rng: random.Random, born: date | None, gender: Gender | None
) -> str:
    if isinstance(token, Literal):
        return token.value
    if isinstance(token, Chars):
        alphabet = token.alphabet()
        width = rng.choice(token.widths())
        return "".join(rng.choice(alphabet) for _ in range(width))
    if isinstance(token, OneOf):
        return rng.choice(token.values)
    if isinstance(token, Number):
        return _draw_number(token, rng, born, gender)
    if isinstance(token, CenturyCode):
        return _draw_century(token, born, gender)
    if isinstance(token, DistinctDigits):
        return _draw_distinct(token, rng)
    if isinstance(token, Sex):
        return token.female if gender is Gender.FEMALE else token.male
    if isinstance(token, BirthDate):
        if born is None:
            raise _Redraw
        return encode_birth_date(token, born, female=gender is Gender.FEMALE)
    if isinstance(token, DayCount):
        if born is None:
            raise _Redraw
        return encode_day_count(token, born)
    if isinstance(token, Check):
        return ""
    raise TypeError(f"Unsupported field token: {type(token).__name__}")


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class Generator:
    """Produce records for the formats of a :class:`Registry`.

    Parameters
    ----------
    registry:
        Format catalog to generate from.
    birth_years:
        Window used for birth dates when :class:`Constraints` names none.
    max_attempts:
        Number of draws per record before giving up with
        :class:`UnsatisfiableConstraintError`.
    validator:
        Validator used to check every candidate; defaults to one over
        ``registry``.
    """

    def __init__(
        self,
        registry: Registry,
        *,
        birth_years: tuple[int, int] = DEFAULT_BIRTH_YEARS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        validator: Validator | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.registry = registry
        self.birth_years = birth_years
        self.max_attempts = max_attempts
        self.validator = validator if validator is not None else Validator(registry)

    # -- public API --------------------------------------------------------

    def generate(
        self,
        category: Category | str,
        code: str,
        constraints: Constraints | None = None,
        *,
        index: int = 0,
    ) -> GeneratedRecord:
        """Generate one record for ``(category, code)``.

        Raises
        ------
        UnknownFormatError
            If the format is not registered.
        UnsatisfiableConstraintError
            If the constraints admit no value or every draw failed.
        """

        spec = self.registry.lookup(category, code)
        return self.generate_spec(spec, constraints, index=index)

    def generate_spec(
        self,
        spec: FormatSpec,
        constraints: Constraints | None = None,
        *,
        index: int = 0,
    ) -> GeneratedRecord:
        constraints = constraints or Constraints()
        seed = canonical_seed(constraints.seed) if constraints.seed is not None else fresh_seed()
        rng = rng_for(seed, spec.category, spec.code, index)

        gender = self._choose_gender(spec, rng, constraints.gender)
        window = self._window(spec, constraints, gender)
        where = f"{spec.category.value}/{spec.code}"

        for attempt in range(1, self.max_attempts + 1):
            born = _as_written(spec, _draw_date(rng, window)) if window is not None else None
            try:
                values = self._draw(spec, rng, born, gender)
            except (_Redraw, NoCheckDigitError) as exc:
                log.debug("%s: redraw after attempt %d (%s)", where, attempt, type(exc).__name__)
                continue
            raw = "".join(values)
            result = self.validator.validate_spec(raw, spec)
            if not result.valid:
                log.debug("%s: rejected at attempt %d (%s)", where, attempt, result.reason)
                continue
            return GeneratedRecord(
                category=spec.category,
                code=spec.code,
                raw=raw,
                formatted=spec.display.render(raw),
                fields=MappingProxyType(
                    {t.name: v for t, v in zip(spec.layout, values) if t.name is not None}
                ),
                birth_date=born if _has_birth_date(spec) else None,
                gender=gender,
                seed=seed,
                index=index,
            )
        raise UnsatisfiableConstraintError(
            f"{where}: no valid value after {self.max_attempts} attempts"
        )

    def generate_batch(
        self,
        category: Category | str,
        code: str,
        count: int,
        constraints: Constraints | None = None,
    ) -> RecordBatch:
        """Lazy, restartable sequence of ``count`` records for one format."""

        spec = self.registry.lookup(category, code)
        return RecordBatch(self, spec, count, constraints)

    def generate_all(self, constraints: Constraints | None = None) -> Iterator[GeneratedRecord]:
        """One record per registered format passing the constraint filters."""

        constraints = constraints or Constraints()
        if constraints.seed is None:
            constraints = replace(constraints, seed=fresh_seed())
        for spec in self.registry:
            if constraints.matches(spec):
                yield self.generate_spec(spec, constraints)

    # -- internals ---------------------------------------------------------

    @staticmethod
    def _choose_gender(
        spec: FormatSpec, rng: random.Random, requested: Gender | None
    ) -> Gender | None:
        if not encodes_gender(spec):
            if requested is not None:
                log.debug("%s/%s does not encode gender", spec.category.value, spec.code)
            return None
        if requested is not None:
            return requested
        return rng.choice((Gender.MALE, Gender.FEMALE))

    def _window(
        self, spec: FormatSpec, constraints: Constraints, gender: Gender | None
    ) -> Spans | None:
        own = year_window(spec, gender)
        if own is None:
            return None
        where = f"{spec.category.value}/{spec.code}"
        if not own:
            raise UnsatisfiableConstraintError(f"{where}: no birth year fits the layout")
        if constraints.birth_years is not None:
            window = intersect(own, (constraints.birth_years,))
            if not window:
                first, last = constraints.birth_years
                raise UnsatisfiableConstraintError(
                    f"{where}: birth years {first}-{last} outside the supported window "
                    + ", ".join(f"{low}-{high}" for low, high in own)
                )
            return window
        return intersect(own, (self.birth_years,)) or own

    def _draw(
        self,
        spec: FormatSpec,
        rng: random.Random,
        born: date | None,
        gender: Gender | None,
    ) -> list[str]:
        values = [_draw_field(token, rng, born, gender) for token in spec.layout]
        context = {"birth_date": born} if born is not None else None
        for index in spec.check_order():
            check = spec.layout[index]
            assert isinstance(check, Check)
            payload = "".join(values[j] for j in spec.covered(index))
            values[index] = self.registry.algorithm(check.algorithm).compute(payload, context)
        return values


# ---------------------------------------------------------------------------
# Batches
# ---------------------------------------------------------------------------


class RecordBatch(Sequence[GeneratedRecord]):
    """Finite, restartable sequence of generated records.

    Records are produced on access and never cached.  An unseeded batch fixes
    a random seed at construction so that iterating twice yields the same
    records.
    """

    def __init__(
        self,
        generator: Generator,
        spec: FormatSpec,
        count: int,
        constraints: Constraints | None = None,
    ) -> None:
        if count < 0:
            raise ValueError("count must be non-negative")
        constraints = constraints or Constraints()
        if constraints.seed is None:
            constraints = replace(constraints, seed=fresh_seed())
        self._generator = generator
        self._spec = spec
        self._count = count
        self.constraints = constraints

    @property
    def spec(self) -> FormatSpec:
        return self._spec

    @property
    def seed(self) -> str:
        return canonical_seed(self.constraints.seed)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._count

    @overload
    def __getitem__(self, index: int) -> GeneratedRecord: ...

    @overload
    def __getitem__(self, index: slice) -> list[GeneratedRecord]: ...

    def __getitem__(self, index: int | slice) -> GeneratedRecord | list[GeneratedRecord]:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(self._count))]
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("record index out of range")
        return self._generator.generate_spec(self._spec, self.constraints, index=index)

    def __iter__(self) -> Iterator[GeneratedRecord]:
        for i in range(self._count):
            yield self[i]
