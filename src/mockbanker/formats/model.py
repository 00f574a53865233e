"""Data model for format definitions.

A :class:`FormatSpec` describes one identifier format as an ordered layout of
field tokens.  Tokens are plain immutable data: the generator knows how to
draw a value for each token type and the validator knows how to read one back.
Nothing in a spec is country-specific code.

Token overview
--------------
``Literal``      fixed text (country prefixes, reserved zeros)
``Chars``        random characters from a class, one or more allowed widths
``Number``       zero-padded number with optional ranges, gender rules and
                 birth-year bands
``OneOf``        one value from a fixed list
``DistinctDigits`` digits that are all different except for one repeated digit
``CenturyCode``  single character selecting a birth-year window (and gender)
``Sex``          single character encoding gender only
``BirthDate``    date of birth written with ``YYYY YYY YY MM DD DDD L`` parts
``DayCount``     date of birth as a number of days since an epoch
``Check``        check characters computed by a catalog algorithm

Checks cover every other field flagged ``checked`` unless ``covers`` names the
fields explicitly.  Checks may cover other checks; they are resolved
inner-first.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum

from ..checksum import ALGORITHMS
from ..utils.constants import ALNUM, DIGITS, ITALIAN_MONTHS, LETTERS, charset
from ..utils.errors import LayoutError

__all__ = [
    "Category",
    "Gender",
    "Field",
    "Literal",
    "Chars",
    "Band",
    "Number",
    "OneOf",
    "DistinctDigits",
    "Century",
    "CenturyCode",
    "Sex",
    "BirthDate",
    "DayCount",
    "Check",
    "DisplayRules",
    "PLAIN",
    "FormatSpec",
]


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Category(str, Enum):
    """Identifier categories in registry iteration order."""

    IBAN = "iban"
    PERSONAL_ID = "personal_id"
    CREDIT_CARD = "credit_card"
    BANK_ACCOUNT = "bank_account"
    SWIFT_BIC = "swift_bic"
    COMPANY_ID = "company_id"
    DRIVERS_LICENSE = "drivers_license"
    PASSPORT = "passport"
    TAX_ID = "tax_id"
    VAT = "vat"
    LEI = "lei"

    @classmethod
    def parse(cls, value: Category | str) -> Category:
        """Resolve a category from its value, its name or a short alias.

        Raises ``ValueError`` for unknown input.
        """

        if isinstance(value, Category):
            return value
        key = value.strip().lower().replace("-", "_")
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        if key in _CATEGORY_ALIASES:
            return _CATEGORY_ALIASES[key]
        raise ValueError(f"Unknown category: {value!r}")


_CATEGORY_ALIASES = {
    "id": Category.PERSONAL_ID,
    "personal": Category.PERSONAL_ID,
    "card": Category.CREDIT_CARD,
    "bank": Category.BANK_ACCOUNT,
    "swift": Category.SWIFT_BIC,
    "bic": Category.SWIFT_BIC,
    "company": Category.COMPANY_ID,
    "driver_license": Category.DRIVERS_LICENSE,
    "tax": Category.TAX_ID,
}


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


# ---------------------------------------------------------------------------
# Field tokens
# ---------------------------------------------------------------------------


def _char_class(alphabet: str) -> str:
    chars = "".join(sorted(set(alphabet)))
    known = {"".join(sorted(DIGITS)): "0-9", "".join(sorted(LETTERS)): "A-Z"}
    if chars in known:
        return f"[{known[chars]}]"
    if chars == "".join(sorted(ALNUM)):
        return "[0-9A-Z]"
    return "[" + "".join(re.escape(c) for c in chars) + "]"


@dataclass(frozen=True, slots=True, kw_only=True)
class Field:
    """Base token.  ``name`` exposes the value in records and parse details."""

    name: str | None = None
    checked: bool = True

    def widths(self) -> tuple[int, ...]:
        raise NotImplementedError

    def alphabet(self) -> str:
        return DIGITS

    def regex(self) -> str:
        cls = _char_class(self.alphabet())
        return "|".join(f"{cls}{{{w}}}" for w in sorted(self.widths(), reverse=True))


@dataclass(frozen=True, slots=True)
class Literal(Field):
    value: str

    def widths(self) -> tuple[int, ...]:
        return (len(self.value),)

    def alphabet(self) -> str:
        return self.value

    def regex(self) -> str:
        return re.escape(self.value)


@dataclass(frozen=True, slots=True)
class Chars(Field):
    """Random characters; ``charset`` is a class name or an explicit alphabet."""

    charset: str
    width: int = 1
    variants: tuple[int, ...] = ()

    def widths(self) -> tuple[int, ...]:
        return self.variants or (self.width,)

    def alphabet(self) -> str:
        return charset(self.charset)


@dataclass(frozen=True, slots=True)
class Band:
    """Value range of a :class:`Number` valid for births in a year window."""

    low: int
    high: int
    first_year: int
    last_year: int


@dataclass(frozen=True, slots=True)
class Number(Field):
    """Zero-padded decimal number.

    ``parity`` encodes gender in the last digit (``"odd_male"`` or
    ``"even_male"``); ``male``/``female`` give gender specific ranges instead.
    """

    width: int
    ranges: tuple[tuple[int, int], ...] = ()
    bands: tuple[Band, ...] = ()
    parity: str | None = None
    male: tuple[int, int] | None = None
    female: tuple[int, int] | None = None

    def widths(self) -> tuple[int, ...]:
        return (self.width,)

    def bounds(self) -> tuple[tuple[int, int], ...]:
        if self.ranges:
            return self.ranges
        return ((0, 10**self.width - 1),)


@dataclass(frozen=True, slots=True)
class OneOf(Field):
    values: tuple[str, ...]

    def widths(self) -> tuple[int, ...]:
        return tuple(sorted({len(v) for v in self.values}))

    def alphabet(self) -> str:
        return "".join(dict.fromkeys("".join(self.values)))

    def regex(self) -> str:
        ordered = sorted(self.values, key=len, reverse=True)
        return "|".join(re.escape(v) for v in ordered)


@dataclass(frozen=True, slots=True)
class DistinctDigits(Field):
    """Decimal digits, pairwise different except for exactly one digit.

    That digit occurs a number of times listed in ``repeats`` and never more
    than ``max_run`` times in a row.  The German tax identification number
    is built this way.
    """

    width: int
    repeats: tuple[int, ...] = (2, 3)
    max_run: int = 2
    leading_zero: bool = False

    def widths(self) -> tuple[int, ...]:
        return (self.width,)

    def problem(self, value: str) -> str | None:
        """Why ``value`` breaks the digit rule, or ``None`` if it does not."""

        if not self.leading_zero and value.startswith("0"):
            return "leading zero"
        counts = [value.count(d) for d in set(value)]
        repeated = [c for c in counts if c > 1]
        if len(repeated) != 1 or repeated[0] not in self.repeats:
            return "digit repetition"
        if any(d * (self.max_run + 1) in value for d in set(value)):
            return f"more than {self.max_run} equal digits in a row"
        return None


@dataclass(frozen=True, slots=True)
class Century:
    """One entry of a :class:`CenturyCode`; the first of ``chars`` is preferred."""

    chars: str
    first_year: int
    last_year: int
    gender: Gender | None = None


@dataclass(frozen=True, slots=True)
class CenturyCode(Field):
    codes: tuple[Century, ...]

    def widths(self) -> tuple[int, ...]:
        return (1,)

    def alphabet(self) -> str:
        return "".join(dict.fromkeys("".join(c.chars for c in self.codes)))


@dataclass(frozen=True, slots=True)
class Sex(Field):
    male: str
    female: str

    def widths(self) -> tuple[int, ...]:
        return (1,)

    def alphabet(self) -> str:
        return self.male + self.female


_DATE_PART = re.compile(r"YYYY|YYY|YY|DDD|DD|MM|L")
_PART_WIDTH = {"YYYY": 4, "YYY": 3, "YY": 2, "DDD": 3, "DD": 2, "MM": 2, "L": 1}


@dataclass(frozen=True, slots=True)
class BirthDate(Field):
    """Date of birth.

    ``month_offsets`` holds ``(first_year, last_year, offset)`` triples added
    to the month for births in that window (Polish and Bulgarian century
    encoding).  The ``female_*`` offsets are added for women.
    """

    pattern: str
    years: tuple[int, int] = (1900, 2099)
    month_offsets: tuple[tuple[int, int, int], ...] = ()
    female_month_offset: int = 0
    female_day_offset: int = 0

    def parts(self) -> tuple[str, ...]:
        parts = tuple(_DATE_PART.findall(self.pattern))
        if "".join(parts) != self.pattern:
            raise LayoutError(f"bad birth date pattern {self.pattern!r}")
        return parts

    def widths(self) -> tuple[int, ...]:
        return (sum(_PART_WIDTH[p] for p in self.parts()),)

    def alphabet(self) -> str:
        return DIGITS + (ITALIAN_MONTHS if "L" in self.pattern else "")

    def regex(self) -> str:
        out = []
        for part in self.parts():
            if part == "L":
                out.append(_char_class(ITALIAN_MONTHS))
            else:
                out.append(f"[0-9]{{{_PART_WIDTH[part]}}}")
        return "".join(out)

    def encodes_gender(self) -> bool:
        return bool(self.female_month_offset or self.female_day_offset)


@dataclass(frozen=True, slots=True)
class DayCount(Field):
    """Date of birth written as days elapsed since ``epoch``."""

    epoch: date
    width: int

    def widths(self) -> tuple[int, ...]:
        return (self.width,)

    @property
    def years(self) -> tuple[int, int]:
        last = self.epoch + timedelta(days=10**self.width - 1)
        return (self.epoch.year + 1, last.year - 1)


@dataclass(frozen=True, slots=True)
class Check(Field):
    algorithm: str
    width: int = 1
    covers: tuple[str, ...] | None = None

    def widths(self) -> tuple[int, ...]:
        return (self.width,)

    def alphabet(self) -> str:
        algorithm = ALGORITHMS.get(self.algorithm)
        return algorithm.alphabet if algorithm is not None else ALNUM


# ---------------------------------------------------------------------------
# Display rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DisplayRules:
    """Cosmetic rendering of the canonical raw form.

    ``template`` wins over ``groups`` which wins over ``every``; a ``#`` in a
    template consumes one raw character.
    """

    every: int = 0
    groups: tuple[int, ...] = ()
    template: str | None = None
    separator: str = " "

    @property
    def separators(self) -> frozenset[str]:
        if self.template is not None:
            return frozenset(c for c in self.template if c != "#")
        if self.every or self.groups:
            return frozenset(self.separator)
        return frozenset()

    def render(self, raw: str) -> str:
        if self.template is not None:
            if self.template.count("#") != len(raw):
                return raw
            chars = iter(raw)
            return "".join(next(chars) if c == "#" else c for c in self.template)
        if self.groups:
            chunks: list[str] = []
            pos = 0
            for size in self.groups:
                if pos >= len(raw):
                    break
                chunks.append(raw[pos : pos + size])
                pos += size
            if pos < len(raw):
                chunks.append(raw[pos:])
            return self.separator.join(chunks)
        if self.every:
            return self.separator.join(
                raw[i : i + self.every] for i in range(0, len(raw), self.every)
            )
        return raw


PLAIN = DisplayRules()


# ---------------------------------------------------------------------------
# Format specification
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FormatSpec:
    """Structural and checksum definition of one (category, code) pair."""

    category: Category
    code: str
    name: str
    layout: tuple[Field, ...]
    description: str = ""
    display: DisplayRules = PLAIN
    length: int | None = None
    holder_type: str | None = None
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        body = "".join(f"(?P<f{i}>{f.regex()})" for i, f in enumerate(self.layout))
        object.__setattr__(self, "pattern", re.compile(body))

    @property
    def key(self) -> tuple[Category, str]:
        return (self.category, self.code.upper())

    @property
    def country_or_scheme(self) -> str:
        return self.code

    @property
    def min_length(self) -> int:
        return sum(min(f.widths()) for f in self.layout)

    @property
    def max_length(self) -> int:
        return sum(max(f.widths()) for f in self.layout)

    @property
    def total_length(self) -> int | None:
        """Exact length, or ``None`` when optional fields make it a range."""

        return self.max_length if self.min_length == self.max_length else None

    @property
    def checks(self) -> tuple[int, ...]:
        return tuple(i for i, f in enumerate(self.layout) if isinstance(f, Check))

    def index_of(self, name: str) -> int:
        for i, f in enumerate(self.layout):
            if f.name == name:
                return i
        raise LayoutError(f"{self.category.value}/{self.code}: no field named {name!r}")

    def covered(self, index: int) -> tuple[int, ...]:
        """Indices of the fields the check at ``index`` is computed over."""

        check = self.layout[index]
        assert isinstance(check, Check)
        if check.covers is None:
            return tuple(
                i for i, f in enumerate(self.layout) if i != index and f.checked
            )
        wanted = {self.index_of(n) for n in check.covers}
        return tuple(sorted(wanted))

    def check_order(self) -> tuple[int, ...]:
        """Check indices ordered so that covered checks come first."""

        pending = list(self.checks)
        done: list[int] = []
        while pending:
            ready = [i for i in pending if not any(j in pending for j in self.covered(i))]
            if not ready:
                raise LayoutError(f"{self.category.value}/{self.code}: circular checks")
            done.extend(ready)
            pending = [i for i in pending if i not in ready]
        return tuple(done)

    @property
    def checksum_algorithm(self) -> str:
        """Name of the outermost check algorithm, or ``"none"``."""

        order = self.check_order()
        if not order:
            return "none"
        covered = {j for i in order for j in self.covered(i)}
        for i in reversed(order):
            if i not in covered:
                return self.layout[i].algorithm  # type: ignore[attr-defined,no-any-return]
        return "none"
