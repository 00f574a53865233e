"""Encoding and decoding of birth dates embedded in identifiers.

The generator renders a :class:`~mockbanker.formats.model.BirthDate` from a
date and a gender; the validator goes the other way.  Abbreviated years
(``YY``, ``YYY``) are ambiguous on their own, so decoding is done per
candidate year and callers narrow the candidates with the other fields of the
layout.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from ..utils.constants import ITALIAN_MONTHS
from .model import _PART_WIDTH, BirthDate, DayCount

__all__ = [
    "Spans",
    "intersect",
    "union",
    "month_offset",
    "encode_birth_date",
    "truncate_birth_date",
    "split_birth_date",
    "candidate_years",
    "decode_birth_date",
    "encode_day_count",
    "decode_day_count",
]

Spans = tuple[tuple[int, int], ...]


# ---------------------------------------------------------------------------
# Year windows
# ---------------------------------------------------------------------------


def union(spans: Iterable[tuple[int, int]]) -> Spans:
    """Merge overlapping or adjacent inclusive year ranges."""

    merged: list[tuple[int, int]] = []
    for low, high in sorted(spans):
        if merged and low <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], high))
        else:
            merged.append((low, high))
    return tuple(merged)


def intersect(a: Sequence[tuple[int, int]], b: Sequence[tuple[int, int]]) -> Spans:
    """Intersection of two sets of inclusive year ranges."""

    out = []
    for a_low, a_high in a:
        for b_low, b_high in b:
            low, high = max(a_low, b_low), min(a_high, b_high)
            if low <= high:
                out.append((low, high))
    return union(out)


# ---------------------------------------------------------------------------
# Birth dates
# ---------------------------------------------------------------------------


def month_offset(token: BirthDate, year: int) -> int:
    for first, last, offset in token.month_offsets:
        if first <= year <= last:
            return offset
    return 0


def encode_birth_date(token: BirthDate, born: date, female: bool = False) -> str:
    """Render ``born`` with the parts of ``token``."""

    out = []
    for part in token.parts():
        if part == "YYYY":
            out.append(f"{born.year:04d}")
        elif part == "YYY":
            out.append(f"{born.year % 1000:03d}")
        elif part == "YY":
            out.append(f"{born.year % 100:02d}")
        elif part == "MM":
            month = born.month + month_offset(token, born.year)
            if female:
                month += token.female_month_offset
            out.append(f"{month:02d}")
        elif part == "DD":
            day = born.day + (token.female_day_offset if female else 0)
            out.append(f"{day:02d}")
        elif part == "DDD":
            ordinal = born.timetuple().tm_yday + (token.female_day_offset if female else 0)
            out.append(f"{ordinal:03d}")
        else:
            out.append(ITALIAN_MONTHS[born.month - 1])
    return "".join(out)


def truncate_birth_date(token: BirthDate, born: date) -> date:
    """Drop the parts of ``born`` that ``token`` does not write down.

    A pattern without a day reads back as the first of the month, one without
    a month as the first of January.
    """

    parts = token.parts()
    if "DD" in parts or "DDD" in parts:
        return born
    if "MM" in parts or "L" in parts:
        return born.replace(day=1)
    return born.replace(month=1, day=1)


def split_birth_date(token: BirthDate, value: str) -> dict[str, str]:
    """Map each date part of ``token`` to its slice of ``value``."""

    parts: dict[str, str] = {}
    pos = 0
    for part in token.parts():
        width = _PART_WIDTH[part]
        parts[part] = value[pos : pos + width]
        pos += width
    return parts


def candidate_years(token: BirthDate, value: str) -> list[int]:
    """Years inside ``token.years`` consistent with the year digits of ``value``."""

    parts = split_birth_date(token, value)
    first, last = token.years
    for part, modulus in (("YYYY", 10_000), ("YYY", 1000), ("YY", 100)):
        if part in parts:
            digits = int(parts[part])
            return [y for y in range(first, last + 1) if y % modulus == digits]
    return list(range(first, last + 1))


def decode_birth_date(token: BirthDate, value: str, year: int) -> tuple[date, bool] | None:
    """Decode ``value`` assuming a birth in ``year``.

    Returns ``(date, female)`` or ``None`` when the parts do not form a real
    date.  ``female`` is only meaningful when the token encodes gender.  A
    pattern without a day part decodes to the first of the month.
    """

    parts = split_birth_date(token, value)
    female = False
    month = 1
    day = 1

    if "MM" in parts:
        month = int(parts["MM"]) - month_offset(token, year)
        if token.female_month_offset and month > token.female_month_offset:
            month -= token.female_month_offset
            female = True
    elif "L" in parts:
        if parts["L"] not in ITALIAN_MONTHS:
            return None
        month = ITALIAN_MONTHS.index(parts["L"]) + 1

    if "DDD" in parts:
        ordinal = int(parts["DDD"])
        if token.female_day_offset and ordinal > token.female_day_offset:
            ordinal -= token.female_day_offset
            female = True
        start = date(year, 1, 1)
        if not 1 <= ordinal <= (date(year + 1, 1, 1) - start).days:
            return None
        return start + timedelta(days=ordinal - 1), female

    if "DD" in parts:
        day = int(parts["DD"])
        if token.female_day_offset and day > token.female_day_offset:
            day -= token.female_day_offset
            female = True

    try:
        return date(year, month, day), female
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Day counts
# ---------------------------------------------------------------------------


def encode_day_count(token: DayCount, born: date) -> str:
    return f"{(born - token.epoch).days:0{token.width}d}"


def decode_day_count(token: DayCount, value: str) -> date | None:
    try:
        return token.epoch + timedelta(days=int(value))
    except OverflowError:
        return None
