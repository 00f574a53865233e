"""Passport document numbers.

Passport numbers are issuer serials without a public checksum; the check
digit seen in the machine readable zone belongs to the MRZ, not the number.
"""

from __future__ import annotations

from ..model import Category, Chars, Field, FormatSpec, Number, OneOf
from .common import country

__all__ = ["FORMATS"]


def _letters_digits(letters: int, digits: int) -> tuple[Field, ...]:
    return (Chars("letter", letters, name="series"), Chars("digit", digits, name="number"))


def _digits(width: int) -> tuple[Field, ...]:
    return (Chars("digit", width, name="number"),)


_LAYOUTS: dict[str, tuple[Field, ...]] = {
    "AR": _letters_digits(3, 6),
    "AT": _letters_digits(1, 7),
    "AU": (Chars("letter", variants=(1, 2), name="series"), Chars("digit", 7, name="number")),
    "BE": _letters_digits(2, 6),
    "BG": _digits(9),
    "BR": _letters_digits(2, 6),
    "CA": _letters_digits(2, 6),
    "CH": _letters_digits(1, 7),
    "CN": (OneOf(("E", "G"), name="series"), Chars("digit", 8, name="number")),
    "CZ": _digits(8),
    "DE": (
        Chars("CFGHJKLMNPRTVWXYZ", 1, name="authority"),
        Chars("CFGHJKLMNPRTVWXYZ0123456789", 8, name="serial"),
    ),
    "DK": _digits(9),
    "EG": _letters_digits(1, 8),
    "ES": _letters_digits(3, 6),
    "FI": _letters_digits(2, 7),
    "FR": (
        Chars("digit", 2, name="office"),
        Chars("letter", 2, name="series"),
        Chars("digit", 5, name="number"),
    ),
    "GB": _digits(9),
    "GR": _letters_digits(2, 7),
    "HR": _digits(9),
    "HU": _letters_digits(2, 7),
    "IE": _letters_digits(2, 7),
    "IL": _digits(8),
    "IN": (
        Chars("letter", 1, name="series"),
        Chars("nonzero", 1, name="lead"),
        Chars("digit", 6, name="number"),
    ),
    "IT": _letters_digits(2, 7),
    "JP": _letters_digits(2, 7),
    "KR": (OneOf(("M", "S", "R", "G", "D"), name="type"), Chars("digit", 8, name="number")),
    "MX": _letters_digits(1, 8),
    "NG": _letters_digits(1, 8),
    "NL": (
        Chars("ABCDEFGHIJKLMNPQRSTUVWXYZ", 2, name="series"),
        Chars("ABCDEFGHIJKLMNPQRSTUVWXYZ123456789", 6, name="serial"),
        Chars("nonzero", 1, name="final"),
    ),
    "NO": _digits(8),
    "NZ": _letters_digits(2, 6),
    "PH": (
        Chars("letter", 1, name="series"),
        Chars("digit", 7, name="number"),
        Chars("letter", 1, name="suffix"),
    ),
    "PL": _letters_digits(2, 7),
    "PT": _letters_digits(1, 6),
    "RO": _digits(8),
    "RU": (Number(2, ranges=((1, 99),), name="series"), Chars("digit", 7, name="number")),
    "SE": _digits(8),
    "SG": (
        OneOf(("E", "K"), name="series"),
        Chars("digit", 7, name="number"),
        Chars("letter", 1, name="suffix"),
    ),
    "SI": _letters_digits(2, 7),
    "TH": _letters_digits(2, 7),
    "TR": (OneOf(("U", "S", "Z"), name="type"), Chars("digit", 8, name="number")),
    "UA": _letters_digits(2, 6),
    "US": (Chars("letter", 1, name="series"), Chars("digit", 8, name="number")),
    "ZA": (OneOf(("A", "M", "T", "D"), name="type"), Chars("digit", 8, name="number")),
}

FORMATS = tuple(
    FormatSpec(
        category=Category.PASSPORT,
        code=code,
        name=f"{country(code)} passport",
        description="Passport document number",
        layout=layout,
    )
    for code, layout in _LAYOUTS.items()
)
