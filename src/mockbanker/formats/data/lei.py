"""Legal Entity Identifier (ISO 17442).

Twenty characters: the four character prefix of the issuing Local Operating
Unit, two reserved zeros, twelve entity specific characters and two ISO 7064
MOD 97-10 check digits over the preceding eighteen.
"""

from __future__ import annotations

from ..model import Category, Chars, Check, FormatSpec, Literal, OneOf

__all__ = ["FORMATS", "LOU_PREFIXES"]

# Prefixes of active Local Operating Units.
LOU_PREFIXES = (
    "0292",
    "2138",
    "2221",
    "2549",
    "3157",
    "3912",
    "4469",
    "5299",
    "5493",
    "6354",
    "7245",
    "8156",
    "9598",
    "9695",
    "9845",
)

FORMATS = (
    FormatSpec(
        category=Category.LEI,
        code="LEI",
        name="Legal Entity Identifier",
        description="ISO 17442 legal entity identifier with MOD 97-10 check digits",
        layout=(
            OneOf(LOU_PREFIXES, name="lou"),
            Literal("00", name="reserved"),
            Chars("alnum", 12, name="entity"),
            Check("lei", 2, name="check_digits"),
        ),
        length=20,
        holder_type="company",
    ),
)
