"""SWIFT/BIC codes (ISO 9362).

``AAAA CC LL bbb``: four letter institution code, the ISO country code, a two
character location and an optional three character branch.  Location codes
with a ``0`` in second place denote test and training BICs and are excluded
from generation.  There is no check digit.
"""

from __future__ import annotations

from ..model import Category, Chars, FormatSpec, Literal
from .common import COUNTRY_NAMES, country

__all__ = ["FORMATS"]

_LOCATION_SECOND = "123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _bic(code: str) -> FormatSpec:
    return FormatSpec(
        category=Category.SWIFT_BIC,
        code=code,
        name=f"{country(code)} SWIFT/BIC",
        description="Business Identifier Code, 8 or 11 characters",
        layout=(
            Chars("letter", 4, name="institution"),
            Literal(code, name="country"),
            Chars("alnum", 1, name="location"),
            Chars(_LOCATION_SECOND, 1, name="location_detail"),
            Chars("alnum", variants=(0, 3), name="branch"),
        ),
    )


FORMATS = tuple(_bic(code) for code in sorted(COUNTRY_NAMES))
