"""IBAN formats: country code, ISO 7064 MOD 97-10 check digits, BBAN."""

from __future__ import annotations

from ..model import Category, Check, DisplayRules, FormatSpec, Literal
from .bban import BBANS, IBAN_LENGTHS, PARTIAL, TERRITORIES
from .common import country

__all__ = ["FORMATS"]

_GROUPS_OF_FOUR = DisplayRules(every=4)


def _iban(code: str, parent: str) -> FormatSpec:
    if code in PARTIAL:
        note = "partial adopter, not in the SWIFT registry"
    elif parent != code:
        note = f"uses the {country(parent)} BBAN layout"
    else:
        note = "SWIFT registry"
    return FormatSpec(
        category=Category.IBAN,
        code=code,
        name=f"{country(code)} IBAN",
        description=f"International Bank Account Number ({note})",
        layout=(Literal(code, name="country"), Check("iban", 2, name="check_digits"), *BBANS[parent]),
        display=_GROUPS_OF_FOUR,
        length=IBAN_LENGTHS[code],
    )


FORMATS = tuple(
    [_iban(code, code) for code in BBANS]
    + [_iban(code, parent) for code, parent in TERRITORIES.items()]
)
