"""Character classes and lookup tables shared by checksums and layouts."""

from __future__ import annotations

import string

__all__ = [
    "DIGITS",
    "LETTERS",
    "ALNUM",
    "CHARSETS",
    "charset",
    "ITALIAN_MONTHS",
]

DIGITS: str = string.digits
LETTERS: str = string.ascii_uppercase
ALNUM: str = DIGITS + LETTERS

CHARSETS: dict[str, str] = {
    "digit": DIGITS,
    "letter": LETTERS,
    "alnum": ALNUM,
    "nonzero": "123456789",
}

# Italian codice fiscale month letters, January first.
ITALIAN_MONTHS: str = "ABCDEHLMPRST"


def charset(name: str) -> str:
    """Resolve a named character class; unknown names are taken literally."""

    return CHARSETS.get(name, name)
