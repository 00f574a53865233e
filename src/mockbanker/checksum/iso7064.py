"""Standard check digit schemes backed by :mod:`stdnum`.

These wrap the ISO 7064 family, Luhn and Verhoeff implementations shipped with
python-stdnum and adapt them to the :class:`~mockbanker.checksum.base.Algorithm`
interface.  The IBAN variant solves the two check digits of ISO 13616: the
payload arrives as country code followed by the BBAN and is rearranged before
the MOD 97-10 computation.
"""

from __future__ import annotations

from dataclasses import dataclass

from stdnum import luhn, verhoeff
from stdnum.iso7064 import mod_11_2, mod_11_10, mod_97_10

from ..utils.constants import DIGITS
from .base import Algorithm, Context

__all__ = ["Luhn", "Verhoeff", "Mod97_10", "Iban", "Mod11_10", "Mod11_2", "NoCheck"]


@dataclass(frozen=True, slots=True)
class Luhn(Algorithm):
    """Luhn mod 10 over decimal digits."""

    width: int = 1
    alphabet: str = DIGITS

    def compute(self, payload: str, context: Context | None = None) -> str:
        return luhn.calc_check_digit(payload)

    def verify(self, payload: str, check: str, context: Context | None = None) -> bool:
        return luhn.is_valid(payload + check)


@dataclass(frozen=True, slots=True)
class Verhoeff(Algorithm):
    """Verhoeff dihedral group check digit."""

    width: int = 1
    alphabet: str = DIGITS

    def compute(self, payload: str, context: Context | None = None) -> str:
        return verhoeff.calc_check_digit(payload)

    def verify(self, payload: str, check: str, context: Context | None = None) -> bool:
        return verhoeff.is_valid(payload + check)


@dataclass(frozen=True, slots=True)
class Mod97_10(Algorithm):
    """ISO 7064 MOD 97-10 with two trailing check digits.

    Letters count as two digit numbers (A=10 ... Z=35), which makes this the
    ISO 17442 check used by LEI codes.
    """

    width: int = 2
    alphabet: str = DIGITS

    def compute(self, payload: str, context: Context | None = None) -> str:
        return mod_97_10.calc_check_digits(payload)

    def verify(self, payload: str, check: str, context: Context | None = None) -> bool:
        return mod_97_10.is_valid(payload + check)


@dataclass(frozen=True, slots=True)
class Iban(Algorithm):
    """ISO 13616 IBAN check digits.

    ``payload`` is the country code followed by the BBAN.  The check digits
    make ``BBAN + country + check`` congruent to 1 modulo 97.
    """

    width: int = 2
    alphabet: str = DIGITS

    def compute(self, payload: str, context: Context | None = None) -> str:
        return mod_97_10.calc_check_digits(payload[2:] + payload[:2])

    def verify(self, payload: str, check: str, context: Context | None = None) -> bool:
        return mod_97_10.is_valid(payload[2:] + payload[:2] + check)


@dataclass(frozen=True, slots=True)
class Mod11_10(Algorithm):
    """ISO 7064 MOD 11-10 hybrid system (German tax and VAT numbers, OIB)."""

    width: int = 1
    alphabet: str = DIGITS

    def compute(self, payload: str, context: Context | None = None) -> str:
        return mod_11_10.calc_check_digit(payload)


@dataclass(frozen=True, slots=True)
class Mod11_2(Algorithm):
    """ISO 7064 MOD 11-2; the check is a digit or ``X``."""

    width: int = 1
    alphabet: str = DIGITS + "X"

    def compute(self, payload: str, context: Context | None = None) -> str:
        return mod_11_2.calc_check_digit(payload)


@dataclass(frozen=True, slots=True)
class NoCheck(Algorithm):
    """Pass-through for purely structural formats.

    It owns no check characters; a check slot referencing it must have width 0.
    """

    width: int = 0
    alphabet: str = ""

    def compute(self, payload: str, context: Context | None = None) -> str:
        return ""

    def verify(self, payload: str, check: str, context: Context | None = None) -> bool:
        return check == ""
