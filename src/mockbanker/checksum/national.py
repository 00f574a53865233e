"""National check schemes that do not reduce to a plain weighted sum.

Each class documents the rule it implements.  Payloads are the canonical raw
characters the check slot covers, in layout order.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..utils.constants import DIGITS, LETTERS
from .base import Algorithm, Context, NoCheckDigitError, to_digits

__all__ = [
    "ItalianOddEven",
    "FrenchRib",
    "FrenchVatKey",
    "BelgianNational",
    "BritishVat",
    "SingaporeNric",
    "TaiwanId",
    "SpanishCif",
    "AustralianAbn",
    "TurkishVkn",
    "RussianSnils",
    "KoreanBrn",
    "UkrainianEdrpou",
    "HungarianPersonal",
]

# Values for characters at odd (1-based) positions; digits share the table
# of the first ten letters.
_ODD = (
    1, 0, 5, 7, 9, 13, 15, 17, 19, 21, 2, 4, 18, 20, 11, 3, 6, 8, 12, 14, 16, 10, 22, 25, 24, 23,
)


def _odd_value(char: str) -> int:
    if char.isdigit():
        return _ODD[int(char)]
    return _ODD[ord(char) - ord("A")]


def _even_value(char: str) -> int:
    if char.isdigit():
        return int(char)
    return ord(char) - ord("A")


@dataclass(frozen=True, slots=True)
class ItalianOddEven(Algorithm):
    """Odd/even table sum modulo 26 rendered as a letter.

    Used by the Italian codice fiscale, the Italian CIN and Cypriot VAT.
    """

    width: int = 1
    alphabet: str = LETTERS

    def compute(self, payload: str, context: Context | None = None) -> str:
        total = sum(
            _odd_value(c) if i % 2 == 0 else _even_value(c) for i, c in enumerate(payload)
        )
        return LETTERS[total % 26]


# A-I, J-R and S-Z each map onto the digits, S starting at 2.
_RIB_LETTERS = {c: str(i % 9 + 1) for i, c in enumerate("ABCDEFGHIJKLMNOPQR")}
_RIB_LETTERS.update({c: str(i + 2) for i, c in enumerate("STUVWXYZ")})


@dataclass(frozen=True, slots=True)
class FrenchRib(Algorithm):
    """French RIB key over bank (5), branch (5) and account (11) codes."""

    width: int = 2
    alphabet: str = DIGITS

    def compute(self, payload: str, context: Context | None = None) -> str:
        digits = "".join(_RIB_LETTERS.get(c, c) for c in payload)
        bank, branch, account = int(digits[:5]), int(digits[5:10]), int(digits[10:])
        return "%02d" % (97 - (89 * bank + 15 * branch + 3 * account) % 97)


@dataclass(frozen=True, slots=True)
class FrenchVatKey(Algorithm):
    """Two digit key prefixed to the SIREN in French VAT numbers."""

    width: int = 2
    alphabet: str = DIGITS

    def compute(self, payload: str, context: Context | None = None) -> str:
        return "%02d" % ((12 + 3 * (int(payload) % 97)) % 97)


@dataclass(frozen=True, slots=True)
class BelgianNational(Algorithm):
    """Belgian national register number.

    People born in 2000 or later get a ``2`` prepended before the modulo 97
    complement.  Without a known birth date both variants are accepted.
    """

    width: int = 2
    alphabet: str = DIGITS

    @staticmethod
    def _key(payload: str, millennial: bool) -> str:
        n = int(("2" if millennial else "") + payload)
        return "%02d" % (97 - n % 97)

    @staticmethod
    def _millennial(context: Context | None) -> bool | None:
        born = (context or {}).get("birth_date")
        return None if born is None else born.year >= 2000

    def compute(self, payload: str, context: Context | None = None) -> str:
        return self._key(payload, bool(self._millennial(context)))

    def verify(self, payload: str, check: str, context: Context | None = None) -> bool:
        millennial = self._millennial(context)
        if millennial is None:
            return check in (self._key(payload, False), self._key(payload, True))
        return check == self._key(payload, millennial)


@dataclass(frozen=True, slots=True)
class BritishVat(Algorithm):
    """UK VAT: weights 8..2, two check digits; the post-2010 "+55" rule verifies too."""

    width: int = 2
    alphabet: str = DIGITS

    @staticmethod
    def _total(payload: str) -> int:
        return sum(w * d for w, d in zip(range(8, 1, -1), to_digits(payload)))

    def compute(self, payload: str, context: Context | None = None) -> str:
        return "%02d" % (-self._total(payload) % 97)

    def verify(self, payload: str, check: str, context: Context | None = None) -> bool:
        total = self._total(payload) + int(check)
        return total % 97 == 0 or (total + 55) % 97 == 0


@dataclass(frozen=True, slots=True)
class SingaporeNric(Algorithm):
    """Singapore NRIC/FIN letter over prefix letter and seven digits."""

    width: int = 1
    alphabet: str = "ABCDEFGHIJKLMNPQRTUWXZ"

    def compute(self, payload: str, context: Context | None = None) -> str:
        prefix, digits = payload[0], to_digits(payload[1:])
        total = sum(w * d for w, d in zip((2, 7, 6, 5, 4, 3, 2), digits))
        if prefix in "TG":
            total += 4
        table = "JZIHGFEDCBA" if prefix in "ST" else "XWUTRQPNMLK"
        return table[total % 11]


# Area letters in the order of their numeric values 10..35.
_TW_AREAS = "ABCDEFGHJKLMNPQRSTUVXYWZIO"


@dataclass(frozen=True, slots=True)
class TaiwanId(Algorithm):
    """Taiwan national identification number."""

    width: int = 1
    alphabet: str = DIGITS

    def compute(self, payload: str, context: Context | None = None) -> str:
        area = 10 + _TW_AREAS.index(payload[0])
        total = area // 10 + (area % 10) * 9
        total += sum(w * d for w, d in zip((8, 7, 6, 5, 4, 3, 2, 1), to_digits(payload[1:])))
        return str((10 - total % 10) % 10)


@dataclass(frozen=True, slots=True)
class SpanishCif(Algorithm):
    """Spanish CIF control character.

    Entity letters K, L, M, N, P, Q, R, S and W take a letter, A, B, E and H a digit,
    the rest may carry either; generation always produces the digit there.
    """

    width: int = 1
    alphabet: str = DIGITS + "JABCDEFGHI"

    @staticmethod
    def _value(payload: str) -> int:
        digits = to_digits(payload[1:])
        total = 0
        for i, d in enumerate(digits):
            if i % 2 == 0:
                total += sum(divmod(2 * d, 10))
            else:
                total += d
        return (10 - total % 10) % 10

    def compute(self, payload: str, context: Context | None = None) -> str:
        value = self._value(payload)
        if payload[0] in "KLMNPQRSW":
            return "JABCDEFGHI"[value]
        return str(value)

    def verify(self, payload: str, check: str, context: Context | None = None) -> bool:
        value = self._value(payload)
        if payload[0] in "KLMNPQRSW":
            return check == "JABCDEFGHI"[value]
        if payload[0] in "ABEH":
            return check == str(value)
        return check in (str(value), "JABCDEFGHI"[value])


@dataclass(frozen=True, slots=True)
class AustralianAbn(Algorithm):
    """Two leading check digits of the Australian Business Number."""

    width: int = 2
    alphabet: str = DIGITS

    @staticmethod
    def _valid(number: str) -> bool:
        digits = to_digits(number)
        digits[0] -= 1
        weights = (10, 1, 3, 5, 7, 9, 11, 13, 15, 17, 19)
        return sum(w * d for w, d in zip(weights, digits)) % 89 == 0

    def compute(self, payload: str, context: Context | None = None) -> str:
        for candidate in range(11, 100):
            if self._valid(str(candidate) + payload):
                return str(candidate)
        raise NoCheckDigitError("no ABN check digits")

    def verify(self, payload: str, check: str, context: Context | None = None) -> bool:
        return check[0] != "0" and self._valid(check + payload)


@dataclass(frozen=True, slots=True)
class TurkishVkn(Algorithm):
    """Turkish tax number (vergi kimlik numarası)."""

    width: int = 1
    alphabet: str = DIGITS

    def compute(self, payload: str, context: Context | None = None) -> str:
        total = 0
        for i, d in enumerate(to_digits(payload)):
            c1 = (d + 9 - i) % 10
            c2 = (c1 * 2 ** (9 - i)) % 9
            if c1 != 0 and c2 == 0:
                c2 = 9
            total += c2
        return str((10 - total % 10) % 10)


@dataclass(frozen=True, slots=True)
class RussianSnils(Algorithm):
    """Russian SNILS: weights 9..1, reduced modulo 101, 100 becomes 00."""

    width: int = 2
    alphabet: str = DIGITS

    def compute(self, payload: str, context: Context | None = None) -> str:
        total = sum(w * d for w, d in zip(range(9, 0, -1), to_digits(payload)))
        value = total % 101
        return "%02d" % (0 if value == 100 else value)


@dataclass(frozen=True, slots=True)
class KoreanBrn(Algorithm):
    """South Korean business registration number."""

    width: int = 1
    alphabet: str = DIGITS

    def compute(self, payload: str, context: Context | None = None) -> str:
        digits = to_digits(payload)
        total = sum(w * d for w, d in zip((1, 3, 7, 1, 3, 7, 1, 3, 5), digits))
        total += digits[8] * 5 // 10
        return str((10 - total % 10) % 10)


@dataclass(frozen=True, slots=True)
class UkrainianEdrpou(Algorithm):
    """Ukrainian EDRPOU enterprise code."""

    width: int = 1
    alphabet: str = DIGITS

    def compute(self, payload: str, context: Context | None = None) -> str:
        digits = to_digits(payload)
        weights = (7, 1, 2, 3, 4, 5, 6) if payload[0] in "345" else (1, 2, 3, 4, 5, 6, 7)
        total = sum(w * d for w, d in zip(weights, digits))
        if total % 11 == 10:
            total = sum((w + 2) * d for w, d in zip(weights, digits))
        return str(total % 11 % 10)


_HU_CENTURIES = {"1": 1900, "2": 1900, "3": 2000, "4": 2000, "5": 1800, "6": 1800}


@dataclass(frozen=True, slots=True)
class HungarianPersonal(Algorithm):
    """Hungarian personal identification number (személyi szám).

    Weights run 1..10 for people born before 1997 and 10..1 afterwards; a
    remainder of 10 makes the serial unusable.
    """

    width: int = 1
    alphabet: str = DIGITS

    def compute(self, payload: str, context: Context | None = None) -> str:
        digits = to_digits(payload)
        year = _HU_CENTURIES.get(payload[0], 1900) + int(payload[1:3])
        weights = range(1, 11) if year < 1997 else range(10, 0, -1)
        value = sum(w * d for w, d in zip(weights, digits)) % 11
        if value == 10:
            raise NoCheckDigitError("remainder 10")
        return str(value)
