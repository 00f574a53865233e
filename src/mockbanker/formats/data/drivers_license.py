"""Driver's license numbers.

Federal countries are keyed by ISO 3166-2 subdivision (``US-CA``,
``CA-ON``, ``AU-NSW``); countries that print the holder's personal number on
the license reuse that layout.
"""

from __future__ import annotations

from ..model import PLAIN, Category, Chars, DisplayRules, Field, FormatSpec, Number, OneOf
from .common import country
from .personal_id import LAYOUTS as PERSONAL

__all__ = ["FORMATS"]


def _ld(letters: int, digits: int) -> tuple[Field, ...]:
    return (Chars("letter", letters, name="prefix"), Chars("digit", digits, name="number"))


def _d(width: int) -> tuple[Field, ...]:
    return (Chars("digit", width, name="number"),)


_SUBDIVISIONS: dict[str, tuple[str, tuple[Field, ...], DisplayRules]] = {
    "US-AZ": ("Arizona", _ld(1, 8), PLAIN),
    "US-CA": ("California", _ld(1, 7), PLAIN),
    "US-CO": ("Colorado", _d(9), DisplayRules(template="##-###-####")),
    "US-FL": ("Florida", _ld(1, 12), DisplayRules(template="####-###-##-###-#")),
    "US-GA": ("Georgia", _d(9), PLAIN),
    "US-IL": ("Illinois", _ld(1, 11), DisplayRules(template="####-####-####")),
    "US-MA": ("Massachusetts", (OneOf(("S", "SA"), name="prefix"), Chars("digit", 8, name="number")), PLAIN),
    "US-MD": ("Maryland", _ld(1, 12), PLAIN),
    "US-MI": ("Michigan", _ld(1, 12), PLAIN),
    "US-MN": ("Minnesota", _ld(1, 12), PLAIN),
    "US-NC": ("North Carolina", _d(12), PLAIN),
    "US-NJ": ("New Jersey", _ld(1, 14), DisplayRules(template="#####-#####-#####")),
    "US-NY": ("New York", _d(9), DisplayRules(template="### ### ###")),
    "US-OH": ("Ohio", _ld(2, 6), PLAIN),
    "US-PA": ("Pennsylvania", _d(8), DisplayRules(template="## ### ###")),
    "US-TX": ("Texas", _d(8), PLAIN),
    "US-VA": ("Virginia", _ld(1, 8), PLAIN),
    "US-WA": ("Washington", (OneOf(("WDL",), name="prefix"), Chars("alnum", 9, name="number")), PLAIN),
    "US-WI": ("Wisconsin", _ld(1, 13), DisplayRules(template="####-####-####-##")),
    "CA-AB": ("Alberta", _d(9), DisplayRules(template="######-###")),
    "CA-BC": ("British Columbia", _d(7), PLAIN),
    "CA-ON": ("Ontario", _ld(1, 14), DisplayRules(template="#####-#####-#####")),
    "CA-QC": ("Québec", _ld(1, 12), PLAIN),
    "AU-NSW": ("New South Wales", _d(8), PLAIN),
    "AU-QLD": ("Queensland", _d(9), PLAIN),
    "AU-VIC": ("Victoria", _d(9), PLAIN),
}

_SUBDIVISION_COUNTRY = {"US": "United States", "CA": "Canada", "AU": "Australia"}

_COUNTRIES: dict[str, tuple[tuple[Field, ...], DisplayRules, str]] = {
    "AT": (_d(8), PLAIN, ""),
    "BE": (_d(10), PLAIN, ""),
    "BR": (_d(11), PLAIN, "Carteira Nacional de Habilitação register number"),
    "CN": (PERSONAL["CN"], PLAIN, "The license number is the resident identity number"),
    "CZ": (_ld(2, 6), PLAIN, ""),
    "DE": (
        (
            Chars("alnum", 1, name="authority"),
            Chars("digit", 2, name="office"),
            Chars("alnum", 6, name="serial"),
            Chars("digit", 1, name="control"),
            Chars("alnum", 1, name="issue"),
        ),
        PLAIN,
        "Führerscheinnummer",
    ),
    "DK": (_d(8), PLAIN, ""),
    "ES": (PERSONAL["ES"], PLAIN, "The license number is the holder's DNI"),
    "FR": (_d(12), PLAIN, "Numéro de permis"),
    "GB": (
        (
            Chars("letter", 5, name="surname"),
            Chars("digit", 6, name="birth_code"),
            Chars("letter", 2, name="initials"),
            Chars("digit", 1, name="tiebreak"),
            Chars("letter", 2, name="suffix"),
        ),
        PLAIN,
        "DVLA driving licence number",
    ),
    "IE": (_d(9), PLAIN, ""),
    "IN": (
        (
            OneOf(("DL", "MH", "KA", "TN", "UP", "GJ", "RJ", "WB", "AP", "TS", "KL", "HR", "PB"), name="state"),
            Number(2, ranges=((1, 99),), name="rto"),
            Number(4, ranges=((1980, 2025),), name="year"),
            Chars("digit", 7, name="number"),
        ),
        DisplayRules(template="##-##-####-#######"),
        "",
    ),
    "IT": ((OneOf(("U1",), name="prefix"), Chars("alnum", 7, name="serial"), Chars("letter", 1, name="suffix")), PLAIN, ""),
    "JP": (_d(12), PLAIN, ""),
    "KR": (
        (Number(2, ranges=((11, 28),), name="region"), Chars("digit", 10, name="number")),
        DisplayRules(template="##-##-######-##"),
        "",
    ),
    "NL": (_d(10), PLAIN, ""),
    "NZ": (_ld(2, 6), PLAIN, ""),
    "PL": (
        (Number(5, ranges=((1, 99999),), name="serial"), Number(2, ranges=((1, 99),), name="year"), Chars("digit", 4, name="office")),
        DisplayRules(template="#####/##/####"),
        "",
    ),
    "SE": (PERSONAL["SE"], DisplayRules(template="######-####"), "The license number is the holder's personnummer"),
    "SG": (PERSONAL["SG"], PLAIN, "The license number is the holder's NRIC"),
    "ZA": ((Chars("digit", 10, name="number"), Chars("letter", 2, name="suffix")), PLAIN, ""),
}


def _subdivision_name(code: str, region: str) -> str:
    return f"{_SUBDIVISION_COUNTRY[code[:2]]} ({region}) driver's license"


FORMATS = tuple(
    [
        FormatSpec(
            category=Category.DRIVERS_LICENSE,
            code=code,
            name=_subdivision_name(code, region),
            description="State or provincial driver's license number",
            layout=layout,
            display=display,
        )
        for code, (region, layout, display) in _SUBDIVISIONS.items()
    ]
    + [
        FormatSpec(
            category=Category.DRIVERS_LICENSE,
            code=code,
            name=f"{country(code)} driver's license",
            description=description or "Driver's license number",
            layout=layout,
            display=display,
        )
        for code, (layout, display, description) in _COUNTRIES.items()
    ]
)
