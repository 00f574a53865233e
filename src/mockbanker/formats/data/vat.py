"""EU VAT identification numbers plus the United Kingdom.

The raw form carries the two letter prefix.  Prefixes are not part of any
check computation; Greece uses ``EL`` rather than its ISO code.
"""

from __future__ import annotations

from ..model import Category, Chars, Check, Field, FormatSpec, Literal, Number, OneOf
from .common import country

__all__ = ["FORMATS"]


def _prefix(code: str) -> Literal:
    return Literal(code, name="prefix", checked=False)


_LAYOUTS: dict[str, tuple[Field, ...]] = {
    "AT": (_prefix("AT"), Literal("U", checked=False), Chars("digit", 7, name="number"), Check("at_vat")),
    "BE": (
        _prefix("BE"),
        OneOf(("0", "1"), name="lead"),
        Chars("digit", 7, name="number"),
        Check("mod97_complement", 2),
    ),
    "BG": (_prefix("BG"), Chars("digit", 8, name="number"), Check("bg_company")),
    "CY": (
        _prefix("CY"),
        OneOf(("0", "1", "3", "4", "5", "9"), name="lead"),
        Chars("digit", 7, name="number"),
        Check("odd_even"),
    ),
    "CZ": (
        _prefix("CZ"),
        Number(1, ranges=((0, 8),), name="lead"),
        Chars("digit", 6, name="number"),
        Check("cz_ico"),
    ),
    "DE": (
        _prefix("DE"),
        Number(1, ranges=((1, 9),), name="lead"),
        Chars("digit", 7, name="number"),
        Check("mod11_10"),
    ),
    "DK": (
        _prefix("DK"),
        Number(1, ranges=((1, 9),), name="lead"),
        Chars("digit", 6, name="number"),
        Check("dk_company"),
    ),
    "EE": (_prefix("EE"), Literal("10"), Chars("digit", 6, name="number"), Check("ee_vat")),
    "ES": (
        _prefix("ES"),
        OneOf(tuple("ABCDEFGHJNPQRSUVW"), name="entity_type"),
        Chars("digit", 7, name="number"),
        Check("es_cif"),
    ),
    "FI": (_prefix("FI"), Chars("digit", 7, name="number"), Check("fi_company")),
    "FR": (
        _prefix("FR"),
        Check("fr_vat", 2, covers=("siren", "siren_check"), name="key"),
        Chars("digit", 8, name="siren"),
        Check("luhn", covers=("siren",), name="siren_check"),
    ),
    "GB": (_prefix("GB"), Chars("digit", 7, name="number"), Check("gb_vat", 2)),
    "GR": (_prefix("EL"), Chars("digit", 8, name="number"), Check("gr_vat")),
    "HR": (_prefix("HR"), Chars("digit", 10, name="number"), Check("mod11_10")),
    "HU": (_prefix("HU"), Chars("digit", 7, name="number"), Check("hu_vat")),
    "IE": (_prefix("IE"), Chars("digit", 7, name="number"), Check("ie_pps")),
    "IT": (
        _prefix("IT"),
        Number(7, ranges=((1, 9999999),), name="number"),
        Number(3, ranges=((1, 100), (120, 121), (888, 888), (999, 999)), name="office"),
        Check("luhn"),
    ),
    "LT": (_prefix("LT"), Chars("digit", 7, name="number"), Literal("1"), Check("lt_vat")),
    "LU": (_prefix("LU"), Chars("digit", 6, name="number"), Check("lu_vat", 2)),
    "LV": (
        _prefix("LV"),
        Number(1, ranges=((4, 9),), name="lead"),
        Chars("digit", 9, name="number"),
        Check("lv_vat"),
    ),
    "MT": (_prefix("MT"), Number(6, ranges=((100000, 999999),), name="number"), Check("mt_vat", 2)),
    "NL": (
        _prefix("NL"),
        Chars("digit", 8, name="rsin"),
        Check("nl_bsn", covers=("rsin",)),
        Literal("B", checked=False),
        Number(2, ranges=((1, 99),), name="suffix"),
    ),
    "PL": (
        _prefix("PL"),
        Number(3, ranges=((101, 999),), name="tax_office"),
        Chars("digit", 6, name="number"),
        Check("pl_nip"),
    ),
    "PT": (
        _prefix("PT"),
        OneOf(("5", "6", "9"), name="type"),
        Chars("digit", 7, name="number"),
        Check("pt_nif"),
    ),
    "RO": (
        _prefix("RO"),
        Number(1, ranges=((1, 9),), name="lead"),
        Chars("digit", 8, name="number"),
        Check("ro_vat"),
    ),
    "SE": (
        _prefix("SE"),
        Number(1, ranges=((1, 9),), name="lead"),
        Chars("digit", 1, name="second"),
        Number(1, ranges=((2, 9),), name="group"),
        Chars("digit", 6, name="number"),
        Check("luhn", covers=("lead", "second", "group", "number")),
        Literal("01", checked=False),
    ),
    "SI": (_prefix("SI"), Number(7, ranges=((1000000, 9999999),), name="number"), Check("si_vat")),
    "SK": (
        _prefix("SK"),
        Number(1, ranges=((1, 9),), name="lead"),
        Chars("digit", 1, name="second"),
        Number(1, ranges=((2, 4), (7, 9)), name="type"),
        Chars("digit", 6, name="number"),
        Check("sk_vat"),
    ),
}

_NAMES = {
    "AT": "UID",
    "BE": "BTW/TVA",
    "BG": "ДДС номер",
    "CY": "ΦΠΑ",
    "CZ": "DIČ",
    "DE": "USt-IdNr.",
    "DK": "CVR/SE",
    "EE": "KMKR",
    "ES": "NIF-IVA",
    "FI": "ALV",
    "FR": "TVA intracommunautaire",
    "GB": "VAT registration number",
    "GR": "ΑΦΜ",
    "HR": "PDV-ID",
    "HU": "ANUM",
    "IE": "VAT number",
    "IT": "Partita IVA",
    "LT": "PVM mokėtojo kodas",
    "LU": "TVA",
    "LV": "PVN",
    "MT": "VAT number",
    "NL": "Btw-id",
    "PL": "NIP",
    "PT": "NIPC",
    "RO": "CIF",
    "SE": "Momsregistreringsnummer",
    "SI": "ID za DDV",
    "SK": "IČ DPH",
}

FORMATS = tuple(
    FormatSpec(
        category=Category.VAT,
        code=code,
        name=f"{country(code)} {_NAMES[code]}",
        description="VAT identification number including the country prefix",
        layout=layout,
    )
    for code, layout in _LAYOUTS.items()
)
