"""Company and business registration numbers."""

from __future__ import annotations

from ...checksum.catalog import USCC_ALPHABET
from ..model import (
    PLAIN,
    BirthDate,
    Category,
    Chars,
    Check,
    DisplayRules,
    Field,
    FormatSpec,
    Literal,
    Number,
    OneOf,
)
from .common import country

__all__ = ["FORMATS"]

_LAYOUTS: dict[str, tuple[Field, ...]] = {
    "AR": (OneOf(("30", "33", "34"), name="type"), Chars("digit", 8, name="number"), Check("ar_cuit")),
    "AU": (Check("au_abn", 2, name="check_digits"), Chars("digit", 9, name="number")),
    "BE": (OneOf(("0", "1"), name="lead"), Chars("digit", 7, name="number"), Check("mod97_complement", 2)),
    "BG": (Chars("digit", 8, name="number"), Check("bg_company")),
    "BR": (
        Chars("digit", 8, name="base"),
        Literal("0001", name="branch"),
        Check("br_cnpj", 2),
    ),
    "CA": (Chars("digit", 8, name="number"), Check("luhn")),
    "CH": (Literal("CHE", checked=False), Chars("digit", 8, name="number"), Check("ch_uid")),
    "CL": (Number(8, ranges=((60000000, 99999999),), name="number"), Check("cl_rut")),
    "CN": (
        OneOf(("1", "5", "9"), name="authority"),
        OneOf(("1", "2", "3"), name="entity_type"),
        Number(6, ranges=((110000, 659999),), name="region"),
        Chars(USCC_ALPHABET, 9, name="organization"),
        Check("cn_uscc"),
    ),
    "CO": (Number(9, ranges=((800000000, 999999999),), name="number"), Check("co_nit")),
    "CZ": (Chars("digit", 7, name="number"), Check("cz_ico")),
    "DE": (
        OneOf(("HRA", "HRB"), name="register"),
        Chars("nonzero", 1, name="lead"),
        Chars("digit", variants=(3, 4, 5), name="number"),
    ),
    "DK": (Number(1, ranges=((1, 9),), name="lead"), Chars("digit", 6, name="number"), Check("dk_company")),
    "EE": (OneOf(("1", "7", "8", "9"), name="type"), Chars("digit", 6, name="number"), Check("ee_company")),
    "ES": (
        OneOf(tuple("ABCDEFGHJNPQRSUVW"), name="entity_type"),
        Chars("digit", 7, name="number"),
        Check("es_cif"),
    ),
    "FI": (Chars("digit", 7, name="number"), Check("fi_company")),
    "FR": (Chars("digit", 8, name="number"), Check("luhn")),
    "GB": (
        OneOf(("00", "01", "02", "03", "04", "05", "06", "07", "08", "09", "SC", "NI", "OC", "SO"), name="prefix"),
        Chars("digit", 6, name="number"),
    ),
    "GR": (Chars("digit", 8, name="number"), Check("gr_vat")),
    "HR": (Chars("digit", 10, name="number"), Check("mod11_10")),
    "HU": (
        Number(2, ranges=((1, 20),), name="court"),
        Number(2, ranges=((1, 23),), name="company_form"),
        Chars("digit", 6, name="number"),
    ),
    "IL": (Literal("5"), OneOf(("1", "2"), name="type"), Chars("digit", 6, name="number"), Check("luhn")),
    "IN": (
        OneOf(("L", "U"), name="listing"),
        Chars("digit", 5, name="industry"),
        OneOf(
            (
                "AN", "AP", "AR", "AS", "BR", "CH", "CT", "DL", "GA", "GJ", "HR", "HP", "JK",
                "JH", "KA", "KL", "MP", "MH", "OR", "PB", "RJ", "TN", "TG", "UP", "UR", "WB",
            ),
            name="state",
        ),
        Number(4, ranges=((1950, 2025),), name="year"),
        OneOf(("PLC", "PTC", "GOI", "NPL", "ULL", "ULT", "SGC", "FTC", "FLC", "GAP", "GAT"), name="class"),
        Chars("digit", 6, name="number"),
    ),
    "IT": (
        Number(7, ranges=((1, 9999999),), name="number"),
        Number(3, ranges=((1, 100), (120, 121), (888, 888), (999, 999)), name="office"),
        Check("luhn"),
    ),
    "JP": (Check("jp_corporate", name="check_digit"), Chars("digit", 12, name="number")),
    "KR": (
        Number(3, ranges=((101, 999),), name="office"),
        Number(2, ranges=((1, 99),), name="type"),
        Number(4, ranges=((1, 9999),), name="serial"),
        Check("kr_brn"),
    ),
    "LT": (Chars("digit", 8, name="number"), Check("lt_vat")),
    "LV": (Number(1, ranges=((4, 9),), name="lead"), Chars("digit", 9, name="number"), Check("lv_vat")),
    "MX": (
        Chars("letter", 3, name="initials"),
        BirthDate("YYMMDD", years=(1920, 2019), name="incorporation_date"),
        Chars("alnum", 2, name="homoclave"),
        Check("mx_rfc_company"),
    ),
    "NG": (OneOf(("RC", "BN"), name="type"), Chars("digit", variants=(6, 7), name="number")),
    "NL": (Chars("digit", 8, name="number"),),
    "NO": (Number(1, ranges=((8, 9),), name="lead"), Chars("digit", 7, name="number"), Check("no_company")),
    "NZ": (Literal("94"), Chars("digit", 10, name="number"), Check("ean13")),
    "PE": (Literal("20"), Chars("digit", 8, name="number"), Check("pe_ruc")),
    "PL": (Chars("digit", 8, name="number"), Check("pl_regon")),
    "PT": (Literal("5"), Chars("digit", 7, name="number"), Check("pt_nif")),
    "RO": (Number(1, ranges=((1, 9),), name="lead"), Chars("digit", 8, name="number"), Check("ro_vat")),
    "RU": (
        OneOf(("1", "5"), name="type"),
        Chars("digit", 11, name="number"),
        Check("ru_ogrn"),
    ),
    "SE": (
        Number(1, ranges=((1, 9),), name="lead"),
        Chars("digit", 1, name="second"),
        Number(1, ranges=((2, 9),), name="group"),
        Chars("digit", 6, name="number"),
        Check("luhn"),
    ),
    "SG": (Chars("digit", 8, name="number"), Check("sg_uen")),
    "SI": (Number(7, ranges=((1000000, 9999999),), name="number"), Check("si_vat")),
    "SK": (Chars("digit", 7, name="number"), Check("cz_ico")),
    "TH": (Literal("0"), Chars("digit", 11, name="number"), Check("th_id")),
    "TR": (Chars("digit", 9, name="number"), Check("tr_vkn")),
    "TW": (Chars("digit", 7, name="number"), Check("tw_ubn")),
    "UA": (Chars("digit", 7, name="number"), Check("ua_edrpou")),
    "US": (
        Number(
            2,
            ranges=((1, 6), (10, 16), (20, 27), (30, 39), (40, 48), (50, 68), (71, 77), (80, 88), (90, 95), (98, 99)),
            name="prefix",
        ),
        Chars("digit", 7, name="serial"),
    ),
    "UY": (
        Number(2, ranges=((1, 21),), name="registry"),
        Chars("digit", 6, name="serial"),
        Literal("001"),
        Check("uy_rut"),
    ),
    "ZA": (
        Number(4, ranges=((1950, 2025),), name="year"),
        Chars("digit", 6, name="number"),
        OneOf(("06", "07", "08", "10", "21", "23", "24", "25", "26", "30", "31"), name="entity_type"),
    ),
}

_CATALOG: dict[str, tuple[str, DisplayRules]] = {
    "AR": ("CUIT", DisplayRules(template="##-########-#")),
    "AU": ("ABN", DisplayRules(template="## ### ### ###")),
    "BE": ("Ondernemingsnummer", DisplayRules(template="####.###.###")),
    "BG": ("EIK", PLAIN),
    "BR": ("CNPJ", DisplayRules(template="##.###.###/####-##")),
    "CA": ("Business Number", PLAIN),
    "CH": ("UID", DisplayRules(template="###-###.###.###")),
    "CL": ("RUT", DisplayRules(template="##.###.###-#")),
    "CN": ("Unified Social Credit Code", PLAIN),
    "CO": ("NIT", PLAIN),
    "CZ": ("IČO", PLAIN),
    "DE": ("Handelsregisternummer", PLAIN),
    "DK": ("CVR-nummer", PLAIN),
    "EE": ("Registrikood", PLAIN),
    "ES": ("CIF", PLAIN),
    "FI": ("Y-tunnus", DisplayRules(template="#######-#")),
    "FR": ("SIREN", DisplayRules(template="### ### ###")),
    "GB": ("Company registration number", PLAIN),
    "GR": ("AFM", PLAIN),
    "HR": ("OIB", PLAIN),
    "HU": ("Cégjegyzékszám", DisplayRules(template="##-##-######")),
    "IL": ("Company number", PLAIN),
    "IN": ("CIN", PLAIN),
    "IT": ("Partita IVA", PLAIN),
    "JP": ("Corporate Number", PLAIN),
    "KR": ("Business registration number", DisplayRules(template="###-##-#####")),
    "LT": ("Įmonės kodas", PLAIN),
    "LV": ("Reģistrācijas numurs", PLAIN),
    "MX": ("RFC", PLAIN),
    "NG": ("CAC registration number", PLAIN),
    "NL": ("KvK-nummer", PLAIN),
    "NO": ("Organisasjonsnummer", DisplayRules(template="### ### ###")),
    "NZ": ("NZBN", PLAIN),
    "PE": ("RUC", PLAIN),
    "PL": ("REGON", PLAIN),
    "PT": ("NIPC", PLAIN),
    "RO": ("CUI", PLAIN),
    "RU": ("OGRN", PLAIN),
    "SE": ("Organisationsnummer", DisplayRules(template="######-####")),
    "SG": ("UEN", PLAIN),
    "SI": ("Matična številka", PLAIN),
    "SK": ("IČO", PLAIN),
    "TH": ("Juristic person number", PLAIN),
    "TR": ("Vergi Kimlik Numarası", PLAIN),
    "TW": ("Unified Business Number", PLAIN),
    "UA": ("EDRPOU", PLAIN),
    "US": ("EIN", DisplayRules(template="##-#######")),
    "UY": ("RUT", PLAIN),
    "ZA": ("Company registration number", DisplayRules(template="####/######/##")),
}

FORMATS = tuple(
    FormatSpec(
        category=Category.COMPANY_ID,
        code=code,
        name=f"{country(code)} {name}",
        description="Company registration number",
        layout=_LAYOUTS[code],
        display=display,
        holder_type="company",
    )
    for code, (name, display) in _CATALOG.items()
)
