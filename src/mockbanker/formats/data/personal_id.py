"""National personal identification numbers.

Layouts are exported through :data:`LAYOUTS` because several tax ID and
driver's license formats reuse the personal number of their country.
"""

from __future__ import annotations

from ..model import (
    PLAIN,
    Band,
    BirthDate,
    Category,
    Century,
    CenturyCode,
    Chars,
    Check,
    DisplayRules,
    Field,
    FormatSpec,
    Gender,
    Literal,
    Number,
    OneOf,
    Sex,
)
from .common import country

__all__ = ["LAYOUTS", "FORMATS"]

M, F = Gender.MALE, Gender.FEMALE

_CONSONANTS = "BCDFGHJKLMNPQRSTVWXYZ"


def _baltic() -> tuple[Field, ...]:
    return (
        CenturyCode(
            (
                Century("1", 1800, 1899, M),
                Century("2", 1800, 1899, F),
                Century("3", 1900, 1999, M),
                Century("4", 1900, 1999, F),
                Century("5", 2000, 2099, M),
                Century("6", 2000, 2099, F),
            ),
            name="century",
        ),
        BirthDate("YYMMDD", years=(1800, 2099), name="birth_date"),
        Number(3, name="serial"),
        Check("ee_personal"),
    )


def _jmbg(*regions: tuple[int, int]) -> tuple[Field, ...]:
    return (
        BirthDate("DDMMYYY", years=(1900, 2099), name="birth_date"),
        Number(2, ranges=regions, name="region"),
        Number(3, male=(0, 499), female=(500, 999), name="serial"),
        Check("jmbg"),
    )


def _czech() -> tuple[Field, ...]:
    return (
        BirthDate("YYMMDD", years=(1954, 2053), female_month_offset=50, name="birth_date"),
        Number(3, name="serial"),
        Check("cz_personal"),
    )


LAYOUTS: dict[str, tuple[Field, ...]] = {
    "AE": (
        Literal("784"),
        BirthDate("YYYY", years=(1920, 2019), name="birth_date"),
        Chars("digit", 7, name="serial"),
        Check("luhn"),
    ),
    "AR": (Number(8, ranges=((10000000, 99999999),), name="number"),),
    "AU": (
        Number(1, ranges=((2, 6),), name="lead"),
        Chars("digit", 7, name="serial"),
        Check("au_medicare"),
        Number(1, ranges=((1, 9),), checked=False, name="issue"),
    ),
    "AT": (
        Number(3, ranges=((100, 999),), name="serial"),
        Check("at_svnr"),
        BirthDate("DDMMYY", years=(1920, 2019), name="birth_date"),
    ),
    "AZ": (Chars("0123456789ABCDEFGHJKLMNPQRSTUVWXYZ", 7, name="fin"),),
    "BA": _jmbg((10, 19)),
    "BD": (Number(1, ranges=((1, 9),), name="lead"), Chars("digit", 9, name="serial")),
    "BE": (
        BirthDate("YYMMDD", years=(1920, 2019), name="birth_date"),
        Number(3, ranges=((1, 997),), parity="odd_male", name="serial"),
        Check("be_national", 2),
    ),
    "BG": (
        BirthDate(
            "YYMMDD",
            years=(1800, 2099),
            month_offsets=((1800, 1899, 20), (2000, 2099, 40)),
            name="birth_date",
        ),
        Number(2, name="region"),
        Number(1, parity="even_male", name="sex_digit"),
        Check("bg_personal"),
    ),
    "BO": (
        Number(7, ranges=((1000000, 9999999),), name="number"),
        OneOf(("LP", "CB", "SC", "OR", "PT", "CH", "TJ", "BE", "PD"), name="department"),
    ),
    "BR": (Chars("digit", 9, name="base"), Check("br_cpf", 2)),
    "BW": (
        Chars("digit", 4, name="serial"),
        Sex("1", "2", name="sex"),
        Chars("digit", 4, name="sequence"),
    ),
    "CA": (
        Number(1, ranges=((1, 7), (9, 9)), name="province"),
        Chars("digit", 7, name="serial"),
        Check("luhn"),
    ),
    "CH": (Literal("756"), Chars("digit", 9, name="serial"), Check("ean13")),
    "CL": (Number(8, ranges=((5000000, 29999999),), name="number"), Check("cl_rut")),
    "CN": (
        Number(6, ranges=((110000, 659999),), name="region"),
        BirthDate("YYYYMMDD", years=(1900, 2099), name="birth_date"),
        Number(3, parity="odd_male", name="sequence"),
        Check("mod11_2"),
    ),
    "CO": (
        Number(1, ranges=((1, 9),), name="lead"),
        Chars("digit", variants=(7, 9), name="serial"),
    ),
    "CR": (
        Number(1, ranges=((1, 9),), name="province"),
        Chars("digit", 4, name="volume"),
        Chars("digit", 4, name="entry"),
    ),
    "CU": (
        BirthDate("YYMMDD", years=(1800, 2099), name="birth_date"),
        Number(
            1,
            bands=(Band(9, 9, 1800, 1899), Band(0, 5, 1900, 1999), Band(6, 8, 2000, 2099)),
            name="century_digit",
        ),
        Number(2, name="serial"),
        Number(1, parity="even_male", name="sex_digit"),
        Number(1, name="control"),
    ),
    "CY": (
        Number(1, ranges=((1, 9),), name="lead"),
        Chars("digit", variants=(6, 7), name="serial"),
    ),
    "CZ": _czech(),
    "DE": (
        Chars("CFGHJKLMNPRTVWXYZ", 1, name="authority"),
        Chars("CFGHJKLMNPRTVWXYZ0123456789", 8, name="serial"),
        Check("icao"),
    ),
    "DK": (
        BirthDate("DDMMYY", years=(1858, 2057), name="birth_date"),
        # The first serial digit fixes the century together with the year.
        Number(
            1,
            bands=(
                Band(0, 3, 1900, 1999),
                Band(4, 4, 1937, 2036),
                Band(9, 9, 1937, 2036),
                Band(5, 8, 1858, 1899),
                Band(5, 8, 2000, 2057),
            ),
            name="century_digit",
        ),
        Number(3, parity="odd_male", name="serial"),
    ),
    "DO": (
        Number(3, ranges=((1, 123),), name="municipality"),
        Chars("digit", 7, name="serial"),
        Check("luhn"),
    ),
    "EC": (
        Number(2, ranges=((1, 24),), name="province"),
        Number(1, ranges=((0, 5),), name="type"),
        Chars("digit", 6, name="serial"),
        Check("ec_ci"),
    ),
    "EE": _baltic(),
    "EG": (
        CenturyCode((Century("2", 1900, 1999), Century("3", 2000, 2099)), name="century"),
        BirthDate("YYMMDD", years=(1900, 2099), name="birth_date"),
        Number(2, ranges=((1, 4), (11, 35), (88, 88)), name="governorate"),
        Number(4, parity="odd_male", name="serial"),
        Check("eg_id"),
    ),
    "ES": (Chars("digit", 8, name="number"), Check("es_dni")),
    "FI": (
        BirthDate("DDMMYY", years=(1800, 2099), name="birth_date"),
        CenturyCode(
            (
                Century("+", 1800, 1899),
                Century("-YXWVU", 1900, 1999),
                Century("ABCDEF", 2000, 2099),
            ),
            name="century",
        ),
        Number(3, ranges=((2, 899),), parity="odd_male", name="serial"),
        Check("fi_personal", covers=("birth_date", "serial")),
    ),
    "FR": (
        Sex("1", "2", name="sex"),
        BirthDate("YYMM", years=(1920, 2019), name="birth_date"),
        Number(2, ranges=((1, 95),), name="department"),
        Number(3, ranges=((1, 990),), name="commune"),
        Number(3, ranges=((1, 999),), name="order"),
        Check("mod97_complement", 2, name="key"),
    ),
    "GB": (
        Chars("ABCEHJKLMPRSTWXY", 1, name="prefix"),
        Chars("ABCEHJKLMPRSTWXYZ", 1),
        Chars("digit", 6, name="number"),
        Chars("ABCD", 1, name="suffix"),
    ),
    "GE": (Number(11, ranges=((1000000000, 99999999999),), name="number"),),
    "GH": (Literal("GHA"), Chars("digit", 9, name="serial"), Chars("digit", 1, name="control")),
    "GR": (
        BirthDate("DDMMYY", years=(1920, 2019), name="birth_date"),
        Number(4, name="serial"),
        Check("luhn"),
    ),
    "HK": (Chars("letter", 1, name="prefix"), Chars("digit", 6, name="serial"), Check("hk_id")),
    "HN": (
        Number(2, ranges=((1, 18),), name="department"),
        Number(2, ranges=((1, 28),), name="municipality"),
        BirthDate("YYYY", years=(1920, 2019), name="birth_date"),
        Chars("digit", 5, name="serial"),
    ),
    "HR": (Chars("digit", 10, name="serial"), Check("mod11_10")),
    "HU": (
        CenturyCode(
            (
                Century("1", 1900, 1999, M),
                Century("2", 1900, 1999, F),
                Century("3", 2000, 2099, M),
                Century("4", 2000, 2099, F),
                Century("5", 1800, 1899, M),
                Century("6", 1800, 1899, F),
            ),
            name="century",
        ),
        BirthDate("YYMMDD", years=(1800, 2099), name="birth_date"),
        Number(3, name="serial"),
        Check("hu_personal"),
    ),
    "ID": (
        Number(6, ranges=((110101, 920000),), name="region"),
        BirthDate("DDMMYY", years=(1940, 2039), female_day_offset=40, name="birth_date"),
        Number(4, ranges=((1, 9999),), name="serial"),
    ),
    "IE": (Chars("digit", 7, name="number"), Check("ie_pps")),
    "IL": (Chars("digit", 8, name="number"), Check("luhn")),
    "IN": (
        Number(1, ranges=((2, 9),), name="lead"),
        Chars("digit", 10, name="serial"),
        Check("verhoeff"),
    ),
    "IR": (Chars("digit", 9, name="number"), Check("ir_national")),
    "IS": (
        BirthDate("DDMMYY", years=(1900, 2099), name="birth_date"),
        Number(2, ranges=((20, 99),), name="serial"),
        Check("is_kennitala", covers=("birth_date", "serial")),
        CenturyCode((Century("9", 1900, 1999), Century("0", 2000, 2099)), name="century"),
    ),
    "IT": (
        Chars(_CONSONANTS, 3, name="surname"),
        Chars(_CONSONANTS, 3, name="given_name"),
        BirthDate("YYLDD", years=(1920, 2019), female_day_offset=40, name="birth_date"),
        Chars("ABCDEFGHILMZ", 1, name="municipality_letter"),
        Number(3, ranges=((1, 999),), name="municipality_number"),
        Check("odd_even", name="control"),
    ),
    "JP": (Chars("digit", 11, name="number"), Check("jp_mynumber")),
    "KE": (
        Number(1, ranges=((1, 3),), name="lead"),
        Chars("digit", variants=(6, 7), name="serial"),
    ),
    "KG": (
        Sex("2", "1", name="sex"),
        BirthDate("DDMMYYYY", years=(1900, 2099), name="birth_date"),
        Chars("digit", 5, name="serial"),
    ),
    "KR": (
        BirthDate("YYMMDD", years=(1900, 2099), name="birth_date"),
        CenturyCode(
            (
                Century("15", 1900, 1999, M),
                Century("26", 1900, 1999, F),
                Century("37", 2000, 2099, M),
                Century("48", 2000, 2099, F),
            ),
            name="gender_century",
        ),
        Chars("digit", 5, name="serial"),
        Check("kr_rrn"),
    ),
    "KW": (
        CenturyCode((Century("2", 1900, 1999), Century("3", 2000, 2099)), name="century"),
        BirthDate("YYMMDD", years=(1900, 2099), name="birth_date"),
        Chars("digit", 4, name="serial"),
        Check("kw_civil"),
    ),
    "KZ": (
        BirthDate("YYMMDD", years=(1800, 2099), name="birth_date"),
        CenturyCode(
            (
                Century("1", 1800, 1899, M),
                Century("2", 1800, 1899, F),
                Century("3", 1900, 1999, M),
                Century("4", 1900, 1999, F),
                Century("5", 2000, 2099, M),
                Century("6", 2000, 2099, F),
            ),
            name="century",
        ),
        Chars("digit", 4, name="serial"),
        Check("kz_iin"),
    ),
    "LK": (
        BirthDate("YYYYDDD", years=(1920, 2019), female_day_offset=500, name="birth_date"),
        Chars("digit", 5, name="serial"),
    ),
    "LT": _baltic(),
    "LU": (
        BirthDate("YYYYMMDD", years=(1900, 2099), name="birth_date"),
        Number(3, name="serial"),
        Check("luhn", covers=("birth_date", "serial"), name="luhn_check"),
        Check("verhoeff", covers=("birth_date", "serial"), name="verhoeff_check"),
    ),
    "LV": (
        BirthDate("DDMMYY", years=(1800, 2099), name="birth_date"),
        CenturyCode(
            (Century("0", 1800, 1899), Century("1", 1900, 1999), Century("2", 2000, 2099)),
            name="century",
        ),
        Number(3, name="serial"),
        Check("lv_personal"),
    ),
    "MA": (
        Chars("letter", variants=(1, 2), name="prefix"),
        Chars("digit", variants=(5, 6), name="serial"),
    ),
    "MD": (OneOf(("0", "2"), name="lead"), Chars("digit", 11, name="serial"), Check("icao")),
    "ME": _jmbg((21, 29)),
    "MK": _jmbg((41, 49)),
    "MT": (
        Number(7, ranges=((1, 9999999),), name="number"),
        OneOf(("M", "G", "A", "P", "L", "H", "B", "Z"), name="suffix"),
    ),
    "MX": (
        Chars("letter", 4, name="initials"),
        BirthDate("YYMMDD", years=(1900, 2099), name="birth_date"),
        Sex("H", "M", name="sex"),
        OneOf(
            (
                "AS", "BC", "BS", "CC", "CL", "CM", "CS", "CH", "DF", "DG", "GT",
                "GR", "HG", "JC", "MC", "MN", "MS", "NT", "NL", "OC", "PL", "QT",
                "QR", "SP", "SL", "SR", "TC", "TS", "TL", "VZ", "YN", "ZS", "NE",
            ),
            name="state",
        ),
        Chars(_CONSONANTS, 3, name="consonants"),
        CenturyCode(
            (Century("0123456789", 1900, 1999), Century("ABCDEFGHIJ", 2000, 2099)),
            name="century",
        ),
        Check("mx_curp"),
    ),
    "MY": (
        BirthDate("YYMMDD", years=(1920, 2019), name="birth_date"),
        Number(2, ranges=((1, 16),), name="place_of_birth"),
        Number(4, parity="odd_male", name="serial"),
    ),
    "NA": (
        BirthDate("YYMMDD", years=(1920, 2019), name="birth_date"),
        Chars("digit", 5, name="serial"),
    ),
    "NG": (Number(11, ranges=((10000000000, 99999999999),), name="nin"),),
    "NI": (
        Number(3, ranges=((1, 616),), name="municipality"),
        BirthDate("DDMMYY", years=(1920, 2019), name="birth_date"),
        Number(4, name="serial"),
        Check("ni_cedula"),
    ),
    "NL": (Chars("digit", 8, name="number"), Check("nl_bsn")),
    "NO": (
        BirthDate("DDMMYY", years=(1854, 2039), name="birth_date"),
        Number(
            3,
            bands=(
                Band(0, 499, 1900, 1999),
                Band(500, 749, 1854, 1899),
                Band(500, 999, 2000, 2039),
                Band(900, 999, 1940, 1999),
            ),
            parity="odd_male",
            name="individual",
        ),
        Check("no_personal", 2),
    ),
    "NZ": (
        Chars("ABCDEFGHJKLMNPQRSTUVWXYZ", 3, name="letters"),
        Chars("digit", 3, name="digits"),
        Check("nz_nhi"),
    ),
    "PE": (Chars("digit", 8, name="number"),),
    "PH": (Number(4, ranges=((1000, 9999),), name="lead"), Chars("digit", 8, name="serial")),
    "PK": (
        Number(5, ranges=((10000, 79999),), name="locality"),
        Chars("digit", 7, name="serial"),
        Number(1, parity="odd_male", name="sex_digit"),
    ),
    "PL": (
        BirthDate(
            "YYMMDD",
            years=(1800, 2299),
            month_offsets=((1800, 1899, 80), (2000, 2099, 20), (2100, 2199, 40), (2200, 2299, 60)),
            name="birth_date",
        ),
        Number(3, name="serial"),
        Number(1, parity="odd_male", name="sex_digit"),
        Check("pesel"),
    ),
    "PY": (
        Number(1, ranges=((1, 9),), name="lead"),
        Chars("digit", variants=(5, 6), name="serial"),
    ),
    "QA": (
        CenturyCode((Century("2", 1900, 1999), Century("3", 2000, 2099)), name="century"),
        BirthDate("YY", years=(1900, 2099), name="birth_date"),
        Number(3, ranges=((1, 999),), name="nationality"),
        Chars("digit", 5, name="serial"),
    ),
    "RO": (
        CenturyCode(
            (
                Century("1", 1900, 1999, M),
                Century("2", 1900, 1999, F),
                Century("3", 1800, 1899, M),
                Century("4", 1800, 1899, F),
                Century("5", 2000, 2099, M),
                Century("6", 2000, 2099, F),
            ),
            name="sex_century",
        ),
        BirthDate("YYMMDD", years=(1800, 2099), name="birth_date"),
        Number(2, ranges=((1, 46), (51, 52)), name="county"),
        Number(3, ranges=((1, 999),), name="serial"),
        Check("ro_personal"),
    ),
    "RS": _jmbg((71, 79), (80, 89), (91, 96)),
    "RU": (Number(9, ranges=((1001999, 999999999),), name="number"), Check("ru_snils", 2)),
    "RW": (
        OneOf(("1", "2", "3"), name="nationality"),
        BirthDate("YYYY", years=(1920, 2019), name="birth_date"),
        Sex("8", "7", name="sex"),
        Chars("digit", 7, name="serial"),
        Chars("digit", 1, name="issue"),
        Chars("digit", 2, name="control"),
    ),
    "SA": (OneOf(("1", "2"), name="holder"), Chars("digit", 8, name="serial"), Check("luhn")),
    "SE": (
        BirthDate("YYMMDD", years=(1920, 2019), name="birth_date"),
        Number(2, name="serial"),
        Number(1, parity="odd_male", name="sex_digit"),
        Check("luhn"),
    ),
    "SG": (
        CenturyCode((Century("S", 1900, 1999), Century("T", 2000, 2099)), name="prefix"),
        Chars("digit", 7, name="serial"),
        Check("sg_nric"),
    ),
    "SI": _jmbg((50, 50)),
    "SK": _czech(),
    "SV": (Chars("digit", 8, name="number"), Check("sv_dui")),
    "TH": (
        Number(1, ranges=((1, 8),), name="type"),
        Chars("digit", 11, name="serial"),
        Check("th_id"),
    ),
    "TN": (OneOf(("0", "1"), name="lead"), Chars("digit", 7, name="serial")),
    "TR": (
        Number(1, ranges=((1, 9),), name="lead"),
        Chars("digit", 8, name="serial"),
        Check("tr_personal", 2),
    ),
    "TW": (
        Chars("letter", 1, name="area"),
        Sex("1", "2", name="sex"),
        Chars("digit", 7, name="serial"),
        Check("tw_id"),
    ),
    "TZ": (
        BirthDate("YYYYMMDD", years=(1920, 2019), name="birth_date"),
        Chars("digit", 5, name="office"),
        Chars("digit", 5, name="serial"),
        Chars("digit", 2, name="control"),
    ),
    "UA": (
        BirthDate("YYYYMMDD", years=(1900, 2099), name="birth_date"),
        Chars("digit", 4, name="serial"),
        Check("icao"),
    ),
    "UG": (
        OneOf(("C", "A"), name="holder"),
        Sex("M", "F", name="sex"),
        BirthDate("YY", years=(1920, 2019), name="birth_date"),
        Chars("digit", 6, name="serial"),
        Chars("letter", 4, name="suffix"),
    ),
    "US": (
        Number(3, ranges=((1, 665), (667, 899)), name="area"),
        Number(2, ranges=((1, 99),), name="group"),
        Number(4, ranges=((1, 9999),), name="serial"),
    ),
    "UY": (Number(7, ranges=((1000000, 9999999),), name="number"), Check("uy_ci")),
    "UZ": (
        CenturyCode(
            (
                Century("3", 1900, 1999, M),
                Century("4", 1900, 1999, F),
                Century("5", 2000, 2099, M),
                Century("6", 2000, 2099, F),
            ),
            name="century",
        ),
        BirthDate("DDMMYY", years=(1900, 2099), name="birth_date"),
        Number(3, ranges=((1, 999),), name="district"),
        Number(3, name="serial"),
        Check("icao"),
    ),
    "VE": (
        OneOf(("V", "E"), name="nationality"),
        Number(1, ranges=((1, 3),), name="lead"),
        Chars("digit", variants=(6, 7), name="serial"),
    ),
    "VN": (
        Number(3, ranges=((1, 96),), name="province"),
        CenturyCode(
            (
                Century("0", 1900, 1999, M),
                Century("1", 1900, 1999, F),
                Century("2", 2000, 2099, M),
                Century("3", 2000, 2099, F),
            ),
            name="century",
        ),
        BirthDate("YY", years=(1900, 2099), name="birth_date"),
        Chars("digit", 6, name="serial"),
    ),
    "ZA": (
        BirthDate("YYMMDD", years=(1920, 2019), name="birth_date"),
        Number(4, male=(5000, 9999), female=(0, 4999), name="sequence"),
        OneOf(("0", "1"), name="citizenship"),
        Literal("8"),
        Check("luhn"),
    ),
    "ZM": (
        Chars("digit", 6, name="serial"),
        Number(2, ranges=((10, 99),), name="district"),
        Number(1, ranges=((1, 3),), name="citizenship"),
    ),
    "ZW": (
        Number(2, ranges=((1, 86),), name="district"),
        Chars("digit", variants=(6, 7), name="serial"),
        Check("zw_national", covers=("district", "serial"), name="check_letter"),
        Number(2, ranges=((1, 86),), name="origin"),
    ),
}

# code -> (name, display, description)
_CATALOG: dict[str, tuple[str, DisplayRules, str]] = {
    "AE": ("Emirates ID", DisplayRules(template="###-####-#######-#"), "Identity number with birth year"),
    "AR": ("DNI", DisplayRules(template="##.###.###"), "Documento Nacional de Identidad"),
    "AU": ("Medicare number", DisplayRules(template="#### ##### #"), "Medicare card number"),
    "AT": ("Sozialversicherungsnummer", PLAIN, "Social insurance number with embedded birth date"),
    "AZ": ("FIN", PLAIN, "Personal identification code printed on the identity card"),
    "BA": ("JMBG", PLAIN, "Unique master citizen number"),
    "BD": ("NID", PLAIN, "Smart national identity card number"),
    "BE": ("Rijksregisternummer", DisplayRules(template="##.##.##-###.##"), "National register number"),
    "BG": ("EGN", PLAIN, "Unified civil number; month offset encodes the century"),
    "BO": ("Cédula de identidad", DisplayRules(template="####### ##"), "Identity card number and department"),
    "BR": ("CPF", DisplayRules(template="###.###.###-##"), "Cadastro de Pessoas Físicas"),
    "BW": ("Omang", PLAIN, "National identity card number; the fifth digit encodes sex"),
    "CA": ("SIN", DisplayRules(template="### ### ###"), "Social Insurance Number"),
    "CH": ("AHV-Nr.", DisplayRules(template="###.####.####.##"), "Old-age and survivors insurance number"),
    "CL": ("RUN", DisplayRules(template="##.###.###-#"), "Rol Único Nacional"),
    "CN": ("Resident Identity Card", PLAIN, "18 digit resident identity number"),
    "CO": ("Cédula de ciudadanía", PLAIN, "Citizenship card number"),
    "CR": ("Cédula de identidad", DisplayRules(template="#-####-####"), ""),
    "CU": ("Carné de identidad", PLAIN, "Permanent identity number; the seventh digit fixes the century"),
    "CY": ("Identity card number", PLAIN, ""),
    "CZ": ("Rodné číslo", DisplayRules(template="######/####"), "Birth number"),
    "DE": ("Personalausweis", PLAIN, "Identity card document number"),
    "DK": ("CPR-nummer", DisplayRules(template="######-####"), "Civil registration number"),
    "DO": ("Cédula", DisplayRules(template="###-#######-#"), "Cédula de identidad y electoral"),
    "EC": ("Cédula", PLAIN, "Cédula de identidad"),
    "EE": ("Isikukood", PLAIN, "Personal identification code"),
    "EG": ("National ID", PLAIN, "14 digit national identity number"),
    "ES": ("DNI", PLAIN, "Documento Nacional de Identidad"),
    "FI": ("Henkilötunnus", PLAIN, "Personal identity code"),
    "FR": ("NIR", DisplayRules(template="# ## ## ## ### ### ##"), "Social security number"),
    "GB": ("National Insurance number", DisplayRules(template="## ## ## ## #"), ""),
    "GE": ("Personal number", PLAIN, ""),
    "GH": ("Ghana Card PIN", DisplayRules(template="###-#########-#"), "Personal identification number"),
    "GR": ("AMKA", PLAIN, "Social security number"),
    "HK": ("HKID", DisplayRules(template="#######(#)"), "Hong Kong identity card number"),
    "HN": ("DNI", DisplayRules(template="####-####-#####"), "Documento Nacional de Identificación"),
    "HR": ("OIB", PLAIN, "Personal identification number"),
    "HU": ("Személyi szám", PLAIN, "Personal identification number"),
    "ID": ("NIK", PLAIN, "Nomor Induk Kependudukan"),
    "IE": ("PPS number", PLAIN, "Personal Public Service number"),
    "IL": ("Teudat Zehut", PLAIN, "Identity number"),
    "IN": ("Aadhaar", DisplayRules(every=4), "Unique identification number"),
    "IR": ("Kart-e Meli", PLAIN, "National code"),
    "IS": ("Kennitala", DisplayRules(template="######-####"), "Identification number"),
    "IT": ("Codice fiscale", PLAIN, "Fiscal code of a natural person"),
    "JP": ("My Number", DisplayRules(every=4), "Individual number"),
    "KE": ("National ID", PLAIN, "National identity card number"),
    "KG": ("PIN", PLAIN, "Personal identification number"),
    "KR": ("RRN", DisplayRules(template="######-#######"), "Resident registration number"),
    "KW": ("Civil ID", PLAIN, "Civil identification number"),
    "KZ": ("IIN", PLAIN, "Individual identification number"),
    "LK": ("NIC", PLAIN, "National identity card number (12 digit form)"),
    "LT": ("Asmens kodas", PLAIN, "Personal code"),
    "LU": ("Matricule", PLAIN, "National identification number"),
    "LV": ("Personas kods", DisplayRules(template="######-#####"), "Personal code"),
    "MA": ("CIN", PLAIN, "Carte d'identité nationale"),
    "MD": ("IDNP", PLAIN, "State identification number of a natural person"),
    "ME": ("JMBG", PLAIN, "Unique master citizen number"),
    "MK": ("EMBG", PLAIN, "Unique master citizen number"),
    "MT": ("ID card number", PLAIN, ""),
    "MX": ("CURP", PLAIN, "Clave Única de Registro de Población"),
    "MY": ("MyKad", DisplayRules(template="######-##-####"), "National registration identity card number"),
    "NA": ("ID number", PLAIN, ""),
    "NG": ("NIN", PLAIN, "National Identification Number"),
    "NI": ("Cédula", DisplayRules(template="###-######-#####"), "Cédula de identidad"),
    "NL": ("BSN", PLAIN, "Burgerservicenummer"),
    "NO": ("Fødselsnummer", PLAIN, "Birth number"),
    "NZ": ("NHI", PLAIN, "National Health Index number"),
    "PE": ("DNI", PLAIN, "Documento Nacional de Identidad"),
    "PH": ("PhilSys Number", DisplayRules(template="####-####-####"), "PhilSys card number"),
    "PK": ("CNIC", DisplayRules(template="#####-#######-#"), "Computerised national identity card number"),
    "PL": ("PESEL", PLAIN, "Universal electronic system for registration of the population"),
    "PY": ("Cédula de identidad", PLAIN, ""),
    "QA": ("QID", PLAIN, "Qatar identity card number"),
    "RO": ("CNP", PLAIN, "Cod numeric personal"),
    "RS": ("JMBG", PLAIN, "Unique master citizen number"),
    "RU": ("SNILS", DisplayRules(template="###-###-### ##"), "Insurance account number"),
    "RW": ("National ID", DisplayRules(template="# #### # ####### # ##"), "National identity number"),
    "SA": ("National ID", PLAIN, "National identity number; 1 for citizens, 2 for residents"),
    "SE": ("Personnummer", DisplayRules(template="######-####"), "Personal identity number"),
    "SG": ("NRIC", PLAIN, "National registration identity card number"),
    "SI": ("EMŠO", PLAIN, "Unique master citizen number"),
    "SK": ("Rodné číslo", DisplayRules(template="######/####"), "Birth number"),
    "SV": ("DUI", DisplayRules(template="########-#"), "Documento Único de Identidad"),
    "TH": ("Thai ID", DisplayRules(template="#-####-#####-##-#"), "Thai national identification number"),
    "TN": ("CIN", PLAIN, "Carte d'identité nationale"),
    "TR": ("T.C. Kimlik No", PLAIN, "Turkish identification number"),
    "TW": ("National ID", PLAIN, "National identification card number"),
    "TZ": ("NIDA number", DisplayRules(template="########-#####-#####-##"), "National identification number"),
    "UA": ("UNZR", DisplayRules(template="########-#####"), "Unified demographic register record number"),
    "UG": ("NIN", PLAIN, "National identification number"),
    "US": ("SSN", DisplayRules(template="###-##-####"), "Social Security number"),
    "UY": ("Cédula", DisplayRules(template="#.###.###-#"), "Cédula de identidad"),
    "UZ": ("PINFL", PLAIN, "Personal identification number of an individual"),
    "VE": ("Cédula de identidad", PLAIN, ""),
    "VN": ("CCCD", PLAIN, "Citizen identity card number"),
    "ZA": ("ID number", PLAIN, "South African identity number"),
    "ZM": ("NRC", DisplayRules(template="######/##/#"), "National registration card number"),
    "ZW": ("National ID", PLAIN, "National registration number"),
}

FORMATS = tuple(
    FormatSpec(
        category=Category.PERSONAL_ID,
        code=code,
        name=f"{country(code)} {name}",
        description=description,
        layout=LAYOUTS[code],
        display=display,
    )
    for code, (name, display, description) in _CATALOG.items()
)
