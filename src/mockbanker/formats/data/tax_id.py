"""Taxpayer identification numbers of natural persons."""

from __future__ import annotations

from datetime import date

from ..model import (
    PLAIN,
    BirthDate,
    Category,
    Chars,
    Check,
    DayCount,
    DisplayRules,
    DistinctDigits,
    Field,
    FormatSpec,
    Literal,
    Number,
    OneOf,
)
from .common import country
from .personal_id import LAYOUTS as PERSONAL

__all__ = ["LAYOUTS", "FORMATS"]

LAYOUTS: dict[str, tuple[Field, ...]] = {
    "AL": (
        Chars("JKLM", 1, name="decade"),
        Chars("digit", 8, name="number"),
        Chars("letter", 1, name="control"),
    ),
    "AR": (
        OneOf(("20", "23", "24", "27"), name="type"),
        Chars("digit", 8, name="document"),
        Check("ar_cuit"),
    ),
    "AT": (
        Number(2, ranges=((3, 98),), name="tax_office"),
        Chars("digit", 6, name="serial"),
        Check("luhn"),
    ),
    "AU": (Chars("digit", 8, name="number"), Check("au_tfn")),
    "AZ": (Chars("digit", 9, name="number"), Literal("2", name="holder")),
    "BD": (Chars("digit", 12, name="number"),),
    "CO": (Chars("digit", 9, name="number"), Check("co_nit")),
    "CY": (OneOf(("0", "9"), name="lead"), Chars("digit", 7, name="number"), Check("odd_even")),
    "DE": (DistinctDigits(10, name="number"), Check("mod11_10")),
    "EC": (*PERSONAL["EC"], Literal("001", name="establishment", checked=False)),
    "EG": (Chars("digit", 9, name="number"),),
    "FR": (
        Number(1, ranges=((0, 3),), name="lead"),
        Chars("digit", 9, name="serial"),
        Check("fr_tax", 3),
    ),
    "GB": (Check("gb_utr", name="check_digit"), Chars("digit", 9, name="reference")),
    "GR": (Chars("digit", 8, name="number"), Check("gr_vat")),
    "GT": (Number(7, ranges=((1000000, 9999999),), name="number"), Check("gt_nit")),
    "HU": (
        Literal("8"),
        DayCount(date(1867, 1, 1), 5, name="birth_date"),
        Number(3, name="serial"),
        Check("hu_tax"),
    ),
    "ID": (
        Chars("digit", 8, name="serial"),
        Check("luhn", covers=("serial",)),
        Chars("digit", 3, name="tax_office"),
        Chars("digit", 3, name="branch"),
    ),
    "IN": (
        Chars("letter", 3, name="series"),
        OneOf(("P", "C", "H", "F", "A", "T", "B", "L", "J", "G"), name="holder"),
        Chars("letter", 1, name="name_initial"),
        Chars("digit", 4, name="sequence"),
        Chars("letter", 1, name="check_letter"),
    ),
    "KE": (OneOf(("A", "P"), name="holder"), Chars("digit", 9, name="number"), Chars("letter", 1)),
    "LK": (Chars("digit", 9, name="number"),),
    "MA": (Chars("digit", 8, name="number"),),
    "MX": (
        Chars("letter", 4, name="initials"),
        BirthDate("YYMMDD", years=(1920, 2019), name="birth_date"),
        Chars("alnum", 2, name="homoclave"),
        Check("mx_rfc"),
    ),
    "MY": (Literal("IG"), Chars("digit", 11, name="number")),
    "NG": (Chars("digit", 8, name="number"), Literal("0001", name="suffix", checked=False)),
    "NZ": (Number(8, ranges=((10000000, 14999999),), name="number"), Check("nz_ird")),
    "PE": (OneOf(("10", "15", "17"), name="type"), Chars("digit", 8, name="document"), Check("pe_ruc")),
    "PH": (Chars("digit", 9, name="number"), Chars("digit", 3, name="branch")),
    "PL": (Number(3, ranges=((101, 999),), name="tax_office"), Chars("digit", 6, name="serial"), Check("pl_nip")),
    "PT": (Number(1, ranges=((1, 3),), name="type"), Chars("digit", 7, name="serial"), Check("pt_nif")),
    "PY": (*PERSONAL["PY"], Check("py_ruc")),
    "RU": (Chars("digit", 10, name="number"), Check("ru_inn12", 2)),
    "SI": (Number(7, ranges=((1000000, 9999999),), name="number"), Check("si_vat")),
    "TN": (
        Chars("digit", 7, name="number"),
        Chars("ABCDEFGHJKLMNPQRSTVWXYZ", 1, name="key"),
        OneOf(("A", "B", "D", "N", "P"), name="vat_code"),
        OneOf(("M", "P", "C", "N", "E"), name="category"),
        Chars("digit", 3, name="establishment"),
    ),
    "TZ": (Chars("digit", 9, name="number"),),
    "UA": (
        DayCount(date(1899, 12, 31), 5, name="birth_date"),
        Number(3, name="serial"),
        Number(1, parity="odd_male", name="sex_digit"),
        Check("ua_rnokpp"),
    ),
    "UG": (Literal("10"), Chars("digit", 8, name="number")),
    "US": (
        Literal("9"),
        Chars("digit", 2, name="area"),
        Number(2, ranges=((50, 65), (70, 88), (90, 92), (94, 99)), name="group"),
        Chars("digit", 4, name="serial"),
    ),
    "UY": (
        Number(2, ranges=((1, 21),), name="registry"),
        Chars("digit", 6, name="serial"),
        Literal("001"),
        Check("uy_rut"),
    ),
    "UZ": (Number(1, ranges=((4, 6),), name="lead"), Chars("digit", 8, name="number")),
    "VE": (OneOf(("V", "E"), name="holder"), Chars("digit", 8, name="number"), Check("ve_rif")),
    "VN": (Chars("digit", 9, name="number"), Check("vn_mst")),
    "ZA": (
        OneOf(("0", "1", "2", "3", "9"), name="lead"),
        Chars("digit", 8, name="serial"),
        Check("luhn"),
    ),
}

# Countries whose personal number doubles as the tax number.
_SHARED = {
    "BA": ("JMBG", PLAIN),
    "BE": ("Rijksregisternummer", DisplayRules(template="##.##.##-###.##")),
    "BG": ("EGN", PLAIN),
    "BR": ("CPF", DisplayRules(template="###.###.###-##")),
    "CA": ("SIN", DisplayRules(template="### ### ###")),
    "CH": ("AHV-Nr.", DisplayRules(template="###.####.####.##")),
    "CL": ("RUT", DisplayRules(template="##.###.###-#")),
    "CN": ("Resident Identity Card", PLAIN),
    "CR": ("Cédula de identidad", DisplayRules(template="#-####-####")),
    "CZ": ("Rodné číslo", DisplayRules(template="######/####")),
    "DK": ("CPR-nummer", DisplayRules(template="######-####")),
    "DO": ("Cédula", DisplayRules(template="###-#######-#")),
    "EE": ("Isikukood", PLAIN),
    "ES": ("NIF", PLAIN),
    "FI": ("Henkilötunnus", PLAIN),
    "GE": ("Personal number", PLAIN),
    "GH": ("Ghana Card PIN", DisplayRules(template="###-#########-#")),
    "HK": ("HKID", DisplayRules(template="#######(#)")),
    "HR": ("OIB", PLAIN),
    "IE": ("PPS number", PLAIN),
    "IL": ("Teudat Zehut", PLAIN),
    "IS": ("Kennitala", DisplayRules(template="######-####")),
    "IT": ("Codice fiscale", PLAIN),
    "JP": ("My Number", DisplayRules(every=4)),
    "KR": ("RRN", DisplayRules(template="######-#######")),
    "KZ": ("IIN", PLAIN),
    "LT": ("Asmens kodas", PLAIN),
    "LU": ("Matricule", PLAIN),
    "LV": ("Personas kods", DisplayRules(template="######-#####")),
    "MD": ("IDNP", PLAIN),
    "ME": ("JMBG", PLAIN),
    "MK": ("EMBG", PLAIN),
    "MT": ("ID card number", PLAIN),
    "NL": ("BSN", PLAIN),
    "NO": ("Fødselsnummer", PLAIN),
    "PK": ("CNIC", DisplayRules(template="#####-#######-#")),
    "RO": ("CNP", PLAIN),
    "RS": ("JMBG", PLAIN),
    "SE": ("Personnummer", DisplayRules(template="######-####")),
    "SG": ("NRIC", PLAIN),
    "SK": ("Rodné číslo", DisplayRules(template="######/####")),
    "SV": ("DUI", DisplayRules(template="########-#")),
    "TH": ("Thai ID", DisplayRules(template="#-####-#####-##-#")),
    "TR": ("T.C. Kimlik No", PLAIN),
    "TW": ("National ID", PLAIN),
}

_OWN = {
    "AL": ("NIPT", PLAIN, "Taxpayer identification number"),
    "AR": ("CUIL", DisplayRules(template="##-########-#"), "Código Único de Identificación Laboral"),
    "AT": ("Steuernummer", DisplayRules(template="##-###/####"), "Tax office and taxpayer number"),
    "AU": ("TFN", DisplayRules(template="### ### ###"), "Tax File Number"),
    "AZ": ("VÖEN", PLAIN, "Taxpayer identification number of a natural person"),
    "BD": ("e-TIN", PLAIN, "Electronic taxpayer identification number"),
    "CO": ("NIT", PLAIN, "Número de Identificación Tributaria"),
    "CY": ("TIC", PLAIN, "Tax identification code"),
    "DE": ("Steuer-IdNr", PLAIN, "Steuerliche Identifikationsnummer"),
    "EC": ("RUC", PLAIN, "Registro Único de Contribuyentes of a natural person"),
    "EG": ("Tax registration number", DisplayRules(template="###-###-###"), ""),
    "FR": ("Numéro fiscal", PLAIN, "Numéro fiscal de référence (SPI)"),
    "GB": ("UTR", PLAIN, "Unique Taxpayer Reference"),
    "GR": ("AFM", PLAIN, "Tax registry number"),
    "GT": ("NIT", DisplayRules(template="#######-#"), "Número de Identificación Tributaria"),
    "HU": ("Adóazonosító jel", PLAIN, "Tax identification number with day count birth date"),
    "ID": ("NPWP", DisplayRules(template="##.###.###.#-###.###"), "Nomor Pokok Wajib Pajak"),
    "IN": ("PAN", PLAIN, "Permanent Account Number"),
    "KE": ("KRA PIN", PLAIN, "Kenya Revenue Authority personal identification number"),
    "LK": ("TIN", PLAIN, "Taxpayer identification number"),
    "MA": ("Identifiant fiscal", PLAIN, ""),
    "MX": ("RFC", PLAIN, "Registro Federal de Contribuyentes of a natural person"),
    "MY": ("Income tax number", PLAIN, "Income tax reference of an individual"),
    "NG": ("TIN", DisplayRules(template="########-####"), "Taxpayer identification number"),
    "NZ": ("IRD number", DisplayRules(template="###-###-###"), "Inland Revenue number"),
    "PE": ("RUC", PLAIN, "Registro Único de Contribuyentes of a natural person"),
    "PH": ("TIN", DisplayRules(template="###-###-###-###"), "Taxpayer identification number and branch"),
    "PL": ("NIP", DisplayRules(template="###-###-##-##"), "Numer Identyfikacji Podatkowej"),
    "PT": ("NIF", PLAIN, "Número de Identificação Fiscal"),
    "PY": ("RUC", PLAIN, "Registro Único del Contribuyente"),
    "RU": ("INN", PLAIN, "Taxpayer number of an individual"),
    "SI": ("Davčna številka", PLAIN, "Tax number"),
    "TN": ("Matricule fiscal", DisplayRules(template="#######/#/#/#/###"), ""),
    "TZ": ("TIN", DisplayRules(template="###-###-###"), "Taxpayer identification number"),
    "UA": ("RNOKPP", PLAIN, "Individual taxpayer registration number"),
    "UG": ("TIN", PLAIN, "Taxpayer identification number"),
    "US": ("ITIN", DisplayRules(template="###-##-####"), "Individual Taxpayer Identification Number"),
    "UY": ("RUT", PLAIN, "Registro Único Tributario"),
    "UZ": ("INN", PLAIN, "Taxpayer identification number"),
    "VE": ("RIF", PLAIN, "Registro de Información Fiscal"),
    "VN": ("MST", PLAIN, "Mã số thuế"),
    "ZA": ("Income tax reference", PLAIN, ""),
}


def _tax(code: str, name: str, display: DisplayRules, layout: tuple[Field, ...], description: str) -> FormatSpec:
    return FormatSpec(
        category=Category.TAX_ID,
        code=code,
        name=f"{country(code)} {name}",
        description=description,
        layout=layout,
        display=display,
        holder_type="individual",
    )


FORMATS = tuple(
    [
        _tax(code, name, display, PERSONAL[code], "Personal identification number used for tax")
        for code, (name, display) in _SHARED.items()
    ]
    + [_tax(code, name, display, LAYOUTS[code], desc) for code, (name, display, desc) in _OWN.items()]
)
