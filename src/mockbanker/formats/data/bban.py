"""Basic bank account number layouts by country.

Structures follow the SWIFT IBAN registry notation.  Where a country embeds
a national check inside its BBAN the layout spells the check out so IBANs and
domestic account numbers share the same validation.
"""

from __future__ import annotations

from ..model import Chars, Check, Field, Literal
from .common import structure

__all__ = ["BBANS", "IBAN_LENGTHS", "PARTIAL", "TERRITORIES"]


def _ninety_seven(bank: int, branch: int, account: int, kind: str = "digit") -> tuple[Field, ...]:
    fields: list[Field] = [Chars("digit", bank, name="bank_code")]
    covers = ["bank_code"]
    if branch:
        fields.append(Chars("digit", branch, name="branch_code"))
        covers.append("branch_code")
    fields.append(Chars(kind, account, name="account"))
    covers.append("account")
    fields.append(Check("mod97_10", 2, covers=tuple(covers), name="national_check"))
    return tuple(fields)


_FRENCH: tuple[Field, ...] = (
    Chars("digit", 5, name="bank_code"),
    Chars("digit", 5, name="branch_code"),
    Chars("alnum", 11, name="account"),
    Check("fr_rib", 2, covers=("bank_code", "branch_code", "account"), name="rib_key"),
)

_ITALIAN: tuple[Field, ...] = (
    Check("odd_even", covers=("bank_code", "branch_code", "account"), name="cin"),
    Chars("digit", 5, name="bank_code"),
    Chars("digit", 5, name="branch_code"),
    Chars("alnum", 12, name="account"),
)

_FINNISH: tuple[Field, ...] = (
    Chars("digit", 3, name="bank_code"),
    Chars("digit", 10, name="account"),
    Check("luhn", covers=("bank_code", "account"), name="national_check"),
)

_BANK_ACCOUNT = ("bank_code", "account")
_BANK_BRANCH_ACCOUNT = ("bank_code", "branch_code", "account")

BBANS: dict[str, tuple[Field, ...]] = {
    "AD": structure("4!n4!n12!c", _BANK_BRANCH_ACCOUNT),
    "AE": structure("3!n16!n", _BANK_ACCOUNT),
    "AL": (
        Chars("digit", 3, name="bank_code"),
        Chars("digit", 4, name="branch_code"),
        Check("hu_bank", covers=("bank_code", "branch_code"), name="national_check"),
        Chars("alnum", 16, name="account"),
    ),
    "AT": structure("5!n11!n", _BANK_ACCOUNT),
    "AZ": structure("4!a20!c", _BANK_ACCOUNT),
    "BA": _ninety_seven(3, 3, 8),
    "BE": (
        Chars("digit", 3, name="bank_code"),
        Chars("digit", 7, name="account"),
        Check("be_bank", 2, covers=("bank_code", "account"), name="national_check"),
    ),
    "BG": structure("4!a4!n2!n8!c", ("bank_code", "branch_code", "account_type", "account")),
    "BH": structure("4!a14!c", _BANK_ACCOUNT),
    "BI": structure("5!n5!n11!n2!n", ("bank_code", "branch_code", "account", "key")),
    "BR": structure(
        "8!n5!n10!n1!a1!c", ("bank_code", "branch_code", "account", "account_type", "owner")
    ),
    "BY": structure("4!c4!n16!c", ("bank_code", "balance_account", "account")),
    "CH": structure("5!n12!c", _BANK_ACCOUNT),
    "CR": (Literal("0"), *structure("3!n14!n", _BANK_ACCOUNT)),
    "CY": structure("3!n5!n16!c", _BANK_BRANCH_ACCOUNT),
    "CZ": structure("4!n6!n10!n", ("bank_code", "prefix", "account")),
    "DE": structure("8!n10!n", _BANK_ACCOUNT),
    "DJ": structure("5!n5!n11!n2!n", ("bank_code", "branch_code", "account", "key")),
    "DK": structure("4!n10!n", _BANK_ACCOUNT),
    "DO": structure("4!c20!n", _BANK_ACCOUNT),
    "EE": (
        Chars("digit", 2, name="bank_code"),
        Chars("digit", 2, name="branch_code"),
        Chars("digit", 11, name="account"),
        Check("ee_bank", covers=("branch_code", "account"), name="national_check"),
    ),
    "EG": structure("4!n4!n17!n", _BANK_BRANCH_ACCOUNT),
    "ES": (
        Chars("digit", 4, name="bank_code"),
        Chars("digit", 4, name="branch_code"),
        Check("es_bank", covers=("bank_code", "branch_code"), name="branch_check"),
        Check("es_account", covers=("account",), name="account_check"),
        Chars("digit", 10, name="account"),
    ),
    "FI": _FINNISH,
    "FK": structure("2!a12!n", _BANK_ACCOUNT),
    "FO": structure("4!n10!n", _BANK_ACCOUNT),
    "FR": _FRENCH,
    "GB": structure("4!a6!n8!n", ("bank_code", "sort_code", "account")),
    "GE": structure("2!a16!n", _BANK_ACCOUNT),
    "GI": structure("4!a15!c", _BANK_ACCOUNT),
    "GL": structure("4!n10!n", _BANK_ACCOUNT),
    "GR": structure("3!n4!n16!c", _BANK_BRANCH_ACCOUNT),
    "GT": structure("4!c20!c", _BANK_ACCOUNT),
    "HR": (
        Chars("digit", 6, name="bank_code"),
        Check("mod11_10", covers=("bank_code",), name="bank_check"),
        Chars("digit", 9, name="account"),
        Check("mod11_10", covers=("account",), name="account_check"),
    ),
    "HU": (
        Chars("digit", 3, name="bank_code"),
        Chars("digit", 4, name="branch_code"),
        Check("hu_bank", covers=("bank_code", "branch_code"), name="branch_check"),
        Chars("digit", 15, name="account"),
        Check("hu_bank", covers=("account",), name="account_check"),
    ),
    "IE": structure("4!a6!n8!n", ("bank_code", "sort_code", "account")),
    "IL": structure("3!n3!n13!n", _BANK_BRANCH_ACCOUNT),
    "IQ": structure("4!a3!n12!n", _BANK_BRANCH_ACCOUNT),
    "IS": structure("4!n2!n6!n10!n", ("bank_code", "ledger", "account", "kennitala")),
    "IT": _ITALIAN,
    "JO": structure("4!a4!n18!c", _BANK_BRANCH_ACCOUNT),
    "KW": structure("4!a22!c", _BANK_ACCOUNT),
    "KZ": structure("3!n13!c", _BANK_ACCOUNT),
    "LB": structure("4!n20!c", _BANK_ACCOUNT),
    "LC": structure("4!a24!c", _BANK_ACCOUNT),
    "LI": structure("5!n12!c", _BANK_ACCOUNT),
    "LT": structure("5!n11!n", _BANK_ACCOUNT),
    "LU": structure("3!n13!c", _BANK_ACCOUNT),
    "LV": structure("4!a13!c", _BANK_ACCOUNT),
    "LY": structure("3!n3!n15!n", _BANK_BRANCH_ACCOUNT),
    "MC": _FRENCH,
    "MD": structure("2!c18!c", _BANK_ACCOUNT),
    "ME": _ninety_seven(3, 0, 13),
    "MK": _ninety_seven(3, 0, 10, "alnum"),
    "MN": structure("4!n12!n", _BANK_ACCOUNT),
    "MR": structure("5!n5!n11!n2!n", ("bank_code", "branch_code", "account", "key")),
    "MT": structure("4!a5!n18!c", _BANK_BRANCH_ACCOUNT),
    "MU": structure(
        "4!a2!n2!n12!n3!n3!a",
        ("bank_code", "bank_number", "branch_code", "account", "reserved", "currency"),
    ),
    "NI": structure("4!a20!n", _BANK_ACCOUNT),
    "NL": structure("4!a10!n", _BANK_ACCOUNT),
    "NO": (
        Chars("digit", 4, name="bank_code"),
        Chars("digit", 6, name="account"),
        Check("no_bank", covers=("bank_code", "account"), name="national_check"),
    ),
    "OM": structure("3!n16!c", _BANK_ACCOUNT),
    "PK": structure("4!a16!c", _BANK_ACCOUNT),
    "PL": (
        Chars("digit", 7, name="bank_code"),
        Check("pl_bank", covers=("bank_code",), name="bank_check"),
        Chars("digit", 16, name="account"),
    ),
    "PS": structure("4!a21!c", _BANK_ACCOUNT),
    "PT": _ninety_seven(4, 4, 11),
    "QA": structure("4!a21!c", _BANK_ACCOUNT),
    "RO": structure("4!a16!c", _BANK_ACCOUNT),
    "RS": _ninety_seven(3, 0, 13),
    "RU": structure("9!n5!n15!c", ("bank_code", "branch_code", "account")),
    "SA": structure("2!n18!c", _BANK_ACCOUNT),
    "SC": structure("4!a2!n2!n16!n3!a", ("bank_code", "bank_number", "branch_code", "account", "currency")),
    "SD": structure("2!n12!n", _BANK_ACCOUNT),
    "SE": structure("3!n17!n", _BANK_ACCOUNT),
    "SI": _ninety_seven(5, 0, 8),
    "SK": structure("4!n6!n10!n", ("bank_code", "prefix", "account")),
    "SM": _ITALIAN,
    "SO": structure("4!n3!n12!n", _BANK_BRANCH_ACCOUNT),
    "ST": structure("4!n4!n11!n2!n", ("bank_code", "branch_code", "account", "key")),
    "SV": structure("4!a20!n", _BANK_ACCOUNT),
    "TL": structure("3!n14!n2!n", ("bank_code", "account", "key")),
    "TN": (
        Chars("digit", 2, name="bank_code"),
        Chars("digit", 3, name="branch_code"),
        Chars("digit", 13, name="account"),
        Check("tn_bank", 2, covers=_BANK_BRANCH_ACCOUNT, name="national_check"),
    ),
    "TR": (
        Chars("digit", 5, name="bank_code"),
        Literal("0"),
        Chars("alnum", 16, name="account"),
    ),
    "UA": structure("6!n19!c", _BANK_ACCOUNT),
    "VA": structure("3!n15!n", _BANK_ACCOUNT),
    "VG": structure("4!a16!n", _BANK_ACCOUNT),
    "XK": structure("4!n10!n2!n", ("bank_code", "account", "key")),
    "YE": structure("4!a4!n18!c", _BANK_BRANCH_ACCOUNT),
    # Countries that publish IBANs without being registered with SWIFT.
    "AO": structure("4!n4!n11!n2!n", ("bank_code", "branch_code", "account", "key")),
    "BF": structure("2!c22!n", _BANK_ACCOUNT),
    "BJ": structure("2!c22!n", _BANK_ACCOUNT),
    "CF": structure("23!n"),
    "CG": structure("23!n"),
    "CI": structure("2!c22!n", _BANK_ACCOUNT),
    "CM": structure("23!n"),
    "CV": structure("21!n"),
    "DZ": structure("22!n"),
    "GA": structure("23!n"),
    "GQ": structure("23!n"),
    "GW": structure("2!c19!n", _BANK_ACCOUNT),
    "HN": structure("4!a20!n", _BANK_ACCOUNT),
    "IR": structure("22!n"),
    "KM": structure("23!n"),
    "MA": structure("24!n"),
    "MG": structure("23!n"),
    "ML": structure("2!c22!n", _BANK_ACCOUNT),
    "MZ": structure("21!n"),
    "NE": structure("2!a22!n", _BANK_ACCOUNT),
    "SN": structure("2!a22!n", _BANK_ACCOUNT),
    "TD": structure("23!n"),
    "TG": structure("2!a22!n", _BANK_ACCOUNT),
}

PARTIAL = frozenset(
    "AO BF BJ CF CG CI CM CV DZ GA GQ GW HN IR KM MA MG ML MZ NE SN TD TG".split()
)

# Territories issuing IBANs under their own country code with a parent layout.
TERRITORIES = {
    **dict.fromkeys("BL GF GP MF MQ NC PF PM RE TF WF YT".split(), "FR"),
    "AX": "FI",
}

IBAN_LENGTHS = {
    "AD": 24, "AE": 23, "AL": 28, "AO": 25, "AT": 20, "AX": 18, "AZ": 28,
    "BA": 20, "BE": 16, "BF": 28, "BG": 22, "BH": 22, "BI": 27, "BJ": 28,
    "BL": 27, "BR": 29, "BY": 28, "CF": 27, "CG": 27, "CH": 21, "CI": 28,
    "CM": 27, "CR": 22, "CV": 25, "CY": 28, "CZ": 24, "DE": 22, "DJ": 27,
    "DK": 18, "DO": 28, "DZ": 26, "EE": 20, "EG": 29, "ES": 24, "FI": 18,
    "FK": 18, "FO": 18, "FR": 27, "GA": 27, "GB": 22, "GE": 22, "GF": 27,
    "GI": 23, "GL": 18, "GP": 27, "GQ": 27, "GR": 27, "GT": 28, "GW": 25,
    "HN": 28, "HR": 21, "HU": 28, "IE": 22, "IL": 23, "IQ": 23, "IR": 26,
    "IS": 26, "IT": 27, "JO": 30, "KM": 27, "KW": 30, "KZ": 20, "LB": 28,
    "LC": 32, "LI": 21, "LT": 20, "LU": 20, "LV": 21, "LY": 25, "MA": 28,
    "MC": 27, "MD": 24, "ME": 22, "MF": 27, "MG": 27, "MK": 19, "ML": 28,
    "MN": 20, "MQ": 27, "MR": 27, "MT": 31, "MU": 30, "MZ": 25, "NC": 27,
    "NE": 28, "NI": 28, "NL": 18, "NO": 15, "OM": 23, "PF": 27, "PK": 24,
    "PL": 28, "PM": 27, "PS": 29, "PT": 25, "QA": 29, "RE": 27, "RO": 24,
    "RS": 22, "RU": 33, "SA": 24, "SC": 31, "SD": 18, "SE": 24, "SI": 19,
    "SK": 24, "SM": 27, "SN": 28, "SO": 23, "ST": 25, "SV": 28, "TD": 27,
    "TF": 27, "TG": 28, "TL": 23, "TN": 24, "TR": 26, "UA": 29, "VA": 22,
    "VG": 24, "WF": 27, "XK": 20, "YE": 30, "YT": 27,
}  # fmt: skip
