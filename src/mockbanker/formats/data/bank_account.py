"""Domestic bank account numbers.

Every IBAN country contributes its BBAN.  Countries without IBANs get their
domestic routing and account layout; most of these carry no check digit.
"""

from __future__ import annotations

from ..model import PLAIN, Category, Chars, Check, DisplayRules, Field, FormatSpec, Literal, OneOf
from .bban import BBANS
from .common import country

__all__ = ["FORMATS"]


def _bban(code: str) -> FormatSpec:
    return FormatSpec(
        category=Category.BANK_ACCOUNT,
        code=code,
        name=f"{country(code)} BBAN",
        description="Basic bank account number as embedded in the IBAN",
        layout=BBANS[code],
    )


def _domestic(
    code: str,
    name: str,
    *layout: Field,
    display: DisplayRules = PLAIN,
    description: str = "",
) -> FormatSpec:
    return FormatSpec(
        category=Category.BANK_ACCOUNT,
        code=code,
        name=f"{country(code)} {name}",
        description=description,
        layout=layout,
        display=display,
    )


_DOMESTIC = (
    FormatSpec(
        category=Category.BANK_ACCOUNT,
        code="US",
        name="United States routing and account number",
        description="ABA routing transit number followed by a bank account number",
        layout=(
            Chars("digit", 8, name="routing_number"),
            Check("aba", covers=("routing_number",), name="routing_check"),
            Chars("digit", variants=(8, 9, 10, 11, 12), name="account"),
        ),
        display=DisplayRules(groups=(9,)),
    ),
    FormatSpec(
        category=Category.BANK_ACCOUNT,
        code="CA",
        name="Canada transit, institution and account number",
        layout=(
            Chars("digit", 5, name="transit"),
            Chars("digit", 3, name="institution"),
            Chars("digit", 7, name="account"),
        ),
        display=DisplayRules(template="#####-###-#######"),
        length=15,
    ),
    FormatSpec(
        category=Category.BANK_ACCOUNT,
        code="AU",
        name="Australia BSB and account number",
        layout=(Chars("digit", 6, name="bsb"), Chars("digit", 9, name="account")),
        display=DisplayRules(template="###-### #########"),
        length=15,
    ),
    FormatSpec(
        category=Category.BANK_ACCOUNT,
        code="NZ",
        name="New Zealand bank account number",
        layout=(
            Chars("digit", 2, name="bank_code"),
            Chars("digit", 4, name="branch_code"),
            Chars("digit", 7, name="account"),
            Chars("digit", 3, name="suffix"),
        ),
        display=DisplayRules(template="##-####-#######-###"),
        length=16,
    ),
    FormatSpec(
        category=Category.BANK_ACCOUNT,
        code="IN",
        name="India IFSC and account number",
        description="Eleven character IFSC (fifth character always 0) and account number",
        layout=(
            Chars("letter", 4, name="bank_code"),
            Literal("0"),
            Chars("alnum", 6, name="branch_code"),
            Chars("digit", variants=(11, 12, 14, 16), name="account"),
        ),
        display=DisplayRules(groups=(11,)),
    ),
    FormatSpec(
        category=Category.BANK_ACCOUNT,
        code="JP",
        name="Japan bank, branch and account number",
        layout=(
            Chars("digit", 4, name="bank_code"),
            Chars("digit", 3, name="branch_code"),
            Chars("digit", 7, name="account"),
        ),
        display=DisplayRules(template="####-###-#######"),
        length=14,
    ),
    FormatSpec(
        category=Category.BANK_ACCOUNT,
        code="CN",
        name="China UnionPay debit account number",
        layout=(Literal("62"), Chars("digit", 16, name="account"), Check("luhn")),
        display=DisplayRules(every=4),
        length=19,
    ),
    FormatSpec(
        category=Category.BANK_ACCOUNT,
        code="MX",
        name="Mexico CLABE",
        description="Clave Bancaria Estandarizada, 18 digits with a 3-7-1 check digit",
        layout=(
            Chars("digit", 3, name="bank_code"),
            Chars("digit", 3, name="branch_code"),
            Chars("digit", 11, name="account"),
            Check("aba", name="control_digit"),
        ),
        length=18,
    ),
    FormatSpec(
        category=Category.BANK_ACCOUNT,
        code="AR",
        name="Argentina CBU",
        description="Clave Bancaria Uniforme: two blocks each closed by a check digit",
        layout=(
            Chars("digit", 3, name="bank_code"),
            Chars("digit", 4, name="branch_code"),
            Check("ar_cbu_bank", covers=("bank_code", "branch_code"), name="block_check"),
            Chars("digit", 13, name="account"),
            Check("ar_cbu_account", covers=("account",), name="account_check"),
        ),
        display=DisplayRules(groups=(8,)),
        length=22,
    ),
    FormatSpec(
        category=Category.BANK_ACCOUNT,
        code="NG",
        name="Nigeria bank code and NUBAN",
        description="Three digit bank code followed by the ten digit NUBAN",
        layout=(
            Chars("digit", 3, name="bank_code"),
            Chars("digit", 9, name="serial"),
            Check("ng_nuban", covers=("bank_code", "serial"), name="check_digit"),
        ),
        display=DisplayRules(groups=(3,)),
        length=13,
    ),
    _domestic(
        "ZA",
        "branch code and account number",
        Chars("digit", 6, name="branch_code"),
        Chars("digit", variants=(9, 10, 11), name="account"),
        display=DisplayRules(groups=(6,)),
    ),
    _domestic(
        "KR",
        "bank code and account number",
        Chars("digit", 3, name="bank_code"),
        Chars("digit", variants=(11, 12, 13, 14), name="account"),
        display=DisplayRules(groups=(3,)),
    ),
    _domestic(
        "SG",
        "bank, branch and account number",
        Chars("digit", 4, name="bank_code"),
        Chars("digit", 3, name="branch_code"),
        Chars("digit", variants=(9, 10), name="account"),
        display=DisplayRules(groups=(4, 3)),
    ),
    _domestic(
        "HK",
        "bank, branch and account number",
        Chars("digit", 3, name="bank_code"),
        Chars("digit", 3, name="branch_code"),
        Chars("digit", variants=(6, 9), name="account"),
        display=DisplayRules(groups=(3, 3)),
    ),
    _domestic("MY", "bank account number", Chars("digit", variants=(10, 12, 14), name="account")),
    _domestic(
        "TH",
        "bank account number",
        Chars("digit", 3, name="branch_code"),
        Chars("digit", 1, name="account_type"),
        Chars("digit", 5, name="serial"),
        Chars("digit", 1, name="control"),
        display=DisplayRules(template="###-#-#####-#"),
    ),
    _domestic(
        "ID",
        "bank code and account number",
        Chars("digit", 3, name="bank_code"),
        Chars("digit", variants=(10, 12, 13, 15), name="account"),
        display=DisplayRules(groups=(3,)),
    ),
    _domestic(
        "PH",
        "bank account number",
        Chars("digit", variants=(10, 12, 13, 16), name="account"),
    ),
    _domestic(
        "VN",
        "bank account number",
        Chars("digit", variants=(9, 10, 12, 13, 14), name="account"),
    ),
    _domestic(
        "TW",
        "bank, branch and account number",
        Chars("digit", 3, name="bank_code"),
        Chars("digit", 4, name="branch_code"),
        Chars("digit", variants=(12, 14), name="account"),
        display=DisplayRules(groups=(3, 4)),
    ),
    _domestic(
        "CL",
        "bank code and account number",
        Chars("digit", 3, name="bank_code"),
        Chars("digit", variants=(8, 10, 12), name="account"),
        display=DisplayRules(groups=(3,)),
    ),
    _domestic(
        "CO",
        "bank code and account number",
        Chars("digit", 4, name="bank_code"),
        Chars("digit", variants=(10, 11), name="account"),
        display=DisplayRules(groups=(4,)),
    ),
    _domestic(
        "PE",
        "CCI",
        Chars("digit", 3, name="bank_code"),
        Chars("digit", 3, name="branch_code"),
        Chars("digit", 12, name="account"),
        Check("pe_cci", covers=("bank_code", "branch_code"), name="branch_check"),
        Check("pe_cci", covers=("account",), name="account_check"),
        display=DisplayRules(template="###-###-############-##"),
        description="Código de Cuenta Interbancario; one check digit per block",
    ),
    _domestic(
        "UY",
        "bank account number",
        Chars("digit", variants=(9, 10, 12, 14), name="account"),
    ),
    _domestic("EC", "bank account number", Chars("digit", 10, name="account")),
    _domestic(
        "VE",
        "bank account number",
        Chars("digit", 4, name="bank_code"),
        Chars("digit", 4, name="branch_code"),
        Chars("digit", 2, name="control"),
        Chars("digit", 10, name="account"),
        display=DisplayRules(template="####-####-##-##########"),
    ),
    _domestic("BO", "bank account number", Chars("digit", variants=(10, 13, 14), name="account")),
    _domestic("PY", "bank account number", Chars("digit", variants=(9, 10, 12), name="account")),
    _domestic(
        "KE",
        "bank, branch and account number",
        Chars("digit", 2, name="bank_code"),
        Chars("digit", 3, name="branch_code"),
        Chars("digit", variants=(10, 12, 13), name="account"),
        display=DisplayRules(groups=(2, 3)),
    ),
    _domestic(
        "GH",
        "sort code and account number",
        Chars("digit", 6, name="sort_code"),
        Chars("digit", 13, name="account"),
        display=DisplayRules(groups=(6,)),
    ),
    _domestic("TZ", "bank account number", Chars("digit", variants=(10, 12, 13), name="account")),
    _domestic("UG", "bank account number", Chars("digit", variants=(10, 12, 14), name="account")),
    _domestic(
        "BD",
        "routing and account number",
        Chars("digit", 9, name="routing_number"),
        Chars("digit", 13, name="account"),
        display=DisplayRules(groups=(9,)),
    ),
    _domestic(
        "LK",
        "bank, branch and account number",
        Chars("digit", 4, name="bank_code"),
        Chars("digit", 3, name="branch_code"),
        Chars("digit", variants=(9, 10, 12), name="account"),
        display=DisplayRules(groups=(4, 3)),
    ),
    _domestic("NP", "bank account number", Chars("digit", variants=(14, 16, 19), name="account")),
    _domestic("ET", "bank account number", Chars("digit", variants=(10, 13, 16), name="account")),
    _domestic(
        "ZM",
        "sort code and account number",
        Chars("digit", 6, name="sort_code"),
        Chars("digit", 13, name="account"),
        display=DisplayRules(groups=(6,)),
    ),
    _domestic("ZW", "bank account number", Chars("digit", variants=(10, 12, 16), name="account")),
    _domestic(
        "BW",
        "branch code and account number",
        Chars("digit", 6, name="branch_code"),
        Chars("digit", variants=(10, 11), name="account"),
        display=DisplayRules(groups=(6,)),
    ),
    _domestic(
        "NA",
        "branch code and account number",
        Chars("digit", 6, name="branch_code"),
        Chars("digit", variants=(10, 11), name="account"),
        display=DisplayRules(groups=(6,)),
    ),
    _domestic("RW", "bank account number", Chars("digit", variants=(12, 13, 16), name="account")),
    _domestic("MW", "bank account number", Chars("digit", variants=(9, 10, 12), name="account")),
    _domestic(
        "JM",
        "institution, branch and account number",
        Chars("digit", 3, name="institution"),
        Chars("digit", 5, name="branch_code"),
        Chars("digit", variants=(9, 10), name="account"),
        display=DisplayRules(groups=(3, 5)),
    ),
    _domestic(
        "TT",
        "routing and account number",
        Chars("digit", 9, name="routing_number"),
        Chars("digit", variants=(8, 10, 12), name="account"),
        display=DisplayRules(groups=(9,)),
    ),
    _domestic(
        "PA",
        "routing and account number",
        Chars("digit", 9, name="routing_number"),
        Chars("digit", variants=(10, 12), name="account"),
        display=DisplayRules(groups=(9,)),
    ),
    _domestic("KH", "bank account number", Chars("digit", variants=(9, 12, 13), name="account")),
    _domestic(
        "MO",
        "bank account number",
        Chars("digit", variants=(9, 12, 13, 15), name="account"),
    ),
    _domestic("BN", "bank account number", Chars("digit", variants=(10, 12, 13), name="account")),
    _domestic(
        "UZ",
        "bank account number",
        Chars("digit", 5, name="balance_account"),
        OneOf(("000", "840", "978"), name="currency"),
        Chars("digit", 1, name="control"),
        Chars("digit", 8, name="client"),
        Chars("digit", 3, name="sequence"),
        display=DisplayRules(template="##### ### # ######## ###"),
    ),
    _domestic(
        "KG",
        "bank code and account number",
        Chars("digit", 3, name="bank_code"),
        Chars("digit", 13, name="account"),
        display=DisplayRules(groups=(3,)),
    ),
    _domestic(
        "AM",
        "bank code and account number",
        Chars("digit", 5, name="bank_code"),
        Chars("digit", 11, name="account"),
        display=DisplayRules(groups=(5,)),
    ),
)

FORMATS = tuple(_bban(code) for code in BBANS) + _DOMESTIC
