"""Named algorithm instances referenced by format definitions.

The catalog is the closed set of check schemes format data may point at.  It
is built once at import time and exposed read-only.
"""

from __future__ import annotations

from types import MappingProxyType

from .base import Algorithm
from .iso7064 import Iban, Luhn, Mod11_2, Mod11_10, Mod97_10, NoCheck, Verhoeff
from .national import (
    AustralianAbn,
    BelgianNational,
    BritishVat,
    FrenchRib,
    FrenchVatKey,
    HungarianPersonal,
    ItalianOddEven,
    KoreanBrn,
    RussianSnils,
    SingaporeNric,
    SpanishCif,
    TaiwanId,
    TurkishVkn,
    UkrainianEdrpou,
)
from .weighted import Cascade, NumericMod, WeightedSum

__all__ = ["ALGORITHMS", "USCC_ALPHABET"]

USCC_ALPHABET = "0123456789ABCDEFGHJKLMNPQRTUWXY"

# Common remaps.
_ZERO10 = ((10, 0),)
_MOD11 = ((11, 0), (10, None))
_MOD11_ZERO = ((10, 0), (11, 0))
_MOD11_ONE = ((10, 0), (11, 1))


def _mod11(weights: tuple[int, ...]) -> WeightedSum:
    return WeightedSum(weights, 11, "complement", _MOD11)


def _mod10(weights: tuple[int, ...], **kwargs: object) -> WeightedSum:
    return WeightedSum(weights, 10, "complement", _ZERO10, **kwargs)  # type: ignore[arg-type]


_luhn = Luhn()
_mod97_10 = Mod97_10()
_mod11_10 = Mod11_10()
_odd_even = ItalianOddEven()
_icao = WeightedSum((7, 3, 1), 10, "remainder", cycle=True)
_aba = _mod10((3, 7, 1), cycle=True)
_mod97_complement = NumericMod(97, "complement", width=2)
_pt_nif = WeightedSum((9, 8, 7, 6, 5, 4, 3, 2), 11, "complement", _MOD11_ZERO)
_ee_personal = WeightedSum(
    (1, 2, 3, 4, 5, 6, 7, 8, 9, 1),
    11,
    "remainder",
    _ZERO10,
    fallback=(3, 4, 5, 6, 7, 8, 9, 1, 2, 3),
)
_no_k2 = _mod11((5, 4, 3, 2, 7, 6, 5, 4, 3, 2))
_ie = WeightedSum((8, 7, 6, 5, 4, 3, 2), 23, "remainder", table="WABCDEFGHIJKLMNOPQRSTUV")

_catalog: dict[str, Algorithm] = {
    # Generic schemes
    "none": NoCheck(),
    "luhn": _luhn,
    "verhoeff": Verhoeff(),
    "mod97_10": _mod97_10,
    "lei": _mod97_10,
    "iban": Iban(),
    "mod11_10": _mod11_10,
    "mod11_2": Mod11_2(),
    "icao": _icao,
    "ean13": _mod10((1, 3), cycle=True),
    "aba": _aba,
    "mod97_complement": _mod97_complement,
    "odd_even": _odd_even,
    # Europe
    "at_svnr": WeightedSum((3, 7, 9, 5, 8, 4, 2, 1, 6), 11, "remainder", ((10, None),)),
    "at_vat": _mod10((1, 2, 1, 2, 1, 2, 1), digit_sum=True, offset=4),
    "be_national": BelgianNational(),
    "be_bank": NumericMod(97, remap=((0, 97),), width=2),
    "bg_personal": WeightedSum((2, 4, 8, 5, 10, 9, 7, 3, 6), 11, "remainder", _ZERO10),
    "bg_company": WeightedSum(
        (1, 2, 3, 4, 5, 6, 7, 8), 11, "remainder", _ZERO10, fallback=(3, 4, 5, 6, 7, 8, 9, 10)
    ),
    "ch_uid": _mod11((5, 4, 3, 2, 7, 6, 5, 4)),
    "cz_personal": NumericMod(11, remap=_ZERO10),
    "cz_ico": WeightedSum((8, 7, 6, 5, 4, 3, 2), 11, "complement", _MOD11_ONE),
    "dk_company": _mod11((2, 7, 6, 5, 4, 3, 2)),
    "ee_personal": _ee_personal,
    "ee_company": WeightedSum(
        (1, 2, 3, 4, 5, 6, 7), 11, "remainder", _ZERO10, fallback=(3, 4, 5, 6, 7, 8, 9)
    ),
    "ee_vat": _mod10((3, 7, 1, 3, 7, 1, 3, 7)),
    "ee_bank": _mod10((7, 3, 1), align="right", cycle=True),
    "es_dni": NumericMod(
        23,
        table="TRWAGMYFPDXBNJZSQVHLCKE",
        translate=(("X", "0"), ("Y", "1"), ("Z", "2")),
    ),
    "es_cif": SpanishCif(),
    "es_bank": WeightedSum((4, 8, 5, 10, 9, 7, 3, 6), 11, "complement", ((11, 0), (10, 1))),
    "es_account": WeightedSum(
        (1, 2, 4, 8, 5, 10, 9, 7, 3, 6), 11, "complement", ((11, 0), (10, 1))
    ),
    "fi_personal": NumericMod(31, table="0123456789ABCDEFHJKLMNPRSTUVWXY"),
    "fi_company": _mod11((7, 9, 10, 5, 8, 4, 2)),
    "fr_rib": FrenchRib(),
    "fr_vat": FrenchVatKey(),
    "fr_tax": NumericMod(511, width=3),
    "gb_vat": BritishVat(),
    "gb_utr": WeightedSum((6, 7, 8, 9, 10, 5, 4, 3, 2), 11, "remainder", table="21987654321"),
    "gr_vat": WeightedSum((256, 128, 64, 32, 16, 8, 4, 2), 11, "remainder", _ZERO10),
    "hu_personal": HungarianPersonal(),
    "hu_tax": WeightedSum((1, 2, 3, 4, 5, 6, 7, 8, 9), 11, "remainder", ((10, None),)),
    "hu_vat": _mod10((9, 7, 3, 1, 9, 7, 3)),
    "hu_bank": _mod10((9, 7, 3, 1), cycle=True),
    "ie_pps": _ie,
    "is_kennitala": _mod11((3, 2, 7, 6, 5, 4, 3, 2)),
    "jmbg": _mod11((7, 6, 5, 4, 3, 2, 7, 6, 5, 4, 3, 2)),
    "kz_iin": WeightedSum(
        (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11),
        11,
        "remainder",
        ((10, None),),
        fallback=(3, 4, 5, 6, 7, 8, 9, 10, 11, 1, 2),
    ),
    "lt_vat": WeightedSum(
        (1, 2, 3, 4, 5, 6, 7, 8), 11, "remainder", _ZERO10, fallback=(3, 4, 5, 6, 7, 8, 9, 1)
    ),
    "lu_vat": NumericMod(89, width=2),
    "lv_personal": WeightedSum((1, 6, 3, 7, 9, 10, 5, 8, 4, 2), 11, "solve", offset=-1),
    "lv_vat": WeightedSum((9, 1, 4, 8, 3, 10, 2, 5, 7, 6), 11, "solve", offset=-3),
    "mt_vat": WeightedSum((3, 4, 6, 7, 8, 9), 37, "complement", width=2),
    "nl_bsn": WeightedSum((9, 8, 7, 6, 5, 4, 3, 2), 11, "remainder", ((10, None),)),
    "no_personal": Cascade((_mod11((3, 7, 6, 1, 8, 9, 4, 5, 2)), _no_k2)),
    "no_company": _mod11((3, 2, 7, 6, 5, 4, 3, 2)),
    "no_bank": _no_k2,
    "pesel": _mod10((1, 3, 7, 9, 1, 3, 7, 9, 1, 3)),
    "pl_nip": WeightedSum((6, 5, 7, 2, 3, 4, 5, 6, 7), 11, "remainder", ((10, None),)),
    "pl_regon": WeightedSum((8, 9, 2, 3, 4, 5, 6, 7), 11, "remainder", _ZERO10),
    "pl_bank": _mod10((3, 9, 7, 1, 3, 9, 7)),
    "pt_nif": _pt_nif,
    "ro_personal": WeightedSum((2, 7, 9, 1, 4, 6, 3, 5, 8, 2, 7, 9), 11, "remainder", ((10, 1),)),
    "ro_vat": WeightedSum((70, 50, 30, 20, 10, 70, 50, 30, 20), 11, "remainder", _ZERO10),
    "ru_inn12": Cascade(
        (
            WeightedSum((7, 2, 4, 10, 3, 5, 9, 4, 6, 8), 11, "remainder", _ZERO10),
            WeightedSum((3, 7, 2, 4, 10, 3, 5, 9, 4, 6, 8), 11, "remainder", _ZERO10),
        )
    ),
    "ru_snils": RussianSnils(),
    "ru_ogrn": NumericMod(11, remap=_ZERO10),
    "si_vat": WeightedSum((8, 7, 6, 5, 4, 3, 2), 11, "complement", ((10, 0), (11, None))),
    "sk_vat": NumericMod(11, "complement", remap=_MOD11, scale=10),
    "tn_bank": NumericMod(97, "complement", scale=100, width=2),
    "tr_personal": Cascade(
        (
            WeightedSum((7, -1, 7, -1, 7, -1, 7, -1, 7), 10, "remainder"),
            WeightedSum((1,) * 10, 10, "remainder"),
        )
    ),
    "tr_vkn": TurkishVkn(),
    "ua_rnokpp": WeightedSum((-1, 5, 7, 9, 4, 6, 10, 5, 7), 11, "remainder", _ZERO10),
    "ua_edrpou": UkrainianEdrpou(),
    # Americas
    "ar_cuit": _mod11((5, 4, 3, 2, 7, 6, 5, 4, 3, 2)),
    "ar_cbu_bank": _mod10((7, 1, 3, 9, 7, 1, 3)),
    "ar_cbu_account": _mod10((3, 9, 7, 1, 3, 9, 7, 1, 3, 9, 7, 1, 3)),
    "br_cpf": Cascade(
        (
            WeightedSum(tuple(range(10, 1, -1)), 11, "complement", _MOD11_ZERO),
            WeightedSum(tuple(range(11, 1, -1)), 11, "complement", _MOD11_ZERO),
        )
    ),
    "br_cnpj": Cascade(
        (
            WeightedSum((5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2), 11, "complement", _MOD11_ZERO),
            WeightedSum((6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2), 11, "complement", _MOD11_ZERO),
        )
    ),
    "cl_rut": WeightedSum(
        (2, 3, 4, 5, 6, 7),
        11,
        "complement",
        ((11, 0),),
        table="0123456789K",
        align="right",
        cycle=True,
    ),
    "co_nit": WeightedSum(
        (3, 7, 13, 17, 19, 23, 29, 37, 41, 43, 47, 53, 59, 67, 71),
        11,
        "remainder",
        tuple((r, 11 - r) for r in range(2, 11)),
        align="right",
        cycle=True,
    ),
    "ec_ci": _mod10((2, 1, 2, 1, 2, 1, 2, 1, 2), digit_sum=True),
    "gt_nit": WeightedSum(
        tuple(range(2, 14)),
        11,
        "complement",
        ((11, 0),),
        table="0123456789K",
        align="right",
        cycle=True,
    ),
    "ni_cedula": NumericMod(23, table="ABCDEFGHJKLMNPQRSTUVWXY"),
    "mx_curp": WeightedSum(
        tuple(range(18, 1, -1)),
        10,
        "complement",
        _ZERO10,
        values="0123456789ABCDEFGHIJKLMNÑOPQRSTUVWXYZ",
    ),
    "mx_rfc": WeightedSum(
        tuple(range(13, 1, -1)),
        11,
        "complement",
        ((11, 0),),
        table="0123456789A",
        values="0123456789ABCDEFGHIJKLMN&OPQRSTUVWXYZ Ñ",
    ),
    # Legal persons carry one fewer letter; the missing leading blank (value 37)
    # keeps its weight of 13.
    "mx_rfc_company": WeightedSum(
        tuple(range(12, 1, -1)),
        11,
        "complement",
        ((11, 0),),
        table="0123456789A",
        values="0123456789ABCDEFGHIJKLMN&OPQRSTUVWXYZ Ñ",
        offset=37 * 13,
    ),
    "pe_ruc": WeightedSum((5, 4, 3, 2, 7, 6, 5, 4, 3, 2), 11, "complement", _MOD11_ONE),
    "pe_cci": _mod10((1, 2), cycle=True, digit_sum=True),
    "py_ruc": WeightedSum(
        tuple(range(2, 12)), 11, "complement", _MOD11_ZERO, align="right", cycle=True
    ),
    "sv_dui": _mod10((9, 8, 7, 6, 5, 4, 3, 2)),
    "uy_ci": _mod10((2, 9, 8, 7, 6, 3, 4)),
    "uy_rut": _mod11((4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)),
    # Holder letters weigh in at 4, 8, 12, 16 and 20; digits keep their face value.
    "ve_rif": WeightedSum(
        (1, 3, 2, 7, 6, 5, 4, 3, 2),
        11,
        "remainder",
        table="00987654321",
        values="____V___E___J___P___G",
    ),
    # Asia, Africa and Oceania
    "ir_national": WeightedSum(
        tuple(range(10, 1, -1)), 11, "remainder", tuple((r, 11 - r) for r in range(2, 11))
    ),
    "cn_uscc": WeightedSum(
        (1, 3, 9, 27, 19, 26, 16, 17, 20, 29, 25, 13, 8, 24, 10, 30, 28),
        31,
        "complement",
        ((31, 0),),
        table=USCC_ALPHABET,
        values=USCC_ALPHABET,
    ),
    "kr_rrn": WeightedSum((2, 3, 4, 5, 6, 7, 8, 9, 2, 3, 4, 5), 11, "complement", _MOD11_ONE),
    "kr_brn": KoreanBrn(),
    "jp_mynumber": WeightedSum(
        (2, 3, 4, 5, 6, 7, 2, 3, 4, 5, 6),
        11,
        "remainder",
        ((1, 0),) + tuple((r, 11 - r) for r in range(2, 11)),
        align="right",
    ),
    "jp_corporate": WeightedSum((1, 2), 9, "complement", align="right", cycle=True),
    "tw_id": TaiwanId(),
    "tw_ubn": _mod10((1, 2, 1, 2, 1, 2, 4), digit_sum=True),
    "hk_id": WeightedSum(
        (8, 7, 6, 5, 4, 3, 2), 11, "complement", ((11, 0),), table="0123456789A", offset=324
    ),
    "sg_nric": SingaporeNric(),
    "sg_uen": WeightedSum((10, 4, 9, 3, 8, 2, 7, 1), 11, "remainder", table="XMKECAWLJDB"),
    "th_id": WeightedSum(tuple(range(13, 1, -1)), 11, "complement", _MOD11_ONE),
    "eg_id": WeightedSum((2, 7, 6, 5, 4, 3, 2, 7, 6, 5, 4, 3, 2), 11, "complement", _MOD11_ONE),
    "ng_nuban": _mod10((3, 7, 3, 3, 7, 3, 3, 7, 3, 3, 7, 3)),
    "kw_civil": _mod11((2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)),
    "vn_mst": WeightedSum((31, 29, 23, 19, 17, 13, 7, 5, 3), 11, "solve", offset=1),
    "zw_national": NumericMod(23, table="ZABCDEFGHJKLMNPQRSTVWXY"),
    "au_tfn": WeightedSum((1, 4, 3, 7, 5, 8, 6, 9), 11, "solve", check_weight=10),
    "au_abn": AustralianAbn(),
    "au_medicare": WeightedSum((1, 3, 7, 9, 1, 3, 7, 9), 10, "remainder"),
    "nz_ird": WeightedSum(
        (3, 2, 7, 6, 5, 4, 3, 2), 11, "complement", _MOD11, fallback=(7, 4, 3, 2, 5, 2, 7, 6)
    ),
    "nz_nhi": WeightedSum(
        (7, 6, 5, 4, 3, 2),
        11,
        "complement",
        ((11, None), (10, 0)),
        values="_ABCDEFGHJKLMNPQRSTUVWXYZ",
    ),
}

ALGORITHMS: MappingProxyType[str, Algorithm] = MappingProxyType(_catalog)
