"""Payment card numbers keyed by scheme.

Every scheme closes its PAN with a Luhn check digit; the issuer prefix ranges
follow the schemes' published IIN tables.
"""

from __future__ import annotations

from ..model import Category, Chars, Check, DisplayRules, Field, FormatSpec, Literal, Number, OneOf

__all__ = ["FORMATS"]

_FOUR = DisplayRules(every=4)


def _card(
    code: str, name: str, prefix: Field, body: int, display: DisplayRules = _FOUR
) -> FormatSpec:
    length = sum(prefix.widths()[:1]) + body + 1
    return FormatSpec(
        category=Category.CREDIT_CARD,
        code=code,
        name=name,
        description=f"{length} digit {name} card number",
        layout=(prefix, Chars("digit", body, name="account"), Check("luhn")),
        display=display,
        length=length,
    )


FORMATS = (
    _card("amex", "American Express", OneOf(("34", "37"), name="iin"), 12, DisplayRules(groups=(4, 6, 5))),
    _card(
        "diners",
        "Diners Club International",
        Number(3, ranges=((300, 305), (360, 369), (380, 389)), name="iin"),
        10,
        DisplayRules(groups=(4, 6, 4)),
    ),
    _card(
        "discover",
        "Discover",
        Number(4, ranges=((6011, 6011), (6440, 6499), (6500, 6599)), name="iin"),
        11,
    ),
    _card("jcb", "JCB", Number(4, ranges=((3528, 3589),), name="iin"), 11),
    _card(
        "maestro",
        "Maestro",
        OneOf(("5018", "5020", "5038", "5893", "6304", "6759", "6761", "6762", "6763"), name="iin"),
        11,
    ),
    _card(
        "mastercard",
        "Mastercard",
        Number(4, ranges=((2221, 2720), (5100, 5599)), name="iin"),
        11,
    ),
    _card("mir", "Mir", Number(4, ranges=((2200, 2204),), name="iin"), 11),
    _card("rupay", "RuPay", OneOf(("60", "65", "81", "82"), name="iin"), 13),
    _card("unionpay", "UnionPay", Literal("62", name="iin"), 13),
    _card("visa", "Visa", Literal("4", name="iin"), 14),
)
