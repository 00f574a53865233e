"""Registry construction, lookup and ordering."""

import pytest

from mockbanker.formats import (
    Category,
    Chars,
    Check,
    DisplayRules,
    DistinctDigits,
    FormatSpec,
    Literal,
    Registry,
    default_registry,
)
from mockbanker.utils.errors import (
    DuplicateFormatError,
    LayoutError,
    UnknownAlgorithmError,
    UnknownFormatError,
)


def _spec(code: str = "XX", **kwargs: object) -> FormatSpec:
    layout = kwargs.pop("layout", (Chars("digit", 5, name="number"), Check("luhn")))
    return FormatSpec(
        category=Category.TAX_ID,
        code=code,
        name=f"Test {code}",
        layout=layout,  # type: ignore[arg-type]
        **kwargs,  # type: ignore[arg-type]
    )


def test_minimal_registry() -> None:
    registry = Registry([_spec("BB"), _spec("AA")])
    assert len(registry) == 2
    assert registry.list(Category.TAX_ID) == ("AA", "BB")
    assert registry.list(Category.IBAN) == ()
    assert (Category.TAX_ID, "aa") in registry
    assert ("tax_id", "CC") not in registry


def test_duplicate_key_rejected() -> None:
    with pytest.raises(DuplicateFormatError):
        Registry([_spec("AA"), _spec("aa")])


def test_unknown_algorithm_rejected() -> None:
    spec = _spec(layout=(Chars("digit", 5), Check("no_such_scheme")))
    with pytest.raises(UnknownAlgorithmError):
        Registry([spec])


def test_declared_length_must_match_layout() -> None:
    with pytest.raises(LayoutError):
        Registry([_spec(length=7)])
    assert len(Registry([_spec(length=6)])) == 1


def test_check_width_must_match_algorithm() -> None:
    spec = _spec(layout=(Literal("DE"), Check("iban", 1), Chars("digit", 8)))
    with pytest.raises(LayoutError):
        Registry([spec])


def test_separator_may_not_occur_in_values() -> None:
    spec = _spec(display=DisplayRules(every=2, separator="1"))
    with pytest.raises(LayoutError):
        Registry([spec])


def test_duplicate_field_names_rejected() -> None:
    spec = _spec(layout=(Chars("digit", 2, name="a"), Chars("digit", 2, name="a"), Check("luhn")))
    with pytest.raises(LayoutError):
        Registry([spec])


def test_distinct_digits_must_fit_ten_digits() -> None:
    spec = _spec(layout=(DistinctDigits(12, repeats=(2,), name="number"), Check("mod11_10")))
    with pytest.raises(LayoutError, match="distinct digits"):
        Registry([spec])
    Registry([_spec(layout=(DistinctDigits(11, repeats=(2,), name="number"), Check("mod11_10")))])


def test_circular_checks_rejected() -> None:
    spec = _spec(
        layout=(
            Chars("digit", 4, name="body"),
            Check("luhn", covers=("body", "b"), name="a"),
            Check("luhn", covers=("body", "a"), name="b"),
        )
    )
    with pytest.raises(LayoutError):
        Registry([spec])


def test_lookup_is_case_insensitive() -> None:
    registry = default_registry()
    assert registry.lookup("iban", "de").code == "DE"
    assert registry.lookup(Category.CREDIT_CARD, "VISA").code == "visa"
    assert registry.lookup("card", "visa") is registry.lookup("credit_card", "visa")


def test_lookup_unknown() -> None:
    registry = default_registry()
    with pytest.raises(UnknownFormatError):
        registry.lookup("iban", "XX")
    with pytest.raises(UnknownFormatError):
        registry.lookup("no_such_category", "DE")
    assert registry.get("iban", "XX") is None


def test_unknown_category_listing() -> None:
    registry = default_registry()
    with pytest.raises(UnknownFormatError, match="Unknown category: phone") as excinfo:
        registry.list("phone")
    assert excinfo.value.code is None
    with pytest.raises(UnknownFormatError):
        registry.specs("phone")
    with pytest.raises(UnknownFormatError):
        registry.names("phone")


def test_every_category_populated() -> None:
    registry = default_registry()
    for category in Category:
        assert registry.list(category), category


@pytest.mark.parametrize(
    "category,at_least",
    [
        (Category.IBAN, 124),
        (Category.BANK_ACCOUNT, 159),
        (Category.PERSONAL_ID, 97),
        (Category.TAX_ID, 80),
        (Category.VAT, 28),
    ],
)
def test_catalog_coverage(category: Category, at_least: int) -> None:
    assert len(default_registry().list(category)) >= at_least


def test_licence_and_passport_coverage() -> None:
    registry = default_registry()
    assert len(registry.list("drivers_license")) + len(registry.list("passport")) >= 79


def test_iteration_order() -> None:
    registry = default_registry()
    order = {c: i for i, c in enumerate(Category)}
    keys = [(order[s.category], s.code.upper()) for s in registry]
    assert keys == sorted(keys)
    assert registry.all()[0].category is Category.IBAN
    assert registry.all()[-1].category is Category.LEI


def test_card_schemes() -> None:
    assert default_registry().list("credit_card") == (
        "amex",
        "diners",
        "discover",
        "jcb",
        "maestro",
        "mastercard",
        "mir",
        "rupay",
        "unionpay",
        "visa",
    )


def test_names_and_with_code() -> None:
    registry = default_registry()
    names = dict((code, name) for code, name, _ in registry.names("iban"))
    assert names["DE"] == "Germany IBAN"
    categories = {s.category for s in registry.with_code("de")}
    assert {Category.IBAN, Category.PERSONAL_ID, Category.VAT} <= categories


def test_spec_properties() -> None:
    registry = default_registry()
    iban = registry.lookup("iban", "DE")
    assert iban.total_length == 22
    assert iban.checksum_algorithm == "iban"
    assert iban.country_or_scheme == "DE"
    bic = registry.lookup("swift_bic", "DE")
    assert (bic.min_length, bic.max_length) == (8, 11)
    assert bic.total_length is None
    assert bic.checksum_algorithm == "none"


def test_nested_checks_resolved_inner_first() -> None:
    spec = default_registry().lookup("iban", "ES")
    order = spec.check_order()
    outer = spec.index_of("check_digits")
    assert order[-1] == outer
    assert set(spec.covered(outer)) >= set(order[:-1])


@pytest.mark.parametrize(
    "alias,category",
    [
        ("iban", Category.IBAN),
        ("PERSONAL_ID", Category.PERSONAL_ID),
        ("personal-id", Category.PERSONAL_ID),
        ("bic", Category.SWIFT_BIC),
        ("tax", Category.TAX_ID),
    ],
)
def test_category_parse(alias: str, category: Category) -> None:
    assert Category.parse(alias) is category


def test_category_parse_unknown() -> None:
    with pytest.raises(ValueError):
        Category.parse("phone")
