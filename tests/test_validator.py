"""Validation outcomes for known good and bad identifiers."""

from datetime import date

import pytest

from mockbanker.formats import Category, Gender, default_registry
from mockbanker.validate import InvalidReason, Validator, normalize


@pytest.fixture(scope="module")
def validator() -> Validator:
    return Validator(default_registry())


@pytest.mark.parametrize(
    "value,category,code",
    [
        ("DE89370400440532013000", "iban", "DE"),
        ("de89 3704 0044 0532 0130 00", "iban", "DE"),
        ("GB82WEST12345698765432", "iban", "GB"),
        ("GB82 WEST 1234 5698 7654 32", "iban", "GB"),
        ("BE68539007547034", "iban", "BE"),
        ("4111111111111111", "credit_card", "visa"),
        ("4111 1111 1111 1111", "credit_card", "visa"),
        ("44051401359", "personal_id", "PL"),
        ("37605030299", "personal_id", "EE"),
        ("111222333", "personal_id", "NL"),
        ("12345678Z", "personal_id", "ES"),
        ("12345678z", "personal_id", "ES"),
        ("36574261809", "tax_id", "DE"),
        ("DE136695976", "vat", "DE"),
        ("DEUTDEFF", "swift_bic", "DE"),
        ("DEUTDEFF500", "swift_bic", "DE"),
    ],
)
def test_known_valid(validator: Validator, value: str, category: str, code: str) -> None:
    result = validator.validate(value, category, code)
    assert result.valid, result.message
    assert result
    assert result.category is Category.parse(category)
    assert result.code == default_registry().lookup(category, code).code
    assert result.reason is None


@pytest.mark.parametrize(
    "value,category,code,reason",
    [
        ("DE89370400440532013001", "iban", "DE", InvalidReason.CHECKSUM_MISMATCH),
        ("DE88370400440532013000", "iban", "DE", InvalidReason.CHECKSUM_MISMATCH),
        ("DE8937040044053201300", "iban", "DE", InvalidReason.LENGTH_MISMATCH),
        ("DE893704004405320130000", "iban", "DE", InvalidReason.LENGTH_MISMATCH),
        ("DE89370400440532O13000", "iban", "DE", InvalidReason.INVALID_CHARACTER_SET),
        ("FR89370400440532013000", "iban", "DE", InvalidReason.INVALID_CHARACTER_SET),
        ("4111111111111112", "credit_card", "visa", InvalidReason.CHECKSUM_MISMATCH),
        ("5111111111111111", "credit_card", "visa", InvalidReason.INVALID_CHARACTER_SET),
        ("44051401358", "personal_id", "PL", InvalidReason.CHECKSUM_MISMATCH),
        ("44133101359", "personal_id", "PL", InvalidReason.INVALID_FIELD_VALUE),
        ("111222334", "personal_id", "NL", InvalidReason.CHECKSUM_MISMATCH),
        ("36574261808", "tax_id", "DE", InvalidReason.CHECKSUM_MISMATCH),
        ("12345678901", "tax_id", "DE", InvalidReason.INVALID_FIELD_VALUE),
        ("06574261809", "tax_id", "DE", InvalidReason.INVALID_FIELD_VALUE),
        ("11123456789", "tax_id", "DE", InvalidReason.INVALID_FIELD_VALUE),
        ("12345678A", "personal_id", "ES", InvalidReason.CHECKSUM_MISMATCH),
        ("DEUTDEF0", "swift_bic", "DE", InvalidReason.INVALID_CHARACTER_SET),
        ("DEUTDEFF50", "swift_bic", "DE", InvalidReason.INVALID_CHARACTER_SET),
    ],
)
def test_known_invalid(
    validator: Validator, value: str, category: str, code: str, reason: InvalidReason
) -> None:
    result = validator.validate(value, category, code)
    assert not result.valid
    assert not result
    assert result.reason is reason
    assert result.message


def test_parsed_details(validator: Validator) -> None:
    result = validator.validate("44051401359", "personal_id", "PL")
    assert result.details["birth_date"] == date(1944, 5, 14)
    assert result.details["gender"] is Gender.MALE
    assert result.details["fields"]["serial"] == "013"

    estonian = validator.validate("37605030299", "personal_id", "EE")
    assert estonian.details["birth_date"] == date(1976, 5, 3)
    assert estonian.details["gender"] is Gender.MALE

    iban = validator.validate("DE89370400440532013000", "iban", "DE")
    assert iban.details["fields"]["bank_code"] == "37040044"
    assert iban.details["birth_date"] is None
    assert iban.details["gender"] is None


def test_details_are_read_only(validator: Validator) -> None:
    result = validator.validate("DE89370400440532013000", "iban", "DE")
    with pytest.raises(TypeError):
        result.details["gender"] = Gender.MALE  # type: ignore[index]


def test_auto_detect_iban(validator: Validator) -> None:
    result = validator.validate("DE89 3704 0044 0532 0130 00")
    assert result.valid
    assert (result.category, result.code) == (Category.IBAN, "DE")
    assert result.country_or_scheme == "DE"


def test_detect_within_category(validator: Validator) -> None:
    result = validator.validate("4111111111111111", "credit_card")
    assert (result.category, result.code) == (Category.CREDIT_CARD, "visa")
    bic = validator.validate("DEUTDEFF", "bic")
    assert (bic.category, bic.code) == (Category.SWIFT_BIC, "DE")


def test_detect_by_code(validator: Validator) -> None:
    result = validator.validate("12345678Z", code="ES")
    assert result.valid
    assert result.code == "ES"


def test_no_match(validator: Validator) -> None:
    result = validator.validate("definitely not an identifier!")
    assert not result.valid
    assert result.reason is InvalidReason.NO_MATCH


def test_unknown_format(validator: Validator) -> None:
    assert validator.validate("x", "iban", "XX").reason is InvalidReason.UNKNOWN_FORMAT
    assert validator.validate("x", "phone").reason is InvalidReason.UNKNOWN_FORMAT
    assert validator.validate("x", code="QQQ").reason is InvalidReason.UNKNOWN_FORMAT


def test_auto_detect_disabled() -> None:
    strict = Validator(default_registry(), auto_detect=False)
    assert strict.validate("DE89370400440532013000").reason is InvalidReason.NO_MATCH
    assert strict.validate("DE89370400440532013000", "iban", "DE").valid


@pytest.mark.parametrize(
    "value",
    ["de89 3704 0044 0532 0130 00", " GB82\tWEST 1234 5698 7654 32 ", "ＤＥ８９３７０４"],
)
def test_normalize_idempotent(value: str) -> None:
    spec = default_registry().lookup("iban", "DE")
    once = normalize(value, spec)
    assert normalize(once, spec) == once
    assert once == once.strip().upper()
    assert " " not in once


def test_normalize_folds_full_width() -> None:
    assert normalize("ＤＥ８９") == "DE89"


def test_normalize_strips_template_separators() -> None:
    spec = default_registry().lookup("personal_id", "US")
    assert normalize("123-45-6789", spec) == "123456789"
    assert normalize("123-45-6789") == "123-45-6789"
