"""Generation honours constraints and produces values that validate."""

from datetime import date

import pytest

from mockbanker.formats import BirthDate, Category, DayCount, Gender, default_registry
from mockbanker.generate import Constraints, Generator
from mockbanker.utils.errors import UnknownFormatError, UnsatisfiableConstraintError
from mockbanker.validate import InvalidReason, Validator, normalize


@pytest.fixture(scope="module")
def generator() -> Generator:
    return Generator(default_registry())


@pytest.fixture(scope="module")
def validator() -> Validator:
    return Validator(default_registry())


@pytest.mark.parametrize("seed", ["alpha", 7, "batch-3"])
def test_every_format_roundtrips(generator: Generator, validator: Validator, seed: object) -> None:
    constraints = Constraints(seed=seed)  # type: ignore[arg-type]
    for spec in default_registry():
        record = generator.generate_spec(spec, constraints)
        where = f"{spec.category.value}/{spec.code}"
        assert spec.min_length <= len(record.raw) <= spec.max_length, where
        assert validator.validate_spec(record.raw, spec).valid, (where, record.raw)
        formatted = validator.validate(record.formatted, spec.category, spec.code)
        assert formatted.valid, (where, record.formatted, formatted.message)
        assert normalize(record.formatted, spec) == record.raw, where


@pytest.mark.parametrize("seed", ["written-1", "written-2", 3])
def test_birth_date_is_what_the_value_encodes(
    generator: Generator, validator: Validator, seed: object
) -> None:
    for spec in default_registry():
        if not any(isinstance(t, (BirthDate, DayCount)) for t in spec.layout):
            continue
        record = generator.generate_spec(spec, Constraints(seed=seed))  # type: ignore[arg-type]
        read_back = validator.validate_spec(record.raw, spec).details["birth_date"]
        assert record.birth_date == read_back, (spec.category.value, spec.code, record.raw)


def test_month_precision_birth_date(generator: Generator) -> None:
    for record in generator.generate_batch("personal_id", "FR", 20, Constraints(seed="nir")):
        assert record.birth_date is not None
        assert record.birth_date.day == 1


def test_german_iban_shape(generator: Generator) -> None:
    record = generator.generate("iban", "DE", Constraints(seed="de"))
    assert len(record.raw) == 22
    assert record.raw.startswith("DE")
    assert record.raw[2:].isdigit()
    assert record.formatted == " ".join(record.raw[i : i + 4] for i in range(0, 22, 4))
    assert record.fields["country"] == "DE"


def test_visa_luhn(generator: Generator) -> None:
    for index in range(20):
        raw = generator.generate("credit_card", "visa", Constraints(seed="v"), index=index).raw
        assert len(raw) == 16 and raw.startswith("4")
        total = 0
        for pos, char in enumerate(reversed(raw)):
            digit = int(char) * (2 if pos % 2 else 1)
            total += digit - 9 if digit > 9 else digit
        assert total % 10 == 0


def test_iban_mutations_detected(generator: Generator, validator: Validator) -> None:
    spec = default_registry().lookup("iban", "DE")
    raw = generator.generate_spec(spec, Constraints(seed="mutate")).raw
    for pos in range(2, len(raw)):
        mutated = raw[:pos] + str((int(raw[pos]) + 1) % 10) + raw[pos + 1 :]
        result = validator.validate_spec(mutated, spec)
        assert not result.valid
        assert result.reason is InvalidReason.CHECKSUM_MISMATCH


def test_card_mutations_detected(generator: Generator, validator: Validator) -> None:
    spec = default_registry().lookup("credit_card", "visa")
    raw = generator.generate_spec(spec, Constraints(seed="mutate")).raw
    for pos in range(1, len(raw)):
        mutated = raw[:pos] + str((int(raw[pos]) + 1) % 10) + raw[pos + 1 :]
        assert validator.validate_spec(mutated, spec).reason is InvalidReason.CHECKSUM_MISMATCH


@pytest.mark.parametrize("code", ["PL", "EE", "SE", "BE", "CZ", "NO", "FI", "BG"])
def test_birth_year_window(generator: Generator, validator: Validator, code: str) -> None:
    constraints = Constraints(birth_years=(1980, 1990), seed=f"years-{code}")
    for index in range(10):
        record = generator.generate("personal_id", code, constraints, index=index)
        assert record.birth_date is not None
        assert 1980 <= record.birth_date.year <= 1990
        result = validator.validate(record.raw, "personal_id", code)
        assert result.valid
        assert result.details["birth_date"] == record.birth_date


@pytest.mark.parametrize("code", ["PL", "EE", "CZ", "SE", "ZA", "BG", "RO"])
@pytest.mark.parametrize("gender", [Gender.MALE, Gender.FEMALE])
def test_gender_honoured(
    generator: Generator, validator: Validator, code: str, gender: Gender
) -> None:
    constraints = Constraints(gender=gender, seed="gender")
    for index in range(5):
        record = generator.generate("personal_id", code, constraints, index=index)
        assert record.gender is gender
        assert validator.validate(record.raw, "personal_id", code).details["gender"] is gender


def test_gender_ignored_without_marker(generator: Generator) -> None:
    record = generator.generate("iban", "DE", Constraints(gender="female", seed=1))
    assert record.gender is None
    assert record.birth_date is None


def test_same_seed_same_record(generator: Generator) -> None:
    a = generator.generate("personal_id", "PL", Constraints(seed="fixed"))
    b = generator.generate("personal_id", "PL", Constraints(seed="fixed"))
    c = generator.generate("personal_id", "PL", Constraints(seed="other"))
    assert a == b
    assert a.raw != c.raw
    assert a.seed == "fixed"


def test_integer_and_string_seed_agree(generator: Generator) -> None:
    a = generator.generate("vat", "DE", Constraints(seed=42))
    b = generator.generate("vat", "DE", Constraints(seed="42"))
    assert a.raw == b.raw


def test_batch_is_restartable(generator: Generator) -> None:
    batch = generator.generate_batch("iban", "GB", 6)
    first = [r.raw for r in batch]
    assert [r.raw for r in batch] == first
    assert len(batch) == 6
    assert batch[2].raw == first[2]
    assert batch[-1].raw == first[-1]
    assert [r.raw for r in batch[1:3]] == first[1:3]
    assert len(set(first)) > 1
    with pytest.raises(IndexError):
        batch[6]


def test_batch_records_do_not_depend_on_count(generator: Generator) -> None:
    small = generator.generate_batch("tax_id", "DE", 3, Constraints(seed="s"))
    large = generator.generate_batch("tax_id", "DE", 10, Constraints(seed="s"))
    assert [r.raw for r in small] == [r.raw for r in large[:3]]


def test_unsatisfiable_years(generator: Generator) -> None:
    with pytest.raises(UnsatisfiableConstraintError):
        generator.generate("personal_id", "PL", Constraints(birth_years=(1500, 1600)))


def test_years_ignored_without_birth_date(generator: Generator) -> None:
    record = generator.generate("iban", "DE", Constraints(birth_years=(1500, 1600), seed=1))
    assert record.birth_date is None


@pytest.mark.parametrize(
    "kwargs",
    [{"birth_years": (1990, 1980)}, {"gender": "unknown"}],
)
def test_invalid_constraints(kwargs: dict[str, object]) -> None:
    with pytest.raises(UnsatisfiableConstraintError):
        Constraints(**kwargs)  # type: ignore[arg-type]


def test_unknown_format(generator: Generator) -> None:
    with pytest.raises(UnknownFormatError):
        generator.generate("iban", "XX")
    with pytest.raises(UnknownFormatError):
        generator.generate("no_such_category", "DE")


def test_generate_all_filters(generator: Generator) -> None:
    records = list(generator.generate_all(Constraints(country="DE", seed="all")))
    categories = {r.category for r in records}
    assert Category.IBAN in categories and Category.VAT in categories
    assert all(r.code.upper() == "DE" for r in records)
    only_vat = list(generator.generate_all(Constraints(category="vat", seed="all")))
    assert {r.category for r in only_vat} == {Category.VAT}


def test_record_as_dict(generator: Generator) -> None:
    record = generator.generate(
        "personal_id", "EE", Constraints(seed="dict", birth_years=(1976, 1976))
    )
    data = record.as_dict()
    assert data["category"] == "personal_id"
    assert data["code"] == "EE"
    assert data["birth_date"].startswith("1976-")
    assert data["gender"] in ("male", "female")
    assert date.fromisoformat(data["birth_date"]) == record.birth_date


def test_max_attempts_validated() -> None:
    with pytest.raises(ValueError):
        Generator(default_registry(), max_attempts=0)
