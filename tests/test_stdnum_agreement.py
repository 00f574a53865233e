"""Generated values are accepted by python-stdnum's independent validators."""

from collections.abc import Callable

import pytest
from stdnum import iban, lei, luhn
from stdnum.br import cpf
from stdnum.de import idnr
from stdnum.de import vat as de_vat
from stdnum.dk import cpr
from stdnum.ee import ik
from stdnum.es import dni
from stdnum.fr import siren
from stdnum.nl import bsn
from stdnum.pl import pesel
from stdnum.ve import rif

from mockbanker.formats import default_registry
from mockbanker.generate import Constraints, Generator
from mockbanker.validate import Validator

ORACLES: list[tuple[str, str, Callable[[str], bool]]] = [
    ("iban", "DE", iban.is_valid),
    ("iban", "GB", iban.is_valid),
    ("iban", "AT", iban.is_valid),
    ("iban", "ES", iban.is_valid),
    ("credit_card", "visa", luhn.is_valid),
    ("credit_card", "mastercard", luhn.is_valid),
    ("credit_card", "amex", luhn.is_valid),
    ("personal_id", "PL", pesel.is_valid),
    ("personal_id", "EE", ik.is_valid),
    ("personal_id", "NL", bsn.is_valid),
    ("personal_id", "ES", dni.is_valid),
    ("personal_id", "BR", cpf.is_valid),
    ("personal_id", "DK", cpr.is_valid),
    ("tax_id", "DE", idnr.is_valid),
    ("tax_id", "VE", rif.is_valid),
    ("vat", "DE", de_vat.is_valid),
    ("company_id", "FR", siren.is_valid),
    ("lei", "LEI", lei.is_valid),
]


@pytest.fixture(scope="module")
def generator() -> Generator:
    return Generator(default_registry())


@pytest.mark.parametrize("category,code,oracle", ORACLES)
def test_stdnum_accepts_generated(
    generator: Generator, category: str, code: str, oracle: Callable[[str], bool]
) -> None:
    batch = generator.generate_batch(category, code, 25, Constraints(seed=f"oracle-{code}"))
    for record in batch:
        assert oracle(record.raw), record.raw


def test_cpr_century_agrees_with_stdnum(generator: Generator) -> None:
    batch = generator.generate_batch("personal_id", "DK", 40, Constraints(seed="cpr-century"))
    for record in batch:
        assert cpr.get_birth_date(record.raw) == record.birth_date, record.raw


def test_cpr_reads_century_digit_like_stdnum() -> None:
    validator = Validator(default_registry())
    for value in ("2401426545", "2008687134", "0101370004", "0101374004"):
        result = validator.validate(value, "personal_id", "DK")
        assert result.valid, value
        assert result.details["birth_date"] == cpr.get_birth_date(value)
