"""Known vectors for the generic check digit schemes."""

import random

import pytest

from mockbanker.checksum import ALGORITHMS, NoCheckDigitError, get_algorithm
from mockbanker.formats import Field, FormatSpec, Literal, OneOf, default_registry
from mockbanker.utils.constants import DIGITS


@pytest.mark.parametrize(
    "name,payload,check",
    [
        ("luhn", "411111111111111", "1"),
        ("luhn", "7992739871", "3"),
        ("verhoeff", "236", "3"),
        ("mod11_10", "13669597", "6"),
        ("mod11_2", "079", "X"),
        ("iban", "DE370400440532013000", "89"),
        ("iban", "GBWEST12345698765432", "82"),
        ("pesel", "4405140135", "9"),
        ("ee_personal", "3760503029", "9"),
        ("nl_bsn", "11122233", "3"),
        ("es_dni", "12345678", "Z"),
        ("be_bank", "5390075470", "34"),
        ("ve_rif", "V11470283", "4"),
        ("vn_mst", "010023348", "8"),
        ("gt_nit", "576937", "K"),
        ("py_ruc", "80028061", "0"),
        ("sv_dui", "00016297", "5"),
    ],
)
def test_known_vectors(name: str, payload: str, check: str) -> None:
    algorithm = get_algorithm(name)
    assert algorithm.compute(payload) == check
    assert algorithm.verify(payload, check)


@pytest.mark.parametrize("name", ["luhn", "verhoeff", "mod97_10", "pesel", "nl_bsn"])
def test_single_digit_substitution_detected(name: str) -> None:
    algorithm = ALGORITHMS[name]
    payload = "12345678"
    if name == "pesel":
        payload = "4405140135"
    check = algorithm.compute(payload)
    for pos in range(len(payload)):
        digit = str((int(payload[pos]) + 1) % 10)
        mutated = payload[:pos] + digit + payload[pos + 1 :]
        assert not algorithm.verify(mutated, check), (name, mutated)


def test_unusable_payload_raises() -> None:
    # BSN weights give 10 for this payload; no check digit exists
    bsn = ALGORITHMS["nl_bsn"]
    payload = next(
        f"{n:08d}"
        for n in range(10_000_000, 10_100_000)
        if sum(w * int(c) for w, c in zip(range(9, 1, -1), f"{n:08d}")) % 11 == 10
    )
    with pytest.raises(NoCheckDigitError):
        bsn.compute(payload)
    assert bsn.verify(payload, "0") is False


def test_lei_matches_mod97() -> None:
    assert ALGORITHMS["lei"] is ALGORITHMS["mod97_10"]
    check = ALGORITHMS["lei"].compute("5493001KJTIIGC8Y1R")
    assert len(check) == 2
    assert ALGORITHMS["lei"].verify("5493001KJTIIGC8Y1R", check)


def test_no_check_is_empty() -> None:
    none = ALGORITHMS["none"]
    assert none.width == 0
    assert none.compute("ANY") == ""
    assert none.verify("ANY", "")
    assert not none.verify("ANY", "0")


def test_get_algorithm_unknown() -> None:
    with pytest.raises(KeyError):
        get_algorithm("no_such_scheme")


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        ALGORITHMS["luhn"] = ALGORITHMS["verhoeff"]  # type: ignore[index]


def _first_use() -> dict[str, tuple[FormatSpec, int]]:
    found: dict[str, tuple[FormatSpec, int]] = {}
    for spec in default_registry().all():
        for index in spec.checks:
            found.setdefault(spec.layout[index].algorithm, (spec, index))
    return found


FIRST_USE = _first_use()


def _random_value(token: Field, rng: random.Random) -> str:
    if isinstance(token, Literal):
        return token.value
    if isinstance(token, OneOf):
        return rng.choice(token.values)
    alphabet = token.alphabet()
    return "".join(rng.choice(alphabet) for _ in range(rng.choice(token.widths())))


def _random_payload(name: str, rng: random.Random) -> str:
    if name not in FIRST_USE:
        return "".join(rng.choice(DIGITS) for _ in range(12))
    spec, index = FIRST_USE[name]
    return "".join(_random_value(spec.layout[i], rng) for i in spec.covered(index))


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_verify_accepts_computed_check(name: str) -> None:
    # Payloads are shaped like the first format using the scheme, with random content.
    algorithm = ALGORITHMS[name]
    rng = random.Random(name)
    usable = 0
    for _ in range(50):
        payload = _random_payload(name, rng)
        try:
            check = algorithm.compute(payload)
        except NoCheckDigitError:
            continue
        assert len(check) == algorithm.width
        assert algorithm.verify(payload, check), (payload, check)
        usable += 1
    assert usable, f"{name}: no payload admitted a check value"


def test_every_algorithm_but_none_is_referenced() -> None:
    assert set(ALGORITHMS) - set(FIRST_USE) == {"none"}
