"""Validation of candidate identifier strings.

A candidate is checked against one :class:`~mockbanker.formats.model.FormatSpec`
in stages, and the first failing stage determines the reported reason:

``LENGTH_MISMATCH``        normalized length outside the layout's bounds
``INVALID_CHARACTER_SET``  a field holds characters outside its class, or a
                           literal does not match
``INVALID_FIELD_VALUE``    a value outside its range, an impossible birth
                           date, an unknown century code or contradicting
                           gender markers
``CHECKSUM_MISMATCH``      a check slot does not verify

Birth dates written with abbreviated years are resolved by trying every year
the layout allows, earliest first; the first year for which every check
verifies wins.

Auto-detection walks the registry in its stable order (category declaration
order, then code) and returns the first format that validates.  Failures are
returned as :class:`ValidationResult` values and never raised.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Any

from ..formats.dates import candidate_years, decode_birth_date, decode_day_count
from ..formats.model import (
    BirthDate,
    Category,
    CenturyCode,
    Check,
    DayCount,
    DistinctDigits,
    FormatSpec,
    Gender,
    Number,
    Sex,
)
from ..formats.registry import Registry
from ..utils.errors import UnknownFormatError
from ..utils.logging import get_logger
from .normalizer import normalize

__all__ = ["InvalidReason", "ValidationResult", "Validator"]

log = get_logger(__name__)


class InvalidReason(str, Enum):
    UNKNOWN_FORMAT = "unknown_format"
    UNSATISFIABLE_CONSTRAINT = "unsatisfiable_constraint"
    LENGTH_MISMATCH = "length_mismatch"
    INVALID_CHARACTER_SET = "invalid_character_set"
    INVALID_FIELD_VALUE = "invalid_field_value"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    NO_MATCH = "no_match"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one candidate.

    ``details`` holds the parsed content of a valid value: ``fields`` (named
    field values), ``birth_date`` and ``gender`` where the format encodes them.
    """

    valid: bool
    category: Category | None = None
    code: str | None = None
    reason: InvalidReason | None = None
    message: str = ""
    details: Mapping[str, Any] = field(default_factory=dict)

    @property
    def country_or_scheme(self) -> str | None:
        return self.code

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def ok(cls, spec: FormatSpec, details: Mapping[str, Any]) -> ValidationResult:
        return cls(True, spec.category, spec.code, details=MappingProxyType(dict(details)))

    @classmethod
    def invalid(
        cls, reason: InvalidReason, message: str, spec: FormatSpec | None = None
    ) -> ValidationResult:
        if spec is None:
            return cls(False, reason=reason, message=message)
        return cls(False, spec.category, spec.code, reason, message)


@dataclass(frozen=True, slots=True)
class _Reading:
    """One consistent interpretation of a value's date and gender fields."""

    born: date | None
    gender: Gender | None


class _FieldError(ValueError):
    pass


def _number_gender(token: Number, value: int) -> Gender | None:
    if token.male is not None and token.female is not None:
        if token.male[0] <= value <= token.male[1]:
            return Gender.MALE
        if token.female[0] <= value <= token.female[1]:
            return Gender.FEMALE
        raise _FieldError(f"{value} is in neither gender range")
    if token.parity:
        odd = value % 2 == 1
        return Gender.MALE if odd == (token.parity == "odd_male") else Gender.FEMALE
    return None


def _year_sets(spec: FormatSpec, values: Sequence[str]) -> list[set[int]]:
    sets: list[set[int]] = []
    for token, value in zip(spec.layout, values):
        if isinstance(token, BirthDate):
            sets.append(
                {
                    y
                    for y in candidate_years(token, value)
                    if decode_birth_date(token, value, y) is not None
                }
            )
        elif isinstance(token, DayCount):
            born = decode_day_count(token, value)
            sets.append({born.year} if born is not None else set())
        elif isinstance(token, CenturyCode):
            sets.append(
                {
                    y
                    for entry in token.codes
                    if value in entry.chars
                    for y in range(entry.first_year, entry.last_year + 1)
                }
            )
        elif isinstance(token, Number) and token.bands:
            number = int(value)
            sets.append(
                {
                    y
                    for band in token.bands
                    if band.low <= number <= band.high
                    for y in range(band.first_year, band.last_year + 1)
                }
            )
    return sets


class Validator:
    """Validate candidates against the formats of a :class:`Registry`.

    ``auto_detect=False`` makes validation without an explicit code report
    ``NO_MATCH`` instead of scanning the registry.
    """

    def __init__(self, registry: Registry, *, auto_detect: bool = True) -> None:
        self.registry = registry
        self.auto_detect = auto_detect

    # -- public API --------------------------------------------------------

    def validate(
        self,
        value: str,
        category: Category | str | None = None,
        code: str | None = None,
    ) -> ValidationResult:
        """Validate ``value`` against one format, or detect the format.

        With both ``category`` and ``code`` the specific reason of a failure is
        reported.  Otherwise every candidate format is tried and ``NO_MATCH``
        is reported when none validates.
        """

        if category is not None and code is not None:
            try:
                spec = self.registry.lookup(category, code)
            except UnknownFormatError as exc:
                return ValidationResult.invalid(InvalidReason.UNKNOWN_FORMAT, str(exc))
            return self.validate_spec(value, spec)

        if code is not None:
            candidates: Sequence[FormatSpec] = self.registry.with_code(code)
            if not candidates:
                return ValidationResult.invalid(
                    InvalidReason.UNKNOWN_FORMAT, f"Unknown format code: {code}"
                )
        elif category is not None:
            try:
                candidates = self.registry.specs(category)
            except UnknownFormatError as exc:
                return ValidationResult.invalid(InvalidReason.UNKNOWN_FORMAT, str(exc))
        else:
            candidates = self.registry.all()

        if not self.auto_detect and len(candidates) != 1:
            return ValidationResult.invalid(
                InvalidReason.NO_MATCH, "Format auto-detection is disabled"
            )
        return self.detect(value, candidates)

    def detect(self, value: str, specs: Iterable[FormatSpec]) -> ValidationResult:
        """First spec of ``specs`` that ``value`` validates against."""

        tried = 0
        for spec in specs:
            tried += 1
            result = self.validate_spec(value, spec)
            if result.valid:
                return result
        log.debug("no format among %d candidates matched", tried)
        return ValidationResult.invalid(
            InvalidReason.NO_MATCH, f"No registered format matches ({tried} tried)"
        )

    def validate_spec(self, value: str, spec: FormatSpec) -> ValidationResult:
        """Validate ``value`` against ``spec``."""

        raw = normalize(value, spec)
        if not spec.min_length <= len(raw) <= spec.max_length:
            expected = (
                str(spec.min_length)
                if spec.min_length == spec.max_length
                else f"{spec.min_length}-{spec.max_length}"
            )
            return ValidationResult.invalid(
                InvalidReason.LENGTH_MISMATCH,
                f"Expected {expected} characters, got {len(raw)}",
                spec,
            )

        match = spec.pattern.fullmatch(raw)
        if match is None:
            return ValidationResult.invalid(
                InvalidReason.INVALID_CHARACTER_SET,
                f"Value does not match the structure of {spec.name}",
                spec,
            )
        values = [match.group(f"f{i}") for i in range(len(spec.layout))]

        try:
            readings = self._readings(spec, values)
        except _FieldError as exc:
            return ValidationResult.invalid(InvalidReason.INVALID_FIELD_VALUE, str(exc), spec)

        for reading in readings:
            if self._checks_pass(spec, values, reading):
                return ValidationResult.ok(spec, self._details(spec, values, reading))
        return ValidationResult.invalid(
            InvalidReason.CHECKSUM_MISMATCH, "Check characters do not verify", spec
        )

    # -- internals ---------------------------------------------------------

    @staticmethod
    def _readings(spec: FormatSpec, values: Sequence[str]) -> list[_Reading]:
        """Consistent date/gender interpretations, earliest birth year first.

        Raises ``_FieldError`` when none exists or a field is out of range.
        """

        fixed: set[Gender] = set()
        for index, (token, value) in enumerate(zip(spec.layout, values)):
            if isinstance(token, Number):
                number = int(value)
                if not any(low <= number <= high for low, high in token.bounds()):
                    raise _FieldError(f"Field {token.name or index} value {value} out of range")
                gender = _number_gender(token, number)
                if gender is not None:
                    fixed.add(gender)
            elif isinstance(token, Sex):
                fixed.add(Gender.MALE if value == token.male else Gender.FEMALE)
            elif isinstance(token, DistinctDigits):
                problem = token.problem(value)
                if problem is not None:
                    raise _FieldError(f"Field {token.name or index}: {problem}")
        if len(fixed) > 1:
            raise _FieldError("Gender markers contradict each other")

        year_sets = _year_sets(spec, values)
        if not year_sets:
            return [_Reading(None, next(iter(fixed), None))]
        years = sorted(set.intersection(*year_sets))
        if not years:
            raise _FieldError("No birth date is consistent with the value")

        readings: list[_Reading] = []
        for year in years:
            reading = Validator._reading_for(spec, values, year, fixed)
            if reading is not None and reading not in readings:
                readings.append(reading)
        if not readings:
            raise _FieldError("Gender markers contradict each other")
        return readings

    @staticmethod
    def _reading_for(
        spec: FormatSpec, values: Sequence[str], year: int, fixed: set[Gender]
    ) -> _Reading | None:
        born: date | None = None
        genders = set(fixed)
        for token, value in zip(spec.layout, values):
            if isinstance(token, BirthDate):
                decoded = decode_birth_date(token, value, year)
                if decoded is None:
                    return None
                born, female = decoded
                if token.encodes_gender():
                    genders.add(Gender.FEMALE if female else Gender.MALE)
            elif isinstance(token, DayCount):
                born = decode_day_count(token, value)
            elif isinstance(token, CenturyCode):
                marked = {
                    entry.gender
                    for entry in token.codes
                    if value in entry.chars and entry.first_year <= year <= entry.last_year
                }
                if len(marked) == 1 and None not in marked:
                    genders.update(marked)  # type: ignore[arg-type]
        if len(genders) > 1:
            return None
        return _Reading(born, next(iter(genders), None))

    def _checks_pass(self, spec: FormatSpec, values: Sequence[str], reading: _Reading) -> bool:
        context = {"birth_date": reading.born} if reading.born is not None else None
        for index in spec.check_order():
            check = spec.layout[index]
            assert isinstance(check, Check)
            payload = "".join(values[j] for j in spec.covered(index))
            if not self.registry.algorithm(check.algorithm).verify(payload, values[index], context):
                return False
        return True

    @staticmethod
    def _details(spec: FormatSpec, values: Sequence[str], reading: _Reading) -> dict[str, Any]:
        has_date = any(isinstance(t, (BirthDate, DayCount)) for t in spec.layout)
        return {
            "fields": {t.name: v for t, v in zip(spec.layout, values) if t.name is not None},
            "birth_date": reading.born if has_date else None,
            "gender": reading.gender,
        }
