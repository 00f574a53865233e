"""Format definitions and the registry that serves them."""

from __future__ import annotations

from .model import (
    PLAIN,
    Band,
    BirthDate,
    Category,
    Century,
    CenturyCode,
    Chars,
    Check,
    DayCount,
    DisplayRules,
    DistinctDigits,
    Field,
    FormatSpec,
    Gender,
    Literal,
    Number,
    OneOf,
    Sex,
)
from .registry import Registry, build_registry, default_registry, validate_spec

__all__ = [
    "PLAIN",
    "Band",
    "BirthDate",
    "Category",
    "Century",
    "CenturyCode",
    "Chars",
    "Check",
    "DayCount",
    "DisplayRules",
    "DistinctDigits",
    "Field",
    "FormatSpec",
    "Gender",
    "Literal",
    "Number",
    "OneOf",
    "Sex",
    "Registry",
    "build_registry",
    "default_registry",
    "validate_spec",
]
