"""Validation of candidate identifier strings."""

from .normalizer import normalize
from .validator import InvalidReason, ValidationResult, Validator

__all__ = ["InvalidReason", "ValidationResult", "Validator", "normalize"]
