"""Generate and validate checksum-correct fake banking and identity numbers."""

from .api import Engine, default_engine, generate, generate_batch, list_supported, lookup, validate
from .formats.model import Category, FormatSpec, Gender
from .generate.generator import Constraints, GeneratedRecord, RecordBatch
from .utils.errors import (
    MockBankerError,
    RegistryError,
    UnknownFormatError,
    UnsatisfiableConstraintError,
)
from .validate.validator import InvalidReason, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Category",
    "Constraints",
    "Engine",
    "FormatSpec",
    "Gender",
    "GeneratedRecord",
    "InvalidReason",
    "MockBankerError",
    "RecordBatch",
    "RegistryError",
    "UnknownFormatError",
    "UnsatisfiableConstraintError",
    "ValidationResult",
    "default_engine",
    "generate",
    "generate_batch",
    "list_supported",
    "lookup",
    "validate",
]
