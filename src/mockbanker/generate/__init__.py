"""Constrained random generation of identifiers."""

from .generator import Constraints, GeneratedRecord, Generator, RecordBatch
from .seed import rng_for

__all__ = ["Constraints", "GeneratedRecord", "Generator", "RecordBatch", "rng_for"]
