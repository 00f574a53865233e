"""Engine facade over registry, generator and validator.

:class:`Engine` wires one immutable :class:`~mockbanker.formats.Registry` to a
generator and a validator configured from a
:class:`~mockbanker.config.ConfigModel`.  The module level functions delegate
to a process-wide engine built on first use from the packaged defaults.
"""

from __future__ import annotations

from dataclasses import replace
from functools import lru_cache

from .config import ConfigModel, load_config
from .formats.model import Category, FormatSpec
from .formats.registry import Registry, default_registry
from .generate.generator import Constraints, GeneratedRecord, Generator, RecordBatch
from .validate.validator import ValidationResult, Validator

__all__ = [
    "Engine",
    "default_engine",
    "generate",
    "generate_batch",
    "validate",
    "list_supported",
    "lookup",
]


class Engine:
    """Generation and validation over one registry.

    Parameters
    ----------
    registry:
        Format catalog; the packaged registry when omitted.
    config:
        Settings; :func:`~mockbanker.config.load_config` defaults when omitted.
    """

    def __init__(self, registry: Registry | None = None, config: ConfigModel | None = None) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.config = config if config is not None else load_config()
        self.validator = Validator(
            self.registry, auto_detect=self.config.validation.auto_detect
        )
        self.generator = Generator(
            self.registry,
            birth_years=self.config.generation.birth_years.as_tuple(),
            max_attempts=self.config.generation.max_attempts,
            validator=Validator(self.registry),
        )

    def _constraints(self, constraints: Constraints | None) -> Constraints:
        constraints = constraints or Constraints()
        if constraints.seed is None and self.config.generation.seed is not None:
            return replace(constraints, seed=self.config.generation.seed)
        return constraints

    def generate(
        self,
        category: Category | str,
        code: str,
        constraints: Constraints | None = None,
    ) -> GeneratedRecord:
        """Generate one record; see :meth:`Generator.generate`."""

        return self.generator.generate(category, code, self._constraints(constraints))

    def generate_batch(
        self,
        category: Category | str,
        code: str,
        count: int | None = None,
        constraints: Constraints | None = None,
    ) -> RecordBatch:
        """Lazy batch of ``count`` records (configured default when ``None``)."""

        if count is None:
            count = self.config.generation.default_count
        return self.generator.generate_batch(
            category, code, count, self._constraints(constraints)
        )

    def validate(
        self,
        value: str,
        category: Category | str | None = None,
        code: str | None = None,
    ) -> ValidationResult:
        return self.validator.validate(value, category, code)

    def list_supported(self, category: Category | str) -> tuple[str, ...]:
        return self.registry.list(category)

    def lookup(self, category: Category | str, code: str) -> FormatSpec:
        return self.registry.lookup(category, code)


@lru_cache(maxsize=1)
def default_engine() -> Engine:
    """Process-wide engine over the packaged registry and default settings."""

    return Engine()


def generate(
    category: Category | str, code: str, constraints: Constraints | None = None
) -> GeneratedRecord:
    return default_engine().generate(category, code, constraints)


def generate_batch(
    category: Category | str,
    code: str,
    count: int | None = None,
    constraints: Constraints | None = None,
) -> RecordBatch:
    return default_engine().generate_batch(category, code, count, constraints)


def validate(
    value: str, category: Category | str | None = None, code: str | None = None
) -> ValidationResult:
    return default_engine().validate(value, category, code)


def list_supported(category: Category | str) -> tuple[str, ...]:
    return default_engine().list_supported(category)


def lookup(category: Category | str, code: str) -> FormatSpec:
    return default_engine().lookup(category, code)
