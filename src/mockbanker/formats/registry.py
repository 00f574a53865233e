"""Immutable registry of format definitions.

The registry is built once from the definitions under
:mod:`mockbanker.formats.data`.  Construction validates every definition and
fails fast with a :class:`~mockbanker.utils.errors.RegistryError` subclass;
afterwards the registry is read-only and safe to share between threads.

Iteration order is stable: categories in :class:`Category` declaration order,
then codes alphabetically.  Auto-detection relies on this order to break ties
between formats that share a structure.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from types import MappingProxyType

from ..checksum import ALGORITHMS, Algorithm
from ..utils.errors import (
    DuplicateFormatError,
    LayoutError,
    UnknownAlgorithmError,
    UnknownFormatError,
)
from ..utils.logging import get_logger
from .model import BirthDate, Category, Check, DistinctDigits, FormatSpec, Number, OneOf

__all__ = ["Registry", "validate_spec", "build_registry", "default_registry"]

log = get_logger(__name__)

_CATEGORY_ORDER = {c: i for i, c in enumerate(Category)}


def _where(spec: FormatSpec) -> str:
    return f"{spec.category.value}/{spec.code}"


def validate_spec(spec: FormatSpec, algorithms: Mapping[str, Algorithm] = ALGORITHMS) -> None:
    """Check the internal consistency of ``spec``.

    Raises
    ------
    UnknownAlgorithmError
        A check slot references an algorithm missing from ``algorithms``.
    LayoutError
        Any other inconsistency: duplicate field names, widths that disagree
        with the algorithm or the declared length, separators that could
        appear in the value itself, circular checks.
    """

    where = _where(spec)
    if not spec.layout:
        raise LayoutError(f"{where}: empty layout")

    names = [f.name for f in spec.layout if f.name is not None]
    if len(names) != len(set(names)):
        raise LayoutError(f"{where}: duplicate field names {names}")

    default_checks = 0
    for index, token in enumerate(spec.layout):
        widths = token.widths()
        if not widths or min(widths) < 0:
            raise LayoutError(f"{where}: field {index} has no usable width")
        if isinstance(token, Check):
            algorithm = algorithms.get(token.algorithm)
            if algorithm is None:
                raise UnknownAlgorithmError(f"{where}: unknown algorithm {token.algorithm!r}")
            if algorithm.width != token.width:
                raise LayoutError(
                    f"{where}: {token.algorithm} yields {algorithm.width} character(s), "
                    f"slot has {token.width}"
                )
            if token.covers is None:
                default_checks += 1
            covered = spec.covered(index)
            if index in covered or not covered:
                raise LayoutError(f"{where}: check {index} covers nothing usable")
        elif isinstance(token, Number):
            limit = 10**token.width - 1
            spans = list(token.bounds()) + [(b.low, b.high) for b in token.bands]
            spans += [r for r in (token.male, token.female) if r is not None]
            for low, high in spans:
                if not 0 <= low <= high <= limit:
                    raise LayoutError(f"{where}: range {low}-{high} does not fit field {index}")
        elif isinstance(token, OneOf) and not token.values:
            raise LayoutError(f"{where}: empty choice at field {index}")
        elif isinstance(token, BirthDate) and token.years[0] > token.years[1]:
            raise LayoutError(f"{where}: empty birth year window")
        elif isinstance(token, DistinctDigits) and (
            not token.repeats or token.width - min(token.repeats) + 1 > 10
        ):
            raise LayoutError(f"{where}: field {index} cannot hold distinct digits")
    if default_checks > 1:
        raise LayoutError(f"{where}: more than one check covers the whole layout")

    spec.check_order()

    if spec.length is not None and spec.total_length != spec.length:
        raise LayoutError(
            f"{where}: declared length {spec.length}, layout gives "
            f"{spec.min_length}..{spec.max_length}"
        )

    separators = spec.display.separators
    if separators:
        produced = set("".join(f.alphabet() for f in spec.layout))
        clash = separators & produced
        if clash:
            raise LayoutError(f"{where}: display separators {sorted(clash)} occur in values")


class Registry:
    """Read-only catalog of :class:`FormatSpec` keyed by (category, code)."""

    def __init__(
        self,
        specs: Iterable[FormatSpec],
        *,
        algorithms: Mapping[str, Algorithm] = ALGORITHMS,
    ) -> None:
        index: dict[tuple[Category, str], FormatSpec] = {}
        for spec in specs:
            validate_spec(spec, algorithms)
            if spec.key in index:
                raise DuplicateFormatError(f"duplicate format {_where(spec)}")
            index[spec.key] = spec

        ordered = sorted(
            index.values(), key=lambda s: (_CATEGORY_ORDER[s.category], s.code.upper())
        )
        self._specs: tuple[FormatSpec, ...] = tuple(ordered)
        self._index: Mapping[tuple[Category, str], FormatSpec] = MappingProxyType(index)
        self._by_category: Mapping[Category, tuple[FormatSpec, ...]] = MappingProxyType(
            {cat: tuple(s for s in ordered if s.category is cat) for cat in Category}
        )
        self._algorithms = algorithms
        log.debug(
            "registry built with %d formats (%s)",
            len(self._specs),
            ", ".join(f"{c.value}={len(v)}" for c, v in self._by_category.items()),
        )

    # -- queries -----------------------------------------------------------

    def lookup(self, category: Category | str, code: str) -> FormatSpec:
        """Return the format spec for ``(category, code)``.

        Raises
        ------
        UnknownFormatError
            If the category or the code is not registered.
        """

        try:
            cat = Category.parse(category)
        except ValueError:
            raise UnknownFormatError(str(category), code) from None
        spec = self._index.get((cat, code.strip().upper()))
        if spec is None:
            raise UnknownFormatError(cat.value, code)
        return spec

    def get(self, category: Category | str, code: str) -> FormatSpec | None:
        try:
            return self.lookup(category, code)
        except UnknownFormatError:
            return None

    def list(self, category: Category | str) -> tuple[str, ...]:
        """Codes registered for ``category`` in registry order."""

        return tuple(s.code for s in self.specs(category))

    def specs(self, category: Category | str) -> tuple[FormatSpec, ...]:
        """Specs of ``category``; raises ``UnknownFormatError`` for unknown categories."""

        try:
            cat = Category.parse(category)
        except ValueError:
            raise UnknownFormatError(str(category)) from None
        return self._by_category[cat]

    def all(self) -> tuple[FormatSpec, ...]:
        return self._specs

    def names(self, category: Category | str) -> tuple[tuple[str, str, str], ...]:
        """``(code, name, description)`` triples for ``category``."""

        return tuple((s.code, s.name, s.description) for s in self.specs(category))

    def with_code(self, code: str) -> tuple[FormatSpec, ...]:
        """Every spec registered under ``code``, across categories."""

        key = code.strip().upper()
        return tuple(s for s in self._specs if s.code.upper() == key)

    def algorithm(self, name: str) -> Algorithm:
        return self._algorithms[name]

    # -- container protocol ------------------------------------------------

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[FormatSpec]:
        return iter(self._specs)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        category, code = key
        return self.get(category, code) is not None


def build_registry() -> Registry:
    """Build a fresh registry from the packaged format definitions."""

    from .data import all_formats

    return Registry(all_formats())


@lru_cache(maxsize=1)
def default_registry() -> Registry:
    """Process-wide registry, built on first use."""

    return build_registry()
