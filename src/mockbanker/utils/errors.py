"""Typed exceptions for format lookup, generation and registry construction."""


class MockBankerError(Exception):
    """Base class for all package errors."""


class UnknownFormatError(MockBankerError, LookupError):
    """Raised when a (category, code) pair is not registered."""

    def __init__(self, category: str, code: str | None = None) -> None:
        if code is None:
            super().__init__(f"Unknown category: {category}")
        else:
            super().__init__(f"Unknown format: {category}/{code}")
        self.category = category
        self.code = code


class UnsatisfiableConstraintError(MockBankerError, ValueError):
    """Raised when generation constraints admit no legal value."""


class RegistryError(MockBankerError, ValueError):
    """Base class for format definition errors detected at registry build time."""


class DuplicateFormatError(RegistryError):
    """Raised when two definitions share a (category, code) key."""


class UnknownAlgorithmError(RegistryError):
    """Raised when a checksum slot references an unregistered algorithm."""


class LayoutError(RegistryError):
    """Raised when a field layout is internally inconsistent."""
