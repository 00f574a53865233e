"""Smoke tests for package import and version."""

import mockbanker


def test_import_package() -> None:
    assert isinstance(mockbanker, object)


def test_version() -> None:
    assert mockbanker.__version__ == "0.1.0"


def test_public_names_resolve() -> None:
    for name in mockbanker.__all__:
        assert hasattr(mockbanker, name), name
