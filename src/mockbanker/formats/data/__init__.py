"""Packaged format definitions, one module per category."""

from __future__ import annotations

from ..model import FormatSpec

__all__ = ["all_formats"]


def all_formats() -> tuple[FormatSpec, ...]:
    """Every packaged :class:`FormatSpec`, in definition order."""

    from . import (
        bank_account,
        company_id,
        credit_card,
        drivers_license,
        iban,
        lei,
        passport,
        personal_id,
        swift,
        tax_id,
        vat,
    )

    modules = (
        iban,
        personal_id,
        credit_card,
        bank_account,
        swift,
        company_id,
        drivers_license,
        passport,
        tax_id,
        vat,
        lei,
    )
    return tuple(spec for module in modules for spec in module.FORMATS)
