"""Input normalization.

Candidates arrive in whatever shape a person typed or pasted them.  Before any
structural check the validator reduces them to the canonical raw form: Unicode
compatibility forms are folded (full-width digits become ASCII), whitespace is
removed, letters are upper-cased and the cosmetic separators of the format's
display rules are stripped.
"""

from __future__ import annotations

import re
import unicodedata

from ..formats.model import FormatSpec

__all__ = ["normalize"]

_WHITESPACE = re.compile(r"\s+")


def normalize(value: str, spec: FormatSpec | None = None) -> str:
    """Return the canonical raw form of ``value`` for ``spec``.

    Without a spec only whitespace is removed.  The function is idempotent:
    ``normalize(normalize(v, s), s) == normalize(v, s)``.
    """

    text = unicodedata.normalize("NFKC", value)
    text = _WHITESPACE.sub("", text).upper()
    if spec is not None:
        separators = spec.display.separators
        if separators:
            text = "".join(c for c in text if c not in separators)
    return text
