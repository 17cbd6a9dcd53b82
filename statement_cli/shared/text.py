"""Text folding helpers for case- and diacritics-insensitive matching."""

from __future__ import annotations

import unicodedata

# Polish letters that NFKD does not decompose into base letter + combining mark.
_EXTRA_FOLDS = str.maketrans({"ł": "l", "Ł": "L", "đ": "d", "Đ": "D", "ø": "o", "Ø": "O"})


def strip_diacritics(value: str) -> str:
    """Return ``value`` with accents removed (``Żabka`` -> ``Zabka``)."""

    decomposed = unicodedata.normalize("NFKD", value.translate(_EXTRA_FOLDS))
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def fold_text(value: str | None) -> str:
    """Lowercase, strip diacritics and collapse whitespace."""

    if not value:
        return ""
    return " ".join(strip_diacritics(value).lower().split())
