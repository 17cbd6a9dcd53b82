"""Amount parsing helpers for Polish and English statement exports."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")

_CURRENCY_RE = re.compile(r"(?<![a-z])(?:[a-z]{3}|zł|zl)(?![a-z])|[$€£]", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")
_NUMBER_RE = re.compile(r"^(?:\d+(?:[.,]\d+)*|[.,]\d+)$")


def parse_amount(value: str | None) -> Decimal:
    """Parse a statement amount into a signed two-decimal ``Decimal``.

    Handles values such as ``-50,00 PLN``, ``1 234,56 zł``, ``-1,234.56`` or
    ``(12.30)``. Whichever of ``,``/``.`` appears last is the decimal point;
    earlier separators are treated as thousands separators. Raises
    ``ValueError`` when nothing numeric is left after cleaning.
    """

    cleaned = (value or "").strip()
    cleaned = cleaned.replace("–", "-").replace("−", "-")
    negative = False
    if cleaned.startswith("(") and cleaned.endswith(")"):
        negative = True
        cleaned = cleaned[1:-1]
    cleaned = _CURRENCY_RE.sub("", cleaned)
    cleaned = _WHITESPACE_RE.sub("", cleaned)
    if cleaned.startswith("-"):
        negative = True
        cleaned = cleaned[1:]
    elif cleaned.startswith("+"):
        cleaned = cleaned[1:]

    if not _NUMBER_RE.match(cleaned):
        raise ValueError(f"Invalid amount '{value}'")

    separator_at = max(cleaned.rfind(","), cleaned.rfind("."))
    if separator_at >= 0:
        whole = re.sub(r"[.,]", "", cleaned[:separator_at]) or "0"
        number = f"{whole}.{cleaned[separator_at + 1:]}"
    else:
        number = cleaned

    # More digits than the decimal context precision (28) make quantize fail.
    try:
        amount = Decimal(number).quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid amount '{value}'") from exc
    return -amount if negative else amount


def normalize_amount(value: str | None) -> Decimal:
    """Return the non-negative magnitude of ``value`` with two fractional digits."""

    return abs(parse_amount(value))
