"""Date normalisation into ISO ``YYYY-MM-DD`` strings."""

from __future__ import annotations

import re
from datetime import date

from ..types import BankFormat

MONTHS: dict[str, int] = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

_ISO_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:[T\s].*)?$")
_DAY_MONTH_NAME_RE = re.compile(r"^(\d{1,2})\s+([A-Za-z]{3})\s+(\d{4})$")
_DAY_FIRST_RE = re.compile(r"^(\d{1,2})[./](\d{1,2})[./](\d{4})$")


def normalize_date(value: str | None, bank_format: BankFormat = BankFormat.UNKNOWN) -> str:
    """Return ``value`` as ``YYYY-MM-DD`` using the rules of ``bank_format``.

    ZEN exports use ``1 Dec 2024``; every other known bank already writes ISO
    dates, optionally followed by a time which is dropped. The generic
    extractor also accepts ``DD.MM.YYYY`` and ``DD/MM/YYYY``. Raises
    ``ValueError`` for anything that is not a real calendar date.
    """

    cleaned = " ".join((value or "").split())
    if not cleaned:
        raise ValueError("Empty date")

    if bank_format is BankFormat.ZEN:
        parsed = _parse_day_month_name(cleaned)
    elif bank_format is BankFormat.UNKNOWN:
        parsed = (
            _parse_iso(cleaned)
            or _parse_day_first(cleaned)
            or _parse_day_month_name(cleaned)
        )
    else:
        parsed = _parse_iso(cleaned)

    if parsed is None:
        raise ValueError(f"Unrecognised date '{value}' for {bank_format.value} format")
    return parsed.isoformat()


def is_date_like(value: str | None) -> bool:
    try:
        normalize_date(value, BankFormat.UNKNOWN)
    except ValueError:
        return False
    return True


def _parse_iso(value: str) -> date | None:
    match = _ISO_RE.match(value)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    return date(year, month, day)


def _parse_day_month_name(value: str) -> date | None:
    match = _DAY_MONTH_NAME_RE.match(value)
    if not match:
        return None
    month = MONTHS.get(match.group(2).lower())
    if month is None:
        return None
    return date(int(match.group(3)), month, int(match.group(1)))


def _parse_day_first(value: str) -> date | None:
    match = _DAY_FIRST_RE.match(value)
    if not match:
        return None
    day, month, year = (int(part) for part in match.groups())
    return date(year, month, day)
