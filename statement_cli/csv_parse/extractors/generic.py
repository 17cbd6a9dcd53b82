"""Best-effort extractor for files that match no known bank."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

from statement_cli.shared.text import fold_text

from ..classifier import check_amount, classify
from ..types import BankFormat, ParsedTransaction, SkipReason
from ..utils import is_date_like, iter_lines, split_row
from .base import Header, RawRow, StatementExtractor

DATE_HEADERS = {
    "date",
    "data",
    "data operacji",
    "data transakcji",
    "transaction date",
    "completed date",
}
AMOUNT_HEADERS = {"amount", "kwota", "value", "wartosc", "kwota operacji", "kwota transakcji"}
DESCRIPTION_HEADERS = {
    "description",
    "merchant",
    "opis",
    "opis operacji",
    "odbiorca",
    "kontrahent",
    "payee",
    "name",
}

# Amount-looking cell with a decimal part, so account numbers and ids are not mistaken for money.
_MONEY_RE = re.compile(
    r"^[-+−–(]?\s*\d[\d\s .,]*[.,]\d{1,2}\)?\s*(?:[A-Za-z]{3}|zł)?$", re.IGNORECASE
)
_NUMERIC_RE = re.compile(r"^[\d\s.,\-+()/:]*$")


@dataclass(frozen=True, slots=True)
class _HeaderHints:
    date_index: int | None
    amount_index: int | None
    description_index: int | None


def infer_delimiter(header_line: str) -> str:
    """Pick ``;`` when the header has more semicolons than commas, else ``,``."""

    return ";" if header_line.count(";") > header_line.count(",") else ","


class GenericExtractor(StatementExtractor):
    """Locate date, amount and description cells by header names or by pattern."""

    name = BankFormat.UNKNOWN

    def split(self, text: str) -> tuple[Header, Iterable[RawRow]]:
        lines = [(number, line) for number, line in iter_lines(text) if line]
        if not lines:
            return (), []
        delimiter = infer_delimiter(lines[0][1])
        header = tuple(split_row(lines[0][1], delimiter))
        rows = [
            RawRow(number, line, tuple(split_row(line, delimiter))) for number, line in lines[1:]
        ]
        return header, rows

    def parse_row(self, row: RawRow, header: Header) -> ParsedTransaction | SkipReason:
        hints = _header_hints(header)
        date_index = _pick_date_index(row, hints)
        amount_index = _pick_amount_index(row, hints, exclude=date_index)
        description = _pick_description(row, hints, exclude={date_index, amount_index})

        amount = row.get(amount_index)
        if check_amount(amount) is not None:
            return SkipReason.NO_AMOUNT
        if date_index is None:
            return SkipReason.OTHER
        reason = classify(description, amount)
        if reason is not None:
            return reason

        return self.build_transaction(
            row,
            date=row.get(date_index),
            amount=amount,
            merchant=description,
            description=description,
        )


@lru_cache(maxsize=32)
def _header_hints(header: Header) -> _HeaderHints:
    folded = [fold_text(name).lstrip("#") for name in header]

    def first(candidates: set[str]) -> int | None:
        for index, name in enumerate(folded):
            if name in candidates:
                return index
        return None

    return _HeaderHints(
        date_index=first(DATE_HEADERS),
        amount_index=first(AMOUNT_HEADERS),
        description_index=first(DESCRIPTION_HEADERS),
    )


def _pick_date_index(row: RawRow, hints: _HeaderHints) -> int | None:
    if hints.date_index is not None and is_date_like(row.get(hints.date_index)):
        return hints.date_index
    for index, value in enumerate(row.cells):
        if is_date_like(value):
            return index
    return None


def _pick_amount_index(row: RawRow, hints: _HeaderHints, *, exclude: int | None) -> int | None:
    if hints.amount_index is not None and hints.amount_index != exclude:
        if check_amount(row.get(hints.amount_index)) is None:
            return hints.amount_index
    for index, value in enumerate(row.cells):
        if index != exclude and _MONEY_RE.match(value):
            return index
    return hints.amount_index


def _pick_description(row: RawRow, hints: _HeaderHints, *, exclude: set[int | None]) -> str:
    if hints.description_index is not None and hints.description_index not in exclude:
        value = row.get(hints.description_index)
        if value:
            return value
    candidates = [
        value
        for index, value in enumerate(row.cells)
        if index not in exclude and value and not _NUMERIC_RE.match(value)
    ]
    return max(candidates, key=len, default="")
