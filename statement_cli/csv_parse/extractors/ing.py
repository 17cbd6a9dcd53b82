"""ING Bank Śląski CSV extractor."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

from statement_cli.shared.text import fold_text

from ..classifier import classify
from ..detection import ING_SIGNATURE
from ..types import BankFormat, ParsedTransaction, SkipReason
from .base import Header, RawRow, StatementExtractor


@dataclass(frozen=True, slots=True)
class _ColumnMapping:
    date_index: int
    description_index: int
    amount_index: int
    counterparty_index: int | None = None
    type_index: int | None = None


class INGExtractor(StatementExtractor):
    """Quoted comma-separated export whose columns are located by header name."""

    name = BankFormat.ING

    def is_header(self, line: str) -> bool:
        return ING_SIGNATURE in line.lower()

    def parse_row(self, row: RawRow, header: Header) -> ParsedTransaction | SkipReason:
        mapping = _find_column_mapping(header)
        if mapping is None:
            return SkipReason.OTHER

        description = row.get(mapping.description_index)
        counterparty = row.get(mapping.counterparty_index)
        amount = row.get(mapping.amount_index)
        text = f"{row.get(mapping.type_index)} {description}".strip()

        reason = classify(text, amount)
        if reason is not None:
            return reason

        return self.build_transaction(
            row,
            date=row.get(mapping.date_index),
            amount=amount,
            merchant=counterparty or description,
            description=text,
            recipient=counterparty,
        )


@lru_cache(maxsize=32)
def _find_column_mapping(headers: Header) -> _ColumnMapping | None:
    normalized = [fold_text(header) for header in headers]
    date_idx = _find_index(normalized, {"data waluty", "data transakcji"})
    desc_idx = _find_index(normalized, {"opis", "tytul", "tytul operacji"})
    amount_idx = _find_index(
        normalized, {"kwota", "kwota transakcji", "kwota transakcji (waluta rachunku)"}
    )
    if date_idx is None or desc_idx is None or amount_idx is None:
        return None
    return _ColumnMapping(
        date_index=date_idx,
        description_index=desc_idx,
        amount_index=amount_idx,
        counterparty_index=_find_index(normalized, {"dane kontrahenta", "kontrahent", "odbiorca"}),
        type_index=_find_index(normalized, {"rodzaj", "typ transakcji", "szczegoly"}),
    )


def _find_index(headers: list[str], candidates: Iterable[str]) -> int | None:
    wanted = set(candidates)
    for index, header in enumerate(headers):
        if header in wanted:
            return index
    return None
