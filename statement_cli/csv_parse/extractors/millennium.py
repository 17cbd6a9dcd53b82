"""Bank Millennium CSV extractor."""

from __future__ import annotations

from ..classifier import classify
from ..detection import MILLENNIUM_SIGNATURE
from ..types import BankFormat, ParsedTransaction, SkipReason
from .base import Header, RawRow, StatementExtractor

# Numer rachunku/karty, Data transakcji, Data rozliczenia, Rodzaj transakcji,
# Na konto/Z konta, Odbiorca/Zleceniodawca, Opis, Obciążenia, Uznania, Saldo, Waluta
_DATE = 1
_TYPE = 3
_COUNTERPARTY = 5
_DESCRIPTION = 6
_DEBIT = 7
_MIN_COLUMNS = _DEBIT + 1


class MillenniumExtractor(StatementExtractor):
    """Quoted comma-separated export with separate debit and credit columns."""

    name = BankFormat.MILLENNIUM

    def is_header(self, line: str) -> bool:
        return MILLENNIUM_SIGNATURE in line.lower()

    def parse_row(self, row: RawRow, header: Header) -> ParsedTransaction | SkipReason:
        if len(row.cells) < _MIN_COLUMNS:
            return SkipReason.OTHER

        kind = row.get(_TYPE)
        counterparty = row.get(_COUNTERPARTY)
        description = row.get(_DESCRIPTION)
        debit = row.get(_DEBIT)
        text = f"{kind} {description}"

        # Credits live in their own column, so a blank debit means "not a purchase".
        reason = classify(text, debit, debit_by_sign=False)
        if reason is not None:
            return reason

        return self.build_transaction(
            row,
            date=row.get(_DATE),
            amount=debit,
            merchant=counterparty or description,
            description=text,
            recipient=counterparty,
        )
