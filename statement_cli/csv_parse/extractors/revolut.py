"""Revolut CSV extractors (English and Polish exports)."""

from __future__ import annotations

from statement_cli.shared.text import fold_text

from ..classifier import check_amount, classify
from ..types import BankFormat, ParsedTransaction, SkipReason
from .base import Header, RawRow, StatementExtractor

# Completed Date, Description, Amount, Currency
_EN_DATE = 0
_EN_DESCRIPTION = 1
_EN_AMOUNT = 2

# Rodzaj, Produkt, Data rozpoczęcia, Data zrealizowania, Opis, Kwota, Opłata,
# Waluta, State, Saldo
_PL_TYPE = 0
_PL_STARTED = 2
_PL_COMPLETED = 3
_PL_DESCRIPTION = 4
_PL_AMOUNT = 5
_PL_STATE = 8

COMPLETED_STATES = frozenset({"zakonczono", "completed"})
PENDING_STATES = ("oczekuj", "pending", "w toku")
ALLOWED_TYPES = frozenset({"platnosc karta", "bankomat", "oplata", "card payment", "atm", "fee"})


class RevolutExtractor(StatementExtractor):
    """English export: four fixed columns, sign decides debit vs credit."""

    name = BankFormat.REVOLUT

    def parse_row(self, row: RawRow, header: Header) -> ParsedTransaction | SkipReason:
        if len(row.cells) <= _EN_AMOUNT:
            return SkipReason.OTHER

        description = row.get(_EN_DESCRIPTION)
        amount = row.get(_EN_AMOUNT)
        reason = classify(description, amount)
        if reason is not None:
            return reason

        return self.build_transaction(
            row,
            date=row.get(_EN_DATE),
            amount=amount,
            merchant=description,
            description=description,
        )


class RevolutPLExtractor(StatementExtractor):
    """Polish export with transaction type and state columns."""

    name = BankFormat.REVOLUT_PL

    def parse_row(self, row: RawRow, header: Header) -> ParsedTransaction | SkipReason:
        if len(row.cells) <= _PL_STATE:
            return SkipReason.OTHER

        description = row.get(_PL_DESCRIPTION)
        amount = row.get(_PL_AMOUNT)
        reason = (
            check_amount(amount)
            or _state_reason(row.get(_PL_STATE))
            or _type_reason(row.get(_PL_TYPE))
            or classify(description, amount)
        )
        if reason is not None:
            return reason

        return self.build_transaction(
            row,
            date=row.get(_PL_COMPLETED) or row.get(_PL_STARTED),
            amount=amount,
            merchant=description,
            description=description,
        )


def _state_reason(state: str) -> SkipReason | None:
    folded = fold_text(state)
    if folded in COMPLETED_STATES:
        return None
    if folded.startswith(PENDING_STATES):
        return SkipReason.PENDING
    return SkipReason.OTHER


def _type_reason(kind: str) -> SkipReason | None:
    # Transfers ("Przelew") and anything else outside the allow-list are not purchases.
    if fold_text(kind) in ALLOWED_TYPES:
        return None
    return SkipReason.OTHER
