"""mBank CSV extractor."""

from __future__ import annotations

from collections.abc import Iterable

from ..classifier import classify
from ..types import BankFormat, ParsedTransaction, SkipReason
from ..utils import iter_lines, split_row
from .base import Header, RawRow, StatementExtractor

# Data operacji; Data księgowania; Opis operacji; Tytuł; Nadawca/Odbiorca;
# Numer konta; Kwota; Saldo po operacji
_DATE = 0
_DESCRIPTION = 2
_TITLE = 3
_COUNTERPARTY = 4
_AMOUNT = 6
_MIN_COLUMNS = _AMOUNT + 1


def is_mbank_header(line: str) -> bool:
    lowered = line.lower()
    return lowered.startswith(("#data operacji", "data operacji;"))


def is_mbank_footer(line: str, cells: tuple[str, ...]) -> bool:
    """Summary lines such as ``;;;;;;#Saldo końcowe;1 000,00 PLN;``."""

    return not (cells and cells[0]) and "#" in line


class MBankExtractor(StatementExtractor):
    """Semicolon-separated export preceded by an account preamble."""

    name = BankFormat.MBANK
    delimiter = ";"

    def split(self, text: str) -> tuple[Header, Iterable[RawRow]]:
        header: Header = ()
        rows: list[RawRow] = []
        for row in self.to_rows(iter_lines(text)):
            if not header:
                if is_mbank_header(row.line):
                    header = tuple(split_row(row.line.lstrip("#"), self.delimiter))
                continue
            if is_mbank_footer(row.line, row.cells):
                continue
            rows.append(row)
        return header, rows

    def parse_row(self, row: RawRow, header: Header) -> ParsedTransaction | SkipReason:
        if len(row.cells) < _MIN_COLUMNS:
            return SkipReason.OTHER

        description = row.get(_DESCRIPTION)
        title = row.get(_TITLE)
        counterparty = row.get(_COUNTERPARTY)
        amount = row.get(_AMOUNT)
        text = f"{description} {title}".strip()

        reason = classify(text, amount)
        if reason is not None:
            return reason

        # A named counterparty is kept exactly as exported; only the
        # description/title fallback goes through merchant normalisation.
        if counterparty:
            return self.build_transaction(
                row,
                date=row.get(_DATE),
                amount=amount,
                merchant=counterparty,
                description=text,
                recipient=counterparty,
                normalize=False,
            )
        return self.build_transaction(
            row,
            date=row.get(_DATE),
            amount=amount,
            merchant=f"{description} {title}",
            description=text,
        )
