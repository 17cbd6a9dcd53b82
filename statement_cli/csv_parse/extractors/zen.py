"""ZEN.COM account statement extractor."""

from __future__ import annotations

import re
from collections.abc import Iterable

from ..classifier import check_amount, classify
from ..detection import is_zen_marker
from ..types import BankFormat, ParsedTransaction, SkipReason
from ..utils import iter_lines, split_row
from .base import Header, RawRow, StatementExtractor

# Date, Transaction type, Description, Settlement amount, Settlement currency, ...
_DATE = 0
_TYPE = 1
_DESCRIPTION = 2
_AMOUNT = 3

CARD_PAYMENT = "Card payment"
FOOTER_PREFIXES = ("this is a computer-generated", '"zen.com', "zen.com")

_CARD_TAIL_RE = re.compile(r"\s{2,}[A-Z]{3},[A-Z]{3}\s+CARD:.*$|\s+CARD:.*$", re.IGNORECASE)
_COUNTRY_TAIL_RE = re.compile(r"\s{2,}[A-Z]{3}$")


def strip_zen_description(description: str) -> str:
    """Drop the padded country code and masked card from a ZEN description.

    ``"LIDL          POL,POL CARD: MASTERCARD *5382"`` becomes ``"LIDL"``.
    """

    merchant = _CARD_TAIL_RE.sub("", description)
    merchant = _COUNTRY_TAIL_RE.sub("", merchant)
    return merchant.strip()


def is_zen_footer(line: str) -> bool:
    return line.lower().startswith(FOOTER_PREFIXES)


class ZenExtractor(StatementExtractor):
    """Banner lines, a ``Transactions:`` marker, then a regular CSV table."""

    name = BankFormat.ZEN

    def split(self, text: str) -> tuple[Header, Iterable[RawRow]]:
        lines = [(number, line) for number, line in iter_lines(text) if line]
        for position, (_, line) in enumerate(lines):
            if not is_zen_marker(line):
                continue
            remaining = lines[position + 1 :]
            if not remaining:
                break
            header = tuple(split_row(remaining[0][1], self.delimiter))
            body: list[tuple[int, str]] = []
            for number, candidate in remaining[1:]:
                if is_zen_footer(candidate):
                    break
                body.append((number, candidate))
            return header, list(self.to_rows(body))
        return (), []

    def parse_row(self, row: RawRow, header: Header) -> ParsedTransaction | SkipReason:
        if len(row.cells) <= _AMOUNT:
            return SkipReason.OTHER

        description = row.get(_DESCRIPTION)
        amount = row.get(_AMOUNT)
        reason = (
            check_amount(amount)
            or (None if row.get(_TYPE) == CARD_PAYMENT else SkipReason.OTHER)
            or classify(description, amount)
        )
        if reason is not None:
            return reason

        return self.build_transaction(
            row,
            date=row.get(_DATE),
            amount=amount,
            merchant=strip_zen_description(description),
            description=description,
        )
