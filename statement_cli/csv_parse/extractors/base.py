"""Base classes and utilities for statement extractors."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from statement_cli.shared.merchants import normalize_merchant

from ..categories import resolve_forced_category
from ..types import BankFormat, ParsedTransaction, SkipReason, SkipStats
from ..utils import iter_lines, normalize_amount, normalize_date, split_row

_LOGGER = logging.getLogger(__name__)

Header = tuple[str, ...]


@dataclass(frozen=True, slots=True)
class RawRow:
    """A non-blank data line and its cells."""

    line_number: int
    line: str
    cells: tuple[str, ...]

    def get(self, index: int | None) -> str:
        if index is None or index >= len(self.cells):
            return ""
        return self.cells[index]


class StatementExtractor(ABC):
    """Abstract base for bank-specific CSV extractors.

    Subclasses describe their grammar through :meth:`split` (which lines are
    data rows) and :meth:`parse_row` (what a single row means). The row loop,
    skip accounting and per-row error handling live here.
    """

    name: BankFormat = BankFormat.UNKNOWN
    delimiter: str = ","

    def extract(self, text: str) -> tuple[list[ParsedTransaction], SkipStats]:
        """Return accepted transactions in input order plus skip counters."""

        header, rows = self.split(text)
        transactions: list[ParsedTransaction] = []
        stats = SkipStats()
        for row in rows:
            try:
                outcome = self.parse_row(row, header)
            except ValueError as exc:
                _LOGGER.debug("%s line %d rejected: %s", self.name.value, row.line_number, exc)
                outcome = SkipReason.OTHER
            if isinstance(outcome, SkipReason):
                stats = stats.record(outcome)
            else:
                transactions.append(outcome)
        return transactions, stats

    def split(self, text: str) -> tuple[Header, Iterable[RawRow]]:
        """Default grammar: the first line accepted by :meth:`is_header` is the header.

        Lines above it (bank preambles) are dropped without being counted; the
        lines below it are rows.
        """

        lines = [(number, line) for number, line in iter_lines(text) if line]
        for position, (_, line) in enumerate(lines):
            if self.is_header(line):
                header = tuple(split_row(line, self.delimiter))
                return header, self.to_rows(lines[position + 1 :])
        return (), []

    def is_header(self, line: str) -> bool:
        """Whether ``line`` is the column header. Any line qualifies by default."""

        return True

    def to_rows(self, lines: Iterable[tuple[int, str]]) -> Iterator[RawRow]:
        for number, line in lines:
            if not line:
                continue
            yield RawRow(number, line, tuple(split_row(line, self.delimiter)))

    @abstractmethod
    def parse_row(self, row: RawRow, header: Header) -> ParsedTransaction | SkipReason:
        """Return a transaction, or the reason the row is skipped.

        May raise ``ValueError`` for malformed fields; the row then counts as
        ``other``.
        """

    def build_transaction(
        self,
        row: RawRow,
        *,
        date: str,
        amount: str,
        merchant: str,
        description: str,
        recipient: str = "",
        normalize: bool = True,
    ) -> ParsedTransaction:
        """Normalise fields of an accepted row into a :class:`ParsedTransaction`."""

        return ParsedTransaction(
            date=normalize_date(date, self.name),
            merchant=normalize_merchant(merchant) if normalize else merchant,
            amount=normalize_amount(amount),
            forced_category=resolve_forced_category(description, recipient),
            description=" ".join(description.split()),
            raw_line=row.line,
        )


class ExtractorRegistry:
    """Map each :class:`BankFormat` to the extractor that owns its grammar."""

    def __init__(
        self,
        extractors: Iterable[type[StatementExtractor]],
        *,
        fallback: type[StatementExtractor],
    ) -> None:
        self._by_format: dict[BankFormat, type[StatementExtractor]] = {}
        self._fallback = fallback
        for extractor in extractors:
            self.register(extractor)

    def register(self, extractor: type[StatementExtractor]) -> None:
        key = BankFormat(extractor.name)
        existing = self._by_format.get(key)
        if existing is not None:
            raise ValueError(f"Extractor for {key.value} already registered ({existing.__name__})")
        self._by_format[key] = extractor

    def get(self, bank_format: BankFormat) -> StatementExtractor:
        """Return a fresh extractor for ``bank_format``, falling back to the generic one."""

        extractor_cls = self._by_format.get(bank_format, self._fallback)
        return extractor_cls()

    def names(self) -> tuple[BankFormat, ...]:
        return tuple(self._by_format)
