"""Parse orchestration: detect the bank, run its extractor, assemble the result."""

from __future__ import annotations

import logging

from .detection import detect_format
from .extractors import get_extractor
from .types import BankFormat, ParseResult

_LOGGER = logging.getLogger(__name__)


def parse_statement(text: str) -> ParseResult:
    """Parse decoded statement text into a :class:`ParseResult`.

    Never raises: unrecognised files go through the generic extractor and an
    unexpected extractor failure degrades to an empty result for the detected
    bank.
    """

    text = text or ""
    bank = detect_format(text)
    if not text.strip():
        return ParseResult(bank=BankFormat.UNKNOWN)

    extractor = get_extractor(bank)
    try:
        transactions, skipped = extractor.extract(text)
    except Exception:  # pragma: no cover - defensive against extractor bugs
        _LOGGER.warning("Extractor %s failed; returning empty result", bank.value, exc_info=True)
        return ParseResult(bank=bank)

    _LOGGER.debug(
        "Parsed %s statement: %d transactions, %d skipped",
        bank.value,
        len(transactions),
        skipped.count,
    )
    return ParseResult(bank=bank, transactions=tuple(transactions), skipped=skipped)
