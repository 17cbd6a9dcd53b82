"""Statement format detection from header signatures."""

from __future__ import annotations

from .types import BankFormat
from .utils import iter_lines

HEAD_LINES = 40

# Header fragments that identify a statement even below a free-text preamble.
MILLENNIUM_SIGNATURE = "numer rachunku/karty"
ING_SIGNATURE = '"data waluty","opis"'


def leading_lines(text: str, limit: int = HEAD_LINES) -> list[str]:
    """Return up to ``limit`` non-empty, stripped lines from the top of ``text``."""

    lines: list[str] = []
    for _, line in iter_lines(text):
        if not line:
            continue
        lines.append(line)
        if len(lines) >= limit:
            break
    return lines


def detect_format(text: str) -> BankFormat:
    """Return the bank format whose header signature appears first.

    Checks run in a fixed order and the first hit wins; anything unmatched,
    including empty input, is ``BankFormat.UNKNOWN``.
    """

    lines = leading_lines(text)
    if not lines:
        return BankFormat.UNKNOWN
    lowered = [line.lower() for line in lines]
    head = "\n".join(lowered)
    first = lowered[0]

    if MILLENNIUM_SIGNATURE in head:
        return BankFormat.MILLENNIUM
    if any(line.startswith(("#data operacji", "data operacji;")) for line in lowered) or (
        "data operacji;data księgowania" in head
    ):
        return BankFormat.MBANK
    if first.startswith("completed date,description,amount,currency"):
        return BankFormat.REVOLUT
    if first.startswith("rodzaj,produkt,data rozpoczęcia"):
        return BankFormat.REVOLUT_PL
    if ING_SIGNATURE in head:
        return BankFormat.ING
    if _has_zen_banner(lowered):
        return BankFormat.ZEN
    return BankFormat.UNKNOWN


def is_zen_marker(line: str) -> bool:
    """True for the ``Transactions:`` line that precedes the ZEN table header."""

    return line.strip('",; ').lower() == "transactions:"


def _has_zen_banner(lowered: list[str]) -> bool:
    for index, line in enumerate(lowered):
        if "account statement" in line:
            return any(is_zen_marker(candidate) for candidate in lowered[index + 1 :])
    return False
