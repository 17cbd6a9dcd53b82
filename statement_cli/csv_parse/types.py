"""Dataclasses and enumerations describing parsed statement data."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any


class BankFormat(str, Enum):
    """Closed set of statement grammars the parser understands."""

    MILLENNIUM = "millennium"
    MBANK = "mbank"
    REVOLUT = "revolut"
    REVOLUT_PL = "revolut_pl"
    ING = "ing"
    ZEN = "zen"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        return FRIENDLY_NAMES[self]

    def __str__(self) -> str:
        return self.value


FRIENDLY_NAMES: dict[BankFormat, str] = {
    BankFormat.MILLENNIUM: "Millennium",
    BankFormat.MBANK: "mBank",
    BankFormat.REVOLUT: "Revolut",
    BankFormat.REVOLUT_PL: "Revolut (PL)",
    BankFormat.ING: "ING",
    BankFormat.ZEN: "ZEN",
    BankFormat.UNKNOWN: "Unknown",
}


class SkipReason(str, Enum):
    """Why a row did not become a transaction."""

    INTERNAL_TRANSFER = "internal_transfer"
    ATM_WITHDRAWAL = "atm_withdrawal"
    CARD_PAYMENT = "card_payment"  # early/manual credit card repayment
    PENDING = "pending"
    NO_AMOUNT = "no_amount"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


class ForcedCategory(str, Enum):
    """Categories that always win over automatic categorization."""

    INVESTMENTS = "Inwestycje"
    TRANSPORT = "Transport"
    SUBSCRIPTIONS = "Subskrypcje"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ParsedTransaction:
    """One accepted purchase row."""

    date: str
    merchant: str
    amount: Decimal
    forced_category: ForcedCategory | None = None
    description: str = ""
    raw_line: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "merchant": self.merchant,
            "amount": f"{self.amount:.2f}",
            "forced_category": self.forced_category.value if self.forced_category else None,
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class SkipStats:
    """Immutable skip counters; ``count`` is always the sum of ``reasons``."""

    reasons: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = MappingProxyType({str(key): int(value) for key, value in self.reasons.items()})
        object.__setattr__(self, "reasons", frozen)

    @property
    def count(self) -> int:
        return sum(self.reasons.values())

    def record(self, reason: SkipReason | str) -> SkipStats:
        """Return new stats with one more row counted under ``reason``."""

        key = str(reason)
        updated = dict(self.reasons)
        updated[key] = updated.get(key, 0) + 1
        return SkipStats(updated)

    def to_dict(self) -> dict[str, Any]:
        return {"count": self.count, "reasons": dict(self.reasons)}


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Container for the detected bank, accepted transactions and skip counters."""

    bank: BankFormat
    transactions: tuple[ParsedTransaction, ...] = ()
    skipped: SkipStats = field(default_factory=SkipStats)

    def __iter__(self) -> Iterator[ParsedTransaction]:
        return iter(self.transactions)

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self.transactions)

    @property
    def total_amount(self) -> Decimal:
        return sum((txn.amount for txn in self.transactions), Decimal("0.00"))

    def to_dict(self) -> dict[str, Any]:
        return {
            "bank": self.bank.value,
            "transactions": [txn.to_dict() for txn in self.transactions],
            "skipped": self.skipped.to_dict(),
        }
