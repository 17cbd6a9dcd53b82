"""Decide whether a statement row is a purchase or noise to be skipped."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from statement_cli.shared.text import fold_text

from .types import SkipReason
from .utils import parse_amount

# Patterns run against folded text: lowercase, no diacritics, single spaces.
DEFAULT_RULES: tuple[tuple[SkipReason, re.Pattern[str]], ...] = (
    (SkipReason.INTERNAL_TRANSFER, re.compile(r"przelew (?:wewnetrzny|wlasny)")),
    (SkipReason.ATM_WITHDRAWAL, re.compile(r"wyplata (?:z bankomatu|gotowki|w bankomacie)")),
    (SkipReason.CARD_PAYMENT, re.compile(r"wczesn\w*\W*spl\w*\W*karty|splata\W+karty")),
    (SkipReason.PENDING, re.compile(r"\boczekuj|\bblokada\b|\bpending\b")),
)


def check_amount(amount: str | None) -> SkipReason | None:
    """Return ``no_amount`` for blank, non-numeric or zero amounts."""

    if not (amount or "").strip():
        return SkipReason.NO_AMOUNT
    try:
        value = parse_amount(amount)
    except ValueError:
        return SkipReason.NO_AMOUNT
    if value == 0:
        return SkipReason.NO_AMOUNT
    return None


@dataclass(frozen=True, slots=True)
class TransactionClassifier:
    """Keyword classifier mapping a row's type/description text to a skip reason."""

    rules: tuple[tuple[SkipReason, re.Pattern[str]], ...] = field(default=DEFAULT_RULES)

    def classify(
        self,
        text: str,
        amount: str | None,
        *,
        debit_by_sign: bool = True,
    ) -> SkipReason | None:
        """Return the reason to skip the row, or ``None`` to accept it.

        The amount check always runs first. With ``debit_by_sign`` a positive
        amount is a credit and is skipped as ``other``; formats that keep debits
        in a dedicated column pass ``debit_by_sign=False``.
        """

        reason = check_amount(amount)
        if reason is not None:
            return reason

        folded = fold_text(text)
        for rule_reason, pattern in self.rules:
            if pattern.search(folded):
                return rule_reason

        if debit_by_sign and parse_amount(amount) > 0:
            return SkipReason.OTHER
        return None


DEFAULT_CLASSIFIER = TransactionClassifier()


def classify(text: str, amount: str | None, *, debit_by_sign: bool = True) -> SkipReason | None:
    return DEFAULT_CLASSIFIER.classify(text, amount, debit_by_sign=debit_by_sign)
