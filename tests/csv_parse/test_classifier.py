from __future__ import annotations

import re

import pytest

from statement_cli.csv_parse.classifier import TransactionClassifier, check_amount, classify
from statement_cli.csv_parse.types import SkipReason


@pytest.mark.parametrize(
    "text, expected",
    [
        ("PRZELEW WEWNĘTRZNY", SkipReason.INTERNAL_TRANSFER),
        ("Przelew własny na konto oszczędnościowe", SkipReason.INTERNAL_TRANSFER),
        ("WYPŁATA Z BANKOMATU", SkipReason.ATM_WITHDRAWAL),
        ("Wypłata gotówki", SkipReason.ATM_WITHDRAWAL),
        ("WCZEŚN.SPŁ.KARTY", SkipReason.CARD_PAYMENT),
        ("Spłata karty kredytowej", SkipReason.CARD_PAYMENT),
        ("Blokada środków", SkipReason.PENDING),
        ("Transakcja oczekująca", SkipReason.PENDING),
    ],
)
def test_classify_keyword_rules(text: str, expected: SkipReason) -> None:
    assert classify(text, "-100,00") is expected


@pytest.mark.parametrize("amount", ["", "   ", None, "0,00", "brak"])
def test_missing_or_zero_amount_is_no_amount(amount: str | None) -> None:
    assert check_amount(amount) is SkipReason.NO_AMOUNT
    assert classify("ZAKUP KARTĄ", amount) is SkipReason.NO_AMOUNT


def test_amount_check_runs_before_keyword_rules() -> None:
    assert classify("PRZELEW WEWNĘTRZNY", "") is SkipReason.NO_AMOUNT


def test_credits_are_skipped_only_when_sign_decides() -> None:
    assert classify("LIDL", "25.00") is SkipReason.OTHER
    assert classify("LIDL", "25.00", debit_by_sign=False) is None
    assert classify("LIDL", "-25.00") is None


def test_custom_rules() -> None:
    classifier = TransactionClassifier(rules=((SkipReason.OTHER, re.compile(r"kantor")),))
    assert classifier.classify("KANTOR WALUT", "-10.00") is SkipReason.OTHER
    assert classifier.classify("PRZELEW WEWNĘTRZNY", "-10.00") is None
