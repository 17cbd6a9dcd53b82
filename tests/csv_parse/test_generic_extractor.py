from __future__ import annotations

from decimal import Decimal

import pytest

from statement_cli.csv_parse.extractors.generic import infer_delimiter
from statement_cli.csv_parse.parse import parse_statement
from statement_cli.csv_parse.types import BankFormat


@pytest.mark.parametrize(
    "text",
    [
        "Date,Merchant,Amount\n2024-01-15,BIEDRONKA,-50.00",
        "Date;Merchant;Amount\n2024-01-15;BIEDRONKA;-50.00",
    ],
)
def test_generic_uses_header_names(text: str) -> None:
    result = parse_statement(text)

    assert result.bank is BankFormat.UNKNOWN
    assert len(result.transactions) == 1
    assert result.transactions[0].merchant == "Biedronka"
    assert result.transactions[0].amount == Decimal("50.00")
    assert result.transactions[0].date == "2024-01-15"


def test_generic_polish_headers_and_day_first_dates() -> None:
    result = parse_statement("Data;Opis;Kwota\n15.01.2024;Kawiarnia;-12,50")

    assert result.transactions[0].date == "2024-01-15"
    assert result.transactions[0].merchant == "Kawiarnia"
    assert result.transactions[0].amount == Decimal("12.50")


def test_generic_finds_cells_by_pattern() -> None:
    result = parse_statement("a,b,c,d\n2024-03-02,000123,Apteka Centrum,-23.40")

    assert len(result.transactions) == 1
    assert result.transactions[0].merchant == "Apteka Centrum"
    assert result.transactions[0].amount == Decimal("23.40")


def test_generic_skips_rows_without_date_or_amount() -> None:
    result = parse_statement("Merchant,Amount\nShop,-5.00\nOther shop,")

    assert result.transactions == ()
    assert dict(result.skipped.reasons) == {"other": 1, "no_amount": 1}


def test_infer_delimiter() -> None:
    assert infer_delimiter("a;b;c") == ";"
    assert infer_delimiter("a,b;c") == ","
