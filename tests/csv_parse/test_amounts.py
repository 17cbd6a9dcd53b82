from __future__ import annotations

from decimal import Decimal

import pytest

from statement_cli.csv_parse.utils import normalize_amount, parse_amount


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("-50,99", Decimal("-50.99")),
        ("-50.99", Decimal("-50.99")),
        ("-1234.56", Decimal("-1234.56")),
        ("-50,00 PLN", Decimal("-50.00")),
        ("1 234,56 zł", Decimal("1234.56")),
        ("-1,234.56", Decimal("-1234.56")),
        ("(12.30)", Decimal("-12.30")),
        ("+15", Decimal("15.00")),
        ("−20,5", Decimal("-20.50")),
    ],
)
def test_parse_amount(raw: str, expected: Decimal) -> None:
    assert parse_amount(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", None, "abc", "--"])
def test_parse_amount_rejects_non_numeric(raw: str | None) -> None:
    with pytest.raises(ValueError):
        parse_amount(raw)


def test_normalize_amount_returns_magnitude() -> None:
    assert normalize_amount("-50,99") == Decimal("50.99")
    assert normalize_amount("50,99") == normalize_amount("50.99") == Decimal("50.99")
    assert normalize_amount("45.5") == Decimal("45.50")
    assert str(normalize_amount("-45.5")) == "45.50"


def test_parse_amount_rejects_digits_beyond_decimal_precision() -> None:
    with pytest.raises(ValueError, match="Invalid amount"):
        parse_amount("9" * 30)
