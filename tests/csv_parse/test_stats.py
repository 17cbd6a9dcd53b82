from __future__ import annotations

import pytest

from statement_cli.csv_parse.stats import format_skipped_stats, plural_form, skip_reason_label
from statement_cli.csv_parse.types import SkipReason, SkipStats


def test_format_skipped_stats_lists_each_reason() -> None:
    stats = SkipStats({"internal_transfer": 2, "atm_withdrawal": 3})
    assert format_skipped_stats(stats) == (
        "5 transakcji: 2 przelewy wewnętrzne, 3 wypłaty z bankomatu"
    )


def test_format_skipped_stats_single_reason() -> None:
    assert format_skipped_stats(SkipStats({"card_payment": 1})) == "1 transakcji: 1 spłata karty"


@pytest.mark.parametrize(
    ("count", "expected"),
    [
        (1, "spłata karty"),
        (2, "spłaty karty"),
        (4, "spłaty karty"),
        (5, "spłat karty"),
        (12, "spłat karty"),
        (14, "spłat karty"),
        (22, "spłaty karty"),
        (25, "spłat karty"),
        (112, "spłat karty"),
    ],
)
def test_skip_reason_label_follows_count(count: int, expected: str) -> None:
    assert skip_reason_label("card_payment", count) == expected


def test_plural_form_treats_zero_as_many() -> None:
    assert plural_form(0) == 2


def test_format_skipped_stats_many_internal_transfers() -> None:
    stats = SkipStats({"internal_transfer": 5, "pending": 1})
    assert format_skipped_stats(stats) == "6 transakcji: 5 przelewów wewnętrznych, 1 oczekująca"


def test_format_skipped_stats_empty() -> None:
    assert format_skipped_stats(SkipStats()) == ""


def test_format_skipped_stats_unknown_reason_is_verbatim() -> None:
    assert format_skipped_stats(SkipStats({"unknown_reason": 1})) == "1 transakcji: 1 unknown_reason"


def test_skip_stats_record_returns_new_instance() -> None:
    empty = SkipStats()
    one = empty.record(SkipReason.PENDING)
    two = one.record(SkipReason.PENDING).record(SkipReason.OTHER)

    assert empty.count == 0
    assert one.reasons == {"pending": 1}
    assert two.reasons == {"pending": 2, "other": 1}
    assert two.count == 3


def test_skip_stats_is_read_only() -> None:
    stats = SkipStats({"other": 1})
    with pytest.raises(TypeError):
        stats.reasons["other"] = 5  # type: ignore[index]


def test_skip_stats_to_dict() -> None:
    stats = SkipStats({"other": 3, "no_amount": 1})
    assert stats.to_dict() == {"count": 4, "reasons": {"other": 3, "no_amount": 1}}
