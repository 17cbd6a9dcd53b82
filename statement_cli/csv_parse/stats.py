"""Human-readable summary of skipped rows."""

from __future__ import annotations

from .types import SkipReason, SkipStats

# (one, few, many) forms, e.g. "1 spłata karty", "2 spłaty karty", "5 spłat karty".
SKIP_REASON_LABELS: dict[str, tuple[str, str, str]] = {
    SkipReason.INTERNAL_TRANSFER.value: (
        "przelew wewnętrzny",
        "przelewy wewnętrzne",
        "przelewów wewnętrznych",
    ),
    SkipReason.ATM_WITHDRAWAL.value: (
        "wypłata z bankomatu",
        "wypłaty z bankomatu",
        "wypłat z bankomatu",
    ),
    SkipReason.CARD_PAYMENT.value: ("spłata karty", "spłaty karty", "spłat karty"),
    SkipReason.PENDING.value: ("oczekująca", "oczekujące", "oczekujących"),
    SkipReason.NO_AMOUNT.value: ("bez kwoty", "bez kwoty", "bez kwoty"),
    SkipReason.OTHER.value: ("inna", "inne", "innych"),
}


def plural_form(count: int) -> int:
    """Index into a (one, few, many) tuple following Polish plural rules."""

    if count == 1:
        return 0
    if 2 <= count % 10 <= 4 and not 12 <= count % 100 <= 14:
        return 1
    return 2


def skip_reason_label(reason: str, count: int) -> str:
    forms = SKIP_REASON_LABELS.get(reason)
    if forms is None:
        return reason
    return forms[plural_form(count)]


def format_skipped_stats(stats: SkipStats) -> str:
    """Return ``"<count> transakcji: <n> <label>, ..."`` or ``""`` when nothing was skipped."""

    if stats.count == 0:
        return ""
    parts = [
        f"{count} {skip_reason_label(reason, count)}"
        for reason, count in stats.reasons.items()
        if count
    ]
    return f"{stats.count} transakcji: {', '.join(parts)}"
