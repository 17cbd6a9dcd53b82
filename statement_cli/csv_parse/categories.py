"""Fixed category overrides that automatic categorization must not replace."""

from __future__ import annotations

import re

from statement_cli.shared.text import fold_text

from .types import ForcedCategory

_INVESTMENT_MARKERS = ("xtb s.a.", "xtb.com")
_TRANSPORT_RE = re.compile(r"\bbilet|\bjakdojade\b|\bztm\b|\bmpk\b|\bkoleo\b")
_PHONE_TOP_UP_RE = re.compile(r"\bdoladowani")


def resolve_forced_category(description: str, recipient: str = "") -> ForcedCategory | None:
    """Return the mandatory category for a row, first matching rule wins."""

    description_folded = fold_text(description)
    recipient_folded = fold_text(recipient)

    if any(
        marker in description_folded or marker in recipient_folded
        for marker in _INVESTMENT_MARKERS
    ):
        return ForcedCategory.INVESTMENTS
    if _TRANSPORT_RE.search(description_folded):
        return ForcedCategory.TRANSPORT
    if _PHONE_TOP_UP_RE.search(description_folded):
        return ForcedCategory.SUBSCRIPTIONS
    return None
