"""Shared utilities for statement extractors."""

from __future__ import annotations

from .amounts import normalize_amount, parse_amount
from .dates import MONTHS, is_date_like, normalize_date
from .rows import iter_lines, split_row

__all__ = [
    "MONTHS",
    "is_date_like",
    "normalize_amount",
    "normalize_date",
    "parse_amount",
    "iter_lines",
    "split_row",
]
