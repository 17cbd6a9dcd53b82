"""Extractor registry keyed by detected bank format."""

from __future__ import annotations

from ..types import BankFormat
from .base import ExtractorRegistry, RawRow, StatementExtractor
from .generic import GenericExtractor
from .ing import INGExtractor
from .mbank import MBankExtractor
from .millennium import MillenniumExtractor
from .revolut import RevolutExtractor, RevolutPLExtractor
from .zen import ZenExtractor

REGISTRY = ExtractorRegistry(
    [
        MillenniumExtractor,
        MBankExtractor,
        RevolutExtractor,
        RevolutPLExtractor,
        INGExtractor,
        ZenExtractor,
    ],
    fallback=GenericExtractor,
)

__all__ = (
    "REGISTRY",
    "ExtractorRegistry",
    "GenericExtractor",
    "RawRow",
    "StatementExtractor",
    "get_extractor",
)


def get_extractor(bank_format: BankFormat) -> StatementExtractor:
    return REGISTRY.get(bank_format)
