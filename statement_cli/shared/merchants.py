"""Merchant normalization helpers shared across modules."""

from __future__ import annotations

import re
from functools import lru_cache

from .text import fold_text

UNKNOWN_MERCHANT = "Unknown"

LEGAL_SUFFIX_PATTERNS = (
    re.compile(
        r"\bsp[oó][lł]ka(?:\s+(?:akcyjna|jawna|komandytowa|cywilna|z\s*o\.?\s*o\.?))?(?!\w)",
        re.IGNORECASE,
    ),
    re.compile(r"\bsp\.?\s*z\s*o\.?\s*o\.?(?!\w)", re.IGNORECASE),
    re.compile(r"\bsp\.\s*[kj]\.?(?!\w)", re.IGNORECASE),
    re.compile(r"\bs\.?\s?a\.?$", re.IGNORECASE),
)
CARD_SUFFIX_RE = re.compile(r"\s+\*+\s?\d+$")
REFERENCE_TOKEN_RE = re.compile(
    r"\s+(?:\d{4,}|(?=[A-Za-z0-9]*\d)(?=[A-Za-z0-9]*[A-Za-z])[A-Za-z0-9]{5,16})$"
)
EDGE_PUNCTUATION_RE = re.compile(r"^[\s,;:\-]+|[\s,;:\-]+$")

# Keys are folded (lowercase, no diacritics); values are the display form.
CANONICAL_MERCHANTS: dict[str, str] = {
    # Streaming
    "spotify": "Spotify",
    "spotify ab": "Spotify",
    "spotify technology": "Spotify",
    "netflix": "Netflix",
    "netflix.com": "Netflix",
    "hbo": "HBO Max",
    "hbo max": "HBO Max",
    "disney": "Disney+",
    "disney+": "Disney+",
    # Transport
    "freenow": "FreeNow",
    "free now": "FreeNow",
    "bolt": "Bolt",
    "uber": "Uber",
    "uber eats": "Uber Eats",
    "uber *eats": "Uber Eats",
    "jakdojade": "Jakdojade",
    # Food delivery
    "glovo": "Glovo",
    "wolt": "Wolt",
    "pyszne": "Pyszne.pl",
    "pyszne.pl": "Pyszne.pl",
    # Fuel
    "orlen": "Orlen",
    "bp": "BP",
    "shell": "Shell",
    "circle k": "Circle K",
    # Groceries
    "biedronka": "Biedronka",
    "lidl": "Lidl",
    "zabka": "Żabka",
    "auchan": "Auchan",
    "carrefour": "Carrefour",
    "kaufland": "Kaufland",
    "stokrotka": "Stokrotka",
    "netto": "Netto",
    "dino": "Dino",
    # Fast food
    "mcdonalds": "McDonald's",
    "mcdonald's": "McDonald's",
    "kfc": "KFC",
    "burger king": "Burger King",
    "subway": "Subway",
    # Electronics
    "x-kom": "x-kom",
    "xkom": "x-kom",
    "media expert": "Media Expert",
    "mediaexpert": "Media Expert",
    "rtv euro agd": "RTV Euro AGD",
    "mediamarkt": "MediaMarkt",
    "media markt": "MediaMarkt",
    # Fashion
    "zalando": "Zalando",
    "hm": "H&M",
    "h&m": "H&M",
    "zara": "Zara",
    "reserved": "Reserved",
    # Online shopping
    "amazon": "Amazon",
    "allegro": "Allegro",
    "aliexpress": "AliExpress",
    # Pharmacies and drugstores
    "rossmann": "Rossmann",
    "hebe": "Hebe",
    "super-pharm": "Super-Pharm",
    "superpharm": "Super-Pharm",
    # Home improvement
    "ikea": "IKEA",
    "castorama": "Castorama",
    "leroy merlin": "Leroy Merlin",
    "obi": "OBI",
}


def collapse_whitespace(value: str) -> str:
    return " ".join((value or "").split())


def canonical_merchant(name: str) -> str | None:
    """Return the canonical chain name for ``name`` or ``None`` when unknown."""

    return CANONICAL_MERCHANTS.get(fold_text(name))


def capitalize_words(value: str) -> str:
    """Capitalize each space-separated word, leaving apostrophes alone."""

    return " ".join(_capitalize(word) for word in value.split(" ") if word)


def _capitalize(word: str) -> str:
    head = word[:1].upper()
    # "ß" uppercases to "SS"; keep such letters lowercase so the result is stable.
    if len(head) != 1:
        head = word[:1].lower()
    return head + word[1:].lower()


@lru_cache(maxsize=4096)
def normalize_merchant(raw: str) -> str:
    """Return a display-ready merchant name.

    Legal-entity suffixes, trailing transaction references and masked card
    numbers are removed until nothing more can be stripped, then the result is
    either mapped through :data:`CANONICAL_MERCHANTS` or capitalized word by
    word. Running the function on its own output returns the same string.
    """

    cleaned = collapse_whitespace(raw)
    previous = None
    while cleaned != previous:
        previous = cleaned
        for pattern in LEGAL_SUFFIX_PATTERNS:
            cleaned = pattern.sub(" ", cleaned)
        cleaned = CARD_SUFFIX_RE.sub("", cleaned)
        cleaned = REFERENCE_TOKEN_RE.sub("", cleaned)
        cleaned = collapse_whitespace(EDGE_PUNCTUATION_RE.sub("", cleaned))

    if not cleaned:
        return UNKNOWN_MERCHANT

    canonical = canonical_merchant(cleaned)
    if canonical is not None:
        return canonical
    return capitalize_words(cleaned)
