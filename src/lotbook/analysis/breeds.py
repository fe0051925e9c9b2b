"""
Breed composition of a lot.

Lots rarely carry a structured breakdown; mixed lots note it in free text,
e.g. "30 nelore 20 anelorada". This is a best-effort heuristic: every
"<count> <breed>" match is taken in order. When nothing matches, the lot's
single ``breed`` field (if set) stands in for all its animals, and the
result is tagged so callers can tell a parse from a guess.
"""

import re
from collections.abc import Iterable
from typing import Literal, TypedDict

from lotbook.core import settings
from lotbook.core.config import DEFAULT_BREED_KEYWORDS
from lotbook.data.models import Lot

BREED_KEYWORDS = DEFAULT_BREED_KEYWORDS

BREED_DISPLAY_NAMES = {
    "nelore": "Nelore",
    "anelorada": "Anelorada",
    "cruzamento-industrial": "Cruzamento Industrial",
}


class BreedCount(TypedDict):
    count: int
    breed: str


class BreedComposition(TypedDict):
    """Parsed pairs plus where they came from."""

    pairs: list[BreedCount]
    source: Literal["notes", "fallback", "none"]


def format_breed_name(breed: str) -> str:
    """Display name for a breed keyword."""
    return BREED_DISPLAY_NAMES.get(breed.lower(), breed)


def _breed_pattern(keywords: Iterable[str]) -> re.Pattern:
    # Longest first so a keyword that prefixes another cannot shadow it
    alternatives = "|".join(re.escape(k) for k in sorted(keywords, key=len, reverse=True))
    return re.compile(rf"(\d+)\s+({alternatives})", re.IGNORECASE)


def parse_breed_composition(
    notes: str | None,
    breed: str | None = None,
    number_of_animals: int = 0,
    keywords: Iterable[str] | None = None,
) -> BreedComposition:
    """
    Extract (count, breed) pairs from free-text notes.

    Args:
        notes: Lot notes (may be None or empty)
        breed: Structured breed field, used when the notes give nothing
        number_of_animals: Count attributed to ``breed`` on fallback
        keywords: Recognised breeds (default: settings.breed_keywords)

    Returns:
        BreedComposition tagged "notes", "fallback" or "none"
    """
    if keywords is None:
        keywords = settings.breed_keywords
    keywords = [k for k in keywords if k]

    pairs: list[BreedCount] = []
    if notes and keywords:
        for match in _breed_pattern(keywords).finditer(notes):
            pairs.append(BreedCount(count=int(match.group(1)), breed=match.group(2).lower()))

    if pairs:
        return BreedComposition(pairs=pairs, source="notes")

    if breed:
        return BreedComposition(
            pairs=[BreedCount(count=number_of_animals, breed=breed)],
            source="fallback",
        )

    return BreedComposition(pairs=[], source="none")


def lot_breed_composition(lot: Lot, keywords: Iterable[str] | None = None) -> BreedComposition:
    """Breed composition of a lot from its notes and breed field."""
    return parse_breed_composition(
        lot.notes,
        breed=lot.breed,
        number_of_animals=lot.number_of_animals,
        keywords=keywords,
    )
